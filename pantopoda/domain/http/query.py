"""
Query string and header encoding for outbound requests.

Values are written verbatim: no percent-encoding is applied to keys or
values, so callers must pass wire-safe text.
"""

from typing import Iterable, Mapping, MutableMapping

RequestHeaders = dict[str, str]

ARRAY_SUFFIX = "[]"


class QueryParams(dict[str, list[str]]):
    """Mapping of query keys to their ordered values.

    Values of one key keep the order the caller gave them. The order in
    which keys are written to the query string is not part of the contract.
    """

    def add(self, key: str, value: str) -> None:
        """Append ``value`` to the values of ``key``."""
        self.setdefault(key, []).append(value)

    def empty(self) -> bool:
        """Return True when no key is set.

        A key mapped to an empty list still counts, even though
        ``to_string`` writes nothing for it.
        """
        return len(self) == 0

    def to_string(self) -> str:
        """Encode as ``key=value`` tokens joined by ``&``.

        A key holding more than one value is written once per value with
        the ``key[]=value`` form. Keys with no values are skipped.
        """
        tokens: list[str] = []
        for key, values in self.items():
            if len(values) > 1:
                tokens.extend(f"{key}{ARRAY_SUFFIX}={value}" for value in values)
            else:
                tokens.extend(f"{key}={value}" for value in values)
        return "&".join(tokens)

    @classmethod
    def parse(cls, text: str) -> "QueryParams":
        """Rebuild a QueryParams from the output of ``to_string``.

        ``a[]=1`` and ``a=1`` both parse to ``{"a": ["1"]}``: a key that was
        given a single-element list comes back the same as a plain value.
        """
        query = cls()
        for token in text.lstrip("?").split("&"):
            if not token:
                continue
            key, _, value = token.partition("=")
            if key.endswith(ARRAY_SUFFIX):
                key = key[: -len(ARRAY_SUFFIX)]
            query.add(key, value)
        return query

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> "QueryParams":
        """Build from ``(key, value)`` pairs, grouping repeated keys."""
        query = cls()
        for key, value in pairs:
            query.add(key, value)
        return query

    def __str__(self) -> str:
        return self.to_string()


def apply_headers(headers: Mapping[str, str], target: MutableMapping[str, str]) -> None:
    """Set every header on ``target``, replacing any existing value."""
    for name, value in headers.items():
        target[name] = value
