"""
Identifier case conversion.

Field and status names arrive as CamelCase (``UserName``, ``IMUsed``)
or snake_case; error bags and lookup tables key on snake_case.
"""

import re

_WORD_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def to_snake(name: str) -> str:
    """Convert ``UserName`` / ``userName`` / ``HTTPCode`` to snake_case.

    Names that are already snake_case are returned unchanged.
    """
    return _WORD_BOUNDARY.sub("_", name.strip()).replace("-", "_").lower()
