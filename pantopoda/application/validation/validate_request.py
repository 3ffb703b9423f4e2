"""
Use case: Validate a typed request object.

Input: any request object (usually a BaseRequest model)
Output: ValidationError (falsy when the object is valid)
Side effects: None.
Failure cases: reported in the returned value, never raised.
"""

import logging

from pantopoda.domain.validation.errors import NotValidatableError
from pantopoda.domain.validation.model import ErrorBag, ValidationError
from pantopoda.domain.validation.ports import RuleEngine, Translator
from pantopoda.shared.naming import to_snake

logger = logging.getLogger(__name__)

ROOT_FIELD = "__root__"


class RequestValidator:
    """Runs declared field rules and folds the failures into an ErrorBag.

    The rule engine and translator are injected; their lifetime belongs
    to the composition root.
    """

    def __init__(self, rule_engine: RuleEngine, translator: Translator) -> None:
        self._rule_engine = rule_engine
        self._translator = translator

    def validate(self, target: object) -> ValidationError:
        """Validate ``target``.

        Args:
            target: The request object to check.

        Returns:
            A BAD_REQUEST error if the object cannot be evaluated, a
            RULE_VIOLATION error with one bag entry per failed field, or
            the empty ValidationError when every rule passes.
        """
        try:
            failures = self._rule_engine.check(target)
        except NotValidatableError:
            logger.debug("Rejected unvalidatable %s", type(target).__name__)
            return ValidationError.bad_request()

        if not failures:
            return ValidationError()

        error_bag = ErrorBag()
        for failure in failures:
            error_bag.append(
                to_snake(failure.field) or ROOT_FIELD,
                self._translator.translate(target, failure),
            )

        logger.debug(
            "Validation of %s failed on %d field(s)", type(target).__name__, len(error_bag)
        )
        return ValidationError.rule_violation(error_bag)
