"""Validation gate wrapping a caller validator with min/max count checks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Sequence

from cbx_common.errors import PromptValidationError, wrap_error
from cbx_ui.tui.system.options import CheckboxPlusOptions, Criteria

INVALID_SELECTION_MESSAGE = "Invalid selection"

Validator = Callable[[list[Any]], Any]


def decompose_criteria(
    criteria: Criteria, default_message: Callable[[int], str]
) -> tuple[int | None, str]:
    """Split a bound into ``(count, message)``, synthesizing the message."""
    if isinstance(criteria, tuple):
        return criteria
    if criteria is None:
        return None, ""
    return criteria, default_message(criteria)


@dataclass(frozen=True)
class ValidationGate:
    minimum: int | None
    minimum_message: str
    maximum: int | None
    maximum_message: str
    validator: Validator | None = None

    @classmethod
    def from_options(cls, options: CheckboxPlusOptions) -> "ValidationGate":
        minimum, minimum_message = decompose_criteria(
            options.minimum_choices,
            lambda n: f"You have to check at least {n} choice(s)",
        )
        maximum, maximum_message = decompose_criteria(
            options.maximum_choices,
            lambda n: f"You have to check at most {n} choice(s)",
        )
        return cls(
            minimum=minimum,
            minimum_message=minimum_message,
            maximum=maximum,
            maximum_message=maximum_message,
            validator=options.validator,
        )

    def validate(self, values: Sequence[Any]) -> bool | str:
        """Return True, or the message explaining why ``values`` is rejected.

        Order is fixed: minimum, maximum, then the caller's validator. A bound
        of 0 or None is no bound.
        """
        if self.minimum and len(values) < self.minimum:
            return self.minimum_message
        if self.maximum and len(values) > self.maximum:
            return self.maximum_message
        if self.validator is None:
            return True

        try:
            outcome = self.validator(list(values))
        except Exception as exc:
            raise wrap_error(
                PromptValidationError,
                f"Validator failed: {exc}",
                context={"values": list(values)},
                cause=exc,
            ) from exc
        if outcome is True:
            return True
        if isinstance(outcome, str) and outcome:
            return outcome
        return INVALID_SELECTION_MESSAGE
