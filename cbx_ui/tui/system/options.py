"""Caller-facing configuration for the checkbox-plus prompt."""

from __future__ import annotations

import os
from typing import Any, Callable, Mapping

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from cbx_common.config.env import parse_positive_int_env
from cbx_common.errors import ConfigurationError

DEFAULT_PAGE_SIZE = 7

Criteria = int | tuple[int, str] | None


class CheckboxPlusOptions(BaseModel):
    """Options for one checkbox-plus question.

    ``source`` is either a callable ``(answers, query) -> choices`` (plain or
    returning an awaitable) or, when ``searchable`` is off, a static list.
    Both snake_case names and the camelCase names used by question dicts are
    accepted.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="ignore")

    name: str | None = None
    message: str = ""
    source: Any = None
    searchable: bool = False
    highlight: bool = False
    default: list[Any] | None = None
    minimum_choices: Criteria = Field(
        default=None, validation_alias=AliasChoices("minimum_choices", "minimumChoices")
    )
    maximum_choices: Criteria = Field(
        default=None, validation_alias=AliasChoices("maximum_choices", "maximumChoices")
    )
    validator: Callable[[list[Any]], Any] | None = Field(
        default=None, validation_alias=AliasChoices("validator", "validate")
    )
    page_size: int | None = Field(
        default=None, validation_alias=AliasChoices("page_size", "pageSize")
    )

    @field_validator("default", mode="before")
    @classmethod
    def _wrap_scalar_default(cls, value: Any) -> Any:
        if value is None or isinstance(value, (list, tuple)):
            return value
        return [value]

    @field_validator("minimum_choices", "maximum_choices")
    @classmethod
    def _non_negative_bound(cls, value: Criteria) -> Criteria:
        bound = value[0] if isinstance(value, tuple) else value
        if bound is not None and bound < 0:
            raise ValueError("choice bounds must be >= 0")
        return value

    @field_validator("page_size")
    @classmethod
    def _positive_page_size(cls, value: int | None) -> int | None:
        if value is not None and value <= 0:
            raise ValueError("page_size must be positive")
        return value

    @model_validator(mode="after")
    def _check_source(self) -> "CheckboxPlusOptions":
        if self.source is None:
            raise ValueError("You must provide a `source` parameter")
        if self.searchable and not callable(self.source):
            raise ValueError(
                "To be searchable, the source must be a function returning the choices"
            )
        return self

    @property
    def resolved_page_size(self) -> int:
        """Explicit value, then ``CBX_PAGE_SIZE``, then the default."""
        if self.page_size is not None:
            return self.page_size
        return parse_positive_int_env(os.environ.get("CBX_PAGE_SIZE")) or DEFAULT_PAGE_SIZE

    @classmethod
    def from_mapping(cls, question: Mapping[str, Any]) -> "CheckboxPlusOptions":
        try:
            return cls.model_validate(dict(question))
        except ValidationError as exc:
            raise ConfigurationError(
                _first_error_message(exc),
                context={"question": question.get("name"), "errors": exc.error_count()},
                cause=exc,
            ) from exc

    @classmethod
    def build(cls, **kwargs: Any) -> "CheckboxPlusOptions":
        return cls.from_mapping(kwargs)


def _first_error_message(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    first = errors[0]
    message = str(first.get("msg", exc))
    # pydantic prefixes messages raised from validators
    return message.removeprefix("Value error, ")
