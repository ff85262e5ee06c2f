"""Typed failures raised by checkbox-plus prompts and their hosts."""

from __future__ import annotations

from typing import Any, Mapping, TypeVar


def _plain(value: Any) -> Any:
    if isinstance(value, Mapping):
        return normalize_context(value)
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return str(value)


def normalize_context(context: Mapping[str, Any]) -> dict[str, Any]:
    """Copy ``context`` with every leaf turned into a JSON-friendly value."""
    return {str(key): _plain(val) for key, val in context.items()}


class CBXError(Exception):
    """Base of every error a prompt run can end with.

    ``context`` carries the details a caller may want to print or serialize
    (the query, the rejected values, ...); ``cause`` becomes ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.context = normalize_context(context or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def error_type(self) -> str:
        return type(self).__name__


class ConfigurationError(CBXError):
    """Question options are missing or invalid."""


class SourceError(CBXError):
    """The current source fetch failed; the prompt cannot go on."""


class PromptAbortedError(CBXError):
    """The user cancelled the prompt."""


class PromptValidationError(CBXError):
    """A selection could not be validated: unattended rejection or a broken validator."""


class PromptStateError(CBXError):
    """The prompt was asked for something its status does not allow."""


E = TypeVar("E", bound=CBXError)


def wrap_error(
    error_cls: type[E],
    message: str,
    *,
    context: Mapping[str, Any] | None = None,
    cause: Exception | None = None,
) -> E:
    """Build ``error_cls`` around a foreign exception, keeping it as the cause."""
    return error_cls(message, context=context, cause=cause)


def error_to_payload(error: CBXError) -> dict[str, Any]:
    """Flat mapping for machine-readable output (``--json``)."""
    return {
        "error_type": error.error_type,
        "error": str(error),
        "error_context": error.context,
    }
