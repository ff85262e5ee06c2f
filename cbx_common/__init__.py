"""Shared helpers for checkbox-plus."""

from cbx_common.errors import (
    CBXError,
    ConfigurationError,
    PromptAbortedError,
    PromptStateError,
    PromptValidationError,
    SourceError,
)
from cbx_common.logging import configure_logging

__all__ = [
    "configure_logging",
    "CBXError",
    "ConfigurationError",
    "PromptAbortedError",
    "PromptStateError",
    "PromptValidationError",
    "SourceError",
]
