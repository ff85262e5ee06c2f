from pathlib import Path

import pytest

from cbx_common.errors import (
    CBXError,
    ConfigurationError,
    SourceError,
    error_to_payload,
    normalize_context,
    wrap_error,
)

pytestmark = pytest.mark.unit_common


def test_context_is_normalized_to_plain_values() -> None:
    context = normalize_context(
        {"path": Path("/tmp/choices.yaml"), "nested": {"items": (1, "a", None)}}
    )

    assert context == {"path": "/tmp/choices.yaml", "nested": {"items": [1, "a", None]}}


def test_wrap_error_keeps_type_and_cause() -> None:
    cause = TimeoutError("slow backend")

    err = wrap_error(SourceError, "Source failed", context={"query": "re"}, cause=cause)

    assert isinstance(err, SourceError)
    assert isinstance(err, CBXError)
    assert err.__cause__ is cause
    assert err.error_type == "SourceError"
    assert err.context == {"query": "re"}


def test_error_to_payload() -> None:
    payload = error_to_payload(ConfigurationError("bad option"))

    assert payload == {
        "error_type": "ConfigurationError",
        "error": "bad option",
        "error_context": {},
    }
