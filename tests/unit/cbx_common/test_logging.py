import logging

import pytest

from cbx_common.logging import configure_logging

pytestmark = pytest.mark.unit_common


@pytest.fixture(autouse=True)
def restore_root_logger(monkeypatch: pytest.MonkeyPatch):
    for name in ("CBX_LOG_LEVEL", "CBX_LOG_JSON", "CBX_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_default_level_is_warning() -> None:
    configure_logging(force=True)

    assert logging.getLogger().level == logging.WARNING


def test_debug_flag_wins_over_level() -> None:
    configure_logging(level="ERROR", debug=True, force=True)

    assert logging.getLogger().level == logging.DEBUG


def test_env_level_and_file(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    log_file = tmp_path / "cbx.log"
    monkeypatch.setenv("CBX_LOG_LEVEL", "info")
    monkeypatch.setenv("CBX_LOG_FILE", str(log_file))

    configure_logging(force=True)
    logging.getLogger("cbx_ui.test").info("fetched %d choices", 3)
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert logging.getLogger().level == logging.INFO
    assert "fetched 3 choices" in log_file.read_text()


def test_existing_handlers_are_kept_without_force() -> None:
    root = logging.getLogger()
    marker = logging.NullHandler()
    root.addHandler(marker)

    configure_logging(level="DEBUG")

    assert marker in root.handlers
