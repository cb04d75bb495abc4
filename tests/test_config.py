import pytest

from wikitext_engine.buffer import BufferValidationError
from wikitext_engine.config import EngineSettings
from wikitext_engine.formatting import FormattingAction
from wikitext_engine.runtime import telemetry
from wikitext_engine.session import EditorSession


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WIKITEXT_ENGINE_PROBE_NEIGHBORS", "off")
    monkeypatch.setenv("WIKITEXT_ENGINE_STRICT_SELECTION", "yes")
    monkeypatch.setenv("WIKITEXT_ENGINE_LOG_PRESET", " Quiet ")

    settings = EngineSettings.from_env()

    assert settings == EngineSettings(
        probe_neighbors=False, strict_selection=True, log_preset="quiet"
    )


def test_settings_defaults_without_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("PROBE_NEIGHBORS", "STRICT_SELECTION", "LOG_PRESET"):
        monkeypatch.delenv(f"WIKITEXT_ENGINE_{name}", raising=False)

    assert EngineSettings.from_env() == EngineSettings()


def test_env_flag_parsing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WIKITEXT_ENGINE_SAMPLE", "1")
    assert telemetry.env_flag("SAMPLE", False)

    monkeypatch.setenv("WIKITEXT_ENGINE_SAMPLE", "nope")
    assert not telemetry.env_flag("SAMPLE", True)


def test_unknown_log_preset_rejected() -> None:
    with pytest.raises(ValueError):
        EngineSettings(log_preset="chatty").apply_logging()


def test_without_probe_cursor_reads_as_plain() -> None:
    session = EditorSession.from_text(
        "a '''b''' c", settings=EngineSettings(probe_neighbors=False)
    )
    session.select(5, 5)

    result = session.apply(FormattingAction.BOLD)

    assert result.status == "added"
    assert session.buffer.text == "a " + "'" * 9 + "b''' c"


def test_strict_selection_raises() -> None:
    session = EditorSession.from_text("abc", settings=EngineSettings(strict_selection=True))

    with pytest.raises(BufferValidationError):
        session.select(0, 10)
