"""Structured logging for the formatting engine, built on telelog.

Public surface:

``configure(...)`` -- adopt a telelog config or one of the named presets
``get_logger(name)`` -- cached telelog logger bound to the active config
``record_event(name, ...)`` -- emit a structured ``event::<name>`` line
``span(name, ...)`` -- profile a block and tag it with a component name

Every knob reads a ``WIKITEXT_ENGINE_*`` environment variable:
``LOGGER``, ``LOG_LEVEL``, ``LOG_FILE``, ``LOG_JSON``, ``DISABLE_CONSOLE``,
``NO_COLOR``, ``LOG_BUFFERED`` and ``LOG_BUFFER_SIZE``.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, Optional, Tuple, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "WIKITEXT_ENGINE_"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(ENV_PREFIX + name, default)


def env_flag(name: str, default: bool) -> bool:
    """Read a ``WIKITEXT_ENGINE_<name>`` boolean toggle."""

    raw = _env(name)
    return default if raw is None else raw.strip().lower() in _TRUTHY


def _as_text(value: Any) -> str:
    if isinstance(value, (dict, list, tuple, set, frozenset)):
        return repr(value)
    return value if isinstance(value, str) else str(value)


@dataclass
class _TelemetryState:
    config: Optional[Any] = None
    loggers: Dict[str, Any] = field(default_factory=dict)

    def reset(self, config: Any) -> None:
        self.config = config
        self.loggers.clear()


_STATE = _TelemetryState()


def _console(config: Any, enabled: bool) -> None:
    config.with_console_output(enabled)
    if enabled:
        config.with_colored_output(not env_flag("NO_COLOR", False))


def _development_preset(config: Any) -> None:
    config.with_min_level("DEBUG")
    _console(config, True)
    config.with_json_format(False)


def _production_preset(config: Any) -> None:
    config.with_min_level("INFO")
    _console(config, False)
    config.with_file_output(_env("LOG_FILE") or "wikitext_engine.log")
    config.with_buffering(True)


def _quiet_preset(config: Any) -> None:
    config.with_min_level("WARNING")
    _console(config, False)


def _environment_preset(config: Any) -> None:
    config.with_min_level((_env("LOG_LEVEL") or "INFO").upper())
    _console(config, not env_flag("DISABLE_CONSOLE", False))
    if env_flag("LOG_JSON", False):
        config.with_json_format(True)
    log_file = _env("LOG_FILE")
    if log_file:
        config.with_file_output(log_file)
    if env_flag("LOG_BUFFERED", False):
        config.with_buffering(True)
        config.with_buffer_size(int(_env("LOG_BUFFER_SIZE") or "2048"))


_PRESETS: Dict[str, Callable[[Any], None]] = {
    "development": _development_preset,
    "production": _production_preset,
    "quiet": _quiet_preset,
}


def _build_config(preset: Callable[[Any], None]) -> Any:
    config = tl.Config()
    preset(config)
    # spans rely on telelog's profiler being on
    config.with_profiling(True)
    return config


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Replace the active telelog configuration.

    ``config`` and ``preset`` are mutually exclusive. Without either, the
    configuration is rebuilt from the environment. Cached loggers are
    dropped so the next ``get_logger`` picks up the change.
    """

    if config is not None and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")
    if preset:
        builder = _PRESETS.get(preset.strip().lower())
        if builder is None:
            raise ValueError(f"Unknown preset '{preset}'.")
        config = _build_config(builder)
    elif config is None:
        config = _build_config(_environment_preset)
    else:
        config.with_profiling(True)
    _STATE.reset(config)


def get_logger(name: Optional[str] = None) -> Any:
    logger_name = name or _env("LOGGER") or "wikitext_engine"
    cached = _STATE.loggers.get(logger_name)
    if cached is None:
        if _STATE.config is None:
            configure()
        cached = tl.Logger.with_config(logger_name, _STATE.config)
        _STATE.loggers[logger_name] = cached
    return cached


def _resolve_level(logger: Any, level: str) -> Tuple[Any, bool]:
    """Prefer telelog's ``<level>_with`` variant, which takes key/value pairs."""

    name = level.lower()
    method = getattr(logger, f"{name}_with", None)
    if method is not None:
        return method, True
    method = getattr(logger, name, None)
    if method is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    return method, False


def _emit(logger: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    method, structured = _resolve_level(logger, level)
    if structured:
        method(message, [(str(key), _as_text(value)) for key, value in payload.items()])
    else:
        method(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit ``event::<name>`` with ``data`` attached as key/value pairs."""

    _emit(get_logger(logger_name), level, f"event::{name}", {"event": name, **(data or {})})


@dataclass
class SpanHandle:
    """Yielded by ``span``; collects outcome metadata for the block."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _as_text(value)

    def _report(self, level: str, message: str, reason: str) -> None:
        payload: Dict[str, Any] = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        payload["reason"] = reason
        _emit(self.logger, level, message, payload)

    def fail(self, reason: str) -> None:
        self._report("error", "span::fail", reason)

    def skip(self, reason: str) -> None:
        """Note a recoverable early exit (no-op gesture, fallback path)."""

        self._report("debug", "span::skip", reason)


@contextmanager
def _logger_context(log: Any, values: Dict[str, str]) -> Iterator[None]:
    for key, value in values.items():
        log.add_context(key, value)
    try:
        yield
    finally:
        for key in values:
            log.remove_context(key)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block and optionally track it as a telelog component.

    ``component=True`` reuses ``name`` as the component identifier; a string
    names the component explicitly. ``metadata`` is pushed as logger context
    for the duration of the block.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else (component or None)
    context = {key: _as_text(value) for key, value in (metadata or {}).items()}
    handle = SpanHandle(
        logger=log,
        span_name=name,
        component_name=component_name,
        metadata=dict(context),
    )

    with ExitStack() as stack:
        stack.enter_context(_logger_context(log, context))
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise


configure()
logger = get_logger()

__all__ = [
    "ENV_PREFIX",
    "SpanHandle",
    "configure",
    "env_flag",
    "get_logger",
    "logger",
    "record_event",
    "span",
]
