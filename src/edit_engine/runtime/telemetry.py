"""Logging and profiling for the editing core, built on telelog.

Everything else in the package talks to telelog through this module:

``configure(...)`` -- adopt an explicit config or one of the named profiles
``get_logger(name)`` -- cached logger per component (``edit_engine.session``...)
``record_event(name, ...)`` -- structured one-off events
``span(name, ...)`` -- profile a block (one edit, one scan) with context keys

Scans and edits run once per keystroke, so every built-in profile except
``development`` keeps output off the console.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterator, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "EDIT_ENGINE_"
DEFAULT_LOGGER_NAME = os.getenv(f"{ENV_PREFIX}LOGGER", "edit_engine")

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None


def env_value(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def env_flag(name: str, default: bool) -> bool:
    raw = env_value(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class LogProfile:
    """Declarative telelog settings; profiling is always switched on."""

    min_level: str = "INFO"
    console: bool = True
    colored: bool = True
    json: bool = False
    log_file: Optional[str] = None
    buffer_size: Optional[int] = None

    @classmethod
    def from_env(cls) -> "LogProfile":
        """Profile described by ``EDIT_ENGINE_LOG_*`` and related variables."""

        buffer_size = None
        if env_flag("LOG_BUFFERED", False):
            buffer_size = int(env_value("LOG_BUFFER_SIZE") or "2048")
        return cls(
            min_level=(env_value("LOG_LEVEL") or "INFO").upper(),
            console=not env_flag("DISABLE_CONSOLE", False),
            colored=not env_flag("NO_COLOR", False),
            json=env_flag("LOG_JSON", False),
            log_file=env_value("LOG_FILE") or None,
            buffer_size=buffer_size,
        )

    def build(self) -> Any:
        config = tl.Config()
        config.with_min_level(self.min_level)
        config.with_console_output(self.console)
        if self.console:
            config.with_colored_output(self.colored)
        config.with_json_format(self.json)
        if self.log_file:
            config.with_file_output(self.log_file)
        if self.buffer_size:
            config.with_buffering(True)
            config.with_buffer_size(self.buffer_size)
        config.with_profiling(True)
        return config


PROFILES: Dict[str, LogProfile] = {
    "development": LogProfile(min_level="DEBUG"),
    "production": LogProfile(
        console=False, log_file="edit_engine.log", buffer_size=2048
    ),
    "performance": LogProfile(
        min_level="DEBUG",
        console=False,
        json=True,
        log_file="edit_engine-performance.log",
        buffer_size=2048,
    ),
}
PRESETS = tuple(PROFILES)


def _profile_for(preset: str) -> LogProfile:
    try:
        profile = PROFILES[preset.strip().lower()]
    except KeyError as exc:
        raise ValueError(
            f"Unknown preset '{preset}'. Expected one of {PRESETS}."
        ) from exc
    log_file = env_value("LOG_FILE")
    if log_file and profile.log_file:
        profile = replace(profile, log_file=log_file)
    return profile


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Replace the active telelog configuration.

    Parameters
    ----------
    config:
        Explicit ``telelog.Config`` instance to adopt.
    preset:
        A key of :data:`PROFILES`. Mutually exclusive with ``config``. With
        neither, the configuration is rebuilt from ``EDIT_ENGINE_*``
        environment variables.
    """

    global _ACTIVE_CONFIG
    if config and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    if preset:
        config = _profile_for(preset).build()
    elif config is None:
        config = LogProfile.from_env().build()
    else:
        config.with_profiling(True)

    _ACTIVE_CONFIG = config
    _LOGGER_CACHE.clear()


def get_logger(name: Optional[str] = None) -> Any:
    """Return the cached ``telelog.Logger`` for ``name``."""

    global _ACTIVE_CONFIG
    if _ACTIVE_CONFIG is None:
        _ACTIVE_CONFIG = LogProfile.from_env().build()
    logger_name = name or DEFAULT_LOGGER_NAME
    logger = _LOGGER_CACHE.get(logger_name)
    if logger is None:
        logger = tl.Logger.with_config(logger_name, _ACTIVE_CONFIG)
        _LOGGER_CACHE[logger_name] = logger
    return logger


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


def _emit(logger: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    """Log ``message`` with ``payload`` as key/value data where telelog allows."""

    name = str(level).lower()
    with_data = getattr(logger, f"{name}_with", None)
    if with_data is not None:
        with_data(message, [(str(k), _stringify(v)) for k, v in payload.items()])
        return
    plain = getattr(logger, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit ``event::<name>`` with ``data`` attached."""

    payload = {"event": name, **(data or {})}
    _emit(get_logger(logger_name), level, f"event::{name}", payload)


@dataclass
class SpanHandle:
    """Yielded by ``span`` so the block can attach results (counts, sizes)."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def fail(self, reason: str) -> None:
        payload: Dict[str, Any] = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        payload["reason"] = reason
        _emit(self.logger, "error", "span::fail", payload)


def _component_name(name: str, component: Optional[str | bool]) -> Optional[str]:
    if component is True:
        return name
    if isinstance(component, str):
        return component
    return None


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block and optionally track it as a component.

    ``component=True`` reuses ``name`` as the component id; a string names the
    component explicitly. ``metadata`` is pushed as logger context for the
    duration of the block. An exception escaping the block is logged through
    :meth:`SpanHandle.fail` and re-raised.
    """

    log = get_logger(logger_name)
    handle = SpanHandle(
        logger=log,
        span_name=name,
        component_name=_component_name(name, component),
        metadata={key: _stringify(value) for key, value in (metadata or {}).items()},
    )

    with ExitStack() as stack:
        for key, value in handle.metadata.items():
            log.add_context(key, value)
            stack.callback(log.remove_context, key)
        if handle.component_name:
            stack.enter_context(log.track_component(handle.component_name))
        stack.enter_context(log.profile(name))

        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise


configure()

__all__ = [
    "LogProfile",
    "PRESETS",
    "PROFILES",
    "SpanHandle",
    "configure",
    "env_flag",
    "env_value",
    "get_logger",
    "record_event",
    "span",
]
