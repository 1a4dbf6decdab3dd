"""
Valentine Logging System

Consistent, dependency-free logging for the app shell and the games.
Supports a global level plus per-module overrides, loggers bound to a
context (usually a session tag) and an optional clock that stamps every
line with scheduler time.

Usage:
    from valentine.logging import get_logger

    log = get_logger('heart_catch')
    log.debug("Spawned %s at x=%.1f", kind, x)

    session_log = log.bind('session-3')
    session_log.info("playing")     # [heart_catch:session-3] INFO: playing

    set_clock(lambda: scheduler.now)
    session_log.info("won")         # [heart_catch:session-3] INFO t=41.20: won

Configuration:
    Environment variables:
        VALENTINE_LOG_LEVEL=DEBUG          # Global default level
        VALENTINE_LOG_HEART_CATCH=TRACE    # Module-specific level
        VALENTINE_LOG_SCHEDULER=WARNING

    Or programmatically:
        from valentine.logging import configure_logging
        configure_logging(level='DEBUG', modules={'scheduler': 'INFO'})

A bound logger shares its module's level; contexts are for reading
output, not for filtering it.
"""

import os
import traceback
from enum import IntEnum
from functools import lru_cache
from typing import Callable, Dict, Optional

Clock = Callable[[], float]


class LogLevel(IntEnum):
    """Log levels matching Python's logging module."""
    TRACE = 5      # Even more verbose than DEBUG
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    OFF = 100      # Disable logging


ENV_PREFIX = 'VALENTINE_LOG_'
ENV_LEVEL = 'VALENTINE_LOG_LEVEL'

# Short labels printed for each level
_LABELS = {
    LogLevel.TRACE: 'TRACE',
    LogLevel.DEBUG: 'DEBUG',
    LogLevel.INFO: 'INFO',
    LogLevel.WARNING: 'WARN',
    LogLevel.ERROR: 'ERROR',
    LogLevel.CRITICAL: 'CRIT',
}

_config: Dict = {
    'default_level': LogLevel.INFO,
    'module_levels': {},
    'clock': None,
}


def _level_from_string(level_str: str) -> LogLevel:
    """Parse a level name; unknown names fall back to INFO."""
    name = level_str.strip().upper()
    if name == 'WARN':
        name = 'WARNING'
    return LogLevel.__members__.get(name, LogLevel.INFO)


def _module_key(module: str) -> str:
    return module.lower().replace('.', '_').replace('/', '_')


def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
) -> None:
    """
    Configure the logging system.

    Args:
        level: Default log level for all modules
        modules: Dict of module_name -> level for per-module configuration
    """
    _config['default_level'] = _level_from_string(level)

    for mod, mod_level in (modules or {}).items():
        _config['module_levels'][_module_key(mod)] = _level_from_string(mod_level)


def set_clock(clock: Optional[Clock]) -> None:
    """Stamp every line with ``clock()`` seconds; None removes the stamp."""
    _config['clock'] = clock


def _load_env_config() -> None:
    """Load configuration from environment variables.

    VALENTINE_LOG_LEVEL sets the global level, any other
    VALENTINE_LOG_<MODULE> sets the level for that module.
    """
    if ENV_LEVEL in os.environ:
        _config['default_level'] = _level_from_string(os.environ[ENV_LEVEL])

    for key, value in os.environ.items():
        if key.startswith(ENV_PREFIX) and key != ENV_LEVEL:
            _config['module_levels'][_module_key(key[len(ENV_PREFIX):])] = _level_from_string(value)


# Load env config on import
_load_env_config()


class ValentineLogger:
    """
    Logger for a module, optionally bound to a context such as a session tag.
    """

    def __init__(self, module: str, context: Optional[str] = None):
        self.module = module
        self.context = context
        self._module_key = _module_key(module)

    @property
    def level(self) -> LogLevel:
        """Get effective log level for this module."""
        return _config['module_levels'].get(self._module_key, _config['default_level'])

    def is_enabled_for(self, level: LogLevel) -> bool:
        """Check if message at given level would be logged."""
        return level >= self.level

    def bind(self, context: str) -> 'ValentineLogger':
        """Logger for the same module whose lines carry ``context``."""
        if self.context:
            context = f"{self.context}/{context}"
        return ValentineLogger(self.module, context)

    def _prefix(self, label: str) -> str:
        name = f"{self.module}:{self.context}" if self.context else self.module
        clock = _config['clock']
        stamp = f" t={clock():.2f}" if clock is not None else ''
        return f"[{name}] {label}{stamp}"

    def _log(self, level: LogLevel, msg: str, *args, label: Optional[str] = None) -> None:
        if not self.is_enabled_for(level):
            return

        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"

        print(f"{self._prefix(label or _LABELS[level])}: {msg}")

    def trace(self, msg: str, *args) -> None:
        """Log at TRACE level (very verbose)."""
        self._log(LogLevel.TRACE, msg, *args)

    def debug(self, msg: str, *args) -> None:
        self._log(LogLevel.DEBUG, msg, *args)

    def info(self, msg: str, *args) -> None:
        self._log(LogLevel.INFO, msg, *args)

    def warning(self, msg: str, *args) -> None:
        self._log(LogLevel.WARNING, msg, *args)

    warn = warning

    def error(self, msg: str, *args) -> None:
        self._log(LogLevel.ERROR, msg, *args)

    def critical(self, msg: str, *args) -> None:
        self._log(LogLevel.CRITICAL, msg, *args)

    def exception(self, msg: str, *args, exc_info: bool = True) -> None:
        """
        Log an error, followed by the traceback of the exception being handled.

        Args:
            msg: Message describing what failed
            exc_info: If True, include current exception traceback
        """
        self._log(LogLevel.ERROR, msg, *args)
        if not exc_info:
            return

        tb = traceback.format_exc().strip()
        if tb and tb != 'NoneType: None':
            for line in tb.splitlines():
                self._log(LogLevel.ERROR, line, label='TRACE')


@lru_cache(maxsize=64)
def get_logger(module: str) -> ValentineLogger:
    """
    Get a logger for the specified module.

    Loggers are cached, so calling get_logger('foo') multiple times
    returns the same logger instance.

    Args:
        module: Module name (e.g., 'app', 'heart_catch', 'scheduler')

    Returns:
        ValentineLogger instance for the module
    """
    return ValentineLogger(module)


def disable_logging() -> None:
    """Disable all logging."""
    _config['default_level'] = LogLevel.OFF
    _config['module_levels'].clear()
