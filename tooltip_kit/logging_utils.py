from __future__ import annotations

import logging
import os
import tempfile
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOGGER_NAME = "TooltipKit"
PLACEMENT_LOGGER_NAME = f"{LOGGER_NAME}.Placement"
QT_LOGGER_NAME = f"{LOGGER_NAME}.Qt"
CLI_LOGGER_NAME = f"{LOGGER_NAME}.Cli"
LOG_DIR_ENV_VAR = "TOOLTIP_KIT_LOG_DIR"
LOG_FILENAME = "tooltip-kit.log"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def resolve_logs_dir(base_path: Path, log_dir_name: str = "TooltipKit") -> Path:
    """
    Resolve the directory to store tooltip logs.

    Strategy:
    - Use TOOLTIP_KIT_LOG_DIR if set.
    - Fall back to XDG state/cache locations, then `<base_path>/logs/<log_dir_name>`.
    - Final fallback: tempdir/<log_dir_name>.
    """
    candidates = []

    env_override = os.environ.get(LOG_DIR_ENV_VAR)
    if env_override:
        candidates.append(Path(env_override).expanduser())

    state_home = Path(os.environ.get("XDG_STATE_HOME", Path.home() / ".local" / "state"))
    cache_home = Path(os.environ.get("XDG_CACHE_HOME", Path.home() / ".cache"))
    candidates.append(state_home / "tooltip-kit" / "logs")
    candidates.append(cache_home / "tooltip-kit" / "logs")
    candidates.append(base_path.resolve() / "logs")

    for base in candidates:
        try:
            target = base / log_dir_name
            target.mkdir(parents=True, exist_ok=True)
            return target
        except OSError:
            continue

    temp_fallback = Path(tempfile.gettempdir()) / log_dir_name
    temp_fallback.mkdir(parents=True, exist_ok=True)
    return temp_fallback


def build_rotating_file_handler(
    log_dir: Path,
    filename: str = LOG_FILENAME,
    *,
    retention: int = 5,
    max_bytes: int = 512 * 1024,
    formatter: Optional[logging.Formatter] = None,
) -> logging.Handler:
    """Rotating handler for tooltip-kit.log; keeps ``retention`` files in total."""
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_dir / filename,
        maxBytes=max_bytes,
        backupCount=max(0, max(1, retention) - 1),
        encoding="utf-8",
    )
    handler.setFormatter(formatter if formatter is not None else logging.Formatter(LOG_FORMAT))
    return handler


def resolve_log_level(debug_enabled: bool) -> int:
    """DEBUG when tooltip debugging is on (settings or TOOLTIP_KIT_DEBUG), INFO otherwise."""
    return logging.DEBUG if debug_enabled else logging.INFO


def configure_logging(
    debug_enabled: bool,
    *,
    log_dir: Optional[Path] = None,
    retention: int = 5,
) -> logging.Logger:
    """Attach console (and optionally file) handlers to the TooltipKit logger.

    Meant for host applications and the CLI; library modules only ever call
    ``logging.getLogger``. Calling it again replaces the handlers it added.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolve_log_level(debug_enabled))
    for handler in list(logger.handlers):
        if getattr(handler, "_tooltip_kit_owned", False):
            logger.removeHandler(handler)
            handler.close()
    formatter = logging.Formatter(LOG_FORMAT)
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    handlers: list[logging.Handler] = [stream_handler]
    if log_dir is not None:
        handlers.append(build_rotating_file_handler(log_dir, retention=retention, formatter=formatter))
    for handler in handlers:
        handler._tooltip_kit_owned = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
