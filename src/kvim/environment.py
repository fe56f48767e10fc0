"""Child environment composition for the editor process."""

import logging
from collections.abc import Callable, Mapping
from datetime import datetime
from pathlib import Path

from kvim.constants import (
    ARGS_SEPARATOR,
    DEBUG_TIMESTAMP_FORMAT,
    ENV_ARGS,
    ENV_DATA_DIR,
    ENV_DEBUG_OUT,
    ENV_KVIM_CONF,
    ENV_MODE,
    ENV_NO_SESSION,
    ENV_RESTART,
    ENV_STATE_DIR,
)
from kvim.errors import LaunchFilesystemError, ModeConflictError
from kvim.models import LaunchConfig, ProfileDirs

log = logging.getLogger(__name__)


def debug_output_path(
    debug_dir: Path, debug_file: str | None, now: Callable[[], datetime] = datetime.now
) -> Path:
    """Return the debug log path: the override name, or a per-second timestamp."""
    if debug_file:
        return debug_dir / debug_file
    return debug_dir / now().strftime(DEBUG_TIMESTAMP_FORMAT)


def ensure_directory(path: Path) -> None:
    """Create ``path`` and its parents. Any failure is fatal."""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise LaunchFilesystemError(f"failed to create directory {path}: {e}") from e


def compose_overlay(
    config: LaunchConfig,
    dirs: ProfileDirs,
    now: Callable[[], datetime] = datetime.now,
) -> dict[str, str]:
    """Return the launcher variables to layer over the inherited environment."""
    if config.git and config.git_diff:
        raise ModeConflictError()

    overlay: dict[str, str] = {}
    overlay[ENV_KVIM_CONF] = str(config.kvim_conf)
    overlay[ENV_DATA_DIR] = str(dirs.data_dir)

    if config.override_state and dirs.state_dir is not None:
        overlay[ENV_STATE_DIR] = str(dirs.state_dir)

    if config.debug:
        overlay[ENV_DEBUG_OUT] = str(debug_output_path(config.debug_dir, config.debug_file, now))
        ensure_directory(config.debug_dir)

    mode = config.mode
    if mode is not None:
        overlay[ENV_NO_SESSION] = "1"
        overlay[ENV_MODE] = mode
        overlay[ENV_ARGS] = ARGS_SEPARATOR.join(config.args)

    log.debug("overlay=%s", overlay)
    return overlay


def compose_environment(overlay: Mapping[str, str], inherited: Mapping[str, str]) -> dict[str, str]:
    """Return the full child environment; overlay entries win over inherited ones."""
    return {**inherited, **overlay}


def mark_restart(env: dict[str, str]) -> None:
    """Flag ``env`` as belonging to a relaunch."""
    env[ENV_RESTART] = "1"
