"""Default launcher configuration derived from the environment.

Paths follow the XDG base directory conventions; values that are unset, empty
or relative fall back to the locations under ``$HOME``.
"""

import logging
from collections.abc import Mapping
from pathlib import Path

from kvim.constants import APP_NAME, DEFAULT_PROFILE, EDITOR_EXECUTABLE
from kvim.errors import ConfigError
from kvim.models import LaunchDefaults

log = logging.getLogger(__name__)


def _xdg_dir(environ: Mapping[str, str], name: str, fallback: Path) -> Path:
    value = environ.get(name, "").strip()
    if value and Path(value).is_absolute():
        return Path(value)
    return fallback


def compute_defaults(environ: Mapping[str, str], temp_dir: str) -> LaunchDefaults:
    """Return default paths for a run, computed from an environment snapshot."""
    home_value = environ.get("HOME", "").strip()
    if not home_value:
        raise ConfigError("HOME is not set; cannot derive default paths")
    home = Path(home_value)

    config_home = _xdg_dir(environ, "XDG_CONFIG_HOME", home / ".config")
    data_home = _xdg_dir(environ, "XDG_DATA_HOME", home / ".local" / "share")
    state_home = _xdg_dir(environ, "XDG_STATE_HOME", home / ".local" / "state")

    defaults = LaunchDefaults(
        kvim_conf=home / ".kvim.conf",
        lua_cfg=config_home / "nvim",
        profile_dir=data_home / APP_NAME,
        state_root=state_home / APP_NAME,
        debug_dir=Path(temp_dir) / APP_NAME,
        profile=environ.get("KVIM_PROFILE", "").strip() or DEFAULT_PROFILE,
        editor=environ.get("KVIM_EDITOR", "").strip() or EDITOR_EXECUTABLE,
    )
    log.debug("defaults=%s", defaults)
    return defaults
