"""Editor argument vector composition."""

from collections.abc import Sequence
from pathlib import Path

from kvim.constants import INIT_FILE_NAME, INIT_FLAG


def init_script_path(lua_cfg: Path) -> Path:
    """Return the init script: ``init.lua`` inside a directory, or the file itself."""
    if lua_cfg.is_dir():
        return lua_cfg / INIT_FILE_NAME
    return lua_cfg


def compose_arguments(lua_cfg: Path, special_mode: bool, args: Sequence[str]) -> list[str]:
    """Build editor arguments, excluding the executable name.

    In a special mode the pass-through arguments travel through the
    environment instead, so they are left out here.
    """
    argv = [INIT_FLAG, str(init_script_path(lua_cfg))]
    if not special_mode:
        argv.extend(args)
    return argv
