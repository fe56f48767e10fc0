from pathlib import Path

import pytest

from kvim.models import LaunchConfig


@pytest.fixture
def make_config(tmp_path: Path):
    """Return a factory for LaunchConfig rooted in tmp_path."""

    def _make(**overrides) -> LaunchConfig:
        values = dict(
            kvim_conf=tmp_path / ".kvim.conf",
            lua_cfg=tmp_path / "config" / "nvim",
            profile="upstream",
            profile_dir=tmp_path / "data" / "kvim",
            state_root=tmp_path / "state" / "kvim",
            debug_dir=tmp_path / "tmp" / "kvim",
        )
        values.update(overrides)
        return LaunchConfig(**values)

    return _make
