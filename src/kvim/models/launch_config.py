"""Configuration models for kvim."""

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from kvim.constants import DEFAULT_PROFILE, EDITOR_EXECUTABLE, MODE_GIT, MODE_GIT_DIFF
from kvim.errors import ModeConflictError


class LaunchDefaults(BaseModel):
    """Default paths and names derived from the launching environment."""

    model_config = ConfigDict(frozen=True)

    kvim_conf: Path
    lua_cfg: Path
    profile_dir: Path
    state_root: Path
    debug_dir: Path
    profile: str = DEFAULT_PROFILE
    editor: str = EDITOR_EXECUTABLE


class LaunchConfig(BaseModel):
    """Resolved configuration for a single launcher run."""

    model_config = ConfigDict(frozen=True)

    kvim_conf: Path
    lua_cfg: Path
    profile: str = DEFAULT_PROFILE
    profile_dir: Path
    state_root: Path
    debug: bool = False
    debug_dir: Path
    debug_file: str | None = None
    git: bool = False
    git_diff: bool = False
    override_state: bool = False
    args: list[str] = Field(default_factory=list)
    editor: str = EDITOR_EXECUTABLE

    @field_validator("profile")
    @classmethod
    def _check_profile(cls, value: str) -> str:
        # Used verbatim as a single path segment.
        if not value:
            raise ValueError("profile name must not be empty")
        if value in {".", ".."}:
            raise ValueError(f"invalid profile name: {value!r}")
        if os.sep in value or (os.altsep is not None and os.altsep in value):
            raise ValueError(f"profile name must not contain path separators: {value!r}")
        return value

    @model_validator(mode="after")
    def _check_modes(self) -> "LaunchConfig":
        if self.git and self.git_diff:
            raise ModeConflictError()
        return self

    @property
    def mode(self) -> str | None:
        """Return the active special mode token, if any."""
        if self.git:
            return MODE_GIT
        if self.git_diff:
            return MODE_GIT_DIFF
        return None

    @property
    def special_mode(self) -> bool:
        return self.mode is not None
