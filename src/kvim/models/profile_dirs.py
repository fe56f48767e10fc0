"""Per-profile directory model."""

from dataclasses import dataclass
from pathlib import Path

from kvim.constants import RESTART_INDICATOR


@dataclass(frozen=True)
class ProfileDirs:
    """Isolated data (and optionally state) directories of one profile."""

    data_dir: Path
    state_dir: Path | None = None

    @property
    def restart_indicator(self) -> Path:
        return self.data_dir.joinpath(*RESTART_INDICATOR)
