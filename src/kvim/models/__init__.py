"""Model package for kvim."""

from kvim.models.launch_config import LaunchConfig, LaunchDefaults
from kvim.models.launch_plan import LaunchPlan
from kvim.models.profile_dirs import ProfileDirs

__all__ = [
    "LaunchConfig",
    "LaunchDefaults",
    "LaunchPlan",
    "ProfileDirs",
]
