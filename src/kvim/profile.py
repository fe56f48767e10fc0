"""Profile directory resolution."""

from pathlib import Path

from kvim.models import ProfileDirs


def resolve_profile_dirs(
    profile: str, profile_dir: Path, state_root: Path, override_state: bool = False
) -> ProfileDirs:
    """Return the isolated directories for ``profile``. Nothing is created on disk."""
    state_dir = state_root / profile if override_state else None
    return ProfileDirs(data_dir=profile_dir / profile, state_dir=state_dir)
