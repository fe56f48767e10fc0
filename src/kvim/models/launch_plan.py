"""Launch model for the editor child process."""

from dataclasses import dataclass


@dataclass
class LaunchPlan:
    """How to launch the editor: executable, arguments and full environment."""

    executable: str
    argv: list[str]
    env: dict[str, str]
