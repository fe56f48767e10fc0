"""Exceptions raised by kvim."""


class KvimError(RuntimeError):
    """Base class for fatal launcher failures."""


class ConfigError(KvimError):
    """Default configuration could not be derived from the environment."""


class ModeConflictError(KvimError, ValueError):
    """Both special modes were requested."""

    def __init__(self) -> None:
        super().__init__("--git and --git-diff cannot be used together")


class LaunchFilesystemError(KvimError):
    """A directory or the restart indicator could not be managed."""


class SpawnError(KvimError):
    """The editor process could not be started."""
