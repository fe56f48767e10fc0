"""Shared constants for kvim."""

EDITOR_EXECUTABLE = "nvim"
DEFAULT_PROFILE = "upstream"
APP_NAME = "kvim"

INIT_FLAG = "-u"
INIT_FILE_NAME = "init.lua"

# Relative to the profile data directory. Written by the editor, consumed here.
RESTART_INDICATOR = ("nvim", "restart_kvim")

DEBUG_TIMESTAMP_FORMAT = "%Y-%m-%d_%H:%M:%S"

# Environment contract with the editor-side configuration.
ENV_KVIM_CONF = "KOALA_KVIM_CONF"
ENV_DATA_DIR = "KOALA_DATA_DIR"
ENV_STATE_DIR = "KOALA_STATE_DIR"
ENV_DEBUG_OUT = "KOALA_DEBUG_OUT"
ENV_NO_SESSION = "KOALA_NO_SESSION"
ENV_MODE = "KOALA_MODE"
ENV_ARGS = "KOALA_ARGS"
ENV_RESTART = "KOALA_RESTART"

MODE_GIT = "git"
MODE_GIT_DIFF = "git_diff"

# The editor side reads KOALA_ARGS as one unseparated string.
ARGS_SEPARATOR = ""
