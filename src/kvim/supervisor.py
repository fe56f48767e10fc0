"""Launch and restart supervision for the editor process.

The editor asks for an in-place relaunch by leaving the restart indicator
file in its profile data directory before exiting. After every exit the
supervisor checks for that file; if present it is deleted and the editor is
started again with the same arguments and ``KOALA_RESTART`` set. There is no
bound on the number of restarts.
"""

import enum
import logging
import os
from collections.abc import Callable, Mapping
from datetime import datetime
from pathlib import Path

from kvim.arguments import compose_arguments
from kvim.environment import compose_environment, compose_overlay, mark_restart
from kvim.errors import LaunchFilesystemError, ModeConflictError
from kvim.models import LaunchConfig, LaunchPlan, ProfileDirs
from kvim.profile import resolve_profile_dirs
from kvim.runner import run_editor

log = logging.getLogger(__name__)


class SupervisorState(enum.Enum):
    RUNNING = "running"
    DONE = "done"


def build_launch_plan(
    config: LaunchConfig,
    dirs: ProfileDirs,
    environ: Mapping[str, str],
    now: Callable[[], datetime] = datetime.now,
) -> LaunchPlan:
    """Compose the environment and arguments of the first launch."""
    overlay = compose_overlay(config, dirs, now)
    argv = compose_arguments(config.lua_cfg, config.special_mode, config.args)
    log.debug("argv=%s", argv)
    return LaunchPlan(
        executable=config.editor,
        argv=argv,
        env=compose_environment(overlay, environ),
    )


def consume_restart_indicator(path: Path) -> None:
    """Delete the restart indicator. Failing to do so is fatal."""
    try:
        path.unlink()
    except OSError as e:
        raise LaunchFilesystemError(f"failed to remove restart indicator {path}: {e}") from e


def supervise(
    config: LaunchConfig,
    environ: Mapping[str, str] | None = None,
    runner: Callable[[LaunchPlan], int] | None = None,
    now: Callable[[], datetime] = datetime.now,
) -> int:
    """Run the editor until it exits without requesting a restart.

    Returns the exit code of the last editor run.
    """
    if config.git and config.git_diff:
        raise ModeConflictError()
    if runner is None:
        runner = run_editor
    if environ is None:
        environ = os.environ

    dirs = resolve_profile_dirs(
        config.profile, config.profile_dir, config.state_root, config.override_state
    )
    log.debug("profile=%s dirs=%s", config.profile, dirs)
    plan = build_launch_plan(config, dirs, environ, now)

    state = SupervisorState.RUNNING
    launches = 0
    exit_code = 0
    while state is SupervisorState.RUNNING:
        launches += 1
        log.info("launching %s (run %d)", plan.executable, launches)
        exit_code = runner(plan)

        if dirs.restart_indicator.exists():
            log.info("restart requested via %s", dirs.restart_indicator)
            consume_restart_indicator(dirs.restart_indicator)
            mark_restart(plan.env)
        else:
            state = SupervisorState.DONE

    return exit_code
