"""Synchronous editor process runner."""

import logging
import subprocess

from kvim.errors import SpawnError
from kvim.models import LaunchPlan

log = logging.getLogger(__name__)


def run_editor(plan: LaunchPlan) -> int:
    """Run the editor to completion and return its exit code.

    A non-zero exit code is returned as-is; only failing to start the
    process raises.
    """
    command = [plan.executable, *plan.argv]
    log.debug("running %s", command)
    try:
        result = subprocess.run(command, env=plan.env, check=False)
    except OSError as e:
        raise SpawnError(f"failed to start {plan.executable}: {e}") from e
    log.debug("%s exited with %d", plan.executable, result.returncode)
    return result.returncode
