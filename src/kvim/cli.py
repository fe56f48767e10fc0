"""Command-line interface for kvim."""

import argparse
import logging
import os
import sys
import tempfile
from collections.abc import Mapping
from pathlib import Path

from kvim import __version__
from kvim.defaults import compute_defaults
from kvim.errors import KvimError
from kvim.models import LaunchConfig, LaunchDefaults
from kvim.supervisor import supervise

log = logging.getLogger("kvim")


def build_parser(defaults: LaunchDefaults) -> argparse.ArgumentParser:
    """Build the launcher argument parser around precomputed defaults."""
    parser = argparse.ArgumentParser(
        prog="kv",
        description="Launcher for KoalaVim (neovim configuration)",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable launcher debug logging",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Start KoalaVim in debug mode, output goes to --debug-dir/<timestamp>",
    )
    parser.add_argument(
        "--debug-dir",
        type=Path,
        default=defaults.debug_dir,
        help="Directory for debug output (default: %(default)s)",
    )
    parser.add_argument(
        "--debug-file",
        help="Override debug file name (default is a timestamp)",
    )
    parser.add_argument(
        "-c",
        "--cfg",
        type=Path,
        default=defaults.kvim_conf,
        help="Launch with given kvim.conf (default: %(default)s)",
    )
    parser.add_argument(
        "-l",
        "--lua-cfg",
        type=Path,
        default=defaults.lua_cfg,
        help="Launch with given lua config file or directory (default: %(default)s)",
    )
    parser.add_argument(
        "-p",
        "--profile",
        default=defaults.profile,
        help="Plugin profile; each profile gets its own data dir (default: %(default)s)",
    )
    parser.add_argument(
        "--profile-dir",
        type=Path,
        default=defaults.profile_dir,
        help="Plugin profiles base directory (default: %(default)s)",
    )
    parser.add_argument(
        "--override-state",
        action="store_true",
        help="Use a per-profile state directory",
    )
    parser.add_argument(
        "--git",
        action="store_true",
        help="Open KoalaVim in git mode, arguments are passed to the git view",
    )
    parser.add_argument(
        "--git-diff",
        action="store_true",
        help="Open KoalaVim in git diff mode, arguments are passed to the diff view",
    )
    parser.add_argument(
        "args",
        nargs="*",
        metavar="args",
        help="Arguments passed through to the editor (use -- before options)",
    )
    return parser


def main(argv: list[str] | None = None, environ: Mapping[str, str] | None = None) -> int:
    if environ is None:
        environ = os.environ

    try:
        defaults = compute_defaults(environ, tempfile.gettempdir())
    except KvimError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    parser = build_parser(defaults)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    if args.git and args.git_diff:
        print("Error: --git and --git-diff cannot be used together", file=sys.stderr)
        return 2

    try:
        config = LaunchConfig(
            kvim_conf=args.cfg,
            lua_cfg=args.lua_cfg,
            profile=args.profile,
            profile_dir=args.profile_dir,
            state_root=defaults.state_root,
            debug=args.debug,
            debug_dir=args.debug_dir,
            debug_file=args.debug_file,
            git=args.git,
            git_diff=args.git_diff,
            override_state=args.override_state,
            args=args.args,
            editor=defaults.editor,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    log.debug("config=%s", config)

    try:
        return supervise(config, environ=environ)
    except KvimError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def entrypoint() -> None:
    raise SystemExit(main())
