from __future__ import annotations

import argparse
import logging
from typing import Sequence

from orgchart_desktop.runtime.config import resolve_settings
from orgchart_desktop.runtime.gui import run_desktop_mode, run_web_mode

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
COMMON_OPTIONS = ("url", "title", "debug")


def _common_parser() -> argparse.ArgumentParser:
    # SUPPRESS keeps subcommand defaults from clobbering options given before the subcommand.
    common = argparse.ArgumentParser(add_help=False, argument_default=argparse.SUPPRESS)
    common.add_argument("--url", help="Front end entry (file path or URL)")
    common.add_argument("--title", help="Window title")
    common.add_argument("--debug", action="store_true", help="Enable webview devtools and debug logs")
    return common


def build_parser() -> argparse.ArgumentParser:
    common = _common_parser()
    parser = argparse.ArgumentParser(description="OrgChart desktop entrypoint", parents=[common])
    sub = parser.add_subparsers(dest="mode")

    sub.add_parser("desktop", parents=[common])
    # Legacy alias kept for existing shortcuts.
    sub.add_parser("gui", parents=[common])
    sub.add_parser("web", parents=[common])
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    args = build_parser().parse_args(argv)
    if args.mode in (None, "gui"):
        args.mode = "desktop"
    for name in COMMON_OPTIONS:
        if not hasattr(args, name):
            setattr(args, name, None)
    return args


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    settings = resolve_settings(url=args.url, title=args.title, debug=args.debug)
    logging.basicConfig(level=logging.DEBUG if settings.debug else logging.INFO, format=LOG_FORMAT)

    if args.mode == "web":
        return run_web_mode(settings)
    return run_desktop_mode(settings)
