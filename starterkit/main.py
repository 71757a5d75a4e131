"""
Starter Kit — Command Line Entry Point
=======================================

What:  The `starterkit` console script.
How:   argparse subcommands dispatch to the services; async work runs under
       asyncio.run(); StarterKitError is turned into a logged message and
       exit code 1.
Who:   Installed as `starterkit` (see pyproject.toml) and runnable as
       `python -m starterkit`.

Commands:
    starterkit new [NAME] [--dir PATH] [--no-venv] [--dry-run]
    starterkit layout
    starterkit guide
    starterkit --version

Exit codes:
    0    success
    1    any StarterKitError (bad name, write failure, venv/pip failure)
    130  interrupted with Ctrl-C
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from starterkit import __version__
from starterkit.blueprint import render_tree
from starterkit.config import settings
from starterkit.exceptions import StarterKitError
from starterkit.services.guide_service import load_style_guide
from starterkit.services.project_service import ProjectService

logger = logging.getLogger(__name__)

PROMPT = "Enter project name: "


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure logging for the whole process.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    When:   Called once by main() before any command runs.
    """
    log_level = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
    logging.getLogger("asyncio").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Commands
# ══════════════════════════════════════════════════════════════════════════

def prompt_project_name() -> str:
    try:
        return input(PROMPT)
    except EOFError:
        return ""


def cmd_new(args: argparse.Namespace) -> int:
    name = args.name if args.name is not None else prompt_project_name()
    service = ProjectService()

    if args.dry_run:
        root = service.plan(name, parent_dir=args.dir)[0]
        print(render_tree(str(root)))
        return 0

    result = asyncio.run(
        service.create_project(
            name,
            parent_dir=args.dir,
            create_venv=False if args.no_venv else None,
        )
    )

    print("FastAPI project setup complete!")
    print()
    print(f"To run the app: {result.run_command}")
    return 0


def cmd_layout(args: argparse.Namespace) -> int:
    print(render_tree())
    return 0


def cmd_guide(args: argparse.Namespace) -> int:
    print(load_style_guide())
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="starterkit",
        description="Scaffold a FastAPI backend following the bundled style guide.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        default=None,
        help="Override STARTERKIT_LOG_LEVEL (default: %s)" % settings.log_level,
    )
    sub = parser.add_subparsers(dest="command", required=True)

    new = sub.add_parser("new", help="Create a new project")
    new.add_argument("name", nargs="?", help="Project directory name (prompted if omitted)")
    new.add_argument(
        "--dir",
        type=Path,
        default=None,
        help="Parent directory for the project (default: current directory)",
    )
    new.add_argument(
        "--no-venv",
        action="store_true",
        help="Skip the virtual environment and package install",
    )
    new.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the tree that would be created and exit",
    )
    new.set_defaults(handler=cmd_new)

    layout = sub.add_parser("layout", help="Print the project layout")
    layout.set_defaults(handler=cmd_layout)

    guide = sub.add_parser("guide", help="Print the style guide")
    guide.set_defaults(handler=cmd_guide)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        return args.handler(args)
    except StarterKitError as e:
        logger.error("%s", e.message)
        if e.context:
            logger.error("Context: %s", e.context)
        stderr = getattr(e, "stderr", "")
        if stderr:
            print(stderr, file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.warning("Interrupted")
        return 130


if __name__ == "__main__":
    sys.exit(main())
