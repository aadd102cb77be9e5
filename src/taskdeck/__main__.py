"""CLI entry point for taskdeck."""

import argparse
from pathlib import Path

from . import __version__
from .config import Settings
from .logging import setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="taskdeck",
        description="Terminal dashboard for a markdown task list",
    )
    parser.add_argument(
        "--workspace",
        type=Path,
        default=None,
        help="Path to workspace containing taskdeck.yml (default: current directory)",
    )
    parser.add_argument(
        "--generate",
        action="store_true",
        help="Generate default taskdeck.yml and a starter task file, then exit",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print today's tasks and counts, then exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-v for INFO, -vv for DEBUG)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path to write logs to file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args(argv)


def build_task_service(settings: Settings):
    """Wire the repository and task service for a workspace."""
    from .repositories import DocumentRepository
    from .services import ConfigService, TaskService

    config_service = ConfigService(settings.workspace_root)
    repository = DocumentRepository(settings.workspace_root)
    return TaskService(
        repository,
        config_service.tasks_file,
        config_service.get_grammar_config(),
    )


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)

    # Build settings from CLI args
    settings_kwargs: dict = {}
    if args.workspace:
        settings_kwargs["workspace_root"] = args.workspace
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file

    settings = Settings(**settings_kwargs)

    setup_logging(settings.verbose, settings.log_file)

    if args.generate:
        from .cli.generate import run_generate

        raise SystemExit(run_generate(settings.workspace_root))

    if args.summary:
        from .cli.summary import run_summary

        raise SystemExit(run_summary(build_task_service(settings)))

    # Import here so CLI-only commands don't load textual
    from .app import run

    run(settings)


if __name__ == "__main__":
    main()
