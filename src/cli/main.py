"""Main CLI entry point for the wiki-publish command.

This module provides the Typer application that serves as the entry point
for the wiki-publish command-line tool. Connection details are positional
arguments so the tool drops straight into a pipeline step.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer

from src.cli.docs_generator import DEFAULT_SOURCE_DIR, DocsGenerator
from src.cli.models import ExitCode
from src.cli.output import OutputHandler
from src.cli.publish_command import PublishCommand

VERSION = "0.1.0"

app = typer.Typer(
    name="wiki-publish",
    help="""Publish generated markdown docs to an Azure DevOps wiki.

EXAMPLE:
  wiki-publish https://dev.azure.com/contoso/ $PAT Platform Platform.wiki /Docs /Archive

Pages that exist under PATH_PREFIX but were not published in this run are
moved under ARCHIVE_PREFIX. Leave ARCHIVE_PREFIX out to skip archiving.""",
    add_completion=False,
    rich_markup_mode=None,
)

# Module logger
logger = logging.getLogger(__name__)


def _configure_logging(verbosity: int, logdir: Optional[str] = None) -> None:
    """Configure logging based on verbosity level.

    Configures only the 'src' namespace logger to avoid affecting third-party
    libraries. The root logger is left unchanged.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG)
        logdir: Optional directory for log files (creates timestamped log file)
    """
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:  # verbosity >= 2
        level = logging.DEBUG

    app_logger = logging.getLogger("src")
    app_logger.setLevel(level)

    log_format = "%(asctime)s [%(levelname)8s] %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(log_format, datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    app_logger.addHandler(console_handler)

    if logdir:
        log_path = Path(logdir)
        log_path.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"wiki-publish_{timestamp}.log"

        file_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        file_formatter = logging.Formatter(file_format, datefmt=date_format)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(file_formatter)
        app_logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file}")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"wiki-publish version {VERSION}")
        raise typer.Exit()


@app.command()
def main_command(
    org_url: str = typer.Argument(
        ...,
        help="Azure DevOps organisation URL, e.g. https://dev.azure.com/contoso/",
    ),
    token: str = typer.Argument(
        ...,
        help="Personal access token with wiki read & write scope",
    ),
    project: str = typer.Argument(..., help="Azure DevOps project name"),
    wiki_id: str = typer.Argument(..., help="Wiki identifier or name"),
    path_prefix: str = typer.Argument(..., help="Wiki path to publish the docs under"),
    archive_prefix: Optional[str] = typer.Argument(
        None,
        help="Wiki path to move orphaned pages under (omit to skip archiving)",
    ),
    docs_dir: str = typer.Option(
        "docs",
        "--docs-dir",
        help="Local folder holding the generated markdown",
        metavar="FOLDER",
    ),
    source_dir: str = typer.Option(
        DEFAULT_SOURCE_DIR,
        "--source-dir",
        help="Folder the documentation generator reads from",
        metavar="FOLDER",
    ),
    skip_generate: bool = typer.Option(
        False,
        "--skip-generate",
        help="Publish the docs folder as it is, without running the generator",
    ),
    logdir: Optional[str] = typer.Option(
        None,
        "--logdir",
        help="Directory for log files (creates timestamped log file)",
    ),
    verbosity: int = typer.Option(
        0,
        "--verbosity",
        "-v",
        help="Verbosity level: 0=summary, 1=info, 2=debug",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Publish generated markdown docs to an Azure DevOps wiki.

    \b
    EXAMPLE:
      wiki-publish https://dev.azure.com/contoso/ $PAT Platform Platform.wiki /Docs /Archive

    \b
    NOTE:
      - Pages are never deleted; orphans are moved under ARCHIVE_PREFIX
      - Without ARCHIVE_PREFIX only the upload runs
    """
    _configure_logging(verbosity, logdir)

    output = OutputHandler(verbosity=verbosity, no_color=no_color)

    publish_cmd = PublishCommand(
        org_url=org_url,
        token=token,
        project=project,
        wiki_id=wiki_id,
        docs_folder=docs_dir,
        output_handler=output,
        generator=DocsGenerator(source_dir=source_dir, target_dir=docs_dir),
    )

    exit_code = publish_cmd.run(
        path_prefix=path_prefix,
        archive_prefix=archive_prefix or None,
        skip_generate=skip_generate,
    )

    raise typer.Exit(int(exit_code))


def main() -> None:
    """Main entry point for the CLI application.

    This function is called when the module is executed directly or
    when the console script is invoked.
    """
    app()


# Allow running as: python -m src.cli.main
if __name__ == "__main__":
    main()
