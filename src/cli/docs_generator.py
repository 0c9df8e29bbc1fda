"""Runs the external documentation generator before publishing.

The markdown itself is produced by ApexDocs from the Salesforce sources in
``force-app``. This module only checks the prerequisite directory exists and
shells out to the generator; it knows nothing about the generated content.
"""

import logging
import os
import subprocess
from typing import List, Optional, Sequence

from src.cli.errors import GeneratorError

logger = logging.getLogger(__name__)

# Generator timeout in seconds
GENERATOR_TIMEOUT = 600

DEFAULT_SOURCE_DIR = "force-app"
DEFAULT_TARGET_DIR = "docs"


def apexdocs_command(source_dir: str, target_dir: str) -> List[str]:
    """Build the ApexDocs command line for a markdown run."""
    return [
        "npx", "--yes", "@cparra/apexdocs", "markdown",
        "--sourceDir", source_dir,
        "--targetDir", target_dir,
        "--scope", "global", "public", "namespaceaccessible",
        "--defaultGroupName", "Apex Classes",
        "--customObjectsGroupName", "Objects",
        "--includeMetadata",
    ]


class DocsGenerator:
    """Populates the docs folder by running the documentation generator.

    Example:
        >>> generator = DocsGenerator()
        >>> generator.generate()  # runs ApexDocs on force-app into docs/
    """

    def __init__(
        self,
        source_dir: str = DEFAULT_SOURCE_DIR,
        target_dir: str = DEFAULT_TARGET_DIR,
        command: Optional[Sequence[str]] = None,
    ):
        """Initialize the generator.

        Args:
            source_dir: Directory the generator reads from
            target_dir: Directory the generator writes markdown into
            command: Full command line to run instead of the ApexDocs default
        """
        self.source_dir = source_dir
        self.target_dir = target_dir
        self.command = list(command) if command else apexdocs_command(source_dir, target_dir)

    def generate(self) -> None:
        """Run the generator.

        Raises:
            GeneratorError: If the source directory is missing, the generator
                is not installed, times out or exits non-zero
        """
        if not os.path.isdir(self.source_dir):
            raise GeneratorError(f"{self.source_dir} directory not found")

        logger.info(f"Generating markdown from {self.source_dir} into {self.target_dir}")
        logger.debug(f"Generator command: {' '.join(self.command)}")

        try:
            result = subprocess.run(
                self.command,
                capture_output=True,
                text=True,
                timeout=GENERATOR_TIMEOUT,
            )
        except subprocess.TimeoutExpired:
            raise GeneratorError(
                f"Documentation generator timed out after {GENERATOR_TIMEOUT} seconds"
            )
        except FileNotFoundError:
            raise GeneratorError(
                f"Generator command not found: {self.command[0]}. Please install Node.js."
            )

        if result.returncode != 0:
            raise GeneratorError(
                f"Unable to generate markdown (exit status {result.returncode})",
                generator_output=result.stderr or result.stdout,
            )

        logger.info("Markdown generation complete")
