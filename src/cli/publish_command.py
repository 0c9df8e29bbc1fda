"""Publish command orchestration for CLI.

This module provides the PublishCommand class that orchestrates the entire
publish workflow for the CLI. It coordinates DocsGenerator, Uploader,
Archiver and OutputHandler, and is the single place where failures are
turned into exit codes.
"""

import logging
import os
from typing import Optional

from src.cli.docs_generator import DocsGenerator
from src.cli.errors import CLIError, DocsNotFoundError
from src.cli.models import ExitCode, PublishSummary
from src.cli.output import OutputHandler
from src.publisher.archiver import Archiver
from src.publisher.errors import PublisherError
from src.publisher.uploader import Uploader
from src.wiki_client.api_wrapper import WikiClient
from src.wiki_client.auth import Authenticator
from src.wiki_client.errors import (
    APIAccessError,
    APIUnreachableError,
    InvalidCredentialsError,
    PageNotFoundError,
)

logger = logging.getLogger(__name__)


class PublishCommand:
    """Orchestrates the complete publish workflow for the CLI.

    The publish workflow:
        1. Run the documentation generator (unless skipped)
        2. Check the docs folder exists, before any remote call
        3. Upload every file and directory under the docs folder
        4. If an archive prefix was given, archive remote pages that were
           not uploaded
        5. Print a summary and return an exit code

    Example:
        >>> output = OutputHandler(verbosity=1)
        >>> cmd = PublishCommand(
        ...     org_url="https://dev.azure.com/contoso",
        ...     token="...",
        ...     project="Platform",
        ...     wiki_id="Platform.wiki",
        ...     output_handler=output,
        ... )
        >>> sys.exit(cmd.run(path_prefix="Docs", archive_prefix="Archive"))
    """

    def __init__(
        self,
        org_url: str,
        token: str,
        project: str,
        wiki_id: str,
        docs_folder: str = "docs",
        output_handler: Optional[OutputHandler] = None,
        client: Optional[WikiClient] = None,
        generator: Optional[DocsGenerator] = None,
    ):
        """Initialize publish command with dependencies.

        Args:
            org_url: Azure DevOps organisation URL
            token: Personal access token
            project: Project name
            wiki_id: Wiki identifier
            docs_folder: Local docs folder, relative to the working directory
            output_handler: OutputHandler for terminal output (optional)
            client: WikiClient to use instead of building one (optional)
            generator: DocsGenerator to use instead of the default (optional)

        Note:
            Dependencies are optional to support testing. In production they
            are created automatically.
        """
        self.docs_folder = docs_folder
        self.output_handler = output_handler or OutputHandler()
        self.client = client or WikiClient(
            Authenticator(org_url, token), project=project, wiki_id=wiki_id
        )
        self.generator = generator

    def run(
        self,
        path_prefix: str,
        archive_prefix: Optional[str] = None,
        skip_generate: bool = False,
    ) -> ExitCode:
        """Execute the publish run.

        Args:
            path_prefix: Wiki path the docs are published under
            archive_prefix: Wiki path orphans are moved under; None skips archiving
            skip_generate: If True, publish the docs folder as it is

        Returns:
            ExitCode indicating success or specific failure type
        """
        summary = PublishSummary(archive_enabled=bool(archive_prefix))

        try:
            if not skip_generate:
                generator = self.generator or DocsGenerator(target_dir=self.docs_folder)
                with self.output_handler.spinner("Generating markdown..."):
                    generator.generate()
                self.output_handler.success("Markdown generated")

            docs_path = os.path.join(os.getcwd(), self.docs_folder)
            if not os.path.isdir(docs_path):
                raise DocsNotFoundError(docs_path)

            self.output_handler.info(f"Uploading markdown to DevOps wiki under '{path_prefix}'")
            uploader = Uploader(docs_path, self.client, path_prefix=path_prefix)
            uploaded_pages = uploader.sync()
            summary.uploaded_count = len(uploaded_pages)
            self.output_handler.success(f"Upload complete: {len(uploaded_pages)} page(s)")

            if not archive_prefix:
                logger.info("No archive prefix given, skipping archive")
                self.output_handler.info("No archive path provided, skipping archive")
            else:
                self.output_handler.info(f"Archiving orphaned pages to '{archive_prefix}'")
                archiver = Archiver(self.client, path_prefix, archive_prefix)
                result = archiver.reconcile(uploaded_pages)
                summary.archived_count = result.archived_count
                summary.skipped_count = len(result.skipped)
                summary.created_parent_count = len(result.created_parents)
                for move in result.moved:
                    self.output_handler.debug(f"  {move.source} -> {move.destination}")
                self.output_handler.success("Archive complete")

            self.output_handler.print_publish_summary(summary)
            return ExitCode.SUCCESS

        except InvalidCredentialsError as e:
            logger.error(f"Authentication failed: {e}")
            self.output_handler.error(f"Authentication failed: {e}")
            self.output_handler.info("Check the personal access token and its wiki scopes")
            return ExitCode.AUTH_ERROR

        except (APIUnreachableError, APIAccessError, PageNotFoundError) as e:
            logger.error(f"API error: {e}")
            self.output_handler.error(f"API error: {e}")
            self.output_handler.info("Check the organisation URL, project and wiki, then run again")
            return ExitCode.NETWORK_ERROR

        except (CLIError, PublisherError) as e:
            logger.error(f"Publish failed: {e}")
            self.output_handler.error(f"Error: {e}")
            return ExitCode.GENERAL_ERROR

        except Exception as e:
            logger.exception("Unexpected error during publish")
            self.output_handler.error(f"Unexpected error: {e}")
            return ExitCode.GENERAL_ERROR

        finally:
            self.client.close()
