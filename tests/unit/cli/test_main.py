"""Unit tests for main CLI entry point (main.py).

Tests the Typer CLI application using CliRunner.
"""

import logging
from unittest.mock import MagicMock, Mock, patch

from typer.testing import CliRunner

from src.cli.main import VERSION, _configure_logging, app
from src.cli.models import ExitCode

runner = CliRunner()

ARGS = ["https://dev.azure.com/contoso/", "token123", "Platform", "Platform.wiki", "/Docs"]


class TestConfigureLogging:
    """Test cases for _configure_logging function."""

    def test_verbosity_0_sets_warning_level(self):
        """Verbosity 0 sets logging to WARNING level."""
        with patch('logging.getLogger') as mock_get_logger:
            mock_logger = MagicMock()
            mock_get_logger.return_value = mock_logger

            _configure_logging(0)

            mock_get_logger.assert_called_with("src")
            mock_logger.setLevel.assert_called_with(logging.WARNING)

    def test_verbosity_1_sets_info_level(self):
        """Verbosity 1 sets logging to INFO level."""
        with patch('logging.getLogger') as mock_get_logger:
            mock_logger = MagicMock()
            mock_get_logger.return_value = mock_logger

            _configure_logging(1)

            mock_logger.setLevel.assert_called_with(logging.INFO)

    def test_verbosity_2_sets_debug_level(self):
        """Verbosity 2+ sets logging to DEBUG level."""
        with patch('logging.getLogger') as mock_get_logger:
            mock_logger = MagicMock()
            mock_get_logger.return_value = mock_logger

            _configure_logging(2)

            mock_logger.setLevel.assert_called_with(logging.DEBUG)

    def test_logdir_creates_log_file(self, tmp_path):
        """--logdir adds a timestamped file handler."""
        app_logger = logging.getLogger("src")
        before = list(app_logger.handlers)
        try:
            _configure_logging(1, str(tmp_path / "logs"))

            log_files = list((tmp_path / "logs").glob("wiki-publish_*.log"))
            assert len(log_files) == 1
        finally:
            for handler in app_logger.handlers[len(before):]:
                handler.close()
            app_logger.handlers = before


class TestPublishInvocation:
    """Test cases for the positional-argument publish command."""

    @patch('src.cli.main._configure_logging')
    @patch('src.cli.main.PublishCommand')
    def test_runs_publish_with_archive(self, mock_publish_cmd, mock_logging):
        """All six positional arguments are passed through."""
        mock_instance = Mock()
        mock_instance.run.return_value = ExitCode.SUCCESS
        mock_publish_cmd.return_value = mock_instance

        result = runner.invoke(app, ARGS + ["/Archive"])

        assert result.exit_code == ExitCode.SUCCESS
        kwargs = mock_publish_cmd.call_args.kwargs
        assert kwargs["org_url"] == "https://dev.azure.com/contoso/"
        assert kwargs["token"] == "token123"
        assert kwargs["project"] == "Platform"
        assert kwargs["wiki_id"] == "Platform.wiki"
        assert kwargs["docs_folder"] == "docs"
        mock_instance.run.assert_called_once_with(
            path_prefix="/Docs",
            archive_prefix="/Archive",
            skip_generate=False,
        )

    @patch('src.cli.main._configure_logging')
    @patch('src.cli.main.PublishCommand')
    def test_missing_archive_prefix_skips_archive(self, mock_publish_cmd, mock_logging):
        """Without an archive prefix, archive_prefix is None and exit is 0."""
        mock_instance = Mock()
        mock_instance.run.return_value = ExitCode.SUCCESS
        mock_publish_cmd.return_value = mock_instance

        result = runner.invoke(app, ARGS)

        assert result.exit_code == 0
        assert mock_instance.run.call_args.kwargs["archive_prefix"] is None

    @patch('src.cli.main._configure_logging')
    @patch('src.cli.main.PublishCommand')
    def test_exit_code_is_propagated(self, mock_publish_cmd, mock_logging):
        """A failing run exits with the command's exit code."""
        mock_instance = Mock()
        mock_instance.run.return_value = ExitCode.NETWORK_ERROR
        mock_publish_cmd.return_value = mock_instance

        result = runner.invoke(app, ARGS)

        assert result.exit_code == ExitCode.NETWORK_ERROR

    @patch('src.cli.main._configure_logging')
    @patch('src.cli.main.DocsGenerator')
    @patch('src.cli.main.PublishCommand')
    def test_options_are_passed_through(self, mock_publish_cmd, mock_generator, mock_logging):
        """--docs-dir, --source-dir and --skip-generate reach the command."""
        mock_instance = Mock()
        mock_instance.run.return_value = ExitCode.SUCCESS
        mock_publish_cmd.return_value = mock_instance

        result = runner.invoke(app, ARGS + [
            "--docs-dir", "out", "--source-dir", "src-app", "--skip-generate",
        ])

        assert result.exit_code == 0
        mock_generator.assert_called_once_with(source_dir="src-app", target_dir="out")
        assert mock_publish_cmd.call_args.kwargs["docs_folder"] == "out"
        assert mock_instance.run.call_args.kwargs["skip_generate"] is True

    def test_missing_positional_arguments_is_usage_error(self):
        """Leaving out required arguments fails with a usage error."""
        result = runner.invoke(app, ["https://dev.azure.com/contoso/", "token123"])

        assert result.exit_code == 2

    @patch('src.cli.main.PublishCommand')
    def test_version_flag(self, mock_publish_cmd):
        """--version prints the version without running a publish."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert VERSION in result.output
        mock_publish_cmd.assert_not_called()
