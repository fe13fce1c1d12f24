"""
Tests for CLI functionality.

These tests verify the command-line interface logic.
"""

from __future__ import annotations

import argparse
from io import StringIO
from unittest.mock import Mock, patch

import pytest

from macaulay_bot.cli import cmd_info, cmd_post, cmd_search, create_parser, main
from macaulay_bot.datasources.macaulay import MediaSearchResult
from macaulay_bot.resolution.errors import ExhaustedError
from macaulay_bot.services.bluesky import BlueskyError
from tests.factories import media_record


class TestCreateParser:
    """Tests for create_parser function."""

    def test_creates_parser(self) -> None:
        """Parser is created successfully."""
        parser = create_parser()
        assert isinstance(parser, argparse.ArgumentParser)
        assert parser.prog == "macaulay-bot"

    def test_parser_has_version(self) -> None:
        """Parser has version argument."""
        parser = create_parser()
        with pytest.raises(SystemExit):
            parser.parse_args(["--version"])

    def test_parser_has_debug_flag(self) -> None:
        """Parser accepts --debug flag."""
        args = create_parser().parse_args(["--debug", "info"])
        assert args.debug is True

    def test_parser_post_defaults(self) -> None:
        """Post command defaults to a live bird post."""
        args = create_parser().parse_args(["post"])
        assert args.command == "post"
        assert args.mammals is False
        assert args.dry_run is False
        assert args.test_species is None

    def test_parser_post_options(self) -> None:
        """Post command accepts --mammals, --dry-run and --test-species."""
        args = create_parser().parse_args(
            ["post", "--mammals", "--dry-run", "--test-species", "Odobenus_rosmarus"]
        )
        assert args.mammals is True
        assert args.dry_run is True
        assert args.test_species == "Odobenus_rosmarus"

    def test_parser_search_command(self) -> None:
        """Search command takes a taxon code."""
        args = create_parser().parse_args(["search", "gybtes1", "--include-child-taxa"])
        assert args.taxon_code == "gybtes1"
        assert args.include_child_taxa is True


class TestCmdPost:
    """Tests for cmd_post function."""

    def _args(self, **overrides: object) -> argparse.Namespace:
        values: dict[str, object] = {"mammals": False, "dry_run": True, "test_species": None}
        values.update(overrides)
        return argparse.Namespace(**values)

    def test_success_returns_zero(self) -> None:
        with patch("macaulay_bot.cli.post_taxon") as mock_flow:
            exit_code = cmd_post(self._args(mammals=True, test_species="Odobenus_rosmarus"))
        assert exit_code == 0
        mock_flow.assert_called_once_with(
            mammals=True, dry_run=True, test_species="Odobenus_rosmarus"
        )

    def test_exhausted_returns_one(self) -> None:
        with (
            patch("macaulay_bot.cli.post_taxon", side_effect=ExhaustedError(5)),
            patch("sys.stderr", new=StringIO()) as mock_stderr,
        ):
            exit_code = cmd_post(self._args())
        assert exit_code == 1
        assert "Error:" in mock_stderr.getvalue()

    def test_bluesky_error_returns_one(self) -> None:
        with (
            patch("macaulay_bot.cli.post_taxon", side_effect=BlueskyError("login failed")),
            patch("sys.stderr", new=StringIO()),
        ):
            assert cmd_post(self._args(dry_run=False)) == 1


class TestCmdSearch:
    """Tests for cmd_search function."""

    def test_prints_ids(self) -> None:
        found = MediaSearchResult.from_records([media_record(i) for i in range(1, 8)])
        args = argparse.Namespace(taxon_code="walrus", include_child_taxa=False)

        with (
            patch("macaulay_bot.cli.search_media", return_value=found) as mock_search,
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            exit_code = cmd_search(args)

        assert exit_code == 0
        output = mock_stdout.getvalue()
        assert "Found 7 asset IDs" in output
        assert "Asset IDs: 1, 2, 3, 4, 5..." in output
        mock_search.assert_called_once_with("walrus", include_child_taxa=False)

    def test_failure_returns_one(self) -> None:
        args = argparse.Namespace(taxon_code="walrus", include_child_taxa=True)
        with (
            patch("macaulay_bot.cli.search_media", return_value=None),
            patch("sys.stderr", new=StringIO()) as mock_stderr,
        ):
            assert cmd_search(args) == 1
        assert "Failed to retrieve data" in mock_stderr.getvalue()


class TestCmdInfo:
    """Tests for cmd_info function."""

    def test_returns_zero(self) -> None:
        assert cmd_info(argparse.Namespace()) == 0

    def test_prints_app_info(self) -> None:
        with patch("sys.stdout", new=StringIO()) as mock_stdout:
            cmd_info(argparse.Namespace())
        assert "Application" in mock_stdout.getvalue()


class TestMain:
    """Tests for main function."""

    def test_no_command_shows_help(self) -> None:
        with patch("sys.argv", ["macaulay-bot"]):
            assert main() == 0

    def test_post_command_executes(self) -> None:
        with (
            patch("sys.argv", ["macaulay-bot", "post", "--dry-run"]),
            patch("macaulay_bot.cli.cmd_post") as mock_cmd,
            patch("macaulay_bot.cli.configure_logging"),
        ):
            mock_cmd.return_value = 0
            assert main() == 0
            mock_cmd.assert_called_once()

    def test_info_command_executes(self) -> None:
        with (
            patch("sys.argv", ["macaulay-bot", "info"]),
            patch("macaulay_bot.cli.cmd_info") as mock_cmd,
            patch("macaulay_bot.cli.configure_logging"),
        ):
            mock_cmd.return_value = 0
            assert main() == 0

    def test_handler_exit_code_propagates(self) -> None:
        with (
            patch("sys.argv", ["macaulay-bot", "search", "walrus"]),
            patch("macaulay_bot.cli.cmd_search", return_value=1),
            patch("macaulay_bot.cli.configure_logging"),
        ):
            assert main() == 1


def test_search_uses_media_session() -> None:
    """The search command goes through the real search path when not patched."""
    fake = Mock()
    fake.get.return_value.json.return_value = [media_record(9)]
    with (
        patch("macaulay_bot.datasources.macaulay.media.create_session", return_value=fake),
        patch("sys.stdout", new=StringIO()) as mock_stdout,
    ):
        exit_code = cmd_search(argparse.Namespace(taxon_code="walrus", include_child_taxa=False))
    assert exit_code == 0
    assert "Found 1 asset IDs" in mock_stdout.getvalue()
