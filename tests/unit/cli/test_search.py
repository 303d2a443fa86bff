"""Unit tests for search and version commands."""

from unittest.mock import patch

from mportctl.cli.main import app
from mportctl.core.errors import StoreError
from mportctl.models.package import IndexEntry
from mportctl.store.snapshot import SnapshotStore
from typer.testing import CliRunner

runner = CliRunner()


class TestSearchCommand:
    """Tests for the search command."""

    def test_unmatched_term_is_silent(self, store: SnapshotStore) -> None:
        """Only the matching term produces output and the run succeeds."""
        result = runner.invoke(app, ["search", "vim", "*nothingmatches*"], obj={"store": store})

        assert result.exit_code == 0
        assert result.output == "vim\t9.1.0\tImproved version of the vi editor\n"

    def test_term_order(self, store: SnapshotStore) -> None:
        """Hits are printed term by term."""
        result = runner.invoke(app, ["search", "libffi", "curl"], obj={"store": store})

        names = [line.split("\t")[0] for line in result.output.splitlines()]
        assert names == ["libffi", "curl", "curl"]

    def test_requires_terms(self, store: SnapshotStore) -> None:
        """Searching without terms is invalid input."""
        result = runner.invoke(app, ["search"], obj={"store": store})

        assert result.exit_code == 2
        assert "Search terms required" in result.output

    def test_failed_term(self, store: SnapshotStore) -> None:
        """A failing term is reported after the others are printed."""
        original = store.search

        def search(term: str) -> list[IndexEntry]:
            if term == "broken":
                raise StoreError("query failed")
            return original(term)

        with patch.object(store, "search", side_effect=search):
            result = runner.invoke(app, ["search", "broken", "vim"], obj={"store": store})

        assert result.exit_code == 8
        assert "vim\t9.1.0" in result.output
        assert "Search failed for: broken" in result.output


class TestVersionCommand:
    """Tests for the version command."""

    def test_less(self) -> None:
        """A lower left version prints '<'."""
        result = runner.invoke(app, ["version", "-t", "1.2", "1.3"])

        assert result.exit_code == 0
        assert result.output == "<\n"

    def test_equal(self) -> None:
        """Equivalent versions print '='."""
        result = runner.invoke(app, ["version", "--test", "1.0", "1.0.0"])

        assert result.output == "=\n"

    def test_greater(self) -> None:
        """A higher revision prints '>'."""
        result = runner.invoke(app, ["version", "-t", "2.0_1", "2.0"])

        assert result.output == ">\n"

    def test_non_ascii_digit(self) -> None:
        """A superscript digit compares as a separator instead of failing."""
        result = runner.invoke(app, ["version", "-t", "1.²", "1.0"])

        assert result.exit_code == 0
        assert result.output == "=\n"

    def test_missing_test_flag(self) -> None:
        """Without -t the command prints usage."""
        result = runner.invoke(app, ["version", "1.2", "1.3"])

        assert result.exit_code == 2
        assert "Usage: mportctl version -t" in result.output

    def test_wrong_argument_count(self) -> None:
        """Exactly two versions are needed."""
        result = runner.invoke(app, ["version", "-t", "1.2"])

        assert result.exit_code == 2
