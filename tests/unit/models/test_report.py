"""Unit tests for action and report models."""

import pytest
from mportctl.models.action import Action, ActionType, failed, succeeded
from mportctl.models.package import PackageRecord
from mportctl.models.report import RemovalReport, SearchReport, StalenessReport, StalePackage


class TestAction:
    """Tests for Action and ActionResult."""

    def test_empty_package_rejected(self) -> None:
        """An action needs a package name."""
        with pytest.raises(ValueError, match="cannot be empty"):
            Action(ActionType.DELETE, "")

    def test_kind_helpers(self) -> None:
        """is_install and is_delete reflect the action type."""
        assert Action(ActionType.INSTALL, "curl").is_install
        assert Action(ActionType.DELETE, "curl").is_delete
        assert not Action(ActionType.LOCK, "curl").is_delete

    def test_result_helpers(self) -> None:
        """succeeded and failed build matching results."""
        action = Action(ActionType.DELETE, "curl")

        ok = succeeded(action, "Deleted")
        bad = failed(action, "locked")

        assert ok.success and not ok.failed and ok.message == "Deleted"
        assert bad.failed and bad.error == "locked"


class TestRemovalReport:
    """Tests for RemovalReport counters."""

    def test_deleted(self) -> None:
        """deleted is total minus errors."""
        assert RemovalReport(total=5, errors=2).deleted == 3

    def test_partial_failure(self) -> None:
        """Errors or blocked packages make a partial failure."""
        assert not RemovalReport(total=3).partial_failure
        assert RemovalReport(total=3, errors=1).partial_failure
        assert RemovalReport(blocked=["lib"]).partial_failure


class TestStalenessReport:
    """Tests for StalenessReport views."""

    def test_views(self) -> None:
        """Outdated and unavailable lines are split out."""
        curl = PackageRecord(name="curl", version="8.5.0")
        gone = PackageRecord(name="gone", version="1.0")
        report = StalenessReport(
            items=[StalePackage(curl, "8.6.0"), StalePackage(gone)],
        )

        assert [i.index_version for i in report.outdated] == ["8.6.0"]
        assert report.unavailable == [gone]
        assert not report.up_to_date

    def test_empty(self) -> None:
        """An empty report is up to date."""
        assert StalenessReport().up_to_date


class TestSearchReport:
    """Tests for SearchReport."""

    def test_partial_failure(self) -> None:
        """Any failed term is a partial failure."""
        assert not SearchReport().partial_failure
        assert SearchReport(failed_terms=["x"]).partial_failure
