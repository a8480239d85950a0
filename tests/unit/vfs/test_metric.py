"""Tests for the metric entry points."""

from pathlib import Path

import pytest
from dircount.vfs.errors import (
    InvalidParametersError,
    TooFewParametersError,
    TooManyParametersError,
    TraversalError,
    UnsupportedMetricError,
)
from dircount.vfs.metric import COUNT_METRIC, METRICS, MetricResult, collect, count, export


class TestRegistry:
    """Tests for the metric registry."""

    def test_count_metric_registered(self) -> None:
        """vfs.dir.count is registered with its description."""
        assert COUNT_METRIC == "vfs.dir.count"
        assert METRICS[COUNT_METRIC] == "Directory entry count."


class TestCount:
    """Tests for count()."""

    def test_count_path_only(self, sample_tree: Path) -> None:
        """Path-only count includes every entry below the path."""
        assert count([str(sample_tree)] + [""] * 10) == 4

    def test_count_include_regex(self, sample_tree: Path) -> None:
        """Second parameter filters by base name."""
        assert count([str(sample_tree), r"\.txt$"]) == 2

    def test_parameter_errors_before_walk(self, tmp_path: Path) -> None:
        """Invalid parameters are reported even when the path does not exist."""
        with pytest.raises(InvalidParametersError, match="sixth"):
            count([str(tmp_path / "missing"), "", "", "", "", "abc"])

    def test_zero_and_twelve_parameters(self) -> None:
        """Parameter count limits are enforced."""
        with pytest.raises(TooFewParametersError):
            count([])
        with pytest.raises(TooManyParametersError):
            count(["/tmp"] * 12)

    def test_traversal_error(self, tmp_path: Path) -> None:
        """Walk failures propagate as TraversalError."""
        with pytest.raises(TraversalError):
            count([str(tmp_path / "missing")])


class TestExport:
    """Tests for export()."""

    def test_export_count(self, sample_tree: Path) -> None:
        """The registered key dispatches to count."""
        assert export("vfs.dir.count", [str(sample_tree)]) == 4

    def test_unsupported_metric(self, sample_tree: Path) -> None:
        """Unknown keys raise UnsupportedMetricError."""
        with pytest.raises(UnsupportedMetricError, match="vfs.dir.size"):
            export("vfs.dir.size", [str(sample_tree)])


class TestCollect:
    """Tests for collect()."""

    def test_collect_success(self, sample_tree: Path) -> None:
        """Successful collection carries the value and no error."""
        result = collect(COUNT_METRIC, [str(sample_tree), "", "", "dir"])

        assert result == MetricResult(key=COUNT_METRIC, value=1)
        assert result.success is True

    def test_collect_failure(self) -> None:
        """Failures are reported in the result, not raised."""
        result = collect(COUNT_METRIC, [])

        assert result.success is False
        assert result.value is None
        assert result.error == "Too few parameters."

    def test_collect_unsupported_metric(self) -> None:
        """Unknown keys are reported as errors."""
        result = collect("vfs.dir.size", ["/tmp"])

        assert result.success is False
        assert result.error == "Unsupported metric: vfs.dir.size"
