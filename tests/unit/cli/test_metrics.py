"""Unit tests for the metrics CLI command."""

from dircount.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


class TestMetricsCommand:
    """Tests for dircount metrics."""

    def test_lists_count_metric(self) -> None:
        """The table shows the registered key and its description."""
        result = runner.invoke(app, ["metrics"])

        assert result.exit_code == 0
        assert "Registered Metrics" in result.stdout
        assert "vfs.dir.count" in result.stdout
        assert "Directory entry count." in result.stdout
