"""Metric boundary for the directory entry count.

Exposes the operations the monitoring agent calls once per poll: a
registry of metric keys, direct counting, key-based export, and a
non-raising collect that pairs the value with any error.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from dircount.vfs.errors import DirCountError, UnsupportedMetricError
from dircount.vfs.params import parse_params
from dircount.vfs.walker import count_entries

logger = logging.getLogger(__name__)

COUNT_METRIC = "vfs.dir.count"

# Registered metric keys and their descriptions
METRICS: dict[str, str] = {
    COUNT_METRIC: "Directory entry count.",
}


@dataclass(frozen=True, slots=True)
class MetricResult:
    """Outcome of collecting one metric.

    Attributes:
        key: Metric key that was requested.
        value: Collected value (None if collection failed).
        error: Error message if collection failed, None otherwise.
    """

    key: str
    value: int | None = None
    error: str | None = None

    @property
    def success(self) -> bool:
        """Check if the metric was collected."""
        return self.error is None


def count(params: Sequence[str]) -> int:
    """Count directory entries matching the positional parameters.

    Args:
        params: 1 to 11 positional metric parameters; see dircount.vfs.params.

    Returns:
        Number of entries below the path that pass every filter.

    Raises:
        TooFewParametersError: If no parameters or an empty path are given.
        TooManyParametersError: If more than 11 parameters are given.
        InvalidParametersError: If a parameter fails validation.
        TraversalError: If the walk fails.
    """
    spec = parse_params(params)
    return count_entries(spec)


def export(key: str, params: Sequence[str]) -> int:
    """Collect a registered metric by key.

    Raises:
        UnsupportedMetricError: If the key is not registered.
        DirCountError: If the metric itself fails.
    """
    if key == COUNT_METRIC:
        return count(params)
    raise UnsupportedMetricError(key)


def collect(key: str, params: Sequence[str]) -> MetricResult:
    """Collect a metric, reporting failures in the result instead of raising.

    Args:
        key: Metric key, e.g. "vfs.dir.count".
        params: Positional metric parameters.

    Returns:
        MetricResult with either a value or an error message.
    """
    try:
        value = export(key, params)
    except DirCountError as e:
        logger.warning("Cannot collect %s: %s", key, e)
        return MetricResult(key=key, error=str(e))
    return MetricResult(key=key, value=value)
