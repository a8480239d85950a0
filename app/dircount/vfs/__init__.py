"""Directory entry count metric.

This package provides the filter model, the positional parameter parser,
the filtered directory walk, and the metric entry points built on them.
"""

from dircount.vfs.errors import (
    DirCountError,
    InvalidParametersError,
    TooFewParametersError,
    TooManyParametersError,
    TraversalError,
    UnsupportedMetricError,
)
from dircount.vfs.metric import COUNT_METRIC, METRICS, MetricResult, collect, count, export
from dircount.vfs.models import UNLIMITED_DEPTH, EntryType, FilterSpec, TypeFilter, VisitOutcome
from dircount.vfs.params import (
    parse_byte,
    parse_duration,
    parse_max_depth,
    parse_params,
    parse_regex,
    parse_types,
)
from dircount.vfs.walker import FilteredWalker, classify_entry, count_entries

__all__ = [
    "COUNT_METRIC",
    "METRICS",
    "UNLIMITED_DEPTH",
    "DirCountError",
    "EntryType",
    "FilterSpec",
    "FilteredWalker",
    "InvalidParametersError",
    "MetricResult",
    "TooFewParametersError",
    "TooManyParametersError",
    "TraversalError",
    "TypeFilter",
    "UnsupportedMetricError",
    "VisitOutcome",
    "classify_entry",
    "collect",
    "count",
    "count_entries",
    "export",
    "parse_byte",
    "parse_duration",
    "parse_max_depth",
    "parse_params",
    "parse_regex",
    "parse_types",
]
