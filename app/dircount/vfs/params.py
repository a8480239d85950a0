"""Parameter parsing for the directory entry count metric.

Turns the ordered list of positional string parameters supplied by the
agent into a validated FilterSpec. Slots are positional:

    1  path               7  minimum size
    2  include-name regex 8  maximum size
    3  exclude-name regex 9  minimum age
    4  include types      10 maximum age
    5  exclude types      11 directory-exclude regex
    6  maximum depth

Every slot after the first is optional. Slots are consulted from the
highest supplied index down to the path, so supplying slot N always
means slots 1..N-1 were consulted (or defaulted) as well.
"""

import logging
import os
import re
from collections.abc import Callable, Sequence
from datetime import UTC, datetime, timedelta
from functools import partial
from typing import TypeVar

from dircount.vfs.errors import (
    InvalidParametersError,
    TooFewParametersError,
    TooManyParametersError,
)
from dircount.vfs.models import UNLIMITED_DEPTH, EntryType, FilterSpec, TypeFilter

logger = logging.getLogger(__name__)

MAX_PARAMS = 11

# Decimal multipliers (factor 1000 per step, not 1024)
BYTE_SUFFIXES: dict[str, int] = {
    "K": 1000,
    "M": 1000**2,
    "G": 1000**3,
    "T": 1000**4,
}

TIME_SUFFIXES: dict[str, timedelta] = {
    "s": timedelta(seconds=1),
    "m": timedelta(minutes=1),
    "h": timedelta(hours=1),
    "d": timedelta(days=1),
    "w": timedelta(weeks=1),
}

TYPE_TOKENS: dict[str, frozenset[EntryType]] = {
    "file": frozenset({EntryType.FILE}),
    "dir": frozenset({EntryType.DIR}),
    "sym": frozenset({EntryType.SYM}),
    "sock": frozenset({EntryType.SOCK}),
    "bdev": frozenset({EntryType.BDEV}),
    "cdev": frozenset({EntryType.CDEV}),
    "fifo": frozenset({EntryType.FIFO}),
    "dev": frozenset({EntryType.BDEV, EntryType.CDEV}),
}

ALL_TYPES_TOKEN = "all"

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

T = TypeVar("T")


def _parse_int(text: str) -> int:
    """Parse a strict decimal integer with an optional sign.

    Raises:
        ValueError: If the text is not a plain decimal integer.
    """
    if not _INTEGER_RE.fullmatch(text):
        msg = f"invalid integer: {text!r}"
        raise ValueError(msg)
    return int(text)


def _split_suffix(text: str, kind: str) -> tuple[int, str]:
    """Split ``text`` into an integer prefix and a one-character suffix."""
    if not text:
        msg = f"empty {kind} value"
        raise ValueError(msg)
    return _parse_int(text[:-1]), text[-1]


def parse_byte(text: str) -> int | None:
    """Parse a byte count with an optional decimal unit suffix.

    The whole string is tried as a plain integer first; failing that the
    last character is taken as one of K, M, G, T.

    Args:
        text: Size such as "1500", "2K" or "1M". Empty means no bound.

    Returns:
        Size in bytes, or None for an empty string.

    Raises:
        ValueError: If the number or the suffix is malformed.
    """
    if text == "":
        return None
    try:
        return _parse_int(text)
    except ValueError:
        pass

    value, suffix = _split_suffix(text, "size")
    if suffix not in BYTE_SUFFIXES:
        msg = f"unknown memory suffix {suffix}"
        raise ValueError(msg)
    return value * BYTE_SUFFIXES[suffix]


def parse_duration(text: str) -> timedelta | None:
    """Parse an age with an optional unit suffix.

    Plain integers are seconds; otherwise the last character is one of
    s, m, h, d (24h) or w (7d).

    Args:
        text: Age such as "30", "15m" or "1w". Empty means no bound.

    Returns:
        The duration, or None for an empty string.

    Raises:
        ValueError: If the number or the suffix is malformed.
    """
    if text == "":
        return None
    try:
        value, unit = _parse_int(text), TIME_SUFFIXES["s"]
    except ValueError:
        value, suffix = _split_suffix(text, "time")
        if suffix not in TIME_SUFFIXES:
            msg = f"unknown time suffix {suffix}"
            raise ValueError(msg) from None
        unit = TIME_SUFFIXES[suffix]

    try:
        return value * unit
    except OverflowError as e:
        msg = f"time value out of range: {text}"
        raise ValueError(msg) from e


def parse_types(text: str, *, exclude: bool) -> TypeFilter:
    """Parse a comma-separated list of entry type tokens.

    The literal ``all`` anywhere in the list selects every type. An empty
    include list also selects every type; an empty exclude list selects
    nothing.

    Args:
        text: Token list such as "file,dir" or "dev".
        exclude: True when parsing the exclude-type slot.

    Returns:
        TypeFilter for the selected types.

    Raises:
        ValueError: If a token is not in the type vocabulary.
    """
    if text == "":
        return TypeFilter.nothing() if exclude else TypeFilter.everything()

    tokens = text.split(",")
    if ALL_TYPES_TOKEN in tokens:
        return TypeFilter.everything()

    selected: set[EntryType] = set()
    for token in tokens:
        if token not in TYPE_TOKENS:
            msg = f"invalid type: {token}"
            raise ValueError(msg)
        selected |= TYPE_TOKENS[token]

    return TypeFilter(types=frozenset(selected))


def parse_regex(text: str) -> re.Pattern[str] | None:
    """Compile a name pattern; empty text means no pattern.

    Raises:
        re.error: If the pattern has invalid syntax.
    """
    if text == "":
        return None
    return re.compile(text)


def parse_max_depth(text: str) -> int:
    """Parse the maximum recursion depth; empty text means unlimited.

    Raises:
        ValueError: If the value is not an integer or is below -1.
    """
    if text == "":
        return UNLIMITED_DEPTH
    depth = _parse_int(text)
    if depth < UNLIMITED_DEPTH:
        msg = f"depth must be {UNLIMITED_DEPTH} or greater, got {depth}"
        raise ValueError(msg)
    return depth


def normalize_path(path: str) -> str:
    """Append the path separator when missing."""
    if path.endswith(os.sep):
        return path
    return path + os.sep


def _parse_slot(params: Sequence[str], position: int, parser: Callable[[str], T]) -> T:
    """Run ``parser`` on a 1-based slot, reporting failures by ordinal."""
    try:
        return parser(params[position - 1])
    except (ValueError, OverflowError, re.error) as e:
        raise InvalidParametersError(position, e) from e


def _age_cutoff(reference: datetime, age: timedelta | None, position: int) -> datetime | None:
    """Convert an age bound into an absolute modification-time cutoff."""
    if age is None:
        return None
    try:
        return reference - age
    except OverflowError as e:
        raise InvalidParametersError(position, e) from e


def parse_params(params: Sequence[str], *, now: datetime | None = None) -> FilterSpec:
    """Build a FilterSpec from positional metric parameters.

    All validation happens here, before any traversal starts. Age cutoffs
    are computed once from ``now``.

    Args:
        params: Between 1 and 11 positional string parameters.
        now: Timezone-aware reference time for age cutoffs. Defaults to the
            current UTC time.

    Returns:
        Fully validated FilterSpec.

    Raises:
        TooFewParametersError: If no parameters are given or the path is empty.
        TooManyParametersError: If more than 11 parameters are given.
        InvalidParametersError: If a slot fails validation.
        ValueError: If ``now`` is a naive datetime.
    """
    supplied = len(params)
    if supplied == 0:
        raise TooFewParametersError()
    if supplied > MAX_PARAMS:
        raise TooManyParametersError()

    if now is not None and now.utcoffset() is None:
        msg = "now must be a timezone-aware datetime"
        raise ValueError(msg)
    reference = now if now is not None else datetime.now(UTC)

    # Slots are consulted from the highest supplied index down; a slot
    # beyond the supplied count keeps its default.
    exclude_dir: re.Pattern[str] | None = None
    max_age: datetime | None = None
    min_age: datetime | None = None
    max_size: int | None = None
    min_size: int | None = None
    max_depth = UNLIMITED_DEPTH
    exclude_types = TypeFilter.nothing()
    include_types = TypeFilter.everything()
    exclude_name: re.Pattern[str] | None = None
    include_name: re.Pattern[str] | None = None

    if supplied >= 11:
        exclude_dir = _parse_slot(params, 11, parse_regex)
    if supplied >= 10:
        max_age = _age_cutoff(reference, _parse_slot(params, 10, parse_duration), 10)
    if supplied >= 9:
        min_age = _age_cutoff(reference, _parse_slot(params, 9, parse_duration), 9)
    if supplied >= 8:
        max_size = _parse_slot(params, 8, parse_byte)
    if supplied >= 7:
        min_size = _parse_slot(params, 7, parse_byte)
    if supplied >= 6:
        max_depth = _parse_slot(params, 6, parse_max_depth)
    if supplied >= 5:
        exclude_types = _parse_slot(params, 5, partial(parse_types, exclude=True))
    if supplied >= 4:
        include_types = _parse_slot(params, 4, partial(parse_types, exclude=False))
    if supplied >= 3:
        exclude_name = _parse_slot(params, 3, parse_regex)
    if supplied >= 2:
        include_name = _parse_slot(params, 2, parse_regex)

    path = params[0]
    if path == "":
        raise TooFewParametersError()

    spec = FilterSpec(
        path=normalize_path(path),
        include_name=include_name,
        exclude_name=exclude_name,
        exclude_dir=exclude_dir,
        max_depth=max_depth,
        include_types=include_types,
        exclude_types=exclude_types,
        min_size=min_size,
        max_size=max_size,
        min_age=min_age,
        max_age=max_age,
    )
    logger.debug("Parsed %d parameter(s) into filter spec for %s", supplied, spec.path)
    return spec
