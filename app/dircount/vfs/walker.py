"""Filtered directory walk for the directory entry count metric.

Walks the tree below FilterSpec.path depth-first and counts entries that
pass every filter. Each visited entry goes through four checks in a fixed
order (depth, name patterns, type, size/age); the first check that
rejects an entry decides whether only the entry is skipped or its whole
subtree is pruned.
"""

import logging
import os
import stat
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from dircount.vfs.errors import TraversalError
from dircount.vfs.models import EntryType, FilterSpec, VisitOutcome

logger = logging.getLogger(__name__)

# lstat mode checks for kinds that scandir's cached d_type does not report
_MODE_TYPES: tuple[tuple[EntryType, Callable[[int], bool]], ...] = (
    (EntryType.SOCK, stat.S_ISSOCK),
    (EntryType.FIFO, stat.S_ISFIFO),
    (EntryType.BDEV, stat.S_ISBLK),
    (EntryType.CDEV, stat.S_ISCHR),
)

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def to_timestamp_ns(moment: datetime) -> int:
    """Convert an aware datetime to integer nanoseconds since the epoch.

    Exact for every datetime, so it can be compared with ``st_mtime_ns``
    without building a datetime from a file timestamp.
    """
    return (moment - _EPOCH) // timedelta(microseconds=1) * 1000


def classify_entry(entry: os.DirEntry[str]) -> EntryType | None:
    """Determine the type tag of a directory entry without following symlinks.

    Symlinks are checked first, then directories and regular files from
    the cached scandir type. Sockets, pipes and devices require an lstat.

    Args:
        entry: Entry yielded by os.scandir.

    Returns:
        EntryType of the entry, or None for kinds outside the vocabulary.

    Raises:
        OSError: If the entry cannot be stat'ed.
    """
    if entry.is_symlink():
        return EntryType.SYM
    if entry.is_dir(follow_symlinks=False):
        return EntryType.DIR
    if entry.is_file(follow_symlinks=False):
        return EntryType.FILE

    mode = entry.stat(follow_symlinks=False).st_mode
    for entry_type, check in _MODE_TYPES:
        if check(mode):
            return entry_type
    return None


class FilteredWalker:
    """Counts entries below a root directory that pass a FilterSpec.

    The walk keeps an explicit stack of pending directories and opens
    one directory at a time, closing each scandir iterator before the
    next one is opened. Symbolic links are never followed.

    Args:
        spec: Validated filter specification.
    """

    def __init__(self, spec: FilterSpec) -> None:
        self._spec = spec
        self._min_age_ns = None if spec.min_age is None else to_timestamp_ns(spec.min_age)
        self._max_age_ns = None if spec.max_age is None else to_timestamp_ns(spec.max_age)

    @property
    def spec(self) -> FilterSpec:
        """Filter specification used by this walker."""
        return self._spec

    def count(self) -> int:
        """Walk the tree and count matching entries.

        The root directory itself is never counted.

        Returns:
            Number of entries passing every filter.

        Raises:
            TraversalError: If a directory cannot be listed or an entry
                cannot be stat'ed. No partial count is returned.
        """
        total = 0
        pending: list[tuple[str, int]] = [(self._spec.path, 0)]

        while pending:
            directory, depth = pending.pop()
            children: list[str] = []

            try:
                with os.scandir(directory) as entries:
                    for entry in entries:
                        outcome = self.visit(entry, depth + 1)
                        if outcome is VisitOutcome.COUNT:
                            total += 1
                        if outcome is VisitOutcome.PRUNE:
                            continue
                        if self._should_descend(entry, depth + 1):
                            children.append(entry.path)
            except OSError as e:
                raise TraversalError(directory, e) from e

            # Reverse so subdirectories are visited in listing order
            pending.extend((child, depth + 1) for child in reversed(children))

        logger.debug("Counted %d entries under %s", total, self._spec.path)
        return total

    def visit(self, entry: os.DirEntry[str], depth: int) -> VisitOutcome:
        """Apply every filter to one entry.

        Args:
            entry: Entry yielded by os.scandir.
            depth: Level below the root (direct children are at depth 1).

        Returns:
            VisitOutcome telling the walk whether to count the entry and
            whether to descend into it.

        Raises:
            TraversalError: If the entry's metadata cannot be read.
        """
        for check in (self._check_depth, self._check_names, self._check_type, self._check_info):
            outcome = check(entry, depth)
            if outcome is not VisitOutcome.COUNT:
                return outcome
        return VisitOutcome.COUNT

    def _check_depth(self, entry: os.DirEntry[str], depth: int) -> VisitOutcome:
        """Reject entries below the maximum depth, pruning their subtree."""
        if not self._spec.unlimited_depth and depth > self._spec.max_depth:
            return VisitOutcome.PRUNE
        return VisitOutcome.COUNT

    def _check_names(self, entry: os.DirEntry[str], depth: int) -> VisitOutcome:
        """Match the entry's base name against include/exclude patterns.

        Name filters only skip the entry itself; the directory-exclude
        pattern prunes the matching directory's subtree.
        """
        spec = self._spec
        name = entry.name

        if spec.include_name is not None and not spec.include_name.search(name):
            return VisitOutcome.SKIP

        if spec.exclude_name is not None and spec.exclude_name.search(name):
            return VisitOutcome.SKIP

        if (
            spec.exclude_dir is not None
            and self._is_dir(entry)
            and spec.exclude_dir.search(name)
        ):
            logger.debug("Pruning excluded directory: %s", entry.path)
            return VisitOutcome.PRUNE

        return VisitOutcome.COUNT

    def _check_type(self, entry: os.DirEntry[str], depth: int) -> VisitOutcome:
        """Match the entry's type against include/exclude type filters."""
        include = self._spec.include_types
        exclude = self._spec.exclude_types

        # An include filter matching everything needs no classification
        include_needed = include.is_active and not include.match_all
        if not include_needed and not exclude.is_active:
            return VisitOutcome.COUNT

        entry_type = self._classify(entry)

        if include_needed and not include.matches(entry_type):
            return VisitOutcome.SKIP

        if exclude.is_active and exclude.matches(entry_type):
            return VisitOutcome.SKIP

        return VisitOutcome.COUNT

    def _check_info(self, entry: os.DirEntry[str], depth: int) -> VisitOutcome:
        """Fetch the entry's metadata and apply size and modification-time bounds.

        Metadata is fetched for every entry that reaches this check, so an
        entry removed during the walk aborts it even without active bounds.

        Raises:
            TraversalError: If the entry cannot be stat'ed.
        """
        spec = self._spec
        try:
            info = entry.stat(follow_symlinks=False)
        except OSError as e:
            raise TraversalError(entry.path, e) from e

        if spec.min_size is not None and info.st_size < spec.min_size:
            return VisitOutcome.SKIP

        if spec.max_size is not None and info.st_size > spec.max_size:
            return VisitOutcome.SKIP

        mtime_ns = info.st_mtime_ns

        # min_age: modified after the cutoff means too young
        if self._min_age_ns is not None and mtime_ns > self._min_age_ns:
            return VisitOutcome.SKIP

        # max_age: modified before the cutoff means too old
        if self._max_age_ns is not None and mtime_ns < self._max_age_ns:
            return VisitOutcome.SKIP

        return VisitOutcome.COUNT

    def _classify(self, entry: os.DirEntry[str]) -> EntryType | None:
        try:
            return classify_entry(entry)
        except OSError as e:
            raise TraversalError(entry.path, e) from e

    def _is_dir(self, entry: os.DirEntry[str]) -> bool:
        try:
            return entry.is_dir(follow_symlinks=False)
        except OSError as e:
            raise TraversalError(entry.path, e) from e

    def _should_descend(self, entry: os.DirEntry[str], depth: int) -> bool:
        """Whether a directory at ``depth`` can contain countable entries."""
        if not self._spec.unlimited_depth and depth >= self._spec.max_depth:
            return False
        return self._is_dir(entry)


def count_entries(spec: FilterSpec) -> int:
    """Count entries below ``spec.path`` that pass every filter.

    Args:
        spec: Validated filter specification.

    Returns:
        Number of matching entries.

    Raises:
        TraversalError: On any unrecoverable filesystem error.
    """
    return FilteredWalker(spec).count()
