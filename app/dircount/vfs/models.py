"""Filter domain models for the directory entry count metric.

This module defines the immutable filter specification built once per
invocation, the closed vocabulary of entry types, and the outcome of
visiting a single entry during the walk.
"""

import os
import re
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

UNLIMITED_DEPTH = -1


class EntryType(str, Enum):
    """Type tag of a filesystem entry.

    Attributes:
        FILE: Regular file.
        DIR: Directory.
        SYM: Symbolic link (never followed).
        SOCK: Unix domain socket.
        BDEV: Block device.
        CDEV: Character device.
        FIFO: Named pipe.
    """

    FILE = "file"
    DIR = "dir"
    SYM = "sym"
    SOCK = "sock"
    BDEV = "bdev"
    CDEV = "cdev"
    FIFO = "fifo"


class VisitOutcome(Enum):
    """Result of visiting one entry during the walk.

    Attributes:
        COUNT: Entry passed every filter.
        SKIP: Entry is not counted; its children are still visited.
        PRUNE: Entry is not counted and its subtree is not descended.
    """

    COUNT = "count"
    SKIP = "skip"
    PRUNE = "prune"


@dataclass(frozen=True, slots=True)
class TypeFilter:
    """Immutable set of entry types used by an include or exclude filter.

    Attributes:
        types: Entry types selected by the filter.
        match_all: True when the token ``all`` was given; every entry matches,
            including kinds outside the EntryType vocabulary.
    """

    types: frozenset[EntryType] = frozenset()
    match_all: bool = False

    @classmethod
    def everything(cls) -> "TypeFilter":
        """Filter matching every entry type."""
        return cls(types=frozenset(EntryType), match_all=True)

    @classmethod
    def nothing(cls) -> "TypeFilter":
        """Filter with no types selected (inactive)."""
        return cls()

    @property
    def is_active(self) -> bool:
        """Whether the filter selects anything at all."""
        return self.match_all or bool(self.types)

    def matches(self, entry_type: EntryType | None) -> bool:
        """Check whether an entry type is selected by this filter."""
        if self.match_all:
            return True
        return entry_type is not None and entry_type in self.types


@dataclass(frozen=True, slots=True)
class FilterSpec:
    """Validated filter criteria for one directory count.

    Built by the parameter parser and discarded after the walk. Age
    bounds are absolute cutoffs: an entry modified after ``min_age`` is
    too young, one modified before ``max_age`` is too old.

    Attributes:
        path: Root directory, always terminated with the path separator.
        include_name: Base-name pattern an entry must match.
        exclude_name: Base-name pattern an entry must not match.
        exclude_dir: Directory base-name pattern whose matches are pruned.
        max_depth: Deepest level counted below the root (-1 for unlimited).
        include_types: Types an entry must have (inactive = all pass).
        exclude_types: Types an entry must not have (inactive = none excluded).
        min_size: Inclusive lower size bound in bytes.
        max_size: Inclusive upper size bound in bytes.
        min_age: Cutoff timestamp; newer entries are skipped.
        max_age: Cutoff timestamp; older entries are skipped.
    """

    path: str
    include_name: re.Pattern[str] | None = None
    exclude_name: re.Pattern[str] | None = None
    exclude_dir: re.Pattern[str] | None = None
    max_depth: int = UNLIMITED_DEPTH
    include_types: TypeFilter = field(default_factory=TypeFilter.nothing)
    exclude_types: TypeFilter = field(default_factory=TypeFilter.nothing)
    min_size: int | None = None
    max_size: int | None = None
    min_age: datetime | None = None
    max_age: datetime | None = None

    def __post_init__(self) -> None:
        """Validate filter invariants after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)
        if not self.path.endswith(os.sep):
            msg = f"Path must end with '{os.sep}', got {self.path!r}"
            raise ValueError(msg)
        if self.max_depth < UNLIMITED_DEPTH:
            msg = f"Max depth must be >= {UNLIMITED_DEPTH}, got {self.max_depth}"
            raise ValueError(msg)
        for name, cutoff in (("min_age", self.min_age), ("max_age", self.max_age)):
            if cutoff is not None and cutoff.utcoffset() is None:
                msg = f"{name} must be a timezone-aware datetime"
                raise ValueError(msg)

    @property
    def unlimited_depth(self) -> bool:
        """Whether recursion depth is unbounded."""
        return self.max_depth == UNLIMITED_DEPTH

    @property
    def has_metadata_filters(self) -> bool:
        """Whether any size or age bound is set."""
        return any(
            bound is not None
            for bound in (self.min_size, self.max_size, self.min_age, self.max_age)
        )
