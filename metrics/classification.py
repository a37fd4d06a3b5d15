from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Sequence, Tuple

from config.field_policy import CLASSIFY_RESTRICTION, CLASSIFY_SHORTAGE


@dataclass(frozen=True)
class ClassificationRange:
    low: float
    high: float
    bucket: int

    def contains(self, rank: float) -> bool:
        return self.low <= rank <= self.high


class ClassificationTable:
    """고정 구간표: 데이터 분포와 무관하게 rank를 bucket으로 매핑."""

    def __init__(self, name: str, ranges: Iterable[ClassificationRange]):
        self.name = name
        self.ranges: Tuple[ClassificationRange, ...] = tuple(
            sorted(ranges, key=lambda r: r.low)
        )
        self._check_ranges()

    @classmethod
    def from_rows(
        cls, name: str, rows: Iterable[Sequence[float]]
    ) -> "ClassificationTable":
        return cls(
            name,
            [ClassificationRange(low, high, int(bucket)) for low, high, bucket in rows],
        )

    @property
    def buckets(self) -> Tuple[int, ...]:
        return tuple(r.bucket for r in self.ranges)

    def classify(self, rank) -> Optional[int]:
        if not isinstance(rank, numbers.Real) or not rank or rank < 1:
            return None
        for entry in self.ranges:
            if entry.contains(rank):
                return entry.bucket
        return None

    def _check_ranges(self) -> None:
        previous = None
        for entry in self.ranges:
            if entry.low > entry.high:
                raise ValueError(
                    f"[{self.name}] invalid range: {entry.low} > {entry.high}"
                )
            if previous is not None and entry.low <= previous.high:
                raise ValueError(
                    f"[{self.name}] overlapping ranges: "
                    f"[{previous.low}, {previous.high}] / [{entry.low}, {entry.high}]"
                )
            previous = entry

    def __repr__(self):
        return f"ClassificationTable({self.name!r}, {len(self.ranges)} ranges)"


# BAL 2025 restriction groups (access_rank)
RESTRICTION_GROUP = ClassificationTable.from_rows(
    "restriction",
    [
        (1, 15, 1),  # extreme
        (16, 33, 2),  # severe
        (34, 50, 3),  # considerable
        (51, 55, 4),  # some
        (56, 88, 5),  # minimal
    ],
)

# BAL 2025 shortage groups (needs_rank)
SHORTAGE_GROUP = ClassificationTable.from_rows(
    "shortage",
    [
        (1, 4, 1),  # >10m
        (5, 6, 2),  # 5-10m
        (7, 9, 3),  # 3-5m
        (10, 19, 4),  # 1-3m
        (20, 28, 5),  # 500k-1m
        (29, 32, 6),  # 250-500k
        (33, 38, 7),  # 100-250k
        (39, 45, 8),  # 50-100k
        (46, 59, 9),  # 10-50k
        (60, 76, 10),  # <10k
    ],
)

CLASSIFICATION_TABLES: Dict[str, ClassificationTable] = {
    CLASSIFY_RESTRICTION: RESTRICTION_GROUP,
    CLASSIFY_SHORTAGE: SHORTAGE_GROUP,
}


def get_restriction_group(rank) -> Optional[int]:
    return RESTRICTION_GROUP.classify(rank)


def get_shortage_group(rank) -> Optional[int]:
    return SHORTAGE_GROUP.classify(rank)
