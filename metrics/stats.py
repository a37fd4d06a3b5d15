from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Sequence

from normalization.type_normalizer import to_number


@dataclass(frozen=True)
class FieldStats:
    """필드 하나의 유효값 min/max.

    유효값이 하나도 없으면 min=+inf, max=-inf 센티널이 그대로 남는다.
    """

    min: float = math.inf
    max: float = -math.inf
    count: int = 0

    @property
    def is_empty(self) -> bool:
        return self.count == 0

    def include(self, value: float) -> "FieldStats":
        return FieldStats(
            min=min(self.min, value),
            max=max(self.max, value),
            count=self.count + 1,
        )


def gather_stats(
    entities: Sequence[Mapping[str, Any]], fields: Sequence[str]
) -> Dict[str, FieldStats]:
    """Collect min/max for each requested field, skipping missing and non-numeric values."""
    stats: Dict[str, FieldStats] = {}
    for field in fields:
        field_stats = FieldStats()
        for item in entities:
            value = to_number(item.get(field))
            if value is None:
                continue
            field_stats = field_stats.include(value)
        stats[field] = field_stats
    return stats
