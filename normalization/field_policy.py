from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

from config.field_policy import (
    CLASSIFY,
    DEFAULT_FIELD_POLICIES,
    DEFAULT_SCALE_RANGE,
    SCALE,
)
from metrics.classification import CLASSIFICATION_TABLES, ClassificationTable
from metrics.scaling import scale_value_to_bucket
from metrics.stats import FieldStats
from normalization.schema_validator import SchemaValidator


@dataclass(frozen=True)
class FieldPolicy:
    """필드 하나에 적용할 버킷 산출 방식."""

    name: str = SCALE
    scale_range: Tuple[int, int] = DEFAULT_SCALE_RANGE
    table: Optional[ClassificationTable] = None

    @property
    def uses_stats(self) -> bool:
        return self.table is None

    def apply(self, value: float, stats: FieldStats) -> Optional[int]:
        if self.table is not None:
            return self.table.classify(value)
        low, high = self.scale_range
        return scale_value_to_bucket(value, stats.min, stats.max, low, high)


DEFAULT_POLICY = FieldPolicy()


def build_policy(field: str, entry: Mapping[str, Any]) -> FieldPolicy:
    name = entry["policy"]
    if name == SCALE:
        low, high = entry.get("scale_range", DEFAULT_SCALE_RANGE)
        return FieldPolicy(name=name, scale_range=(int(low), int(high)))
    if name == CLASSIFY:
        return FieldPolicy(
            name=name, table=ClassificationTable.from_rows(field, entry["ranges"])
        )
    return FieldPolicy(name=name, table=CLASSIFICATION_TABLES[name])


def resolve_policies(
    document: Optional[Mapping[str, Mapping[str, Any]]] = None,
) -> Dict[str, FieldPolicy]:
    """정책 문서(dict)를 검증한 뒤 field -> FieldPolicy 로 변환.

    document가 None이면 기본 정책(access_rank / needs_rank)을 사용한다.
    """
    if document is None:
        document = DEFAULT_FIELD_POLICIES
    SchemaValidator().validate(dict(document))
    return {field: build_policy(field, entry) for field, entry in document.items()}


def policy_for(field: str, policies: Mapping[str, FieldPolicy]) -> FieldPolicy:
    return policies.get(field, DEFAULT_POLICY)
