from typing import Any, Dict, Hashable, List, Mapping, Optional, Sequence

from config.field_policy import ID_FIELD
from metrics.stats import FieldStats, gather_stats
from normalization.field_policy import FieldPolicy, policy_for, resolve_policies
from normalization.type_normalizer import to_number


class NormalizationLayer:
    """entity별 raw 지표를 choropleth용 정수 bucket으로 바꾼다.

    1) 전체 entity에 대해 필드별 min/max를 한 번 수집하고
    2) entity/필드마다 정책(고정 구간표 또는 선형 스케일)을 적용한다.
    결측/비숫자 값은 bucket 대신 None 으로 남는다.
    """

    def __init__(
        self,
        policies: Optional[Mapping[str, FieldPolicy]] = None,
        id_field: str = ID_FIELD,
    ):
        self.policies = dict(policies) if policies is not None else resolve_policies()
        self.id_field = id_field

    def flatten(self, entities: Mapping[Hashable, Mapping[str, Any]]) -> List[Dict[str, Any]]:
        return [{self.id_field: key, **record} for key, record in entities.items()]

    def normalize(
        self,
        entities: Mapping[Hashable, Mapping[str, Any]],
        fields: Sequence[str],
        stats: Optional[Mapping[str, FieldStats]] = None,
    ) -> Dict[Hashable, Dict[str, Any]]:
        keys = list(entities.keys())
        items = self.flatten(entities)
        if stats is None:
            stats = gather_stats(items, fields)

        normalized = {}
        # entity 레코드 안의 id 필드가 덮어써도 키는 입력 그대로 유지
        for key, item in zip(keys, items):
            record = dict(item)
            for field in fields:
                record[field] = self.normalize_value(field, item.get(field), stats)
            normalized[key] = record
        return normalized

    def normalize_value(
        self, field: str, raw: Any, stats: Mapping[str, FieldStats]
    ) -> Optional[int]:
        value = to_number(raw)
        if value is None:
            return None
        policy = policy_for(field, self.policies)
        return policy.apply(value, stats.get(field, FieldStats()))


def create_normalized_object(
    entities: Mapping[Hashable, Mapping[str, Any]],
    fields: Sequence[str],
    policies: Optional[Mapping[str, Mapping[str, Any]]] = None,
) -> Dict[Hashable, Dict[str, Any]]:
    """Normalize ``entities`` for ``fields``; ``policies`` is a raw policy document."""
    layer = NormalizationLayer(resolve_policies(policies))
    return layer.normalize(entities, fields)
