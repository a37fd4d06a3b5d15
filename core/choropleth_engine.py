import logging

from config.field_policy import ID_FIELD
from metrics.stats import gather_stats
from normalization.field_policy import resolve_policies
from normalization.normalization_layer import NormalizationLayer


logger = logging.getLogger(__name__)

class ChoroplethEngine:
    def __init__(self, policies=None, id_field=ID_FIELD):
        self.layer = NormalizationLayer(resolve_policies(policies), id_field=id_field)

    def run(self, entities, fields):
        """
        entities = {iso_code: {field: raw_value, ...}, ...}
        """
        fields = list(fields)

        # 1) 전체 entity 기준 필드별 min/max
        items = self.layer.flatten(entities)
        stats = gather_stats(items, fields)
        logger.info("Stats gathered: %d fields over %d entities", len(stats), len(items))
        for field, field_stats in stats.items():
            if field_stats.is_empty:
                logger.warning("No valid values for field %s", field)

        # 2) stats가 모두 계산된 뒤에만 bucket 산출
        normalized = self.layer.normalize(entities, fields, stats=stats)
        logger.info("Normalization complete: %d entities", len(normalized))

        return {
            "stats": stats,
            "normalized": normalized,
        }
