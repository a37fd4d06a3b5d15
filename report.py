import json
from typing import Any, Dict, Hashable, Mapping, Optional, Sequence

import pandas as pd

from metrics.stats import FieldStats


def normalized_to_dataframe(
    normalized: Mapping[Hashable, Mapping[str, Any]],
    fields: Optional[Sequence[str]] = None,
) -> pd.DataFrame:
    df = pd.DataFrame.from_dict(dict(normalized), orient="index")
    if fields is not None:
        df = df.reindex(columns=list(fields))
        df = df.astype("Int64")
    return df


def bucket_distribution(
    normalized: Mapping[Hashable, Mapping[str, Any]], field: str
) -> Dict[str, Any]:
    """필드 하나의 bucket별 entity 수와 결측 수."""
    series = pd.Series(
        [record.get(field) for record in normalized.values()], dtype="Int64"
    )
    counts = series.value_counts().sort_index()
    return {
        "buckets": {int(bucket): int(count) for bucket, count in counts.items()},
        "missing": int(series.isna().sum()),
    }


def stats_to_dict(stats: Mapping[str, FieldStats]) -> Dict[str, Dict[str, Any]]:
    # inf 센티널은 JSON에 그대로 쓸 수 없어 None으로 남긴다.
    return {
        field: {
            "min": None if s.is_empty else s.min,
            "max": None if s.is_empty else s.max,
            "count": s.count,
        }
        for field, s in stats.items()
    }


def to_json(payload: Mapping[str, Any]) -> str:
    return json.dumps(payload, ensure_ascii=False, indent=2, default=str)
