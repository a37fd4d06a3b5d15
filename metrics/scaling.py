import math

from config.field_policy import BUCKET_SCALE_RANGE


def round_half_away(value: float) -> int:
    """4.5 -> 5, -4.5 -> -5."""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def _interpolation_ratio(value: float, min_value: float, max_value: float) -> float:
    span = max_value - min_value
    if math.isinf(span):
        # float 한계 근처에서는 절반 값으로 계산해 overflow를 피한다.
        return (value / 2 - min_value / 2) / (max_value / 2 - min_value / 2)
    return (value - min_value) / span


def scale_value_to_bucket(
    value: float,
    min_value: float,
    max_value: float,
    scale_min: int = BUCKET_SCALE_RANGE[0],
    scale_max: int = BUCKET_SCALE_RANGE[1],
) -> int:
    """raw 값을 관측 min/max 기준으로 [scale_min, scale_max] 버킷에 선형 매핑한다.

    결측값은 호출자가 미리 걸러낸다. min/max가 무한대라 비율을 정할 수 없으면
    scale_min을 돌려준다.
    """
    # 변동이 없으면 중간 버킷
    if min_value == max_value:
        return round_half_away((scale_min + scale_max) / 2)

    if value <= min_value:
        return scale_min
    if value >= max_value:
        return scale_max

    ratio = _interpolation_ratio(value, min_value, max_value)
    if not math.isfinite(ratio):
        return scale_min
    scaled = round_half_away(scale_min + ratio * (scale_max - scale_min))
    return min(max(scaled, scale_min), scale_max)
