import math
import re
from typing import Any, Optional

import numpy as np


_NUMBER_PATTERN = re.compile(
    r"^[+-]?((\d+\.?\d*|\.\d+)([eE][+-]?\d+)?|Infinity)$"
)


class TypeNormalizer:
    def is_missing(self, value: Any) -> bool:
        """None, 빈 문자열, 공백 문자열, NaN(pandas 빈 셀)은 결측으로 본다."""
        if value is None:
            return True
        if isinstance(value, str):
            # 공백 문자열도 결측. 0으로 보지 않는다.
            return value.strip() == ""
        if isinstance(value, (float, np.floating)):
            return math.isnan(value)
        return False

    def to_number(self, value: Any) -> Optional[float]:
        """숫자로 해석 가능한 값이면 float, 아니면 None."""
        if self.is_missing(value):
            return None
        if isinstance(value, (bool, np.bool_)):
            return None
        if isinstance(value, (int, float, np.integer, np.floating)):
            return float(value)
        if isinstance(value, str):
            return self._parse_text(value.strip())
        return None

    def _parse_text(self, text: str) -> Optional[float]:
        if not _NUMBER_PATTERN.match(text):
            return None
        if text.endswith("Infinity"):
            return -math.inf if text.startswith("-") else math.inf
        return float(text)


_DEFAULT = TypeNormalizer()


def is_missing(value: Any) -> bool:
    return _DEFAULT.is_missing(value)


def to_number(value: Any) -> Optional[float]:
    return _DEFAULT.to_number(value)
