# normalization/schema_validator.py

import json
from pathlib import Path
from typing import Any, Dict

from jsonschema import validate

from config.field_policy import CLASSIFY, FIELD_POLICY_SCHEMA, SCALE


def _as_json(value):
    # jsonschema는 tuple을 array로 보지 않는다.
    if isinstance(value, dict):
        return {key: _as_json(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_as_json(item) for item in value]
    return value


class SchemaValidator:
    def validate(self, document: Dict[str, Any]) -> bool:
        """필드 정책 문서를 jsonschema + 의미 규칙으로 검사한다."""
        validate(instance=_as_json(document), schema=FIELD_POLICY_SCHEMA)
        for field, entry in document.items():
            policy = entry["policy"]
            if "scale_range" in entry:
                if policy != SCALE:
                    raise ValueError(
                        f"[Policy Error] {field}: scale_range only applies to '{SCALE}'"
                    )
                low, high = entry["scale_range"]
                if low > high:
                    raise ValueError(
                        f"[Policy Error] {field}: scale_range {low} > {high}"
                    )
            if policy == CLASSIFY and "ranges" not in entry:
                raise ValueError(f"[Policy Error] {field}: '{CLASSIFY}' requires ranges")
            if policy != CLASSIFY and "ranges" in entry:
                raise ValueError(
                    f"[Policy Error] {field}: ranges only apply to '{CLASSIFY}'"
                )
        return True

    def load(self, path: Path) -> Dict[str, Any]:
        file_path = Path(path)
        if not file_path.exists():
            raise FileNotFoundError(f"Policy file not found: {path}")
        document = json.loads(file_path.read_text(encoding="utf-8"))
        self.validate(document)
        return document
