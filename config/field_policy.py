# config/field_policy.py

import os

DEFAULT_COLOR = "#e5e7eb"

ID_FIELD = os.getenv("CHOROPLETH_ID_FIELD", "iso_code")
POLICY_PATH = os.getenv("CHOROPLETH_POLICY_PATH")
LOG_LEVEL = os.getenv("CHOROPLETH_LOG_LEVEL", "INFO")

# scale_value_to_bucket() 자체 기본 범위와 Normalizer의 기본 범위는 다르다.
BUCKET_SCALE_RANGE = (1, 11)
DEFAULT_SCALE_RANGE = (3, 6)

SCALE = "scale"
CLASSIFY = "classify"
CLASSIFY_RESTRICTION = "classify-restriction"
CLASSIFY_SHORTAGE = "classify-shortage"

POLICY_NAMES = [SCALE, CLASSIFY, CLASSIFY_RESTRICTION, CLASSIFY_SHORTAGE]

DEFAULT_FIELD_POLICIES = {
    "access_rank": {"policy": CLASSIFY_RESTRICTION},
    "needs_rank": {"policy": CLASSIFY_SHORTAGE},
}

FIELD_POLICY_SCHEMA = {
    "type": "object",
    "additionalProperties": {
        "type": "object",
        "required": ["policy"],
        "properties": {
            "policy": {"enum": POLICY_NAMES},
            "scale_range": {
                "type": "array",
                "items": {"type": "integer"},
                "minItems": 2,
                "maxItems": 2,
            },
            "ranges": {
                "type": "array",
                "minItems": 1,
                "items": {
                    "type": "array",
                    "items": {"type": "number"},
                    "minItems": 3,
                    "maxItems": 3,
                },
            },
        },
        "additionalProperties": False,
    },
}
