import argparse
import logging
from pathlib import Path

from jsonschema import ValidationError

from config.field_policy import ID_FIELD, LOG_LEVEL, POLICY_PATH
from core.choropleth_engine import ChoroplethEngine
from loaders.csv_loader import CSVLoader
from normalization.schema_validator import SchemaValidator
from report import bucket_distribution, stats_to_dict, to_json


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Normalize per-entity indicators into choropleth buckets."
    )
    parser.add_argument("data", type=Path, help="CSV file with one row per entity")
    parser.add_argument(
        "--id-column",
        default=ID_FIELD,
        help=f"Identifier column (default: {ID_FIELD})",
    )
    parser.add_argument(
        "--fields",
        nargs="+",
        help="Fields to normalize (default: every column except the identifier)",
    )
    parser.add_argument(
        "--policies",
        type=Path,
        default=Path(POLICY_PATH) if POLICY_PATH else None,
        help="Field policy JSON (env: CHOROPLETH_POLICY_PATH)",
    )
    parser.add_argument("--output", type=Path, help="Write JSON here instead of stdout")
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Include field stats and bucket distribution in the output",
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    loader = CSVLoader()
    try:
        policies = SchemaValidator().load(args.policies) if args.policies else None
        entities = loader.load_entities(args.data, args.id_column)
    except (FileNotFoundError, ValueError, ValidationError) as exc:
        raise SystemExit(f"입력 오류: {exc}")

    fields = args.fields or [
        column for column in loader.peek_columns(args.data) if column != args.id_column
    ]
    engine = ChoroplethEngine(policies=policies, id_field=args.id_column)
    result = engine.run(entities, fields)

    payload = {"normalized": result["normalized"]}
    if args.summary:
        payload["stats"] = stats_to_dict(result["stats"])
        payload["distribution"] = {
            field: bucket_distribution(result["normalized"], field) for field in fields
        }

    text = to_json(payload)
    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(text, encoding="utf-8")
        logger.info("Saved %d entities to %s", len(result["normalized"]), args.output)
    else:
        print(text)


if __name__ == "__main__":
    main()
