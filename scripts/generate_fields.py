"""CLI entrypoint for recomputing a feature's generated catalog fields."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

# Ensure the project root is on sys.path when the script is run directly
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import click
import yaml

from packages.common.config import load_config
from packages.common.errors import CatalogError
from packages.common.logging import get_logger, setup_logging
from packages.resources.feature_record import FeatureRecord
from packages.resources.query_encoding import encode_link_queries

logger = get_logger(__name__)


def _load_record(path: str) -> FeatureRecord:
    """Load a feature record from a YAML or JSON file (JSON is valid YAML)."""
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    return FeatureRecord.model_validate(raw)


def _describe(record: FeatureRecord) -> dict[str, Any]:
    reqs = record.java_se_version_requirements
    return {
        "provide_feature": record.provide_feature,
        "links": [
            {
                "label": link.label,
                "suffix": link.link_label_suffix,
                "query": encode_link_queries(link),
            }
            for link in record.get_links()
        ],
        "java_versions": reqs.version_display_string if reqs else None,
        "matching_key": record.create_matching_data().model_dump(mode="json"),
    }


@click.command()
@click.argument("record_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--config", "config_path", default="config/default.yaml", help="Config file path")
@click.option(
    "--compare",
    "compare_path",
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help="Second record; report whether both describe the same feature",
)
@click.option(
    "--edition-checking/--no-edition-checking",
    default=None,
    help="Reject unknown editions in appliesTo (overrides config)",
)
def main(
    record_path: str,
    config_path: str,
    compare_path: str | None,
    edition_checking: bool | None,
) -> None:
    """Recompute links, Java display string and matching key for a feature."""
    cfg = load_config(config_path)
    setup_logging(cfg.logging.level, cfg.logging.json_logs)

    strict = cfg.catalog.perform_edition_checking if edition_checking is None else edition_checking

    record = _load_record(record_path)
    try:
        record.update_generated_fields(perform_edition_checking=strict)
    except CatalogError as e:
        logger.error("generate_fields_failed", path=record_path, error=str(e))
        raise click.ClickException(str(e)) from e

    output = _describe(record)
    if compare_path is not None:
        other = _load_record(compare_path)
        output["same_feature"] = other.create_matching_data() == record.create_matching_data()
        logger.info("records_compared", same_feature=output["same_feature"])

    click.echo(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
