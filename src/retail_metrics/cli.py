"""
Command line interface for the RetailMetrics mock API.

Usage:
    retail-metrics serve [--host HOST] [--port PORT] [--seed SEED] [--stores N]
    retail-metrics dump [--seed SEED] [--stores N] [--output FILE]
    retail-metrics check [--seed SEED] [--stores N]
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from .api.validation import VALIDATORS
from .config.models import MockDataConfig
from .config.settings import load_config_with_fallback
from .generators import initialize_mock_data
from .shared.data_store import MockDataStore
from .shared.logging_config import configure_structured_logging

logger = logging.getLogger(__name__)

UNKNOWN_STORE_ID = "INVALID_ID"


def _build_config(args: argparse.Namespace) -> MockDataConfig:
    config = load_config_with_fallback(getattr(args, "config", None))

    server_updates = {}
    for name in ("host", "port"):
        value = getattr(args, name, None)
        if value is not None:
            server_updates[name] = value
    if getattr(args, "reload", False):
        server_updates["reload"] = True

    generation_updates = {}
    if args.seed is not None:
        generation_updates["seed"] = args.seed
    if args.stores is not None:
        generation_updates["store_count"] = args.stores

    # Re-validate so CLI values get the same checks as file values
    data = config.model_dump()
    data["server"].update(server_updates)
    data["generation"].update(generation_updates)
    return MockDataConfig(**data)


def dataset_to_json(data_store: MockDataStore) -> dict:
    """Serialize the data store the way the API endpoints present it."""
    return {
        "stores": [s.model_dump(mode="json", by_alias=True) for s in data_store.stores],
        "sales": data_store.sales_data.model_dump(mode="json", by_alias=True),
        "inventory": data_store.inventory_data.model_dump(mode="json", by_alias=True),
        "storeDetails": {
            store_id: detail.model_dump(mode="json", by_alias=True)
            for store_id, detail in data_store.store_details.items()
        },
        "filters": data_store.filters.model_dump(mode="json", by_alias=True),
    }


def run_checks(config: MockDataConfig) -> list[str]:
    """
    Exercise every endpoint in-process and validate the responses.

    Returns:
        Problems found; empty when every endpoint behaves
    """
    from fastapi.testclient import TestClient

    from .main import create_app

    problems: list[str] = []
    with TestClient(create_app(config)) as client:
        endpoints = [
            ("stores", "/api/stores", None),
            ("sales", "/api/sales", {"startDate": "2023-01-01", "endDate": "2023-03-31"}),
            ("inventory", "/api/inventory", {"region": "Northeast"}),
            ("filters", "/api/filters", None),
        ]
        store_id = None
        for name, path, params in endpoints:
            response = client.get(path, params=params)
            if response.status_code != 200:
                problems.append(f"{path}: HTTP {response.status_code}")
                continue
            data = response.json()
            problems.extend(f"{path}: {p}" for p in VALIDATORS[name](data))
            if name == "stores" and isinstance(data, list) and data:
                store_id = data[0].get("id")

        if store_id:
            path = f"/api/stores/{store_id}/details"
            response = client.get(path)
            if response.status_code != 200:
                problems.append(f"{path}: HTTP {response.status_code}")
            else:
                problems.extend(
                    f"{path}: {p}" for p in VALIDATORS["store_details"](response.json())
                )
        else:
            problems.append("Skipped store details check: no store id available")

        path = f"/api/stores/{UNKNOWN_STORE_ID}/details"
        response = client.get(path)
        if response.status_code != 404:
            problems.append(f"{path}: expected HTTP 404, got {response.status_code}")

    return problems


def _serve(args: argparse.Namespace) -> int:
    from .main import run_server

    run_server(_build_config(args))
    return 0


def _dump(args: argparse.Namespace) -> int:
    config = _build_config(args)
    configure_structured_logging(level=config.server.log_level)

    payload = json.dumps(dataset_to_json(initialize_mock_data(config)), indent=2)
    if args.output:
        output = Path(args.output)
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(payload)
        logger.info(f"Wrote mock dataset to {output}")
    else:
        sys.stdout.write(payload + "\n")
    return 0


def _check(args: argparse.Namespace) -> int:
    config = _build_config(args)
    configure_structured_logging(level=config.server.log_level)

    problems = run_checks(config)
    for problem in problems:
        logger.error(problem)
    if problems:
        logger.error(f"API check failed with {len(problems)} problem(s)")
        return 1
    logger.info("API check passed")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="retail-metrics",
        description="RetailMetrics mock data generator and API server",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_generation_args(sub: argparse.ArgumentParser) -> None:
        sub.add_argument("--seed", type=int, help="Random seed for reproducible data")
        sub.add_argument("--stores", type=int, help="Number of stores to generate")
        sub.add_argument("--config", help="Path to a config.json file")

    serve = subparsers.add_parser("serve", help="Run the API server")
    add_generation_args(serve)
    serve.add_argument("--host", help="Interface to bind")
    serve.add_argument("--port", type=int, help="Port to listen on (default 3001)")
    serve.add_argument("--reload", action="store_true", help="Enable auto-reload")
    serve.set_defaults(handler=_serve)

    dump = subparsers.add_parser("dump", help="Write the generated dataset as JSON")
    add_generation_args(dump)
    dump.add_argument("--output", "-o", help="Output file (default: stdout)")
    dump.set_defaults(handler=_dump)

    check = subparsers.add_parser("check", help="Smoke-test every endpoint in-process")
    add_generation_args(check)
    check.set_defaults(handler=_check)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return args.handler(args)
    except (ValueError, FileNotFoundError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
