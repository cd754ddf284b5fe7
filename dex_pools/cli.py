"""Command-line entry points: run the API server or export a DEX data snapshot."""

from __future__ import annotations

import argparse
import logging
import sys

import uvicorn

from dex_pools.api.deps import build_subgraph_provider
from dex_pools.application.use_cases.export_dex_data import (
    ExportDexDataInput,
    ExportDexDataUseCase,
)
from dex_pools.domain.exceptions import UpstreamFetchError
from dex_pools.infrastructure.snapshot.json_snapshot import JsonFileDexDataSink
from dex_pools.shared.config import get_settings
from dex_pools.shared.logging_setup import configure_logging

logger = logging.getLogger(__name__)

DEFAULT_EXPORT_PATH = "dex_data.json"


def serve(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Run the DEX pools API server")
    parser.add_argument("--host", help="Override API host")
    parser.add_argument("--port", type=int, help="Override API port")
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.log_level)
    host = args.host or settings.api_host
    port = args.port or settings.port
    logger.info("cli: serving host=%s port=%s", host, port)
    uvicorn.run("dex_pools.main:app", host=host, port=port, log_level=settings.log_level.lower())


def export(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Fetch pools and tokens from every DEX subgraph and write them as JSON"
    )
    parser.add_argument(
        "--output",
        "-o",
        default=DEFAULT_EXPORT_PATH,
        help=f"Destination JSON file (default: {DEFAULT_EXPORT_PATH})",
    )
    parser.add_argument(
        "--monitored-only",
        action="store_true",
        help="Keep only pools whose two tokens are in the monitored token registry",
    )
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.log_level)
    use_case = ExportDexDataUseCase(
        dex_data_port=build_subgraph_provider(settings),
        sink=JsonFileDexDataSink(args.output),
    )
    try:
        result = use_case.execute(ExportDexDataInput(monitored_only=args.monitored_only))
    except UpstreamFetchError as exc:
        logger.error("cli: export_failed detail=%s", exc)
        return 1

    print(f"Wrote {result.tokens} tokens and {result.pools} pools to {result.location}")
    return 0


def export_main() -> None:
    sys.exit(export())


if __name__ == "__main__":
    serve()
