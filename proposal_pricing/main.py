"""
Proposal Pricing — Main Entry Point

Price a proposal file directly (CLI):
    python -m proposal_pricing path/to/proposal.json

Run as an API server (for the proposal builder frontend):
    python -m proposal_pricing --serve
    # or: uvicorn proposal_pricing.api:app --reload --port 8000

Or import and run programmatically:
    from proposal_pricing.main import run
    result = run("path/to/proposal.json")

The proposal file holds {"services": [<service records>], "user_id": "..."};
user_id is optional and selects that user's saved pricing parameters.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

from proposal_pricing.config import get_settings
from proposal_pricing.models.enums import SERVICE_LABELS
from proposal_pricing.models.records import service_from_record
from proposal_pricing.models.schemas import MultiServicePricingResult
from proposal_pricing.persistence import ParameterRepository
from proposal_pricing.pricing import aggregate, format_currency, format_number
from proposal_pricing.utils.logger import setup_logging


def run(file_path: str) -> MultiServicePricingResult:
    """Price every service in a proposal file and return the aggregate."""
    setup_logging(get_settings().log_level)
    logger = logging.getLogger(__name__)

    path = Path(file_path)
    if not file_path or not path.exists():
        raise FileNotFoundError(f"Proposal file not found: {file_path!r}")

    with open(path, "r", encoding="utf-8") as f:
        proposal = json.load(f)

    services = [service_from_record(record) for record in proposal.get("services", [])]
    params = ParameterRepository().resolve_for(proposal.get("user_id"))
    logger.info(f"Pricing {len(services)} service(s) from {path.name}")

    result = aggregate(services, params)
    _print_summary(result)
    return result


def _print_summary(result: MultiServicePricingResult) -> None:
    """Log a human-readable summary of the pricing result."""
    logger = logging.getLogger(__name__)

    logger.info("-" * 60)
    logger.info("  PROPOSAL PRICING SUMMARY")
    logger.info("-" * 60)
    for service in result.services:
        label = SERVICE_LABELS.get(service.service_type, service.service_type.value)
        logger.info(
            f"  {label:<32} {format_currency(service.final_price):>20}"
            f"  ({len(service.team_members)} members, {format_number(service.total_hours)} h)"
        )
    logger.info("-" * 60)
    logger.info(f"  Base cost:      {format_currency(result.total_base_cost)}")
    logger.info(f"  Overhead:       {format_currency(result.total_overhead)}")
    logger.info(f"  Margin:         {format_currency(result.total_margin)}")
    logger.info(f"  Total hours:    {format_number(result.total_hours)}")
    logger.info(f"  Team members:   {result.total_team_members}")
    logger.info(f"  Final price:    {format_currency(result.total_final_price)}")
    logger.info("-" * 60)


def serve(host: str | None = None, port: int | None = None) -> None:
    """Start the FastAPI server."""
    import uvicorn

    settings = get_settings()
    setup_logging(settings.log_level)
    logger = logging.getLogger(__name__)
    host = host or settings.host
    port = port or settings.port
    logger.info(f"Starting API server on {host}:{port}")
    uvicorn.run("proposal_pricing.api:app", host=host, port=port, reload=settings.debug)


def cli() -> None:
    """Console entry point: `--serve` starts the API, otherwise price the given file."""
    if "--serve" in sys.argv:
        serve()
    else:
        file_arg = sys.argv[1] if len(sys.argv) > 1 else ""
        run(file_arg)


if __name__ == "__main__":
    cli()
