"""FastAPI server — fare estimates over HTTP.

Run with:
    uvicorn taxi_fare.api.server:app --reload --port 8000

Or:
    taxi-fare-api

Endpoints:
    GET  /health     — liveness probe
    GET  /tariff     — the official tariff in force
    POST /fare       — price a trip from typed numbers
    POST /fare/form  — price a trip from raw form text
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from taxi_fare import __version__
from taxi_fare.api.receipt import Receipt, build_receipt
from taxi_fare.config.settings import get_settings
from taxi_fare.config.tariff import CURRENCY, DEFAULT_TARIFF
from taxi_fare.engine.fare import calculate
from taxi_fare.engine.parsing import parse_trip_form
from taxi_fare.logging_setup import setup_logging
from taxi_fare.models.results import FareBreakdown, InvalidInput
from taxi_fare.models.trip import TripInput

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="Tunisia Taxi Fare API",
    version=__version__,
    description=(
        "Estimate a Tunisian taxi fare from distance, waiting time, big "
        "packages and the night-rate toggle. Rates follow the official "
        "Ministry of Transportation meter tariff."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class FareRequest(BaseModel):
    """Request body for /fare. Only the distance is needed for a price."""
    distance_km: float | None = Field(default=None, description="Trip distance in km")
    waiting_minutes: float | None = Field(default=None, description="Optional waiting time, minutes")
    baggage_count: float | None = Field(default=None, description="Optional number of big packages")
    night_rate: bool = Field(default=False, description="Night tariff (9PM - 5AM)")


class FareFormRequest(BaseModel):
    """Request body for /fare/form — fields exactly as typed into a form."""
    distance: str = Field(default="", description="Distance (km), e.g. '7.9'")
    waiting_time: str = Field(default="", description="Waiting time (minutes); blank if none")
    baggage: str = Field(default="", description="Big packages count; blank if none")
    night_rate: bool = False


class FareResponse(BaseModel):
    """Response from /fare and /fare/form."""
    breakdown: FareBreakdown
    receipt: Receipt


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _price(trip: TripInput) -> FareResponse:
    """Calculate, or raise 422 with the ``InvalidInput`` as detail."""
    result = calculate(trip)
    if isinstance(result, InvalidInput):
        logger.info("Rejected fare request: %s (distance=%r)", result.message, trip.distance_km)
        raise HTTPException(status_code=422, detail=result.model_dump())
    return FareResponse(breakdown=result, receipt=build_receipt(trip, result))


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    """Health check for deployment platforms."""
    return {"status": "ok"}


@app.get("/")
def root():
    """API root — name, version and where to go next."""
    return {
        "name": "Tunisia Taxi Fare API",
        "version": __version__,
        "start_here": "GET /tariff",
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.get("/tariff")
def get_tariff() -> dict[str, Any]:
    """The official tariff used for every estimate."""
    return {"currency": CURRENCY, **DEFAULT_TARIFF.model_dump()}


@app.post("/fare", response_model=FareResponse)
def estimate_fare(req: FareRequest):
    """Price a trip from typed values.

    Example request:
    ```json
    {"distance_km": 7.9, "waiting_minutes": 3, "baggage_count": 2, "night_rate": true}
    ```
    """
    trip = TripInput(**req.model_dump())
    return _price(trip)


@app.post("/fare/form", response_model=FareResponse)
def estimate_fare_from_form(req: FareFormRequest):
    """Price a trip from raw form text.

    Blank or unreadable waiting/baggage fields count as absent; a blank or
    unreadable distance is rejected with 422.
    """
    trip = parse_trip_form(req.distance, req.waiting_time, req.baggage, req.night_rate)
    return _price(trip)


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_json)
    uvicorn.run(
        "taxi_fare.api.server:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.reload,
    )


if __name__ == "__main__":
    main()
