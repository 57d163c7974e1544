import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from flightquery.api.deps import get_database
from flightquery.db.session import Database
from flightquery.schemas.flight import DepartureRecord, FlightDuration
from flightquery.services.flight_service import fetch_departures, fetch_flight_duration

router = APIRouter(tags=["flights"])
logger = logging.getLogger(__name__)


@router.get("/departures", response_model=list[DepartureRecord])
async def list_departures(db: Database = Depends(get_database)):
    try:
        async with db.connect() as conn:
            return await fetch_departures(conn)
    except Exception:
        logger.exception("Error fetching departure details")
        return JSONResponse(status_code=500, content={"error": "Failed to fetch departure details"})


@router.get("/flight-duration", response_model=FlightDuration)
async def get_flight_duration(
    from_location: Optional[str] = Query(None, alias="from"),
    to_location: Optional[str] = Query(None, alias="to"),
    db: Database = Depends(get_database),
):
    """Scheduled duration between two location codes, case-insensitive."""
    if not from_location or not to_location:
        return JSONResponse(status_code=400, content={"error": 'Please provide both "from" and "to" locations'})

    try:
        async with db.connect() as conn:
            duration = await fetch_flight_duration(conn, from_location, to_location)
    except Exception:
        logger.exception("Error fetching flight duration %s -> %s", from_location, to_location)
        return JSONResponse(status_code=500, content={"error": "An error occurred while fetching the flight duration"})

    if duration is None:
        logger.debug("No flight duration for %s -> %s", from_location, to_location)
        return JSONResponse(status_code=404, content={"error": "No flight duration found for the given locations"})
    return duration
