from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncConnection

from flightquery.schemas.flight import DepartureRecord, FlightDuration

# Date and time are rendered by TO_CHAR here, so /departures does not depend on
# the API server's time zone the way /ticket does.
DEPARTURES_QUERY = text("""
    SELECT
        f.flight_id,
        TO_CHAR(f.departure_date, 'YYYY-MM-DD') AS departure_date,
        TO_CHAR(f.departure_date, 'HH24:MI:SS') AS departure_time,
        f.origin,
        f.destination,
        a.company AS airline
    FROM flight f
    JOIN airplane a ON f.airplane_id = a.airplane_id
""")

FLIGHT_DURATION_QUERY = text("""
    SELECT GET_FLIGHT_TIME(
        UPPER(:from_location),
        UPPER(:to_location)
    ) AS flight_duration
    FROM dual
""")


async def fetch_departures(conn: AsyncConnection) -> list[DepartureRecord]:
    result = await conn.execute(DEPARTURES_QUERY)
    return [DepartureRecord(**row) for row in result.mappings().all()]


async def fetch_flight_duration(conn: AsyncConnection, from_location: str, to_location: str) -> FlightDuration | None:
    """Duration computed by GET_FLIGHT_TIME, or None when the function has no answer."""
    # Codes are upper-cased here and again by UPPER() in the query.
    params = {"from_location": from_location.upper(), "to_location": to_location.upper()}
    result = await conn.execute(FLIGHT_DURATION_QUERY, params)
    row = result.mappings().first()
    if row is None or row["flight_duration"] is None:
        return None
    return FlightDuration(duration=row["flight_duration"])
