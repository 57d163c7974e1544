from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncConnection

from flightquery.schemas.ticket import TicketRecord

TICKET_QUERY = text("""
    SELECT
        t.passenger_id,
        t.flight_id,
        t.seating_class,
        f.departure_date AS departure_at,
        f.arrival_date AS arrival_at,
        f.origin AS origin_code,
        origin_loc.locationDesc AS origin_airport,
        f.destination AS destination_code,
        destination_loc.locationDesc AS destination_airport,
        a.airplane_name AS airplane,
        a.company AS airline
    FROM ticket t
    JOIN flight f ON t.flight_id = f.flight_id
    JOIN location origin_loc ON f.origin = origin_loc.locationCode
    JOIN location destination_loc ON f.destination = destination_loc.locationCode
    JOIN airplane a ON f.airplane_id = a.airplane_id
    WHERE t.passenger_id = :ticket_number
""")


def split_timestamp(value: datetime | str | None) -> tuple[str | None, str | None]:
    """Return (YYYY-MM-DD, HH:MM:SS) read off the server's local clock.

    Oracle DATE columns come back naive and are taken as local already;
    aware values are converted to local time first. A NULL column gives
    (None, None).
    """
    if value is None:
        return None, None
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    if value.tzinfo is not None:
        value = value.astimezone()
    return value.strftime("%Y-%m-%d"), value.strftime("%H:%M:%S")


def to_ticket_record(row: Mapping[str, Any]) -> TicketRecord:
    departure_date, departure_time = split_timestamp(row["departure_at"])
    arrival_date, arrival_time = split_timestamp(row["arrival_at"])
    return TicketRecord(
        **row,
        departure_date=departure_date,
        departure_time=departure_time,
        arrival_date=arrival_date,
        arrival_time=arrival_time,
    )


async def fetch_tickets(conn: AsyncConnection, ticket_number: str) -> list[TicketRecord]:
    """All tickets held by a passenger. An empty list means no match."""
    result = await conn.execute(TICKET_QUERY, {"ticket_number": ticket_number})
    rows = result.mappings().all()
    return [to_ticket_record(row) for row in rows]
