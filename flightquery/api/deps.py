from fastapi import Request

from flightquery.db.session import Database

def get_database(request: Request) -> Database:
    """The Database built by the app lifespan. Overridden in tests."""
    return request.app.state.database
