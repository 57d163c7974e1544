#!/usr/bin/env python3
"""
Wait for the database, then hand the process over to uvicorn.
"""
import os
import sys

# 1) Wait for DB
import wait_for_db  # noqa: F401

# 2) Start uvicorn (replace current process) on the configured port
from flightquery.core.config import Settings

port = str(Settings().PORT)
os.execv(
    sys.executable,
    [sys.executable, "-m", "uvicorn", "flightquery.main:app", "--host", "0.0.0.0", "--port", port],
)
