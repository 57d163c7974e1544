import asyncio
import os
import time

from flightquery.core.config import Settings
from flightquery.db.session import Database

settings = Settings()
if not (settings.DATABASE_URL or settings.DB_CONNECTION_STRING):
    raise SystemExit("DB_CONNECTION_STRING (or DATABASE_URL) is not set")

target = settings.DATABASE_URL.split("@")[-1] if settings.DATABASE_URL else settings.DB_CONNECTION_STRING
timeout_s = int(os.getenv("DB_WAIT_TIMEOUT", "60"))


async def probe() -> None:
    db = Database.from_settings(settings)
    try:
        async with db.connect():
            pass
    finally:
        await db.dispose()


start = time.time()
last_err = None

print(f"[wait_for_db] Waiting for database at {target} user={settings.DB_USER or '-'} (timeout={timeout_s}s)")
while True:
    try:
        asyncio.run(probe())
        print("[wait_for_db] Database is ready.")
        break
    except Exception as e:
        last_err = e
        if time.time() - start > timeout_s:
            print(f"[wait_for_db] Timed out waiting for DB. Last error: {last_err}")
            raise
        time.sleep(1)
