from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path

# Allow running this script directly from repository root.
PROJECT_ROOT = next(
    (parent for parent in Path(__file__).resolve().parents if (parent / "library_db").exists()),
    None,
)
if PROJECT_ROOT and str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from library_db import AsyncpgConnector, CompatExecutor, DbSettings


async def main() -> None:
    logging.basicConfig(level=logging.INFO)
    connector = await AsyncpgConnector.create(DbSettings.from_env())
    try:
        db = CompatExecutor(connector)
        # Temporary tables live on one connection, so pin it for the whole demo.
        async with db.transaction() as tx:
            await tx.execute(
                "CREATE TEMP TABLE books (id SERIAL PRIMARY KEY, title TEXT NOT NULL, quantity INT NOT NULL)"
            )

            rows, _ = await tx.execute(
                "INSERT INTO books (title, quantity) VALUES (?, ?) RETURNING id",
                ["The Dispossessed", 3],
            )
            print("inserted id:", rows[0]["id"])

            rows, _ = await tx.execute(
                "SELECT * FROM books WHERE quantity > ? AND title ILIKE ?",
                [0, "%dispossessed%"],
            )
            print("rows:", rows)

            (status,) = await tx.execute(
                "UPDATE books SET quantity = ? WHERE id = ?",
                [5, rows[0]["id"]],
            )
            print("status:", status)
    finally:
        await connector.close()


if __name__ == "__main__":
    asyncio.run(main())
