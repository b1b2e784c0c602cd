"""Repository layer responsible for all database access."""

from __future__ import annotations

import sqlite3
from datetime import date
from pathlib import Path
from typing import List, Optional

from deskbooker.domain.models import Desk, DeskBooking
from deskbooker.utils.config import Settings, get_settings
from deskbooker.utils.logger import get_logger


logger = get_logger(__name__)


class DataRepository:
    """SQLite-backed desk inventory and booking store.

    Implements both `DeskRepository` and `DeskBookingRepository` so the
    booking service can be wired against a single storage object.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings or get_settings()
        self._db_path = Path(self._settings.database_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def database_path(self) -> Path:
        return self._db_path

    def _connect(self) -> sqlite3.Connection:
        connection = sqlite3.connect(self._db_path)
        connection.row_factory = sqlite3.Row
        connection.execute("PRAGMA foreign_keys = ON;")
        return connection

    def initialize_database(self) -> None:
        """Create tables and indexes; safe to call on every startup."""
        try:
            with self._connect() as conn:
                cursor = conn.cursor()

                cursor.execute(
                    """
                    CREATE TABLE IF NOT EXISTS Desks (
                        id INTEGER PRIMARY KEY AUTOINCREMENT,
                        description TEXT NOT NULL
                    );
                    """
                )

                cursor.execute(
                    """
                    CREATE TABLE IF NOT EXISTS DeskBookings (
                        id INTEGER PRIMARY KEY AUTOINCREMENT,
                        first_name TEXT NOT NULL,
                        last_name TEXT NOT NULL,
                        email TEXT NOT NULL,
                        date TEXT NOT NULL,
                        desk_id INTEGER NOT NULL,
                        created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
                        FOREIGN KEY (desk_id) REFERENCES Desks(id)
                    );
                    """
                )

                cursor.execute(
                    """
                    CREATE INDEX IF NOT EXISTS idx_desk_bookings_date_desk
                    ON DeskBookings(date, desk_id);
                    """
                )
                conn.commit()
            logger.info("Database initialized at %s", self._db_path)
        except sqlite3.Error as exc:
            raise RuntimeError(f"Database initialization failed: {exc}") from exc

    def seed_desks(self) -> None:
        """Insert configured desks only when the inventory is empty."""
        try:
            with self._connect() as conn:
                cursor = conn.cursor()
                cursor.execute("SELECT COUNT(*) AS count FROM Desks;")
                if int(cursor.fetchone()["count"]) > 0:
                    logger.info("Desk inventory already present; skipping seed")
                    return

                cursor.executemany(
                    "INSERT INTO Desks (description) VALUES (?);",
                    [(description,) for description in self._settings.seed_desk_descriptions],
                )
                conn.commit()
            logger.info(
                "Seeded %s desks",
                len(self._settings.seed_desk_descriptions),
            )
        except sqlite3.Error as exc:
            raise RuntimeError(f"Desk seeding failed: {exc}") from exc

    def create_desk(self, description: str) -> int:
        with self._connect() as conn:
            cursor = conn.cursor()
            cursor.execute(
                "INSERT INTO Desks (description) VALUES (?);",
                (description,),
            )
            conn.commit()
            return int(cursor.lastrowid)

    def list_desks(self) -> List[Desk]:
        with self._connect() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT id, description FROM Desks ORDER BY id ASC;")
            return [
                Desk(id=int(row["id"]), description=str(row["description"]))
                for row in cursor.fetchall()
            ]

    def get_available_desks(self, date: date) -> List[Desk]:
        """Return desks without a booking on `date`, lowest id first."""
        with self._connect() as conn:
            cursor = conn.cursor()
            cursor.execute(
                """
                SELECT d.id, d.description
                FROM Desks AS d
                WHERE NOT EXISTS (
                    SELECT 1
                    FROM DeskBookings AS b
                    WHERE b.desk_id = d.id AND b.date = ?
                )
                ORDER BY d.id ASC;
                """,
                (date.isoformat(),),
            )
            return [
                Desk(id=int(row["id"]), description=str(row["description"]))
                for row in cursor.fetchall()
            ]

    def save(self, booking: DeskBooking) -> int:
        """Insert the booking row and return the created id."""
        with self._connect() as conn:
            cursor = conn.cursor()
            cursor.execute(
                """
                INSERT INTO DeskBookings (first_name, last_name, email, date, desk_id)
                VALUES (?, ?, ?, ?, ?);
                """,
                (
                    booking.first_name,
                    booking.last_name,
                    booking.email,
                    booking.date.isoformat(),
                    booking.desk_id,
                ),
            )
            conn.commit()
            return int(cursor.lastrowid)

    def get_desk_booking(self, booking_id: int) -> Optional[DeskBooking]:
        with self._connect() as conn:
            cursor = conn.cursor()
            cursor.execute(
                """
                SELECT id, first_name, last_name, email, date, desk_id
                FROM DeskBookings
                WHERE id = ?;
                """,
                (booking_id,),
            )
            row = cursor.fetchone()
            if row is None:
                return None
            return _booking_from_row(row)

    def list_desk_bookings(self, booking_date: date) -> List[DeskBooking]:
        with self._connect() as conn:
            cursor = conn.cursor()
            cursor.execute(
                """
                SELECT id, first_name, last_name, email, date, desk_id
                FROM DeskBookings
                WHERE date = ?
                ORDER BY id ASC;
                """,
                (booking_date.isoformat(),),
            )
            return [_booking_from_row(row) for row in cursor.fetchall()]

    def count_desk_bookings(self) -> int:
        with self._connect() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT COUNT(*) AS count FROM DeskBookings;")
            return int(cursor.fetchone()["count"])


def _booking_from_row(row: sqlite3.Row) -> DeskBooking:
    return DeskBooking(
        id=int(row["id"]),
        first_name=str(row["first_name"]),
        last_name=str(row["last_name"]),
        email=str(row["email"]),
        date=date.fromisoformat(str(row["date"])),
        desk_id=int(row["desk_id"]),
    )
