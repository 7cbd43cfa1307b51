"""On-device storage for map markers the user drops during the day."""

import sqlite3
from datetime import datetime
from typing import Optional

from .config import CONFIG
from .models import Waypoint


class MarkerDB:
    """SQLite database of user-created map markers"""

    def __init__(self, db_path: Optional[str] = None):
        self.db_path = db_path or CONFIG["markers_db"]
        self.conn = sqlite3.connect(self.db_path, check_same_thread=False)
        self._init_schema()

    def _init_schema(self):
        """Create database tables"""
        self.conn.execute("""
            CREATE TABLE IF NOT EXISTS user_markers (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL DEFAULT 'Unnamed Marker',
                lat REAL NOT NULL,
                lon REAL NOT NULL,
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL
            )
        """)
        self.conn.commit()

    def add_marker(self, name: str, lat: float, lon: float) -> int:
        """Add a marker. Returns the marker ID."""
        now = datetime.now().isoformat()
        cursor = self.conn.execute(
            "INSERT INTO user_markers (name, lat, lon, created_at, updated_at) VALUES (?, ?, ?, ?, ?)",
            (name, lat, lon, now, now)
        )
        self.conn.commit()
        return cursor.lastrowid

    def get_markers(self) -> list[Waypoint]:
        """Get all markers, oldest first."""
        cursor = self.conn.execute(
            "SELECT id, name, lat, lon FROM user_markers ORDER BY id"
        )
        return [
            Waypoint(id=row[0], name=row[1], lat=row[2], lon=row[3], is_user_created=True)
            for row in cursor.fetchall()
        ]

    def rename_marker(self, marker_id: int, name: str) -> bool:
        """Rename a marker. Returns False if no such marker."""
        now = datetime.now().isoformat()
        cursor = self.conn.execute(
            "UPDATE user_markers SET name = ?, updated_at = ? WHERE id = ?",
            (name, now, marker_id)
        )
        self.conn.commit()
        return cursor.rowcount > 0

    def delete_marker(self, marker_id: int) -> bool:
        """Delete a marker. Returns False if no such marker."""
        cursor = self.conn.execute("DELETE FROM user_markers WHERE id = ?", (marker_id,))
        self.conn.commit()
        return cursor.rowcount > 0

    def close(self):
        self.conn.close()
