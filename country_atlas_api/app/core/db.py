"""
SQLite storage and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``), applying migrations on application start
(``init_db``) and wiping the store (``reset_db``).  The default
database is SQLite's ``:memory:`` database, so all data lives in
process memory.  Because every new connection to ``:memory:`` opens a
fresh, empty database, a single connection is shared for the lifetime
of the process in that mode.  A file database gets a new connection per
operation.

Nested arrays and objects (industries, trading partners, tags,
ideologies...) are stored as JSON text; ``encode_json`` and
``decode_json`` convert them at the service boundary.

Relations between tables follow the ``country_id`` convention only.
No foreign keys are declared, so deleting a country leaves its
records in place.
"""

import json
import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, Optional

from .config import settings

MEMORY_DATABASE = ":memory:"

# Tables created by the migrations below, children first.
TABLES = (
    "timeline_events",
    "political_leaders",
    "political_systems",
    "political_parties",
    "international_relations",
    "historical_laws",
    "statistics",
    "economic_data",
    "countries",
)

_shared_connection: Optional[sqlite3.Connection] = None

logger = logging.getLogger(__name__)


def get_database_path() -> str:
    """Compute the path to the SQLite database.

    ``:memory:`` and absolute paths are used as is.  Relative paths are
    resolved against the project root.
    """
    db_url = settings.database_url
    if db_url == MEMORY_DATABASE or os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / db_url).resolve())


def _connect(db_path: str) -> sqlite3.Connection:
    # Route handlers and the test client may touch the shared connection
    # from different threads.
    conn = sqlite3.connect(db_path, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    return conn


def get_connection() -> sqlite3.Connection:
    """Return a connection to the configured database.

    Callers must hand the connection back with ``release_connection``
    rather than closing it, since the in-memory connection is shared.
    """
    global _shared_connection
    db_path = get_database_path()
    if db_path != MEMORY_DATABASE:
        return _connect(db_path)
    if _shared_connection is None:
        _shared_connection = _connect(db_path)
    return _shared_connection


def release_connection(conn: sqlite3.Connection) -> None:
    """Close ``conn`` unless it is the shared in-memory connection."""
    if conn is not _shared_connection:
        conn.close()


@contextmanager
def get_cursor() -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and commits on success."""
    conn = get_connection()
    try:
        yield conn.cursor()
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        release_connection(conn)


def encode_json(value: Any) -> Optional[str]:
    """Serialize a nested value for a JSON text column."""
    if value is None:
        return None
    return json.dumps(value)


def decode_json(value: Optional[str]) -> Any:
    """Deserialize a JSON text column; unreadable values become ``None``."""
    if value is None or value == "":
        return None
    try:
        return json.loads(value)
    except (TypeError, json.JSONDecodeError):
        logger.warning("Discarding malformed JSON column value %r", value)
        return None


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: Initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS countries (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            alpha2_code TEXT NOT NULL,
            alpha3_code TEXT NOT NULL,
            capital TEXT,
            region TEXT,
            subregion TEXT,
            population INTEGER,
            area REAL,
            flag_url TEXT,
            coat_of_arms_url TEXT,
            map_url TEXT,
            independent INTEGER,
            un_member INTEGER,
            currencies TEXT,
            languages TEXT,
            borders TEXT,
            timezones TEXT,
            start_of_week TEXT,
            capital_info TEXT,
            postal_code TEXT,
            flag TEXT,
            country_info TEXT
        );

        CREATE TABLE IF NOT EXISTS timeline_events (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            country_id INTEGER NOT NULL,
            title TEXT NOT NULL,
            description TEXT NOT NULL,
            date TEXT NOT NULL,
            event_type TEXT NOT NULL,
            icon TEXT,
            tags TEXT
        );

        CREATE TABLE IF NOT EXISTS political_leaders (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            country_id INTEGER NOT NULL,
            name TEXT NOT NULL,
            title TEXT NOT NULL,
            party TEXT,
            image_url TEXT,
            start_date TEXT,
            ideologies TEXT
        );

        CREATE TABLE IF NOT EXISTS political_systems (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            country_id INTEGER NOT NULL,
            type TEXT NOT NULL,
            details TEXT,
            freedom_index INTEGER,
            election_system TEXT,
            government_branches TEXT,
            democratic_principles TEXT,
            international_relations TEXT,
            laws TEXT,
            organizations TEXT,
            has_unstable_political_situation INTEGER NOT NULL DEFAULT 0,
            ongoing_conflicts TEXT
        );

        CREATE TABLE IF NOT EXISTS international_relations (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            country_id INTEGER NOT NULL,
            partner_country TEXT NOT NULL,
            relation_type TEXT NOT NULL,
            relation_strength TEXT,
            details TEXT,
            start_date TEXT,
            iso_code TEXT
        );

        CREATE TABLE IF NOT EXISTS historical_laws (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            country_id INTEGER NOT NULL,
            title TEXT NOT NULL,
            description TEXT,
            date TEXT,
            category TEXT,
            status TEXT
        );

        CREATE TABLE IF NOT EXISTS statistics (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            country_id INTEGER NOT NULL,
            type TEXT NOT NULL,
            data TEXT,
            year INTEGER
        );

        CREATE TABLE IF NOT EXISTS economic_data (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            country_id INTEGER NOT NULL,
            gdp INTEGER,
            gdp_per_capita INTEGER,
            gdp_growth TEXT,
            inflation TEXT,
            main_industries TEXT,
            trading_partners TEXT,
            challenges TEXT,
            reforms TEXT,
            outlook TEXT,
            initiatives TEXT
        );
        """,
    ),
    # Migration 2: Political parties
    (
        2,
        """
        CREATE TABLE IF NOT EXISTS political_parties (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            country_id INTEGER NOT NULL,
            name TEXT NOT NULL,
            acronym TEXT,
            color TEXT,
            ideology TEXT,
            logo_url TEXT,
            founded_year INTEGER,
            is_ruling INTEGER NOT NULL DEFAULT 0,
            seats INTEGER,
            total_seats INTEGER
        );
        """,
    ),
    # Migration 3: Lookup indices for country codes and country_id columns
    (
        3,
        """
        CREATE INDEX IF NOT EXISTS idx_countries_alpha2 ON countries(alpha2_code);
        CREATE INDEX IF NOT EXISTS idx_countries_alpha3 ON countries(alpha3_code);
        CREATE INDEX IF NOT EXISTS idx_timeline_events_country_id ON timeline_events(country_id);
        CREATE INDEX IF NOT EXISTS idx_political_leaders_country_id ON political_leaders(country_id);
        CREATE INDEX IF NOT EXISTS idx_political_systems_country_id ON political_systems(country_id);
        CREATE INDEX IF NOT EXISTS idx_political_parties_country_id ON political_parties(country_id);
        CREATE INDEX IF NOT EXISTS idx_international_relations_country_id ON international_relations(country_id);
        CREATE INDEX IF NOT EXISTS idx_historical_laws_country_id ON historical_laws(country_id);
        CREATE INDEX IF NOT EXISTS idx_statistics_country_id ON statistics(country_id);
        CREATE INDEX IF NOT EXISTS idx_economic_data_country_id ON economic_data(country_id);
        """,
    ),
]


def init_db() -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any newer entries of
    ``MIGRATIONS`` in order.
    """
    with get_cursor() as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                logger.debug("Applied migration %s", version)
                current_version = version


def reset_db() -> None:
    """Drop every table and rebuild an empty schema.

    Auto-increment counters start again from 1 because the tables
    (and their ``sqlite_sequence`` rows) are recreated.
    """
    with get_cursor() as cursor:
        for table in TABLES:
            cursor.execute(f"DROP TABLE IF EXISTS {table}")
        cursor.execute("DROP TABLE IF EXISTS migrations")
    init_db()
    logger.info("Store reset")
