import logging
from typing import Optional
from databases import Database
from userhub.modules.settings import DATABASE_URL

logger = logging.getLogger("userhub.database")

# Create the database instance
database = Database(DATABASE_URL)

USERS_TABLE = """
CREATE TABLE IF NOT EXISTS users (
    id TEXT PRIMARY KEY,
    name TEXT,
    email TEXT UNIQUE,
    password_hash TEXT NOT NULL,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
)
"""


async def connect_to_db(db: Optional[Database] = None):
    db = db or database
    if not db.is_connected:
        await db.connect()
        logger.info("Database connected")


async def disconnect_from_db(db: Optional[Database] = None):
    db = db or database
    if db.is_connected:
        await db.disconnect()
        logger.info("Database disconnected")


async def init_db(db: Optional[Database] = None):
    """Create the users table if it does not exist yet."""
    db = db or database
    await db.execute(query=USERS_TABLE)
