"""PostgreSQL storage implementation."""

import json
import logging
import os
import psycopg2
from psycopg2.extras import RealDictCursor

from core.interfaces import KeyValueStore, DocumentStore

logger = logging.getLogger(__name__)


class PostgresStorage(KeyValueStore, DocumentStore):
    """PostgreSQL-based storage implementation."""

    def __init__(self, db_url: str = None):
        self.db_url = db_url or os.environ.get(
            'DATABASE_URL',
            'postgresql://localhost:5432/vocadrill'
        )
        self._conn = None
        self._initialized = False

    @property
    def conn(self):
        """Lazy connection initialization."""
        if self._conn is None or self._conn.closed:
            self._conn = psycopg2.connect(self.db_url)
            if not self._initialized:
                self._init_db()
                self._initialized = True
        return self._conn

    def _init_db(self):
        """Create tables if they don't exist."""
        with self._conn.cursor() as cur:
            cur.execute("""
                CREATE TABLE IF NOT EXISTS kv_store (
                    user_id VARCHAR(255) NOT NULL,
                    key VARCHAR(255) NOT NULL,
                    value JSONB NOT NULL,
                    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                    PRIMARY KEY (user_id, key)
                )
            """)
            cur.execute("""
                CREATE TABLE IF NOT EXISTS documents (
                    collection VARCHAR(255) NOT NULL,
                    doc_id VARCHAR(255) NOT NULL,
                    data JSONB NOT NULL,
                    position SERIAL,
                    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                    PRIMARY KEY (collection, doc_id)
                )
            """)
        self._conn.commit()

    def close(self):
        """Close the database connection."""
        if self._conn and not self._conn.closed:
            self._conn.close()

    def get(self, key: str, user_id: str = "default"):
        try:
            with self.conn.cursor(cursor_factory=RealDictCursor) as cur:
                cur.execute(
                    "SELECT value FROM kv_store WHERE user_id = %s AND key = %s",
                    (user_id, key)
                )
                row = cur.fetchone()
                if row:
                    return row['value']
                return None
        except psycopg2.Error as e:
            logger.error(f"Error loading '{key}' for {user_id}: {e}")
            return None

    def set(self, key: str, value, user_id: str = "default") -> None:
        try:
            with self.conn.cursor() as cur:
                cur.execute("""
                    INSERT INTO kv_store (user_id, key, value, updated_at)
                    VALUES (%s, %s, %s, CURRENT_TIMESTAMP)
                    ON CONFLICT (user_id, key)
                    DO UPDATE SET value = EXCLUDED.value, updated_at = CURRENT_TIMESTAMP
                """, (user_id, key, json.dumps(value)))
            self.conn.commit()
        except psycopg2.Error as e:
            logger.error(f"Error saving '{key}' for {user_id}: {e}")
            self.conn.rollback()
            raise

    def fetch_collection(self, name: str) -> list[dict]:
        with self.conn.cursor(cursor_factory=RealDictCursor) as cur:
            cur.execute(
                "SELECT doc_id, data FROM documents WHERE collection = %s ORDER BY position",
                (name,)
            )
            return [{'id': row['doc_id'], **row['data']} for row in cur.fetchall()]

    def seed_collection(self, name: str, documents: list[dict]) -> None:
        try:
            with self.conn.cursor() as cur:
                for doc in documents:
                    fields = {k: v for k, v in doc.items() if k != 'id'}
                    cur.execute("""
                        INSERT INTO documents (collection, doc_id, data)
                        VALUES (%s, %s, %s)
                        ON CONFLICT (collection, doc_id)
                        DO UPDATE SET data = EXCLUDED.data
                    """, (name, str(doc['id']), json.dumps(fields)))
            self.conn.commit()
            logger.info(f"Seeded {len(documents)} documents into '{name}'")
        except psycopg2.Error as e:
            logger.error(f"Error seeding collection '{name}': {e}")
            self.conn.rollback()
            raise
