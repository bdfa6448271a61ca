"""Seed the translations collection from the static word list.

Usage: python -m scripts.seed_translations [--storage file|postgres]
"""

import argparse
import logging

from core.config import TRANSLATIONS_COLLECTION
from core.vocabulary import get_seed_data

logger = logging.getLogger(__name__)


def get_storage(storage_type: str, state_dir: str = None):
    if storage_type == 'postgres':
        from server.postgres_storage import PostgresStorage
        return PostgresStorage()
    from server.file_storage import FileStorage
    return FileStorage(state_dir=state_dir)


def seed(storage) -> int:
    """Write the static word list into the translations collection.
    Returns the number of documents written."""
    documents = get_seed_data()
    storage.seed_collection(TRANSLATIONS_COLLECTION, documents)
    return len(documents)


def main():
    parser = argparse.ArgumentParser(description='Seed the translations collection')
    parser.add_argument('--storage', choices=['file', 'postgres'], default='file')
    parser.add_argument('--state-dir', default=None, help='Directory for file storage')
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)
    count = seed(get_storage(args.storage, args.state_dir))
    logger.info(f"Seeded {count} translations into '{TRANSLATIONS_COLLECTION}'")


if __name__ == '__main__':
    main()
