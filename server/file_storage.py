"""File-based storage implementation."""

import json
import logging
import os

from core.interfaces import KeyValueStore, DocumentStore

logger = logging.getLogger(__name__)


class FileStorage(KeyValueStore, DocumentStore):
    """File-based storage implementation.

    Key-value state is kept in one JSON file per user, documents in a
    single JSON file shaped {collection: {id: fields}}.
    """

    def __init__(self, state_dir: str = None):
        # Project root is one level up from server/
        project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
        self.state_dir = state_dir or project_root

    def _get_state_file(self, user_id: str) -> str:
        """Get state file path for a user."""
        if user_id == "default":
            return os.path.join(self.state_dir, 'drill_state.json')
        return os.path.join(self.state_dir, f'drill_state_{user_id}.json')

    def _get_documents_file(self) -> str:
        return os.path.join(self.state_dir, 'drill_documents.json')

    def _load_json(self, path: str) -> dict:
        if os.path.exists(path):
            try:
                with open(path, 'r', encoding='utf-8') as f:
                    data = json.load(f)
            except (OSError, ValueError) as e:
                logger.error(f"Error reading {path}: {e}")
                return {}
            if not isinstance(data, dict):
                logger.error(f"Ignoring {path}: expected a JSON object")
                return {}
            return data
        return {}

    def _save_json(self, path: str, data: dict) -> None:
        os.makedirs(os.path.dirname(path) or '.', exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    def get(self, key: str, user_id: str = "default"):
        return self._load_json(self._get_state_file(user_id)).get(key)

    def set(self, key: str, value, user_id: str = "default") -> None:
        state_file = self._get_state_file(user_id)
        try:
            state = self._load_json(state_file)
            state[key] = value
            self._save_json(state_file, state)
        except Exception as e:
            logger.error(f"Error saving '{key}' for {user_id}: {e}")
            raise

    def list_users(self) -> list[str]:
        """List all user IDs with saved state."""
        users = []
        if os.path.exists(self.state_dir):
            for filename in os.listdir(self.state_dir):
                if filename == 'drill_state.json':
                    users.append('default')
                elif filename.startswith('drill_state_') and filename.endswith('.json'):
                    users.append(filename[12:-5])  # Remove 'drill_state_' and '.json'
        return users

    def fetch_collection(self, name: str) -> list[dict]:
        collection = self._load_json(self._get_documents_file()).get(name, {})
        if not isinstance(collection, dict):
            return []
        return [{'id': doc_id, **fields} for doc_id, fields in collection.items()]

    def seed_collection(self, name: str, documents: list[dict]) -> None:
        documents_file = self._get_documents_file()
        try:
            all_docs = self._load_json(documents_file)
            collection = all_docs.setdefault(name, {})
            for doc in documents:
                fields = {k: v for k, v in doc.items() if k != 'id'}
                collection[str(doc['id'])] = fields
            self._save_json(documents_file, all_docs)
        except Exception as e:
            logger.error(f"Error seeding collection '{name}': {e}")
            raise
