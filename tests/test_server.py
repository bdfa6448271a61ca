"""API tests for the vocadrill server."""

import tempfile
import unittest

from fastapi.testclient import TestClient

import server.app as app_module
from core import vocabulary
from core.config import ERROR_COUNTS_KEY, TRANSLATIONS_COLLECTION
from core.models import WordPair
from server.file_storage import FileStorage


class TestDrillAPI(unittest.TestCase):
    """Tests for the drill endpoints, backed by file storage in a temp dir."""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.storage = FileStorage(state_dir=self.tmp.name)
        app_module.storage = self.storage
        app_module.word_pairs = [WordPair('chat', 'cat')]
        app_module.user_sessions.clear()
        vocabulary.init_storage(self.storage)
        self.client = TestClient(app_module.create_app())

    def tearDown(self):
        vocabulary.init_storage(None)
        app_module.user_sessions.clear()
        self.tmp.cleanup()

    def check(self, translation: str, user_id: str = "default") -> dict:
        response = self.client.post("/api/check", json={'translation': translation, 'user_id': user_id})
        self.assertEqual(response.status_code, 200)
        return response.json()

    def test_root(self):
        response = self.client.get("/")
        self.assertEqual(response.json()['service'], 'vocadrill')

    def test_get_word(self):
        data = self.client.get("/api/word").json()
        self.assertEqual(data['word'], 'chat')
        self.assertEqual(data['direction'], 'normal')
        self.assertEqual(data['source_language'], 'French')
        self.assertEqual(data['target_language'], 'English')
        self.assertIsNone(data['expected'])
        self.assertFalse(data['waiting_for_ack'])
        self.assertEqual(data['word_count'], 1)

    def test_correct_answer(self):
        data = self.check('Cat')
        self.assertTrue(data['correct'])
        self.assertEqual(data['message'], 'Correct!')
        self.assertEqual(data['advance_after_ms'], 200)
        self.assertIsNone(data['expected'])
        self.assertFalse(data['waiting_for_ack'])
        self.assertEqual(self.client.get("/api/error-counts").json(), {'error_counts': {}})

    def test_incorrect_answer(self):
        data = self.check('dog')
        self.assertFalse(data['correct'])
        self.assertEqual(data['message'], 'Incorrect.')
        self.assertEqual(data['expected'], 'cat')
        self.assertTrue(data['waiting_for_ack'])
        self.assertIsNone(data['advance_after_ms'])
        self.assertEqual(data['error_count'], 1)

        self.assertEqual(self.client.get("/api/error-counts").json(), {'error_counts': {'chat': 1}})
        self.assertEqual(FileStorage(state_dir=self.tmp.name).get(ERROR_COUNTS_KEY), {'chat': 1})

        state = self.client.get("/api/word").json()
        self.assertEqual(state['expected'], 'cat')
        self.assertTrue(state['show_correct_answer'])

    def test_check_while_waiting_is_ignored(self):
        self.check('dog')
        data = self.check('cat')
        self.assertTrue(data['ignored'])
        self.assertFalse(data['correct'])
        self.assertTrue(data['waiting_for_ack'])
        self.assertEqual(data['error_count'], 1)
        self.assertEqual(self.storage.get(ERROR_COUNTS_KEY), {'chat': 1})

    def test_next_after_incorrect(self):
        self.check('dog')
        data = self.client.post("/api/next", json={}).json()
        self.assertTrue(data['advanced'])
        self.assertFalse(data['waiting_for_ack'])
        self.assertEqual(data['message'], '')
        self.assertEqual(data['word'], 'chat')

    def test_next_after_correct(self):
        self.check('cat')
        data = self.client.post("/api/next", json={}).json()
        self.assertTrue(data['advanced'])
        self.assertEqual(data['feedback'], 'neutral')

    def test_next_when_idle(self):
        data = self.client.post("/api/next", json={}).json()
        self.assertFalse(data['advanced'])

    def test_toggle_direction(self):
        data = self.client.post("/api/direction", json={}).json()
        self.assertEqual(data['direction'], 'reverse')
        self.assertEqual(data['word'], 'cat')
        self.assertEqual(data['source_language'], 'English')

        self.check('chien')
        self.assertEqual(self.storage.get(ERROR_COUNTS_KEY), {'cat': 1})

    def test_set_direction(self):
        data = self.client.post("/api/direction", json={'direction': 'normal'}).json()
        self.assertEqual(data['direction'], 'normal')

    def test_unknown_direction(self):
        response = self.client.post("/api/direction", json={'direction': 'sideways'})
        self.assertEqual(response.status_code, 400)

    def test_session_loads_persisted_counts(self):
        self.storage.set(ERROR_COUNTS_KEY, {'chat': 4})
        self.assertEqual(self.client.get("/api/error-counts").json(), {'error_counts': {'chat': 4}})
        self.assertEqual(self.check('dog')['error_count'], 5)

    def test_non_object_state_file_starts_fresh(self):
        with open(f"{self.tmp.name}/drill_state.json", 'w') as f:
            f.write('null')
        response = self.client.get("/api/word")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(self.check('dog')['error_count'], 1)
        self.assertEqual(self.storage.get(ERROR_COUNTS_KEY), {'chat': 1})

    def test_sessions_are_per_user(self):
        self.check('dog', user_id='alice')
        self.assertEqual(self.client.get("/api/error-counts", params={'user_id': 'alice'}).json(),
                         {'error_counts': {'chat': 1}})
        self.assertEqual(self.client.get("/api/error-counts").json(), {'error_counts': {}})
        self.assertFalse(self.check('cat')['ignored'])

    def test_no_words(self):
        app_module.word_pairs = []
        data = self.client.get("/api/word").json()
        self.assertIsNone(data['word'])
        self.assertTrue(self.check('cat')['ignored'])

    def test_translations(self):
        self.storage.seed_collection(TRANSLATIONS_COLLECTION, [{'id': 'a', 'fr': 'chat', 'en': 'cat'}])
        data = self.client.get("/api/translations").json()
        self.assertEqual(data, {'translations': [{'id': 'a', 'fr': 'chat', 'en': 'cat'}]})

    def test_translations_without_store(self):
        vocabulary.init_storage(None)
        response = self.client.get("/api/translations")
        self.assertEqual(response.status_code, 503)


if __name__ == '__main__':
    unittest.main()
