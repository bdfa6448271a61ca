"""Tests for the CLI client and console UI."""

import unittest
from unittest.mock import MagicMock, patch

import run_server
from cli.__main__ import main
from cli.api_client import DrillAPIClient
from cli.console import ConsoleUI

STATE = {
    'word': 'chat',
    'waiting_for_ack': False,
    'source_language': 'French',
    'target_language': 'English'
}


class TestDrillAPIClient(unittest.TestCase):
    """Tests for DrillAPIClient request building."""

    def setUp(self):
        self.client = DrillAPIClient(base_url="http://drill:8000/", user_id="bob")
        self.client.session = MagicMock()

    def test_check(self):
        self.client.check('cat')
        self.client.session.post.assert_called_once_with(
            "http://drill:8000/api/check", json={'translation': 'cat', 'user_id': 'bob'}, timeout=10
        )

    def test_get_word(self):
        self.client.get_word()
        self.client.session.get.assert_called_once_with(
            "http://drill:8000/api/word", params={'user_id': 'bob'}, timeout=10
        )

    def test_toggle_direction(self):
        self.client.set_direction()
        self.client.session.post.assert_called_once_with(
            "http://drill:8000/api/direction", json={'direction': None, 'user_id': 'bob'}, timeout=10
        )

    def test_raises_on_http_error(self):
        self.client.session.get.return_value.raise_for_status.side_effect = RuntimeError("404")
        with self.assertRaises(RuntimeError):
            self.client.get_error_counts()

    def test_next_word_sends_only_user(self):
        self.client.next_word()
        self.client.session.post.assert_called_once_with(
            "http://drill:8000/api/next", json={'user_id': 'bob'}, timeout=10
        )

    def test_health_check_has_no_user(self):
        self.client.health_check()
        self.client.session.get.assert_called_once_with("http://drill:8000/", timeout=10)


class TestConsoleUI(unittest.TestCase):
    """Tests for the console drill loop."""

    def setUp(self):
        self.client = MagicMock()
        self.client.health_check.return_value = {'service': 'vocadrill'}
        self.client.get_word.return_value = dict(STATE)
        self.client.next_word.return_value = dict(STATE)
        self.sleep = MagicMock()
        self.ui = ConsoleUI(self.client, sleep=self.sleep)

    def run_with_input(self, lines, **kwargs):
        printed = []
        with patch('builtins.input', side_effect=lines), \
                patch('builtins.print', side_effect=lambda *a, **k: printed.append(' '.join(map(str, a)))):
            self.ui.run(**kwargs)
        return printed

    def test_correct_answer_auto_advances(self):
        self.client.check.return_value = {
            'correct': True, 'message': 'Correct!', 'expected': None,
            'waiting_for_ack': False, 'advance_after_ms': 200, 'error_count': 0
        }
        printed = self.run_with_input(['cat', 'exit'])

        self.assertIn('Correct!', printed)
        self.sleep.assert_called_once_with(0.2)
        self.client.next_word.assert_called_once()

    def test_incorrect_answer_waits_for_acknowledgement(self):
        self.client.check.return_value = {
            'correct': False, 'message': 'Incorrect.', 'expected': 'cat',
            'waiting_for_ack': True, 'advance_after_ms': None, 'error_count': 1
        }
        printed = self.run_with_input(['dog', '', 'exit'])

        self.assertIn('Incorrect.', printed)
        self.assertIn('Correct answer: cat', printed)
        self.client.next_word.assert_called_once()
        self.sleep.assert_not_called()

    def test_exit_instead_of_acknowledging(self):
        self.client.check.return_value = {
            'correct': False, 'message': 'Incorrect.', 'expected': 'cat',
            'waiting_for_ack': True, 'advance_after_ms': None, 'error_count': 1
        }
        self.run_with_input(['dog', 'exit'])
        self.client.next_word.assert_not_called()

    def test_switch_direction(self):
        self.client.set_direction.return_value = dict(
            STATE, word='cat', source_language='English', target_language='French'
        )
        printed = self.run_with_input(['switch', 'exit'])

        self.client.set_direction.assert_called_once_with()
        self.assertTrue(any('>>> cat' in line for line in printed))

    def test_start_in_direction(self):
        self.client.set_direction.return_value = dict(STATE, word='cat')
        printed = self.run_with_input(['exit'], direction='reverse')

        self.client.set_direction.assert_called_once_with('reverse')
        self.client.get_word.assert_not_called()
        self.assertTrue(any('>>> cat' in line for line in printed))

    def test_show_errors(self):
        self.client.get_error_counts.return_value = {'error_counts': {'chat': 2}}
        printed = self.run_with_input(['errors', 'exit'])
        self.assertIn('  chat: 2', printed)

    def test_no_words(self):
        self.client.get_word.return_value = dict(STATE, word=None)
        printed = self.run_with_input([])
        self.assertIn('No words available.', printed)

    def test_server_unreachable(self):
        self.client.health_check.side_effect = ConnectionError()
        self.client.base_url = 'http://nowhere'
        printed = self.run_with_input([])
        self.assertIn('Error: Cannot connect to server at http://nowhere', printed)
        self.client.get_word.assert_not_called()


class TestEntryPoints(unittest.TestCase):
    """Tests for the console and server entry points."""

    @patch('cli.__main__.ConsoleUI')
    def test_main_passes_options(self, console_cls):
        main(['--server', 'http://drill:9000', '--user', 'alice', '--direction', 'reverse'])

        client = console_cls.call_args[0][0]
        self.assertEqual(client.base_url, 'http://drill:9000')
        self.assertEqual(client.user_id, 'alice')
        console_cls.return_value.run.assert_called_once_with(direction='reverse')

    @patch('cli.__main__.ConsoleUI')
    def test_main_rejects_unknown_direction(self, console_cls):
        with patch('sys.stderr'), self.assertRaises(SystemExit):
            main(['--direction', 'sideways'])
        console_cls.assert_not_called()

    @patch('run_server.uvicorn.run')
    def test_run_server_reads_environment(self, uvicorn_run):
        env = {'DRILL_HOST': '127.0.0.1', 'DRILL_PORT': '9001', 'DRILL_RELOAD': '0'}
        with patch.dict('os.environ', env):
            run_server.main()
        uvicorn_run.assert_called_once_with("server.app:app", host='127.0.0.1', port=9001, reload=False)


if __name__ == '__main__':
    unittest.main()
