"""Console UI for vocadrill application."""

import time

from cli.api_client import DrillAPIClient


class ConsoleUI:
    """Console user interface for vocadrill application."""

    def __init__(self, client: DrillAPIClient, sleep=time.sleep):
        self.client = client
        self.sleep = sleep

    def print_header(self, state: dict):
        print('=' * 40)
        print(f"{state['source_language']} -> {state['target_language']}")
        print('=' * 40)

    def print_result(self, result: dict):
        """Print the outcome of a check."""
        print(result['message'])
        if not result['correct'] and result.get('expected'):
            print(f"Correct answer: {result['expected']}")
            print(f"Errors on this word: {result['error_count']}")

    def print_error_counts(self, counts: dict):
        if not counts:
            print('No mistakes yet.')
            return
        print('\n--- ERRORS ---')
        for word, count in sorted(counts.items(), key=lambda x: x[1], reverse=True):
            print(f'  {word}: {count}')
        print('--------------')

    def wait_for_acknowledgement(self) -> bool:
        """Block until the learner presses Enter. Returns False on 'exit'."""
        answer = input('Press Enter for the next word... ').strip().lower()
        return answer != 'exit'

    def run(self, direction: str = None):
        """Run the main drill loop, optionally switching to a direction first."""
        try:
            health = self.client.health_check()
            print(f"Connected to drill server ({health['service']})")
        except Exception:
            print(f"Error: Cannot connect to server at {self.client.base_url}")
            print("Make sure the server is running: python run_server.py")
            return

        print('Commands: "switch" to change direction, "errors" for mistakes, "exit" to quit\n')

        state = self.client.set_direction(direction) if direction else self.client.get_word()
        self.print_header(state)

        while True:
            if not state['word']:
                print('No words available.')
                return

            # A previous run may have left the session waiting
            if state['waiting_for_ack']:
                state = self.client.next_word()
                continue

            print(f"\n>>> {state['word']}")
            user_input = input('==> ').strip()

            if user_input.lower() == 'exit':
                print('Goodbye!')
                return

            if user_input.lower() == 'switch':
                state = self.client.set_direction()
                self.print_header(state)
                continue

            if user_input.lower() == 'errors':
                try:
                    self.print_error_counts(self.client.get_error_counts()['error_counts'])
                except Exception as e:
                    print(f"Error getting error counts: {e}")
                continue

            try:
                result = self.client.check(user_input)
            except Exception as e:
                print(f"Error checking translation: {e}")
                continue

            self.print_result(result)

            if result['correct']:
                self.sleep((result.get('advance_after_ms') or 0) / 1000)
            elif result['waiting_for_ack'] and not self.wait_for_acknowledgement():
                print('Goodbye!')
                return

            state = self.client.next_word()
