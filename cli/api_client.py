"""HTTP client for the vocadrill drill endpoints."""

import os

import requests

DEFAULT_SERVER = os.environ.get('DRILL_SERVER', 'http://localhost:8000')
REQUEST_TIMEOUT = 10


class DrillAPIClient:
    """One method per drill endpoint.

    Every drill call is tagged with ``user_id`` so that the server keeps a
    separate session and separate error counts for each learner. HTTP errors
    surface as ``requests.HTTPError`` from ``raise_for_status``.
    """

    def __init__(self, base_url: str = DEFAULT_SERVER, user_id: str = "default",
                 timeout: float = REQUEST_TIMEOUT):
        self.base_url = base_url.rstrip('/')
        self.user_id = user_id
        self.timeout = timeout
        self.session = requests.Session()

    def _url(self, endpoint: str) -> str:
        return f"{self.base_url}{endpoint}"

    def _call(self, method: str, endpoint: str, payload: dict = None) -> dict:
        if method == 'GET':
            response = self.session.get(
                self._url(endpoint), params={'user_id': self.user_id}, timeout=self.timeout
            )
        else:
            body = dict(payload or {}, user_id=self.user_id)
            response = self.session.post(self._url(endpoint), json=body, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def health_check(self) -> dict:
        response = self.session.get(self._url('/'), timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def get_word(self) -> dict:
        return self._call('GET', "/api/word")

    def check(self, translation: str) -> dict:
        return self._call('POST', "/api/check", {'translation': translation})

    def next_word(self) -> dict:
        """Acknowledge the last answer, or auto-advance after a correct one."""
        return self._call('POST', "/api/next")

    def set_direction(self, direction: str = None) -> dict:
        """Set the drill direction. None toggles it."""
        return self._call('POST', "/api/direction", {'direction': direction})

    def get_error_counts(self) -> dict:
        return self._call('GET', "/api/error-counts")

    def get_translations(self) -> dict:
        return self._call('GET', "/api/translations")
