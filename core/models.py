"""Domain models for vocadrill application."""

import logging

from .config import (
    DIRECTION_NORMAL, DIRECTION_REVERSE, DIRECTIONS,
    ERROR_COUNTS_KEY,
    FEEDBACK_NEUTRAL, FEEDBACK_CORRECT, FEEDBACK_INCORRECT,
    MESSAGE_CORRECT, MESSAGE_INCORRECT
)
from .utils import answers_match

logger = logging.getLogger(__name__)


class WordPair:
    """A source-language word and its target-language translation."""

    __slots__ = ('_source', '_target')

    def __init__(self, source: str, target: str):
        self._source = source
        self._target = target

    @property
    def source(self) -> str:
        return self._source

    @property
    def target(self) -> str:
        return self._target

    def __eq__(self, other) -> bool:
        if not isinstance(other, WordPair):
            return NotImplemented
        return (self.source, self.target) == (other.source, other.target)

    def __hash__(self) -> int:
        return hash((self.source, self.target))

    def __repr__(self) -> str:
        return f"WordPair({self.source!r}, {self.target!r})"

    def to_dict(self) -> dict:
        return {'source': self.source, 'target': self.target}

    @classmethod
    def from_dict(cls, data: dict) -> 'WordPair':
        # Documents in the translations collection use {fr, en}
        if 'source' in data:
            return cls(data['source'], data['target'])
        return cls(data['fr'], data['en'])


class CheckResult:
    """Outcome of checking one answer."""

    def __init__(self, correct: bool, message: str, expected: str, key: str, error_count: int):
        self.correct = correct
        self.message = message
        self.expected = expected
        self.key = key
        self.error_count = error_count

    def to_dict(self) -> dict:
        return {
            'correct': self.correct,
            'message': self.message,
            'expected': self.expected,
            'key': self.key,
            'error_count': self.error_count
        }


class DrillSession:
    """Session state for one learner: current word, direction, feedback
    flags and per-word error counts.

    Per word the session moves Idle -> Correct (auto-advances) or
    Idle -> Incorrect (waits for acknowledgement) -> Idle.
    """

    def __init__(self, pairs: list, direction: str = DIRECTION_NORMAL,
                 store=None, user_id: str = "default"):
        if direction not in DIRECTIONS:
            raise ValueError(f"Unknown direction: {direction}")
        self.pairs = pairs
        self.direction = direction
        self.store = store
        self.user_id = user_id
        self.error_counts = {}
        self.current = None
        self.user_input = ''
        self.message = ''
        self.feedback = FEEDBACK_NEUTRAL
        self.show_correct_answer = False
        self.waiting_for_ack = False

    @property
    def prompt(self) -> str | None:
        """The word shown to the learner."""
        if not self.current:
            return None
        return self.current.source if self.direction == DIRECTION_NORMAL else self.current.target

    @property
    def expected(self) -> str | None:
        """The translation the learner has to type."""
        if not self.current:
            return None
        return self.current.target if self.direction == DIRECTION_NORMAL else self.current.source

    @property
    def key(self) -> str | None:
        """Error-count key for the current word (the untranslated side)."""
        if not self.current:
            return None
        from .vocabulary import word_key
        return word_key(self.current, self.direction)

    @property
    def can_advance(self) -> bool:
        return self.waiting_for_ack or self.feedback == FEEDBACK_CORRECT

    def load_error_counts(self) -> dict:
        """Load persisted error counts.

        Anything other than a mapping of word to integer count reads as an
        empty mapping.
        """
        stored = self.store.get(ERROR_COUNTS_KEY, self.user_id) if self.store else None
        if isinstance(stored, dict) and all(
                isinstance(count, int) and not isinstance(count, bool) for count in stored.values()):
            self.error_counts = dict(stored)
        else:
            if stored:
                logger.warning(f"Ignoring malformed error counts for {self.user_id}: {stored!r}")
            self.error_counts = {}
        return self.error_counts

    def save_error_counts(self, counts: dict = None) -> None:
        if counts is None:
            counts = self.error_counts
        if self.store:
            self.store.set(ERROR_COUNTS_KEY, dict(counts), self.user_id)

    def pick_next(self, rng=None) -> WordPair | None:
        """Draw the next word and reset the transient feedback state."""
        from .vocabulary import pick_next
        self.current = pick_next(self.pairs, self.error_counts, self.direction, rng)
        self.user_input = ''
        self.message = ''
        self.feedback = FEEDBACK_NEUTRAL
        self.show_correct_answer = False
        self.waiting_for_ack = False
        return self.current

    def check(self, user_input: str) -> CheckResult | None:
        """Check an answer for the current word.

        Returns None without touching any state when there is no current
        word or the session is waiting for acknowledgement.
        """
        if not self.current or self.waiting_for_ack:
            return None

        key = self.key
        expected = self.expected

        if answers_match(user_input, expected):
            self.user_input = user_input
            self.message = MESSAGE_CORRECT
            self.feedback = FEEDBACK_CORRECT
            return CheckResult(True, self.message, expected, key, self.error_counts.get(key, 0))

        # Session state only changes once the new count is stored
        updated = {**self.error_counts, key: self.error_counts.get(key, 0) + 1}
        self.save_error_counts(updated)
        self.error_counts = updated
        self.user_input = user_input
        logger.info(f"Incorrect answer for '{key}' ({self.user_id}): {updated[key]} errors")
        self.message = MESSAGE_INCORRECT
        self.feedback = FEEDBACK_INCORRECT
        self.show_correct_answer = True
        self.waiting_for_ack = True
        return CheckResult(False, self.message, expected, key, self.error_counts[key])

    def acknowledge(self, rng=None) -> WordPair | None:
        """Move to the next word after a checked answer.
        Returns the new word, or None if there was nothing to acknowledge."""
        if not self.can_advance:
            return None
        return self.pick_next(rng)

    def set_direction(self, direction: str, rng=None) -> WordPair | None:
        """Switch drill direction, reload error counts and draw a new word."""
        if direction not in DIRECTIONS:
            raise ValueError(f"Unknown direction: {direction}")
        self.direction = direction
        self.load_error_counts()
        return self.pick_next(rng)

    def toggle_direction(self, rng=None) -> WordPair | None:
        new_direction = DIRECTION_REVERSE if self.direction == DIRECTION_NORMAL else DIRECTION_NORMAL
        return self.set_direction(new_direction, rng)

    def to_dict(self) -> dict:
        return {
            'direction': self.direction,
            'word': self.prompt,
            'expected': self.expected if self.show_correct_answer else None,
            'user_input': self.user_input,
            'message': self.message,
            'feedback': self.feedback,
            'show_correct_answer': self.show_correct_answer,
            'waiting_for_ack': self.waiting_for_ack,
            'word_count': len(self.pairs)
        }
