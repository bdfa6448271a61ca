from .models import WordPair, CheckResult, DrillSession
from .interfaces import KeyValueStore, DocumentStore
from .utils import normalize_string, answers_match, check_answer
from .vocabulary import pick_next, word_weight, word_key
from .config import (
    DIRECTION_NORMAL, DIRECTION_REVERSE,
    MAX_WEIGHT, MIN_WEIGHT,
    ERROR_COUNTS_KEY, TRANSLATIONS_COLLECTION, ADVANCE_DELAY_MS
)

__all__ = [
    'WordPair', 'CheckResult', 'DrillSession',
    'KeyValueStore', 'DocumentStore',
    'normalize_string', 'answers_match', 'check_answer',
    'pick_next', 'word_weight', 'word_key',
    'DIRECTION_NORMAL', 'DIRECTION_REVERSE',
    'MAX_WEIGHT', 'MIN_WEIGHT',
    'ERROR_COUNTS_KEY', 'TRANSLATIONS_COLLECTION', 'ADVANCE_DELAY_MS'
]
