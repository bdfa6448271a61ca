"""Static word list, weighted word selection and the translations collection."""

import logging
import random

from .config import (
    DIRECTION_NORMAL, MAX_WEIGHT, MIN_WEIGHT, TRANSLATIONS_COLLECTION
)
from .models import WordPair

logger = logging.getLogger(__name__)

# French to English, in drill order
WORD_LIST = [
    {'fr': 'bonjour', 'en': 'hello'},
    {'fr': 'au revoir', 'en': 'goodbye'},
    {'fr': 'merci', 'en': 'thank you,thanks'},
    {'fr': "s'il vous plaît", 'en': 'please'},
    {'fr': 'oui', 'en': 'yes'},
    {'fr': 'non', 'en': 'no'},
    {'fr': 'chat', 'en': 'cat'},
    {'fr': 'chien', 'en': 'dog'},
    {'fr': 'oiseau', 'en': 'bird'},
    {'fr': 'poisson', 'en': 'fish'},
    {'fr': 'cheval', 'en': 'horse'},
    {'fr': 'maison', 'en': 'house'},
    {'fr': "l'école", 'en': 'the school'},
    {'fr': 'la bibliothèque', 'en': 'the library'},
    {'fr': 'la rue', 'en': 'the street'},
    {'fr': 'la forêt', 'en': 'the forest'},
    {'fr': 'la fenêtre', 'en': 'the window'},
    {'fr': 'la porte', 'en': 'the door'},
    {'fr': 'le livre', 'en': 'the book'},
    {'fr': 'la clé', 'en': 'the key'},
    {'fr': 'pain', 'en': 'bread'},
    {'fr': 'lait', 'en': 'milk'},
    {'fr': 'eau', 'en': 'water'},
    {'fr': 'fromage', 'en': 'cheese'},
    {'fr': 'pomme', 'en': 'apple'},
    {'fr': 'café', 'en': 'coffee'},
    {'fr': 'thé', 'en': 'tea'},
    {'fr': 'rouge', 'en': 'red'},
    {'fr': 'bleu', 'en': 'blue'},
    {'fr': 'vert', 'en': 'green'},
    {'fr': 'noir', 'en': 'black'},
    {'fr': 'blanc', 'en': 'white'},
    {'fr': 'lundi', 'en': 'monday'},
    {'fr': 'mardi', 'en': 'tuesday'},
    {'fr': 'mercredi', 'en': 'wednesday'},
    {'fr': 'jeudi', 'en': 'thursday'},
    {'fr': 'vendredi', 'en': 'friday'},
    {'fr': 'samedi', 'en': 'saturday'},
    {'fr': 'dimanche', 'en': 'sunday'},
    {'fr': 'printemps', 'en': 'spring'},
    {'fr': 'été', 'en': 'summer'},
    {'fr': 'automne', 'en': 'autumn,fall'},
    {'fr': 'hiver', 'en': 'winter'},
    {'fr': 'mère', 'en': 'mother'},
    {'fr': 'père', 'en': 'father'},
    {'fr': 'frère', 'en': 'brother'},
    {'fr': 'sœur', 'en': 'sister'},
    {'fr': 'aujourd\'hui', 'en': 'today'},
    {'fr': 'demain', 'en': 'tomorrow'},
    {'fr': 'hier', 'en': 'yesterday'},
    {'fr': 'toujours', 'en': 'always'},
    {'fr': 'jamais', 'en': 'never'},
    {'fr': 'peut-être', 'en': 'maybe,perhaps'},
    {'fr': 'grand', 'en': 'big,tall'},
    {'fr': 'petit', 'en': 'small,little'},
    {'fr': 'heureux', 'en': 'happy'},
    {'fr': 'fatigué', 'en': 'tired'},
    {'fr': 'manger', 'en': 'to eat'},
    {'fr': 'boire', 'en': 'to drink'},
    {'fr': 'parler', 'en': 'to speak'},
    {'fr': 'écrire', 'en': 'to write'},
    {'fr': 'lire', 'en': 'to read'},
    {'fr': 'aller', 'en': 'to go'},
    {'fr': "c'est la vie", 'en': "that's life"},
]

# Module-level storage for the remote translations collection
_storage = None


def get_word_pairs() -> list[WordPair]:
    """Get the static word list as WordPairs."""
    return [WordPair.from_dict(item) for item in WORD_LIST]


def word_key(pair: WordPair, direction: str) -> str:
    """Error-count key for a pair: the side shown to the learner."""
    return pair.source if direction == DIRECTION_NORMAL else pair.target


def word_weight(error_count: int) -> int:
    """Selection weight for a word. More errors, lower weight, never below 1."""
    return max(MIN_WEIGHT, MAX_WEIGHT - (error_count or 0))


def pick_next(pairs: list[WordPair], error_counts: dict, direction: str,
              rng=None) -> WordPair | None:
    """Draw one pair with probability proportional to its weight.

    Returns None if there are no pairs.
    """
    if not pairs:
        return None
    rng = rng or random

    weights = [word_weight(error_counts.get(word_key(pair, direction), 0)) for pair in pairs]
    remaining = rng.random() * sum(weights)
    for pair, weight in zip(pairs, weights):
        remaining -= weight
        if remaining <= 0:
            return pair
    # Only reachable through float rounding
    return pairs[-1]


def init_storage(storage) -> None:
    """Set the document store backing the translations collection."""
    global _storage
    _storage = storage


def fetch_translations(storage=None) -> list[dict]:
    """Fetch all documents in the translations collection.

    Returns list of {id, ...fields} dicts.
    """
    store = storage or _storage
    if store is None:
        raise RuntimeError("No document store configured")
    return store.fetch_collection(TRANSLATIONS_COLLECTION)


def get_seed_data() -> list[dict]:
    """Documents for seeding the translations collection from the static list."""
    return [{'id': str(i), **item} for i, item in enumerate(WORD_LIST)]


def load_word_pairs(source: str = 'static') -> list[WordPair]:
    """Load the word list once at startup.

    'remote' reads the translations collection and falls back to the
    static list when the collection is empty or cannot be fetched.
    """
    if source == 'remote' and _storage:
        try:
            docs = fetch_translations()
            pairs = [WordPair.from_dict(doc) for doc in docs]
            if pairs:
                logger.info(f"Loaded {len(pairs)} word pairs from '{TRANSLATIONS_COLLECTION}'")
                return pairs
            logger.warning(f"Collection '{TRANSLATIONS_COLLECTION}' is empty, using static word list")
        except Exception as e:
            logger.error(f"Failed to fetch translations: {e}")
    pairs = get_word_pairs()
    logger.info(f"Loaded {len(pairs)} word pairs from static list")
    return pairs
