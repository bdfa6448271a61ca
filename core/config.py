"""Configuration constants for vocadrill application."""

SOURCE_LANGUAGE = 'French'
TARGET_LANGUAGE = 'English'

# Drill direction: 'normal' (source -> target) or 'reverse' (target -> source)
DIRECTION_NORMAL = 'normal'
DIRECTION_REVERSE = 'reverse'
DIRECTIONS = (DIRECTION_NORMAL, DIRECTION_REVERSE)

# Word selection weight = max(MIN_WEIGHT, MAX_WEIGHT - error_count)
MAX_WEIGHT = 10
MIN_WEIGHT = 1

# Persistence
ERROR_COUNTS_KEY = 'errorCounts'
TRANSLATIONS_COLLECTION = 'translations'

# How long a correct answer stays on screen before the next word
ADVANCE_DELAY_MS = 200

# Feedback states (replace the input border colour of the web version)
FEEDBACK_NEUTRAL = 'neutral'
FEEDBACK_CORRECT = 'correct'
FEEDBACK_INCORRECT = 'incorrect'

MESSAGE_CORRECT = 'Correct!'
MESSAGE_INCORRECT = 'Incorrect.'
