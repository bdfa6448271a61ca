"""FastAPI server for vocadrill application."""

import logging
import os

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from typing import Optional

from core.models import DrillSession
from core.config import (
    DIRECTIONS, ADVANCE_DELAY_MS, SOURCE_LANGUAGE, TARGET_LANGUAGE, DIRECTION_NORMAL
)
from core import vocabulary

from server.file_storage import FileStorage
from server.postgres_storage import PostgresStorage

logger = logging.getLogger(__name__)


# Pydantic models for API
class CheckRequest(BaseModel):
    translation: str
    user_id: str = "default"


class NextRequest(BaseModel):
    user_id: str = "default"


class DirectionRequest(BaseModel):
    user_id: str = "default"
    direction: Optional[str] = None  # None toggles


class DrillStateResponse(BaseModel):
    direction: str
    source_language: str
    target_language: str
    word: Optional[str]  # None when no word is available
    expected: Optional[str]  # Only revealed after an incorrect answer
    user_input: str
    message: str
    feedback: str
    show_correct_answer: bool
    waiting_for_ack: bool
    word_count: int
    advanced: bool = True


class CheckResponse(BaseModel):
    correct: bool
    message: str
    expected: Optional[str]
    waiting_for_ack: bool
    advance_after_ms: Optional[int]
    error_count: int
    ignored: bool = False


# Global state (in production, use proper DI)
storage = None
word_pairs: list = []
user_sessions: dict[str, DrillSession] = {}


app = FastAPI(title="Vocadrill API", description="Vocabulary drill API")


def get_session(user_id: str = "default") -> DrillSession:
    """Get or create the drill session for a user."""
    if user_id not in user_sessions:
        session = DrillSession(word_pairs, DIRECTION_NORMAL, store=storage, user_id=user_id)
        session.load_error_counts()
        session.pick_next()
        user_sessions[user_id] = session
        logger.info(f"New session for {user_id}: {len(session.error_counts)} words with errors")
    return user_sessions[user_id]


def state_response(session: DrillSession, advanced: bool = True) -> DrillStateResponse:
    source, target = SOURCE_LANGUAGE, TARGET_LANGUAGE
    if session.direction != DIRECTION_NORMAL:
        source, target = target, source
    return DrillStateResponse(
        source_language=source,
        target_language=target,
        advanced=advanced,
        **session.to_dict()
    )


@app.on_event("startup")
async def startup():
    """Initialize storage and load the word list on startup."""
    global storage, word_pairs

    # File storage by default, set DRILL_STORAGE=postgres to use PostgreSQL
    storage_type = os.environ.get('DRILL_STORAGE', 'file')
    if storage_type == 'postgres':
        storage = PostgresStorage()
        logger.info("Using PostgreSQL storage")
    else:
        storage = FileStorage(state_dir=os.environ.get('DRILL_STATE_DIR'))
        logger.info("Using file storage")

    vocabulary.init_storage(storage)
    word_pairs = vocabulary.load_word_pairs(os.environ.get('DRILL_WORD_SOURCE', 'static'))
    user_sessions.clear()


@app.get("/")
async def root():
    """Health check."""
    return {"service": "vocadrill", "status": "ok"}


@app.get("/api/word", response_model=DrillStateResponse)
async def get_word(user_id: str = "default"):
    """Get the current drill state."""
    return state_response(get_session(user_id))


@app.post("/api/check", response_model=CheckResponse)
async def check_translation(request: CheckRequest):
    """Check a typed translation for the current word."""
    session = get_session(request.user_id)
    result = session.check(request.translation)

    if result is None:
        # No word, or still waiting for acknowledgement
        return CheckResponse(
            correct=False,
            message=session.message,
            expected=session.expected if session.show_correct_answer else None,
            waiting_for_ack=session.waiting_for_ack,
            advance_after_ms=None,
            error_count=session.error_counts.get(session.key, 0) if session.key else 0,
            ignored=True
        )

    return CheckResponse(
        correct=result.correct,
        message=result.message,
        expected=None if result.correct else result.expected,
        waiting_for_ack=session.waiting_for_ack,
        advance_after_ms=ADVANCE_DELAY_MS if result.correct else None,
        error_count=result.error_count
    )


@app.post("/api/next", response_model=DrillStateResponse)
async def next_word(request: NextRequest):
    """Acknowledge the last answer and draw the next word."""
    session = get_session(request.user_id)
    advanced = session.can_advance
    session.acknowledge()
    return state_response(session, advanced=advanced)


@app.post("/api/direction", response_model=DrillStateResponse)
async def set_direction(request: DirectionRequest):
    """Set the drill direction, or toggle it when none is given."""
    session = get_session(request.user_id)
    if request.direction is None:
        session.toggle_direction()
    elif request.direction in DIRECTIONS:
        session.set_direction(request.direction)
    else:
        raise HTTPException(status_code=400, detail=f"Unknown direction: {request.direction}")
    logger.info(f"Direction for {request.user_id}: {session.direction}")
    return state_response(session)


@app.get("/api/error-counts")
async def get_error_counts(user_id: str = "default"):
    """Get the persisted error counts for a user."""
    session = get_session(user_id)
    return {"error_counts": session.error_counts}


@app.get("/api/translations")
async def get_translations():
    """Fetch all documents in the remote translations collection."""
    try:
        documents = vocabulary.fetch_translations()
    except RuntimeError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except Exception as e:
        logger.error(f"Error fetching translations: {type(e).__name__}: {e}")
        raise HTTPException(status_code=500, detail=f"Internal error: {type(e).__name__}: {str(e)}")
    return {"translations": documents}


def create_app():
    """Factory function for creating the app (useful for testing)."""
    return app
