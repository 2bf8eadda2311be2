"""FastAPI application with all routes."""
from __future__ import annotations

import itertools
import logging

logging.basicConfig(level=logging.INFO, format="%(name)s | %(message)s")

from fastapi import FastAPI, HTTPException, Request

from studycards.config import Settings, load_settings, save_settings, validate_updates
from studycards.flashcards import generate_flashcards
from studycards.models import QuizQuestion
from studycards.quiz_generator import generate_quiz
from studycards.scoring import AnswerSetMismatchError, feedback, score
from studycards.session import SessionError, StudySession

app = FastAPI(title="Study Cards")

_log = logging.getLogger("studycards.api")

# Global state (initialized in startup)
_settings: Settings | None = None
_active_sessions: dict[int, StudySession] = {}  # session_id -> session state
_session_ids = itertools.count(1)


def get_settings() -> Settings:
    assert _settings is not None
    return _settings


def _get_session(session_id: int) -> StudySession:
    session = _active_sessions.get(session_id)
    if session is None:
        raise HTTPException(404, "Session not found")
    return session


async def _json_body(request: Request) -> dict:
    body = await request.json() if await request.body() else {}
    if not isinstance(body, dict):
        raise HTTPException(400, "Request body must be a JSON object")
    return body


def _require_text(body: dict) -> str:
    text = body.get("text", "")
    if not isinstance(text, str):
        raise HTTPException(400, "text must be a string")
    return text


@app.on_event("startup")
async def startup():
    global _settings
    if _settings is not None:
        return  # Already initialized (e.g. by tests)
    _settings = load_settings()


# ── API: Stateless generation ─────────────────────────────────────────────

@app.post("/api/flashcards")
async def api_flashcards(request: Request):
    body = await _json_body(request)
    text = _require_text(body)
    s = get_settings()
    cards = generate_flashcards(
        text,
        max_cards=s.max_flashcards,
        max_fallback_cards=s.max_fallback_cards,
        min_sentence_length=s.min_sentence_length,
    )
    return {"flashcards": [c.to_dict() for c in cards]}


@app.post("/api/quiz")
async def api_quiz(request: Request):
    body = await _json_body(request)
    text = _require_text(body)
    seed = body.get("seed")
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        raise HTTPException(400, "seed must be an integer")
    s = get_settings()
    questions = generate_quiz(
        text,
        rng=s.make_rng(seed),
        max_questions=s.max_quiz_questions,
        min_sentence_length=s.min_sentence_length,
    )
    return {"questions": [q.to_dict() for q in questions]}


@app.post("/api/score")
async def api_score(request: Request):
    body = await _json_body(request)
    answers = body.get("answers")
    raw_questions = body.get("questions")
    if not isinstance(answers, list) or not isinstance(raw_questions, list):
        raise HTTPException(400, "answers and questions must be lists")
    try:
        questions = [QuizQuestion.from_dict(q) for q in raw_questions]
    except (KeyError, TypeError, ValueError) as e:
        raise HTTPException(400, f"Malformed question: {e}")
    try:
        result = score(answers, questions)
    except AnswerSetMismatchError as e:
        raise HTTPException(400, str(e))
    return {**result.to_dict(), "feedback": feedback(result)}


# ── API: Session management ──────────────────────────────────────────────

@app.post("/api/session/start")
async def api_session_start(request: Request):
    body = await _json_body(request)
    text = _require_text(body)
    session = StudySession(settings=get_settings())
    session.set_text(text)
    try:
        session.generate()
    except SessionError as e:
        raise HTTPException(400, str(e))

    session_id = next(_session_ids)
    _active_sessions[session_id] = session
    _log.info("Started session %d", session_id)
    return {"session_id": session_id, **session.to_dict()}


@app.get("/api/session/{session_id}")
async def api_session_get(session_id: int):
    return {"session_id": session_id, **_get_session(session_id).to_dict()}


@app.post("/api/session/{session_id}/{action}")
async def api_session_action(session_id: int, action: str, request: Request):
    session = _get_session(session_id)
    body = await _json_body(request)
    try:
        if action == "view":
            session.show(body.get("screen", ""))
        elif action == "flip":
            session.toggle_flip(int(body.get("card_id", -1)))
        elif action == "answer":
            if "index" not in body:
                raise HTTPException(400, "No answer index provided")
            session.select_answer(int(body["index"]))
        elif action == "next":
            session.next_question()
        elif action == "previous":
            session.previous_question()
        elif action == "restart":
            session.restart_quiz()
        elif action == "generate":
            if "text" in body:
                session.set_text(_require_text(body))
            session.generate()
        else:
            raise HTTPException(404, f"Unknown action: {action}")
    except (SessionError, TypeError, ValueError) as e:
        raise HTTPException(400, str(e))
    return {"session_id": session_id, **session.to_dict()}


@app.delete("/api/session/{session_id}")
async def api_session_end(session_id: int):
    _get_session(session_id)
    del _active_sessions[session_id]
    return {"ended": session_id}


# ── API: Settings ─────────────────────────────────────────────────────────

@app.get("/api/settings")
async def api_get_settings():
    return get_settings().to_dict()


@app.put("/api/settings")
async def api_update_settings(request: Request):
    body = await _json_body(request)
    try:
        updates = validate_updates(body)
    except ValueError as e:
        raise HTTPException(400, str(e))
    s = get_settings()
    for k, v in updates.items():
        setattr(s, k, v)
    save_settings(s)
    return s.to_dict()
