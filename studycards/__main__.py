"""CLI entry point for studycards.

Usage:
  python -m studycards serve [--port PORT] [--host HOST]
  python -m studycards stop
  python -m studycards restart [--port PORT]
  python -m studycards status
  python -m studycards flashcards PATH
  python -m studycards quiz PATH [--seed N]
  python -m studycards study PATH [--seed N]

PATH may be ``-`` to read the study text from stdin.
"""
from __future__ import annotations

import os
import signal
import sys
from pathlib import Path

PID_FILE = Path(__file__).resolve().parent.parent / ".server.pid"


def main():
    args = sys.argv[1:]
    command = args[0] if args else "serve"

    if command == "serve":
        _serve(args[1:])
    elif command == "stop":
        _stop()
    elif command == "restart":
        _restart(args[1:])
    elif command == "status":
        _status()
    elif command == "flashcards":
        _flashcards(args[1:])
    elif command == "quiz":
        _quiz(args[1:])
    elif command == "study":
        _study(args[1:])
    else:
        print(f"Unknown command: {command}")
        print("Commands: serve, stop, restart, status, flashcards, quiz, study")
        sys.exit(1)


def _parse_flag(args: list[str], name: str, default: str | None) -> str | None:
    for i, a in enumerate(args):
        if a == name and i + 1 < len(args):
            return args[i + 1]
    return default


def _parse_seed(args: list[str]) -> int | None:
    seed = _parse_flag(args, "--seed", None)
    if seed is None:
        return None
    try:
        return int(seed)
    except ValueError:
        print(f"Invalid --seed: {seed}")
        sys.exit(1)


def _read_text(args: list[str]) -> str:
    """Read study text from the first positional argument (``-`` for stdin)."""
    if not args or args[0].startswith("--"):
        print("No input file given.")
        sys.exit(1)
    if args[0] == "-":
        return sys.stdin.read()
    path = Path(args[0])
    try:
        return path.read_text()
    except OSError as e:
        print(f"Cannot read {path}: {e}")
        sys.exit(1)


def _read_pid() -> int | None:
    """Read PID from file, return None if stale or missing."""
    if not PID_FILE.exists():
        return None
    try:
        pid = int(PID_FILE.read_text().strip())
        os.kill(pid, 0)
        return pid
    except (ValueError, ProcessLookupError, PermissionError):
        PID_FILE.unlink(missing_ok=True)
        return None


def _write_pid() -> None:
    PID_FILE.write_text(str(os.getpid()))


def _remove_pid() -> None:
    PID_FILE.unlink(missing_ok=True)


def _stop() -> bool:
    """Stop a running server. Returns True if a server was stopped."""
    pid = _read_pid()
    if pid is None:
        print("Server is not running.")
        return False
    try:
        os.kill(pid, signal.SIGTERM)
        print(f"Stopped server (PID {pid}).")
        PID_FILE.unlink(missing_ok=True)
        return True
    except ProcessLookupError:
        print("Server was not running (stale PID file removed).")
        PID_FILE.unlink(missing_ok=True)
        return False


def _status():
    pid = _read_pid()
    if pid is None:
        print("Server is not running.")
    else:
        print(f"Server is running (PID {pid}).")


def _restart(args: list[str]):
    import time
    _stop()
    time.sleep(1)
    _serve(args)


def _serve(args: list[str]):
    import uvicorn

    from studycards.config import load_settings

    existing = _read_pid()
    if existing is not None:
        print(f"Server already running (PID {existing}). Use 'restart' or 'stop' first.")
        sys.exit(1)

    settings = load_settings()
    port = int(_parse_flag(args, "--port", str(settings.port)))
    host = _parse_flag(args, "--host", settings.host)
    _write_pid()

    print(f"Starting Study Cards on http://{host}:{port}")
    print("Press Ctrl+C to stop\n")
    try:
        uvicorn.run(
            "studycards.app:app",
            host=host,
            port=port,
            reload=False,
            timeout_graceful_shutdown=5,
        )
    finally:
        _remove_pid()


def _flashcards(args: list[str]):
    from studycards.config import load_settings
    from studycards.flashcards import generate_flashcards

    text = _read_text(args)
    settings = load_settings()
    cards = generate_flashcards(
        text,
        max_cards=settings.max_flashcards,
        max_fallback_cards=settings.max_fallback_cards,
        min_sentence_length=settings.min_sentence_length,
    )
    if not cards:
        print("No flashcards could be generated from this text.")
        return
    for card in cards:
        print(f"[{card.id + 1}] Q: {card.question}")
        print(f"     A: {card.answer}\n")
    print(f"{len(cards)} flashcards")


def _print_question(q, number: int, total: int) -> None:
    print(f"Question {number} of {total}")
    print(f"  {q.question}")
    for i, option in enumerate(q.options):
        print(f"    {i + 1}) {option}")


def _quiz(args: list[str]):
    from studycards.config import load_settings
    from studycards.quiz_generator import generate_quiz

    text = _read_text(args)
    settings = load_settings()
    questions = generate_quiz(
        text,
        rng=settings.make_rng(_parse_seed(args)),
        max_questions=settings.max_quiz_questions,
        min_sentence_length=settings.min_sentence_length,
    )
    if not questions:
        print("No quiz questions could be generated from this text.")
        return
    for q in questions:
        _print_question(q, q.id + 1, len(questions))
        print(f"  Answer: {q.correct_answer + 1}) {q.correct_option}\n")


def _study(args: list[str]):
    """Interactive terminal quiz."""
    from studycards.config import load_settings
    from studycards.scoring import feedback
    from studycards.session import QuizPhase, SessionError, StudySession

    text = _read_text(args)
    settings = load_settings()
    session = StudySession(rng=settings.make_rng(_parse_seed(args)), settings=settings)
    session.set_text(text)
    try:
        session.generate()
    except SessionError as e:
        print(e)
        sys.exit(1)

    if not session.quiz:
        print("No quiz questions could be generated from this text.")
        return

    total = len(session.quiz)
    while session.phase is QuizPhase.ANSWERING:
        q = session.current_question
        _print_question(q, session.current_index + 1, total)
        reply = input("  Your answer (1-4, q to quit): ").strip().lower()
        if reply == "q":
            return
        if not reply.isdigit():
            print("  Please enter a number.\n")
            continue
        try:
            session.select_answer(int(reply) - 1)
        except SessionError as e:
            print(f"  {e}\n")
            continue
        if session.answers[session.current_index] == q.correct_answer:
            print("  Correct!\n")
        else:
            print(f"  Wrong. {q.explanation}\n")
        session.next_question()

    result = session.score()
    print(f"Quiz Complete! {result.correct}/{result.total} ({result.percentage}%)")
    print(feedback(result))


if __name__ == "__main__":
    main()
