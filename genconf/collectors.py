"""Prompting loops that gather globals, file descriptors, and command hooks."""

from __future__ import annotations

from typing import List, Optional

from .config import AnswersConfig
from .console import Console
from .errors import CollectionError, InputShapeError
from .logging import get_logger
from .models import Command, FileSpec, Variables
from .prompts import (
    COMMANDS_PROMPT,
    FILE_FIELD_PROMPTS,
    FILES_PROMPT,
    GLOBALS_PROMPT,
    LOCALS_PROMPT,
    NEXT_FILE_PROMPT,
    NEXT_VALUE_PROMPT,
)
from .values import infer_value

logger = get_logger("collectors")


def collect_globals(console: Console, answers: AnswersConfig | None = None) -> Optional[Variables]:
    """Collect global ``name value`` pairs until the operator declines."""
    answers = answers or AnswersConfig()
    try:
        return collect_variables(console, _render(GLOBALS_PROMPT, answers), answers)
    except CollectionError as exc:
        raise type(exc)(f"global variables: {exc}") from exc


def collect_variables(
    console: Console, prompt: str, answers: AnswersConfig | None = None
) -> Optional[Variables]:
    """Run the variable loop shared by global and local collection.

    The affirmative token is skipped wherever it appears, including as the
    answer to the opening question, so every other line is read as a pair.
    Returns None when no pair was ever stored.
    """
    answers = answers or AnswersConfig()
    console.show(prompt)
    result: Optional[Variables] = None
    while True:
        line = console.read_line()
        if line is None or line == answers.negative:
            break
        if line == answers.affirmative:
            continue
        parts = line.split()
        if len(parts) != 2:
            raise InputShapeError(f"incorrect number of tokens: expected 2, got {len(parts)}")
        name, raw_value = parts
        if result is None:
            result = {}
        result[name] = infer_value(raw_value)
        logger.debug("Stored variable %s=%r", name, result[name])
        console.show(_render(NEXT_VALUE_PROMPT, answers))
    return result


def collect_files(console: Console, answers: AnswersConfig | None = None) -> List[FileSpec]:
    """Collect file descriptors until the operator declines another file."""
    answers = answers or AnswersConfig()
    try:
        return _collect_files(console, answers)
    except CollectionError as exc:
        raise type(exc)(f"file parameters: {exc}") from exc


def _collect_files(console: Console, answers: AnswersConfig) -> List[FileSpec]:
    console.show(f"\n{FILES_PROMPT}\n")
    result: List[FileSpec] = []
    while True:
        fields = {key: console.read_token(prompt) for key, prompt in FILE_FIELD_PROMPTS}
        console.show("\n")
        local = collect_variables(console, _render(LOCALS_PROMPT, answers), answers)
        result.append(FileSpec(local=local, **fields))
        logger.debug("Added file %s (template=%s)", fields["name"], fields["template"])

        answer = console.read_token(_render(NEXT_FILE_PROMPT, answers))
        if answer == answers.negative:
            break
        if answer == answers.affirmative:
            continue
        if answers.strict:
            raise InputShapeError(
                f"unexpected answer {answer!r}: expected {answers.affirmative!r} or {answers.negative!r}"
            )
        logger.debug("Ignoring unrecognized answer %r; continuing with next file", answer)
    return result


def collect_commands(console: Console, answers: AnswersConfig | None = None) -> List[Command]:
    """Collect post-generation command hooks until the operator declines."""
    answers = answers or AnswersConfig()
    console.show(f"\n{_render(COMMANDS_PROMPT, answers)}")
    result: List[Command] = []
    try:
        while True:
            line = console.read_line()
            if line is None or line == answers.negative:
                break
            if line == answers.affirmative:
                continue
            parts = line.split()
            if not parts:
                raise InputShapeError("incorrect command declaration length")
            result.append(Command(name=parts[0], args=parts[1:]))
            logger.debug("Added command %s with %d argument(s)", parts[0], len(parts) - 1)
            console.show(_render(NEXT_VALUE_PROMPT, answers))
    except CollectionError as exc:
        raise type(exc)(f"commands: {exc}") from exc
    return result


def _render(template: str, answers: AnswersConfig) -> str:
    return template.format(yes=answers.affirmative, no=answers.negative)


__all__ = ["collect_commands", "collect_files", "collect_globals", "collect_variables"]
