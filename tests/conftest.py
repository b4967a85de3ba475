from __future__ import annotations

import logging
from typing import Callable, Iterator, Sequence

import pytest

from tests._fixtures.scripted_console import ScriptedConsole


@pytest.fixture
def scripted() -> Callable[..., ScriptedConsole]:
    """Build a console that replays the given operator answers."""

    def _factory(lines: Sequence[str], **kwargs: bool) -> ScriptedConsole:
        return ScriptedConsole(lines, **kwargs)

    return _factory


@pytest.fixture(autouse=True)
def _reset_genconf_logger() -> Iterator[None]:
    """Drop handlers bound to captured streams once a test finishes."""
    yield
    logger = logging.getLogger("genconf")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
