"""Sequential collection pipeline that assembles a configuration document."""

from __future__ import annotations

from .collectors import collect_commands, collect_files, collect_globals
from .config import AnswersConfig
from .console import Console
from .logging import get_logger
from .models import Document


class Wizard:
    """Runs the global, file, and command stages in order against one console."""

    def __init__(
        self,
        console: Console | None = None,
        answers: AnswersConfig | None = None,
    ) -> None:
        self.console = console or Console()
        self.answers = answers or AnswersConfig()
        self.logger = get_logger("wizard")

    def run(self) -> Document:
        """Collect every section and return the assembled document.

        Collection errors propagate unchanged; no partial document is returned.
        """
        document = Document()

        self.logger.debug("Collecting global variables")
        document.global_vars = collect_globals(self.console, self.answers)
        self.logger.debug(
            "Collected %d global variable(s)", len(document.global_vars or {})
        )

        self.logger.debug("Collecting file descriptors")
        document.files = collect_files(self.console, self.answers)
        self.logger.debug("Collected %d file(s)", len(document.files))

        self.logger.debug("Collecting command hooks")
        document.commands = collect_commands(self.console, self.answers)
        self.logger.debug("Collected %d command(s)", len(document.commands))

        return document


__all__ = ["Wizard"]
