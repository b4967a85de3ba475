"""Prompt copy shown to the operator during a genconf session."""

from __future__ import annotations

GLOBALS_PROMPT = """\t\t-- Global parameters preparation --
Here you can add global variables that will be used throughout all templates.
Provide values as space separated tokens.

Example: SomeValue 123

Would you like to add global config values: {yes}/{no}? """

FILES_PROMPT = """\t\t-- Files configuration part preparation --
This part is dedicated to specifying everything that has to do with file templates.
Each file consists of four parts:

\t1. File name\t   - the name of the file to be generated out of the template;
\t2. File path\t   - the path to where the file will be placed;
\t3. Template name   - the name of the template to use;
\t4. Local variables - the local variables specific to the specified template.

NOTE: there has to be at least one file to add."""

LOCALS_PROMPT = """\t\t--- Local variables ---
Provide values as space separated tokens.
Example: SomeValue 123

Would you like to add local config values: {yes}/{no}? """

COMMANDS_PROMPT = """\t\t-- Command post-hooks configuration preparation --
This part is dedicated to specifying everything that has to do with post-generation hooks.
Each entry consists of two parts:

\t1. Command name\t     - the name of the command to be called;
\t2. Command arguments - the arguments passed to the command.

Example: ls -a -l

Would you like to add post-processing commands: {yes}/{no}? """

FILE_FIELD_PROMPTS: tuple[tuple[str, str], ...] = (
    ("name", "File name: "),
    ("path", "File path: "),
    ("template", "Template name: "),
)

NEXT_VALUE_PROMPT = "Add next value: {yes}/{no}? "
NEXT_FILE_PROMPT = "Add next file: {yes}/{no}? "


__all__ = [
    "COMMANDS_PROMPT",
    "FILES_PROMPT",
    "FILE_FIELD_PROMPTS",
    "GLOBALS_PROMPT",
    "LOCALS_PROMPT",
    "NEXT_FILE_PROMPT",
    "NEXT_VALUE_PROMPT",
]
