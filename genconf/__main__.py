"""Allow ``python -m genconf``."""

from .cli import main

main()
