"""
Logging setup for the library CLI.

Module loggers are plain ``logging.getLogger(__name__)`` loggers; this module
attaches a single rich handler to the root logger so log records go to
stderr and never interleave with the menu on stdout.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str = "WARNING") -> None:
    """Configure the root logger once; repeated calls only adjust the level."""
    root = logging.getLogger()
    numeric_level = getattr(logging, (level or "WARNING").upper(), logging.WARNING)
    root.setLevel(numeric_level)
    if any(isinstance(h, RichHandler) for h in root.handlers):
        return

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S"))
    root.addHandler(handler)
