"""Progress tracking for CLI runs."""

import logging
import sys
import time
from typing import Optional, TextIO


class ProgressRenderer:
    """Minimal in-terminal progress bar for the grouping loop."""

    def __init__(self, enable: bool = True, width: int = 40, stream: Optional[TextIO] = None):
        self.enable = enable
        self.width = width
        self.stream = stream or sys.stderr
        self.start = time.time()
        self.last_line = ""
        self.open_line = False  # bar printed without a trailing newline

    def update(self, claimed: int, total: int, regions: int) -> None:
        if not self.enable or total <= 0:
            return

        pct = claimed / total
        filled = int(self.width * pct)
        bar = "#" * filled + "-" * (self.width - filled)
        elapsed = time.time() - self.start
        line = f"[{bar}] {claimed}/{total} regions:{regions} elapsed:{elapsed:.1f}s"

        # Minimize flicker by only rewriting when content changes
        if line != self.last_line:
            print("\r" + line, end="", file=self.stream, flush=True)
            self.last_line = line
            self.open_line = True

        if claimed >= total:
            self.break_line()

    def break_line(self) -> None:
        """End a half-written bar so the next output starts on its own line."""
        if self.open_line:
            print(file=self.stream, flush=True)
            self.open_line = False
            # Redraw on the next update
            self.last_line = ""


class ProgressLogHandler(logging.StreamHandler):
    """Stream handler that moves past an active progress bar before each record."""

    def __init__(self, renderer: ProgressRenderer, stream: Optional[TextIO] = None):
        super().__init__(stream or renderer.stream)
        self.renderer = renderer

    def emit(self, record: logging.LogRecord) -> None:
        self.renderer.break_line()
        super().emit(record)
