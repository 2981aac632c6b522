from __future__ import annotations

import traceback
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Mapping, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table


def _stderr_console() -> Console:
    return Console(stderr=True)


@dataclass(slots=True)
class RichLogger:
    """Rich console diagnostics on stderr, optionally mirrored to a log file.

    Standard output is reserved for substituted text, so nothing here ever
    writes to it.
    """

    log_file: Optional[Path] = None
    quiet: bool = False
    console: Console = field(default_factory=_stderr_console)

    def log_panel(self, message: str, title: str, style: str) -> None:
        if not self.quiet:
            panel = Panel(message, border_style=style, title=title)
            self.console.print(panel)
        self._write_line(f"{title}: {message}")

    def log_error(self, error: Exception) -> None:
        # Errors are shown even in quiet mode.
        self.console.print(Panel(str(error), border_style="red", title="ERROR"))
        self._write_line(f"ERROR: {error}")
        tb = traceback.format_exc()
        if tb.strip() != "NoneType: None":
            self._write_line(tb)

    def log_summary(self, title: str, rows: Mapping[str, object]) -> None:
        table = Table(title=title, show_header=False)
        table.add_column("key", style="cyan")
        table.add_column("value", justify="right")
        for key, value in rows.items():
            table.add_row(key, str(value))
            self._write_line(f"{title}: {key}={value}")
        if not self.quiet:
            self.console.print(table)

    def _write_line(self, message: str) -> None:
        if self.log_file is None:
            return
        timestamp = datetime.now().isoformat(timespec="seconds")
        with self.log_file.open("a", encoding="utf-8") as handle:
            handle.write(f"{timestamp} - {message}\n")
