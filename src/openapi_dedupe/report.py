"""Progress reporting and run summary."""

from pathlib import Path
from typing import Protocol

import click
from pydantic import BaseModel


class Reporter(Protocol):
    """Sink for human-readable progress lines."""

    def info(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class ClickReporter:
    """Reporter that writes to the console via click."""

    def info(self, message: str) -> None:
        click.echo(message)

    def error(self, message: str) -> None:
        click.echo(message, err=True)


class DedupeSummary(BaseModel):
    """Outcome of a single dedupe run."""

    input_path: Path
    output_path: Path
    params_before: int
    params_after: int
    written: bool = True

    @property
    def removed(self) -> int:
        return self.params_before - self.params_after

    def summary_line(self) -> str:
        line = (
            f"Parameters before: {self.params_before}, after: {self.params_after} "
            f"(removed {self.removed} duplicates)"
        )
        if not self.written:
            line += " [dry run, nothing written]"
        return line
