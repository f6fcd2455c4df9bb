import os
import sys
from pathlib import Path

import click
import logfire

from stubsweep.core.domain.models import (
    DUPLICATE_GROUPS,
    CleanupOutcome,
    CleanupResult,
    StubStatus,
    duplicate_paths,
)
from stubsweep.core.presentation.logging import (
    CleanupFormatter,
    console,
    err_console,
)


def read_confirmation_char():
    """Block until a single character is available on the controlling input."""
    stdin = sys.stdin
    if stdin is None:
        return ""
    if stdin.isatty():
        try:
            return click.getchar()
        except EOFError:
            return ""
    # Piped or closed stdin: take whatever is there, EOF reads as "".
    return stdin.read(1)


class CleanupService:
    def __init__(self, groups=DUPLICATE_GROUPS, read_char=read_confirmation_char):
        self.groups = groups
        self.read_char = read_char

    @property
    def paths(self):
        return duplicate_paths(self.groups)

    def announce(self):
        for line in CleanupFormatter.format_intro():
            console.print(line, soft_wrap=True)
        for group in self.groups:
            for line in CleanupFormatter.format_group(group):
                console.print(line, soft_wrap=True)
        console.print()

    def confirm(self):
        err_console.print(CleanupFormatter.format_prompt(), end="", soft_wrap=True)
        reply = self.read_char() or ""
        err_console.print()
        return reply[:1] in ("y", "Y")

    def execute(self, paths=None, target_dir="."):
        """
        Remove each path relative to target_dir, in order.
        Already-absent files are skipped silently. Any other failure is reported
        and the batch carries on; there is no rollback.
        """
        root = Path(target_dir)
        result = CleanupResult(outcome=CleanupOutcome.EXECUTED)

        with logfire.span("remove duplicate stubs", target_dir=str(root)) as span:
            for rel_path in self.paths if paths is None else paths:
                try:
                    os.remove(root / rel_path)
                except FileNotFoundError:
                    result.missing.append(rel_path)
                except OSError as e:
                    err_console.print(
                        CleanupFormatter.format_remove_failure(rel_path, e),
                        soft_wrap=True,
                    )
                    result.failed.append(rel_path)
                else:
                    result.removed.append(rel_path)
            span.set_attribute("removed", len(result.removed))
            span.set_attribute("missing", len(result.missing))
            span.set_attribute("failed", len(result.failed))

        return result

    def report(self, outcome):
        if outcome == CleanupOutcome.EXECUTED:
            for line in CleanupFormatter.format_success():
                console.print(line, soft_wrap=True)
        else:
            console.print(CleanupFormatter.format_cancelled(), soft_wrap=True)

    def run(self, target_dir=".", assume_yes=False):
        self.announce()

        if assume_yes or self.confirm():
            result = self.execute(target_dir=target_dir)
        else:
            result = CleanupResult(outcome=CleanupOutcome.CANCELLED)

        self.report(result.outcome)
        return result

    def status(self, target_dir="."):
        """Report which stubs remain and whether their typed replacements exist."""
        root = Path(target_dir)
        return [
            StubStatus(
                file=f,
                present=(root / f.path).is_file(),
                replacement_present=(root / f.replacement_path).is_file(),
            )
            for group in self.groups
            for f in group.files
        ]
