"""
Breaker Console Output
=======================

Rich-based console formatters for Breaker results: recovered keys and
plaintext in summary panels, candidate rankings and period guesses in
tables.

Uses the Cryptex shared console infrastructure for consistent styling.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

from typing import Optional

from rich.panel import Panel
from rich.text import Text

from shared.console import CryptexConsole
from breaker.core.models import (
    BruteForceReport,
    CaesarResult,
    PeriodReport,
    VigenereResult,
)

_PREVIEW_CHARS = 60


def _preview(text: str, limit: int = _PREVIEW_CHARS) -> str:
    flat = " ".join(text.split())
    return flat if len(flat) <= limit else flat[: limit - 3] + "..."


class BreakerConsoleOutput:
    """Console output formatters for Breaker results.

    Usage::

        console = CryptexConsole()
        output = BreakerConsoleOutput(console)
        output.display_caesar(engine.crack_caesar(text))
    """

    def __init__(self, console: Optional[CryptexConsole] = None) -> None:
        self.console = console or CryptexConsole()
        self._rich = self.console.rich

    def _summary(self, title: str, fields: list[tuple[str, str]], plaintext: str) -> None:
        summary = Text()
        for label, value in fields:
            summary.append(f"{label}: ", style="bold")
            summary.append(f"{value}\n")
        summary.append("\nPlaintext:\n", style="bold")
        summary.append(plaintext, style="bright_white")
        self._rich.print(Panel(summary, title=title, border_style="cyan"))

    # ------------------------------------------------------------------ #
    #  Caesar
    # ------------------------------------------------------------------ #

    def display_caesar(self, result: CaesarResult, top: int = 5) -> None:
        """Display the best Caesar guess and the *top* ranked shifts."""
        self.console.section("Caesar Analysis")
        self._summary(
            "Best Guess",
            [
                ("Language", result.language),
                ("Key", f"{result.key!r} (shift {result.shift})"),
                ("Chi-Squared", f"{result.score:.4f}"),
            ],
            result.plaintext,
        )

        if top > 1 and result.candidates:
            best = result.candidates[0].score
            rows = [
                (c.key, c.shift, f"{c.score:.4f}", _preview(c.plaintext))
                for c in result.candidates[:top]
            ]
            self.console.table(
                "Ranked Shifts",
                ["Key", "Shift", "Chi-Squared", "Plaintext"],
                rows,
            )
            self._rich.print(
                f"[dim]Best chi-squared {best:.4f}; "
                f"{len(result.candidates)} shifts tried[/dim]"
            )

    # ------------------------------------------------------------------ #
    #  Vigenere
    # ------------------------------------------------------------------ #

    def display_period(self, report: PeriodReport) -> None:
        """Display the key-length guess for each repetition length."""
        self.console.section("Period Analysis")
        rows = []
        for guess in report.guesses:
            common = sorted(guess.gaps.items(), key=lambda kv: (-kv[1], kv[0]))[:5]
            rows.append((
                guess.repetition_length,
                guess.key_length if guess.key_length is not None else "-",
                sum(guess.gaps.values()),
                ", ".join(f"{gap}x{count}" for gap, count in common) or "-",
            ))
        self.console.table(
            "Repeated Substring Gaps",
            ["Repeat Length", "Key Length", "Repeats", "Most Common Gaps"],
            rows,
            caption=f"{report.text_length} alphabet characters examined",
        )

    def display_vigenere(self, result: VigenereResult) -> None:
        """Display the recovered Vigenere key and plaintext."""
        self.console.section("Vigenere Analysis")
        self._summary(
            "Best Guess",
            [
                ("Language", result.language),
                ("Key", repr(result.key)),
                ("Key Length", str(result.key_length)),
                ("Repeat Length", str(result.repetition_length)),
                ("Chi-Squared", f"{result.score:.4f}"),
            ],
            result.plaintext,
        )

    # ------------------------------------------------------------------ #
    #  Brute force
    # ------------------------------------------------------------------ #

    def display_brute_force(self, report: BruteForceReport) -> None:
        """Display the lowest-scoring brute-force candidates."""
        self.console.section("Brute Force")
        if not report.best:
            self.console.warning("No candidate keys were tried")
            return

        self.console.table(
            "Best Candidates",
            ["#", "Key", "Chi-Squared", "Plaintext"],
            [
                (i, c.key, f"{c.score:.4f}", _preview(c.plaintext))
                for i, c in enumerate(report.best, start=1)
            ],
            caption=f"{report.candidates_tried:,} keys tried",
            styles=["dim", "bold", "", ""],
        )
        self._rich.print(Text(f"Best key: {report.best[0].key}", style="bold bright_green"))
