"""
Validate command - check SPLICE file integrity and structure.
"""

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.panel import Panel
from rich import box

from splicedrum.formats.splice.binary_parser import SpliceParser
from splicedrum.utils.validation import LENGTH_FIELD_OFFSET, PAYLOAD_OFFSET, SpliceError
from splicedrum.render import format_tempo
from cli.loader import read_file

console = Console()
app = typer.Typer()


@dataclass
class ValidationIssue:
    """A single validation issue."""

    severity: str  # "error", "warning", "info"
    area: str
    offset: int
    message: str


@dataclass
class ValidationResult:
    """Result of validating a SPLICE file."""

    filepath: str
    valid: bool
    errors: List[ValidationIssue] = field(default_factory=list)
    warnings: List[ValidationIssue] = field(default_factory=list)
    info: List[ValidationIssue] = field(default_factory=list)

    @property
    def total_issues(self) -> int:
        return len(self.errors) + len(self.warnings) + len(self.info)


class SpliceValidator:
    """Validate SPLICE file structure and content."""

    # Plausible tempo range for a drum machine
    VALID_TEMPO_RANGE = (1.0, 999.0)

    def __init__(self, data: bytes, filepath: str):
        self.data = data
        self.filepath = filepath
        self.issues: List[ValidationIssue] = []
        self.parser = SpliceParser()

    def validate(self) -> ValidationResult:
        """Perform full validation and return result."""
        self.issues = []

        if self._validate_structure():
            self._validate_trailing_bytes()
            self._validate_tempo()
            self._validate_steps()
            self._validate_track_ids()

        errors = [i for i in self.issues if i.severity == "error"]
        warnings = [i for i in self.issues if i.severity == "warning"]
        info = [i for i in self.issues if i.severity == "info"]

        return ValidationResult(
            filepath=self.filepath,
            valid=len(errors) == 0,
            errors=errors,
            warnings=warnings,
            info=info,
        )

    def _add_issue(self, severity: str, area: str, offset: int, message: str) -> None:
        self.issues.append(ValidationIssue(severity, area, offset, message))

    def _validate_structure(self) -> bool:
        """Run the decoder; any decode failure is an error."""
        try:
            header, tracks = self.parser.parse_bytes(self.data)
        except SpliceError as e:
            self._add_issue("error", e.kind.name.replace("_", " ").title(), 0, str(e))
            return False

        self._add_issue("info", "Header", 0, "SPLICE tag is valid")
        self._add_issue(
            "info",
            "Payload",
            LENGTH_FIELD_OFFSET,
            f"Declared payload of {header.declared_length} bytes is present",
        )
        self._add_issue("info", "Tracks", PAYLOAD_OFFSET, f"{len(tracks)} track(s) decoded")
        return True

    def _validate_trailing_bytes(self) -> None:
        trailing = self.parser.header.trailing_bytes
        if trailing > 0:
            self._add_issue(
                "warning",
                "Payload",
                len(self.data) - trailing,
                f"{trailing} byte(s) after the declared payload are ignored",
            )

    def _validate_tempo(self) -> None:
        tempo = self.parser.header.tempo
        low, high = self.VALID_TEMPO_RANGE
        if not low <= tempo <= high:
            self._add_issue(
                "warning",
                "Tempo",
                SpliceParser.OFFSETS["tempo"],
                f"Unusual tempo value: {format_tempo(tempo)} BPM",
            )
        else:
            self._add_issue(
                "info", "Tempo", SpliceParser.OFFSETS["tempo"], f"Tempo is {format_tempo(tempo)} BPM"
            )

    def _validate_steps(self) -> None:
        """Steps are expected to be 0 or 1."""
        for track, offset in zip(self.parser.tracks, self.parser.track_offsets):
            odd = sorted({v for v in track.steps if v not in (0, 1)})
            if odd:
                self._add_issue(
                    "warning",
                    "Steps",
                    offset,
                    f"Track ({track.id}) {track.name}: step values {odd} render as off",
                )

    def _validate_track_ids(self) -> None:
        counts = Counter(track.id for track in self.parser.tracks)
        for track_id, count in sorted(counts.items()):
            if count > 1:
                self._add_issue(
                    "warning", "Tracks", PAYLOAD_OFFSET, f"Track id {track_id} used {count} times"
                )


def display_validation(result: ValidationResult) -> None:
    """Display validation result with Rich formatting."""
    if result.valid:
        status = "[bold green]VALID[/bold green]"
        border = "green"
    else:
        status = "[bold red]INVALID[/bold red]"
        border = "red"

    console.print(
        Panel(
            f"[bold]File:[/bold] {escape(result.filepath)}\n"
            f"[bold]Status:[/bold] {status}\n\n"
            f"Errors: [red]{len(result.errors)}[/red]  "
            f"Warnings: [yellow]{len(result.warnings)}[/yellow]  "
            f"Info: [blue]{len(result.info)}[/blue]",
            title="[bold]Validation Result[/bold]",
            border_style=border,
        )
    )

    if result.errors or result.warnings:
        table = Table(title="Issues", box=box.ROUNDED, show_header=True, header_style="bold cyan")
        table.add_column("Severity", width=10)
        table.add_column("Area", style="cyan", width=20)
        table.add_column("Offset", style="dim", width=8)
        table.add_column("Message", width=40)

        for issue in result.errors:
            table.add_row(
                "[red]ERROR[/red]", issue.area, f"0x{issue.offset:02X}", escape(issue.message)
            )

        for issue in result.warnings:
            table.add_row(
                "[yellow]WARN[/yellow]", issue.area, f"0x{issue.offset:02X}", escape(issue.message)
            )

        console.print(table)

    if result.info and not result.errors and not result.warnings:
        info_table = Table(title="Validation Checks", box=box.SIMPLE, show_header=False)
        info_table.add_column("", width=60)

        for issue in result.info:
            info_table.add_row(f"[green]OK[/green] {issue.area}: {escape(issue.message)}")

        console.print(info_table)


@app.command()
def validate(
    file: Path = typer.Argument(..., help="SPLICE file to validate"),
    strict: bool = typer.Option(False, "--strict", "-s", help="Treat warnings as errors"),
) -> None:
    """
    Validate a SPLICE pattern file structure and content.

    Checks for:

    - SPLICE tag and remaining-byte count
    - Complete header and track records
    - Bytes after the declared payload
    - Unusual tempo, step values other than 0/1, duplicate track ids

    Examples:

        splicedrum validate pattern_1.splice

        splicedrum validate pattern_1.splice --strict
    """
    data = read_file(file)

    validator = SpliceValidator(data, str(file))
    result = validator.validate()

    if strict and result.warnings:
        result.valid = False

    display_validation(result)

    if not result.valid:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
