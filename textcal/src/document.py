"""Text file layout around the rendered calendar: header, folds, modeline."""

from pathlib import Path

from .render import render, validate_year

FOLD_OPEN = "{{{"
FOLD_CLOSE = "}}}"
MODELINE = "vim: set foldmethod=marker nomodified:"


def output_filename(year: int, suffix: str = ".txt") -> str:
    return f"textcal-{year}{suffix}"


def build_document(year) -> list[str]:
    """Full file contents as lines, each month wrapped in a fold."""
    year = validate_year(year)
    sections = render(year)
    title = f"Textkalender {year}"
    lines = [title, "=" * len(title), ""]
    for section in sections:
        lines.append(f"{section.name} {year} {FOLD_OPEN}")
        lines.extend(section.lines)
        lines.append(FOLD_CLOSE)
    lines += ["", MODELINE]
    return lines


def write_document(year, directory: Path, overwrite: bool = False) -> Path:
    """Write textcal-<year>.txt into directory and return its path.

    Raises FileExistsError if the file is already there and overwrite is off.
    """
    year = validate_year(year)
    lines = build_document(year)
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / output_filename(year)
    mode = "w" if overwrite else "x"
    with open(path, mode, encoding="utf-8") as f:
        f.write("\n".join(lines) + "\n")
    return path
