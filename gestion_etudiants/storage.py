"""Flat CSV tables with a header line, and the errors of the data layer."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Iterator, Sequence


class GestionError(Exception):
    """Base error of the data layer."""


class DuplicateError(GestionError):
    """A record with the same key is already stored."""


class NotFoundError(GestionError, LookupError):
    """No record matches the given key."""


class CsvTable:
    """A comma separated file whose first line is a header.

    Fields are not quoted; the last field of a line may hold commas.
    Reading stops at the first malformed line.
    """

    def __init__(self, path: str | os.PathLike[str], header: Sequence[str]) -> None:
        self.path = Path(path)
        self.header = tuple(header)
        if not self.header:
            raise ValueError("header must name at least one column")

    def rows(self) -> Iterator[list[str]]:
        """Yield the data rows, skipping blank lines, until a malformed one."""
        try:
            handle = open(self.path, encoding="utf-8", newline="")
        except FileNotFoundError:
            return
        width = len(self.header)
        with handle:
            lines = iter(handle)
            next(lines, None)
            for line in lines:
                line = line.rstrip("\n").rstrip("\r")
                if not line.strip():
                    continue
                fields = line.split(",", width - 1)
                if len(fields) != width or not all(fields):
                    return
                yield fields

    def append(self, row: Sequence[str]) -> None:
        """Add one row, writing the header first if the file is new or empty."""
        line = self._line(row)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fresh = not self.path.exists() or self.path.stat().st_size == 0
        with open(self.path, "a", encoding="utf-8", newline="") as handle:
            if fresh:
                handle.write(self._line(self.header))
            handle.write(line)

    def rewrite(self, rows: Iterable[Sequence[str]]) -> None:
        """Replace the whole content of the table with the given rows."""
        lines = [self._line(row) for row in rows]
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_name(f"{self.path.stem}_tmp{self.path.suffix}")
        try:
            with open(tmp, "w", encoding="utf-8", newline="") as handle:
                handle.write(self._line(self.header))
                handle.writelines(lines)
            os.replace(tmp, self.path)
        finally:
            if tmp.exists():
                tmp.unlink()

    def _line(self, row: Sequence[str]) -> str:
        fields = [str(field) for field in row]
        if len(fields) != len(self.header):
            raise ValueError(
                f"{len(self.header)} champs attendus, {len(fields)} recus"
            )
        if any("\n" in field or "\r" in field for field in fields):
            raise ValueError("un champ ne peut pas contenir de fin de ligne")
        return ",".join(fields) + "\n"