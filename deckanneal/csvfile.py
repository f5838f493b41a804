"""Delimited text tables with an optional header row and index column."""

from __future__ import annotations

import os
import sys
from typing import Callable, Generic, TextIO, TypeVar

T = TypeVar("T")


def _format(value: object) -> str:
    """Render a cell value the way a default C-style stream would."""
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def _split_fields(line: str, delim: str) -> list[str]:
    # A trailing delimiter does not start a new, empty field.
    fields = line.split(delim)
    if fields[-1] == "":
        fields.pop()
    return fields


class CSVFile(Generic[T]):
    """A table of cells of one type, with header names and index labels."""

    def __init__(self, cast: Callable[[str], T] = str) -> None:
        self.cast = cast
        self.filepath = ""
        self.has_header = False
        self.has_index = False
        self.delim = ","
        self.header: list[str] = []
        self.index: list[str] = []
        self.cell: list[list[T]] = []

    def read(
        self,
        filepath: str | os.PathLike[str],
        has_header: bool = False,
        has_index: bool = False,
        delim: str = ",",
    ) -> None:
        """Read a delimited file, appending to the header, index and cells.

        Blank lines hold no fields and add nothing to the table.
        """
        self.filepath = os.fspath(filepath)
        self.has_header = has_header
        self.has_index = has_index
        self.delim = delim

        with open(filepath, encoding="utf-8", newline="") as stream:
            text = stream.read()

        for row_number, line in enumerate(_split_lines(text)):
            fields = _split_fields(line, delim)
            if not fields:
                continue
            first = row_number == 0

            if has_header and first:
                self.header.extend(fields[1:] if has_index else fields)
                continue

            if has_index:
                label, values = fields[0], fields[1:]
            else:
                label, values = "", fields
            if first:
                self.header.extend("" for _ in values)
            self.index.append(label)
            self.cell.append([self.cast(value) for value in values])

    def _rows(self, delim: str) -> list[str]:
        lines: list[str] = []
        width = len(self.header)
        if self.has_header:
            prefix = delim if self.has_index and self.header else ""
            lines.append(prefix + "".join(name + delim for name in self.header))
        for label, row in zip(self.index, self.cell, strict=True):
            values = row[:width]
            if len(values) < width:
                raise IndexError(f"row {label!r} has fewer than {width} cells")
            prefix = label + delim if self.has_index else ""
            lines.append(prefix + "".join(_format(value) + delim for value in values))
        return lines

    def write(self, filepath: str | os.PathLike[str], delim: str = ",") -> None:
        """Write the table to a file, every field followed by the delimiter."""
        text = "".join(line + "\n" for line in self._rows(delim)) + "\n"
        with open(filepath, "w", encoding="utf-8", newline="") as stream:
            stream.write(text)

    def show(self, file: TextIO | None = None) -> None:
        """Print a summary and the table, tab separated, to a stream."""
        out = file if file is not None else sys.stdout
        print(
            f"filepath = {self.filepath}, "
            f"isHeader = {int(self.has_header)}, "
            f"isIndex = {int(self.has_index)}, "
            f"delim = {self.delim}",
            file=out,
        )
        print(
            f"header size = {len(self.header)}, index size = {len(self.index)}",
            file=out,
        )
        width = len(self.header)
        if self.has_header:
            prefix = "\t" if self.has_index and self.header else ""
            print(prefix + "".join(f"{name}(h)\t" for name in self.header), file=out)
        for label, row in zip(self.index, self.cell, strict=True):
            prefix = f"{label}(i)\t" if self.has_index else ""
            print(prefix + "".join(_format(value) + "\t" for value in row[:width]), file=out)
        print(file=out)