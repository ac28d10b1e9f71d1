r"""Column-aligning text writer.

Text written to a `TabWriter` uses tab characters as cell terminators. On
flush, cells of adjacent lines that share a column index are padded to a
common width, so that tab-separated parts of consecutive lines line up:

    a\tint        ->  a       int
    count\tint        count   int

A column block is a maximal run of consecutive lines that all have a
terminated cell in that column; its width is the widest cell plus the
padding, but never less than the minimal width. The last cell of a line is
not tab-terminated and is written as is.
"""

from __future__ import annotations

from typing import TextIO

from gopretty.printer.errors import PrintError


class TabWriter:
    """Buffers text and writes it column-aligned on `flush`."""

    def __init__(
        self,
        output: TextIO,
        tabwidth: int = 8,
        padding: int = 1,
        padchar: str = "\t",
        minwidth: int | None = None,
    ) -> None:
        if tabwidth < 0 or padding < 0:
            raise ValueError("tabwidth and padding cannot be negative")
        if len(padchar) != 1:
            raise ValueError("padchar must be a single character")
        self._output = output
        self._tabwidth = tabwidth
        self._padding = padding
        self._padchar = padchar
        self._minwidth = tabwidth if minwidth is None else minwidth
        self._buffer: list[str] = []

    def write(self, text: str) -> int:
        self._buffer.append(text)
        return len(text)

    def flush(self) -> None:
        text = "".join(self._buffer)
        self._buffer.clear()
        lines = [line.split("\t") for line in text.split("\n")]
        rendered: list[str] = [""] * len(lines)
        self._format(lines, 0, len(lines), [], rendered)
        try:
            self._output.write("\n".join(rendered))
            flush = getattr(self._output, "flush", None)
            if flush is not None:
                flush()
        except (OSError, ValueError) as exc:
            raise PrintError(f"print error - cannot write output: {exc}") from exc

    def _format(
        self,
        lines: list[list[str]],
        line0: int,
        line1: int,
        widths: list[int],
        rendered: list[str],
    ) -> None:
        column = len(widths)
        this = line0
        while this < line1:
            if column >= len(lines[this]) - 1:
                this += 1
                continue

            # lines before the block do not reach this column
            self._write_lines(lines, line0, this, widths, rendered)
            line0 = this

            width = self._minwidth
            while this < line1 and column < len(lines[this]) - 1:
                width = max(width, len(lines[this][column]) + self._padding)
                this += 1

            self._format(lines, line0, this, [*widths, width], rendered)
            line0 = this

        self._write_lines(lines, line0, line1, widths, rendered)

    def _write_lines(
        self,
        lines: list[list[str]],
        line0: int,
        line1: int,
        widths: list[int],
        rendered: list[str],
    ) -> None:
        for i in range(line0, line1):
            cells = lines[i]
            parts: list[str] = []
            last = len(cells) - 1
            for j, cell in enumerate(cells):
                parts.append(cell)
                if j < last:
                    parts.append(self._pad(len(cell), widths[j]))
            rendered[i] = "".join(parts)

    def _pad(self, textw: int, cellw: int) -> str:
        if self._padchar == "\t":
            if self._tabwidth == 0:
                return ""
            # cell width rounded up to the next tab stop
            cellw = -(-cellw // self._tabwidth) * self._tabwidth
            return "\t" * -(-(cellw - textw) // self._tabwidth)
        return self._padchar * (cellw - textw)
