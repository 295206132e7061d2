"""
Line scanner over text streams

Yields lines with their terminators intact so output can reproduce input
exactly. Streams should be opened with newline="" to keep "\r\n".
"""

from typing import Any, Iterator, TextIO, Tuple


class LineScanner:
    """
    Lazy, rewindable line reader

    Reads with readline() rather than file iteration so that tell() stays
    usable for the indexed extractor.
    """

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream

    def line_next(self) -> Tuple[str, bool]:
        """
        Read one line including its terminator

        Returns:
            (line, found) where found is False at end of stream. A final line
            without terminator is returned as is.
        """
        line = self.stream.readline()
        return line, line != ""

    def __iter__(self) -> Iterator[str]:
        while True:
            line, found = self.line_next()
            if not found:
                return
            yield line

    def rewind(self) -> None:
        """Reset the read position to the start of the stream"""
        self.stream.seek(0)

    def position(self) -> Any:
        """Opaque stream position, valid for seek()"""
        return self.stream.tell()

    def seek(self, position: Any) -> None:
        self.stream.seek(position)
