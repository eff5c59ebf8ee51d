"""In-memory text buffer for a single source file.

Lines are stored without terminators. The buffer remembers the file's line
ending and whether the text ended with one so that ``text`` reproduces an
unedited file byte for byte.
"""
from typing import List, Optional

from auto_doc_generator.constants import FileDefaults
from auto_doc_generator.core.exceptions import EditApplicationError
from auto_doc_generator.core.logging import get_logger

logger = get_logger(__name__)


class TextBuffer:
    """A mutable list of lines with an atomic insert operation."""

    def __init__(
        self,
        lines: Optional[List[str]] = None,
        eol: str = "\n",
        trailing_newline: bool = True,
        file_path: Optional[str] = None,
        encoding: str = FileDefaults.ENCODING,
    ) -> None:
        self._lines: List[str] = list(lines or [])
        self.eol = eol
        self.trailing_newline = trailing_newline
        self.file_path = file_path
        self.encoding = encoding
        self.version = 0
        self.closed = False

    @classmethod
    def from_text(cls, text: str, file_path: Optional[str] = None, encoding: str = FileDefaults.ENCODING) -> "TextBuffer":
        """Build a buffer from source text, detecting its line ending."""
        eol = "\r\n" if "\r\n" in text else "\n"
        trailing_newline = text.endswith("\n")

        lines = text.split("\n")
        if trailing_newline:
            lines.pop()
        if eol == "\r\n":
            lines = [line[:-1] if line.endswith("\r") else line for line in lines]

        return cls(lines, eol=eol, trailing_newline=trailing_newline, file_path=file_path, encoding=encoding)

    @classmethod
    def from_file(cls, file_path: str, encoding: str = FileDefaults.ENCODING) -> "TextBuffer":
        """Read a file into a buffer."""
        with open(file_path, "r", encoding=encoding, newline="") as f:
            content = f.read()
        return cls.from_text(content, file_path=file_path, encoding=encoding)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def lines(self) -> List[str]:
        """A copy of the current lines."""
        return list(self._lines)

    @property
    def text(self) -> str:
        body = self.eol.join(self._lines)
        if self.trailing_newline and self._lines:
            body += self.eol
        return body

    def line_at(self, line_number: int) -> str:
        """Return the text of one line (0-indexed)."""
        if line_number < 0 or line_number >= len(self._lines):
            raise IndexError(f"Line {line_number} out of range (buffer has {len(self._lines)} lines)")
        return self._lines[line_number]

    def insert(self, line_number: int, text: str) -> int:
        """Insert text at column 0 of a line as one atomic edit.

        ``text`` uses ``\\n`` separators; a trailing ``\\n`` pushes the
        target line down intact.

        Args:
            line_number: Target line (0-indexed); ``line_count`` appends
            text: Text to insert

        Returns:
            Number of lines added to the buffer

        Raises:
            EditApplicationError: If the buffer is closed or the line is out of range
        """
        if self.closed:
            raise EditApplicationError(line_number, "buffer is closed")
        if line_number < 0 or line_number > len(self._lines):
            raise EditApplicationError(
                line_number, f"line out of range (buffer has {len(self._lines)} lines)"
            )

        pieces = text.split("\n")
        target = self._lines[line_number] if line_number < len(self._lines) else ""

        new_lines = pieces[:-1]
        if line_number < len(self._lines) or pieces[-1]:
            new_lines.append(pieces[-1] + target)
        tail_start = line_number + 1 if line_number < len(self._lines) else line_number

        # Build the full replacement first so a failure leaves the buffer untouched
        updated = self._lines[:line_number] + new_lines + self._lines[tail_start:]
        added = len(updated) - len(self._lines)
        self._lines = updated
        self.version += 1
        return added

    def close(self) -> None:
        """Mark the buffer closed; later edits fail."""
        self.closed = True

    def save(self, file_path: Optional[str] = None) -> str:
        """Write the buffer to disk.

        Returns:
            The path written
        """
        path = file_path or self.file_path
        if not path:
            raise ValueError("Buffer has no file path to save to")

        with open(path, "w", encoding=self.encoding, newline="") as f:
            f.write(self.text)

        logger.debug("buffer_saved", file_path=path, lines=len(self._lines))
        return path
