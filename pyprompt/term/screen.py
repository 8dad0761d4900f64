"""
Writing frames to the terminal with vt100 escape sequences.

A frame is a list of lines. To repaint, we walk back up over the lines
that were written last time, clearing each, and then write the new frame
on top. This keeps the prompt in place, without scrolling the terminal.
"""

import enum


class CursorDir(enum.Enum):
    """The final char of the CSI sequence for each cursor movement."""

    UP = "A"
    DOWN = "B"
    RIGHT = "C"
    LEFT = "D"
    COLUMN = "G"


class Screen:
    """Cursor control and frame painting on a binary output stream."""

    def __init__(self, file_out):
        self._file_out = file_out
        # Number of newlines written by the last write_lines()
        self.row = 0

    def _write(self, text):
        self._file_out.write(text.encode("utf-8", errors="replace"))

    def flush(self):
        self._file_out.flush()

    def move_cursor(self, direction, n=None):
        count = "" if n is None else str(n)
        self._write(f"\x1b[{count}{direction.value}")

    def erase_to_end(self):
        self._write("\x1b[0K")

    def hide_cursor(self):
        self._write("\x1b[?25l")
        self.flush()

    def show_cursor(self):
        self._write("\x1b[?25h")
        self.flush()

    def clear_row(self):
        self.move_cursor(CursorDir.COLUMN)
        self.erase_to_end()

    def newline(self):
        self._write("\n")
        self.flush()

    def reset(self):
        """Forget about the previous frame. Call at the start of a session."""
        self.row = 0

    def write_lines(self, lines):
        """Replace the previously written frame with the given lines.

        The cursor is left in the first column of the last line.
        """
        write = self._write

        # Clear the old frame, from the bottom up
        while self.row > 0:
            self.clear_row()
            self.move_cursor(CursorDir.UP)
            self.row -= 1
        self.clear_row()

        # Write the new frame
        last = len(lines) - 1
        for i, line in enumerate(lines):
            self.move_cursor(CursorDir.COLUMN)
            write(line)
            if i < last:
                write("\n")
                self.row += 1

        self.move_cursor(CursorDir.COLUMN)
        self.flush()
