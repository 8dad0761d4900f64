"""
Utilities to work with the terminal and escape sequences.

Since it's 2024 I'm ok with supporting only win10 and up. This means we
can use a sensible subset of vt100: cursor movement, erasing a line, and
hiding the cursor. That's all a prompt needs.

We don't use curses, because that's Unix only, and would require a whole
separate implementation for Windows. Using vt100-ish escape sequences allows us
to target a broad audience, with nearly the same code.

The part where Unix and Windows differ is putting the input in raw mode.
This is why we have a base TerminalContext class, with implementations for
Unix and Windows.
"""

from ._context import TerminalContext  # noqa
from ._input_reader import InputReader  # noqa
from .input_keys import Key, decode_chunk, read_keys, strip_ansi  # noqa
from .screen import CursorDir, Screen  # noqa
