import sys
import logging


logger = logging.getLogger("pyprompt")


class TerminalContext:
    """Context manager that puts the terminal input in raw mode.

    Instantiating this class produces a class corresponding with the
    current platform. On exit, the mode that the terminal was in on
    entering is restored.
    """

    def __new__(cls, **kwargs):
        # Select terminal class
        if sys.platform.startswith("win"):
            from ._context_windows import WindowsTerminalContext as TerminalContext
        else:
            from ._context_unix import UnixTerminalContext as TerminalContext
        return super().__new__(TerminalContext)

    def __init__(self, stdin=None, stdout=None):

        self._entered = False

        stdin = stdin or sys.__stdin__
        stdout = stdout or sys.__stdout__
        self.fd_in = stdin.fileno()
        self.fd_out = stdout.fileno()

        # Warn if it looks like this is not a terminal
        self.is_tty = stdin.isatty()
        if not self.is_tty:
            sys.stderr.write(f"Warning: Input is not a tty: {stdin}\n")
            sys.stderr.flush()

    def __enter__(self):
        if self._entered:
            raise RuntimeError("Can only enter the context state once.")
        self._entered = True
        if self.is_tty:
            self._store_terminal_mode()
            self._set_terminal_mode()
            logger.info("terminal in raw mode")
        return self

    def __exit__(self, *args):
        self._entered = False
        self.reset()

    def reset(self):
        """Reset the terminal to the state it was when the context was entered."""
        if self.is_tty:
            self._reset_terminal_mode()
            logger.info("terminal mode restored")

    # For subclasses to implement

    def _store_terminal_mode(self):
        raise NotImplementedError()

    def _set_terminal_mode(self):
        raise NotImplementedError()

    def _reset_terminal_mode(self):
        raise NotImplementedError()
