import sys
import asyncio
import logging

from .term import InputReader, Screen, TerminalContext, read_keys


logger = logging.getLogger("pyprompt")


class SessionManager:
    """Object to manage the interactive sessions on a terminal.

    At most one session holds the terminal at a time. Sessions are run in
    the order in which they were requested (via ``run()``), each one
    waiting until the previous one has finished, whether it succeeded or
    failed. While a session runs, the cursor is hidden and the input is in
    raw mode.

    The streams default to the real stdin and stdout, and are looked up
    when first needed, so that creating a manager has no side effects.
    """

    def __init__(self, stdin=None, stdout=None, terminal_context=None, read_chunk=None):
        self._stdin = stdin
        self._stdout = stdout
        self._terminal_context = terminal_context
        self._read_chunk = read_chunk
        self._screen = None
        self._tail = None  # the task of the most recently requested session

    @property
    def stdin(self):
        return self._stdin or sys.__stdin__

    @property
    def stdout(self):
        return self._stdout or sys.__stdout__

    @property
    def screen(self):
        """The Screen that sessions paint on."""
        if self._screen is None:
            stdout = self.stdout
            # Text files are written to via their buffer
            self._screen = Screen(getattr(stdout, "buffer", stdout))
        return self._screen

    def terminal_context(self):
        """Create a context manager that puts the input in raw mode."""
        if self._terminal_context is not None:
            return self._terminal_context()
        # The stream we paint on needs VT processing on Windows
        stdout = self.stdout
        try:
            stdout.fileno()
        except (AttributeError, OSError, ValueError):
            stdout = None
        return TerminalContext(stdin=self.stdin, stdout=stdout)

    def read_keys(self):
        """Get an async generator of keys for a single session."""
        read_chunk = self._read_chunk
        if read_chunk is None:
            read_chunk = InputReader(self.stdin.fileno()).read
        return read_keys(read_chunk)

    async def run(self, action):
        """Run the given coroutine function as a session, and return its result.

        The action is not started until all previously requested sessions
        have finished.
        """
        loop = asyncio.get_running_loop()
        previous = self._tail
        if previous is not None and previous.get_loop() is not loop:
            # Left over from an event loop that is no longer ours
            previous = None
        task = loop.create_task(self._run_after(previous, action))
        self._tail = task
        return await task

    async def _run_after(self, previous, action):
        # Wait for the previous session to settle. asyncio.wait() does not
        # raise the previous session's error; that's for its own caller.
        if previous is not None and not previous.done():
            logger.info("session waiting for previous session")
            await asyncio.wait({previous})

        screen = self.screen
        screen.hide_cursor()
        try:
            with self.terminal_context():
                logger.info("session started")
                try:
                    return await action()
                finally:
                    logger.info("session ended")
        finally:
            screen.show_cursor()


# Create global instance
session_manager = SessionManager()
