"""
The generic interactive prompt: render, read a key, react, repeat.
"""

import sys
import logging

from .session import session_manager


logger = logging.getLogger("pyprompt")

# Exit code used when a prompt is cancelled (ctrl-c or end of input).
EXIT_CODE_CANCELLED = 120


async def run_selection(render, on_key, no_clear=False, manager=None):
    """Run an interactive prompt session.

    Args:
        render: function that returns the current frame as a list of lines.
        on_key: function that is called with each key (a Key or str). It
            updates the prompt state, and returns a non-None value to finish
            the prompt with that result.
        no_clear: whether to leave the final frame on screen.
        manager: the SessionManager to use. Defaults to the global one.

    Returns the result of ``on_key``, or None if the input ended or the user
    pressed ctrl-c before that.
    """
    if manager is None:
        manager = session_manager

    async def action():
        screen = manager.screen
        screen.reset()
        screen.write_lines(render())

        keys = manager.read_keys()
        try:
            async for key in keys:
                result = on_key(key)
                if result is not None:
                    screen.write_lines([])
                    if no_clear:
                        screen.write_lines(render())
                        screen.newline()
                    return result
                screen.write_lines(render())
        finally:
            await keys.aclose()

        logger.info("prompt cancelled")
        screen.write_lines([])
        return None

    return await manager.run(action)


def result_or_exit(result):
    """Return the result, or exit the process if there is none."""
    if result is None:
        sys.exit(EXIT_CODE_CANCELLED)
    return result


def to_styling(styling, cls):
    """Get a styling instance from None, a dict of overrides, or an instance."""
    if styling is None:
        return cls()
    elif isinstance(styling, dict):
        return cls(**styling)
    return styling
