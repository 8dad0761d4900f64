import re
import enum
import logging


logger = logging.getLogger("pyprompt")


# %% Keys


class Key(enum.Enum):
    """The named keys that a prompt can react to.

    Any other input is passed on as plain text (a str).
    """

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ENTER = "enter"
    SPACE = "space"
    BACKSPACE = "backspace"


# Marker for ctrl-c. It is not a key; it ends the stream of keys.
INTERRUPT = object()


# %% Mappings of raw bytes to keys

# Single-byte control codes. We run the terminal in raw mode, so ctrl-c
# arrives as a byte instead of a SIGINT.
BYTE_MAP = {
    0x03: INTERRUPT,  # Control-C
    0x0D: Key.ENTER,  # Control-M, '\r' (ICRNL is off)
    0x20: Key.SPACE,
    0x7F: Key.BACKSPACE,  # ASCII Delete, what most terminals send for backspace
}

# The final char of "ESC [ X" for the arrow keys (normal cursor mode).
ARROW_MAP = {
    ord("A"): Key.UP,
    ord("B"): Key.DOWN,
    ord("C"): Key.RIGHT,
    ord("D"): Key.LEFT,
}

# Based on the pattern used by chalk/ansi-regex, which also matches OSC
# sequences terminated by BEL.
ANSI_PATTERN = re.compile(
    "[\u001b\u009b][\\[\\]()#;?]*"
    "(?:(?:(?:(?:;[-a-zA-Z\\d/#&.:=?%@~_]+)*"
    "|[a-zA-Z\\d]+(?:;[-a-zA-Z\\d/#&.:=?%@~_]*)*)?\u0007)"
    "|(?:(?:\\d{1,4}(?:;\\d{0,4})*)?[\\dA-PR-TZcf-ntqry=><~]))"
)


def strip_ansi(text):
    """Remove ANSI escape codes from text."""
    return ANSI_PATTERN.sub("", text)


# %% Decoder


def decode_chunk(bb):
    """Classify one chunk of raw input.

    Returns a Key, a str with literal text, INTERRUPT, or None if the
    chunk produces no event. A chunk is what a single read returned,
    so an escape sequence is expected to arrive as a whole.
    """
    if len(bb) == 3 and bb[0] == 0x1B and bb[1] == ord("["):
        # Unknown sequences (e.g. F-keys on some terminals) are dropped
        return ARROW_MAP.get(bb[2])
    elif len(bb) == 1 and bb[0] in BYTE_MAP:
        return BYTE_MAP[bb[0]]

    text = strip_ansi(bb.decode("utf-8", errors="replace"))
    return text or None


async def read_keys(read_chunk):
    """Async generator that yields keys (Key or str) from the given reader.

    The ``read_chunk`` coroutine function must return bytes, with an
    empty result meaning end of stream. The generator stops at the end
    of the stream, or when ctrl-c is pressed.
    """
    while True:
        bb = await read_chunk()
        if not bb:
            logger.info("input stream closed")
            break
        key = decode_chunk(bb)
        if key is INTERRUPT:
            logger.info("input interrupted")
            break
        elif key is not None:
            yield key
