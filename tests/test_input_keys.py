import asyncio

from pyprompt.term.input_keys import Key, INTERRUPT, decode_chunk, read_keys, strip_ansi


def test_decode_arrows():
    assert decode_chunk(b"\x1b[A") is Key.UP
    assert decode_chunk(b"\x1b[B") is Key.DOWN
    assert decode_chunk(b"\x1b[C") is Key.RIGHT
    assert decode_chunk(b"\x1b[D") is Key.LEFT


def test_decode_unknown_escape_is_dropped():
    assert decode_chunk(b"\x1b[Z") is None
    assert decode_chunk(b"\x1b[Q") is None
    assert decode_chunk(b"\x1b[H") is None


def test_decode_single_bytes():
    assert decode_chunk(b"\r") is Key.ENTER
    assert decode_chunk(b" ") is Key.SPACE
    assert decode_chunk(b"\x7f") is Key.BACKSPACE
    assert decode_chunk(b"\x03") is INTERRUPT


def test_decode_text():
    assert decode_chunk(b"y") == "y"
    assert decode_chunk(b"hi there") == "hi there"
    assert decode_chunk("é".encode()) == "é"
    assert decode_chunk("ü€".encode()) == "ü€"

    # Enter and space only count as keys when alone
    assert decode_chunk(b" y") == " y"
    assert decode_chunk(b"\r\r") == "\r\r"


def test_decode_strips_ansi():
    assert decode_chunk(b"\x1b[31mhi\x1b[0m") == "hi"
    assert decode_chunk(b"\x1b[0m") is None
    assert decode_chunk(b"\x1b[1;5A") is None


def test_decode_invalid_utf8():
    assert decode_chunk(b"\xff") == "�"


def test_strip_ansi():
    assert strip_ansi("plain") == "plain"
    assert strip_ansi("\x1b[1m\x1b[34mbold blue\x1b[39m\x1b[22m") == "bold blue"
    assert strip_ansi("\x1b]0;title\x07rest") == "rest"


def collect(chunks):
    chunks = list(chunks)
    reads = []

    async def read_chunk():
        bb = chunks.pop(0) if chunks else b""
        reads.append(bb)
        return bb

    async def main():
        return [key async for key in read_keys(read_chunk)]

    return asyncio.run(main()), reads, chunks


def test_read_keys_until_eof():
    keys, reads, _ = collect([b"\x1b[B", b"\x1b[Z", b"x", b" ", b"\r"])
    assert keys == [Key.DOWN, "x", Key.SPACE, Key.ENTER]
    assert reads[-1] == b""


def test_read_keys_stops_at_interrupt():
    keys, reads, remaining = collect([b"a", b"\x03", b"\r", b"b"])
    assert keys == ["a"]
    # Nothing is read after ctrl-c
    assert remaining == [b"\r", b"b"]
    assert len(reads) == 2


def test_read_keys_empty_input():
    keys, reads, _ = collect([])
    assert keys == []
    assert reads == [b""]
