import io
import asyncio
from contextlib import contextmanager

import pytest

from pyprompt import SessionManager


class FakeTerminal:
    """Stands in for stdin/stdout and the raw mode of a real terminal."""

    def __init__(self):
        self.output = io.BytesIO()
        self.chunks = []
        self.raw = False
        self.raw_count = 0

    def feed(self, *chunks):
        self.chunks.extend(chunks)

    async def read_chunk(self):
        await asyncio.sleep(0)
        if self.chunks:
            return self.chunks.pop(0)
        return b""

    @contextmanager
    def raw_mode(self):
        assert not self.raw, "raw mode entered twice"
        self.raw = True
        self.raw_count += 1
        try:
            yield self
        finally:
            self.raw = False

    def manager(self):
        return SessionManager(
            stdout=self.output,
            terminal_context=self.raw_mode,
            read_chunk=self.read_chunk,
        )

    @property
    def text(self):
        return self.output.getvalue().decode()


@pytest.fixture
def terminal():
    return FakeTerminal()
