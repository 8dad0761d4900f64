import os
import asyncio
import logging


logger = logging.getLogger("pyprompt")


class InputReader:
    """Reads raw chunks from a file descriptor without blocking the event loop.

    Where the loop can watch the fd (selector loops on Unix), we wait until
    it is readable and then read, so a cancelled read leaves nothing
    behind. Otherwise (the proactor loop on Windows, regular files) the read
    is done in the loop's default executor. A read cancelled there keeps its
    thread blocked in os.read() until input arrives, and that input is lost.
    Reads happen one at a time, so no bytes are consumed that no one asked for.
    """

    def __init__(self, fd, size=8):
        self._fd = fd
        self._size = size

    async def read(self):
        loop = asyncio.get_running_loop()
        try:
            try:
                await self._wait_readable(loop)
            except (NotImplementedError, OSError, ValueError):
                bb = await loop.run_in_executor(None, os.read, self._fd, self._size)
            else:
                bb = os.read(self._fd, self._size)
        except OSError as err:
            # E.g. stdin was closed underneath us; treat like EOF
            logger.warning(f"input read failed: {err}")
            return b""
        logger.info(f"input read: {bb!r}")
        return bb

    async def _wait_readable(self, loop):
        fut = loop.create_future()

        def on_readable():
            if not fut.done():
                fut.set_result(None)

        loop.add_reader(self._fd, on_readable)
        try:
            await fut
        finally:
            loop.remove_reader(self._fd)
