"""
Logging support. While a prompt runs, the terminal is in raw mode and
is being redrawn, so logs cannot go there. Instead they can be forwarded
over UDP to another process, running ``pyprompt --listen``.
"""

import os
import socket
import logging

logger = logging.getLogger("pyprompt")

PORT = int(os.environ.get("PYPROMPT_LOG_PORT", "") or 12013)


class UDPHandler(logging.Handler):
    """Logging handler that sends each formatted record as UDP datagrams."""

    def __init__(self, port=PORT):
        super().__init__()
        self.udp_address = ("127.0.0.1", port)
        self._socket = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)

    def emit(self, record):
        msg = self.format(record)
        bb = msg.encode()
        size = 2**10
        try:
            while bb:
                bb1 = bb[:size]
                bb = bb[size:]
                self._socket.sendto(bb1, self.udp_address)
        except OSError:
            self.handleError(record)

    def close(self):
        self._socket.close()
        super().close()


def forward_logs(port=PORT, level=logging.INFO):
    """Forward the pyprompt logs to ``listen_to_logs()`` in another process."""
    handler = UDPHandler(port)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.setLevel(level)
    logger.addHandler(handler)
    return handler


def listen_to_logs(port=PORT):
    """Called from ``pyprompt --listen``

    This way we can see the logs from another process, so it does not get mixed up with the prompt.
    """

    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", port))
    print(f"Listening for pyprompt logs on port {port}")

    try:
        while True:
            data, addr = sock.recvfrom(2**20)
            print(data.decode(errors="replace"))
    finally:
        sock.close()
