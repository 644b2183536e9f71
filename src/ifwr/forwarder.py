"""Pass-through output sink that notes whether anything was written."""

from typing import BinaryIO

CHUNK_SIZE = 64 * 1024


class WriteTracker:
    """Forward bytes to a real stream and remember if any arrived.

    `destination` is any binary sink with write() and flush(), usually
    sys.stdout.buffer or sys.stderr.buffer. Errors raised by it are not
    caught here.
    """

    def __init__(self, destination: BinaryIO, watched: bool):
        self.destination = destination
        self.watched = watched
        self.wrote = False

    def write(self, data: bytes) -> int:
        if data:
            self.wrote = True
        n = self.destination.write(data)
        self.destination.flush()
        return n

    def failed(self) -> bool:
        """True when this stream is watched and received output."""
        return self.watched and self.wrote


def pump(source: BinaryIO, tracker: WriteTracker) -> None:
    """Copy `source` into `tracker` until EOF, then close `source`.

    A destination error stops the copy and propagates. Closing the read
    end means a child still writing gets EPIPE instead of blocking.
    """
    with source:
        while True:
            chunk = source.read(CHUNK_SIZE)
            if not chunk:
                return
            tracker.write(chunk)
