from __future__ import annotations

import os
from typing import Callable, Iterator

import pytest


@pytest.fixture
def key_pipe() -> Iterator[Callable[[bytes], int]]:
    """Return a function that feeds bytes into a pipe and returns its read end.

    The write end is closed after feeding, so reading past the data hits EOF.
    """
    fds: list[int] = []

    def feed(data: bytes) -> int:
        read_fd, write_fd = os.pipe()
        fds.append(read_fd)
        os.write(write_fd, data)
        os.close(write_fd)
        return read_fd

    yield feed

    for fd in fds:
        try:
            os.close(fd)
        except OSError:
            pass
