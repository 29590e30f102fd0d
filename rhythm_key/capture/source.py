"""Keystroke sources that feed capture sessions."""

import codecs
import logging
import os
import sys
import termios
import time
import tty
from contextlib import ExitStack, contextmanager
from typing import IO, Iterable, Iterator, NamedTuple, Optional, Tuple

logger = logging.getLogger(__name__)


class Keystroke(NamedTuple):
    """A key as delivered by a source, with its measured wait in ms."""

    char: str
    elapsed_ms: float


@contextmanager
def raw_terminal_mode(fd: int) -> Iterator[bool]:
    """
    Put a terminal into cbreak mode with echo off for the duration of the block.

    The previous ``termios`` attributes are restored on every exit path.
    Non-terminal descriptors (pipes, files) are left alone.

    Yields:
        True if the terminal mode was changed.
    """
    if not os.isatty(fd):
        logger.warning("File descriptor %d is not a terminal; reading as-is", fd)
        yield False
        return

    saved = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        # Some Python releases leave ECHO on in tty.setcbreak.
        mode = termios.tcgetattr(fd)
        mode[3] &= ~termios.ECHO
        termios.tcsetattr(fd, termios.TCSANOW, mode)
        logger.debug("Terminal %d switched to cbreak/no-echo", fd)
        yield True
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)
        logger.debug("Terminal %d mode restored", fd)


class TerminalSource:
    """
    Live keystrokes from a terminal.

    Each keystroke is timed from the moment its read starts until the key
    arrives, so the value is the wait since the previous accepted key.

    Example::

        with TerminalSource() as source:
            rk = assemble_rhythm_key(source)
    """

    def __init__(self, stream: Optional[IO] = None, encoding: str = "utf-8"):
        self.stream = stream if stream is not None else sys.stdin
        self.encoding = encoding
        self._stack: Optional[ExitStack] = None

    def fileno(self) -> int:
        return self.stream.fileno()

    def __enter__(self) -> "TerminalSource":
        self._stack = ExitStack()
        self._stack.enter_context(raw_terminal_mode(self.fileno()))
        return self

    def __exit__(self, *exc_info) -> None:
        stack, self._stack = self._stack, None
        if stack is not None:
            stack.close()

    def __iter__(self) -> Iterator[Keystroke]:
        fd = self.fileno()
        decoder = codecs.getincrementaldecoder(self.encoding)(errors="replace")

        while True:
            start = time.perf_counter()
            text = ""
            # Multi-byte characters arrive one byte at a time.
            while not text:
                data = os.read(fd, 1)
                if not data:
                    return
                text = decoder.decode(data)
            elapsed_ms = (time.perf_counter() - start) * 1000.0
            for char in text:
                yield Keystroke(char, elapsed_ms)


class IterableSource:
    """Replays ``(char, elapsed_ms)`` pairs, e.g. a scripted capture."""

    def __init__(self, pairs: Iterable[Tuple[str, float]]):
        self.pairs = pairs

    def __iter__(self) -> Iterator[Keystroke]:
        for char, elapsed_ms in self.pairs:
            yield Keystroke(char, elapsed_ms)
