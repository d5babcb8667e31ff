from __future__ import annotations
import contextlib
from dataclasses import dataclass
from typing import Callable, Iterator, Optional, TextIO

import regex

WORD_PATTERN = regex.compile(r"[A-Za-z]+")

class StreamError(Exception):
    def __init__(self, stage: str, message: str):
        super().__init__(f"{stage} failed: {message}")
        self.stage = stage

@dataclass
class TransformStats:
    lines: int = 0
    words: int = 0
    replacements: int = 0

def americanise_line(line: str, lookup: Callable[[str], str],
                     stats: Optional[TransformStats] = None) -> str:
    def replace(match) -> str:
        word = match.group(0)
        new = lookup(word)
        if stats is not None:
            stats.words += 1
            if new != word:
                stats.replacements += 1
        return new
    return WORD_PATTERN.sub(replace, line)

def iter_lines(reader: TextIO) -> Iterator[str]:
    """
    Yields lines from reader with their newline kept. The last line is yielded
    as-is when the stream does not end with a newline.
    """
    while True:
        try:
            line = reader.readline()
        except (OSError, UnicodeError) as e:
            raise StreamError("read", str(e)) from e
        if not line:
            return
        yield line

def _pump(reader: TextIO, writer: TextIO, lookup: Callable[[str], str]) -> TransformStats:
    stats = TransformStats()
    for line in iter_lines(reader):
        stats.lines += 1
        out = americanise_line(line, lookup, stats)
        try:
            writer.write(out)
        except (OSError, UnicodeError) as e:
            raise StreamError("write", str(e)) from e
    return stats

def americanise(reader: TextIO, writer: TextIO, lookup: Callable[[str], str]) -> TransformStats:
    """
    Copies reader to writer line by line, replacing every ASCII word with
    lookup(word).

    The writer is flushed before returning on every path. If copying failed,
    that error is raised and a flush failure is dropped; otherwise a flush
    failure is raised as StreamError.
    """
    try:
        stats = _pump(reader, writer, lookup)
    except Exception:
        with contextlib.suppress(OSError, ValueError):
            writer.flush()
        raise
    try:
        writer.flush()
    except (OSError, UnicodeError) as e:
        raise StreamError("flush", str(e)) from e
    return stats
