from __future__ import annotations
import contextlib
import io
import os
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, TextIO

from americanise.dictionary import load_lookup
from americanise.transform import TransformStats, americanise

from .config import AmericaniseConfig

class PathCollisionError(Exception):
    pass

class FileOpenError(Exception):
    pass

def same_path(a: str, b: str) -> bool:
    if a == b or Path(a).resolve() == Path(b).resolve():
        return True
    try:
        return os.path.samefile(a, b)
    except OSError:
        return False

def check_distinct_paths(input_path: Optional[str], output_path: Optional[str]):
    if input_path and output_path and same_path(input_path, output_path):
        raise PathCollisionError(f"Input and output are the same file: {input_path}")

def _release(stream: TextIO, failing: bool, detach: bool):
    # stdin/stdout wrappers are detached so the process streams stay open
    finish = stream.detach if detach else stream.close
    if not failing:
        finish()
        return
    with contextlib.suppress(OSError, ValueError):
        finish()

@contextmanager
def _scoped(stream: TextIO, detach: bool) -> Iterator[TextIO]:
    try:
        yield stream
    except BaseException:
        _release(stream, failing=True, detach=detach)
        raise
    _release(stream, failing=False, detach=detach)

def _wrap_std(std: TextIO, cfg: AmericaniseConfig, newline: str):
    buffer = getattr(std, "buffer", None)
    if buffer is None:
        return std, False
    return io.TextIOWrapper(buffer, encoding=cfg.encoding, errors=cfg.errors, newline=newline), True

@contextmanager
def open_input(path: Optional[str], cfg: AmericaniseConfig) -> Iterator[TextIO]:
    if not path:
        stream, wrapped = _wrap_std(sys.stdin, cfg, newline="\n")
        if not wrapped:
            yield stream
            return
        with _scoped(stream, detach=True) as s:
            yield s
        return
    try:
        f = open(path, "r", encoding=cfg.encoding, errors=cfg.errors, newline="\n")
    except OSError as e:
        raise FileOpenError(f"Cannot open input {path}: {e}") from e
    with _scoped(f, detach=False) as s:
        yield s

@contextmanager
def open_output(path: Optional[str], cfg: AmericaniseConfig) -> Iterator[TextIO]:
    if not path:
        stream, wrapped = _wrap_std(sys.stdout, cfg, newline="")
        if not wrapped:
            yield stream
            return
        with _scoped(stream, detach=True) as s:
            yield s
        return
    try:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        f = open(path, "w", encoding=cfg.encoding, errors=cfg.errors, newline="")
    except OSError as e:
        raise FileOpenError(f"Cannot open output {path}: {e}") from e
    with _scoped(f, detach=False) as s:
        yield s

def run(cfg: AmericaniseConfig, input_path: Optional[str] = None,
        output_path: Optional[str] = None) -> TransformStats:
    """
    Americanises input_path (stdin when empty) into output_path (stdout when
    empty).

    Nothing is opened when the paths collide, and the output is not created
    until the dictionary has loaded. Both handles are released on every exit.
    """
    check_distinct_paths(input_path, output_path)
    lookup = load_lookup(cfg.dictionary_path, encoding=cfg.encoding)
    with open_input(input_path, cfg) as reader, open_output(output_path, cfg) as writer:
        return americanise(reader, writer, lookup)
