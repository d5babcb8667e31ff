from __future__ import annotations
import codecs
import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_DICTIONARY_PATH = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), "data", "british-american.txt"
)

@dataclass
class AmericaniseConfig:
    dictionary_path: str = DEFAULT_DICTIONARY_PATH
    encoding: str = "utf-8"
    errors: str = "surrogateescape"

def load_config(dictionary_path: Optional[str] = None, encoding: Optional[str] = None) -> AmericaniseConfig:
    return AmericaniseConfig(
        dictionary_path=dictionary_path or os.getenv("AMERICANISE_DICTIONARY", DEFAULT_DICTIONARY_PATH),
        encoding=encoding or os.getenv("AMERICANISE_ENCODING", "utf-8"),
        errors=os.getenv("AMERICANISE_ENCODING_ERRORS", "surrogateescape"),
    )

def validate_config(cfg: AmericaniseConfig):
    problems = []
    if not cfg.dictionary_path:
        problems.append("AMERICANISE_DICTIONARY is empty")
    try:
        codecs.lookup(cfg.encoding)
    except LookupError:
        problems.append(f"unknown encoding {cfg.encoding!r}")
    try:
        codecs.lookup_error(cfg.errors)
    except LookupError:
        problems.append(f"unknown encoding error handler {cfg.errors!r}")
    if problems:
        raise RuntimeError(f"Invalid configuration: {', '.join(problems)}")
