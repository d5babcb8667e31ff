from __future__ import annotations
from typing import Callable, Dict, Mapping

class DictionaryLoadError(Exception):
    pass

def parse_dictionary(text: str) -> Dict[str, str]:
    mapping: Dict[str, str] = {}
    for line in text.split("\n"):
        fields = line.split()
        # anything but "british american" is ignored
        if len(fields) != 2:
            continue
        british, american = fields
        mapping[british] = american
    return mapping

def load_dictionary(path: str, encoding: str = "utf-8") -> Dict[str, str]:
    try:
        with open(path, "r", encoding=encoding) as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise DictionaryLoadError(f"Cannot read dictionary {path}: {e}") from e
    return parse_dictionary(text)

def make_lookup(mapping: Mapping[str, str]) -> Callable[[str], str]:
    """
    Wraps a British -> American mapping in a lookup function that returns the
    replacement for a word, or the word itself when it is not listed.
    """
    table = dict(mapping)
    def lookup(word: str) -> str:
        return table.get(word, word)
    return lookup

def load_lookup(path: str, encoding: str = "utf-8") -> Callable[[str], str]:
    return make_lookup(load_dictionary(path, encoding=encoding))
