"""Convert raw Windows paths stored in setup files into output filenames."""

from __future__ import annotations

import os
import re
import string
from typing import Tuple

#: Separator used for output paths.
PATH_SEP = "\\" if os.name == "nt" else "/"

_UNSAFE = re.compile(r'[\x00-\x1f<>:"|?*]')
_BRACKET = re.compile(r"[{}]")
_SEPARATOR = re.compile(r"[\\/]")
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _replace_unsafe(text: str) -> str:
    return _UNSAFE.sub("$", text)


def shorten_path(path: str, sep: str = PATH_SEP) -> str:
    """Normalise separators and resolve '.', '..' and empty path segments."""
    segments = []
    for segment in _SEPARATOR.split(path):
        if segment in ("", "."):
            continue
        if segment == "..":
            if segments:
                segments.pop()
            continue
        segments.append(segment)
    return sep.join(segments)


class FilenameMap(dict):
    """Mapping of setup path variables (like ``app``) to their output values."""

    def __init__(self, lowercase: bool = False, expand: bool = False) -> None:
        super().__init__()
        self.lowercase = lowercase
        self.expand = expand

    def lookup(self, key: str) -> str:
        """Value of a variable, or the variable name with unsafe characters replaced."""
        value = self.get(key)
        return _replace_unsafe(key) if value is None else value

    def _expand_variables(self, text: str, pos: int, close: bool) -> Tuple[str, int]:
        parts = []
        end = len(text)
        while pos < end:
            match = _BRACKET.search(text, pos)
            bracket = match.start() if match else end
            parts.append(_replace_unsafe(text[pos:bracket]))
            if match is None:
                pos = end
                break
            pos = bracket + 1
            if text[bracket] == "}":
                if close:
                    break
                parts.append("}")
                continue
            if pos < end and text[pos] == "{":
                parts.append("{")
                pos += 1
                continue
            name, pos = self._expand_variables(text, pos, True)
            parts.append(self.lookup(name))
        return "".join(parts), pos

    def convert(self, path: str) -> str:
        """Convert a stored path, honouring the lowercase and expand settings."""
        if self.lowercase:
            path = path.translate(_ASCII_LOWER)
        if not self.expand:
            return path
        expanded, _ = self._expand_variables(path, 0, False)
        return shorten_path(expanded)