from io import StringIO
from typing import Mapping, TextIO
from .constants import COLON, QUOTE, BACKSLASH, NEWLINE, ESCAPE_MAP
from .errors import KVEncodeError

class KVEncoder:
    def __init__(self, sort_keys: bool = False):
        self.sort_keys = sort_keys

    def encode(self, obj: Mapping[str, str]) -> str:
        if not isinstance(obj, Mapping):
            raise KVEncodeError(f"Expected a mapping, got {type(obj).__name__}")

        buffer = StringIO()
        items = sorted(obj.items()) if self.sort_keys else obj.items()
        for key, value in items:
            buffer.write(f"{self._format_key(key)}{COLON}{self._format_value(value)}{NEWLINE}")
        return buffer.getvalue()

    def _format_key(self, key: str) -> str:
        if not isinstance(key, str):
            raise KVEncodeError(f"Keys must be strings, got {type(key).__name__}")
        # The scanner ends a key at the first colon and skips leading whitespace
        if COLON in key:
            raise KVEncodeError(f"Key {key!r} contains ':'")
        if key[:1].isspace():
            raise KVEncodeError(f"Key {key!r} starts with whitespace")
        return key

    def _format_value(self, value: str) -> str:
        if not isinstance(value, str):
            raise KVEncodeError(f"Values must be strings, got {type(value).__name__}")
        if BACKSLASH in value:
            raise KVEncodeError(f"Value {value!r} contains a backslash")

        out = [QUOTE]
        for c in value:
            out.append(ESCAPE_MAP.get(c, c))
        out.append(QUOTE)
        return "".join(out)


def dumps(obj: Mapping[str, str], sort_keys: bool = False) -> str:
    encoder = KVEncoder(sort_keys=sort_keys)
    return encoder.encode(obj)

def dump(obj: Mapping[str, str], fp: TextIO, sort_keys: bool = False):
    fp.write(dumps(obj, sort_keys=sort_keys))
