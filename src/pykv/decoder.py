import logging
from typing import Dict, List, Optional, TextIO
from .constants import COLON, QUOTE, BACKSLASH, UNESCAPE_MAP
from .errors import InvalidKeyError, InvalidValueError

logger = logging.getLogger(__name__)


class Cursor:
    """Forward-only position over an in-memory document."""

    def __init__(self, doc: str):
        self.doc = doc
        self.pos = 0

    def peek(self) -> Optional[str]:
        if self.pos < len(self.doc):
            return self.doc[self.pos]
        return None

    def advance(self) -> Optional[str]:
        char = self.peek()
        if char is not None: self.pos += 1
        return char

    def at_end(self) -> bool:
        return self.pos >= len(self.doc)

    def skip_whitespace(self):
        while not self.at_end() and self.doc[self.pos].isspace():
            self.pos += 1


class KVDecoder:
    """Scans ``key:"value"`` pairs into a dict.

    Pairs are separated by optional whitespace. A key runs up to the first
    ``:``; a value is double quoted and ``\\"`` is its only escape. A repeated
    key overwrites the earlier value. The first error aborts the scan.
    """

    def decode(self, s: str) -> Dict[str, str]:
        cursor = Cursor(s)
        pairs = {}
        while True:
            cursor.skip_whitespace()
            if cursor.at_end(): break

            key = self._parse_key(cursor)
            value = self._parse_value(cursor)
            if key in pairs:
                logger.debug("Duplicate key %r overwritten", key)
            pairs[key] = value

        logger.debug("Decoded %d pairs", len(pairs))
        return pairs

    def _parse_key(self, cursor: Cursor) -> str:
        cursor.skip_whitespace()
        start = cursor.pos
        chars = []
        while True:
            c = cursor.advance()
            if c is None:
                raise InvalidKeyError("Invalid key", cursor.doc, start)
            if c == COLON:
                return "".join(chars)
            chars.append(c)

    def _parse_value(self, cursor: Cursor) -> str:
        cursor.skip_whitespace()
        start = cursor.pos
        if cursor.peek() != QUOTE:
            raise InvalidValueError("Invalid value", cursor.doc, start)
        cursor.advance()

        chars: List[str] = []
        while True:
            c = cursor.advance()
            if c is None:
                raise InvalidValueError("Invalid value", cursor.doc, start)
            if c == QUOTE:
                return "".join(chars)
            if c == BACKSLASH:
                escape_pos = cursor.pos - 1
                escaped = cursor.advance()
                if escaped is None or (c + escaped) not in UNESCAPE_MAP:
                    raise InvalidValueError("Invalid value", cursor.doc, escape_pos)
                chars.append(UNESCAPE_MAP[c + escaped])
                continue
            chars.append(c)


def loads(s: str) -> Dict[str, str]:
    return KVDecoder().decode(s)

def load(fp: TextIO) -> Dict[str, str]:
    return loads(fp.read())
