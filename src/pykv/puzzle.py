"""
Fifth value puzzle
==================
Derives the ``five`` entry from the ``one``..``four`` entries of decoded
event data.

Each value is a 16-bit hex word. XORed with ``XOR_KEY`` the words read
43, 47, 53, 59 for the sample data: an increasing sequence whose
increments follow

    x[n+1] = x[n] + first_mismatching_bit(x[n-1], x[n]) * n

with ``n`` counted from 1 and the bit index counted from 1. For the sample,
x[5] = 59 + first_mismatching_bit(53, 59) * 4 = 59 + 2 * 4 = 67, which is
XORed back with the key and written as ``0x13c``.
"""

import logging
from typing import Dict, List, Mapping, Sequence
from .constants import (
    XOR_KEY, WORD_MASK, WORD_BITS, PUZZLE_KEYS, DERIVED_KEY,
    HEX_PREFIX, RE_HEX_DIGITS
)
from .errors import PuzzleError

logger = logging.getLogger(__name__)


def parse_hex(text: str) -> int:
    """Parses a 16-bit hex word with an optional ``0x`` prefix."""
    digits = text[len(HEX_PREFIX):] if text.startswith(HEX_PREFIX) else text
    if not RE_HEX_DIGITS.fullmatch(digits):
        raise PuzzleError(f"Not a hex word: {text!r}")
    value = int(digits, 16)
    if value > WORD_MASK:
        raise PuzzleError(f"Hex word out of 16-bit range: {text!r}")
    return value

def format_hex(value: int) -> str:
    return f"{HEX_PREFIX}{value:x}"

def first_mismatching_bit(a: int, b: int) -> int:
    """1-based index of the lowest bit where ``a`` and ``b`` differ."""
    diff = (a ^ b) & WORD_MASK
    if not diff:
        return WORD_BITS + 1
    return (diff & -diff).bit_length()

def next_term(seq: Sequence[int]) -> int:
    n = len(seq)
    if n < 2:
        raise PuzzleError(f"Need at least two terms, got {n}")
    return seq[-1] + first_mismatching_bit(seq[-2], seq[-1]) * n

def can_enrich(obj: Mapping[str, str]) -> bool:
    return all(key in obj for key in PUZZLE_KEYS)

def masked_words(obj: Mapping[str, str]) -> List[int]:
    words = []
    for key in PUZZLE_KEYS:
        if key not in obj:
            raise PuzzleError(f"Missing key {key!r}")
        raw = obj[key]
        try:
            value = parse_hex(raw)
        except PuzzleError as e:
            raise PuzzleError(f"Unexpected value for key {key!r}: {e}") from e
        masked = value ^ XOR_KEY
        logger.info("%-5s %s %s masked:%s %d %r", key, raw, bin(value), bin(masked), masked, chr(masked))
        words.append(masked)
    return words

def fifth_value(obj: Mapping[str, str]) -> int:
    nxt = next_term(masked_words(obj))
    if nxt > WORD_MASK:
        raise PuzzleError(f"Fifth value overflows 16 bits: {nxt:#x}")
    return nxt ^ XOR_KEY

def enrich(obj: Mapping[str, str]) -> Dict[str, str]:
    """Returns a copy of ``obj`` with the derived ``five`` entry added."""
    result = dict(obj)
    result[DERIVED_KEY] = format_hex(fifth_value(obj))
    return result
