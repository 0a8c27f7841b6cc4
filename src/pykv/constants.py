import re

# Tokens
COLON = ':'
QUOTE = '"'
BACKSLASH = '\\'
NEWLINE = '\n'

# Escapes: \" is the only one the format knows
ESCAPE_MAP = {
    '"': '\\"',
}
UNESCAPE_MAP = {v: k for k, v in ESCAPE_MAP.items()}

# Puzzle
# Hint from the event data: "Hello, try XOR with 0x17F".
XOR_KEY = 0x17F
WORD_MASK = 0xFFFF
WORD_BITS = 16
PUZZLE_KEYS = ('one', 'two', 'three', 'four')
DERIVED_KEY = 'five'
HEX_PREFIX = '0x'

# Hex digits after the optional 0x prefix
RE_HEX_DIGITS = re.compile(r'[0-9A-Fa-f]+')
