class KVError(Exception):
    """Base exception for all pykv errors."""
    pass

class KVDecodeError(KVError):
    """Raised when scanning key/value text fails.

    ``pos`` is the character offset into ``doc`` where the bad key or value
    begins, or of the backslash for a bad escape. ``lineno`` and ``colno``
    are 1-based.
    """
    def __init__(self, msg, doc, pos):
        lineno = doc.count('\n', 0, pos) + 1
        colno = pos - doc.rfind('\n', 0, pos)
        errmsg = '%s: line %d column %d (char %d)' % (msg, lineno, colno, pos)
        super().__init__(errmsg)
        self.msg = msg
        self.doc = doc
        self.pos = pos
        self.lineno = lineno
        self.colno = colno

class InvalidKeyError(KVDecodeError):
    """A key is not terminated by ':' before the input ends."""
    pass

class InvalidValueError(KVDecodeError):
    """A value is unquoted, unterminated, or has an unsupported escape."""
    pass

class KVEncodeError(KVError):
    """Raised when a mapping cannot be written as key/value text."""
    pass

class PuzzleError(KVError):
    """Raised when the fifth value cannot be derived."""
    pass
