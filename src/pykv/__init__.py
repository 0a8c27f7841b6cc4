from .decoder import load, loads
from .encoder import dump, dumps
from .errors import (
    KVError, KVDecodeError, InvalidKeyError, InvalidValueError,
    KVEncodeError, PuzzleError,
)
from .puzzle import enrich

__all__ = [
    'dump', 'dumps', 'load', 'loads', 'enrich',
    'KVError', 'KVDecodeError', 'InvalidKeyError', 'InvalidValueError',
    'KVEncodeError', 'PuzzleError',
]
