"""tokviz: vocabulary tokenization with ASCII fallback, for demonstration."""

from ._models.base import Tokenizer
from ._models.vocab import VocabTokenizer
from .errors import InvalidTokenInputError, NotFoundError, TokVizError
from .factory import (
    create_tokenizer,
    decode,
    encode,
    get_tokenizer,
    list_vocabulary,
    stats,
)
from .parse import parse_tokens
from .samples import SAMPLE_TEXTS, get_sample
from .types import DecodeResult, EncodeResult, StatsResult, TraceStep, VocabularyEntry
from .vocabulary import ASCII_OFFSET, Vocabulary, get_vocabulary

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("tokviz")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "Tokenizer",
    "VocabTokenizer",
    "Vocabulary",
    "VocabularyEntry",
    "TraceStep",
    "EncodeResult",
    "DecodeResult",
    "StatsResult",
    "TokVizError",
    "NotFoundError",
    "InvalidTokenInputError",
    "ASCII_OFFSET",
    "SAMPLE_TEXTS",
    "encode",
    "decode",
    "stats",
    "list_vocabulary",
    "get_tokenizer",
    "create_tokenizer",
    "get_vocabulary",
    "get_sample",
    "parse_tokens",
]
