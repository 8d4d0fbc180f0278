"""Factory and convenience functions around the shared tokenizer."""

import functools

from ._models.vocab import VocabTokenizer
from .types import DecodeResult, EncodeResult, StatsResult, Token, VocabularyEntry
from .vocabulary import Vocabulary


@functools.cache
def get_tokenizer() -> VocabTokenizer:
    """
    Return the shared tokenizer backed by the default vocabulary.

    The tokenizer holds no per-call state, so one instance is safe to share.

    .. code-block:: python

        tok = get_tokenizer()
        tok.encode("the cat").tokens
    """
    return VocabTokenizer()


def create_tokenizer(deduplicate: bool = True) -> VocabTokenizer:
    """
    Create a tokenizer over a freshly built vocabulary.

    :param deduplicate: Pass ``False`` to keep the raw seed word list and its
        id layout, repeated words included.
    """
    return VocabTokenizer(Vocabulary(deduplicate=deduplicate))


def encode(text: str) -> EncodeResult:
    """Encode ``text`` with the shared tokenizer."""
    return get_tokenizer().encode(text)


def decode(tokens: list[Token]) -> DecodeResult:
    """Decode ``tokens`` with the shared tokenizer."""
    return get_tokenizer().decode(tokens)


def stats(text: str) -> StatsResult:
    """Return character/token counts and compression ratio for ``text``."""
    return get_tokenizer().stats(text)


def list_vocabulary(
    search_term: str = "", include_ascii_range: bool = False
) -> list[VocabularyEntry]:
    """List the shared vocabulary, optionally with the printable ASCII range."""
    return get_tokenizer().vocab.list_entries(search_term, include_ascii_range)
