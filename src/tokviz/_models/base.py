"""
Base tokenizer interface for text <-> token id conversion.
"""

import logging
import os
from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor

from .._decorators import measure_time
from ..types import DecodeResult, EncodeResult, StatsResult, Token

log = logging.getLogger(__name__)


class Tokenizer(ABC):
    """
    Abstract base class for tokenizers.

    Subclasses implement single-call encoding and decoding. Every call builds
    and returns its own trace, so one instance can serve concurrent callers.
    """

    def encode(self, text: str) -> EncodeResult:
        """Encode text into a sequence of tokens with a per-unit trace."""
        if not text:
            return EncodeResult()
        return self._encode_impl(text)

    @abstractmethod
    def _encode_impl(self, text: str) -> EncodeResult:
        """Subclass-specific encoding of non-empty text."""
        ...

    def decode(self, tokens: list[Token]) -> DecodeResult:
        """Decode a sequence of tokens back into text with a per-token trace."""
        if not tokens:
            return DecodeResult()
        return self._decode_impl(tokens)

    @abstractmethod
    def _decode_impl(self, tokens: list[Token]) -> DecodeResult:
        """Subclass-specific decoding of a non-empty token sequence."""
        ...

    @abstractmethod
    def vocab_size(self) -> int:
        """Return the number of units in the vocabulary."""
        ...

    def stats(self, text: str) -> StatsResult:
        """
        Encode ``text`` and report its character and token counts.

        The compression ratio is ``(chars - tokens) / chars * 100`` rounded to
        one decimal. It goes negative when encoding expands the input.

        :param text: Text to measure.
        :returns: Counts, ratio and the encoded tokens.
        """
        encoded = self.encode(text)
        n_chars = encoded.char_count
        n_tokens = encoded.token_count
        if n_chars == 0:
            ratio = 0.0
        else:
            ratio = round((n_chars - n_tokens) / n_chars * 100, 1)
        return StatsResult(
            char_count=n_chars,
            token_count=n_tokens,
            compression_ratio=ratio,
            tokens=encoded.tokens,
        )

    @measure_time
    def encode_batch(
        self, texts: list[str], num_workers: int | None = None
    ) -> list[EncodeResult]:
        """
        Encode multiple texts concurrently.

        :param texts: Text inputs to encode.
        :param num_workers: Thread count; defaults to the CPU count.
        :returns: Encode results in input order.
        """
        if not texts:
            return []

        if num_workers is None:
            workers = os.cpu_count() or 1
        else:
            workers = max(1, num_workers)

        if workers == 1 or len(texts) == 1:
            return [self.encode(text) for text in texts]

        log.debug(f"encoding {len(texts)} texts with {workers} workers")
        with ThreadPoolExecutor(max_workers=workers) as pool:
            return list(pool.map(self.encode, texts))
