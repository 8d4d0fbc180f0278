"""Vocabulary tokenizer with per-character ASCII fallback."""

import logging
import sys
from typing import override

from ..pattern import split_units
from ..types import DecodeResult, EncodeResult, Token, TraceStep
from ..vocabulary import UNK, Vocabulary, get_vocabulary
from .base import Tokenizer

log = logging.getLogger(__name__)


class VocabTokenizer(Tokenizer):
    """
    Tokenizer that looks whole units up in a fixed vocabulary.

    Units missing from the vocabulary are spelled out one token per character,
    each token being the character code plus the vocabulary's ASCII offset.
    """

    def __init__(self, vocab: Vocabulary | None = None) -> None:
        """
        Initialize the tokenizer.

        :param vocab: Vocabulary to resolve units against; the shared default
            vocabulary when omitted.
        """
        super().__init__()
        self.vocab = vocab if vocab is not None else get_vocabulary()

    @property
    def ascii_offset(self) -> int:
        return self.vocab.ascii_offset

    @override
    def vocab_size(self) -> int:
        return len(self.vocab)

    @override
    def _encode_impl(self, text: str) -> EncodeResult:
        """
        Encode units through the vocabulary, falling back to character codes.

        Lookups are case-folded but fallback tokens keep the original case.
        """
        tokens: list[Token] = []
        steps: list[TraceStep] = []

        for i, unit in enumerate(split_units(text), start=1):
            folded = unit.lower()
            if self.vocab.has(folded):
                tok = self.vocab.id_of(folded)
                tokens.append(tok)
                steps.append(
                    TraceStep(i, unit, f'Found "{unit}" in vocabulary', tok)
                )
            else:
                ascii_toks = self._encode_ascii(unit)
                tokens.extend(ascii_toks)
                steps.append(
                    TraceStep(
                        i,
                        unit,
                        f'"{unit}" not in vocabulary, using ASCII encoding',
                        ascii_toks,
                    )
                )

        log.debug(f"encoded {len(text)} chars into {len(tokens)} tokens")
        return EncodeResult(tokens=tokens, steps=steps, text=text)

    @override
    def _decode_impl(self, tokens: list[Token]) -> DecodeResult:
        """Decode tokens one by one; unknown ids become ``<UNK>`` instead of failing."""
        parts: list[str] = []
        steps: list[TraceStep] = []
        n_unknown = 0

        for i, tok in enumerate(tokens, start=1):
            if self.vocab.has_id(tok):
                text = self.vocab.unit_of(tok)
                process = f"Token {tok} found in vocabulary"
            elif self._is_char_token(tok):
                text = chr(tok - self.ascii_offset)
                process = f"Token {tok} decoded from ASCII"
            else:
                text = UNK
                process = f"Token {tok} not found, using {UNK}"
                n_unknown += 1
            parts.append(text)
            steps.append(TraceStep(i, tok, process, text))

        if n_unknown:
            log.warning(f"{n_unknown} of {len(tokens)} tokens decoded as {UNK}")
        return DecodeResult(text="".join(parts), steps=steps, token_count=len(tokens))

    def token_text(self, tok: Token) -> str:
        """Return the text a single token stands for."""
        if self.vocab.has_id(tok):
            return self.vocab.unit_of(tok)
        if self._is_char_token(tok):
            return chr(tok - self.ascii_offset)
        return UNK

    def _encode_ascii(self, unit: str) -> list[Token]:
        """Map each character of ``unit`` to its code plus the ASCII offset."""
        return [ord(char) + self.ascii_offset for char in unit]

    def _is_char_token(self, tok: Token) -> bool:
        # anything past the last code point has no character to decode to
        return (
            self.vocab.is_ascii_id(tok) and tok - self.ascii_offset <= sys.maxunicode
        )
