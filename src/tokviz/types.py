"""
Core types for tokenization.
"""

from dataclasses import dataclass, field
from typing import Literal

type Token = int
type Unit = str
type EntryKind = Literal["vocabulary", "ascii"]
# int for a vocabulary hit, list of ids for ascii fallback, str when decoding
type StepOutput = Token | list[Token] | str


@dataclass(frozen=True, slots=True)
class TraceStep:
    """One resolved unit (encode) or token (decode)."""

    step: int
    input: Unit | Token
    process: str
    output: StepOutput


@dataclass(frozen=True, slots=True)
class VocabularyEntry:
    """A vocabulary listing row."""

    unit: Unit
    id: Token
    kind: EntryKind = "vocabulary"


@dataclass
class EncodeResult:
    """Output of a single encode call."""

    tokens: list[Token] = field(default_factory=list)
    steps: list[TraceStep] = field(default_factory=list)
    text: str = ""

    @property
    def char_count(self) -> int:
        return len(self.text)

    @property
    def token_count(self) -> int:
        return len(self.tokens)

    @property
    def unit_count(self) -> int:
        # one trace step per unit
        return len(self.steps)


@dataclass
class DecodeResult:
    """Output of a single decode call."""

    text: str = ""
    steps: list[TraceStep] = field(default_factory=list)
    token_count: int = 0


@dataclass(frozen=True)
class StatsResult:
    """Character/token counts and the signed compression ratio in percent."""

    char_count: int
    token_count: int
    compression_ratio: float
    tokens: list[Token] = field(default_factory=list)
