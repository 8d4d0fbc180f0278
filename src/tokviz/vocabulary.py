"""
Static vocabulary: special markers, common words and punctuation mapped to
sequential token ids, plus the ASCII fallback id range.
"""

import functools
import logging
from typing import Final

from .errors import NotFoundError
from .types import Token, Unit, VocabularyEntry

ASCII_OFFSET: Final[int] = 2000
# printable ascii range synthesised by listings
PRINTABLE_ASCII: Final[range] = range(32, 127)

UNK: Final[str] = "<UNK>"

SPECIAL_TOKENS: Final[tuple[str, ...]] = (
    "<PAD>",
    UNK,
    "<START>",
    "<END>",
    "<MASK>",
    "<CLS>",
    "<SEP>",
    "<NEWLINE>",
    "<TAB>",
    "<SPACE>",
)

# two informal frequency lists glued together, hence the repeats
COMMON_WORDS: Final[tuple[str, ...]] = (
    "the", "be", "to", "of", "and", "a", "in", "that", "have", "i",
    "it", "for", "not", "on", "with", "he", "as", "you", "do", "at",
    "this", "but", "his", "by", "from", "they", "we", "say", "her", "she",
    "or", "an", "will", "my", "one", "all", "would", "there", "their",
    "what", "so", "up", "out", "if", "about", "who", "get", "which", "go",
    "me", "when", "make", "can", "like", "time", "no", "just", "him", "know",
    "take", "people", "into", "year", "your", "good", "some", "could", "them",
    "see", "other", "than", "then", "now", "look", "only", "come", "its", "over",
    "think", "also", "back", "after", "use", "two", "how", "our", "work",
    "first", "well", "way", "even", "new", "want", "because", "any", "these",
    "give", "day", "most", "us", "is", "was", "are", "been", "has", "had",
    "were", "said", "each", "which", "their", "time", "will", "about", "if",
    "up", "out", "many", "then", "them", "these", "so", "some", "her", "would",
    "make", "like", "into", "him", "has", "two", "more", "very", "what", "know",
    "just", "first", "get", "over", "think", "where", "much", "go", "well",
    "were", "been", "have", "had", "has", "said", "each", "which", "she",
    "do", "how", "their", "if", "will", "up", "other", "about", "out", "many",
)  # fmt: skip

PUNCTUATION: Final[str] = ".,!?;:\"'()[]{}-_+=*/\\|@#$%^&<>~`"
# whitespace kept as vocabulary units after the symbols
WHITESPACE: Final[str] = "\n\t "

log = logging.getLogger(__name__)


class Vocabulary:
    """
    Bidirectional unit <-> token id table.

    Ids are assigned from 0 in three contiguous blocks: special markers,
    lower-cased common words, then punctuation and whitespace. Ids at or above
    ``ascii_offset`` are never stored; they encode a single character code.
    """

    def __init__(self, deduplicate: bool = True) -> None:
        """
        Build the table.

        :param deduplicate: Drop repeated seed words before assigning ids. When
            ``False`` the raw seed list is used and repeated words leave
            orphaned ids behind in the inverse map.
        """
        self.deduplicate = deduplicate
        self.ascii_offset: int = ASCII_OFFSET
        # unit -> token
        self._units: dict[Unit, Token] = {}
        # token -> unit
        self._tokens: dict[Token, Unit] = {}
        self._initialize()

    def _initialize(self) -> None:
        """Populate markers, words and punctuation with sequential ids."""
        words = [w.lower() for w in COMMON_WORDS]
        if self.deduplicate:
            # keep first occurrence so ids follow seed order
            words = list(dict.fromkeys(words))

        units = [*SPECIAL_TOKENS, *words, *PUNCTUATION, *WHITESPACE]
        for tok, unit in enumerate(units):
            self._units[unit] = tok
            self._tokens[tok] = unit

        n_orphans = len(self._tokens) - len(self._units)
        if n_orphans:
            log.warning(
                f"{n_orphans} vocabulary ids are unreachable from their unit "
                f"(duplicate seed words)"
            )
        log.debug(
            f"built vocabulary with {len(self._units)} units over "
            f"{len(self._tokens)} ids (ascii offset {self.ascii_offset})"
        )

    def __len__(self) -> int:
        return len(self._units)

    def __contains__(self, unit: object) -> bool:
        return unit in self._units

    def has(self, unit: Unit) -> bool:
        """Return whether ``unit`` is in the table; no case folding is applied."""
        return unit in self._units

    def has_id(self, tok: Token) -> bool:
        """Return whether ``tok`` is a table id."""
        return tok in self._tokens

    def is_ascii_id(self, tok: Token) -> bool:
        """Return whether ``tok`` falls in the ASCII fallback range."""
        return tok >= self.ascii_offset

    def id_of(self, unit: Unit) -> Token:
        """
        Return the token id for ``unit``.

        :raises NotFoundError: If ``unit`` is not in the table.
        """
        try:
            return self._units[unit]
        except KeyError:
            raise NotFoundError("unit not in vocabulary", unit=unit) from None

    def unit_of(self, tok: Token) -> Unit:
        """
        Return the unit stored under ``tok``.

        :raises NotFoundError: If ``tok`` is not a table id. Fallback ids are
            never stored here.
        """
        try:
            return self._tokens[tok]
        except KeyError:
            raise NotFoundError("token not in vocabulary", token=tok) from None

    def list_entries(
        self, search_term: str = "", include_ascii_range: bool = False
    ) -> list[VocabularyEntry]:
        """
        List vocabulary entries matching ``search_term``, sorted by id.

        Table units match case-insensitively. Synthesised ASCII entries match
        when the character contains the term (case-sensitive) or the id does
        as a substring.

        :param search_term: Substring filter; empty matches everything.
        :param include_ascii_range: Also list printable ASCII codes 32-126 as
            ``code + ascii_offset`` ids.
        """
        needle = search_term.lower()
        entries = [
            VocabularyEntry(unit, tok)
            for unit, tok in self._units.items()
            if needle in unit.lower()
        ]

        if include_ascii_range:
            for code in PRINTABLE_ASCII:
                char = chr(code)
                tok = code + self.ascii_offset
                if search_term in char or search_term in str(tok):
                    entries.append(VocabularyEntry(char, tok, "ascii"))

        return sorted(entries, key=lambda e: e.id)

    def items(self) -> list[tuple[Token, Unit]]:
        """Return every ``(id, unit)`` pair of the inverse map in id order."""
        return sorted(self._tokens.items())


@functools.cache
def get_vocabulary() -> Vocabulary:
    """Return the shared, de-duplicated vocabulary."""
    return Vocabulary()
