"""Unit tests for the vocabulary table: id layout, lookups, listing."""

import logging

import pytest

import tokviz as tv
from tokviz.errors import NotFoundError
from tokviz.vocabulary import (
    COMMON_WORDS,
    PUNCTUATION,
    SPECIAL_TOKENS,
    WHITESPACE,
    Vocabulary,
)


# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def vocab():
    """Return a de-duplicated vocabulary."""
    return Vocabulary()


@pytest.fixture
def raw_vocab():
    """Return a vocabulary built from the raw seed list, repeats included."""
    return Vocabulary(deduplicate=False)


# Id layout
# ---------------------------------------------------------------------------


def test_vocab_size(vocab):
    """Markers, distinct words and punctuation make up the table."""
    n_words = len(set(COMMON_WORDS))
    assert n_words == 114
    assert len(vocab) == len(SPECIAL_TOKENS) + n_words + len(PUNCTUATION) + len(WHITESPACE)
    assert len(vocab) == 159


def test_ids_are_contiguous_from_zero(vocab):
    """Ids run 0..n-1 without gaps."""
    ids = [tok for tok, _ in vocab.items()]
    assert ids == list(range(len(vocab)))


def test_special_markers_come_first(vocab):
    """Special markers occupy the first ids in their declared order."""
    for tok, marker in enumerate(SPECIAL_TOKENS):
        assert vocab.id_of(marker) == tok
    assert vocab.id_of("<UNK>") == 1


def test_word_block_follows_markers(vocab):
    """The first seed word gets the id right after the markers."""
    assert vocab.id_of("the") == len(SPECIAL_TOKENS)


def test_punctuation_block_follows_words(vocab):
    """Punctuation starts where the word block ends; whitespace closes the table."""
    first_punct = len(SPECIAL_TOKENS) + 114
    assert vocab.id_of(".") == first_punct
    assert vocab.id_of("`") == first_punct + len(PUNCTUATION) - 1
    assert vocab.id_of("\n") == 156
    assert vocab.id_of("\t") == 157
    assert vocab.id_of(" ") == 158


def test_forward_and_inverse_maps_agree(vocab):
    """Every id maps to a unit that maps back to the same id."""
    for tok, unit in vocab.items():
        assert vocab.id_of(unit) == tok


def test_ascii_offset(vocab):
    """Fallback ids start at 2000."""
    assert vocab.ascii_offset == tv.ASCII_OFFSET == 2000
    assert vocab.is_ascii_id(2000)
    assert not vocab.is_ascii_id(1999)


# Raw seed list with repeats
# ---------------------------------------------------------------------------


def test_raw_vocab_keeps_every_seed_id(raw_vocab):
    """Without de-duplication every seed word consumes an id."""
    n_ids = len(SPECIAL_TOKENS) + len(COMMON_WORDS) + len(PUNCTUATION) + len(WHITESPACE)
    assert len(raw_vocab.items()) == n_ids == 208
    # forward map collapses repeats
    assert len(raw_vocab) == 159


def test_raw_vocab_has_orphaned_ids(raw_vocab):
    """Repeated words keep only their last id in the forward map."""
    orphans = [
        tok for tok, unit in raw_vocab.items() if raw_vocab.id_of(unit) != tok
    ]
    assert len(orphans) == len(COMMON_WORDS) - len(set(COMMON_WORDS))
    # "which" first appears at seed position 47
    first_which = len(SPECIAL_TOKENS) + COMMON_WORDS.index("which")
    assert first_which in orphans
    assert raw_vocab.unit_of(first_which) == "which"
    assert raw_vocab.id_of("which") > first_which


def test_raw_vocab_logs_orphans(caplog):
    """Building from the raw seed list warns about unreachable ids."""
    with caplog.at_level(logging.WARNING, logger="tokviz.vocabulary"):
        Vocabulary(deduplicate=False)
    assert "unreachable" in caplog.text


# Lookups
# ---------------------------------------------------------------------------


def test_has_is_case_sensitive(vocab):
    """Lookups apply no case folding; callers lower-case words first."""
    assert vocab.has("the")
    assert not vocab.has("The")
    assert "the" in vocab


def test_id_of_missing_unit_raises(vocab):
    """Unguarded forward lookup of an absent unit raises NotFoundError."""
    with pytest.raises(NotFoundError, match="cat") as exc_info:
        vocab.id_of("cat")
    assert exc_info.value.unit == "cat"
    # still catchable as a plain KeyError
    assert isinstance(exc_info.value, KeyError)


def test_unit_of_fallback_id_raises(vocab):
    """Fallback ids are never stored in the table."""
    with pytest.raises(NotFoundError) as exc_info:
        vocab.unit_of(2072)
    assert exc_info.value.token == 2072


def test_unit_of_gap_id_raises(vocab):
    """Ids between the table and the offset are not vocabulary ids."""
    assert not vocab.has_id(999)
    with pytest.raises(NotFoundError):
        vocab.unit_of(999)


# Listing
# ---------------------------------------------------------------------------


def test_list_all(vocab):
    """An empty search lists every unit in id order."""
    entries = vocab.list_entries()
    assert len(entries) == len(vocab)
    assert [e.id for e in entries] == sorted(e.id for e in entries)
    assert all(e.kind == "vocabulary" for e in entries)


def test_list_with_ascii_range(vocab):
    """Including the ASCII range adds the 95 printable characters."""
    entries = vocab.list_entries("", include_ascii_range=True)
    assert len(entries) == len(vocab) + 95
    ids = [e.id for e in entries]
    assert ids == sorted(ids)
    ascii_entries = [e for e in entries if e.kind == "ascii"]
    assert ascii_entries[0] == tv.VocabularyEntry(" ", 2032, "ascii")
    assert ascii_entries[-1] == tv.VocabularyEntry("~", 2126, "ascii")


def test_list_search_is_case_insensitive_for_units(vocab):
    """Table units match the search term regardless of case."""
    entries = vocab.list_entries("TH")
    assert entries
    assert all("th" in e.unit.lower() for e in entries)
    assert tv.VocabularyEntry("the", 10) in entries


def test_list_search_ascii_character_is_case_sensitive(vocab):
    """Synthesised ASCII entries match the character exactly."""
    entries = vocab.list_entries("A", include_ascii_range=True)
    ascii_entries = [e for e in entries if e.kind == "ascii"]
    assert ascii_entries == [tv.VocabularyEntry("A", 2065, "ascii")]


def test_list_search_ascii_by_id(vocab):
    """Synthesised ASCII entries also match on their id digits."""
    entries = vocab.list_entries("2072", include_ascii_range=True)
    assert entries == [tv.VocabularyEntry("H", 2072, "ascii")]


def test_list_search_without_matches(vocab):
    """A term nothing contains yields an empty listing."""
    assert vocab.list_entries("zzz", include_ascii_range=True) == []


def test_shared_vocabulary_is_cached():
    """The process-wide vocabulary is built once."""
    assert tv.get_vocabulary() is tv.get_vocabulary()
