"""Tokenizer implementations for vocabulary-based text processing."""

from .base import Tokenizer
from .vocab import VocabTokenizer


__all__ = ["Tokenizer", "VocabTokenizer"]
