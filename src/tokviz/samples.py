"""Built-in sample sentences for trying the tokenizer."""

from typing import Final

SAMPLE_TEXTS: Final[tuple[str, ...]] = (
    "Hello, world! This is a sample text for tokenization.",
    "The quick brown fox jumps over the lazy dog.",
    "AI tokenization converts text into numerical representations.",
    "Machine learning models process tokens instead of raw text.",
)


def get_sample(index: int = 0) -> str:
    """
    Return one sample sentence.

    :raises IndexError: If ``index`` is out of range.
    """
    if not 0 <= index < len(SAMPLE_TEXTS):
        raise IndexError(
            f"sample index out of range: {index} (available: 0-{len(SAMPLE_TEXTS) - 1})"
        )
    return SAMPLE_TEXTS[index]
