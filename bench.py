"""Benchmark encode_batch() and decode() on a slice of the Sci-Fi Gutenberg dataset.

Outputs a row with the columns:
  Corpus Size | Vocab Size | Encoding Throughput | Decoding Throughput |
  Fallback Share | Compression Ratio
"""

import argparse
import time

from datasets import load_dataset

from tokviz import get_tokenizer

HF_DATASET = "stevez80/Sci-Fi-Books-gutenberg"


def load_corpus(num_docs: int, max_chars: int) -> list[str]:
    """Load `num_docs` documents, each cut to `max_chars` characters."""
    print(f"Loading {HF_DATASET} (non-streaming) …")
    ds = load_dataset(HF_DATASET, split="train")
    return [doc[:max_chars] for doc in ds[:num_docs]["text"]]


def main() -> None:
    """Run the encode/decode benchmark and print a markdown table row."""
    parser = argparse.ArgumentParser(
        description="Benchmark tokviz encode_batch() and decode()."
    )
    parser.add_argument(
        "--num-docs",
        type=int,
        default=100,
        help="Number of documents to encode (default: 100).",
    )
    parser.add_argument(
        "--max-chars",
        type=int,
        default=10_000,
        help="Characters kept per document (default: 10,000).",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Worker threads for encode_batch (default: CPU count).",
    )
    args = parser.parse_args()

    docs = load_corpus(args.num_docs, args.max_chars)
    if not docs:
        raise RuntimeError("No documents loaded from dataset.")

    tokenizer = get_tokenizer()
    total_chars = sum(len(d) for d in docs)

    # --- Encoding ---
    t0 = time.perf_counter()
    encoded = tokenizer.encode_batch(docs, num_workers=args.workers)
    encode_elapsed = time.perf_counter() - t0
    encode_kcps = total_chars / encode_elapsed / 1000

    # --- Decoding ---
    t0 = time.perf_counter()
    for result in encoded:
        tokenizer.decode(result.tokens)
    decode_elapsed = time.perf_counter() - t0
    total_tokens = sum(r.token_count for r in encoded)
    decode_ktps = total_tokens / decode_elapsed / 1000

    # --- Compression stats ---
    n_fallback = sum(
        1 for r in encoded for tok in r.tokens if tokenizer.vocab.is_ascii_id(tok)
    )
    fallback_share = n_fallback / total_tokens * 100
    compression_ratio = (total_chars - total_tokens) / total_chars * 100

    # --- Output ---
    print()
    header = (
        f"| {'Corpus Size':16} | {'Vocab Size':10} "
        f"| {'Encoding Throughput':22} | {'Decoding Throughput':22} "
        f"| {'Fallback Share':14} | {'Compression Ratio':17} |"
    )
    sep = (
        f"| {'-' * 16} | {'-' * 10} "
        f"| {'-' * 22} | {'-' * 22} "
        f"| {'-' * 14} | {'-' * 17} |"
    )
    row = (
        f"| {f'{total_chars:,} chars':16} | {tokenizer.vocab_size():10,} "
        f"| {f'{encode_kcps:.1f}K chars/sec':22} | {f'{decode_ktps:.1f}K tokens/sec':22} "
        f"| {f'{fallback_share:.1f}%':14} | {f'{compression_ratio:.1f}%':17} |"
    )
    print(header)
    print(sep)
    print(row)
    print()


if __name__ == "__main__":
    main()
