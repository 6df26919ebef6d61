"""Chunked run-length compression of files, with threaded workers and a benchmark."""

from __future__ import annotations

import argparse
import sys
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from itertools import groupby
from pathlib import Path
from typing import Callable, Iterable, Sequence

CHUNK_SIZE = 1 << 20
MAX_RUN = 255


class CorruptDataError(ValueError):
    """Raised when compressed data cannot be decoded."""


@dataclass(frozen=True)
class BenchmarkResult:
    """Timings of single-threaded and multi-threaded compression, in seconds."""

    single_seconds: float
    multi_seconds: float

    @property
    def speedup(self) -> float:
        if self.multi_seconds == 0:
            return float("inf")
        return self.single_seconds / self.multi_seconds


def rle_compress(data: bytes) -> bytes:
    """Encode ``data`` as (byte, count) pairs with counts of at most 255."""
    out = bytearray()
    for value, group in groupby(data):
        run = sum(1 for _ in group)
        while run:
            count = min(run, MAX_RUN)
            out += bytes((value, count))
            run -= count
    return bytes(out)


def rle_decompress(data: bytes) -> bytes:
    """Expand (byte, count) pairs produced by :func:`rle_compress`."""
    if len(data) % 2:
        raise CorruptDataError("Corrupted compressed data.")
    return b"".join(bytes((value,)) * count for value, count in zip(data[::2], data[1::2]))


def read_chunks(path: str | Path, chunk_size: int = CHUNK_SIZE) -> list[bytes]:
    """Read a file as a list of chunks of at most ``chunk_size`` bytes."""
    with open(path, "rb") as handle:
        return list(iter(lambda: handle.read(chunk_size), b""))


def write_chunks(path: str | Path, chunks: Iterable[bytes]) -> None:
    """Write the chunks one after another to a file."""
    with open(path, "wb") as handle:
        for chunk in chunks:
            handle.write(chunk)


def _threaded(func: Callable[[bytes], bytes], chunks: list[bytes]) -> list[bytes]:
    if not chunks:
        return []
    with ThreadPoolExecutor(max_workers=len(chunks)) as pool:
        return list(pool.map(func, chunks))


def _transform_file(
    func: Callable[[bytes], bytes], input_path: str | Path, output_path: str | Path
) -> float:
    chunks = read_chunks(input_path)
    start = time.perf_counter()
    results = _threaded(func, chunks)
    elapsed = time.perf_counter() - start
    write_chunks(output_path, results)
    return elapsed


def compress_file(input_path: str | Path, output_path: str | Path) -> float:
    """Compress a file chunk by chunk in threads; return the compression time."""
    return _transform_file(rle_compress, input_path, output_path)


def decompress_file(input_path: str | Path, output_path: str | Path) -> float:
    """Decompress a file chunk by chunk in threads; return the decompression time."""
    return _transform_file(rle_decompress, input_path, output_path)


def files_match(original_path: str | Path, other_path: str | Path) -> bool:
    """Return True when both files can be opened and hold the same bytes."""
    try:
        with open(original_path, "rb") as first, open(other_path, "rb") as second:
            while True:
                block1 = first.read(CHUNK_SIZE)
                block2 = second.read(CHUNK_SIZE)
                if block1 != block2:
                    return False
                if not block1:
                    return True
    except OSError:
        return False


def benchmark(input_path: str | Path) -> BenchmarkResult:
    """Time compressing a file's chunks sequentially and in threads."""
    chunks = read_chunks(input_path)

    start = time.perf_counter()
    for chunk in chunks:
        rle_compress(chunk)
    single = time.perf_counter() - start

    start = time.perf_counter()
    _threaded(rle_compress, chunks)
    multi = time.perf_counter() - start

    return BenchmarkResult(single_seconds=single, multi_seconds=multi)


def main(argv: Sequence[str] | None = None) -> int:
    """Compress, decompress, validate and benchmark a file."""
    parser = argparse.ArgumentParser(description="Run-length compress a file and check the result.")
    parser.add_argument("input", nargs="?", default="input.txt")
    parser.add_argument("compressed", nargs="?", default="compressed.rle")
    parser.add_argument("decompressed", nargs="?", default="output.txt")
    args = parser.parse_args(argv)

    try:
        elapsed = compress_file(args.input, args.compressed)
        print(f"Multi-threaded compression completed in {elapsed} seconds.")

        elapsed = decompress_file(args.compressed, args.decompressed)
        print(f"Multi-threaded decompression completed in {elapsed} seconds.")

        if files_match(args.input, args.decompressed):
            print("Validation: Decompressed file matches original.")
        else:
            print("Validation failed: Files differ!")

        result = benchmark(args.input)
        print("\n Benchmark:")
        print(f"Single-threaded time: {result.single_seconds} sec")
        print(f"Multi-threaded time: {result.multi_seconds} sec")
        print(f"Speedup: {result.speedup}x faster")
    except (OSError, CorruptDataError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())