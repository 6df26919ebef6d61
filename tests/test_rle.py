import pytest

from taskbench.rle import (
    BenchmarkResult,
    CorruptDataError,
    benchmark,
    compress_file,
    decompress_file,
    files_match,
    main,
    read_chunks,
    rle_compress,
    rle_decompress,
    write_chunks,
)


def test_compress_pins_pairs():
    assert rle_compress(b"aaab") == b"a\x03b\x01"


def test_compress_empty():
    assert rle_compress(b"") == b""
    assert rle_decompress(b"") == b""


def test_long_run_is_split_at_255():
    data = b"x" * 300
    encoded = rle_compress(data)
    assert encoded[:2] == b"x\xff"
    assert len(encoded) == 4
    assert rle_decompress(encoded) == data


@pytest.mark.parametrize(
    "data",
    [b"a", b"abcabc", b"\x00\x00\xff\xff\xff", bytes(range(256)), b"z" * 1000 + b"q" * 3],
)
def test_round_trip(data):
    encoded = rle_compress(data)
    assert len(encoded) % 2 == 0
    assert rle_decompress(encoded) == data


def test_counts_never_exceed_limit():
    encoded = rle_compress(b"m" * 700 + b"n" * 256)
    assert all(0 < count <= 255 for count in encoded[1::2])


def test_decompress_odd_length_raises():
    with pytest.raises(CorruptDataError):
        rle_decompress(b"a\x02b")


def test_corrupt_error_is_value_error():
    with pytest.raises(ValueError):
        rle_decompress(b"a")


def test_read_chunks_splits_file(tmp_path):
    source = tmp_path / "in.bin"
    content = bytes(range(256)) * 5
    source.write_bytes(content)
    chunks = read_chunks(source, 100)
    assert b"".join(chunks) == content
    assert all(0 < len(chunk) <= 100 for chunk in chunks)
    assert len(chunks[0]) == 100


def test_read_chunks_empty_file(tmp_path):
    source = tmp_path / "empty.bin"
    source.write_bytes(b"")
    assert read_chunks(source) == []


def test_read_chunks_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_chunks(tmp_path / "absent.bin")


def test_write_chunks_concatenates(tmp_path):
    target = tmp_path / "out.bin"
    write_chunks(target, [b"ab", b"", b"cd"])
    assert target.read_bytes() == b"abcd"


def test_file_round_trip(tmp_path):
    source = tmp_path / "input.txt"
    compressed = tmp_path / "compressed.rle"
    restored = tmp_path / "output.txt"
    source.write_bytes(b"hello    world\n" * 50 + b"\x00" * 600)
    assert compress_file(source, compressed) >= 0
    assert compressed.read_bytes() == rle_compress(source.read_bytes())
    assert decompress_file(compressed, restored) >= 0
    assert restored.read_bytes() == source.read_bytes()
    assert files_match(source, restored)


def test_files_match_detects_difference(tmp_path):
    first = tmp_path / "a.txt"
    second = tmp_path / "b.txt"
    first.write_bytes(b"same start")
    second.write_bytes(b"same start plus")
    assert not files_match(first, second)
    second.write_bytes(b"same start")
    assert files_match(first, second)


def test_files_match_missing_file(tmp_path):
    existing = tmp_path / "a.txt"
    existing.write_bytes(b"data")
    assert files_match(existing, tmp_path / "absent.txt") is False


def test_benchmark_timings(tmp_path):
    source = tmp_path / "input.txt"
    source.write_bytes(b"abc" * 1000)
    result = benchmark(source)
    assert result.single_seconds >= 0
    assert result.multi_seconds >= 0


def test_speedup_ratio():
    assert BenchmarkResult(single_seconds=2.0, multi_seconds=1.0).speedup == pytest.approx(2.0)
    assert BenchmarkResult(single_seconds=1.0, multi_seconds=0.0).speedup == float("inf")


def test_main_reports_validation(tmp_path, capsys):
    source = tmp_path / "input.txt"
    compressed = tmp_path / "compressed.rle"
    restored = tmp_path / "output.txt"
    source.write_bytes(b"aaaabbbbcccc\n" * 20)
    code = main([str(source), str(compressed), str(restored)])
    out = capsys.readouterr().out
    assert code == 0
    assert "Validation: Decompressed file matches original." in out
    assert "Speedup:" in out
    assert restored.read_bytes() == source.read_bytes()


def test_main_missing_input_reports_error(tmp_path, capsys):
    code = main([str(tmp_path / "absent.txt"), str(tmp_path / "c.rle"), str(tmp_path / "o.txt")])
    captured = capsys.readouterr()
    assert code == 0
    assert captured.err.startswith("Error:")
    assert "Validation" not in captured.out