import pytest

from graphalgs.readers import TokenReader, read_text


def test_tokens_across_lines():
    reader = TokenReader("3\n  2\n0 1\t1.5\n")
    assert reader.remaining() == 5
    assert reader.read_count("vertices") == 3
    assert reader.read_int() == 2
    assert reader.read_int() == 0
    assert reader.read_float() == pytest.approx(1.0)
    assert reader.read_float() == pytest.approx(1.5)
    assert reader.is_empty()


def test_malformed_tokens():
    reader = TokenReader("x 1.5 nan -2")
    with pytest.raises(ValueError, match="expected an integer"):
        reader.read_int()
    with pytest.raises(ValueError, match="expected an integer"):
        reader.read_int()
    with pytest.raises(ValueError, match="NaN"):
        reader.read_float()
    with pytest.raises(ValueError, match="nonnegative"):
        reader.read_count("edges")
    with pytest.raises(ValueError, match="end of input"):
        reader.read_float()


def test_read_text(data_dir):
    assert read_text(data_dir / "tinyG.txt").split()[:2] == ["13", "13"]
