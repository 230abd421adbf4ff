import pytest

from rislang.byteslice import ByteSlice


def test_getitem_positive_and_negative():
    b = ByteSlice(b"abc")
    assert b[0] == ord("a")
    assert b[-1] == ord("c")


def test_getitem_out_of_range():
    with pytest.raises(IndexError):
        ByteSlice(b"abc")[3]


def test_getitem_requires_int():
    with pytest.raises(TypeError):
        ByteSlice(b"abc")["x"]


def test_slice_returns_byteslice():
    b = ByteSlice(b"hello")
    part = b[1:3]
    assert isinstance(part, ByteSlice)
    assert part == b"hello"[1:3]


def test_setitem_single_byte():
    b = ByteSlice(b"abc")
    b[0] = b"z"
    assert bytes(b) == b"zbc"
    b[-1] = "y"
    assert bytes(b) == b"zby"


def test_setitem_rejects_multiple_bytes():
    b = ByteSlice(b"abc")
    with pytest.raises(ValueError) as info:
        b[0] = b"zz"
    assert "single byte" in str(info.value)
    assert bytes(b) == b"abc"


def test_delitem_not_allowed():
    b = ByteSlice(b"abc")
    with pytest.raises(TypeError) as info:
        del b[0]
    assert "cannot delete from byte_slice" in str(info.value)
    assert bytes(b) == b"abc"
    assert len(b) == 3


def test_equality():
    b = ByteSlice(b"abc")
    assert b == ByteSlice(b"abc")
    assert b == b"abc"
    assert b == "abc"
    assert not (b == 5)
    assert not (b == b"abd")


def test_add():
    assert ByteSlice(b"ab") + "cd" == b"abcd"
    assert ByteSlice(b"ab") + ByteSlice(b"cd") == b"abcd"
    with pytest.raises(TypeError):
        ByteSlice(b"ab") + 1


def test_truthiness_and_len():
    assert not ByteSlice(b"")
    assert ByteSlice(b"x")
    assert len(ByteSlice(b"abc")) == len(b"abc")


def test_compare():
    assert ByteSlice(b"abc").compare(b"abc") == 0
    assert ByteSlice(b"abc").compare("abd") == -1
    assert ByteSlice(b"abd").compare(ByteSlice(b"abc")) == 1
    with pytest.raises(TypeError, match="cannot compare byte_slice"):
        ByteSlice(b"abc").compare(3)


def test_clone_is_independent():
    b = ByteSlice(b"abc")
    c = b.clone()
    c[0] = b"z"
    assert bytes(b) == b"abc"
    assert bytes(c) == b"zbc"


def test_reversed_round_trip():
    b = ByteSlice(b"hello world")
    assert b.reversed().reversed() == b
    assert bytes(b.reversed()) == b"hello world"[::-1]


def test_integers_and_iter():
    b = ByteSlice(b"abc")
    assert b.integers() == list(b"abc")
    assert list(b) == list(b"abc")


def test_contains():
    b = ByteSlice(b"abc")
    assert b.contains(ord("a"))
    assert not b.contains(ord("z"))
    assert not b.contains(300)
    assert not b.contains("a")


def test_contains_any():
    b = ByteSlice(b"abc")
    assert b.contains_any("xa")
    assert not b.contains_any("xyz")
    assert not b.contains_any("")


def test_contains_rune():
    b = ByteSlice(b"abc")
    assert b.contains_rune("b")
    assert not b.contains_rune("q")
    with pytest.raises(ValueError, match="single character"):
        b.contains_rune("ab")
    with pytest.raises(ValueError):
        b.contains_rune("é")


def test_count():
    assert ByteSlice(b"banana").count("a") == b"banana".count(b"a")
    text = "héllo"
    assert ByteSlice(text.encode()).count(b"") == len(text) + 1


def test_prefix_suffix():
    b = ByteSlice(b"prefix-body-suffix")
    assert b.has_prefix("prefix")
    assert not b.has_prefix("body")
    assert b.has_suffix(b"suffix")
    assert not b.has_suffix("body")


def test_index():
    b = ByteSlice(b"hello")
    assert b.index("ll") == b"hello".find(b"ll")
    assert b.index("zz") == -1


def test_index_any_uses_byte_offsets():
    b = ByteSlice("héllo".encode())
    assert b.index_any("l") == len("hé".encode())
    assert b.index_any("xyz") == -1


def test_index_byte():
    b = ByteSlice(b"hello")
    assert b.index_byte(b"e") == 1
    assert b.index_byte("z") == -1
    with pytest.raises(ValueError, match="single byte"):
        b.index_byte(b"el")


def test_index_rune():
    b = ByteSlice(b"hello")
    assert b.index_rune("o") == len("hell")
    with pytest.raises(ValueError):
        b.index_rune("ho")


def test_repeat():
    assert ByteSlice(b"ab").repeat(3) == b"ab" * 3
    assert ByteSlice(b"ab").repeat(0) == b""
    with pytest.raises(ValueError):
        ByteSlice(b"ab").repeat(-1)


def test_replace_limited_and_all():
    b = ByteSlice(b"aaaa")
    assert b.replace("a", "b", 2) == b"bbaa"
    assert b.replace("a", "b", -1) == b"bbbb"
    assert b.replace_all("a", "b") == b"bbbb"
    assert bytes(b) == b"aaaa"


def test_replace_empty_old_inserts_between_runes():
    assert ByteSlice(b"ab").replace_all("", "-") == b"-a-b-"
    assert ByteSlice(b"ab").replace("", "-", 1) == b"-ab"