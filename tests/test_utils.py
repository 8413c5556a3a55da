from secrules.utils import (
    UNIX_SCHEME,
    hardware_concurrency,
    is_unix_scheme,
    read_file,
    wrap_text,
)

TEXT = (
    "the quick brown fox jumps over the lazy dog while the cat sleeps "
    "on a warm mat near the open window of the old house"
)


def test_wrap_keeps_words_in_order():
    assert wrap_text(TEXT, 4, 30).split() == TEXT.split()


def test_wrap_short_text_single_line():
    assert wrap_text("a b", 0, 80) == "a b "


def test_wrap_continuation_lines_indented():
    lines = wrap_text(TEXT, 4, 30).split("\n")
    assert len(lines) > 1
    for line in lines[1:]:
        assert line.startswith(" " * 4)
        assert not line.startswith(" " * 5)


def test_wrap_line_lengths_bounded():
    indent, line_len = 6, 32
    lines = wrap_text(TEXT, indent, line_len).split("\n")
    assert len(lines[0]) <= line_len - indent
    for line in lines[1:]:
        assert len(line) <= line_len


def test_wrap_empty_text():
    assert wrap_text("   ", 4, 20) == ""


def test_wrap_ends_with_space():
    assert wrap_text(TEXT, 2, 25).endswith(" ")


def test_hardware_concurrency_positive():
    assert hardware_concurrency() >= 1


def test_read_file(tmp_path):
    path = tmp_path / "rules.yaml"
    content = "- rule: x\n  desc: y\n"
    path.write_text(content, encoding="utf-8")
    assert read_file(str(path)) == content


def test_read_missing_file_is_empty(tmp_path):
    assert read_file(str(tmp_path / "missing.yaml")) == ""


def test_is_unix_scheme():
    assert is_unix_scheme(UNIX_SCHEME + "/run/engine.sock")
    assert not is_unix_scheme("http://localhost:5060")
    assert not is_unix_scheme("/run/engine.sock")