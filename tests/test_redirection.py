import pytest

from nemshell.redirection import RedirectionError, open_input, open_output


def test_open_output_creates_all_and_returns_last(tmp_path):
    first, last = tmp_path / "a", tmp_path / "b"
    with open_output([str(first), str(last)], append=False) as handle:
        handle.write(b"data")
    assert first.read_bytes() == b""
    assert last.read_bytes() == b"data"


def test_open_output_truncates(tmp_path):
    target = tmp_path / "out"
    target.write_bytes(b"old contents")
    with open_output([str(target)], append=False) as handle:
        handle.write(b"new")
    assert target.read_bytes() == b"new"


def test_open_output_append(tmp_path):
    target = tmp_path / "out"
    target.write_bytes(b"old")
    with open_output([str(target)], append=True) as handle:
        handle.write(b"new")
    assert target.read_bytes() == b"oldnew"


def test_open_output_earlier_truncation_and_append_preserve(tmp_path):
    earlier = tmp_path / "earlier"
    earlier.write_bytes(b"keep")
    with open_output([str(earlier), str(tmp_path / "x")], append=True):
        pass
    assert earlier.read_bytes() == b"keep"


def test_open_output_reports_and_skips_failures(tmp_path, capsys):
    bad = str(tmp_path / "missing_dir" / "f")
    good = tmp_path / "good"
    with open_output([bad, str(good)], append=False) as handle:
        handle.write(b"ok")
    assert good.read_bytes() == b"ok"
    assert capsys.readouterr().err.startswith("open: ")


def test_open_output_last_failure_returns_none(tmp_path):
    assert open_output([str(tmp_path / "no" / "f")], append=False) is None


def test_empty_paths_rejected():
    with pytest.raises(ValueError):
        open_output([], append=False)
    with pytest.raises(ValueError):
        open_input([])


def test_open_input_reads_last(tmp_path):
    first, last = tmp_path / "a", tmp_path / "b"
    first.write_bytes(b"first")
    last.write_bytes(b"second")
    with open_input([str(first), str(last)]) as handle:
        assert handle.read() == b"second"


def test_open_input_missing_file(tmp_path):
    missing = str(tmp_path / "missing")
    with pytest.raises(RedirectionError) as info:
        open_input([missing])
    assert info.value.path == missing
    assert info.value.reason == "no such file or directory\n"
    assert info.value.status == 1
    assert str(info.value) == f"nemshell: {missing}: no such file or directory"


def test_open_input_wildcard_is_ambiguous(tmp_path):
    pattern = str(tmp_path / "*.txt")
    with pytest.raises(RedirectionError) as info:
        open_input([pattern])
    assert info.value.reason == "ambiguous redirect\n"


def test_open_input_earlier_missing_fails(tmp_path):
    last = tmp_path / "exists"
    last.write_bytes(b"x")
    missing = str(tmp_path / "gone")
    with pytest.raises(RedirectionError) as info:
        open_input([missing, str(last)])
    assert info.value.path == missing