import io
import os

import pytest

from nemshell.builtins import (
    ShellExit,
    echo,
    echo_merge,
    exit_builtin,
    is_n_flag,
    pwd,
    run_builtin,
)
from nemshell.environment import Environment


def test_echo_merge_joins_with_spaces():
    assert echo_merge(["hello", "world"]) == "hello world"


def test_echo_merge_empty_word_adds_no_space():
    assert echo_merge(["", "b"]) == "b"


def test_echo_merge_empty_list():
    assert echo_merge([]) == ""


@pytest.mark.parametrize(
    "arg, expected",
    [("-n", True), ("-nnnn", True), ("-nx", False), ("-", False), ("n", False), ("-e", False)],
)
def test_is_n_flag(arg, expected):
    assert is_n_flag(arg) is expected


def test_echo_prints_words_and_newline():
    out = io.StringIO()
    assert echo(["hi", "there"], out) == 0
    assert out.getvalue() == "hi there\n"


def test_echo_without_arguments_prints_newline():
    out = io.StringIO()
    echo([], out)
    assert out.getvalue() == "\n"


def test_echo_only_flags_prints_nothing():
    out = io.StringIO()
    assert echo(["-n", "-nnn"], out) == 0
    assert out.getvalue() == ""


def test_echo_drops_leading_flags():
    out = io.StringIO()
    echo(["-n", "-nn", "word"], out)
    assert out.getvalue().rstrip("\n") == "word"
    assert "-n" not in out.getvalue()


def test_echo_keeps_non_flag_dash_argument():
    out = io.StringIO()
    echo(["-nx", "a"], out)
    assert out.getvalue().startswith("-nx a")


def test_exit_without_argument():
    out = io.StringIO()
    with pytest.raises(ShellExit) as info:
        exit_builtin([], out)
    assert info.value.status == 0
    assert out.getvalue() == "exit\n"


def test_exit_with_number():
    out = io.StringIO()
    with pytest.raises(ShellExit) as info:
        exit_builtin(["42"], out)
    assert info.value.status == 42


def test_exit_status_wraps_at_256():
    with pytest.raises(ShellExit) as info:
        exit_builtin(["256"], io.StringIO())
    assert info.value.status == 0


def test_exit_too_many_arguments(capsys):
    out = io.StringIO()
    with pytest.raises(ShellExit) as info:
        exit_builtin(["1", "2"], out)
    assert info.value.status == 1
    assert capsys.readouterr().err == "nemshell: exit: too many arguments\n"
    assert out.getvalue() == ""


def test_exit_non_numeric(capsys):
    with pytest.raises(ShellExit) as info:
        exit_builtin(["abc"], io.StringIO())
    assert info.value.status == 2
    assert capsys.readouterr().err == "nemshell: exit: numeric argument required\n"


def test_exit_negative_is_not_numeric():
    with pytest.raises(ShellExit) as info:
        exit_builtin(["-1"], io.StringIO())
    assert info.value.status == 2


def test_pwd_prints_pwd_variable():
    out = io.StringIO()
    assert pwd(Environment([("PWD", "/some/where")]), out) == 0
    assert out.getvalue() == "/some/where\n"


def test_pwd_falls_back_to_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    out = io.StringIO()
    pwd(Environment(), out)
    assert out.getvalue() == os.getcwd() + "\n"


def test_run_builtin_unknown_command():
    assert run_builtin(["ls", "-l"], Environment(), io.StringIO()) is None


def test_run_builtin_empty_argv():
    assert run_builtin([], Environment(), io.StringIO()) is None


def test_run_builtin_export_and_unset():
    env = Environment()
    assert run_builtin(["export", "A=1", "B=2"], env, io.StringIO()) == 0
    assert env.get("A") == "1"
    assert env.get("B") == "2"
    assert run_builtin(["unset", "A"], env, io.StringIO()) == 0
    assert "A" not in env
    assert env.get("B") == "2"


def test_run_builtin_export_without_arguments_lists():
    env = Environment([("B", "2"), ("A", "1")])
    out = io.StringIO()
    run_builtin(["export"], env, out)
    assert out.getvalue().splitlines() == env.export_lines()
    assert out.getvalue().splitlines()[0].startswith("declare -x A=")


def test_run_builtin_env_prints_visible_vars():
    env = Environment([("A", "1")])
    env.export("HIDDEN")
    out = io.StringIO()
    assert run_builtin(["env"], env, out) == 0
    assert out.getvalue().splitlines() == env.env_lines()
    assert "HIDDEN" not in out.getvalue()


def test_run_builtin_echo():
    out = io.StringIO()
    assert run_builtin(["echo", "x", "y"], Environment(), out) == 0
    assert out.getvalue() == "x y\n"


def test_run_builtin_exit_raises():
    with pytest.raises(ShellExit) as info:
        run_builtin(["exit", "7"], Environment(), io.StringIO())
    assert info.value.status == 7


def test_run_builtin_cd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = tmp_path / "sub"
    target.mkdir()
    env = Environment([("PWD", str(tmp_path))])
    assert run_builtin(["cd", str(target)], env, io.StringIO()) == 0
    assert os.path.samefile(os.getcwd(), target)
    assert os.path.samefile(env.get("PWD"), target)