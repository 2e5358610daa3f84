import os

import pytest

from minish import builtins
from minish.environment import Environment
from minish.models import Shell


def make_shell(*entries):
    return Shell(env=Environment.from_envp(list(entries) or ["PATH=/bin"]))


@pytest.mark.parametrize(
    "name, expected",
    [
        ("HOME", True),
        ("_x1", True),
        ("a_B_9", True),
        ("", False),
        ("1abc", False),
        ("a-b", False),
        ("é", False),
    ],
)
def test_is_valid_identifier(name, expected):
    assert builtins.is_valid_identifier(name) is expected


@pytest.mark.parametrize(
    "arg, expected",
    [("-n", True), ("-nnnn", True), ("-", False), ("-nx", False), ("n", False), ("", False)],
)
def test_is_newline_flag(arg, expected):
    assert builtins.is_newline_flag(arg) is expected


@pytest.mark.parametrize("text, expected", [("42", 42), ("+7", 7), ("-3", -3), ("007", 7)])
def test_parse_exit_code(text, expected):
    assert builtins.parse_exit_code(text) == expected


@pytest.mark.parametrize("text", ["", "+", "-", "4a", " 4", "1.5", "--1"])
def test_parse_exit_code_rejects(text):
    with pytest.raises(ValueError):
        builtins.parse_exit_code(text)


def test_echo_plain(capsys):
    assert builtins.echo(["echo", "hello", "world"], make_shell()) == 0
    assert capsys.readouterr().out == "hello world\n"


def test_echo_no_newline(capsys):
    assert builtins.echo(["echo", "-n", "-nnn", "a", "-n"], make_shell()) == 0
    assert capsys.readouterr().out == "a -n"


def test_echo_no_args_prints_nothing(capsys):
    assert builtins.echo(["echo"], make_shell()) == 0
    assert capsys.readouterr().out == ""


def test_pwd(capsys, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert builtins.pwd(["pwd"], make_shell()) == 0
    assert capsys.readouterr().out == os.getcwd() + "\n"


def test_cd_to_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    start = os.getcwd()
    sub = tmp_path / "sub"
    sub.mkdir()
    shell = make_shell()
    assert builtins.cd(["cd", str(sub)], shell) == 0
    assert os.path.realpath(os.getcwd()) == os.path.realpath(sub)
    assert shell.env.find("OLDPWD") == start
    assert shell.env.find("PWD") == os.getcwd()


def test_cd_home(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    home = tmp_path / "home"
    home.mkdir()
    shell = make_shell("PATH=/bin", f"HOME={home}")
    assert builtins.cd(["cd"], shell) == 0
    assert os.path.realpath(os.getcwd()) == os.path.realpath(home)


def test_cd_home_unset(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert builtins.cd(["cd"], make_shell()) == 1
    assert "HOME not set" in capsys.readouterr().err


def test_cd_dash_goes_to_oldpwd(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    other = tmp_path / "other"
    other.mkdir()
    shell = make_shell("PATH=/bin", f"OLDPWD={other}")
    assert builtins.cd(["cd", "-"], shell) == 0
    assert capsys.readouterr().out == f"{other}\n"
    assert os.path.realpath(os.getcwd()) == os.path.realpath(other)


def test_cd_missing_directory(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    missing = str(tmp_path / "missing")
    shell = make_shell()
    assert builtins.cd(["cd", missing], shell) == 1
    assert f"{missing}: No such file or directory" in capsys.readouterr().err
    assert "OLDPWD" not in shell.env


def test_cd_too_many_arguments(capsys):
    assert builtins.cd(["cd", "a", "b"], make_shell()) == 1
    assert "too many arguments" in capsys.readouterr().err


def test_env_prints_only_valued(capsys):
    shell = make_shell("PATH=/bin", "A=1")
    shell.env.set("NOVALUE", None)
    assert builtins.env(["env"], shell) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["PATH=/bin", "A=1"]


def test_env_without_path(capsys):
    shell = make_shell("A=1")
    assert builtins.env(["env"], shell) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "env: No such file or directory" in captured.err


def test_export_listing_format():
    env = Environment.from_envp(["A=1"])
    env.set("B", None)
    assert builtins.export_listing(env) == ['declare -x A="1"', "declare -x B"]


def test_export_no_args_prints_listing(capsys):
    shell = make_shell("PATH=/bin")
    assert builtins.export(["export"], shell) == 0
    assert capsys.readouterr().out == 'declare -x PATH="/bin"\n'


def test_export_sets_values():
    shell = make_shell()
    assert builtins.export(["export", "X=a=b", "Y", "Z="], shell) == 0
    assert shell.env.find("X") == "a=b"
    assert "Y" in shell.env and shell.env.find("Y") is None
    assert shell.env.find("Z") == ""


def test_export_without_equals_clears_value():
    shell = make_shell("PATH=/bin", "X=old")
    assert builtins.process_export_arg("X", shell) is True
    assert shell.env.find("X") is None


def test_export_invalid_identifier(capsys):
    shell = make_shell()
    assert builtins.export(["export", "1X=v", "OK=v"], shell) == 1
    assert shell.exit == 1
    assert shell.env.find("OK") == "v"
    assert "1X" not in shell.env
    assert "`1X=v': not a valid identifier" in capsys.readouterr().err


def test_export_bare_equals(capsys):
    shell = make_shell()
    assert builtins.process_export_arg("=v", shell) is False
    assert "`=': not a valid identifier" in capsys.readouterr().err


def test_unset_removes_valid_names():
    shell = make_shell("PATH=/bin", "A=1", "B=2")
    assert builtins.unset(["unset", "A", "1bad", "missing"], shell) == 0
    assert list(shell.env) == ["PATH", "B"]


def test_exit_without_args(capsys):
    with pytest.raises(SystemExit) as info:
        builtins.exit_shell(["exit"], make_shell())
    assert info.value.code == 0
    assert capsys.readouterr().err == "exit\n"


def test_exit_with_code():
    with pytest.raises(SystemExit) as info:
        builtins.exit_shell(["exit", "42"], make_shell())
    assert info.value.code == 42


def test_exit_code_wraps_to_byte():
    with pytest.raises(SystemExit) as info:
        builtins.exit_shell(["exit", "-1"], make_shell())
    assert info.value.code == 255


def test_exit_non_numeric(capsys):
    with pytest.raises(SystemExit) as info:
        builtins.exit_shell(["exit", "abc"], make_shell())
    assert info.value.code == 2
    assert "abc: numeric argument required" in capsys.readouterr().err


def test_exit_too_many_arguments(capsys):
    shell = make_shell()
    assert builtins.exit_shell(["exit", "1", "2"], shell) == 1
    assert shell.exit == 1
    assert "too many arguments" in capsys.readouterr().err