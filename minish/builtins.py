"""Commands the shell runs in its own process."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

from .environment import Environment
from .errors import builtin_error, execve_error
from .models import Shell


def _out(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _is_alpha(char: str) -> bool:
    return char.isascii() and char.isalpha()


def _is_name_char(char: str) -> bool:
    return char.isascii() and (char.isalnum() or char == "_")


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def is_valid_identifier(identifier: str) -> bool:
    """Return whether ``identifier`` matches ``[A-Za-z_][A-Za-z0-9_]*``."""
    if not identifier:
        return False
    first = identifier[0]
    if not (_is_alpha(first) or first == "_"):
        return False
    return all(_is_name_char(char) for char in identifier[1:])


def is_newline_flag(arg: str) -> bool:
    """Return whether ``arg`` is an ``-n`` option, such as ``-n`` or ``-nnn``."""
    return len(arg) > 1 and arg[0] == "-" and set(arg[1:]) == {"n"}


def parse_exit_code(text: str) -> int:
    """Parse an optionally signed decimal number given to ``exit``.

    Raises ``ValueError`` if ``text`` is not a sign followed by digits only.
    """
    digits = text[1:] if text[:1] in ("+", "-") else text
    if not digits or not all(_is_digit(char) for char in digits):
        raise ValueError(f"not a numeric argument: {text!r}")
    value = int(digits)
    return -value if text[0] == "-" else value


def export_listing(env: Environment) -> list[str]:
    """Return the lines ``export`` prints when given no arguments."""
    lines = []
    for key, value in env.items():
        if value is None:
            lines.append(f"declare -x {key}")
        else:
            lines.append(f'declare -x {key}="{value}"')
    return lines


def process_export_arg(arg: str, shell: Shell) -> bool:
    """Apply one ``export`` argument; return False if it was rejected."""
    identifier, sep, value = arg.partition("=")
    if not sep:
        if not is_valid_identifier(arg):
            builtin_error("export: `", arg, "': not a valid identifier")
            return False
        shell.env.set(arg, None)
        return True
    if not is_valid_identifier(identifier):
        shown = "=" if not identifier else arg
        builtin_error("export: `", shown, "': not a valid identifier")
        return False
    shell.env.set(identifier, value)
    return True


def echo(argv: Sequence[str], shell: Shell) -> int:
    """Print the arguments separated by blanks; ``-n`` drops the newline."""
    args = list(argv[1:])
    if not args:
        return 0
    newline = True
    while args and is_newline_flag(args[0]):
        newline = False
        args.pop(0)
    _out(" ".join(args) + ("\n" if newline else ""))
    return 0


def _cd_target(argv: Sequence[str], shell: Shell) -> str | None:
    if len(argv) < 2:
        target = shell.env.find("HOME")
        if target is None:
            builtin_error("cd: ", "HOME", " not set")
        return target
    if argv[1] == "-":
        target = shell.env.find("OLDPWD")
        if target is None:
            builtin_error("cd: ", "OLDPWD", " not set")
            return None
        _out(target + "\n")
        return target
    return argv[1]


def cd(argv: Sequence[str], shell: Shell) -> int:
    """Change the working directory and update PWD and OLDPWD."""
    if len(argv) > 2:
        builtin_error("cd: ", "", "too many arguments")
        return 1
    target = _cd_target(argv, shell)
    if target is None:
        return 1
    try:
        oldpwd = os.getcwd()
    except OSError:
        oldpwd = ""
    try:
        os.chdir(target)
    except OSError:
        builtin_error("cd: ", target, ": No such file or directory")
        return 1
    shell.env.set("OLDPWD", oldpwd)
    try:
        newpwd = os.getcwd()
    except OSError:
        return 1
    shell.env.set("PWD", newpwd)
    return 0


def pwd(argv: Sequence[str], shell: Shell) -> int:
    """Print the working directory."""
    try:
        cwd = os.getcwd()
    except OSError:
        return 1
    _out(cwd + "\n")
    return 0


def env(argv: Sequence[str], shell: Shell) -> int:
    """Print every variable that has a value, as ``KEY=VALUE``."""
    if "PATH" not in shell.env:
        execve_error("env", "No such file or directory")
        return 0
    _out(
        "".join(
            f"{key}={value}\n"
            for key, value in shell.env.items()
            if value is not None
        )
    )
    return 0


def export(argv: Sequence[str], shell: Shell) -> int:
    """Set variables, or list them all when given no arguments."""
    if len(argv) < 2:
        _out("".join(line + "\n" for line in export_listing(shell.env)))
        return 0
    failed = False
    for arg in argv[1:]:
        if not process_export_arg(arg, shell):
            failed = True
    if failed:
        shell.exit = 1
        return 1
    return 0


def unset(argv: Sequence[str], shell: Shell) -> int:
    """Remove the named variables; invalid names are ignored."""
    for name in argv[1:]:
        if is_valid_identifier(name):
            shell.env.unset(name)
    return 0


def exit_shell(argv: Sequence[str], shell: Shell) -> int:
    """Leave the shell by raising ``SystemExit``.

    With more than one argument it does not leave and returns 1.
    """
    sys.stderr.write("exit\n")
    sys.stderr.flush()
    if len(argv) < 2:
        raise SystemExit(0)
    try:
        code = parse_exit_code(argv[1])
    except ValueError:
        builtin_error("exit: ", argv[1], ": numeric argument required")
        raise SystemExit(2) from None
    if len(argv) > 2:
        builtin_error("exit: ", "", "too many arguments")
        shell.exit = 1
        return 1
    raise SystemExit(code & 0xFF)