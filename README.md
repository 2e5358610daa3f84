# minish

`minish` is a Python library with the parts of a small Unix-style command
shell. It can split a command line into tokens, remove quotes and expand
variables. It keeps an ordered environment, runs the usual builtins, finds
commands on `PATH`, opens output redirection targets and reads
here-documents.

## Modules

- `minish.models`: the shared data types.
  - `TokenType` and `Builtin` are enums. `Builtin.from_name("cd")` returns
    `Builtin.CD`. Any name that is not a builtin returns `Builtin.OTHERS`.
  - `Token`, `Redirect` and `Command` are dataclasses.
  - `Shell` holds the state of a session. `Shell.reset()` drops the tokens
    and commands of the last line and moves `exit` into `prev_exit`.
- `minish.errors`: the error messages in the shell's own format, written to
  standard error.
  - The functions are `builtin_error`, `execve_error`, `error_printing`,
    `input_error` and `heredoc_eof_warning`.
  - `ShellSyntaxError` is raised for input that cannot be parsed.
- `minish.environment`: the `Environment` class.
  - It keeps variables in the order they were first set. A value of `None`
    means the variable was exported without a value.
  - `Environment.from_envp` builds one from `KEY=VALUE` strings. An empty
    list gives a minimal environment with `PWD`, `SHLVL` and `PATH`.
  - Its methods are `find`, `set`, `unset`, `items` and `to_list`.
  - `split_env_string` splits one entry at its first `=`.
- `minish.lexer`: `tokenize(line)`.
  - It splits a line into words and the operators `|`, `<`, `>`, `<<` and
    `>>`.
  - Quotes stay inside the words. A quote that is never closed raises
    `ShellSyntaxError`.
  - Helpers: `find_end`, `quote_index` and `find_close_quote`.
- `minish.expand`: `remove_quote(value, shell, heredoc)`.
  - It removes single and double quotes.
  - Unless `heredoc` is set, it expands `$NAME` and `$?`, except inside
    single quotes.
  - `expand_variable`, `lookup_key`, `split_quoted` and `QuoteState` are
    the parts it is built from.
- `minish.builtins`: `echo` (with `-n`), `cd` (with `-` and `HOME`), `pwd`,
  `env`, `export`, `unset` and `exit_shell`.
  - Each takes `(argv, shell)` and returns an exit status.
  - `exit_shell` leaves by raising `SystemExit`.
  - Helpers: `is_valid_identifier`, `is_newline_flag`, `parse_exit_code`,
    `export_listing` and `process_export_arg`.
- `minish.paths`: looking up commands and opening output files.
  - `create_env_path` lists the `PATH` directories.
  - `resolve_command_path` finds a command in those directories.
  - `set_command_paths` fills in `Command.path` for the commands of a
    `Shell`.
  - `open_outfile` and `open_append` open output files with mode `0644`.
- `minish.heredoc`: reading here-documents.
  - `collect_heredoc` reads lines through a `read_line(prompt)` callable
    until the delimiter. It expands variables unless the delimiter was
    quoted.
  - `prepare_heredocs` writes the leading here-documents of a `Command` to
    temporary files and leaves a readable descriptor in
    `Command.heredoc_fd`. If reading is interrupted with Ctrl-C, it sets the
    shell's exit status to 130.
  - Helpers: `is_quoted` and `expand_heredoc_line`.

## Example

```python
from minish.environment import Environment
from minish.expand import remove_quote
from minish.lexer import tokenize
from minish.models import Shell

env = Environment.from_envp(["HOME=/home/user", "PATH=/usr/bin:/bin"])
shell = Shell(env=env)

print([token.value for token in tokenize("cat < in.txt | grep x >> out.txt")])
# ['cat', '<', 'in.txt', '|', 'grep', 'x', '>>', 'out.txt']
print(remove_quote("$HOME", shell, False))    # /home/user
print(remove_quote("'$HOME'", shell, False))  # $HOME
```

## Exit statuses

- `exit_shell` with an argument that is not a number raises
  `SystemExit(2)`.
- `exit_shell` with more than one argument does not exit. It returns `1`.
- `exit_shell` with a single numeric argument exits with that number modulo
  256.
- An interrupted here-document sets `Shell.exit` to `130`.

## What the package does not do

`minish` has no command to start and no interactive prompt. It does not
start programs, build pipelines or apply input redirections to running
commands. You can use the pieces above to parse a line, expand it, resolve
commands and run builtins, but running external commands is left to the
caller.