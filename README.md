# nemshell

The parts of a small POSIX-style shell, as a Python library. The package has no
dependencies outside the standard library.

## Modules

### `nemshell.environment`

- `Environment(pairs)` is an ordered set of variables. It takes `(key, value)`
  tuples or `EnvVar` objects. It supports `in`, `len()` and iteration over its
  `EnvVar`s.
  - `get(key)` returns the value, or `None`.
  - `set(key, value)` defines or replaces a variable. A replaced variable
    becomes visible again.
  - `append(key, value)` appends to a value, and defines the variable when it
    is missing.
  - `unset(key)` removes a variable. Unknown names are ignored.
  - `export(argument)` handles `KEY=value`, `KEY+=value` and a bare `KEY`. A
    bare `KEY` defines a hidden, empty variable. With `None` it returns the
    declaration list.
  - `env_lines()` gives the `KEY=value` lines that `env` prints. It leaves out
    hidden variables.
  - `export_lines()` sorts the variables by name in place and returns their
    `declare -x KEY="value"` lines.
  - `pwd_value()` returns `PWD`, or the real working directory when `PWD` is
    not set.
- `EnvVar` holds `key`, `value`, `hidden` and `internal`.
- `parse_assignment(argument)` returns an `Assignment(key, value, append)`.

### `nemshell.cd`

`change_directory(env, path)` runs `cd` and returns its exit status. It writes
errors to stderr and keeps `PWD` and `OLDPWD` in the environment up to date.

- `None` or a path starting with `~` goes through `home_path`, which puts `HOME`
  in place of the `~`.
- A path starting with `/` goes through `absolute_path`.
- A path starting with `-` goes through `go_old_pwd`, which returns to `OLDPWD`.
- `..` inside a symbolically linked `PWD` drops the last component of `PWD`
  instead of resolving the link.

The module also provides these helpers: `search_and_replace`, `split_pwd`,
`strip_trailing_slash` and `is_symbolic_link`.

### `nemshell.builtins`

- `run_builtin(argv, env, out=None)` runs `export`, `cd`, `env`, `unset`, `pwd`,
  `exit` or `echo` and returns the status. When `argv` is not a builtin it
  returns `None`. Output goes to `out`, or to stdout.
- `echo(args, out)` drops leading `-n`, `-nn`, … flags. When only flags are
  given it prints nothing. Otherwise it prints the words joined by spaces,
  followed by a newline. `echo_merge` does the joining and adds no space after
  an empty word. `is_n_flag` recognises the flags.
- `exit_builtin(args, out)` always raises `ShellExit`, and its `.status` is set
  as follows:
  - 1 for too many arguments;
  - 2 for an argument that is not a number;
  - otherwise the argument modulo 256, or 0 when there is no argument.
- `pwd(env, out)` prints the value from `Environment.pwd_value()`.

### `nemshell.redirection`

- `open_output(paths, append)` creates every file with mode 0644. It returns the
  last one open for binary writing, truncated or appended to. A file that
  cannot be opened is reported on stderr. When that file is the last one, the
  function returns `None`.
- `open_input(paths)` checks every file and returns the last one open for
  binary reading. It raises `RedirectionError` (with `status == 1`) for the
  first file that cannot be opened. The error reads "ambiguous redirect" when
  the name contains `*`.
- Both functions raise `ValueError` for an empty list.

### `nemshell.heredoc`

- `read_heredoc(delimiters, read_line=None)` reads one here-document per
  delimiter and returns the text of the last one. It prompts with `"> "` and
  uses `input` by default. End of input gives an empty text.
- `matches_delimiter(line, delimiter)` tells whether a line ends a
  here-document. A one-character delimiter never matches.

### `nemshell.status`

- `normalize_status(raw)` maps a wait status word to 0, to 130 for SIGINT, or to
  127 for anything else.
- `wait_all(processes)` waits for each object that has a `wait()` method, such
  as `subprocess.Popen`, and returns the last status. `wait_last(processes)`
  waits only for the last one.
- `format_error(command, message)` builds `"nemshell: <command>: <message>"`.

### `nemshell.libft`

This module holds small helpers:

- `atoi` and `atol` wrap the result to 32 or 64 bits.
- `itoa`.
- `split` drops empty words.
- `strtrim` and `substr`.
- `strnstr` returns an index or `None`.
- `strncmp` compares bytes.
- `format_printf(fmt, *args)` handles `c s p d i u x X %` and returns a string.

`LineReader(stream)` reads a text or binary stream line by line. `next_line()`
returns a line with its newline, or `None` at the end. Iterating over the
reader yields the lines.

## What it does not do

The package has no command-line parser, no pipeline or `&&`/`||` executor, no
program launcher and no interactive prompt. It installs no command. It provides
only the pieces listed above for a program to build on.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Example

```python
import io
from nemshell.environment import Environment
from nemshell.builtins import run_builtin

env = Environment([("HOME", "/home/user"), ("PWD", "/tmp")])
out = io.StringIO()
run_builtin(["export", "GREETING=hello"], env, out)
run_builtin(["echo", "hi", "there"], env, out)
run_builtin(["pwd"], env, out)
print(env.get("GREETING"))   # hello
print(out.getvalue())        # "hi there\n/tmp\n"
```