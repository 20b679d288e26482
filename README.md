# minish

A small interactive shell. It reads a line, splits it into tokens (words,
quoted words, pipes and redirections), expands `$NAME` variables from the
environment, groups the tokens into commands, and runs the built-in
commands `echo` and `pwd`.

## Installation

```
pip install .
```

## Running the shell

```
minish
```

The prompt is `minishell > `. Ctrl+C prints a new line and prompts again;
Ctrl+\ is ignored. Ctrl+D (end of input) prints `exit` and ends the session
with status 1.

What the shell understands:

- Words separated by whitespace; `'single'` and `"double"` quoted words.
  Pieces written next to each other, as in `a'b'"c"`, form one argument.
- `$NAME` expansion except inside single quotes. Everything from the first
  `$` of a word onwards is replaced by the values of the variables named
  there; text before the `$` is kept.
- `|` to separate commands, `<` and `<<` as input redirections,
  `>` and `>>` as output redirections.
- The built-ins `echo` (with `-n`, writing to the files given with `>` or
  `>>`) and `pwd`.

Each accepted line is recorded in `Shell.history`. A line that cannot be
parsed (for example a redirection with no name after it) is reported on
standard error as `minishell: <message>`.

Input checks, done by `minish.shell.check_input`:

- A line that starts with `|` (after whitespace), ends with `|`, `<` or `>`,
  or holds an odd number of single or double quotes is rejected: the message
  is printed and the session ends with status 0.
- An empty or whitespace-only line also ends the session with status 0.

## What it does not do

- Only the first command of a line is looked at, and only `echo` and `pwd`
  are run. Other commands are parsed but not run; no other programs are
  started and pipelines are not connected.
- Input redirections and here-documents are parsed into the command table
  but not applied.
- There is no `cd`, `export`, `unset`, `env` or `exit` built-in, and no
  persistent history file.

## Using it from Python

```python
import io
from minish.shell import Shell

out = io.StringIO()
shell = Shell({"USER": "alice"}, out, io.StringIO())
shell.run_line('echo hello "$USER"')
print(out.getvalue())  # hello alice
```

`Shell.run(lines)` processes an iterable of lines the way the interactive
session does, and returns its exit status.

The pieces can also be used on their own:

```python
from minish.tokens import tokenize, strip_quotes
from minish.expander import expand_tokens
from minish.command_table import build_commands

tokens = strip_quotes(tokenize("cat < in.txt | wc > out.txt"))
tokens = expand_tokens(tokens, {})
for command in build_commands(tokens):
    print(command.args, command.infiles, command.outfiles)
```

`tokenize` and `build_commands` raise `ValueError` on malformed input;
`check_input` raises `minish.shell.ShellSyntaxError`.

## Tests

```
pip install .[test]
pytest
```