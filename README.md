# minishell

Building blocks for a small bash-like shell, as a Python library. It has
no dependencies beyond the standard library and supports Python 3.10 and
later.

| Module | What it offers |
| --- | --- |
| `minishell.tokenizer` | `tokenize`, `is_separator`, `Tokenization` |
| `minishell.search` | `find_char`, `find_last_char`, `compare`, `compare_n`, `find_bounded`, `find_substring`, `remove_through`, `before_char`, `export_value` |
| `minishell.arrays` | `remove_entries`, `replace_entry`, `print_entries` for `KEY=value` lists |
| `minishell.lines` | `LineReader`, reading lines from a file descriptor |
| `minishell.memory` | `mem_find`, `mem_compare`, `mem_copy`, `mem_move`, `mem_set`, `resized` on byte buffers |
| `minishell.linked` | `Node` and `LinkedList` |

## Tokenizing a command line

```python
from minishell.tokenizer import tokenize

result = tokenize("cat file.txt | grep needle >> out.txt")
result.tokens        # ['cat', 'file.txt', '|', 'grep', 'needle', '>>', 'out.txt']
result.syntax_error  # False
```

Words end at whitespace, `|`, `<`, `>` and `$`. Each `|` and `$` is a token
of its own, as is each `<`, `>`, `<<` or `>>`. A run of several redirection
operators written together (such as `>><`) comes out as one token and ends
the token list. A quote character takes the rest of the line into its word
and sets `syntax_error`:

```python
tokenize('echo "hi there"')
# Tokenization(tokens=['echo', '"hi there"'], syntax_error=True)
```

`tokenize(None)` returns `None`. `is_separator(c)` tells whether a single
character ends a word; the empty string and `"\0"` count as the end of input.

## String helpers

```python
from minishell.search import export_value, find_char, remove_through

export_value("HOME=/home/user", "HOME")               # '/home/user'
find_char("a=b", "=")                                 # 1
remove_through("/home/user/src", "/home/user")        # '/src'
```

Searches return an index into the searched string, or `None` when nothing
is found. `compare` returns the non-negative distance between the first
differing characters; `compare_n` returns a signed difference within `n`
characters. `before_char` raises `ValueError` when the character is absent.

## Entry lists

```python
from minishell.arrays import remove_entries, replace_entry

env = ["PATH=/bin", "HOME=/home/user"]
remove_entries("PATH", env)                 # ['HOME=/home/user']
replace_entry("HOME", env, "HOME=/tmp")     # ['PATH=/bin', 'HOME=/tmp']
```

Both raise `ValueError` for an empty list. `print_entries(entries, stream)`
writes one entry per line (to standard output by default) and returns the
total length of the entries.

## Reading lines

```python
import os

from minishell.lines import LineReader

read_fd, write_fd = os.pipe()
os.write(write_fd, b"one\ntwo")
os.close(write_fd)
list(LineReader(read_fd, buffer_size=4))    # ['one\n', 'two']
```

`read_line()` returns the next line with its newline, or `None` at end of
input; read errors are raised as `OSError`.

## Buffers and linked lists

`minishell.memory` works on `bytes`/`bytearray` and raises `ValueError`
when a length reaches past a buffer. `LinkedList` takes an iterable of
values and supports `push_front`, `push_back`, `last`, `len()`, iteration,
`clear(delete)`, `for_each(func)` and `map(func)`.

## What this package does not do

There is no interactive shell here: no prompt, no read-eval loop, no
command execution, pipes or redirections at run time, no syntax checking
beyond the tokenizer's quote flag, no builtins such as `exit`, and no
formatted-output helpers. It provides the tokenizer and the helpers above
for a program that supplies those parts.