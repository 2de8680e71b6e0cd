# pipekit

`pipekit` runs a chain of commands the way a shell runs
`< infile cmd1 | cmd2 | ... | cmdN > outfile`, with no shell in between.
Each command is looked up on `PATH`, or taken as given when its name
contains a `/`. Its standard input and output are connected to the
commands next to it.

## Installation

```
pip install .
```

## Usage

Read from a file and write to another, truncating it first:

```
pipekit infile "grep foo" "wc -l" outfile
```

Read lines from standard input up to a line that is exactly the limiter,
then run the commands on them and append the result to the output file:

```
pipekit here_doc END "cat" "tr a-z A-Z" outfile
```

Notes on behaviour:

- At least two commands are required. With fewer arguments the command
  prints `Invalid args` on standard error and exits with status 1.
- Command strings are split on single spaces. There is no quoting and no
  expansion. A string made only of whitespace is passed on as one word.
- The here-document text is written to a file named `tmp` in the current
  directory. That file becomes the pipeline's input and is left in place
  afterwards. If standard input ends before the limiter line, the command
  exits with status 1.
- If the input file cannot be opened, or the output file cannot be
  created, the error is printed followed by `Init fail`, and the exit
  status is 1.
- A command that is empty, cannot be found, or is not executable is
  reported on standard error (`Command not found: NAME`,
  `Permission denied: NAME`). The other commands in the chain still run.

## Library

```python
from pipekit.pipeline import parse_args, run_pipeline

invocation = parse_args(["infile", "sort", "uniq -c", "outfile"])
statuses = run_pipeline(invocation, {"PATH": "/usr/bin:/bin"})
```

`parse_args` returns an `Invocation` dataclass with the fields `infile`,
`outfile`, `commands`, `append` and `limiter`, and the property
`is_here_doc`. It raises `PipexError` when there are too few arguments.
`run_pipeline` waits for every command and returns one exit status per
command. A command that could not be started counts as 1.
`read_here_doc(limiter, source, dest)` copies lines up to the limiter and
raises `PipexError` if `source` ends first.

Other helpers:

- `pipekit.pathsearch.find_command_path(cmd, env)`: resolves a command name
  against the `PATH` in `env`, or returns `None`.
- `pipekit.words.split_words(s, sep)`, `split_command(arg)` and
  `is_full_space(s)`: split strings into words.
- `pipekit.lines.iter_lines(stream)`: yields lines from a stream, each
  keeping its newline.
- `pipekit.fmt.format_message(fmt, *args)`: a small printf-style formatter
  supporting `%s %c %p %d %i %u %x %X %%`. Unknown conversions produce no
  output. `printf` and `eprintf` write the result to standard output or
  standard error and return its length.
- `pipekit.grid.read_map(path)`: reads a rectangular text grid into a list
  of rows. It raises `MapError` when the file cannot be read, is empty, or
  has rows of different lengths. `print_map(grid)` prints the rows.

## Limitations

- The `pipekit` command always exits with status 0 once the pipeline has
  started, whatever the commands' own exit statuses. Call `run_pipeline`
  directly if you need those statuses.
- There are no redirections, globbing, variables or quoting beyond what is
  described above. It is not a general shell.

## Running the tests

```
pip install ".[test]"
pytest
```