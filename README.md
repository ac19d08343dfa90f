# cshell

An interactive shell for Linux. It has built-in commands for moving around
the file system, listing and searching directories, inspecting processes
and managing background jobs. Anything that is not a built-in or an alias
is run as an external program. Several built-ins read `/proc`, so the shell
is meant for Linux.

## Installing

```
pip install .
```

No third-party packages are needed.

## Starting the shell

```
cshell
```

The directory you start from becomes the shell's home (`~`). The prompt
has the form `<user@host:path> `, with the home directory shown as `~`.
After a foreground command that ran for more than two seconds, the next
prompt also shows that command.

When input ends (Ctrl-D), every background job still tracked is killed, the
shell prints `Namaste!` and exits.

## Built-in commands

| Command | What it does |
|---|---|
| `hop [dir ...]` | Change directory, one argument after another, printing each directory reached. Accepts `~`, `-` (the previous directory; home with a warning if there is none), `.`, `..` and paths. Stops at the first path that cannot be entered. |
| `reveal [-a] [-l] [path]` | List a directory sorted by name, after a line with the entry count. `-a` includes hidden entries, `-l` the long format (mode, links, owner, group, size, modification time). Flags count only before the path. Directories are blue, executables green, other files white. `path` may be `~`, `-` or `..`. |
| `seek [-d\|-f] [-e] name [dir]` | Find files and directories below `dir` (default `.`; `~` and `-` allowed) whose names start with `name`, skipping hidden entries. `-d` shows only directories, `-f` only files; both together is rejected. With `-e` and exactly one match, hop into the directory or print the file. |
| `log` | Show the stored history, numbered from the oldest. |
| `log execute N` | Run entry `N` of the history again (it is not stored again). |
| `log purge` | Clear the history and its file. |
| `proclore [pid]` | Show pid, status (`+` when in the terminal's foreground group), process group, virtual memory and executable path of a process; the shell itself by default. |
| `activities` | List background jobs sorted by command, each as `Running` or `Stopped` (or `Unknown` when it can no longer be read). |
| `ping pid signal` | Send a signal number to a tracked background job. |
| `fg pid` | Give the terminal to a tracked background job, resume it and wait for it. |
| `bg pid` | Resume a tracked job that is stopped. |
| `iMan topic` | Fetch the manual page for `topic` over HTTP from `man.he.net` and print it from `NAME` on, with HTML tags removed. |
| `neonate -n secs` | Print the highest process id every `secs` seconds (a whole, non-negative number) until `x` is pressed or input ends. |

## Command lines

- `;` separates commands.
- A command followed by `&` runs under `/bin/bash -c` in the background;
  its pid is printed. Text after the last `&` of a segment is ignored. Before
  each prompt the shell reports jobs that have ended as
  `<command> exited normally (<pid>)` or `exited abnormally`. At most 100
  jobs are tracked.
- `> file` writes the output to `file`, `>> file` appends to it.
- `< file` appends the contents of `file` to the command's arguments
  (except for `proclore`, which ignores it); it may be combined with `>` or
  `>>`.
- `|` joins commands into a pipeline. The stages run one after another; the
  output of each becomes the standard input of the next.
- Ctrl-C interrupts the foreground job. Ctrl-Z stops it and adds it to the
  background jobs as `Stopped`.

Arguments are split on whitespace only: there is no quoting, no wildcard
expansion and no variable expansion.

## History

Commands are kept in `logcommands.txt` in the home directory, and the last
15 are loaded at start-up. A command equal to the one stored just before it
is not stored again, and lines containing `log` are not stored at all.

## Aliases

At start-up the shell reads `myshrc.txt` from the current directory. Each
line with an `=` defines an alias, with or without a leading `alias`:

```
alias ll = reveal -l
la=reveal -a   # a comment
```

`#` starts a comment. The first definition of a name wins, and at most 100
definitions are read. An alias is replaced by its whole command; arguments
typed after the alias name are not passed on.

## Using it from Python

The pieces can be used on their own:

- `cshell.state.ShellState` holds the home and current directories, the
  user, the history, the aliases and the jobs; `cshell.shell.Shell(state)`
  runs lines against it with `handle_line`, `tokenize` and `execute`, and
  `run` starts the interactive loop.
- `cshell.history.History(path, size)` keeps and stores the history
  (`add`, `entries`, `format`, `get`, `purge`, `load`).
- `cshell.bgqueue.BackgroundQueue` is the bounded job queue; `enqueue`
  raises `BackgroundQueueFull` when it is full.
- `cshell.aliases.load_aliases(path)` reads an alias file into a dict.
- `cshell.display.format_prompt` builds a prompt string.
- `cshell.reveal`, `cshell.seek`, `cshell.proclore`, `cshell.iman` and
  `cshell.neonate` offer helpers such as `list_entries`, `format_mode`,
  `search`, `parse_stat`, `read_process_info`, `strip_tags`,
  `build_request` and `most_recent_pid`.

## Running the tests

```
pip install .[test]
pytest
```