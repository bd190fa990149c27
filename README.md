# tinyshell

Command handlers for a small command shell, and a handful of demo programs.
Each handler takes the list of argument tokens a shell would pass it and
prints its result or a usage message, so the pieces can be wired into a
command loop of your own or used directly from Python.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## What is in the package

| Module | Contents |
| --- | --- |
| `tinyshell.environment` | `EnvironmentManager`: get, set, unset, print and list variables; add to, remove from and test `PATH`; save variables to a file and load them back. It works on `os.environ` or on any mapping you pass in. |
| `tinyshell.expression` | `ExpressionEvaluator` for `+ - * /` with parentheses, where names are looked up through an `EnvironmentManager`; `infix_to_postfix`, `evaluate_postfix`; errors raise `ExpressionError`. |
| `tinyshell.conditional` | `parse_if_else` and `handle_if_else` for `( <a> <op> <b> ) : <command> else <command>`; bad syntax raises `ConditionalSyntaxError`. |
| `tinyshell.loop` | `split_commands` (split tokens at `&`) and `handle_loop` (`<n> <command> & <command> ...`); bad input raises `LoopError`. |
| `tinyshell.scheduler` | `schedule_command` for `<number> s <command> [args...]`, run on a daemon thread after the delay. |
| `tinyshell.base_conversion` | `convert_base`, `is_valid_number_for_base`, `handle_base_conversion` for bases 2 to 36. |
| `tinyshell.quadratic` | `solve_quadratic` returning a `QuadraticSolution`, and `handle_solve_quadratic`. |
| `tinyshell.files` | `FileManager`: write a line at the head, foot or a given line of a file; read a whole file page by page or its head, foot, a range or one line; size and line count; create, delete, copy, move, rename, check existence, show extensions, list files by extension; open a file with the system's default application. |
| `tinyshell.navigation` | `change_directory`, `list_directory_contents`, `print_working_directory`. |
| `tinyshell.processes` | `ProcessManager`: start programs in the foreground or background, list processes, find children, suspend, resume and terminate by PID, and start the bundled programs. |
| `tinyshell.history` | `CommandHistory`, kept in memory and appended to a file (`history.txt` by default). |
| `tinyshell.threads_demo` | `create_and_manage_threads`: threads sharing a counter behind a semaphore. |
| `tinyshell.net_speed` | `measure_speed`, `format_speed` and `show_net_speed` (runs until Ctrl+C). |
| `tinyshell.colors` | `ConsoleColor`, `parse_color`, `set_color`, `reset_color` using ANSI escapes. |
| `tinyshell.dancing` | `dance_frames` and `dancing`, a small text animation. |
| `tinyshell.help` | `help_text` and `show_help`, a table of command names and descriptions. |

## Examples

```python
from tinyshell.environment import EnvironmentManager
from tinyshell.expression import ExpressionEvaluator

env = EnvironmentManager({"X": "4"})
ExpressionEvaluator(env).evaluate(["(", "1", "+", "2", ")", "*", "X"])  # 12.0
```

```python
from tinyshell.base_conversion import convert_base
from tinyshell.quadratic import solve_quadratic
from tinyshell.loop import split_commands

convert_base("FF", 16, 2)            # '11111111'
solve_quadratic(1, -3, 2).roots      # (2.0, 1.0)
split_commands(["pwd", "&", "dir"])  # [['pwd'], ['dir']]
```

`handle_if_else`, `handle_loop` and `schedule_command` take an `execute`
callable, `execute(command, args)`, which they call to run the chosen command.

## Bundled programs

These can be run on their own, and `ProcessManager` starts some of them with
`python -m tinyshell.programs.<name>`:

```
tinyshell-counter 5
tinyshell-duck
tinyshell-tictactoe
tinyshell-producer-consumer 3 4 10 15
tinyshell-child
```

- `tinyshell-counter N` prints `Second 0.` to `Second N.`, two seconds apart.
- `tinyshell-duck` draws a duck swimming across the terminal until Ctrl+C.
- `tinyshell-tictactoe` is a two-player game; enter moves as `row column`.
- `tinyshell-producer-consumer` takes the number of producers, consumers,
  items per producer and the buffer size, defaulting to 2, 2, 5 and 10;
  `-h` shows the usage.
- `tinyshell-child` sleeps ten seconds and exits.

## What this package does not do

There is no interactive prompt and no command dispatcher: nothing reads lines,
splits them into tokens and routes them to the handlers above. There are also
no command aliases, no directory bookmarks, no directory create/copy/delete/move
or tree listing, no system time, uptime, CPU, memory, disk, OS or drive
information, no running of script files, and no random facts. `ProcessManager`
has no countdown window program to start.