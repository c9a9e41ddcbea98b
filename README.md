# starterkit

A set of small, self-contained console programs. Each one does a single job.
Its logic can also be imported and used as a library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

Every command reads its input from standard input, except
`starterkit-wordcount`, which takes a file path. The to-do list also
accepts `--file PATH`.

| Command | What it does |
|---|---|
| `starterkit-timer` | Reads `hours minutes seconds` and counts down to zero. It prints the time left each second as `HH:MM:SS`. |
| `starterkit-bmi` | Asks for weight (kg) and height (m). It prints the BMI to two decimals and its category: underweight, normal weight, overweight or Obesity. |
| `starterkit-fibonacci` | Asks for a number of terms and prints that many Fibonacci numbers, starting `0, 1`. |
| `starterkit-guess` | Number-guessing game between 1 and 100. It counts your attempts and offers another round (`y` to continue). |
| `starterkit-palindrome` | Checks whether a line reads the same backwards. Non-alphanumeric characters are dropped first. The comparison is case-sensitive. |
| `starterkit-prime` | Tells whether an integer greater than 1 is prime. |
| `starterkit-rps` | Rock-paper-scissor against a random computer choice. Enter `rock`, `paper`, `scissor`, or `quit` to stop. |
| `starterkit-calc` | Reads one expression of three tokens, `number operator number`, with `+`, `-`, `*`, `/` or `%`. Both operands are taken from the first number. The third token only has to be present. |
| `starterkit-temperature` | Menu of four conversions: 1 °C→°F, 2 °F→°C, 3 K→°C, 4 °C→K. |
| `starterkit-todo` | A menu-driven to-do list. It is saved as JSON to `tasks.json`, or to the `--file` path, when you choose Exit. |
| `starterkit-wordcount FILE` | Prints the word, character and line counts of a UTF-8 file. |

## Using the library

```python
from starterkit.fibonacci import generate_fibonacci
from starterkit.primes import is_prime
from starterkit.bmi import calculate_bmi, classify_bmi
from starterkit.wordcount import count_words, count_chars, count_lines
from starterkit.temperature import Conversion, celsius_to_fahrenheit
from starterkit.calculator import evaluate, CalculatorError

generate_fibonacci(6)                  # [0, 1, 1, 2, 3, 5]
is_prime(97)                           # True
classify_bmi(calculate_bmi(70, 1.75))  # 'normal weight'
count_words("one two three")           # 3
celsius_to_fahrenheit(100.0)           # 212.0
Conversion(4).convert(0.0)             # 273.15
evaluate("5 + 3")                      # 10.0 (the first number is used twice)
```

Errors are raised, not printed:

- `calculate_bmi` raises `ValueError` for a zero height.
- `generate_fibonacci` raises `OverflowError` once a term no longer fits in 64 unsigned bits.
- `evaluate` raises `CalculatorError` for a malformed expression or an unknown operator.
- `divide` raises `ZeroDivisionError`.

Other building blocks:

- `starterkit.timer`: `parse_duration`, `total_seconds`, `format_remaining`, `countdown` (a generator of remaining seconds) and `run_countdown`. `run_countdown` accepts a custom `sleep` function and output `stream`.
- `starterkit.guessing`: `parse_guess`, `compare_guess` (returns a `Comparison`), `new_secret`, `play_round` and `wants_replay`. `play_round` takes `read_line` and `write` callables and returns the number of attempts.
- `starterkit.rps`: `parse_choice`, `computer_choice` and `determine_winner`. `determine_winner` returns a `GameResult` whose value is the message shown.
- `starterkit.palindrome`: `clean_string` and `is_palindrome`.

The to-do list can be driven directly:

```python
from starterkit.todo import TodoList, format_task, load_tasks, save_tasks

todo = TodoList(load_tasks("tasks.json"))
task = todo.add("write the report")
todo.mark_complete(task.id)
for item in todo:
    print(format_task(item))
save_tasks(todo, "tasks.json")
```

A new task's id is the list length after adding. `mark_complete` and `delete`
raise `KeyError` for an unknown id. `load_tasks` returns an empty list when the
file is missing or not valid.

## What it does not do

- The timer cannot be paused or resumed.
- The calculator evaluates one expression per run.
- The rock-paper-scissor game keeps no score.
- The to-do list writes its file only on Exit. Ending input early discards changes.