# rustlings

Helpers for working with a folder of small Rust exercises, plus worked
solutions to many of those exercises written in Python.

## Installing

```
pip install .
```

## rust-analyzer project file

`rustlings.project.RustAnalyzerProject` builds a `rust-project.json` so that
rust-analyzer treats every exercise file as its own crate:

```python
from rustlings.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()      # RUST_SRC_PATH, or derived from `rustc --print sysroot`
project.exercises_to_json()    # one Crate per .rs file below ./exercises
project.write_to_disk()        # writes ./rust-project.json
```

- `get_sysroot_src()` uses `RUST_SRC_PATH` if it is set; otherwise it runs
  `rustc --print sysroot`, prints the toolchain it found and points at
  `<sysroot>/lib/rustlib/src/rust/library`.
- `exercises_to_json(root)` walks `root` (default `./exercises`) in sorted
  order and calls `add_path` on each entry.
- `add_path(path)` adds a `Crate` only for files ending in `.rs`. Each crate
  has edition `2021`, no dependencies and the `test` cfg, so rust-analyzer
  also works inside `#[test]` blocks.
- `to_json()` returns the compact JSON text; `write_to_disk(path)` writes it
  (default `./rust-project.json`).

## Status lines

`rustlings.ui.warn(message)` prints a red warning line and
`rustlings.ui.success(message)` a green success line, both through `rich`.
Set `NO_EMOJI` in the environment to get `!` and `✓` instead of emoji
markers.

## Worked solutions

The `rustlings.drills` package holds Python solutions to the exercises:

- `basics` — `sale_price`, `is_even`, `square`, `bigger`, `foo_if_fizz`,
  `animal_habitat`, `vec_loop`, `vec_map`, `is_a_color_word`, `trim_me`,
  `compose_me`, `replace_me`.
- `quizzes` — `calculate_price_of_apples`; `transformer` applying
  `Uppercase`, `Trim` and `Append(times)` commands; `ReportCard.render()`.
- `structs` — `Package` (raises `ValueError` below 10 grams) with
  `is_international` and `get_fees`; `ProgramState.process` driven by
  `ChangeColor`, `Echo`, `Move` and `Quit` messages.
- `hashmaps` — `fruit_basket`, `fill_fruit_basket` over the `Fruit` enum,
  and `build_scores_table` returning a `Team` per name.
- `errors` — `maybe_icecream`, `generate_nametag_text`, `total_cost`,
  `PositiveNonzeroInteger` and `parse_pos_nonzero`, which raises
  `ParsePosNonzeroError` carrying either a `CreationError` or a parse error.
- `traits` — `append_bar` for strings and lists, `Licensed`,
  `SomeSoftware`, `OtherSoftware` and `compare_license_types`.
- `iterators` — `capitalize_first`, `capitalize_words_vector`,
  `capitalize_words_string`, `divide` with `DivideByZeroError` and
  `NotDivisibleError`, `result_with_list`, `list_of_results`, `factorial`,
  and the `Progress` counting functions.
- `person` — `person_from_text`, which falls back to `Person.default()`
  (John, 30), and `parse_person`, which raises `ParsePersonError`.
- `wrappers` — `Wrapper`, the `Cons`/`Nil` list, and `Cow` with `abs_all`,
  which copies borrowed data only when a value has to change.

```python
from rustlings.drills.iterators import divide, factorial

divide(81, 9)   # 9
factorial(4)    # 24
```

## What it does not do

There is no `rustlings` command. The package does not read an `info.toml`,
compile, run or test exercises, track which ones are done, watch files for
changes, list exercises or show hints. It writes the rust-analyzer project
file and offers the helpers and solutions above.

## Tests

```
pip install .[test]
pytest
```