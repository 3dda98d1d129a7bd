# exercisekit

Building blocks for a course made of short programming exercises: coloured
status messages for the terminal, a generator for the project file a language
server reads, and worked solutions to many of the course's exercises.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Terminal messages: `exercisekit.ui`

- `warn(message)` prints the message in red after a warning sign.
- `success(message)` prints the message in green after a check mark.
- `no_emoji()` is true when the `NO_EMOJI` environment variable is set; the two
  functions above then use the plain symbols `!` and `✓` instead of emoji.

```python
from exercisekit.ui import success, warn

success("Successfully ran exercises/if/if1.rs")
warn("Compiling of exercises/if/if2.rs failed!")
```

## Language-server project file: `exercisekit.project`

`RustAnalyzerProject` describes a `rust-project.json` file. It holds the path of
the standard library sources (`sysroot_src`) and a list of `Crate` entries, one
per exercise file, each with edition `2021`, no dependencies and the `test`
cfg enabled.

```python
from exercisekit.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()            # RUST_SRC_PATH, or asks `rustc --print sysroot`
project.exercises_to_json("exercises")
if project.crates:
    project.write_to_disk()          # ./rust-project.json by default
```

- `add_path(path)` adds a crate when the text after the first `.` in the path is
  exactly `rs`.
- `exercises_to_json(root)` walks every file below `root` in sorted order and
  calls `add_path` for each.
- `to_json()` returns the compact JSON text; `write_to_disk(path)` writes it.
- `get_sysroot_src()` prints the toolchain it determined when it has to ask the
  compiler.

## Worked solutions: `exercisekit.lessons`

| Module | Contents |
| --- | --- |
| `lessons.basics` | `bigger`, `foo_if_fizz`, `is_even`, `sale_price`, `square`, `is_a_color_word`, `trim_me`, `compose_me`, `replace_me`, `maybe_icecream` |
| `lessons.quizzes` | `calculate_price_of_apples`; `transformer` with `Command.UPPERCASE`, `Command.TRIM` and `Append(times)`; `ReportCard` with numeric or letter grades |
| `lessons.vecs` | `array_and_vec`, `vec_loop`, `vec_map` |
| `lessons.errors` | `generate_nametag_text`, `total_cost`, `spend_tokens`, `PositiveNonzeroInteger` with `CreationError`, `parse_pos_nonzero` with `ParsePosNonzeroError` |
| `lessons.iterators` | `capitalize_first`, `capitalize_words_vector`, `capitalize_words_string`, `divide` with `NotDivisibleError` and `DivideByZeroError`, `result_with_list`, `list_of_results`, `factorial`, `Progress`, `count_iterator`, `count_collection_iterator` |
| `lessons.hashmaps` | `fruit_basket`, `Fruit`, `fill_fruit_basket`, `Team`, `build_scores_table` |
| `lessons.structures` | `Order`, `create_order_template`, `Package`, `Point`, the messages `Move`, `Echo`, `ChangeColor`, `Quit` and the `State` that processes them, `append_bar`, `Licensed`, `SomeSoftware`, `OtherSoftware`, `compare_license_types`, `Wrapper`, `Cons`, `create_empty_list`, `create_non_empty_list`, `abs_all` |

Failures are raised as exceptions rather than returned:

```python
from exercisekit.lessons.errors import parse_pos_nonzero, ParsePosNonzeroError
from exercisekit.lessons.iterators import divide, list_of_results
from exercisekit.lessons.quizzes import calculate_price_of_apples

calculate_price_of_apples(41)   # 41
divide(81, 9)                   # 9
list_of_results()               # [1, 11, 1426, 3]

try:
    parse_pos_nonzero("-555")
except ParsePosNonzeroError as exc:
    print(exc.creation.kind)    # CreationErrorKind.NEGATIVE
```

## What this package does not do

There is no command-line program. The package does not read a course's
`info.toml`, does not compile, run or test exercise files, does not detect the
`I AM NOT DONE` marker, has no watch mode, no progress listing, no hints and
no reset of an exercise. It offers the message helpers, the project-file
generator and the lesson solutions described above, for use from Python code.