# d2modgen

Building blocks for tools that generate Diablo II mods. The package uses only
the Python standard library and needs Python 3.10 or later.

## Installation

```
pip install d2modgen
```

To run the tests, install the `test` extra and run `pytest`:

```
pip install "d2modgen[test]"
pytest
```

## Modules

| Module | Purpose |
| --- | --- |
| `d2modgen.common_types` | `StorageType` and `ConflictPolicy` enums, the `GenerationEnvironment` record (its `seed` is kept to 32 unsigned bits), `to_lower` (ASCII letters only) and `map_value`. |
| `d2modgen.fileio` | `read_file`, `write_file` (text is written as UTF-8), `create_directories`, `create_directories_for_file` and `ensure_trailing_slash`. |
| `d2modgen.csv_format` | Game `.txt` tables: `read_csv` parses tab-separated text into a `Table` (`columns`, `rows`), accepting CR, LF or CR LF line endings and raising `ValueError` on empty input; `write_csv` renders a `Table` with CR LF endings. |
| `d2modgen.json_format` | `read_json` parses a document whose top level is an object or array (a leading UTF-8 BOM is ignored; other input raises `ValueError`); `write_json` writes compact JSON and raises `ValueError` for `None`. |
| `d2modgen.colors` | In-game text colours: `Color`, `ColorDesc`, `get_color_desc`, `replace_colors_to_user` (codes to `\{name}` markers) and `replace_colors_to_binary` (markers back to codes). |
| `d2modgen.attribute_kinds` | `AttributeFlag`, `AttributeItemReq`, `AttributeConsume` and the frozen `AttributeDesc` with `has_flag`. |
| `d2modgen.attribute_table` | `base_attributes()`, the built-in table of known item attribute codes. |
| `d2modgen.attributes` | `all_attributes`, `get_attribute_consume`, `get_attribute_desc` (raises `KeyError` for unknown codes), `is_min_max_range`, and `UniqueAttributeChecker`. |
| `d2modgen.logger` | `Logger`, `LogLevel`, the `StreamLoggerBackend` and `FileLoggerBackend` backends, `set_logger_backend`, `is_log_level_enabled` and `format_binary`. |
| `d2modgen.chrono` | `ChronoPoint`, a moment or interval in microseconds, and the calendar helpers `days_from_civil`, `civil_from_days` and `weekday_from_days`. |

## Examples

Round-tripping a table:

```python
from d2modgen.csv_format import read_csv, write_csv

text = "code\tname\r\nab\tAlpha\r\n"
table = read_csv(text)
assert table.columns == ["code", "name"]
assert table.rows == [["ab", "Alpha"]]
assert write_csv(table) == text
```

Colour codes:

```python
from d2modgen.colors import Color, get_color_desc, replace_colors_to_binary, replace_colors_to_user

red = get_color_desc(Color.red).full_binary_code
readable = replace_colors_to_user(red + "Hot!")
print(readable)  # \{red}Hot!
assert replace_colors_to_binary(readable) == red + "Hot!"
```

Item attributes:

```python
from d2modgen.attributes import UniqueAttributeChecker, get_attribute_consume, is_min_max_range
from d2modgen.attribute_kinds import AttributeConsume

assert get_attribute_consume("*comment") is AttributeConsume.SKIP
assert is_min_max_range("str")
assert not is_min_max_range("hp/lvl")

checker = UniqueAttributeChecker()
checker.add("swing1")
assert "swing3" in checker  # tiered attack-speed codes count as one
```

Logging:

```python
from d2modgen.logger import Logger, LogLevel

with Logger(LogLevel.INFO) as log:
    log.write("generation started, seed=", 42)
```

By default messages go to standard output with a timestamp and level prefix;
install another backend with `set_logger_backend`, for example a
`FileLoggerBackend("modgen.log")`.

Time points:

```python
from d2modgen.chrono import ChronoPoint

point = ChronoPoint.from_seconds(3725.5)
print(point.to_string())  # 01:02:05.500
```

## What this package does not do

There is no command-line program and no generation pipeline here. The package
does not open game archives or installation folders, does not load plugins and
does not write a finished mod to disk; `StorageType`, `ConflictPolicy` and
`GenerationEnvironment` only describe such settings for code built on top of
these modules.