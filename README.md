# hishtory

Building blocks for a synced, searchable shell history. The package holds the
records that move between a history client and its backend, release version
parsing, and the pure logic behind an interactive history search: key
bindings, query-box text handling, results-table layout and result selection.
It depends only on the standard library.

## Installation

```
pip install .
```

For development and running the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `hishtory.data`

Dataclasses for the wire format: `EncHistoryEntry`, `DumpRequest`,
`UpdateInfo`, `MessageIdentifier`, `MessageIdentifiers`, `DeletionRequest`,
`Feedback` and `SubmitResponse`.

- `EncHistoryEntry`, `MessageIdentifier` and `DeletionRequest` have `to_dict()`
  and a `from_dict()` classmethod. Timestamps are written as RFC 3339 strings
  and byte fields as base64.
- `MessageIdentifiers.to_json()` returns UTF-8 JSON bytes.
  `MessageIdentifiers.from_json(value)` reads them back and raises `TypeError`
  if `value` is not bytes.
- `chunks(items, chunk_size)` splits a sequence into lists of at most
  `chunk_size` items. It raises `ValueError` for a size below 1.
- `DATE_ONLY` is the `strftime` format for a plain date.

### `hishtory.version`

`parse_version_string("v0.216")` returns a frozen `ParsedVersion(0, 216)`. It
raises `VersionParseError` unless the string holds exactly one `vMAJOR.MINOR`.
A `ParsedVersion` has these members:

- `less_than(other)` and `greater_than(other)` compare two versions.
- `decrement()` returns the previous minor version.
- `str()` gives the version back in the form `v0.216`.

### `hishtory.keybindings`

- `Binding` is a set of keys with help text. `matches(key)` tells whether a
  pressed key triggers it.
- `KeyMap` holds one binding per action. `short_help()` and `full_help()` give
  the rows shown in the help bar, and `to_serializable()` turns it into a
  `SerializableKeyMap`.
- `SerializableKeyMap` holds the key names as stored in a config file.
  `with_defaults()` fills every empty action from `DEFAULT_KEY_MAP`.
  `to_key_map()` builds the bindings and raises `ValueError` if an action has
  no keys.
- `prettify_key_binding(kb)` renders a key name with arrow symbols.

### `hishtory.querytext`

- `calculate_word_boundaries(text)` gives the cursor stops for jumping a word
  left or right.
- `sanitize_escape_codes(text)` removes terminal colour-query replies.
- `command_escaper(cmd)` quotes commands that contain newlines or tabs.
- `split_query_array(chunks)` splits the query on spaces.
- `build_initial_query_with_search_escaping(chunks)` joins the words, quoting
  those that start with `-`.

### `hishtory.layout`

- `calculate_column_widths(rows, num_columns)` gives the width of each column.
- `fit_column_widths(rows, column_names, maximum_rows, terminal_width)` grows
  or shrinks the columns so the table fits the terminal.
- `table_height(full_screen, terminal_height)` and
  `num_entries_needed(full_screen, terminal_height)` decide how many rows to
  show and how many entries to fetch.
- `is_compact_height(...)` and `is_extra_compact_height(...)` decide when to
  drop spacing lines and when to hide messages and help.

A `terminal_height` of `None` means the height is unknown.

### `hishtory.selection`

- `SelectStatus` says whether the user picked an entry, and whether to change
  into its directory.
- `QueryIdAllocator` keeps results from older asynchronous queries from
  overwriting newer ones. Use `allocate()` and `should_process(query_id)`.
- `build_selected_command(command, working_directory, status, home_dir)` gives
  the command line to hand back to the shell, with a `cd` prefix when asked
  for. It raises `ValueError` if nothing was selected.
- `highlight_chunks(value, pattern)` splits a cell into matching and
  non-matching chunks for highlighting.
- `filter_duplicate_commands(commands)` keeps only the first occurrence of
  each command.

## Example

```python
from hishtory.version import parse_version_string
from hishtory.querytext import calculate_word_boundaries
from hishtory.keybindings import DEFAULT_KEY_MAP

current = parse_version_string("v0.200")
latest = parse_version_string("v0.216")
assert current.less_than(latest)
print(str(latest))                               # v0.216

print(calculate_word_boundaries("foo-bar baz"))  # [0, 3, 7, 11]
print(DEFAULT_KEY_MAP.quit.matches("ctrl+c"))    # True
```

## What this package does not do

This package is a library of parts. It does not include:

- a command-line program;
- a terminal screen that draws the search interface;
- storage for history entries;
- a client for the sync backend, or a backend server;
- encryption of entries;
- a client for AI command suggestions;
- shell hooks that record commands as they run.

The types and functions above supply the data and decisions that such pieces
would use.