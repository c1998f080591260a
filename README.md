# trialkit

Small building blocks for parsing the eligibility criteria of clinical
studies: string sets, tuple helpers, a wildcard-aware trie, text
normalization and loaders for delimited files.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `trialkit.stringset` – `StringSet`, a `set` subclass with `add_all`,
  `remove_item` (returns whether the item was present), `get_any`,
  `intersection_size`, `union_size`, `jaccard` and `sorted_items`;
  `str()` gives the sorted items joined by `", "`.
- `trialkit.tuples` – `ceil_div`, `format_tuple` (tab-joined),
  `sort_tuples` (lexicographic), `shuffle_tuples` (in place) and
  `split_folds`, which shuffles and splits into `n` near-equal folds.
- `trialkit.slices` – helpers for lists of strings: `trim_space`,
  `remove_empty`, `dedupe`, `to_int_set`, `int_set_to_strings`, and
  `set_to_list`, which sorts numerically when every value is an integer.
- `trialkit.timer` – `Timer`, whose `elapsed()` reports the time since
  creation as `HH:MM:SS.sss`; `print_elapsed()` writes it to standard output.
- `trialkit.trie` – `Trie` with `put`, `get`, `contains`, `match` and
  `autocomplete`. A `*` in a stored key matches any characters up to the
  next space. Values are `TrieValue(name, val)`.
- `trialkit.text` – text normalization and splitting: `normalize_text`,
  `normalize_whitespace`, `strip_ctl_and_ext`, `split_whitespace`,
  `split_slash`, `customize_slash`, `split_sentence`, `to_name`,
  `is_number`, `is_yes_no`, `join`, `letter_prefix`, `titles`,
  `normalize_scientific_multiplier`, `is_roman_numeral` and
  `roman_to_arabic`.
- `trialkit.fio` – `load_list`, `load_set`, `load_map` and `load_tuples`
  for delimited files, `open_writer`, and file-name expansion with
  `files` and `read_fnames`.

## Examples

```python
from trialkit.trie import Trie

units = Trie()
units.put("kg/m2", "kg/m²")
units.put("E", "1234*")
units.contains("kg/m²")    # True
units.get("12345")         # TrieValue(name='E', val='1234*')
units.get("123")           # None
```

```python
from trialkit.text import normalize_text, split_sentence, customize_slash

normalize_text("Somewhere. - \"Here\" \n\nit's sunny.!")
# 'somewhere here its sunny'
split_sentence("Somewhere here...  Its sunny! See you there.")
# ['Somewhere here', 'Its sunny', 'See you there', '']
customize_slash("a /b")
# ['a/b', 'a / b', 'a/ b', 'a /b']
```

```python
from trialkit.stringset import StringSet
from trialkit.slices import set_to_list

s1 = StringSet(["a", "b"])
s1.intersection_size(StringSet(["b", "c"]))   # 1
s1.union_size(StringSet(["b", "c"]))          # 3
set_to_list({"21", "3", "5", "12"})           # ['3', '5', '12', '21']
```

```python
from trialkit.fio import read_fnames

read_fnames("data/a.txt; b.txt")   # ['data/a.txt', 'data/b.txt']
```

## What it does not do

The package is a library only. It has no command-line program, no
vocabulary matching or similarity hashing of terms, and no loader for
configuration files; those are left to the code that uses it.