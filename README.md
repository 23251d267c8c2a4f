# docsearch

A command-line tool and library for loading a corpus of plain-text and HTML
documents, cleaning their text, and searching them for exact patterns with the
Knuth–Morris–Pratt, Shift-And and Shift-Or algorithms. The program's messages
are in Spanish.

## Installation

```
pip install .
```

## Command line

```
docsearch help
docsearch load -i corpus/ -r -s
docsearch load -i corpus/ -o report.csv -f csv
docsearch search -i corpus/ -p "algoritmo"
docsearch search -i corpus/ -p "algoritmo" -o results.json -f json
```

Commands:

- `load` – reads every supported file (`.txt`, `.html`, `.htm`, `.csv`) in a
  directory, visiting entries in name order, and prints loading statistics.
  With `-s` it also prints a per-type summary and a preview of the first five
  documents. With `-o FILE` it writes a report to that file: plain text by
  default, or CSV / JSON with `-f csv` / `-f json`.
- `search` – finds every occurrence of the pattern given with `-p` in the
  cleaned text of each supported document, using KMP. Positions are byte
  offsets into the UTF-8 text. Without `-o` the matches (up to ten per
  document, with surrounding context) go to standard output; with `-o FILE`
  they are written to the file as text, CSV (`-f csv`) or JSON (`-f json`).
- `help` (or `--help`) – shows all options.

Useful options: `-r` to descend into subdirectories, `-t`/`-h` to load only
`.txt` or only `.html`/`.htm` files, and `-l N` to keep only the first N
loaded documents (the last two apply to `load`). Long options may be
abbreviated to any unambiguous prefix.

The exit status is 0 on success and 1 on errors (missing directory or
pattern, no documents loaded, unknown command or invalid option).

## Library

```python
from docsearch.kmp import kmp_search
from docsearch.shift_and import shift_and_search
from docsearch.shift_or import shift_or_search

results = kmp_search("abracadabra", "abra")
print(results.positions)             # [0, 7]
print(results.total_comparisons())   # comparisons counted up to the last match
```

All three searches accept `str` or `bytes`, return a
`docsearch.results.SearchResults`, and raise `ValueError` for an empty
pattern; Shift-And and Shift-Or also reject patterns longer than 63
symbols. `docsearch.shift_and.multi_pattern_shift_and_search` scans for
several patterns in one pass.

Other modules:

- `docsearch.normalizer` – `normalize_text(text, NormalizationConfig(...))`,
  `normalize_simple`, `to_lowercase`, `remove_accents`,
  `normalize_whitespace` and `normalize_punctuation`.
- `docsearch.trie.Trie` – word frequencies over UTF-8 bytes, `starts_with`,
  `words_with_prefix` and `depth`.
- `docsearch.hashtable.HashTable` – a fixed-capacity chained DJB2 table of
  integer counters; `insert` adds to an existing key.
- `docsearch.document_process` – `detect_document_type`,
  `extract_text_from_html`, `clean_text_content` and
  `detect_language_simple`.
- `docsearch.documents` – `load_document_from_file`,
  `load_document_from_string`, `load_documents_from_directory`,
  `load_documents_with_filter`, `load_documents_from_file_list`, the filters
  `filter_text_files_only`, `filter_html_files_only` and
  `filter_by_size_range`, and text reports of loading statistics and
  collections.
- `docsearch.preprocessing_stats` – `calculate_preprocessing_stats` compares
  an input text with its tokens and normalised form;
  `format_preprocessing_stats` renders the result.
- `docsearch.benchmark` – `generate_comparison_report` runs the three
  algorithms on the same input and `format_comparison_report` renders the
  comparison.

## What it does not do

- The `index` and `analyze` commands are listed in the help text but are not
  available: they print "Comando no disponible" and exit with status 1.
- The `benchmark` command does nothing; use `docsearch.benchmark` from Python
  instead.
- The options `-a/--algorithm`, `-v/--verbose`, `--approximate`,
  `--max-distance`, `--case-sensitive`, `--index-file`, `--rebuild-index`,
  `--trie`, `--hash`, `--top-words`, `--word-freq`, `--similarity`,
  `--min-size` and `--max-size` are accepted but have no effect on any
  command. Searches are always exact and case-sensitive.
- There is no tokenizer or stopword list, and no index is stored on disk.