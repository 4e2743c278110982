# gadgetry

These are small helpers for cleaning up ebook (X)HTML content and rewriting epub (zip) archives. The package also checks arguments for git submodule and image-processing workflows. It uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Ebook text linting

### `gadgetry.broken_lines.get_potentially_broken_lines(file_content)`

This function looks for `<p>` lines that seem to be one paragraph split across several lines. It covers three cases:

- A paragraph that ends in a letter, digit, comma, `%`, a dash, or an abbreviation such as `Mr.` or `Mt.`.
- A paragraph with an odd number of double quotes. It follows at most 10 lines.
- A paragraph that starts with a lowercase letter.

The function returns a dict. Each key is an original run of lines and its value is the suggested merged paragraph. When the previous line has no closing `</p>`, it logs a warning through `logging` and skips the case.

### `gadgetry.subordinate_clauses.get_potentially_lacking_subordinate_clause_instances(file_content)`

This function finds paragraph lines such as "Although …, but …". It matches `although`, `because` or `while`, followed by `, but`, `thus`, `therefore`, `furthermore` or `however`. It returns a dict that maps each line to the same line with the extra conjunction removed.

### `gadgetry.common_strings.common_string_replace(text)`

This function makes these changes:

- It collapses runs of spaces between words to a single space. It leaves a run alone when it follows a newline or a tab, or when it comes before `<` or a newline.
- It replaces the literal entries in `COMMON_REPLACE_WORDS`, a tuple of `ReplaceWords(search, replace, rationale)`:
  - smart quotes become straight quotes;
  - `...` becomes `…`;
  - `sneaked`/`Sneaked` becomes `snuck`/`Snuck`.
- It turns `--` into an em dash. It does not do this when the `--` follows `!` or comes before `>`, as in HTML comment markers.

### `gadgetry.language.ensure_language_is_set(text, lang)`

This function gives the first `<html` element `lang` and `xml:lang` attributes. It adds an attribute that is missing and fills one that is empty or blank. Attributes that already have a value are kept.

### `gadgetry.text_replacements.parse_text_replacements(text)`

This function reads a two-column Markdown table into a dict of text to replace mapped to its replacement.

- It skips the header and divider lines.
- It ignores lines without a `|`.
- It trims spaces from each cell.
- It raises `ReplacementParseError` (a `ValueError`) for a row that does not have exactly three `|`.

```python
from gadgetry.common_strings import common_string_replace
from gadgetry.language import ensure_language_is_set

common_string_replace("-- test --")                      # '— test —'
ensure_language_is_set('<html lang="en"></html>', "en")
# '<html lang="en" xml:lang="en"></html>'
```

## Epub archives

`gadgetry.zip_update.update_zip(src, operation)` rebuilds a zip archive. It works in these steps:

1. It writes the new archive to `<src>.temp`.
2. It writes the `mimetype` entry first, uncompressed.
3. It calls `operation(contents, writer)`. `contents` maps entry names to bytes and `writer` is the open `zipfile.ZipFile`. The operation writes whatever it changes and returns the names it wrote.
4. It copies every other entry over with deflate compression.
5. It renames the old archive to `<src>.original` and moves the new one into place.

Failures to read, write or rename raise `ZipUpdateError`.

## Git submodule helpers

`gadgetry.submodule_args` provides these functions:

- `validate_submodule_create(ticket_abbreviation, branch_name, repo_folder_path, submodule_name, branch_prefix)` checks the arguments for a create run.
- `validate_submodule_update(branch_name, repo_folder_path, submodule_name)` checks the arguments for an update run.
- `get_pull_request_link(push_output)` returns the first `https:` link in `git push` output, or `""` when there is none.

Both validation functions raise `ValidationError` (a `ValueError`) for the first blank argument. The error messages are the `*_ARG_EMPTY` constants.

## Image processing arguments

`gadgetry.image_args` provides these functions:

- `validate_jp_proc_flags(file)` accepts only paths that end in `.jpg`, `.jpeg` or `.png`. It raises `ImageArgError` for a blank or other path.
- `output_path(file, overwrite)` returns `file` itself when `overwrite` is true. Otherwise it returns a sibling such as `photo.test.jpg`.

`DEFAULT_QUALITY` is 75.

## What this package does not do

The package has no command-line programs. It does not run git, switch branches, commit or push. It does not resize images, re-encode them or strip EXIF data. It only provides the checks and text helpers described above, for use from your own code.