# tricolumn

Pieces of a three-column (parent / current / preview) terminal file manager,
written as a plain library. Widgets draw onto an in-memory character grid, so
everything can be used and inspected without a terminal.

## Installation

```
pip install tricolumn
```

To run the tests:

```
pip install "tricolumn[test]"
pytest
```

## Modules

- `tricolumn.format`: `file_size_to_string` gives human-readable sizes with
  the units `B`, `K`, `M`, `G`, `T`, `E` (powers of 1024). `mtime_to_string`
  formats a timestamp or `datetime` as `YYYY-MM-DD HH:MM` in UTC.
- `tricolumn.name_resolution`: `rename_filename_conflict(path)` returns the
  path itself if it does not exist. Otherwise it returns the first free name
  out of `name_0`, `name_1`, and so on.
- `tricolumn.io_worker`: copy and move jobs. An `IoWorkerThread` has a `FileOp`
  (`COPY` or `CUT`), source `paths`, a `dest` directory and `IoWorkerOptions`.
  `start(report)` first counts the files and bytes. It then copies or moves
  each path and calls `report` with `IoWorkerProgress` snapshots. It returns
  the final progress. `recursive_copy` and `recursive_cut` do the work. Both
  handle directories, regular files and symlinks. Name clashes are resolved
  with `rename_filename_conflict`. A move that cannot be a rename falls back to
  copy-then-delete.
- `tricolumn.io_observer`: `IoWorkerObserver` holds a job's thread, its latest
  progress and a status message such as
  `Copying (1/3) (1.50 K/4.00 K) completed`.
- `tricolumn.unix`:
  - `mode_to_string(0o100644)` gives `-rw-r--r--`.
  - `is_executable` checks the user, group and other execute bits.
  - `set_mode` calls `chmod` and returns whether it worked.
- `tricolumn.select`: `SelectOption` (toggle / all / reverse).
- `tricolumn.sort`:
  - `SortType` is one of lexical, mtime, natural or size. `SortType.parse` returns `None` for unknown names.
  - `SortOption.compare` supports directories-first, case sensitivity and reversal.
  - `natural_compare` orders digit runs by value, so `file2` comes before `file10`.
- `tricolumn.display`: `DisplayOption` holds the display settings and the
  column ratio (default `1:3:4`). It derives `default_layout` and
  `no_preview_layout` as `Ratio` triples. `filter_func` returns `no_filter` or
  `filter_hidden`, depending on `show_hidden`.
- `tricolumn.keys`:
  - `Key` (with `KeyKind`), `MouseEvent` and `UnsupportedEvent` model input events.
  - `event_to_string` gives their key-map names, such as `ctrl+a`, `arrow_up` and `f5`.
- `tricolumn.events`: `Events` is a queue of `AppEvent`s.
  - Terminal input comes from any iterable, read on a background thread, one event ahead.
  - The next input event is read only after `flush()`.
  - Other producers add events with `send`, and the main loop takes them with `next(timeout)`.
  - Resize signals are optional (`watch_resize=True`).
- `tricolumn.search`: `SearchPattern` matches a substring, or
  `SearchPattern.glob(...)` matches a whole name. Globs support `*`, `?`,
  `[...]`, `{a,b}` and backslash escapes.
- `tricolumn.multiline`: `MultilineText` wraps a line to a width, measuring
  characters by display width. It has `lines()` and `height()`.
- `tricolumn.line_editor`: `LineBuffer` is a one-line editing buffer.
  - `complete_path` completes file names.
  - `CompletionTracker` cycles through the candidates.
  - `cursor_position` places the cursor for a prompt wrapped at the bottom of the screen.
- `tricolumn.canvas`: `Rect` and `Canvas`, a grid of symbols and style sets.
  Write to it with `set_string` / `set_stringn` and read it back with `row(y)`.
- Widgets that draw onto a `Canvas`:
  - `dirlist.render_dirlist` and `dirlist_detailed.render_dirlist_detailed` draw the page of a `ListView` (made of `ListEntry` items) that holds the cursor. The detailed view adds file sizes and `->` for links.
  - `menu.render_menu` draws a bordered list of options.
  - `worker_view.render_worker` draws the job progress screen and the queue.
- Text helpers:
  - `footer.footer_text` gives mode, position, mtime and size.
  - `topbar.topbar_text` gives `user@host path`, with the home directory shown as `~`.
  - `tab_bar.tab_label` gives `1/3: name`.
- `tricolumn.devicons`: `icon_for(name, is_dir)` returns a Nerd Font glyph. It
  tries an exact name match first, then the file extension.

## Example

```python
from pathlib import Path

from tricolumn.canvas import Canvas, Rect
from tricolumn.dirlist import ListEntry, ListView, render_dirlist
from tricolumn.format import file_size_to_string
from tricolumn.io_worker import FileOp, IoWorkerOptions, IoWorkerThread

job = IoWorkerThread(FileOp.COPY, [Path("notes.txt")], Path("backup"), IoWorkerOptions())
final = job.start(lambda progress: print(progress.files_processed, "/", progress.total_files))
print(file_size_to_string(final.bytes_processed))

canvas = Canvas(20, 3)
listing = ListView([ListEntry("notes.txt"), ListEntry("todo.md")], index=0)
render_dirlist(canvas, Rect(0, 0, 20, 3), listing)
print(canvas.row(0))
```

## What it does not do

- There is no program to run. The package has no command, no terminal backend,
  no main event loop and no key-map or configuration loading.
- Tabs, directory history and reading directories into a `ListView` are left
  to the caller.
- Widgets only fill a `Canvas`. Putting it on a screen is up to you.
- `IoWorkerOptions.overwrite` and `skip_exist` are stored and printed, but the
  copy and move jobs do not consult them. Existing names are always resolved by
  renaming.