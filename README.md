# cryptoinfo

A library for tracking crypto prices and keeping personal bookkeeping
records. It provides a coin price list that refreshes itself in the
background and remembers which coins you marked and the floor prices you
set, plus list models for a fund book, a trade hand book, bookmarks,
contract statistics and Markdown notes. Everything is stored in plain JSON
and Markdown files.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## List models

Every model derives from `cryptoinfo.listmodel.ListModel`, an ordered list
that reports changes through `Signal` objects (`count_changed`, `updated`,
`data_changed`, `rows_inserted`, `rows_removed`, `model_reset`). Connect a
callable with `Signal.connect`; `Signal.emit` calls every connected slot in
order.

`ListModel` offers `append`, `set`, `set_all`, `insert_rows`, `remove_rows`,
`swap_row`, `up_row`, `down_row`, `clear`, `items_changed`, `item`,
`item_list`, `items`, `is_empty`, `len()`, iteration and indexing. Row
operations given an out-of-range position leave the model unchanged;
`item` returns a fresh default item when the index is out of range.

## Directories

`cryptoinfo.dirs.default_app_dirs("cryptoinfo")` returns an `AppDirs` with
the platform's per-user `config_dir` and `data_dir`; `AppDirs.create()`
makes them, together with `data_dir/addrbook` and `data_dir/notes`, and
returns whether all of them exist.

## Prices

`cryptoinfo.price.model.PriceModel(private_path, item_max_count=100,
update_interval=30)` holds the price list. Marks and floor prices are read
from `private_path` on construction and written back by `set_marked` and
`set_floor_price`.

- `start()` must be called inside a running asyncio event loop; it returns
  the background task that downloads the ticker and refreshes the list.
- `cache_items(text)` parses a ticker response (at most `item_max_count`
  entries) and updates `bull_percent`; `update_model()` shows the cached
  items and re-sorts them.
- `sort_by_key(key)` sorts by a `cryptoinfo.price.sort.SortKey` (marked,
  index, symbol, price, 24 h change, 7 d change, 24 h volume, floor price);
  `toggle_sort_dir()` flips the direction used by the next sort.
- `search_and_view_at_beginning(symbol)` swaps the matching coin to the top.
- `refresh()` requests an immediate download; `set_update_interval(seconds)`
  changes the period, never below 5 seconds; `set_url(limit)` changes how
  many coins are requested.

`cryptoinfo.price.data` has the record types (`PriceItem`, `Private`,
`Market`, `OtcQuote`) and the parsers `parse_raw_items`, `parse_privates`,
`parse_fear_greed`, `parse_market` and `parse_otc`, which raise
`ValueError` on malformed input.

`cryptoinfo.httpclient` has `http_get`, `http_post`, `common_headers` and
the background loops `download_timer`, `download_timer_pro` and `post`,
driven by `DownloadProvider` / `PostContentProvider` implementations.

## Tools

```python
from cryptoinfo.tool.fundbook import FundBookModel

book = FundBookModel("fundbook.json")
book.add_item("2024-01", 1000.0, 500.0, 200.0, 0.0)
book.add_item("2024-02", 100.0, 0.0, 50.0, 0.0)
book.up_join_item(1)   # add the second row into the first
print(book.stats())    # 1850, 1100,500,250,0
book.save()
```

- `cryptoinfo.tool.fundbook.FundBookModel` — holdings over time, merging of
  adjacent rows and totals (`"total, crypto,stock,saving,other"`).
- `cryptoinfo.tool.handbook.HandBookModel` — assets with their buy and sell
  records; `stats`, `pie_chart_stats` and `balance` give comma-separated
  figures; `up_join_sub_model_item` merges two trades of the same kind.
- `cryptoinfo.tool.bookmark.BookMarkModel` — named folders of links.
- `cryptoinfo.tool.contractstats.ContractStatsModel(path, translator=None)` —
  four win/lose categories (created afresh unless `path` holds exactly four)
  and their running total `win_lose_counts`.
- `cryptoinfo.tool.note.NoteModel(directory)` — Markdown notes, one
  `name.md` file each; call `load_names()` to list existing notes. Adding a
  name that is taken appends `-copy` until it is free.

The JSON-backed models read their file with `load()` and write it with
`save()`; a missing or malformed file loads nothing.

## Translation and utilities

`cryptoinfo.translator.Translator(use_chinese, lang_map)` returns text
unchanged when Chinese is in use, and otherwise looks it up in its map:

```python
from cryptoinfo.translator import Translator

tr = Translator(False, {"盈利小于100%": "Profit below 100%"})
tr.tr("盈利小于100%")   # "Profit below 100%"
```

`cryptoinfo.utility` formats times (`local_time_now`,
`utc_seconds_to_local_string` and `time_from_utc_seconds`, both in UTC+8),
moves, copies and removes files and directories, copies text to the
clipboard through tkinter when available, starts a program with
comma-separated arguments (`process_cmd`) and reports `app_version()`.

## What this package does not do

- It installs no command and has no window or user interface; it is used as
  a library.
- It does not read or write a settings file; intervals, item counts and the
  language are passed to the models by the caller.
- It keeps no address book and generates no QR codes.
- It does not follow market-wide indicators itself: `cryptoinfo.price.data`
  can parse fear & greed, market-total and OTC USDT responses, but no model
  downloads or holds them.