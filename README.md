# yamwebs

Search several online stores for a product and collect the offers in one place.
Each store is described by a search URL pattern and a handful of CSS selectors
that say where the product name, price, image, link and (optionally)
description sit on the store's result page.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Command line

List the configured stores (`[x]` marks an enabled one):

```
yamwebs
```

Search every enabled store for a term:

```
yamwebs laptop
```

Each product found is printed as `name | price | store | url`, followed by a
summary line counting the stores that answered, the stores that failed and the
products found. A store that cannot be fetched or scraped is reported on
standard error and skipped.

Options:

- `--directory DIR`: directory holding the JSON files (default: the current
  directory).
- `--save`: write the products found to `search_results.json`.
- `--csv FILE`: export the products found as CSV to `FILE`, relative to the
  directory.

The command returns 1 if saving or exporting fails, 0 otherwise.

## Files

All files live in the chosen directory:

- `stores.json` holds the store configurations. If it is missing, it is
  created holding one sample store (`Ejemplo Store`). If it cannot be read or
  parsed, the sample store is used instead and the problem is reported on
  standard error.
- `config.json` holds general settings (`AppConfig`): `max_products_per_store`,
  `request_delay_ms`, `user_agent`, `auto_save_results` and `theme`. It is
  created with the defaults if missing; a malformed file yields the defaults.
- `search_results.json` holds the last saved products together with a UTC
  timestamp.

## Store configuration

A store entry in `stores.json` looks like this:

```json
{
  "name": "Ejemplo Store",
  "base_url": "https://ejemplo.com",
  "search_url_pattern": "{base_url}/search?q={query}",
  "product_container_selector": ".product-item",
  "name_selector": ".product-name",
  "price_selector": ".price",
  "image_selector": ".product-image img",
  "link_selector": "a",
  "description_selector": ".description",
  "enabled": true
}
```

`{base_url}` and `{query}` in the pattern are replaced by the store's base URL
and the search term. `StoreConfig.is_valid()` is true once a store has a name,
a base URL, and container, name and price selectors. Only enabled stores are
searched.

## Library use

```python
from yamwebs.store import StoreManager
from yamwebs.scraper import WebScraper
from yamwebs.search import SearchSession

manager = StoreManager.with_defaults()
session = SearchSession(WebScraper())
outcome = session.search("laptop", manager)
for product in outcome.products:
    print(product.name, product.price, product.numeric_price())
print(outcome.status, outcome.errors)
```

`SearchSession.search` raises `ValueError` for an empty term. `WebScraper`
raises `ScrapeError` when a page cannot be fetched, answers with a non-2xx
status, or the container selector is not a valid CSS selector.

A page that has already been fetched can be parsed without the network:

```python
from yamwebs.scraper import parse_products

products = parse_products(html_text, store, "https://ejemplo.com/search?q=laptop")
```

Relative links and image sources are resolved against the page URL
(`resolve_url`), and a product is only kept if both its name and price are
found. `Product.numeric_price()` reads the digits, dots and commas of the price
text as a number, commas counting as decimal points, and gives 0.0 when that
fails.

`yamwebs.selectors` offers `extract_text`, `extract_attribute`,
`extract_multiple_texts`, `validate_selector` and `suggest_selectors`; the
latter lists common selectors for an element type (`title`/`name`, `price`,
`image`, `link`, `description`, `container`).

`yamwebs.store_editor.StoreEditor` keeps a draft store: `select_store` copies an
existing one for editing, `apply_suggestion` fills a `SelectorField` with a
suggested selector, and `save`, `delete` and `cancel` commit or drop the draft.

`yamwebs.file_manager.FileManager` reads and writes the files above. It also
offers `load_search_results`, `export_to_csv` (every field quoted) and
`create_backup`, which copies `stores.json` to `stores_backup_<UTC time>.json`
and returns the new path. Write failures raise `StorageError`.

`yamwebs.results.ResultsView` keeps a selected product, saves results and
formats a product's details as lines of text.

## What it does not do

- There is no graphical interface; the package is a library plus the command
  line above. Stores are added or changed by editing `stores.json` or through
  `StoreEditor` and `FileManager.save_stores` in code.
- The settings in `config.json` are loaded but not applied: searches do not
  limit the products per store, wait between requests, or send the configured
  user agent, and results are saved only with `--save`.
- There is no tool for trying selectors against a live page.

## Library requirements

`requests` and `beautifulsoup4`, on Python 3.10 or later.