# fxconvert

A small command-line currency converter. It fetches exchange rates from an
exchange-rate HTTP service. Each rate it fetches is kept in a local JSON cache
file for ten minutes, so repeated conversions of the same currency pair do not
call the service again.

## Installation

```
pip install .
```

## Configuration

`fxconvert` reads three settings from the environment. If there is a `.env`
file in the current directory, it is loaded first. Variables that are already
set are not overridden. If there is no `.env` file, a warning is logged and the
program carries on.

| Variable     | Meaning                                                   |
|--------------|-----------------------------------------------------------|
| `API_KEY`    | Your key for the exchange-rate service                    |
| `BASE_URL`   | Base URL of the service; the key is appended as a path    |
| `CACHE_FILE` | Path of the JSON file that holds cached rates             |

Example `.env`:

```
API_KEY=placeholder
BASE_URL=https://api.example.com/v6
CACHE_FILE=rates_cache.json
```

If any of these variables is missing or empty, the program prints an error and
exits with status 1.

Requests have a five-second timeout. A rate is fetched from
`<BASE_URL>/<API_KEY>/pair/<FROM>/<TO>` and read from the `conversion_rate`
field of the JSON reply. The supported currencies are fetched from
`<BASE_URL>/<API_KEY>/codes` and read from the `supported_codes` field. Any
reply other than HTTP 200 is treated as an error.

## Usage

Convert an amount:

```
fxconvert --amount=100 --from=USD --to=EUR
```

```
Converted 100.00 USD to 92.31 EUR
```

List the currencies the service supports, one `CODE | Name` pair per line:

```
fxconvert --list
```

The `Supported Codes:` heading goes to standard error and the list goes to
standard output.

Skip the cached rate and fetch a fresh one. The new rate is then stored in the
cache:

```
fxconvert --amount=50 --from=GBP --to=JPY --refresh
```

The same command can be run as `python -m fxconvert.cli`.

### Options

Each option can be written with one dash or two, for example `-amount` or
`--amount`.

- `--amount` — amount to convert. It must be given and must not be zero,
  unless `--list` is used.
- `--from` — currency code to convert from. Required unless `--list` is used.
- `--to` — currency code to convert to. Required unless `--list` is used.
- `--list` — print the supported currency codes and exit. It also accepts a
  value, as in `--list=true` or `--list=false`.
- `--refresh` — ignore any cached rate and fetch a new one. It accepts a value
  in the same way as `--list`.

If the options are invalid, the program prints `zero value of currency` or
`empty string of currency converts` and exits with status 1. The same status is
used when the service cannot be reached, when it sends back an error, or when
the cache file cannot be read or written.

## Cache file

The cache is a JSON object keyed by `FROM_TO`, for example `USD_EUR`. Each
entry holds `currency`, which is the rate, and `expiration_date`, an RFC 3339
timestamp ten minutes after the rate was stored. An expired entry is removed
from the file when it is next looked up. If the cache file does not exist, it
is created empty.

## Library use

The same steps are available from Python:

```python
from fxconvert.api import LiveCurrencyAPI
from fxconvert.cache import FileCache
from fxconvert.cli import parse_args, run

args = parse_args(["--amount=100", "--from=USD", "--to=EUR"])
api = LiveCurrencyAPI("https://api.example.com/v6/placeholder")
run(api, args, FileCache("rates_cache.json"))
```

- `fxconvert.converter.convert(amount, rate)` multiplies an amount by a rate.
- `fxconvert.api.CurrencyAPI` is the abstract rate source. Subclass it and
  implement `get_pair_conversion(from_code, to_code)`, returning a
  `fxconvert.models.Conversion`, and `get_supported_codes()`, to supply rates
  from somewhere other than the live service.
- `fxconvert.cache.Cache` is the abstract cache. Subclass it and implement
  `get(key)` and `set(key, value)` to use something other than a file.
- `fxconvert.api.fetch_pair_conversion(url, from_code, to_code)` and
  `fetch_supported_codes(url)` call the service directly. Failures are raised
  as `ApiError`.

## What it does not do

`fxconvert` has no built-in rates. Converting a pair that is not in the cache,
or listing currencies, needs the HTTP service to be reachable. It does not
convert through an intermediate currency, and it does not keep a history of
rates beyond the ten-minute cache.

## Running the tests

```
pip install ".[test]"
pytest
```