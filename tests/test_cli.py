import json

import pytest
import responses

from fxconvert.api import CurrencyAPI
from fxconvert.cache import Cache, FileCache
from fxconvert.cli import (
    UsageError,
    cache_key,
    main,
    parse_args,
    print_conversion_result,
    print_supported_codes,
    run,
)
from fxconvert.models import Args, Conversion

CODES = [["USD", "United States Dollar"], ["EUR", "Euro"]]


class _FakeAPI(CurrencyAPI):
    def __init__(self, codes, rate):
        self.codes = codes
        self.rate = rate
        self.pair_calls = []

    def get_pair_conversion(self, from_code, to_code):
        self.pair_calls.append((from_code, to_code))
        return Conversion(conversion_rate=self.rate)

    def get_supported_codes(self):
        return self.codes


class _MemoryCache(Cache):
    def __init__(self):
        self.data = {}

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value):
        self.data[key] = value


def test_args_parse_result_is_correct():
    args = parse_args(["--amount=100.0", "--from=USD", "--to=EUR"])
    assert (args.amount, args.from_code, args.to_code) == (100.0, "USD", "EUR")


def test_args_parse_single_dash_and_separate_values():
    args = parse_args(["-amount", "5", "-from", "GBP", "-to", "JPY", "-refresh"])
    assert (args.amount, args.from_code, args.to_code, args.refresh) == (5.0, "GBP", "JPY", True)


def test_args_parse_missing_amount():
    with pytest.raises(UsageError, match="^zero value of currency$"):
        parse_args(["--from=USD", "--to=EUR"])


def test_args_parse_missing_from():
    with pytest.raises(UsageError, match="^empty string of currency converts$"):
        parse_args(["--amount=100.0", "--to=EUR"])


def test_args_parse_missing_to():
    with pytest.raises(UsageError, match="^empty string of currency converts$"):
        parse_args(["--amount=100.0", "--from=USD"])


def test_args_parse_list_flag():
    args = parse_args(["--list=true"])
    assert args.list_codes is True
    assert (args.amount, args.from_code, args.to_code) == (0.0, "", "")


def test_args_parse_bad_bool_exits():
    with pytest.raises(SystemExit):
        parse_args(["--list=maybe"])


def test_cache_key():
    assert cache_key(Args(amount=1, from_code="USD", to_code="EUR")) == "USD_EUR"


def test_print_supported_codes(capsys):
    print_supported_codes(CODES)
    captured = capsys.readouterr()
    assert captured.out == "USD | United States Dollar\nEUR | Euro\n"
    assert captured.err == "Supported Codes:\n"


def test_print_supported_codes_empty(capsys):
    print_supported_codes([])
    assert capsys.readouterr().out == "No supported codes found.\n"


def test_print_conversion_result(capsys):
    print_conversion_result(100, 120, "USD", "EUR")
    assert capsys.readouterr().out == "Converted 100.00 USD to 120.00 EUR\n"


def test_run_with_mock_api(tmp_path, capsys):
    cache_file = tmp_path / "currency_cache_test.json"
    cache_file.write_text("{}")
    api = _FakeAPI(CODES, 1.0)
    run(api, Args(amount=100, from_code="USD", to_code="EUR"), FileCache(cache_file))
    assert capsys.readouterr().out == "Converted 100.00 USD to 100.00 EUR\n"
    assert json.loads(cache_file.read_text())["USD_EUR"]["currency"] == 1.0


def test_run_with_mock_cache():
    cache = _MemoryCache()
    run(_FakeAPI(CODES, 1.0), Args(amount=100, from_code="USD", to_code="EUR"), cache)
    assert cache.data["USD_EUR"] == 1.0


def test_run_uses_cached_rate(capsys):
    cache = _MemoryCache()
    cache.set("USD_EUR", 2.0)
    api = _FakeAPI(CODES, 1.0)
    run(api, Args(amount=100, from_code="USD", to_code="EUR"), cache)
    assert api.pair_calls == []
    assert capsys.readouterr().out == "Converted 100.00 USD to 200.00 EUR\n"


def test_run_refresh_bypasses_cache(capsys):
    cache = _MemoryCache()
    cache.set("USD_EUR", 2.0)
    api = _FakeAPI(CODES, 1.0)
    run(api, Args(amount=100, from_code="USD", to_code="EUR", refresh=True), cache)
    assert api.pair_calls == [("USD", "EUR")]
    assert cache.data["USD_EUR"] == 1.0
    assert capsys.readouterr().out == "Converted 100.00 USD to 100.00 EUR\n"


def test_run_list_prints_codes(capsys):
    cache = _MemoryCache()
    run(_FakeAPI(CODES, 1.0), Args(list_codes=True), cache)
    assert capsys.readouterr().out == "USD | United States Dollar\nEUR | Euro\n"
    assert cache.data == {}


def test_main_converts_through_live_api(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("API_KEY", "placeholder")
    monkeypatch.setenv("BASE_URL", "https://api.example.com/v6")
    monkeypatch.setenv("CACHE_FILE", str(tmp_path / "cache.json"))
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.GET,
            "https://api.example.com/v6/placeholder/pair/USD/EUR",
            json={"conversion_rate": 0.5},
        )
        status = main(["--amount=10", "--from=USD", "--to=EUR"])
    assert status == 0
    assert capsys.readouterr().out == "Converted 10.00 USD to 5.00 EUR\n"


def test_main_missing_env_fails(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("API_KEY", raising=False)
    assert main(["--amount=10", "--from=USD", "--to=EUR"]) == 1
    assert "API_KEY not set in env" in capsys.readouterr().err


def test_main_usage_error_fails(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("API_KEY", "placeholder")
    monkeypatch.setenv("BASE_URL", "https://api.example.com/v6")
    monkeypatch.setenv("CACHE_FILE", str(tmp_path / "cache.json"))
    assert main(["--from=USD", "--to=EUR"]) == 1
    assert "zero value of currency" in capsys.readouterr().err