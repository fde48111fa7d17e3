"""Clients for the exchange-rate service."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import requests

from fxconvert.models import Code, Conversion

_TIMEOUT_SECONDS = 5.0


class ApiError(Exception):
    """Raised when the rate service cannot be reached or answers badly."""


class CurrencyAPI(ABC):
    """A source of currency codes and conversion rates."""

    @abstractmethod
    def get_pair_conversion(self, from_code: str, to_code: str) -> Conversion:
        """Return the rate from one currency to another."""

    @abstractmethod
    def get_supported_codes(self) -> list[list[str]]:
        """Return the supported currency codes with their names."""


def _fetch_json(url: str) -> dict[str, Any]:
    try:
        response = requests.get(url, timeout=_TIMEOUT_SECONDS)
    except requests.RequestException as exc:
        raise ApiError(f"request to {url} failed: {exc}") from exc
    if response.status_code != 200:
        raise ApiError(f"unexpected status code: {response.status_code}")
    try:
        payload = response.json()
    except ValueError as exc:
        raise ApiError(f"invalid JSON from {url}: {exc}") from exc
    if not isinstance(payload, dict):
        raise ApiError(f"unexpected response body from {url}")
    return payload


def fetch_supported_codes(url: str) -> list[list[str]]:
    """Fetch the supported codes from the service at url."""
    return Code.from_dict(_fetch_json(f"{url}/codes")).supported_codes


def fetch_pair_conversion(url: str, from_code: str, to_code: str) -> Conversion:
    """Fetch the rate for a currency pair from the service at url."""
    return Conversion.from_dict(_fetch_json(f"{url}/pair/{from_code}/{to_code}"))


class LiveCurrencyAPI(CurrencyAPI):
    """The rate service reached over HTTP."""

    def __init__(self, base_url: str) -> None:
        self.base_url = base_url

    def get_supported_codes(self) -> list[list[str]]:
        return fetch_supported_codes(self.base_url)

    def get_pair_conversion(self, from_code: str, to_code: str) -> Conversion:
        return fetch_pair_conversion(self.base_url, from_code, to_code)