"""Plain data records shared across the converter."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass
class Args:
    """Options collected from the command line."""

    amount: float = 0.0
    from_code: str = ""
    to_code: str = ""
    list_codes: bool = False
    refresh: bool = False


@dataclass
class CacheData:
    """A cached conversion rate and the moment it stops being valid."""

    currency: float = 0.0
    expiration_date: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready form stored in the cache file."""
        return {"currency": self.currency, "expiration_date": self.expiration_date}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CacheData:
        """Build an entry from its stored form; missing fields take zero values."""
        return cls(
            currency=float(data.get("currency", 0.0)),
            expiration_date=str(data.get("expiration_date", "")),
        )


@dataclass
class Conversion:
    """The rate returned for a currency pair."""

    conversion_rate: float = 0.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Conversion:
        """Build a conversion from the service's JSON body."""
        return cls(conversion_rate=float(data.get("conversion_rate", 0.0)))


@dataclass
class Code:
    """The list of currency codes the service supports."""

    supported_codes: list[list[str]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Code:
        """Build the code list from the service's JSON body."""
        entries = data.get("supported_codes") or []
        return cls(supported_codes=[[str(part) for part in entry] for entry in entries])