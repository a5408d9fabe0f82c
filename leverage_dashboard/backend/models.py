"""
Data models for the Futures Leverage Dashboard
Parses the string-typed fields of the tastytrade API into typed values.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .. import config
from .errors import MalformedApiResponse


def parse_decimal(value: Any, field_name: str) -> float:
    if value is None or isinstance(value, bool):
        raise MalformedApiResponse(f"Missing or invalid {field_name} in API response.")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise MalformedApiResponse(f"Invalid {field_name} in API response: {value!r}")
    if not math.isfinite(number):
        raise MalformedApiResponse(f"Invalid {field_name} in API response: {value!r}")
    return number


def parse_int(value: Any, field_name: str) -> int:
    number = parse_decimal(value, field_name)
    if not number.is_integer():
        raise MalformedApiResponse(f"Expected a whole number for {field_name}: {value!r}")
    return int(number)


def _require_str(item: Dict, key: str) -> str:
    value = item.get(key) if isinstance(item, dict) else None
    if not isinstance(value, str) or not value:
        raise MalformedApiResponse(f"Missing {key} in API response.")
    return value


@dataclass
class Account:
    account_number: str
    authority_level: str

    @staticmethod
    def _account_of(item: Dict) -> Dict:
        account = item.get("account")
        return account if isinstance(account, dict) else item

    @classmethod
    def is_owner_item(cls, item: Any) -> bool:
        """Check the authority level of a raw account entry without parsing the rest."""
        if not isinstance(item, dict):
            return False
        authority = item.get("authority-level", cls._account_of(item).get("authority-level"))
        return authority == config.OWNER_AUTHORITY

    @classmethod
    def from_api(cls, item: Dict) -> "Account":
        if not isinstance(item, dict):
            raise MalformedApiResponse("Account entry is not an object.")
        account = cls._account_of(item)
        authority = item.get("authority-level", account.get("authority-level"))
        return cls(
            account_number=_require_str(account, "account-number"),
            authority_level=authority if isinstance(authority, str) else "",
        )


@dataclass
class Balance:
    net_liquidating_value: float

    @classmethod
    def from_api(cls, data: Dict) -> "Balance":
        if not isinstance(data, dict):
            raise MalformedApiResponse("Balance payload is not an object.")
        return cls(parse_decimal(data.get("net-liquidating-value"), "net-liquidating-value"))


@dataclass
class Position:
    symbol: str
    instrument_type: str
    multiplier: int
    quantity: int

    @staticmethod
    def is_future_item(item: Any) -> bool:
        return isinstance(item, dict) and item.get("instrument-type") == config.FUTURE_INSTRUMENT_TYPE

    @property
    def abs_quantity(self) -> int:
        return abs(self.quantity)

    @classmethod
    def from_api(cls, item: Dict) -> "Position":
        return cls(
            symbol=_require_str(item, "symbol"),
            instrument_type=_require_str(item, "instrument-type"),
            multiplier=parse_int(item.get("multiplier"), "multiplier"),
            quantity=parse_int(item.get("quantity"), "quantity"),
        )


@dataclass
class Quote:
    symbol: str
    last_trade_price: Optional[float]

    @classmethod
    def from_api(cls, item: Dict) -> "Quote":
        price = item.get("last-trade-price") if isinstance(item, dict) else None
        return cls(
            symbol=_require_str(item, "symbol"),
            last_trade_price=None if price in (None, "") else parse_decimal(price, "last-trade-price"),
        )


@dataclass
class PositionExposure:
    symbol: str
    quantity: int
    multiplier: int
    price: float
    notional: float


@dataclass
class DashboardData:
    account_number: str
    nlv: float
    notional_value: float
    leverage: float
    exposures: List[PositionExposure] = field(default_factory=list)
