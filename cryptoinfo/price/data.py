"""Price records and parsers for the market data feeds."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any, Callable

_I32 = (-(2**31), 2**31 - 1)
_I64 = (-(2**63), 2**63 - 1)
_U32 = (0, 2**32 - 1)

_SIGNED_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)
_UNSIGNED_RE = re.compile(r"\+?[0-9]+", re.ASCII)
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.ASCII | re.IGNORECASE,
)


def _parse_int(text: str, pattern: re.Pattern[str], bounds: tuple[int, int]) -> int:
    if not pattern.fullmatch(text):
        return 0
    value = int(text)
    return value if bounds[0] <= value <= bounds[1] else 0


def _parse_float(text: str) -> float:
    return float(text) if _FLOAT_RE.fullmatch(text) else 0.0


def _is_str(value: Any) -> bool:
    return isinstance(value, str)


def _is_bool(value: Any) -> bool:
    return isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_list(value: Any) -> bool:
    return isinstance(value, list)


def _int_in(bounds: tuple[int, int]) -> Callable[[Any], bool]:
    def check(value: Any) -> bool:
        return (
            isinstance(value, int)
            and not isinstance(value, bool)
            and bounds[0] <= value <= bounds[1]
        )

    return check


def _field(obj: Any, key: str, check: Callable[[Any], bool]) -> Any:
    if not isinstance(obj, dict):
        raise ValueError("expected a JSON object")
    if key not in obj or not check(obj[key]):
        raise ValueError(f"missing or invalid field {key!r}")
    return obj[key]


def _list_of(text: str) -> list[Any]:
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError("expected a JSON array")
    return data


@dataclass
class Private:
    """The user's own notes on a coin, kept on disk."""

    symbol: str
    marked: bool
    floor_price: float

    @classmethod
    def from_dict(cls, raw: Any) -> Private:
        return cls(
            symbol=_field(raw, "symbol", _is_str),
            marked=_field(raw, "marked", _is_bool),
            floor_price=float(_field(raw, "floor_price", _is_number)),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"symbol": self.symbol, "marked": self.marked, "floor_price": self.floor_price}


_RAW_KEYS = (
    "id", "name", "symbol", "rank", "price_usd", "market_cap_usd",
    "available_supply", "total_supply", "max_supply", "percent_change_1h",
    "percent_change_24h", "percent_change_7d", "last_updated", "24h_volume_usd",
)


@dataclass
class PriceItem:
    """One row of the price list."""

    index: int = 0
    marked: bool = False
    floor_price: float = 0.0
    id: str = ""
    name: str = ""
    symbol: str = ""
    rank: int = 0
    price_usd: float = 0.0
    market_cap_usd: int = 0
    available_supply: int = 0
    total_supply: int = 0
    max_supply: int = 0
    percent_change_1h: float = 0.0
    percent_change_24h: float = 0.0
    percent_change_7d: float = 0.0
    volume_24h_usd: float = 0.0
    last_updated: int = 0

    @classmethod
    def from_raw(cls, raw: Any) -> PriceItem:
        """Build an item from a ticker entry whose values are all strings.

        Raises ValueError when a field is missing or not a string; a string
        that is not a valid number gives zero.
        """
        values = {key: _field(raw, key, _is_str) for key in _RAW_KEYS}
        return cls(
            id=values["id"],
            name=values["name"],
            symbol=values["symbol"],
            rank=_parse_int(values["rank"], _UNSIGNED_RE, _U32),
            price_usd=_parse_float(values["price_usd"]),
            volume_24h_usd=_parse_float(values["24h_volume_usd"]),
            market_cap_usd=_parse_int(values["market_cap_usd"], _SIGNED_RE, _I64),
            available_supply=_parse_int(values["available_supply"], _SIGNED_RE, _I64),
            total_supply=_parse_int(values["total_supply"], _SIGNED_RE, _I64),
            max_supply=_parse_int(values["max_supply"], _SIGNED_RE, _I64),
            percent_change_1h=_parse_float(values["percent_change_1h"]),
            percent_change_24h=_parse_float(values["percent_change_24h"]),
            percent_change_7d=_parse_float(values["percent_change_7d"]),
            last_updated=_parse_int(values["last_updated"], _SIGNED_RE, _I64),
        )


@dataclass(frozen=True)
class Market:
    total_market_cap_usd: int
    total_24h_volume_usd: int
    bitcoin_percentage_of_market_cap: float


@dataclass(frozen=True)
class OtcQuote:
    usd: str
    usdt: str
    datetime: str


def parse_fear_greed(text: str) -> list[str]:
    """The index values of a fear-and-greed response, newest first."""
    data = _field(json.loads(text), "data", _is_list)
    return [_field(entry, "value", _is_str) for entry in data]


def parse_market(text: str) -> Market:
    raw = json.loads(text)
    return Market(
        total_market_cap_usd=_field(raw, "total_market_cap_usd", _int_in(_I64)),
        total_24h_volume_usd=_field(raw, "total_24h_volume_usd", _int_in(_I64)),
        bitcoin_percentage_of_market_cap=float(
            _field(raw, "bitcoin_percentage_of_market_cap", _is_number)
        ),
    )


def parse_otc(text: str) -> list[OtcQuote]:
    """The quotes of an over-the-counter USDT response, in their order."""
    raw = json.loads(text)
    _field(raw, "code", _int_in(_I32))
    _field(raw, "msg", _is_str)
    return [
        OtcQuote(
            usd=_field(entry, "usd", _is_str),
            usdt=_field(entry, "usdt", _is_str),
            datetime=_field(entry, "datetime", _is_str),
        )
        for entry in _field(raw, "data", _is_list)
    ]


def parse_raw_items(text: str) -> list[PriceItem]:
    """The entries of a ticker response; raises ValueError if any is malformed."""
    return [PriceItem.from_raw(entry) for entry in _list_of(text)]


def parse_privates(text: str) -> list[Private]:
    return [Private.from_dict(entry) for entry in _list_of(text)]