from typing import Dict, List, Optional, Tuple

from pydantic import AliasChoices, AliasGenerator, ConfigDict
from pydantic.dataclasses import dataclass

from .coercion import DecimalString, UInt64

SUBSCRIBE = "SUBSCRIBE"

# Accepted wire keys per field, canonical key first.
SUBSCRIPTION_REQUEST_KEYS: Dict[str, Tuple[str, ...]] = {
    "method": ("method",),
    "params": ("params",),
    "id": ("id",),
}

SUBSCRIPTION_RESPONSE_KEYS: Dict[str, Tuple[str, ...]] = {
    "result": ("result",),
    "id": ("id",),
}

TRADE_KEYS: Dict[str, Tuple[str, ...]] = {
    "event_type": ("e",),
    "event_time": ("E",),
    "symbol": ("s",),
    "trade_id": ("t",),
    "price": ("p",),
    "quantity": ("q",),
    "trade_time": ("T",),
    "is_buyer_market_maker": ("m",),
    "ignore": ("M",),
}


def _kebab_case(name: str) -> str:
    return name.replace("_", "-")


def wire_config(
    keys: Dict[str, Tuple[str, ...]], kebab_aliases: bool = False
) -> ConfigDict:
    """
    Builds a strict pydantic config that reads each field from the wire keys listed in
    the mapping table. Records are always written back out with their field names.
    """

    def validation_alias(name: str) -> AliasChoices:
        choices = list(keys[name])
        if kebab_aliases and _kebab_case(name) not in choices:
            choices.append(_kebab_case(name))
        return AliasChoices(*choices)

    return ConfigDict(
        strict=True,
        validate_by_alias=True,
        validate_by_name=True,
        alias_generator=AliasGenerator(validation_alias=validation_alias),
    )


@dataclass(config=wire_config(SUBSCRIPTION_REQUEST_KEYS, kebab_aliases=True))
class SubscriptionRequest:
    method: str
    params: List[str]
    id: UInt64

    def add_stream(self, stream: str) -> None:
        """Appends a stream name, keeping the order streams were added in."""
        self.params.append(stream)


@dataclass(
    frozen=True,
    kw_only=True,
    config=wire_config(SUBSCRIPTION_RESPONSE_KEYS, kebab_aliases=True),
)
class SubscriptionResponse:
    result: Optional[List[str]] = None
    id: UInt64


@dataclass(frozen=True, config=wire_config(TRADE_KEYS))
class Trade:
    event_type: str
    event_time: UInt64
    symbol: str
    trade_id: UInt64
    price: DecimalString
    quantity: DecimalString
    trade_time: UInt64
    is_buyer_market_maker: bool
    ignore: bool
