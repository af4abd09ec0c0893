"""
Encode and decode entry points for the exchange's WebSocket messages.

Every function here is a pure, single-shot transform: decoders take raw frame text and
return a typed record or raise a DecodeError subclass, encoders take a record and return
compact JSON text.
"""
from functools import lru_cache
from typing import Any, Dict, NoReturn, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from .data_structs import SUBSCRIBE, SubscriptionRequest, SubscriptionResponse, Trade
from .exceptions import (
    CustomDecodeError,
    DecodeError,
    MalformedJsonError,
    MissingFieldError,
    NumericParseError,
    TypeMismatchError,
)

Record = TypeVar("Record")

_ERROR_TYPES: Dict[str, Type[DecodeError]] = {
    "json_invalid": MalformedJsonError,
    "missing": MissingFieldError,
    "numeric_parse": NumericParseError,
    "bool_or_string": CustomDecodeError,
}


@lru_cache(maxsize=None)
def _adapter(record_type: Type[Any]) -> TypeAdapter:
    return TypeAdapter(record_type)


def _raise_decode_error(record_type: Type[Any], error: ValidationError) -> NoReturn:
    # Only the first failure is reported, the full list stays on __cause__.
    details = error.errors(include_url=False)[0]
    error_class = _ERROR_TYPES.get(details["type"], TypeMismatchError)
    field = ".".join(str(part) for part in details["loc"]) or None
    raise error_class(record_type.__name__, field, details["msg"]) from error


def decode(record_type: Type[Record], text: str) -> Record:
    """Parses JSON text into any record built from the wire toolkit."""
    try:
        return _adapter(record_type).validate_json(text, by_alias=True, by_name=False)
    except ValidationError as e:
        _raise_decode_error(record_type, e)


def encode_record(record: Any) -> str:
    """Serializes a record to compact JSON using its descriptive field names."""
    return _adapter(type(record)).dump_json(record).decode("utf-8")


def build_subscription_request(id: int) -> SubscriptionRequest:
    return SubscriptionRequest(method=SUBSCRIBE, params=[], id=id)


def add_stream(request: SubscriptionRequest, stream: str) -> None:
    request.add_stream(stream)


def encode_subscription_request(request: SubscriptionRequest) -> str:
    return encode_record(request)


def encode_subscription_response(response: SubscriptionResponse) -> str:
    return encode_record(response)


def decode_subscription_request(text: str) -> SubscriptionRequest:
    return decode(SubscriptionRequest, text)


def decode_subscription_response(text: str) -> SubscriptionResponse:
    return decode(SubscriptionResponse, text)


def decode_trade(text: str) -> Trade:
    return decode(Trade, text)
