import json
from abc import ABC, abstractmethod
from typing import Any, Dict, Union

from .codec import (
    decode_subscription_request,
    decode_subscription_response,
    decode_trade,
)
from .data_structs import SubscriptionRequest, SubscriptionResponse, Trade
from .exceptions import MalformedJsonError, UnknownMessageError

Message = Union[SubscriptionRequest, SubscriptionResponse, Trade]
WireRecord = Dict[str, Any]


class MessageParser(ABC):
    """
    Interface representing a class that converts a raw WebSocket frame into a typed
    message record.
    """

    @abstractmethod
    def parse(self, frame: str) -> Message:
        pass


class SubscriptionRequestParser(MessageParser):
    def parse(self, frame: str) -> SubscriptionRequest:
        return decode_subscription_request(frame)


class SubscriptionResponseParser(MessageParser):
    def parse(self, frame: str) -> SubscriptionResponse:
        return decode_subscription_response(frame)


class TradeParser(MessageParser):
    def parse(self, frame: str) -> Trade:
        return decode_trade(frame)


class MessageParserFactory:
    """Used to pick a message parser dynamically from the shape of the frame."""

    events = {"trade": TradeParser}

    def _get_record(self, frame: str) -> WireRecord:
        try:
            record = json.loads(frame)
        except json.JSONDecodeError as e:
            raise MalformedJsonError("frame", None, e.msg) from e

        if not isinstance(record, dict):
            raise UnknownMessageError([])

        return record

    def create(self, frame: str) -> MessageParser:
        """Returns a parser based on the keys present in the frame."""
        record = self._get_record(frame)

        if "e" in record:
            event_type = record["e"]
            parser = self.events.get(event_type) if isinstance(event_type, str) else None
        elif "result" in record:
            parser = SubscriptionResponseParser
        elif "method" in record:
            parser = SubscriptionRequestParser
        else:
            parser = None

        if parser is None:
            raise UnknownMessageError(sorted(record))

        return parser()
