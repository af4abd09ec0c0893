from .codec import (
    add_stream,
    build_subscription_request,
    decode,
    decode_subscription_request,
    decode_subscription_response,
    decode_trade,
    encode_record,
    encode_subscription_request,
    encode_subscription_response,
)
from .coercion import BoolOrString, DecimalString, UInt64
from .data_structs import SubscriptionRequest, SubscriptionResponse, Trade
from .exceptions import (
    ConfigError,
    CustomDecodeError,
    DecodeError,
    MalformedJsonError,
    MissingFieldError,
    NumericParseError,
    TypeMismatchError,
    UnknownMessageError,
)
from .parsers import MessageParserFactory
