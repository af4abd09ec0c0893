from typing import Optional


class DecodeError(Exception):
    def __init__(self, record: str, field: Optional[str], detail: str) -> None:
        self.record = record
        self.field = field
        self.detail = detail
        location = f" field {self.field!r}" if self.field else ""
        super().__init__(f"Failed to decode {self.record}{location}: {self.detail}.")


class MalformedJsonError(DecodeError):
    pass


class MissingFieldError(DecodeError):
    pass


class TypeMismatchError(DecodeError):
    pass


class NumericParseError(DecodeError):
    pass


class CustomDecodeError(DecodeError):
    pass


class UnknownMessageError(DecodeError):
    def __init__(self, keys: list) -> None:
        self.keys = keys
        super().__init__("frame", None, f"no parser for message with keys {keys!r}")


class ConfigError(Exception):
    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Invalid config file {self.path!r}: {self.detail}.")
