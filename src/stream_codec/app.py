import argparse
import sys
from typing import List, Optional, TextIO

from .codec import (
    add_stream,
    build_subscription_request,
    encode_record,
    encode_subscription_request,
)
from .config import AppConfig, load_config
from .exceptions import DecodeError
from .logger import create_logger
from .parsers import MessageParserFactory


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="stream-codec",
        description="Encode subscription requests and decode WebSocket frames.",
    )
    parser.add_argument("--config", default=None, help="Path to the YAML config file.")

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("subscribe", help="Print the subscription request payload.")
    decode = commands.add_parser(
        "decode", help="Decode newline delimited frames into NDJSON records."
    )
    decode.add_argument(
        "input",
        nargs="?",
        default=None,
        help="File of raw frames, one per line (default: stdin).",
    )

    return parser.parse_args(argv)


def subscribe(config: AppConfig) -> str:
    """Builds the subscription request payload for the configured streams."""
    request = build_subscription_request(config.request_id)
    for stream in config.streams:
        add_stream(request, stream)
    return encode_subscription_request(request)


def decode_frames(frames: TextIO, config: AppConfig, logger) -> None:
    """Decodes each frame and writes the record to stdout as a JSON line."""
    factory = MessageParserFactory()
    decoded = 0
    skipped = 0

    for line_number, line in enumerate(frames, start=1):
        frame = line.strip()
        if not frame:
            continue

        try:
            record = factory.create(frame).parse(frame)
        except DecodeError as e:
            if not config.skip_invalid:
                logger.exception(e)
                raise e
            skipped += 1
            logger.warning(
                f"Skipping frame on line {line_number}: {e}",
                extra={"error": type(e).__name__, "record": e.record, "field": e.field},
            )
            continue

        print(encode_record(record))
        decoded += 1

    logger.info(f"Decoded {decoded} frames, skipped {skipped}.")


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    config = load_config(args.config)
    logger = create_logger("stream_codec", config.log_level)

    if args.command == "subscribe":
        payload = subscribe(config)
        logger.info(
            f"Built subscription request {config.request_id} "
            f"for {len(config.streams)} streams."
        )
        print(payload)
    else:
        logger.info("Beginning decode...")
        if args.input is None:
            decode_frames(sys.stdin, config, logger)
        else:
            with open(args.input, "r") as frames:
                decode_frames(frames, config, logger)


if __name__ == "__main__":
    main()
