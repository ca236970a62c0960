from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv

from casenotify.app import (
    ProcessingStatus,
    ReceiptStatus,
    describe_versions,
    handle_delivery_receipt,
    handle_payload,
)
from casenotify.config import configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2

_SUCCESSFUL = frozenset({ProcessingStatus.SENT, ProcessingStatus.ABORTED})
_RECEIPT_SUCCESSFUL = frozenset({ReceiptStatus.REGISTERED, ReceiptStatus.IGNORED})


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Turn case-management notifications into messages")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug output",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    process = subparsers.add_parser("process", help="Process one Notificaties callback payload")
    process.add_argument(
        "event",
        type=str,
        help="Path to a JSON payload, or '-' to read it from stdin",
    )
    process.add_argument(
        "--deadline",
        type=float,
        default=None,
        help="Seconds after which processing is cancelled",
    )

    receipt = subparsers.add_parser(
        "receipt", help="Register one NotifyNL delivery receipt as a contact moment"
    )
    receipt.add_argument(
        "payload",
        type=str,
        help="Path to a JSON payload, or '-' to read it from stdin",
    )
    receipt.add_argument(
        "--deadline",
        type=float,
        default=None,
        help="Seconds after which registration is cancelled",
    )

    subparsers.add_parser("versions", help="Show the versions of the integrated APIs")

    return parser.parse_args(list(argv))


def _load_payload(source: str) -> dict[str, Any]:
    try:
        raw = sys.stdin.read() if source == "-" else Path(source).read_text(encoding="utf-8")
        payload = json.loads(raw)
    except OSError as exc:
        raise ValueError(f"Cannot read payload: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ValueError(f"Payload is not JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise ValueError("Payload must be a JSON object")
    return payload


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    payload: dict[str, Any] | None = None
    if parsed_args.command in {"process", "receipt"}:
        if parsed_args.deadline is not None and parsed_args.deadline <= 0:
            log.error("--deadline must be positive")
            sys.exit(EXIT_USAGE)
        try:
            source = parsed_args.event if parsed_args.command == "process" else parsed_args.payload
            payload = _load_payload(source)
        except ValueError:
            log.exception("CLI validation error")
            sys.exit(EXIT_USAGE)

    try:
        if parsed_args.command == "process" and payload is not None:
            outcome = handle_payload(payload, deadline_seconds=parsed_args.deadline)
            print(f"{outcome.status}: {outcome.message}")  # noqa: T201
            if outcome.status not in _SUCCESSFUL:
                sys.exit(EXIT_FAILED)
        elif parsed_args.command == "receipt" and payload is not None:
            receipt_outcome = handle_delivery_receipt(
                payload, deadline_seconds=parsed_args.deadline
            )
            print(f"{receipt_outcome.status}: {receipt_outcome.message}")  # noqa: T201
            if receipt_outcome.status not in _RECEIPT_SUCCESSFUL:
                sys.exit(EXIT_FAILED)
        elif parsed_args.command == "versions":
            print(describe_versions())  # noqa: T201
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except Exception:
        log.exception("Fatal error while handling notification")
        sys.exit(EXIT_FAILED)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(EXIT_OK)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
