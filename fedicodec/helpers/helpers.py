"""Helper functions for fedicodec."""
import logging
import sys
from datetime import datetime

import colorlog
from dateutil import parser


def setup_logging(log_level: int = logging.INFO) -> None:
    """Set logging."""
    logger = logging.getLogger()
    stdout = colorlog.StreamHandler(stream=sys.stderr)
    fmt = colorlog.ColoredFormatter(
    "%(white)s%(asctime)s%(reset)s | %(log_color)s%(levelname)s%(reset)s | \
%(name)s | %(blue)s%(filename)s:%(lineno)s%(reset)s | %(funcName)s >>> \
%(log_color)s%(message)s%(reset)s")
    stdout.setFormatter(fmt)
    logger.addHandler(stdout)
    logger.setLevel(log_level)

class Response:
    """HTTP response codes."""

    OK = 200
    CREATED = 201
    ACCEPTED = 202
    NO_CONTENT = 204
    MULTIPLE_CHOICES = 300
    FOUND = 302
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    CONFLICT = 409
    UNPROCESSABLE_ENTITY = 422
    TOO_MANY_REQUESTS = 429
    INTERNAL_SERVER_ERROR = 500

def parse_datetime(value: str | None) -> datetime | None:
    """Parse a timestamp as sent by the API, e.g. `created_at`.

    Returns None for a missing value or one dateutil cannot parse.
    """
    if not value:
        return None
    try:
        return parser.parse(value)
    except (ValueError, TypeError, OverflowError):
        logging.debug(f"Could not parse timestamp {value!r}")
        return None
