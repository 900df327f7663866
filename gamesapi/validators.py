"""Validation of incoming and outgoing game data."""

import logging

_log = logging.getLogger(__name__)

RATING_ERROR_MESSAGE = "rating must be a number between 0 and 100"

_U8_MAX = 255
_RATING_MAX = 100


def validate_rating(value):
    """Return ``value`` if it is a valid rating, otherwise raise ``ValueError``.

    A rating must be an integer that fits in an unsigned byte and is at most 100.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"invalid type: {value!r}, expected u8")
    if value < 0 or value > _U8_MAX:
        raise ValueError(f"invalid value: integer `{value}`, expected u8")
    if value > _RATING_MAX:
        _log.error("%s", RATING_ERROR_MESSAGE)
        raise ValueError(
            f"invalid value: integer `{value}`, expected {RATING_ERROR_MESSAGE}"
        )
    return value