"""Glue between media type values and the header collections of HTTP messages.

Works with `requests` responses and prepared requests, with any mapping of header names to values
(e.g. a `requests.structures.CaseInsensitiveDict` or a plain dict), and with a list of
``(name, value)`` pairs where a header may be repeated.
"""
import logging
from collections.abc import Mapping

from requests.structures import CaseInsensitiveDict

from .parser.lists import parse_list
from .parser.values import try_parse

log = logging.getLogger(__name__)

CONTENT_TYPE = 'Content-Type'
ACCEPT = 'Accept'


def _headers_of(message):
    return getattr(message, 'headers', message)


def header_values(headers, name):
    """Return every raw value of the header `name` (any case), in order."""
    headers = _headers_of(headers)
    if headers is None:
        return []
    if isinstance(headers, CaseInsensitiveDict):
        value = headers.get(name)
        return [] if value is None else [value]
    if isinstance(headers, Mapping):
        return [value for key, value in headers.items() if key.lower() == name.lower()]
    return [value for key, value in headers if key.lower() == name.lower()]


def content_type(message):
    """Return the media type from the Content-Type header, or None if it's missing or malformed."""
    values = header_values(message, CONTENT_TYPE)
    if not values:
        return None
    if len(values) > 1:
        log.warning(f'multiple {CONTENT_TYPE} headers, using the first of {values!r}')
    return try_parse(values[0])


def accepted_media_types(message):
    """Return the media types listed in all Accept headers.

    Raises HeaderFormatError if any entry is malformed; an absent header gives an empty list.
    """
    return parse_list(header_values(message, ACCEPT))


def set_media_type(headers, name, value):
    """Store the canonical form of the media type `value` as the header `name`."""
    headers = _headers_of(headers)
    text = str(value)
    if isinstance(headers, CaseInsensitiveDict):
        headers[name] = text
        return
    for key in [key for key in headers if key.lower() == name.lower()]:
        del headers[key]
    headers[name] = text
