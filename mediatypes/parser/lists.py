"""Parse comma separated lists of media types, as found in ``Accept`` headers.

A header may be repeated, so the parsers accept a sequence of raw strings and treat them as one
list. Parsing is all or nothing: one malformed entry anywhere rejects the whole list.
"""
import logging

from ..errors import HeaderFormatError
from .scanner import quoted_string_length, whitespace_length
from .values import parse

log = logging.getLogger(__name__)


def split_list(text, delimiter=','):
    """Yield the `delimiter` separated segments of `text`, unstripped and including empty ones.

    Delimiters inside quoted strings do not split. An unterminated quoted string runs to the end of
    `text` and lands in the last segment.
    """
    start = current = 0
    length = len(text)
    while current < length:
        char = text[current]
        if char == '"':
            quoted = quoted_string_length(text, current)
            if not quoted:
                break
            current += quoted
        elif char == delimiter:
            yield text[start:current]
            current += 1
            start = current
        else:
            current += 1
    yield text[start:]


def _is_blank(segment):
    return whitespace_length(segment, 0) == len(segment)


def parse_list(texts):
    """Parse every media type in `texts`, in order.

    `texts` is a sequence of header values (a single string is accepted too). Empty and blank
    entries are skipped, so None, ``[]`` and ``['']`` all give an empty list. Raises
    HeaderFormatError if any entry is malformed.
    """
    if not texts:
        return []
    if isinstance(texts, str):
        texts = [texts]
    results = []
    for text in texts:
        if text is None:
            continue
        for segment in split_list(text):
            if _is_blank(segment):
                continue
            results.append(parse(segment))
    return results


def try_parse_list(texts):
    """Like `parse_list` but return None when any entry is malformed or there are no entries."""
    try:
        results = parse_list(texts)
    except HeaderFormatError as e:
        log.debug(f'try_parse_list rejected {texts!r}: {e}')
        return None
    if not results:
        return None
    return results
