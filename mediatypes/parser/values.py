"""Parse a single media type value.

    media-type = OWS type OWS "/" OWS subtype OWS *( ";" OWS [ parameter ] )
    parameter  = name OWS [ "=" OWS [ token / quoted-string ] OWS ]

The ``*_length`` functions scan from a position inside a larger string and report how much they
consumed (0 when nothing matched) so that the list parser can drive them; `parse` and `try_parse`
insist that the whole input is exactly one value.
"""
import logging

from ..errors import HeaderFormatError
from ..model.media_type import QUALITY, MediaType, parse_quality
from ..model.parameters import Parameter
from .scanner import token_length, value_length, whitespace_length

log = logging.getLogger(__name__)


def parameter_length(text, start):
    """Scan one parameter at `start`, including the whitespace after it.

    Return a tuple of the length and the Parameter, or (0, None) if there is no parameter name.
    """
    name_length = token_length(text, start)
    if not name_length:
        return 0, None
    name = text[start:start + name_length]
    current = start + name_length
    current += whitespace_length(text, current)
    if current >= len(text) or text[current] != '=':
        return current - start, Parameter(name)
    current += 1
    current += whitespace_length(text, current)
    length = value_length(text, current)
    value = text[current:current + length]
    current += length
    current += whitespace_length(text, current)
    return current - start, Parameter(name, value)


def parameter_list_length(text, start, parameters, delimiter=';'):
    """Scan parameters separated by `delimiter` from `start`, adding each one to `parameters`.

    A dangling delimiter at the end of the list is consumed along with any whitespace after it.
    """
    current = start + whitespace_length(text, start)
    while True:
        length, parameter = parameter_length(text, current)
        if not length:
            return current - start
        parameters.add(parameter)
        current += length
        if current >= len(text) or text[current] != delimiter:
            return current - start
        current += 1
        current += whitespace_length(text, current)


def media_type_length(text, start):
    """Scan a media type with its parameters at `start`, skipping leading whitespace.

    Return a tuple of the length consumed and the MediaType, or (0, None) when `text` does not
    begin with ``type/subtype`` at that position.
    """
    current = start + whitespace_length(text, start)
    type_length = token_length(text, current)
    if not type_length:
        return 0, None
    type_ = text[current:current + type_length]
    current += type_length
    current += whitespace_length(text, current)
    if current >= len(text) or text[current] != '/':
        return 0, None
    current += 1
    current += whitespace_length(text, current)
    subtype_length = token_length(text, current)
    if not subtype_length:
        return 0, None
    subtype = text[current:current + subtype_length]
    current += subtype_length
    current += whitespace_length(text, current)

    media_type = MediaType(f'{type_}/{subtype}')
    if current < len(text) and text[current] == ';':
        current += 1
        current += parameter_list_length(text, current, media_type.parameters)
    return current - start, media_type


def _check_quality(media_type, text):
    for parameter in media_type.parameters:
        if not parameter.matches_name(QUALITY):
            continue
        try:
            quality = parse_quality(parameter.value)
        except HeaderFormatError:
            raise HeaderFormatError('invalid quality value', text) from None
        if quality > 1.0:
            raise HeaderFormatError('quality is greater than 1', text)


def parse(text):
    """Parse `text` as exactly one media type.

    Leading and trailing whitespace is allowed, as is a trailing ``;``. Anything else after the
    value, including a ``,`` introducing another list item, raises HeaderFormatError.
    """
    if not text:
        raise HeaderFormatError('a media type is required')
    length, media_type = media_type_length(text, 0)
    if not length:
        raise HeaderFormatError('invalid media type', text)
    if length != len(text):
        raise HeaderFormatError('unexpected text after media type', text, length)
    _check_quality(media_type, text)
    return media_type


def try_parse(text):
    """Like `parse` but return None instead of raising for malformed text."""
    try:
        return parse(text)
    except HeaderFormatError as e:
        log.debug(f'try_parse rejected {text!r}: {e}')
        return None
