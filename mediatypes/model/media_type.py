"""Media type values such as ``text/plain; charset=utf-8; q=0.8``."""
import re
from decimal import ROUND_HALF_UP, Decimal

from ..errors import HeaderFormatError, QualityRangeError, ReadOnlyError
from ..parser.scanner import is_token
from .parameters import FrozenParameterList, Parameter, ParameterList

WILDCARD = '*'
CHARSET = 'charset'
QUALITY = 'q'

QUALITY_TEXT = re.compile(r'\d+(?:\.\d*)?|\.\d+')
QUALITY_PRECISION = Decimal('0.001')


def parse_quality(text):
    """Convert the text of a ``q`` parameter to a float."""
    if text is None or not QUALITY_TEXT.fullmatch(text):
        raise HeaderFormatError('invalid quality value', text)
    return float(text)


def format_quality(value):
    """Render a quality for a ``q`` parameter.

    The value is rounded half away from zero to three decimal places, and trailing zeros are
    dropped down to a single fractional digit: 0.563156454 -> "0.563", 1 -> "1.0", 0.08 -> "0.08".
    """
    if not 0.0 <= value <= 1.0:
        raise QualityRangeError(value)
    rounded = Decimal(str(value)).quantize(QUALITY_PRECISION, rounding=ROUND_HALF_UP)
    text = f'{rounded:.3f}'.rstrip('0')
    if text.endswith('.'):
        text += '0'
    return text


def _checked_token(value, what):
    if not isinstance(value, str) or not is_token(value):
        raise HeaderFormatError(f'invalid media {what}', value)
    return value


def split_media_type(media_type):
    """Split a bare ``type/subtype`` string, which must not carry whitespace or parameters."""
    if not media_type:
        raise HeaderFormatError('a media type is required')
    if not isinstance(media_type, str):
        raise HeaderFormatError('invalid media type', media_type)
    type_, slash, subtype = media_type.partition('/')
    if not slash or not is_token(type_) or not is_token(subtype):
        raise HeaderFormatError('invalid media type', media_type)
    return type_, subtype


def set_parameter(parameters, name, value):
    """Set the first parameter called `name` in a mutable list, in place.

    A None value removes that parameter; a missing parameter is appended.
    """
    parameter = parameters.find(name)
    if value is None:
        if parameter is not None:
            parameters.remove(parameter)
    elif parameter is not None:
        parameter.value = value
    else:
        parameters.add(Parameter(name, value))


class BaseMediaType:
    is_read_only = None

    def __init__(self, media_type, quality=None, parameters=()):
        self._type, self._subtype = split_media_type(media_type)
        parameter_list = ParameterList(parameters)
        if quality is not None:
            set_parameter(parameter_list, QUALITY, format_quality(quality))
        self._parameters = self._adopt_parameters(parameter_list)

    def _adopt_parameters(self, parameter_list):
        raise NotImplementedError()   # pragma: no cover

    @property
    def type(self):
        return self._type

    @property
    def subtype(self):
        return self._subtype

    @property
    def media_type(self):
        return f'{self._type}/{self._subtype}'

    @property
    def parameters(self):
        return self._parameters

    @property
    def charset(self):
        parameter = self._parameters.find(CHARSET)
        return None if parameter is None else parameter.value

    @property
    def quality(self):
        """The ``q`` parameter as a float, or None.

        The text of the parameter is only checked here, so a malformed value added by hand raises
        HeaderFormatError on read.
        """
        parameter = self._parameters.find(QUALITY)
        return None if parameter is None else parse_quality(parameter.value)

    def copy(self):
        return MediaType(self.media_type, parameters=self._parameters)

    def copy_as_read_only(self):
        return FrozenMediaType(self.media_type, parameters=self._parameters)

    def is_subset_of(self, other):
        """Determine whether this media type is acceptable under the pattern `other`.

        `other` may use ``*`` for its type or subtype. Every parameter of `other` except ``q`` must
        be present in this media type with the same value; this media type may carry extra
        parameters. A wildcard on this side never satisfies a concrete type on the other side, so
        ``text/plain`` is a subset of ``text/*`` but not the other way round.
        """
        if other._type != WILDCARD and self._type.lower() != other._type.lower():
            return False
        if other._subtype != WILDCARD and self._subtype.lower() != other._subtype.lower():
            return False
        for parameter in other._parameters:
            if parameter.matches_name(QUALITY):
                continue
            if parameter not in self._parameters:
                return False
        return True

    def __eq__(self, other):
        if not isinstance(other, BaseMediaType):
            return NotImplemented
        return (self._type.lower() == other._type.lower() and
                self._subtype.lower() == other._subtype.lower() and
                self._parameters == other._parameters)

    def __hash__(self):
        return hash((self._type.lower(), self._subtype.lower(), hash(self._parameters)))

    def __str__(self):
        return self.media_type + ''.join(f'; {parameter}' for parameter in self._parameters)

    def __repr__(self):
        return f'<{self.__class__.__name__} {self}>'


class MediaType(BaseMediaType):
    """A mutable media type; parsers return these."""
    is_read_only = False

    def _adopt_parameters(self, parameter_list):
        return parameter_list

    @BaseMediaType.type.setter
    def type(self, value):
        self._type = _checked_token(value, 'type')

    @BaseMediaType.subtype.setter
    def subtype(self, value):
        self._subtype = _checked_token(value, 'subtype')

    @BaseMediaType.media_type.setter
    def media_type(self, value):
        self._type, self._subtype = split_media_type(value)

    @BaseMediaType.charset.setter
    def charset(self, value):
        set_parameter(self._parameters, CHARSET, value)

    @BaseMediaType.quality.setter
    def quality(self, value):
        set_parameter(self._parameters, QUALITY, None if value is None else format_quality(value))

    @classmethod
    def parse(cls, text):
        from ..parser.values import parse
        return parse(text)

    @classmethod
    def try_parse(cls, text):
        from ..parser.values import try_parse
        return try_parse(text)

    @classmethod
    def parse_list(cls, texts):
        from ..parser.lists import parse_list
        return parse_list(texts)

    @classmethod
    def try_parse_list(cls, texts):
        from ..parser.lists import try_parse_list
        return try_parse_list(texts)


class FrozenMediaType(BaseMediaType):
    """A read-only media type, safe to share; get one from `copy_as_read_only()`."""
    is_read_only = True

    def _adopt_parameters(self, parameter_list):
        return FrozenParameterList(parameter_list)

    def __setattr__(self, name, value):
        if not name.startswith('_'):
            raise ReadOnlyError(self)
        super().__setattr__(name, value)
