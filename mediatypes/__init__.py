"""Parse, compare and match HTTP media type header values."""
from .errors import HeaderFormatError, MediaTypeError, QualityRangeError, ReadOnlyError
from .model.media_type import FrozenMediaType, MediaType
from .model.parameters import FrozenParameter, FrozenParameterList, Parameter, ParameterList
from .parser.lists import parse_list, try_parse_list
from .parser.values import parse, try_parse

__all__ = (
    "FrozenMediaType",
    "FrozenParameter",
    "FrozenParameterList",
    "HeaderFormatError",
    "MediaType",
    "MediaTypeError",
    "Parameter",
    "ParameterList",
    "QualityRangeError",
    "ReadOnlyError",
    "parse",
    "parse_list",
    "try_parse",
    "try_parse_list",
)
