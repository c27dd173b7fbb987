"""Media type parameters (``; name=value``) and the ordered lists that hold them.

Names always compare case-insensitively. Values compare case-insensitively too, quoted or not.
Each shape comes in a mutable flavour (``Parameter``, ``ParameterList``) and a frozen flavour
(``FrozenParameter``, ``FrozenParameterList``); the frozen ones refuse every mutation with
``ReadOnlyError``.
"""
import functools
import operator

from ..errors import HeaderFormatError, ReadOnlyError
from ..parser.scanner import is_token, is_value


def _fold(value):
    return None if value is None else value.lower()


def _checked_name(name):
    if not isinstance(name, str) or not is_token(name):
        raise HeaderFormatError('invalid parameter name', name)
    return name


def _checked_value(value):
    if value is None:
        return None
    if not isinstance(value, str) or not is_value(value):
        raise HeaderFormatError('invalid parameter value', value)
    return value


class BaseParameter:
    is_read_only = None

    def __init__(self, name, value=None):
        self._name = _checked_name(name)
        self._value = _checked_value(value)

    @property
    def name(self):
        return self._name

    @property
    def value(self):
        """The stored value, quotes included; None for a bare parameter."""
        return self._value

    def matches_name(self, name):
        return self._name.lower() == name.lower()

    def copy(self):
        return Parameter(self._name, self._value)

    def copy_as_read_only(self):
        return FrozenParameter(self._name, self._value)

    def __eq__(self, other):
        if not isinstance(other, BaseParameter):
            return NotImplemented
        return self._name.lower() == other._name.lower() and _fold(self._value) == _fold(other._value)

    def __hash__(self):
        return hash((self._name.lower(), _fold(self._value)))

    def __str__(self):
        if self._value is None:
            return self._name
        return f'{self._name}={self._value}'

    def __repr__(self):
        return f'<{self.__class__.__name__} {self}>'


class Parameter(BaseParameter):
    is_read_only = False

    @BaseParameter.name.setter
    def name(self, name):
        self._name = _checked_name(name)

    @BaseParameter.value.setter
    def value(self, value):
        self._value = _checked_value(value)


class FrozenParameter(BaseParameter):
    is_read_only = True

    def __setattr__(self, name, value):
        if not name.startswith('_'):
            raise ReadOnlyError(self)
        super().__setattr__(name, value)


class BaseParameterList:
    """An ordered list of parameters addressable by case-insensitive name.

    Duplicate names are allowed; lookups by name always resolve to the first match. Equality and
    hashing ignore order: two lists are equal when each parameter of one can be paired with its own
    equal parameter in the other, so repeated parameters must repeat equally often on both sides.
    """
    is_read_only = None

    def __init__(self, parameters=()):
        self._items = [self._adopt(parameter) for parameter in parameters]

    def _adopt(self, parameter):
        raise NotImplementedError()   # pragma: no cover

    def find(self, name):
        """Return the first parameter called `name` (any case), or None."""
        for parameter in self._items:
            if parameter.matches_name(name):
                return parameter
        return None

    def copy(self):
        return ParameterList(self)

    def copy_as_read_only(self):
        return FrozenParameterList(self)

    def freeze(self):
        """Return a frozen version of this list, with every parameter frozen too."""
        return self.copy_as_read_only()

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __contains__(self, parameter):
        return any(item == parameter for item in self._items)

    def __eq__(self, other):
        if not isinstance(other, BaseParameterList):
            return NotImplemented
        if len(self) != len(other):
            return False
        unmatched = list(other._items)
        for parameter in self._items:
            for index, item in enumerate(unmatched):
                if item == parameter:
                    del unmatched[index]
                    break
            else:
                return False
        return True

    def __hash__(self):
        return functools.reduce(operator.xor, (hash(parameter) for parameter in self._items), 0)

    def __repr__(self):
        return f'<{self.__class__.__name__} [{", ".join(str(p) for p in self._items)}]>'


class ParameterList(BaseParameterList):
    is_read_only = False

    def _adopt(self, parameter):
        if not isinstance(parameter, BaseParameter):
            raise TypeError(f'expected a Parameter, got {type(parameter).__name__}')
        return parameter.copy()

    def add(self, parameter):
        if not isinstance(parameter, BaseParameter):
            raise TypeError(f'expected a Parameter, got {type(parameter).__name__}')
        self._items.append(parameter.copy())

    def remove(self, parameter):
        """Remove the first parameter equal to `parameter`; do nothing when there is none."""
        for index, item in enumerate(self._items):
            if item is parameter:
                del self._items[index]
                return
        for index, item in enumerate(self._items):
            if item == parameter:
                del self._items[index]
                return

    def clear(self):
        self._items.clear()


class FrozenParameterList(BaseParameterList):
    is_read_only = True

    def _adopt(self, parameter):
        if not isinstance(parameter, BaseParameter):
            raise TypeError(f'expected a Parameter, got {type(parameter).__name__}')
        return parameter.copy_as_read_only()

    def freeze(self):
        return self

    def add(self, parameter):
        raise ReadOnlyError(self)

    def remove(self, parameter):
        raise ReadOnlyError(self)

    def clear(self):
        raise ReadOnlyError(self)

    def __setattr__(self, name, value):
        if not name.startswith('_'):
            raise ReadOnlyError(self)
        super().__setattr__(name, value)
