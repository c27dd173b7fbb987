import pytest

from mediatypes import (FrozenParameter, FrozenParameterList, HeaderFormatError, Parameter,
                        ParameterList, ReadOnlyError)


def test_stringify():
    assert str(Parameter('charset', 'utf-8')) == 'charset=utf-8'
    assert str(Parameter('custom')) == 'custom'
    assert str(Parameter('name', '')) == 'name='
    assert str(Parameter('custom', '"custom value"')) == 'custom="custom value"'
    assert repr(Parameter('charset', 'utf-8')) == '<Parameter charset=utf-8>'


@pytest.mark.parametrize('name', [None, '', ' ', 'na me', 'name=', 'näme', '"name"'])
def test_invalid_name(name):
    with pytest.raises(HeaderFormatError):
        Parameter(name, 'value')


@pytest.mark.parametrize('value', [' value', 'two words', '"unterminated', 'a,b', 'x;y', 'välue'])
def test_invalid_value(value):
    with pytest.raises(HeaderFormatError):
        Parameter('name', value)


def test_set_invalid_value():
    parameter = Parameter('name', 'value')
    with pytest.raises(HeaderFormatError):
        parameter.value = 'not a token'
    assert parameter.value == 'value'


@pytest.mark.parametrize('left, right', [
    (Parameter('charset', 'utf-8'), Parameter('CHARSET', 'UTF-8')),
    (Parameter('custom'), Parameter('Custom')),
    (Parameter('custom', '"X"'), Parameter('custom', '"x"')),
    (Parameter('name', 'value'), FrozenParameter('NAME', 'value')),
])
def test_equal_parameters(left, right):
    assert left == right
    assert hash(left) == hash(right)


@pytest.mark.parametrize('left, right', [
    (Parameter('charset', 'utf-8'), Parameter('charset', 'utf-16')),
    (Parameter('custom'), Parameter('custom', '')),
    (Parameter('custom', 'x'), Parameter('custom', '"x"')),
    (Parameter('a', 'x'), Parameter('b', 'x')),
])
def test_unequal_parameters(left, right):
    assert left != right


def test_frozen_parameter_refuses_changes():
    parameter = Parameter('name', 'value').copy_as_read_only()
    assert isinstance(parameter, FrozenParameter)
    assert parameter.is_read_only
    with pytest.raises(ReadOnlyError):
        parameter.value = 'other'
    with pytest.raises(ReadOnlyError):
        parameter.name = 'other'
    assert str(parameter) == 'name=value'


def test_parameter_copy_is_mutable():
    frozen = FrozenParameter('name', 'value')
    parameter = frozen.copy()
    assert parameter is not frozen
    assert not parameter.is_read_only
    parameter.value = 'other'
    assert frozen.value == 'value'


class TestParameterList:
    def test_add_preserves_order(self):
        parameters = ParameterList()
        parameters.add(Parameter('b', '1'))
        parameters.add(Parameter('a', '2'))
        parameters.add(Parameter('b', '3'))
        assert [str(p) for p in parameters] == ['b=1', 'a=2', 'b=3']
        assert len(parameters) == 3
        assert parameters[1].name == 'a'

    def test_add_stores_independent_copy(self):
        parameters = ParameterList()
        parameter = Parameter('name', 'value')
        parameters.add(parameter)
        assert parameters[0] is not parameter
        assert parameters[0] == parameter
        parameter.value = 'changed'
        assert parameters[0].value == 'value'
        parameters[0].value = 'other'
        assert parameter.value == 'changed'

    def test_same_parameter_added_to_two_lists(self):
        parameter = Parameter('a', '1')
        first = ParameterList()
        second = ParameterList()
        first.add(parameter)
        second.add(parameter)
        first.find('a').value = '2'
        assert second.find('a').value == '1'

    def test_add_frozen_parameter_stores_mutable_copy(self):
        parameters = ParameterList()
        parameters.add(FrozenParameter('name', 'value'))
        assert not parameters[0].is_read_only

    @pytest.mark.parametrize('item', [None, 'name=value', ('name', 'value')])
    def test_add_non_parameter(self, item):
        with pytest.raises(TypeError):
            ParameterList().add(item)

    def test_find_is_case_insensitive_and_returns_first(self):
        parameters = ParameterList([Parameter('Q', '0.5'), Parameter('q', '0.9')])
        assert parameters.find('q').value == '0.5'
        assert parameters.find('charset') is None

    def test_remove(self):
        parameters = ParameterList([Parameter('a', '1'), Parameter('b', '2'), Parameter('a', '1')])
        parameters.remove(Parameter('A', '1'))
        assert [str(p) for p in parameters] == ['b=2', 'a=1']

    def test_remove_prefers_same_instance(self):
        parameters = ParameterList([Parameter('a', '1'), Parameter('a', '1')])
        first, second = parameters
        parameters.remove(second)
        assert parameters[0] is first
        assert len(parameters) == 1

    def test_remove_missing_is_ignored(self):
        parameters = ParameterList([Parameter('a', '1')])
        parameters.remove(Parameter('a', '2'))
        parameters.remove(Parameter('b'))
        assert len(parameters) == 1

    def test_clear(self):
        parameters = ParameterList([Parameter('a', '1'), Parameter('b')])
        parameters.clear()
        assert len(parameters) == 0
        assert list(parameters) == []

    def test_constructor_copies(self):
        original = Parameter('a', '1')
        parameters = ParameterList([original])
        assert parameters[0] is not original
        assert parameters[0] == original

    def test_contains(self):
        parameters = ParameterList([Parameter('charset', 'utf-8')])
        assert Parameter('CharSet', 'UTF-8') in parameters
        assert Parameter('charset') not in parameters

    def test_equality_ignores_order(self):
        left = ParameterList([Parameter('a', '1'), Parameter('b', '2')])
        right = ParameterList([Parameter('B', '2'), Parameter('A', '1')])
        assert left == right
        assert hash(left) == hash(right)

    def test_equality_needs_same_count(self):
        left = ParameterList([Parameter('a', '1')])
        right = ParameterList([Parameter('a', '1'), Parameter('a', '1')])
        assert left != right

    @pytest.mark.parametrize('left, right', [
        ([('a', '1'), ('a', '1'), ('b', '2')], [('a', '1'), ('b', '2'), ('c', '3')]),
        ([('a', '1'), ('a', '1'), ('b', '2')], [('a', '1'), ('b', '2'), ('b', '2')]),
    ])
    def test_equality_counts_repeated_parameters(self, left, right):
        left = ParameterList([Parameter(*pair) for pair in left])
        right = ParameterList([Parameter(*pair) for pair in right])
        assert left != right
        assert right != left

    def test_equality_with_repeated_parameters(self):
        left = ParameterList([Parameter('a', '1'), Parameter('b', '2'), Parameter('A', '1')])
        right = ParameterList([Parameter('b', '2'), Parameter('a', '1'), Parameter('a', '1')])
        assert left == right
        assert right == left
        assert hash(left) == hash(right)

    def test_copy_as_read_only_is_deep(self):
        parameters = ParameterList([Parameter('a', '1')])
        frozen = parameters.copy_as_read_only()
        assert isinstance(frozen, FrozenParameterList)
        assert frozen.is_read_only
        assert frozen[0].is_read_only
        assert frozen[0] is not parameters[0]
        assert frozen == parameters

    def test_freeze(self):
        parameters = ParameterList([Parameter('a', '1')])
        frozen = parameters.freeze()
        assert isinstance(frozen, FrozenParameterList)
        assert frozen[0].is_read_only
        assert frozen == parameters
        parameters.add(Parameter('b'))
        assert len(frozen) == 1

    def test_freeze_is_idempotent(self):
        frozen = ParameterList([Parameter('a', '1')]).freeze()
        assert frozen.freeze() is frozen
        assert frozen.freeze().is_read_only

    def test_copy_of_frozen_is_mutable(self):
        frozen = FrozenParameterList([Parameter('a', '1')])
        parameters = frozen.copy()
        assert not parameters.is_read_only
        assert not parameters[0].is_read_only
        parameters.add(Parameter('b'))
        assert len(frozen) == 1


class TestFrozenParameterList:
    @pytest.fixture
    def frozen(self):
        return FrozenParameterList([Parameter('name', 'value')])

    def test_add(self, frozen):
        with pytest.raises(ReadOnlyError):
            frozen.add(Parameter('name'))

    def test_add_none_reports_read_only_first(self, frozen):
        with pytest.raises(ReadOnlyError):
            frozen.add(None)

    def test_remove(self, frozen):
        with pytest.raises(ReadOnlyError):
            frozen.remove(Parameter('name', 'value'))

    def test_clear(self, frozen):
        with pytest.raises(ReadOnlyError):
            frozen.clear()

    def test_parameters_are_frozen(self, frozen):
        with pytest.raises(ReadOnlyError):
            frozen[0].value = 'other'

    def test_reading_still_works(self, frozen):
        assert len(frozen) == 1
        assert frozen.find('NAME').value == 'value'
        assert [str(p) for p in frozen] == ['name=value']
