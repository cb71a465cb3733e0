
import pytest

from justargs import ParsedArgs, Parser, SwitchRegistry


def get_result():
    return ParsedArgs(['a', 'b'], ['c'],
                      {'output': ['x.txt', 'y.txt']},
                      {'verbose': [True, False, True], 'color': [False]})


def test_result_containers():
    res = get_result()

    assert res.posargs == ('a', 'b')
    assert res.overflow_posargs == ('c',)
    assert res.options == {'output': ('x.txt', 'y.txt')}
    assert res.flags == {'verbose': (True, False, True), 'color': (False,)}
    assert list(res.flags) == ['verbose', 'color']


def test_result_is_read_only():
    res = get_result()

    with pytest.raises(AttributeError):
        res.posargs = ()
    with pytest.raises(AttributeError):
        res.options = {}
    with pytest.raises(TypeError):
        res.options['output'] = ('z.txt',)
    with pytest.raises(TypeError):
        res.flags.pop('verbose')
    with pytest.raises(AttributeError):
        res.options['output'].append('z.txt')


def test_result_does_not_alias_inputs():
    posargs = ['a']
    values = ['x.txt']
    options = {'output': values}
    res = ParsedArgs(posargs, [], options, {})

    posargs.append('b')
    values.append('y.txt')
    options['other'] = ['z']

    assert res.posargs == ('a',)
    assert res.options == {'output': ('x.txt',)}


def test_get_option_and_flag():
    res = get_result()

    assert res.get_option('output') == 'y.txt'
    assert res.get_option('missing') is None
    assert res.get_option('missing', 'default.txt') == 'default.txt'

    assert res.get_flag('verbose') is True
    assert res.get_flag('color') is False
    assert res.get_flag('missing') is None
    assert res.get_flag('missing', True) is True


def test_result_eq():
    assert get_result() == get_result()
    assert hash(get_result()) == hash(get_result())
    assert get_result() != ParsedArgs(['a', 'b'], ['c'], {}, {})
    # capping is part of the value
    assert (ParsedArgs(['a'], ['b'], {}, {})
            != ParsedArgs(['a', 'b'], [], {}, {}))
    assert get_result() != object()


def test_result_repr():
    res = ParsedArgs(['a'], [], {'output': ['x']}, {'verbose': [True]})

    assert repr(res) == ("ParsedArgs(('a',), (), FrozenDict({'output': ('x',)}),"
                         " FrozenDict({'verbose': (True,)}))")


def test_parsed_result_matches_constructed():
    reg = SwitchRegistry({'o': 'output'}, {}, {'v': 'verbose'}, {}, {'V': 'verbose'}, {})
    res = Parser(reg, 2).parse(['a', '-o', 'x.txt', 'b', '-vVv', '-o', 'y.txt', 'c'])

    assert res == ParsedArgs(['a', 'b'], ['c'],
                             {'output': ['x.txt', 'y.txt']},
                             {'verbose': [True, False, True]})
