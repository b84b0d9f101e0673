import pytest
import forthlet


@pytest.fixture
def words():
    d = forthlet.Dictionary()
    for name in ['+', '-', '*', '/', 'drop', 'dup', 'swap', 'over']:
        d.add_builtin(name)
    return d


class TestDictionary():
    def test_builtins_expand_to_themselves(self, words):
        assert words['dup'] == ('dup',)
        assert words.is_builtin('dup')
        assert len(words) == 8

    def test_resolve_number(self, words):
        assert words.resolve('42') == (42,)
        assert words.resolve('-3') == (-3,)

    def test_resolve_unknown(self, words):
        with pytest.raises(forthlet.UnknownWord) as excinfo:
            words.resolve('nope')

        assert excinfo.value.word == 'nope'
        assert str(excinfo.value) == 'unknown word: nope'

    def test_define(self, words):
        assert words.define('square', ['dup', '*']) == ('dup', '*')
        assert words['square'] == ('dup', '*')
        assert not words.is_builtin('square')

    def test_define_expands_eagerly(self, words):
        words.define('two', ['2'])
        words.define('double', ['two', '*'])

        assert words['double'] == (2, '*')

    def test_nested_definitions_stay_flat(self, words):
        words.define('a', ['1', 'dup'])
        words.define('b', ['a', 'a', '+'])
        words.define('c', ['b', 'swap'])

        assert words['c'] == (1, 'dup', 1, 'dup', '+', 'swap')

    def test_redefinition_keeps_old_snapshots(self, words):
        words.define('foo', ['dup'])
        words.define('bar', ['foo', 'foo'])
        words.define('foo', ['5'])

        assert words['foo'] == (5,)
        assert words['bar'] == ('dup', 'dup')

    def test_redefining_a_builtin(self, words):
        words.define('plus', ['+'])
        words.define('+', ['*'])

        assert not words.is_builtin('+')
        assert words['+'] == ('*',)
        assert words['plus'] == ('+',)

    def test_self_reference_uses_previous_meaning(self, words):
        words.define('foo', ['1'])
        words.define('foo', ['foo', '1', '+'])

        assert words['foo'] == (1, 1, '+')

    def test_numeric_name(self, words):
        with pytest.raises(forthlet.InvalidWord) as excinfo:
            words.define('1', ['2'])

        assert excinfo.value.word == '1'
        assert '1' not in words

    def test_missing_name(self, words):
        with pytest.raises(forthlet.InvalidWord):
            words.define(None, [])

    def test_unknown_word_in_body(self, words):
        with pytest.raises(forthlet.UnknownWord):
            words.define('foo', ['1', 'bar'])

        assert 'foo' not in words

    def test_empty_body(self, words):
        assert words.define('noop', []) == ()

    def test_copy_is_independent(self, words):
        other = words.copy()
        other.define('foo', ['1'])

        assert 'foo' in other
        assert 'foo' not in words

    def test_names(self, words):
        words.define('zz', [])

        assert words.names() == sorted(['+', '-', '*', '/', 'drop', 'dup',
                                        'swap', 'over', 'zz'])
