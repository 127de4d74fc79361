import pytest

from tinyforth import (Forth, InvalidWord, UnknownWord, UnterminatedDefinition,
                       StackUnderflow, DivisionByZero)


def run(text):
    forth = Forth()
    forth.eval(text)
    return list(forth.current_stack())


@pytest.mark.parametrize(
    'source,                                  expected', [
    (': square dup * ; 3 square',             [9]),
    (': SQUARE DUP * ; 3 Square',             [9]),
    (': dup-twice dup dup ; 1 dup-twice',     [1, 1, 1]),
    (': countup 1 2 3 ; countup',             [1, 2, 3]),
    (': swap dup ; 1 swap',                   [1, 1]),
    (': foo dup ; : foo dup dup ; 1 foo',     [1, 1, 1]),
    (': foo 5 ; : bar foo ; : foo 6 ; bar',   [5]),
    (': foo 10 ; : foo foo 1 + ; foo',        [11]),
    (': noop ; 1 noop',                       [1]),
    (': neg -1 * ; 4 neg',                    [-4]),
])
def test_user_words(source, expected):
    assert run(source) == expected


def test_redefinition_does_not_change_earlier_definitions():
    source = ': DOUBLE 2 * ; : QUADRUPLE DOUBLE DOUBLE ; : DOUBLE 3 * ; 5 QUADRUPLE'
    assert run(source) == [20]


def test_overriding_builtin_does_not_change_earlier_definitions():
    forth = Forth()
    forth.eval(': add + ;')
    forth.eval(': + * ;')
    forth.eval('3 4 add 3 4 +')
    assert forth.current_stack() == (7, 12)


def test_definition_spans_lines():
    assert run(': square\n  dup *\n;\n3 square') == [9]


def test_definition_does_not_touch_stack():
    forth = Forth()
    forth.eval('1 2 : foo + ;')
    assert forth.current_stack() == (1, 2)


@pytest.mark.parametrize(
    'source', [
    ': 5 DUP ;',
    ': -1 2 ;',
    ': +3 2 ;',
    ': ; ;',
    ': : 1 ;',
])
def test_invalid_word_name(source):
    forth = Forth()
    with pytest.raises(InvalidWord):
        forth.eval(source)
    assert forth.definitions() == []


def test_number_stays_a_number_after_failed_redefinition():
    forth = Forth()
    with pytest.raises(InvalidWord):
        forth.eval(': 1 2 ;')
    forth.eval('1')
    assert forth.current_stack() == (1,)


@pytest.mark.parametrize(
    'source', [
    ': FOO DUP',
    ': FOO',
    ':',
    '1 2 : FOO 1 +',
])
def test_unterminated_definition(source):
    forth = Forth()
    with pytest.raises(UnterminatedDefinition):
        forth.eval(source)
    assert 'foo' not in forth.words
    assert forth.definitions() == []


def test_unterminated_definition_keeps_previous_meaning():
    forth = Forth()
    forth.eval(': foo 1 ;')
    with pytest.raises(UnterminatedDefinition):
        forth.eval(': foo 2')
    forth.eval('foo')
    assert forth.current_stack() == (1,)


def test_unknown_word_in_body_is_rejected_at_definition_time():
    forth = Forth()
    with pytest.raises(UnknownWord) as excinfo:
        forth.eval(': foo bar ;')
    assert excinfo.value.word == 'bar'
    assert 'foo' not in forth.words


def test_nested_definition_is_rejected():
    forth = Forth()
    with pytest.raises(UnknownWord):
        forth.eval(': foo : bar ; ;')


def test_self_reference_without_previous_meaning():
    forth = Forth()
    with pytest.raises(UnknownWord):
        forth.eval(': foo foo ;')


def test_failure_inside_user_word_keeps_earlier_effects():
    forth = Forth()
    forth.eval(': boom 1 2 + drop drop drop ;')
    with pytest.raises(StackUnderflow):
        forth.eval('boom')
    assert forth.current_stack() == ()

    forth.eval(': half 0 / ;')
    with pytest.raises(DivisionByZero):
        forth.eval('8 half')
    assert forth.current_stack() == (8, 0)


def test_definitions_listing():
    forth = Forth()
    forth.eval(': double 2 * ; : quad double double ;')
    assert forth.definitions() == [
        ('DOUBLE', '2 *', '2 *'),
        ('QUAD', 'double double', '2 * 2 *'),
    ]


def test_words_after_definition_are_evaluated():
    forth = Forth()
    forth.eval(': inc 1 + ; 1 inc inc')
    assert forth.current_stack() == (3,)
