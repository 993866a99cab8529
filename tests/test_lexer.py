import pytest

from pathmaker.errors import LexError
from pathmaker.parser import tokenize, format_tokens
from pathmaker.types import (
    MAKE, GO, IF, IFNOT, LANGLE, RANGLE, LBRACE, RBRACE, SLASH, STAR, SEMI, DIRNAME,
)


def types_of(source):
    return [tok.type for tok in tokenize(source)]


def test_statement_tokens():
    tokens = tokenize('make <AbC_1/x>;')
    assert [t.type for t in tokens] == [MAKE, LANGLE, DIRNAME, SLASH, DIRNAME, RANGLE, SEMI]
    assert tokens[2].value == 'abc_1'


def test_symbols_need_no_whitespace():
    assert types_of('if<*/a>{go<b>;}') == [
        IF, LANGLE, STAR, SLASH, DIRNAME, RANGLE, LBRACE, GO, LANGLE, DIRNAME, RANGLE, SEMI, RBRACE,
    ]


def test_keywords_are_case_sensitive_and_exact():
    assert types_of('make go if ifnot') == [MAKE, GO, IF, IFNOT]
    tokens = tokenize('Make makefile ifx GO')
    assert [t.type for t in tokens] == [DIRNAME] * 4
    assert [t.value for t in tokens] == ['make', 'makefile', 'ifx', 'go']


@pytest.mark.parametrize('name', ['a', 'Data', 'MY_dir_2', 'x_', 'ABC'])
def test_case_folding_is_idempotent(name):
    folded = tokenize(name)[0].value
    assert folded == name.lower()
    assert tokenize(folded)[0].value == folded


def test_tokens_carry_lines():
    tokens = tokenize('make <a>;\n\ngo <b>;')
    assert tokens[0].line == 1
    go = [t for t in tokens if t.type == GO][0]
    assert go.line == 3
    assert go.column == 1


def test_unrecognized_character_reports_run():
    with pytest.raises(LexError) as exc:
        tokenize('make <a-b>;')
    assert exc.value.kind == LexError.UNRECOGNIZED_CHARACTER
    assert '"a-b"' in exc.value.message
    assert exc.value.line == 1


def test_name_cannot_start_with_digit():
    with pytest.raises(LexError) as exc:
        tokenize('go <9lives>;')
    assert '"9lives"' in exc.value.message


def test_identifier_length_limit():
    assert tokenize('a' * 10, max_identifier_length=10)[0].value == 'a' * 10
    with pytest.raises(LexError) as exc:
        tokenize('make <' + 'a' * 11 + '>;', max_identifier_length=10)
    assert exc.value.kind == LexError.IDENTIFIER_TOO_LONG


def test_token_listing():
    assert format_tokens(tokenize('make <*/Out>;')) == (
        't_make\nt_LessThanSign\nt_Astrix\nt_ForwardSlash\nout\nt_GreaterThanSign\nt_EndOfLine\n'
    )
