"""
Tests for the sprs lexer
"""
import pytest

from sprs.exceptions import LexError
from sprs.lexer import INT_MAX, tokenize


def token_types(source: str) -> list[str]:
    tokens, _ = tokenize(source)
    return [tok.type for tok in tokens]


def test_function_header_tokens():
    """
    Test that a function header produces the expected token stream.
    """
    assert token_types("fn add(a, b) {}") == [
        'FN', 'ID', 'LPAREN', 'ID', 'COMMA', 'ID', 'RPAREN', 'LBRACE', 'RBRACE', 'EOF',
    ]


def test_double_equals_is_one_token():
    """
    Test that '==' is lexed as a single token, not two assignments.
    """
    assert token_types("a == b = c") == ['ID', 'EQ', 'ID', 'ASSIGN', 'ID', 'EOF']
    assert token_types("a===b") == ['ID', 'EQ', 'ASSIGN', 'ID', 'EOF']


def test_keywords_take_priority_over_identifiers():
    """
    Test that keywords are recognized but identifiers containing them are not split.
    """
    assert token_types("if then else fn return true false") == [
        'IF', 'THEN', 'ELSE', 'FN', 'RETURN', 'TRUE', 'FALSE', 'EOF',
    ]
    tokens, _ = tokenize("iffy fn_x returned _then")
    assert [(t.type, t.value) for t in tokens[:-1]] == [
        ('ID', 'iffy'), ('ID', 'fn_x'), ('ID', 'returned'), ('ID', '_then'),
    ]


def test_number_and_string_values():
    """
    Test that literal tokens carry parsed values.
    """
    tokens, _ = tokenize('x = 42; s = "hi there";')
    assert tokens[2].type == 'NUMBER'
    assert tokens[2].value == 42
    assert tokens[6].type == 'STRING'
    assert tokens[6].value == 'hi there'


def test_whitespace_is_discarded_and_positions_tracked():
    """
    Test that whitespace produces no tokens and positions are 1-based.
    """
    tokens, _ = tokenize("fn main()\n  {\tprint(1);\n}")
    brace = tokens[4]
    assert brace.type == 'LBRACE'
    assert (brace.line, brace.column) == (2, 3)
    print_tok = tokens[5]
    assert (print_tok.value, print_tok.line, print_tok.column) == ('print', 2, 5)
    assert tokens[-1].type == 'EOF'
    assert tokens[-1].line == 3


def test_unexpected_character_raises():
    """
    Test that characters outside every token class fail with position context.
    """
    with pytest.raises(LexError) as exc:
        tokenize("fn main() {\n  x = 1 - 2;\n}")
    assert "'-'" in str(exc.value)
    assert exc.value.line == 2
    assert exc.value.column == 9


def test_non_ascii_digits_raise():
    """
    Test that only ASCII digits form integer literals.
    """
    with pytest.raises(LexError) as exc:
        tokenize("fn main() { print(١٢); }")
    assert "'١'" in str(exc.value)
    assert exc.value.line == 1
    assert exc.value.column == 19


def test_comments_are_not_supported():
    """
    Test that '#' is not a comment marker.
    """
    with pytest.raises(LexError):
        tokenize("# note\nfn main() {}")


def test_integer_literal_overflow():
    """
    Test that literals beyond the signed 64-bit range are rejected.
    """
    tokens, _ = tokenize(str(INT_MAX))
    assert tokens[0].value == INT_MAX
    with pytest.raises(LexError) as exc:
        tokenize(str(INT_MAX + 1))
    assert "64 bits" in str(exc.value)


def test_token_map_literals():
    """
    Test that fixed spellings are mapped back to their token types.
    """
    _, token_map = tokenize("")
    assert token_map['=='] == 'EQ'
    assert token_map['='] == 'ASSIGN'
    assert token_map['{'] == 'LBRACE'
    assert token_map['then'] == 'THEN'
