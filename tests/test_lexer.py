from snl.lexer    import Lexer, Token
from snl.reporter import Reporter

def tokenize(text, reporter = None):
    return list(Lexer(reporter or Reporter()).tokenize(text))

def test_keywords_and_identifiers():
    tokens = tokenize("program p1 begin endwh end.")
    assert [t.type for t in tokens] == ['PROGRAM', 'IDENT', 'BEGIN', 'ENDWH', 'END', 'DOT']
    assert tokens[1].value == 'p1'

def test_array_bounds_and_assign():
    tokens = tokenize("array[1..10] of char; x := 10")
    assert [t.type for t in tokens] == [
        'ARRAY', 'LMIDPAREN', 'INTC', 'UNDERANGE', 'INTC', 'RMIDPAREN',
        'OF', 'CHAR', 'SEMI', 'IDENT', 'ASSIGN', 'INTC',
    ]
    assert tokens[2].value == 1
    assert tokens[4].value == 10

def test_operators():
    tokens = tokenize("a+b-c*d/e<f=g,h")
    assert [t.type for t in tokens if t.type != 'IDENT'] == [
        'PLUS', 'MINUS', 'TIMES', 'OVER', 'LT', 'EQ', 'COMMA',
    ]

def test_positions():
    tokens = tokenize("begin\n  x := 1\nend")
    assert [(t.line, t.column) for t in tokens] == [(1, 1), (2, 3), (2, 5), (2, 8), (3, 1)]

def test_comments_are_skipped_and_count_lines():
    tokens = tokenize("{ a\n comment }\nx")
    assert len(tokens) == 1
    assert (tokens[0].type, tokens[0].line, tokens[0].column) == ('IDENT', 3, 1)

def test_illegal_character_is_logged_and_skipped():
    reporter = Reporter()
    tokens   = tokenize("x @ y", reporter)
    assert [t.value for t in tokens] == ['x', 'y']
    assert len(reporter.errors) == 1
    assert "illegal character '@'" in reporter.errors[0]

def test_token_display():
    assert str(Token('IDENT', 'x', 4, 2)) == "4\tIDENT\tx"
    assert str(Token('SEMI', ';', 4, 3)) == "4\tSEMI"
