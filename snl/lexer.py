import dataclasses as dc
import ply.lex
import re

@dc.dataclass
class Token:
    type   : str
    value  : str | int
    line   : int
    column : int

    def __str__(self):
        if self.type in ('IDENT', 'INTC'):
            return f"{self.line}\t{self.type}\t{self.value}"
        return f"{self.line}\t{self.type}"

class Lexer:
    keywords = {
        x: x.upper() for x in (
            'program'   ,
            'type'      ,
            'var'       ,
            'procedure' ,
            'begin'     ,
            'end'       ,
            'array'     ,
            'of'        ,
            'record'    ,
            'integer'   ,
            'char'      ,
            'if'        ,
            'then'      ,
            'else'      ,
            'fi'        ,
            'while'     ,
            'do'        ,
            'endwh'     ,
            'read'      ,
            'write'     ,
            'return'    ,
        )
    }

    tokens = (
        'IDENT'  ,              # : str
        'INTC'   ,              # : int

        # Punctuation
        'LPAREN'       ,
        'RPAREN'       ,
        'LMIDPAREN'    ,
        'RMIDPAREN'    ,
        'COMMA'        ,
        'SEMI'         ,
        'DOT'          ,
        'UNDERANGE'    ,
        'ASSIGN'       ,

        'PLUS'         ,
        'MINUS'        ,
        'TIMES'        ,
        'OVER'         ,
        'LT'           ,
        'EQ'           ,
    ) + tuple(keywords.values())

    t_LPAREN    = re.escape('(')
    t_RPAREN    = re.escape(')')
    t_LMIDPAREN = re.escape('[')
    t_RMIDPAREN = re.escape(']')
    t_COMMA     = re.escape(',')
    t_SEMI      = re.escape(';')
    t_DOT       = re.escape('.')
    t_UNDERANGE = re.escape('..')
    t_ASSIGN    = re.escape(':=')

    t_PLUS      = re.escape('+')
    t_MINUS     = re.escape('-')
    t_TIMES     = re.escape('*')
    t_OVER      = re.escape('/')
    t_LT        = re.escape('<')
    t_EQ        = re.escape('=')

    t_ignore = ' \t\r'          # Ignore all whitespaces

    def __init__(self, reporter):
        self.reporter = reporter
        self.lexer    = ply.lex.lex(module = self)

    def column(self, lexpos):
        """
        1-based column of a position in the current input
        """
        start = self.lexer.lexdata.rfind('\n', 0, lexpos) + 1
        return lexpos - start + 1

    def tokenize(self, text):
        self.lexer.input(text)
        self.lexer.lineno = 1

        for tok in iter(self.lexer.token, None):
            yield Token(tok.type, tok.value, tok.lineno, self.column(tok.lexpos))

    def t_comment(self, t):
        r'\{[^}]*\}'
        t.lexer.lineno += t.value.count('\n')

    def t_newline(self, t):
        r'\n+'
        t.lexer.lineno += len(t.value)

    def t_IDENT(self, t):
        r'[a-zA-Z][a-zA-Z0-9]*'
        if t.value in self.keywords:
            t.type  = self.keywords[t.value]
        return t

    def t_INTC(self, t):
        r'\d+'
        t.value = int(t.value)
        return t

    def t_error(self, t):
        self.reporter.log(f"lexer: illegal character '{t.value[0]}' "
                          f"at line {t.lexer.lineno}, column {self.column(t.lexpos)} -- skipping")
        t.lexer.skip(1)
