import ply.yacc

from .ast       import *
from .lexer     import Lexer
from .reporter  import Reporter

class Parser:
    tokens      = Lexer.tokens
    start       = 'program'

    def __init__(self, reporter: Reporter):
        self.reporter   = reporter
        self.lexer      = Lexer(self.reporter)
        self.parser     = ply.yacc.yacc(
            module      = self,
            write_tables= False,
            debug       = False,
        )

    def parse(self, text: str) -> Opt[Positional[Program]]:
        self.lexer.lexer.lineno = 1

        return self.parser.parse(
            text,
            lexer       = self.lexer.lexer,
            tracking    = True
        )

    def _at(self, p, i, value):
        return Positional(
            line        = p.lineno(i),
            column      = self.lexer.column(p.lexpos(i)),
            value       = value,
        )

    # ----------------------------------------------------------------
    # program and declarations

    def p_program(self, p):
        """program : PROGRAM IDENT opt_semi declare_part BEGIN stmt_list END DOT"""
        p[0] = self._at(p, 1, Program(
            name        = p[2],
            declare     = p[4],
            body        = p[6],
        ))

    def p_opt_semi(self, p):
        """opt_semi :
                    | SEMI"""
        p[0] = None

    def p_declare_part(self, p):
        """declare_part : type_part var_part proc_part"""
        p[0] = ProgramDeclare(
            type_declare        = p[1],
            variable_declare    = p[2],
            procedure_declare   = p[3],
        )

    def p_type_part(self, p):
        """type_part :
                     | TYPE type_decls"""
        p[0] = [] if len(p) == 1 else p[2]

    def p_type_decls(self, p):
        """type_decls : type_decl
                      | type_decls type_decl"""
        if len(p) == 2:
            p[0] = [p[1]]
        else:
            p[0] = p[1]
            p[0].append(p[2])

    def p_type_decl(self, p):
        """type_decl : IDENT EQ type SEMI"""
        p[0] = self._at(p, 1, TypeDeclare(
            name        = p[1],
            base        = p[3],
        ))

    def p_var_part(self, p):
        """var_part :
                    | VAR var_decls"""
        p[0] = [] if len(p) == 1 else p[2]

    def p_var_decls(self, p):
        """var_decls : var_decl
                     | var_decls var_decl"""
        if len(p) == 2:
            p[0] = [p[1]]
        else:
            p[0] = p[1]
            p[0].append(p[2])

    def p_var_decl(self, p):
        """var_decl : typed_identifiers SEMI"""
        p[0] = p[1]

    def p_typed_identifiers(self, p):
        """typed_identifiers : type ident_list"""
        p[0] = Positional.at(p[1], TypedIdentifiers(
            type_name   = p[1],
            identifiers = p[2],
        ))

    def p_ident_list(self, p):
        """ident_list : IDENT
                      | ident_list COMMA IDENT"""
        if len(p) == 2:
            p[0] = [self._at(p, 1, p[1])]
        else:
            p[0] = p[1]
            p[0].append(self._at(p, 3, p[3]))

    def p_proc_part(self, p):
        """proc_part :
                     | proc_part proc_decl"""
        if len(p) == 1:
            p[0] = []
        else:
            p[0] = p[1]
            p[0].append(p[2])

    def p_proc_decl(self, p):
        """proc_decl : PROCEDURE IDENT LPAREN param_list RPAREN SEMI declare_part BEGIN stmt_list END opt_semi"""
        p[0] = self._at(p, 2, ProcedureDeclare(
            name        = p[2],
            params      = p[4],
            declare     = p[7],
            body        = p[9],
        ))

    def p_param_list(self, p):
        """param_list :
                      | params"""
        p[0] = [] if len(p) == 1 else p[1]

    def p_params(self, p):
        """params : param
                  | params SEMI param"""
        if len(p) == 2:
            p[0] = [p[1]]
        else:
            p[0] = p[1]
            p[0].append(p[3])

    def p_param(self, p):
        """param : typed_identifiers
                 | VAR typed_identifiers"""
        if len(p) == 2:
            p[0] = Positional.at(p[1], Param(is_var = False, definition = p[1].value))
        else:
            p[0] = self._at(p, 1, Param(is_var = True, definition = p[2].value))

    # ----------------------------------------------------------------
    # types

    def p_type_integer(self, p):
        """type : INTEGER"""
        p[0] = self._at(p, 1, IntegerType())

    def p_type_char(self, p):
        """type : CHAR"""
        p[0] = self._at(p, 1, CharType())

    def p_type_named(self, p):
        """type : IDENT"""
        p[0] = self._at(p, 1, NamedType(p[1]))

    def p_type_array(self, p):
        """type : ARRAY LMIDPAREN INTC UNDERANGE INTC RMIDPAREN OF base_type"""
        p[0] = self._at(p, 1, ArrayType(
            base        = p[8],
            lower_bound = p[3],
            upper_bound = p[5],
        ))

    def p_base_type(self, p):
        """base_type : INTEGER
                     | CHAR"""
        p[0] = BaseType(p[1])

    def p_type_record(self, p):
        """type : RECORD field_decls END"""
        p[0] = self._at(p, 1, RecordType(p[2]))

    def p_field_decls(self, p):
        """field_decls : var_decl
                       | field_decls var_decl"""
        if len(p) == 2:
            p[0] = [p[1].value]
        else:
            p[0] = p[1]
            p[0].append(p[2].value)

    # ----------------------------------------------------------------
    # statements

    def p_stmt_list(self, p):
        """stmt_list :
                     | stmts
                     | stmts SEMI"""
        p[0] = [] if len(p) == 1 else p[1]

    def p_stmts(self, p):
        """stmts : stmt
                 | stmts SEMI stmt"""
        if len(p) == 2:
            p[0] = [p[1]]
        else:
            p[0] = p[1]
            p[0].append(p[3])

    def p_conditional(self, p):
        """stmt : IF rel_exp THEN stmt_list ELSE stmt_list FI
                | IF rel_exp THEN stmt_list FI"""
        p[0] = ConditionalStatement(
            condition   = p[2],
            body        = p[4],
            else_body   = p[6] if len(p) == 8 else [],
        )

    def p_loop(self, p):
        """stmt : WHILE rel_exp DO stmt_list ENDWH"""
        p[0] = LoopStatement(
            condition   = p[2],
            body        = p[4],
        )

    def p_input(self, p):
        """stmt : READ LPAREN IDENT RPAREN"""
        p[0] = InputStatement(self._at(p, 3, p[3]))

    def p_output(self, p):
        """stmt : WRITE LPAREN exp RPAREN"""
        p[0] = OutputStatement(p[3])

    def p_return(self, p):
        """stmt : RETURN LPAREN exp RPAREN"""
        p[0] = ReturnStatement(p[3])

    def p_assign(self, p):
        """stmt : variable ASSIGN exp"""
        p[0] = AssignStatement(
            variable    = p[1],
            value       = p[3],
        )

    def p_call(self, p):
        """stmt : IDENT LPAREN RPAREN
                | IDENT LPAREN args RPAREN"""
        p[0] = CallStatement(self._at(p, 1, Call(
            name        = p[1],
            params      = p[3] if len(p) == 5 else [],
        )))

    def p_args(self, p):
        """args : exp
                | args COMMA exp"""
        if len(p) == 2:
            p[0] = [p[1]]
        else:
            p[0] = p[1]
            p[0].append(p[3])

    # ----------------------------------------------------------------
    # expressions

    def p_rel_exp(self, p):
        """rel_exp : exp LT exp
                   | exp EQ exp"""
        p[0] = RelationExpression(
            left        = p[1],
            op          = p[2],
            right       = p[3],
        )

    def p_exp(self, p):
        """exp : term
               | term PLUS  exp
               | term MINUS exp"""
        p[0] = Expression(left = p[1])
        if len(p) == 4:
            p[0].op     = p[2]
            p[0].right  = Positional.at(p[3].left, p[3])

    def p_term(self, p):
        """term : factor
                | factor TIMES term
                | factor OVER  term"""
        p[0] = Positional.at(p[1], Term(left = p[1]))
        if len(p) == 4:
            p[0].value.op     = p[2]
            p[0].value.right  = p[3]

    def p_factor_bracket(self, p):
        """factor : LPAREN exp RPAREN"""
        p[0] = self._at(p, 1, BracketFactor(p[2]))

    def p_factor_constant(self, p):
        """factor : INTC"""
        p[0] = self._at(p, 1, ConstantFactor(p[1]))

    def p_factor_variable(self, p):
        """factor : variable"""
        p[0] = Positional.at(p[1].base, VariableFactor(p[1]))

    def p_variable(self, p):
        """variable : IDENT visit"""
        p[0] = VariableRepresent(
            base        = self._at(p, 1, p[1]),
            visit       = p[2],
        )

    def p_visit(self, p):
        """visit :
                 | DOT IDENT
                 | LMIDPAREN exp RMIDPAREN
                 | DOT IDENT LMIDPAREN exp RMIDPAREN"""
        match len(p):
            case 1:
                p[0] = None
            case 3:
                p[0] = VariableVisit(dot = self._at(p, 2, p[2]))
            case 4:
                p[0] = VariableVisit(sqbr = p[2])
            case 6:
                p[0] = VariableVisit(dot = self._at(p, 2, p[2]), sqbr = p[4])

    def p_error(self, p):
        if p:
            self.reporter.log(f"syntax error at line {p.lineno}, "
                              f"column {self.lexer.column(p.lexpos)}: unexpected '{p.value}'")
        else:
            self.reporter.log("syntax error at end of file")
