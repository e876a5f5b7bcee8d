# --------------------------------------------------------------------
import contextlib as cl

from snl.ast        import *
from snl.reporter   import Reporter
from .snlerrors     import Error, ErrorKind, Errors
from .snlscope      import *
from .snltypes      import *

# ====================================================================
# Analysis context: one per compilation unit

class Context:
    def __init__(self):
        self.scope  = Scope()
        self.errors = Errors()

    def report(self, position: Positional, kind: ErrorKind, **payload):
        self.errors.add(Error(kind, **payload), position)

    @cl.contextmanager
    def in_proc(self, name: str, symbol: ProcedureSymbol):
        with self.scope.in_subscope():
            self.scope.push(name, symbol)
            yield self

# --------------------------------------------------------------------
class DeclarationAnalyzer:
    def __init__(self, context: Context, checker: 'StatementChecker'):
        self.context = context
        self.checker = checker
        self.scope   = context.scope
        self.report  = context.report

    def check_local_free(self, name: Positional[str]):
        if self.scope.islocal(name.value):
            self.report(name, ErrorKind.DuplicatedIdentifier, name = name.value)
            return False
        return True

    def for_type(self, type_: Positional[Type]) -> Ty:
        """
        validate a type expression and return its canonical form
        """
        match type_.value:
            case IntegerType() | CharType():
                pass

            case ArrayType(_, lower_bound, upper_bound):
                if lower_bound > upper_bound:
                    self.report(
                        type_, ErrorKind.InvalidArrayDefinition,
                        got = canonicalize(type_.value, self.scope),
                    )

            case RecordType(fields):
                names = set()
                for group in fields:
                    self.for_type(group.type_name)
                    for name in group.identifiers:
                        if name.value in names:
                            self.report(name, ErrorKind.DuplicatedIdentifier, name = name.value)
                        names.add(name.value)

            case NamedType(name):
                if not isinstance(self.scope.lookup(name), TypeSymbol):
                    self.report(type_, ErrorKind.UndefinedType, name = name)

            case _:
                assert(False)

        return canonicalize(type_.value, self.scope)

    def for_declare(self, declare: ProgramDeclare):
        for decl in declare.type_declare:
            if self.check_local_free(Positional.at(decl, decl.name)):
                self.scope.push(decl.name, TypeSymbol(self.for_type(decl.base)))

        for decl in declare.variable_declare:
            type_ = self.for_type(decl.type_name)
            for name in decl.identifiers:
                if self.check_local_free(name):
                    self.scope.push(name.value, VariableSymbol(type_))

        for decl in declare.procedure_declare:
            self.for_procedure(decl)

    def for_procedure(self, decl: Positional[ProcedureDeclare]):
        arguments = []
        for param in decl.params:
            type_ = self.for_type(param.definition.type_name)
            arguments.extend((name, type_) for name in param.definition.identifiers)

        symbol = ProcedureSymbol(tuple(x[1] for x in arguments))

        if self.check_local_free(Positional.at(decl, decl.name)):
            self.scope.push(decl.name, symbol)

        with self.context.in_proc(decl.name, symbol):
            for name, type_ in arguments:
                if self.check_local_free(name):
                    self.scope.push(name.value, VariableSymbol(type_))

            self.for_declare(decl.declare)
            self.checker.for_statements(decl.body)

# --------------------------------------------------------------------
class StatementChecker:
    def __init__(self, context: Context):
        self.context = context
        self.scope   = context.scope
        self.report  = context.report

    def for_expression(self, expr: Expression) -> Ty:
        type_ = self.for_term(expr.left.value)

        if expr.right is not None:
            rtype = self.for_expression(expr.right.value)
            if not equals(type_, rtype):
                self.report(
                    expr.right, ErrorKind.UncompatableType,
                    expected = type_, got = rtype,
                )

        return type_

    def for_term(self, term: Term) -> Ty:
        type_ = self.for_factor(term.left.value)

        if term.right is not None:
            rtype = self.for_term(term.right.value)
            if not equals(type_, rtype):
                self.report(
                    term.right, ErrorKind.UncompatableType,
                    expected = type_, got = rtype,
                )

        return type_

    def for_factor(self, factor: Factor) -> Ty:
        match factor:
            case ConstantFactor(_):
                return INTEGER

            case BracketFactor(expression):
                return self.for_expression(expression)

            case VariableFactor(variable):
                return self.for_variable(variable)

            case _:
                assert(False)

    def for_variable(self, variable: VariableRepresent) -> Ty:
        base = variable.base

        match self.scope.lookup(base.value):
            case None:
                self.report(base, ErrorKind.UndefinedIdentifier, name = base.value)
                type_ = UNKNOWN

            case VariableSymbol(vtype):
                type_ = vtype

            case _:
                self.report(base, ErrorKind.InvalidVariableRepresent, name = base.value)
                type_ = UNKNOWN

        if variable.visit is None:
            return type_

        if (field := variable.visit.dot) is not None:
            match type_:
                case TyUnknown():
                    pass

                case TyRecord():
                    type_ = type_.field(field.value)
                    if type_ is None:
                        self.report(field, ErrorKind.UndefinedRecordField, name = field.value)
                        type_ = UNKNOWN

                case _:
                    self.report(
                        field, ErrorKind.InvalidFieldIndexType,
                        name = field.value, got = type_,
                    )
                    type_ = UNKNOWN

        if (index := variable.visit.sqbr) is not None:
            itype = self.for_expression(index)

            match type_:
                case TyUnknown():
                    pass

                case TyArray(etype, _, _):
                    if not equals(INTEGER, itype):
                        self.report(
                            index.left, ErrorKind.UncompatableType,
                            expected = INTEGER, got = itype,
                        )
                    type_ = etype

                case _:
                    self.report(index.left, ErrorKind.UnexpectedArrayIndex, got = type_)
                    type_ = UNKNOWN

        return type_

    def for_relation(self, relation: RelationExpression):
        for expr in (relation.left, relation.right):
            type_ = self.for_expression(expr)
            if not (is_unknown(type_) or is_base(type_)):
                self.report(expr.left, ErrorKind.InvalidBoolExpression, got = type_)

    def for_statement(self, stmt: Statement):
        match stmt:
            case ConditionalStatement(condition, body, else_body):
                self.for_relation(condition)
                self.for_statements(body)
                self.for_statements(else_body)

            case LoopStatement(condition, body):
                self.for_relation(condition)
                self.for_statements(body)

            case InputStatement(name):
                match self.scope.lookup(name.value):
                    case None:
                        self.report(name, ErrorKind.UndefinedIdentifier, name = name.value)

                    case VariableSymbol(type_):
                        if not (is_unknown(type_) or is_base(type_)):
                            self.report(name, ErrorKind.InvalidReadType, got = type_)

                    case symbol:
                        self.report(name, ErrorKind.InvalidReadType, got = symbol.KIND)

            case OutputStatement(value):
                type_ = self.for_expression(value)
                if not (is_unknown(type_) or is_base(type_)):
                    self.report(value.left, ErrorKind.InvalidWriteType, got = type_)

            case ReturnStatement(value):
                self.for_expression(value)

            case AssignStatement(variable, value):
                ltype = self.for_variable(variable)
                rtype = self.for_expression(value)

                if is_unknown(ltype):
                    self.report(variable.base, ErrorKind.InvalidAssignee)
                elif not equals(ltype, rtype):
                    self.report(
                        variable.base, ErrorKind.AssignTypeMismatch,
                        expected = ltype, got = rtype,
                    )

            case CallStatement(call):
                self.for_call(call)

            case _:
                assert(False)

    def for_call(self, call: Positional[Call]):
        signature = None

        match self.scope.lookup(call.name):
            case None:
                self.report(call, ErrorKind.UndefinedIdentifier, name = call.name)

            case ProcedureSymbol(signature):
                if len(signature) != len(call.params):
                    self.report(
                        call, ErrorKind.CallParameterCountMismatch,
                        expected = len(signature), got = len(call.params),
                    )

            case symbol:
                self.report(
                    call, ErrorKind.UncompatableType,
                    expected = ProcedureSymbol.KIND, got = symbol.KIND,
                )

        for i, argument in enumerate(call.params):
            type_ = self.for_expression(argument)

            if signature is None or i >= len(signature):
                continue

            if not equals(signature[i], type_):
                self.report(
                    argument.left, ErrorKind.CallParameterTypeMismatch,
                    expected = signature[i], got = type_,
                )

    def for_statements(self, stmts: StatementList):
        for stmt in stmts:
            self.for_statement(stmt)

# ====================================================================
def analyze(prgm: Positional[Program] | Program) -> list[Positional[Error]]:
    """
    run the semantic analysis of one program and return its diagnostics
    in discovery order; an empty list means the program is valid
    """
    if isinstance(prgm, Positional):
        prgm = prgm.value

    context  = Context()
    checker  = StatementChecker(context)
    analyzer = DeclarationAnalyzer(context, checker)

    analyzer.for_declare(prgm.declare)
    checker.for_statements(prgm.body)

    return context.errors.errors

# --------------------------------------------------------------------
def check(prgm: Positional[Program] | Program, reporter: Reporter) -> bool:
    errors = analyze(prgm)
    for error in errors:
        reporter.log(error)
    return not errors
