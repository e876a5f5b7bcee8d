# --------------------------------------------------------------------
import dataclasses as dc
import enum
import typing as tp

from typing import Optional as Opt

T = tp.TypeVar('T')

# ====================================================================
# Parse tree / Abstract Syntax Tree

# --------------------------------------------------------------------
@dc.dataclass
class Positional(tp.Generic[T]):
    """
    source position envelope, attribute access falls through to `value`
    """
    line   : int
    column : int
    value  : T

    def __getattr__(self, name):
        if name == 'value':
            raise AttributeError(name)
        return getattr(self.value, name)

    @property
    def position(self) -> tuple[int, int]:
        return (self.line, self.column)

    @staticmethod
    def at(position: 'Positional', value):
        return Positional(position.line, position.column, value)

# --------------------------------------------------------------------
class BaseType(enum.Enum):
    INTEGER = 'integer'
    CHAR    = 'char'

# --------------------------------------------------------------------
@dc.dataclass
class Type:
    pass

# --------------------------------------------------------------------
@dc.dataclass
class IntegerType(Type):
    pass

# --------------------------------------------------------------------
@dc.dataclass
class CharType(Type):
    pass

# --------------------------------------------------------------------
@dc.dataclass
class ArrayType(Type):
    base        : BaseType
    lower_bound : int
    upper_bound : int

# --------------------------------------------------------------------
@dc.dataclass
class RecordType(Type):
    fields: list['TypedIdentifiers']

# --------------------------------------------------------------------
@dc.dataclass
class NamedType(Type):
    name: str

# --------------------------------------------------------------------
@dc.dataclass
class TypedIdentifiers:
    type_name   : Positional[Type]
    identifiers : list[Positional[str]]

# --------------------------------------------------------------------
@dc.dataclass
class TypeDeclare:
    name: str
    base: Positional[Type]

# --------------------------------------------------------------------
@dc.dataclass
class Param:
    is_var     : bool
    definition : TypedIdentifiers

# --------------------------------------------------------------------
@dc.dataclass
class ProgramDeclare:
    type_declare      : list[Positional[TypeDeclare]]      = dc.field(default_factory = list)
    variable_declare  : list[Positional[TypedIdentifiers]] = dc.field(default_factory = list)
    procedure_declare : list[Positional['ProcedureDeclare']] = dc.field(default_factory = list)

# --------------------------------------------------------------------
@dc.dataclass
class ProcedureDeclare:
    name    : str
    params  : list[Positional[Param]]
    declare : ProgramDeclare
    body    : list['Statement']

# ====================================================================
# Expressions

# --------------------------------------------------------------------
@dc.dataclass
class Expression:
    left  : Positional['Term']
    op    : Opt[str]                        = None
    right : Opt[Positional['Expression']]   = None

# --------------------------------------------------------------------
@dc.dataclass
class Term:
    left  : Positional['Factor']
    op    : Opt[str]                        = None
    right : Opt[Positional['Term']]         = None

# --------------------------------------------------------------------
@dc.dataclass
class Factor:
    pass

# --------------------------------------------------------------------
@dc.dataclass
class BracketFactor(Factor):
    expression: Expression

# --------------------------------------------------------------------
@dc.dataclass
class ConstantFactor(Factor):
    value: int

# --------------------------------------------------------------------
@dc.dataclass
class VariableFactor(Factor):
    variable: 'VariableRepresent'

# --------------------------------------------------------------------
@dc.dataclass
class VariableVisit:
    dot  : Opt[Positional[str]] = None
    sqbr : Opt[Expression]      = None

# --------------------------------------------------------------------
@dc.dataclass
class VariableRepresent:
    base  : Positional[str]
    visit : Opt[VariableVisit] = None

# --------------------------------------------------------------------
@dc.dataclass
class RelationExpression:
    left  : Expression
    op    : str
    right : Expression

# ====================================================================
# Statements

# --------------------------------------------------------------------
@dc.dataclass
class Statement:
    pass

# --------------------------------------------------------------------
@dc.dataclass
class ConditionalStatement(Statement):
    condition : RelationExpression
    body      : list[Statement]
    else_body : list[Statement] = dc.field(default_factory = list)

# --------------------------------------------------------------------
@dc.dataclass
class LoopStatement(Statement):
    condition : RelationExpression
    body      : list[Statement]

# --------------------------------------------------------------------
@dc.dataclass
class InputStatement(Statement):
    variable: Positional[str]

# --------------------------------------------------------------------
@dc.dataclass
class OutputStatement(Statement):
    value: Expression

# --------------------------------------------------------------------
@dc.dataclass
class ReturnStatement(Statement):
    value: Expression

# --------------------------------------------------------------------
@dc.dataclass
class AssignStatement(Statement):
    variable : VariableRepresent
    value    : Expression

# --------------------------------------------------------------------
@dc.dataclass
class Call:
    name   : str
    params : list[Expression] = dc.field(default_factory = list)

# --------------------------------------------------------------------
@dc.dataclass
class CallStatement(Statement):
    call: Positional[Call]

# --------------------------------------------------------------------
StatementList = list[Statement]

# --------------------------------------------------------------------
@dc.dataclass
class Program:
    name    : str
    declare : ProgramDeclare
    body    : StatementList
