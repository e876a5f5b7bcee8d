# --------------------------------------------------------------------
import dataclasses as dc
import enum

from typing import Any, Optional as Opt

from snl.ast import Positional

# ====================================================================
# Semantic error taxonomy

class ErrorKind(enum.Enum):
    DuplicatedIdentifier        = enum.auto()
    UndefinedIdentifier         = enum.auto()
    UndefinedType               = enum.auto()
    UncompatableType            = enum.auto()
    InvalidVariableRepresent    = enum.auto()
    InvalidArrayDefinition      = enum.auto()
    UnexpectedArrayIndex        = enum.auto()
    InvalidFieldIndexType       = enum.auto()
    UndefinedRecordField        = enum.auto()
    AssignTypeMismatch          = enum.auto()
    InvalidAssignee             = enum.auto()
    CallParameterTypeMismatch   = enum.auto()
    CallParameterCountMismatch  = enum.auto()
    InvalidBoolExpression       = enum.auto()
    InvalidReadType             = enum.auto()
    InvalidWriteType            = enum.auto()

MESSAGES = {
    ErrorKind.DuplicatedIdentifier       : 'duplicated identifier: {name}',
    ErrorKind.UndefinedIdentifier        : 'undefined identifier: {name}',
    ErrorKind.UndefinedType              : 'undefined type: {name}',
    ErrorKind.UncompatableType           : 'incompatible type: expected {expected}, got {got}',
    ErrorKind.InvalidVariableRepresent   : '{name} is not a variable',
    ErrorKind.InvalidArrayDefinition     : 'invalid array definition {got}: lower bound is larger than upper bound',
    ErrorKind.UnexpectedArrayIndex       : 'unexpected array index on {got}',
    ErrorKind.InvalidFieldIndexType      : 'field access .{name} on non-record type {got}',
    ErrorKind.UndefinedRecordField       : 'undefined record field: {name}',
    ErrorKind.AssignTypeMismatch         : 'assignment type mismatch: expected {expected}, got {got}',
    ErrorKind.InvalidAssignee            : 'invalid assignee',
    ErrorKind.CallParameterTypeMismatch  : 'call parameter type mismatch: expected {expected}, got {got}',
    ErrorKind.CallParameterCountMismatch : 'invalid number of arguments: expected {expected}, got {got}',
    ErrorKind.InvalidBoolExpression      : 'invalid boolean expression operand of type {got}',
    ErrorKind.InvalidReadType            : 'can only read integers and chars, not {got}',
    ErrorKind.InvalidWriteType           : 'can only write integers and chars, not {got}',
}

# --------------------------------------------------------------------
@dc.dataclass(frozen = True)
class Error:
    """
    one semantic diagnostic; the payload fields used depend on `kind`
    (identifier name, or expected/got type signatures or counts)
    """
    kind     : ErrorKind
    name     : Opt[str] = None
    expected : Any      = None
    got      : Any      = None

    def __str__(self):
        return MESSAGES[self.kind].format(
            name     = self.name,
            expected = self.expected,
            got      = self.got,
        )

# ====================================================================
# Diagnostic sink

class Errors():
    """
    append-only list of positioned diagnostics, in discovery order
    """
    def __init__(self, errors = None):
        self.errors = errors or []

    def __bool__(self):
        return len(self.errors) != 0

    def __len__(self):
        return len(self.errors)

    def __iter__(self):
        return iter(self.errors)

    def __repr__(self):
        return "\n".join(f"line {e.line}, column {e.column}: {e.value}" for e in self.errors)

    def add(self, error: Error, position: Positional):
        self.errors.append(Positional.at(position, error))
        return self
