# --------------------------------------------------------------------
import dataclasses as dc
import itertools as it

from typing import Optional as Opt

from snl.ast    import *
from .snlscope  import Scope, TypeSymbol

# ====================================================================
# Canonical types
#
# alias-free values compared by shape; str() gives the signature used
# in diagnostics:
#   integer, char, [0..10;integer], {a,b:integer;c:char}, unknown

# --------------------------------------------------------------------
class Ty:
    pass

# --------------------------------------------------------------------
@dc.dataclass(frozen = True)
class TyInteger(Ty):
    def __str__(self):
        return 'integer'

# --------------------------------------------------------------------
@dc.dataclass(frozen = True)
class TyChar(Ty):
    def __str__(self):
        return 'char'

# --------------------------------------------------------------------
@dc.dataclass(frozen = True)
class TyArray(Ty):
    base        : Ty
    lower_bound : int
    upper_bound : int

    def __str__(self):
        return f'[{self.lower_bound}..{self.upper_bound};{self.base}]'

# --------------------------------------------------------------------
@dc.dataclass(frozen = True)
class TyRecord(Ty):
    fields: tuple[tuple[str, Ty], ...]      # sorted by field name

    def field(self, name: str) -> Opt[Ty]:
        return dict(self.fields).get(name)

    def __str__(self):
        groups = it.groupby(
            sorted(self.fields, key = lambda x: (str(x[1]), x[0])),
            key = lambda x: str(x[1]),
        )
        return '{' + ';'.join(
            ','.join(name for name, _ in fields) + ':' + signature
            for signature, fields in groups
        ) + '}'

# --------------------------------------------------------------------
@dc.dataclass(frozen = True)
class TyUnknown(Ty):
    def __str__(self):
        return 'unknown'

# --------------------------------------------------------------------
INTEGER = TyInteger()
CHAR    = TyChar()
UNKNOWN = TyUnknown()

BASES = {
    BaseType.INTEGER : INTEGER,
    BaseType.CHAR    : CHAR,
}

# ====================================================================
# Resolution and comparison

def canonicalize(type_: Type, scope: Scope) -> Ty:
    match type_:
        case IntegerType():
            return INTEGER

        case CharType():
            return CHAR

        case ArrayType(base, lower_bound, upper_bound):
            return TyArray(BASES[base], lower_bound, upper_bound)

        case RecordType(fields):
            members = dict()
            for group in fields:
                ftype = canonicalize(group.type_name.value, scope)
                for name in group.identifiers:
                    members.setdefault(name.value, ftype)
            return TyRecord(tuple(sorted(members.items(), key = lambda x: x[0])))

        case NamedType(name):
            match scope.lookup(name):
                case TypeSymbol(aliased):
                    return aliased
                case _:
                    return UNKNOWN

        case _:
            assert(False)

def equals(a: Ty, b: Ty) -> bool:
    match a, b:
        case (TyUnknown(), _) | (_, TyUnknown()):
            return True

        case TyRecord(afields), TyRecord(bfields):
            if [x[0] for x in afields] != [x[0] for x in bfields]:
                return False
            return all(equals(x[1], y[1]) for x, y in zip(afields, bfields))

        case _:
            return a == b

def is_base(type_: Ty) -> bool:
    return type_ in (INTEGER, CHAR)

def is_unknown(type_: Ty) -> bool:
    return isinstance(type_, TyUnknown)
