# --------------------------------------------------------------------
import contextlib as cl
import dataclasses as dc

from typing import Optional as Opt

# ====================================================================
# Symbols

# --------------------------------------------------------------------
@dc.dataclass(frozen = True)
class Symbol:
    KIND = None

# --------------------------------------------------------------------
@dc.dataclass(frozen = True)
class VariableSymbol(Symbol):
    KIND = 'variable'

    type_: 'Ty'

# --------------------------------------------------------------------
@dc.dataclass(frozen = True)
class ProcedureSymbol(Symbol):
    KIND = 'procedure'

    signature: tuple['Ty', ...]

# --------------------------------------------------------------------
@dc.dataclass(frozen = True)
class TypeSymbol(Symbol):
    KIND = 'type'

    type_: 'Ty'

# ====================================================================
# Lexically scoped symbol table

class Scope:
    def __init__(self):
        self.vars = [{}]

    def open(self):
        self.vars.append({})

    def close(self):
        assert(len(self.vars) > 1)
        self.vars.pop()

    @cl.contextmanager
    def in_subscope(self):
        self.open()
        try:
            yield self
        finally:
            self.close()

    def push(self, name: str, symbol: Symbol):
        self.vars[-1][name] = symbol

    def islocal(self, name: str) -> bool:
        return name in self.vars[-1]

    def lookup(self, name: str) -> Opt[Symbol]:
        for scope in reversed(self.vars):
            if name in scope:
                return scope[name]
        return None
