from snl.ast            import *
from snllib.snlerrors   import ErrorKind
from snllib.snlsemantic import Context, DeclarationAnalyzer, StatementChecker, analyze
from snllib.snltypes    import CHAR, INTEGER, TyArray

def kinds(errors):
    return [e.value.kind for e in errors]

def test_duplicate_variables_in_one_scope(diagnose):
    errors = diagnose("program p; var integer x; char x; begin end.")

    assert kinds(errors) == [ErrorKind.DuplicatedIdentifier]
    assert errors[0].value.name == 'x'
    assert errors[0].position == (1, 32)

def test_duplicate_in_one_group(diagnose):
    errors = diagnose("program p; var integer x, x; begin end.")
    assert kinds(errors) == [ErrorKind.DuplicatedIdentifier]

def test_duplicates_across_declaration_kinds(diagnose):
    errors = diagnose("""
program p
type t = integer;
     t = char;
var integer t;
procedure t();
begin end
begin end.
""")
    assert kinds(errors) == [ErrorKind.DuplicatedIdentifier] * 3
    assert [e.line for e in errors] == [4, 5, 6]

def test_shadowing_in_procedure_is_not_a_duplicate(diagnose):
    errors = diagnose("""
program p
var integer x;
procedure f(char x);
  var integer y;
begin read(x) end;
procedure g();
  var char x;
begin x := x end
begin x := 1 end.
""")
    assert errors == []

def test_local_names_vanish_after_procedure(diagnose):
    errors = diagnose("""
program p
procedure f(integer a);
  var integer y;
begin y := a end;
begin write(y); write(a) end.
""")
    assert kinds(errors) == [ErrorKind.UndefinedIdentifier] * 2
    assert [e.value.name for e in errors] == ['y', 'a']
    assert [e.line for e in errors] == [6, 6]

def test_recursive_call(diagnose):
    errors = diagnose("""
program p
procedure f(integer n);
begin
  if n < 10 then f(n + 1) fi
end
begin f(0) end.
""")
    assert errors == []

def test_nested_procedures_visibility(diagnose):
    errors = diagnose("""
program p
procedure f();
  procedure g(integer a);
  begin f() end
begin g(1) end;
begin g(2) end.
""")
    assert kinds(errors) == [ErrorKind.UndefinedIdentifier]
    assert errors[0].value.name == 'g'
    assert errors[0].line == 7

def test_duplicate_parameters(diagnose):
    errors = diagnose("program p; procedure f(integer a; char a); begin end begin end.")

    assert kinds(errors) == [ErrorKind.DuplicatedIdentifier]
    assert errors[0].value.name == 'a'

def test_duplicate_procedure_body_is_still_checked(diagnose):
    errors = diagnose("""
program p
procedure f();
begin end
procedure f();
begin write(z) end
begin end.
""")
    assert kinds(errors) == [ErrorKind.DuplicatedIdentifier, ErrorKind.UndefinedIdentifier]

def test_array_bounds(diagnose):
    assert diagnose("program p; var array[0..5] of integer a; begin end.") == []
    assert diagnose("program p; var array[2..2] of char a; begin end.") == []

    errors = diagnose("program p; var array[5..2] of integer a; begin end.")
    assert kinds(errors) == [ErrorKind.InvalidArrayDefinition]
    assert errors[0].value.got == TyArray(INTEGER, 5, 2)

def test_undefined_type(diagnose):
    errors = diagnose("program p; var t x; begin write(x) end.")

    assert kinds(errors) == [ErrorKind.UndefinedType]
    assert errors[0].value.name == 't'

def test_variable_is_not_a_type(diagnose):
    errors = diagnose("program p; var integer t; t x; begin end.")
    assert kinds(errors) == [ErrorKind.UndefinedType]

def test_aliases_resolve_in_declaration_order(diagnose):
    assert diagnose("program p; type t = integer; u = t; var u x; begin x := 1 end.") == []

    errors = diagnose("program p; type u = t; t = integer; begin end.")
    assert kinds(errors) == [ErrorKind.UndefinedType]

def test_cyclic_aliases_terminate(diagnose):
    errors = diagnose("program p; type a = b; b = a; c = c; begin end.")

    assert kinds(errors) == [ErrorKind.UndefinedType] * 2
    assert [e.value.name for e in errors] == ['b', 'c']

def test_record_fields_are_validated(diagnose):
    errors = diagnose("""
program p
type r = record
  integer a;
  char a;
  array[3..1] of integer v;
  s w;
end;
begin end.
""")
    assert kinds(errors) == [
        ErrorKind.DuplicatedIdentifier,
        ErrorKind.InvalidArrayDefinition,
        ErrorKind.UndefinedType,
    ]
    assert [e.line for e in errors] == [5, 6, 7]

def test_record_fields_do_not_clash_with_scope(diagnose):
    assert diagnose("program p; var integer a; record integer a; end r; begin end.") == []

def test_parameter_types_are_validated_once_per_group(diagnose):
    errors = diagnose("program p; procedure f(t a, b); begin write(a) end begin end.")
    assert kinds(errors) == [ErrorKind.UndefinedType]

def test_declarations_report_in_order(diagnose):
    errors = diagnose("""
program p
type t = array[2..1] of integer;
var u x;
procedure f(integer a; char a);
begin write(q) end
begin write(z) end.
""")
    assert kinds(errors) == [
        ErrorKind.InvalidArrayDefinition,
        ErrorKind.UndefinedType,
        ErrorKind.DuplicatedIdentifier,
        ErrorKind.UndefinedIdentifier,
        ErrorKind.UndefinedIdentifier,
    ]
    assert [e.line for e in errors] == [3, 4, 5, 6, 7]

def test_handwritten_tree():
    def at(value):
        return Positional(1, 1, value)

    def variable(name):
        term = Term(left = at(VariableFactor(VariableRepresent(base = at(name)))))
        return Expression(left = at(term))

    proc = ProcedureDeclare(
        name    = 'f',
        params  = [at(Param(False, TypedIdentifiers(at(CharType()), [at('c')])))],
        declare = ProgramDeclare(),
        body    = [OutputStatement(variable('c'))],
    )

    prgm = Program(
        name    = 'p',
        declare = ProgramDeclare(
            variable_declare  = [at(TypedIdentifiers(at(IntegerType()), [at('i')]))],
            procedure_declare = [at(proc)],
        ),
        body    = [CallStatement(at(Call('f', [variable('i')])))],
    )

    errors = analyze(prgm)
    assert kinds(errors) == [ErrorKind.CallParameterTypeMismatch]
    assert (errors[0].value.expected, errors[0].value.got) == (CHAR, INTEGER)

def test_passes_share_the_context():
    context  = Context()
    checker  = StatementChecker(context)
    analyzer = DeclarationAnalyzer(context, checker)

    assert analyzer.scope is checker.scope is context.scope

    analyzer.for_declare(ProgramDeclare(
        variable_declare = [Positional(1, 1, TypedIdentifiers(
            Positional(1, 1, IntegerType()), [Positional(1, 9, 'x'), Positional(1, 12, 'x')],
        ))],
    ))
    checker.for_statements([InputStatement(Positional(2, 6, 'x'))])

    assert kinds(context.errors) == [ErrorKind.DuplicatedIdentifier]
    assert context.errors.errors[0].position == (1, 12)
