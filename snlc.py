#! /usr/bin/env python3

# --------------------------------------------------------------------
# Requires Python3 >= 3.10

import sys

from snl.tools              import Tools
from snl.parser             import Parser
from snl.reporter           import Reporter
from snllib.snlsemantic     import analyze

def main(argv = None):
    """
    usage:
    python3 snlc.py [--tokens] [--ast] <filename>.snl

    prints the semantic diagnostics of the program,
    exits with status 1 when there is any
    """
    # preliminary objects
    reporter    = Reporter()
    tools       = Tools(reporter)

    # parse args
    reporter.checkpoint("args")
    args        = tools.parseargs(argv)
    source      = tools.readsource(args.input)
    parser      = Parser(reporter)

    # source to tokens
    if args.tokens:
        reporter.checkpoint("lexing")
        for token in parser.lexer.tokenize(source):
            print(token)

    # tokens to ast
    reporter.checkpoint("parsing")
    prgm = parser.parse(source)
    if prgm is None:
        reporter.crash("no syntax tree produced")

    reporter.checkpoint("ast")
    if args.ast:
        print(tools.dumpjson(prgm))

    # ast to diagnostics
    reporter.checkpoint("semantic")
    errors = analyze(prgm)

    if not errors:
        print("No semantic error!")
        return 0

    for error in errors:
        print(f"line {error.line}, column {error.column}: {error.value}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
