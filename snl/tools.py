import argparse
import dataclasses as dc
import enum
import json
import os
import sys

class Tools:
    def __init__(self, reporter):
        self.reporter = reporter

    def parseargs(self, argv = None):
        """
        return the parsed command line: input name and dump flags
        """
        parser = argparse.ArgumentParser(prog = os.path.basename(sys.argv[0]))

        parser.add_argument('input', help = 'input file (.snl)')
        parser.add_argument('--tokens', action = 'store_true',
                            help = 'print the token stream')
        parser.add_argument('--ast', action = 'store_true',
                            help = 'print the syntax tree as JSON')

        aout = parser.parse_args(argv)

        if os.path.splitext(aout.input)[1].lower() != '.snl':
            parser.error('input filename must end with the .snl extension')

        return aout

    def readsource(self, filename):
        try:
            with open(filename, "r") as f:
                return f.read()
        except IOError as e:
            self.reporter.crash(f"cannot read input file {filename}: {e}")

    def dumpjson(self, node):
        """
        syntax tree as indented JSON, each node tagged with its class name
        """
        return json.dumps(tojson(node), indent = 2)

def tojson(node):
    match node:
        case enum.Enum():
            return node.value
        case list():
            return [tojson(x) for x in node]
        case _ if dc.is_dataclass(node):
            aout = {"node": type(node).__name__}
            for field in dc.fields(node):
                aout[field.name] = tojson(getattr(node, field.name))
            return aout
        case _:
            return node
