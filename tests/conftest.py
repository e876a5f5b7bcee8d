import pytest

from snl.parser         import Parser
from snl.reporter       import Reporter
from snllib.snlsemantic import analyze

@pytest.fixture(scope = 'session')
def parser():
    return Parser(Reporter())

@pytest.fixture
def parse(parser):
    def _parse(source):
        parser.reporter.errors.clear()
        prgm = parser.parse(source)
        assert not parser.reporter.errors, parser.reporter.errors
        assert prgm is not None
        return prgm
    return _parse

@pytest.fixture
def diagnose(parse):
    def _diagnose(source):
        return analyze(parse(source))
    return _diagnose
