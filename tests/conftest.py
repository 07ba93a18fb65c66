import textwrap

import pytest

from code_analyzer.config import AnalyzerConfig
from code_analyzer.indexer import JavaSourceParser
from code_analyzer.inputs.directory_scanning import ProjectScanner


@pytest.fixture(scope="session")
def java_parser():
    return JavaSourceParser()


@pytest.fixture
def scanner(java_parser):
    return ProjectScanner(parser=java_parser, config=AnalyzerConfig())


@pytest.fixture
def write_tree(tmp_path):
    """Writes {relative_path: source} under tmp_path and returns the root."""

    def _write(files):
        for rel, src in files.items():
            path = tmp_path / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(textwrap.dedent(src), encoding="utf-8")
        return tmp_path

    return _write
