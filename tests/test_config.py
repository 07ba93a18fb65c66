from code_analyzer.config import AnalyzerConfig
from code_analyzer.errors import DirectoryListError, FileParseError, ScanDiagnostic


def test_defaults(monkeypatch):
    for name in ("CODE_ANALYZER_SOURCE_SUFFIX", "CODE_ANALYZER_ENCODING", "CODE_ANALYZER_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    assert AnalyzerConfig.from_env() == AnalyzerConfig()


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CODE_ANALYZER_SOURCE_SUFFIX", ".jav")
    monkeypatch.setenv("CODE_ANALYZER_ENCODING", "latin-1")
    monkeypatch.setenv("CODE_ANALYZER_LOG_LEVEL", "debug")
    config = AnalyzerConfig.from_env()
    assert config.source_suffix == ".jav"
    assert config.encoding == "latin-1"
    assert config.log_level == "DEBUG"


def test_diagnostic_kinds():
    assert ScanDiagnostic.from_error(FileParseError("A.java", "bad")) == ScanDiagnostic("file_parse", "A.java", "bad")
    assert ScanDiagnostic.from_error(DirectoryListError("/x", "denied")).kind == "directory_list"
