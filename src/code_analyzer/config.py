import os
from dataclasses import dataclass


@dataclass(frozen=True)
class AnalyzerConfig:
    """Settings for a scan. Every field can be overridden from the environment."""
    source_suffix: str = ".java"
    encoding: str = "utf-8"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "AnalyzerConfig":
        defaults = cls()
        return cls(
            source_suffix=os.environ.get("CODE_ANALYZER_SOURCE_SUFFIX", defaults.source_suffix),
            encoding=os.environ.get("CODE_ANALYZER_ENCODING", defaults.encoding),
            log_level=os.environ.get("CODE_ANALYZER_LOG_LEVEL", defaults.log_level).upper(),
        )
