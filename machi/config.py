"""Analyzer configuration."""

import os
from typing import Optional

from machi.log import resolve_log_format, resolve_log_level

SUPPORTED_LANGUAGES = ("zh", "ja", "en")


class AnalyzerConfig:
    """Front-end configuration for the analyzer.

    The analysis itself is pure and takes no configuration; these settings
    only shape logging and how results are shown and recorded.
    """

    def __init__(
        self,
        language: str = "zh",
        log_level: str = "WARNING",
        log_format: str = "console",
        show_decompositions: bool = False,
        log_dir: Optional[str] = None,  # Directory for JSON analysis records
    ):
        if language not in SUPPORTED_LANGUAGES:
            raise ValueError(
                f"language must be one of {', '.join(SUPPORTED_LANGUAGES)}, got {language!r}")
        resolve_log_level(log_level)
        self.language = language
        self.log_level = log_level.upper()
        self.log_format = resolve_log_format(log_format)
        self.show_decompositions = show_decompositions
        self.log_dir = log_dir

    @classmethod
    def from_env(cls, **overrides) -> 'AnalyzerConfig':
        """Build a config from MACHI_LANG, LOG_LEVEL, LOG_FORMAT, MACHI_LOG_DIR.

        Keyword overrides that are not None win over the environment.
        """
        values = {
            "language": os.environ.get("MACHI_LANG", "zh"),
            "log_level": os.environ.get("LOG_LEVEL", "WARNING"),
            "log_format": os.environ.get("LOG_FORMAT", "") or "console",
            "log_dir": os.environ.get("MACHI_LOG_DIR") or None,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def __repr__(self):
        return (f"AnalyzerConfig(language={self.language!r}, log_level={self.log_level!r}, "
                f"log_format={self.log_format!r}, log_dir={self.log_dir!r})")
