"""
reflow-list: re-wrap paragraphs inside comments, lists, and definition lists.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    reflow-list src/main.c --line 42

Library Usage:
    from pathlib import Path
    from reflow_list import ReflowConfig, apply_reflow, compile_settings, reflow_paragraph, split_lines

    settings = compile_settings(ReflowConfig(wrap_column=72))
    lines = split_lines(Path("main.c").read_text())
    result = reflow_paragraph(lines, 41, settings)
    new_lines = apply_reflow(lines, result)
"""

from .builder import ReflowBuilder
from .config import ConfigError, ReflowConfig, build_config, compile_settings
from .exceptions import AnchorOutOfRangeError, ProtocolError, ReflowError, SourceFileError
from .models import ParsedLine, ReflowResult, ReflowSettings
from .parser import expand_tabs, parse_line
from .reflow import apply_reflow, reflow_file, reflow_paragraph, reflow_text, split_lines

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "reflow_paragraph",
    "reflow_text",
    "reflow_file",
    "split_lines",
    "apply_reflow",
    "ReflowBuilder",
    "parse_line",
    "expand_tabs",
    # Configuration
    "ReflowConfig",
    "build_config",
    "compile_settings",
    # Data models
    "ParsedLine",
    "ReflowResult",
    "ReflowSettings",
    # Exceptions
    "AnchorOutOfRangeError",
    "ConfigError",
    "ProtocolError",
    "ReflowError",
    "SourceFileError",
    # Version
    "__version__",
]
