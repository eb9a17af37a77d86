"""Resolution of `#pragma use` include directives for shader sources."""

from .source import Source, SourceBuffer, SourceFile
from .directives import scan_directives, strip_directives
from .paths import canonical_path, normalize_include
from .resolver import ResolutionSet, resolve_includes, resolve_source
from .discovery import iter_sources, expand_roots
from .config import Config, ConfigError, load_config

__all__ = [
    "Source",
    "SourceBuffer",
    "SourceFile",
    "scan_directives",
    "strip_directives",
    "canonical_path",
    "normalize_include",
    "ResolutionSet",
    "resolve_includes",
    "resolve_source",
    "iter_sources",
    "expand_roots",
    "Config",
    "ConfigError",
    "load_config",
]
