"""Exporters for converting resolution results to various output formats."""

from .source_exporter import to_source
from .list_exporter import to_list
from .json_exporter import to_json
from .mermaid_exporter import to_mermaid
from .ascii_exporter import to_ascii

__all__ = ["to_source", "to_list", "to_json", "to_mermaid", "to_ascii"]
