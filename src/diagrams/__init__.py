"""Diagram text handling and the example catalog."""

from .parsing import parse_diagram, extract_diagram_content
from .catalog import DiagramExample, VALID_EXAMPLES, INVALID_EXAMPLES, EXAMPLES, get_example

__all__ = [
    "parse_diagram",
    "extract_diagram_content",
    "DiagramExample",
    "VALID_EXAMPLES",
    "INVALID_EXAMPLES",
    "EXAMPLES",
    "get_example",
]
