"""Diagram text parsing utilities."""

import re
from typing import List


def extract_diagram_content(text: str) -> str:
    """Extract the body of the first ``` fenced block, or return the text as is."""
    match = re.search(r'```[^\n]*\n(.*?)```', text, re.DOTALL)
    if match:
        return match.group(1)
    return text


def parse_diagram(text: str) -> List[List[str]]:
    """
    Turn diagram text into a jagged character matrix.

    Blank lines before the first and after the last drawn line are dropped.
    Leading spaces are kept since they position the drawing.
    """
    lines = extract_diagram_content(text).splitlines()

    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()

    return [list(line) for line in lines]
