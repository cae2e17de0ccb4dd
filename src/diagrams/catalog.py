"""Catalog of example diagrams with their expected outcome."""

from typing import Dict, List, Optional
from pydantic import BaseModel

from .parsing import parse_diagram


class DiagramExample(BaseModel):
    """A named diagram and what following it should produce."""
    slug: str
    name: str
    grid: str
    expected_path: Optional[str] = None  # Valid diagrams only
    expected_letters: Optional[str] = None
    expected_code: Optional[str] = None  # Invalid diagrams only
    expected_message: Optional[str] = None  # Substring of the error message

    @property
    def valid(self) -> bool:
        return self.expected_code is None

    @property
    def rows(self) -> List[List[str]]:
        return parse_diagram(self.grid)


def _lines(*lines: str) -> str:
    return '\n'.join(lines)


VALID_EXAMPLES: List[DiagramExample] = [
    DiagramExample(
        slug="basic",
        name="Basic example",
        grid=_lines(
            "@---A---+",
            "        |",
            "x-B-+   C",
            "    |   |",
            "    +---+",
        ),
        expected_path="@---A---+|C|+---+|+-B-x",
        expected_letters="ACB",
    ),
    DiagramExample(
        slug="straight-through-intersections",
        name="Go straight through intersections",
        grid=_lines(
            "@",
            "| +-C--+",
            "A |    |",
            "+---B--+",
            "  |      x",
            "  |      |",
            "  +---D--+",
        ),
        expected_path="@|A+---B--+|+--C-+|-||+---D--+|x",
        expected_letters="ABCD",
    ),
    DiagramExample(
        slug="letters-on-turns",
        name="Letters on turns",
        grid=_lines(
            "@---A---+",
            "        |",
            "x-B-+   |",
            "    |   |",
            "    +---C",
        ),
        expected_path="@---A---+|||C---+|+-B-x",
        expected_letters="ACB",
    ),
    DiagramExample(
        slug="no-double-collect",
        name="Do not collect a letter twice",
        grid=_lines(
            "     +-O-N-+",
            "     |     |",
            "     |   +-I-+",
            " @-G-O-+ | | |",
            "     | | +-+ E",
            "     +-+     S",
            "             |",
            "             x",
        ),
        expected_path="@-G-O-+|+-+|O||+-O-N-+|I|+-+|+-I-+|ES|x",
        expected_letters="GOONIES",
    ),
    DiagramExample(
        slug="compact-space",
        name="Keep direction in a compact space",
        grid=_lines(
            " +-L-+",
            " |  +A-+",
            "@B+ ++ H",
            " ++    x",
        ),
        expected_path="@B+++B|+-L-+A+++A-+Hx",
        expected_letters="BLAH",
    ),
    DiagramExample(
        slug="ignore-after-end",
        name="Ignore stuff after the end",
        grid=_lines(
            "  @-A--+",
            "       |",
            "       +-B--x-C--D",
        ),
        expected_path="@-A--+|+-B--x",
        expected_letters="AB",
    ),
]


INVALID_EXAMPLES: List[DiagramExample] = [
    DiagramExample(
        slug="missing-start",
        name="Missing start character",
        grid=_lines(
            "     -A---+",
            "          |",
            "  x-B-+   C",
            "      |   |",
            "      +---+",
        ),
        expected_code="STRUCTURAL",
        expected_message="missing start point",
    ),
    DiagramExample(
        slug="missing-end",
        name="Missing end character",
        grid=_lines(
            "   @--A---+",
            "          |",
            "    B-+   C",
            "      |   |",
            "      +---+",
        ),
        expected_code="STRUCTURAL",
        expected_message="missing end point",
    ),
    DiagramExample(
        slug="multiple-starts",
        name="Multiple starts",
        grid=_lines(
            "   @--A-@-+",
            "          |",
            "  x-B-+   C",
            "      |   |",
            "      +---+",
        ),
        expected_code="STRUCTURAL",
        expected_message="multiple start points",
    ),
    DiagramExample(
        slug="fork",
        name="Fork in path",
        grid=_lines(
            "        x-B",
            "          |",
            "   @--A---+",
            "          |",
            "     x+   C",
            "      |   |",
            "      +---+",
        ),
        expected_code="TURN",
        expected_message="exactly 2 roads",
    ),
    DiagramExample(
        slug="broken-path",
        name="Broken path",
        grid=_lines(
            "   @--A-+",
            "        |",
            "",
            "        B-x",
        ),
        expected_code="MOVEMENT",
        expected_message="path ends unexpectedly",
    ),
    DiagramExample(
        slug="multiple-starting-paths",
        name="Multiple starting paths",
        grid=_lines(
            "  x-B-@-A-x",
        ),
        expected_code="START_POINT",
        expected_message="exactly 1 road",
    ),
    DiagramExample(
        slug="fake-turn",
        name="Fake turn",
        grid=_lines(
            "  @-A-+-B-x",
        ),
        expected_code="TURN",
        expected_message="straight path",
    ),
    DiagramExample(
        slug="invalid-character",
        name="Invalid character",
        grid=_lines(
            "  @-A-+",
            "      |",
            "  x-B-?",
        ),
        expected_code="GRAMMAR",
        expected_message="Invalid character found: '?'",
    ),
    DiagramExample(
        slug="looping-path",
        name="Path loops back to the start",
        grid=_lines(
            "@-A-+ x",
            "  | |",
            "  +-+",
        ),
        expected_code="CYCLE",
        expected_message="loops back",
    ),
]


EXAMPLES: Dict[str, DiagramExample] = {
    example.slug: example for example in VALID_EXAMPLES + INVALID_EXAMPLES
}


def get_example(slug: str) -> DiagramExample:
    """Look up an example by slug; raises KeyError naming the known slugs."""
    if slug not in EXAMPLES:
        raise KeyError(f"Unknown example '{slug}'. Known examples: {', '.join(EXAMPLES)}")
    return EXAMPLES[slug]
