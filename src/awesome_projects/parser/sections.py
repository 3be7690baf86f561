from dataclasses import dataclass, field

from awesome_projects.parser.patterns import HEADING_PATTERN

# Heading level at which section paths start (### -> depth 1)
STRUCTURAL_LEVEL = 3
PATH_SEPARATOR = " > "


@dataclass
class Heading:
    level: int
    text: str

    @property
    def is_structural(self) -> bool:
        return self.level >= STRUCTURAL_LEVEL

    @property
    def depth(self) -> int:
        return self.level - STRUCTURAL_LEVEL + 1


def parse_heading(line: str) -> Heading | None:
    """Return the heading on this line, or None.

    A heading is one or more '#' followed by a space, so "###Foo" is not one.
    """
    match = HEADING_PATTERN.match(line)
    if not match:
        return None
    return Heading(level=len(match.group(1)), text=match.group(2).strip())


def heading_level(line: str) -> int:
    heading = parse_heading(line)
    return heading.level if heading else 0


@dataclass
class SectionStack:
    """Names of the open structural headings, index 0 being depth 1."""

    names: list[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.names)

    def enter(self, depth: int, name: str) -> None:
        """Open a section at depth, closing every section at that depth or deeper."""
        if depth < 1:
            raise ValueError(f"Section depth must be >= 1, got {depth}")
        del self.names[depth - 1:]
        self.names.append(name)

    def clear(self) -> None:
        self.names.clear()

    def path(self) -> str:
        return PATH_SEPARATOR.join(self.names)
