import logging
from enum import Enum

from awesome_projects.parser.patterns import (
    EMPHASIS_LINE_PATTERN,
    ENTRY_PATTERN,
    INDENTED_LINE_PATTERN,
    PROJECT_PATTERN,
    PROJECTS_SECTION,
    SECTION,
    SUBSECTION,
)
from awesome_projects.parser.sections import SectionStack, heading_level, parse_heading
from awesome_projects.shared.models import ProjectEntry

logger = logging.getLogger(__name__)


class ScanState(Enum):
    OUTSIDE = "outside"
    INSIDE = "inside"
    FINISHED = "finished"


def is_entry_line(line: str) -> bool:
    return ENTRY_PATTERN.match(line) is not None


def ends_description(line: str) -> bool:
    return (
        not line.strip()
        or line.startswith(SECTION)
        or line.startswith(SUBSECTION)
        or heading_level(line) > 0
        or is_entry_line(line)
    )


def parse_project_entry(
    lines: list[str], start: int, section: str
) -> tuple[ProjectEntry | None, int]:
    """Parse the entry at lines[start] along with its continuation lines.

    Returns the entry (None when the line does not fit the entry format)
    and the number of lines consumed, which is always at least 1.
    """
    match = PROJECT_PATTERN.match(lines[start])
    if not match:
        return None, 1

    parts = [match.group("description")] if match.group("description") else []
    consumed = 1

    for line in lines[start + 1:]:
        if ends_description(line):
            break
        # Indented and flush continuation lines are appended the same way
        if INDENTED_LINE_PATTERN.match(line) or line.strip():
            parts.append(line.strip())
            consumed += 1

    entry = ProjectEntry(
        name=match.group("name").strip(),
        url=match.group("url"),
        description=" ".join(parts),
        lines_to_skip=consumed,
        section=section,
    )
    return entry, consumed


class ProjectListParser:
    def __init__(self, projects_section: str = PROJECTS_SECTION, allow_reentry: bool = False):
        self.projects_section = projects_section
        self.allow_reentry = allow_reentry
        heading = parse_heading(projects_section)
        self.default_section = heading.text if heading else projects_section.strip()

    def _leaves_section(self, line: str) -> bool:
        level = heading_level(line)
        return 0 < level < 3 and not line.startswith(self.projects_section)

    def parse(self, content: str) -> list[ProjectEntry]:
        lines = content.split("\n")
        entries: list[ProjectEntry] = []
        state = ScanState.OUTSIDE
        stack = SectionStack()

        i = 0
        while i < len(lines):
            line = lines[i]
            i += 1

            if state is ScanState.FINISHED:
                break

            if line.startswith(self.projects_section):
                if state is ScanState.OUTSIDE:
                    logger.debug("Entering projects section at line %d", i)
                    state = ScanState.INSIDE
                    stack.clear()
                continue

            if state is ScanState.INSIDE and self._leaves_section(line):
                logger.debug("Leaving projects section at line %d", i)
                state = ScanState.OUTSIDE if self.allow_reentry else ScanState.FINISHED
                continue

            if state is not ScanState.INSIDE:
                continue

            heading = parse_heading(line)
            if heading and heading.is_structural:
                stack.enter(heading.depth, heading.text)
                continue

            if not line.strip() or EMPHASIS_LINE_PATTERN.match(line):
                continue

            if is_entry_line(line):
                section = stack.path() if len(stack) else self.default_section
                entry, consumed = parse_project_entry(lines, i - 1, section)
                if entry is not None:
                    entries.append(entry)
                i += consumed - 1

        logger.debug("Parsed %d project entries", len(entries))
        return entries
