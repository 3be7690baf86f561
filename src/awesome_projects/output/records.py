"""Flat record format shared with the downstream processing steps.

Each entry is written as one block::

    NAME: <name>
    URL: <url>
    DESC: <description>
    SKIP: <lines to skip>
    SECTION: <section path>
    ---

Blocks are joined by a newline and the file ends with a newline.
"""

from awesome_projects.shared.exceptions import RecordFormatError
from awesome_projects.shared.models import ProjectEntry

NAME_PREFIX = "NAME: "
URL_PREFIX = "URL: "
DESC_PREFIX = "DESC: "
SKIP_PREFIX = "SKIP: "
SECTION_PREFIX = "SECTION: "
SECTION_SEPARATOR = "---"

_FIELDS = {
    NAME_PREFIX: "name",
    URL_PREFIX: "url",
    DESC_PREFIX: "description",
    SKIP_PREFIX: "lines_to_skip",
    SECTION_PREFIX: "section",
}


def format_entry(entry: ProjectEntry) -> str:
    return (
        f"{NAME_PREFIX}{entry.name}\n"
        f"{URL_PREFIX}{entry.url}\n"
        f"{DESC_PREFIX}{entry.description}\n"
        f"{SKIP_PREFIX}{entry.lines_to_skip}\n"
        f"{SECTION_PREFIX}{entry.section}\n"
        f"{SECTION_SEPARATOR}\n"
    )


def format_records(entries: list[ProjectEntry]) -> str:
    return "\n".join(format_entry(e) for e in entries)


def _build_entry(fields: dict[str, str], line_number: int) -> ProjectEntry:
    missing = [name for name in _FIELDS.values() if name not in fields]
    if missing:
        raise RecordFormatError(
            f"Record ending at line {line_number} is missing: {', '.join(missing)}"
        )
    try:
        lines_to_skip = int(fields["lines_to_skip"])
    except ValueError as e:
        raise RecordFormatError(
            f"Invalid SKIP value at line {line_number}: {fields['lines_to_skip']!r}"
        ) from e

    return ProjectEntry(
        name=fields["name"],
        url=fields["url"],
        description=fields["description"],
        lines_to_skip=lines_to_skip,
        section=fields["section"],
    )


def read_records(text: str) -> list[ProjectEntry]:
    entries: list[ProjectEntry] = []
    fields: dict[str, str] = {}

    for line_number, line in enumerate(text.split("\n"), 1):
        if line == SECTION_SEPARATOR:
            entries.append(_build_entry(fields, line_number))
            fields = {}
            continue
        if not line:
            continue

        for prefix, name in _FIELDS.items():
            if line.startswith(prefix):
                fields[name] = line[len(prefix):]
                break
        else:
            # Empty values are written as "PREFIX: " but may lose the space
            bare = {p.rstrip(): n for p, n in _FIELDS.items()}
            if line in bare:
                fields[bare[line]] = ""
            else:
                raise RecordFormatError(f"Unexpected line {line_number}: {line!r}")

    if fields:
        raise RecordFormatError("Last record is not terminated by a separator")
    return entries
