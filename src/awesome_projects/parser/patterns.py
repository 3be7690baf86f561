import re

PROJECTS_SECTION = "## 🚀 Projects"
SECTION = "# "
SUBSECTION = "## "

HEADING_PATTERN = re.compile(r"^(#+) (.*)$")

# Any list item opening with a bold name counts as an entry boundary,
# even when the rest of the line does not parse.
ENTRY_PATTERN = re.compile(r"^- \*\*")

# - **Name** - [Name](url) - description
# - **Name** - url - description
PROJECT_PATTERN = re.compile(
    r"^- \*\*(?P<name>[^*]+?)\*\*"
    r" - (?:\[[^\]]*\]\()?(?P<url>[^\s()\[\]]+)\)?"
    r" - (?P<description>.*?)\s*$"
)

INDENTED_LINE_PATTERN = re.compile(r"^\s+[^\s-].*$")

EMPHASIS_LINE_PATTERN = re.compile(r"^_.*_$")
