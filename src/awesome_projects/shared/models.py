from dataclasses import dataclass
from urllib.parse import urlparse


@dataclass
class ProjectEntry:
    name: str
    url: str
    description: str
    lines_to_skip: int
    section: str

    @property
    def is_github_repo(self) -> bool:
        host = urlparse(self.url).netloc.lower()
        return host in ("github.com", "www.github.com")
