"""Data models for repository discovery and tree traversal."""

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from urllib.parse import quote

CONTENTS_PATH_PLACEHOLDER = "{+path}"


@dataclass(frozen=True)
class RepositoryDescriptor:
    """A repository as returned by the search endpoint."""

    full_name: str  # owner/name
    contents_url: str  # URI template, e.g. https://api.github.com/repos/o/r/contents/{+path}

    def contents_url_for(self, path: str = "") -> str:
        """Resolve the contents template for a directory path ("" is the root)."""
        return self.contents_url.replace(CONTENTS_PATH_PLACEHOLDER, quote(path, safe="/"))


class EntryKind(Enum):
    FILE = "file"
    DIRECTORY = "dir"
    OTHER = "other"  # symlink, submodule, ...

    @classmethod
    def from_api(cls, value: str) -> "EntryKind":
        if value == "file":
            return cls.FILE
        if value == "dir":
            return cls.DIRECTORY
        return cls.OTHER


@dataclass(frozen=True)
class DirectoryEntry:
    name: str
    path: str
    kind: EntryKind
    download_url: str | None = None


@dataclass
class FetchedFile:
    file_name: str
    content: str


@dataclass
class CrawlSummary:
    """Outcome of a crawl: the word table plus per-run counters."""

    word_counts: Counter = field(default_factory=Counter)
    repositories: int = 0
    files: int = 0
    errors: int = 0
