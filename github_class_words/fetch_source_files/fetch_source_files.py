"""Walk a repository's directory tree through the contents API."""

from collections.abc import Iterator

from ..exceptions import ParseError
from ..models import DirectoryEntry, EntryKind, FetchedFile, RepositoryDescriptor


def parse_directory_listing(body) -> list[DirectoryEntry]:
    """Parse a contents API listing (a JSON array of entries)."""
    if not isinstance(body, list):
        raise ParseError(f"Expected a directory listing, got {type(body).__name__}")

    entries = []
    for item in body:
        try:
            entries.append(
                DirectoryEntry(
                    name=item["name"],
                    path=item["path"],
                    kind=EntryKind.from_api(item["type"]),
                    download_url=item.get("download_url"),
                )
            )
        except (KeyError, TypeError, AttributeError) as e:
            raise ParseError(f"Directory entry is missing {e}") from e
    return entries


def iter_source_files(
    client,
    repository: RepositoryDescriptor,
    extension: str,
    path: str = "",
) -> Iterator[FetchedFile]:
    """Yield every file under ``path`` whose name ends with ``extension``.

    Uses an explicit stack of pending directories instead of recursion, so
    depth is bounded by memory rather than the interpreter's call stack.
    Files of a directory come first, then its sub-directories in listing order.
    Any listing or download failure propagates and ends the walk.
    """
    pending = [path]
    seen: set[str] = set()

    while pending:
        current = pending.pop()
        if current in seen:
            continue
        seen.add(current)

        listing = client.fetch_json(repository.contents_url_for(current))
        subdirs = []
        for entry in parse_directory_listing(listing):
            if entry.kind is EntryKind.FILE and entry.name.endswith(extension):
                if not entry.download_url:
                    raise ParseError(f"No download_url for {repository.full_name}/{entry.path}")
                print(f"Processing file: {entry.path}", flush=True)
                yield FetchedFile(file_name=entry.name, content=client.fetch_text(entry.download_url))
            elif entry.kind is EntryKind.DIRECTORY:
                subdirs.append(entry.path)
            else:
                print(f"skipped: {entry.name}", flush=True)

        # Reversed so the first listed sub-directory is popped first
        pending.extend(reversed(subdirs))


def fetch_source_files(
    client,
    repository: RepositoryDescriptor,
    extension: str,
    path: str = "",
) -> list[FetchedFile]:
    """Collect all matching files under ``path`` into a list."""
    return list(iter_source_files(client, repository, extension, path=path))
