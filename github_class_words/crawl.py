"""Discover repositories, fetch their source files and count class-name words."""

import sys
from collections import Counter

from .client import GitHubClient, get_client
from .discover_repositories import discover_repositories
from .fetch_source_files import iter_source_files
from .models import CrawlSummary
from .settings import Settings, get_settings
from .word_count import count_words, display_popular_words, extract_class_names


def _log(msg: str):
    sys.stderr.write(f"[crawl] {msg}\n")
    sys.stderr.flush()


def crawl(
    settings: Settings | None = None,
    client: GitHubClient | None = None,
    top: int | None = None,
    skip_cache: bool = False,
) -> CrawlSummary:
    """Run the full census and return the final word table.

    A discovery failure is fatal. A failure inside one repository drops that
    repository's words and the run moves on to the next one.
    """
    settings = settings or get_settings()
    client = client or get_client(settings, skip_cache=skip_cache)

    print(
        f"Searching {settings.max_repositories} {settings.target_language} repositories",
        flush=True,
    )
    repositories = discover_repositories(
        client,
        settings.target_language,
        settings.max_repositories,
        per_page=settings.page_size,
        page_delay=settings.page_delay,
    )
    print(f"Found {len(repositories)} repositories", flush=True)

    summary = CrawlSummary()
    for i, repo in enumerate(repositories, start=1):
        print(
            f"[{i}/{len(repositories)}] Fetching {settings.file_extension} files from {repo.full_name}",
            flush=True,
        )
        repo_counts = Counter()
        files = 0
        try:
            for source_file in iter_source_files(client, repo, settings.file_extension):
                count_words(extract_class_names(source_file.content), repo_counts)
                files += 1
        except Exception as e:
            _log(f"Error in {repo.full_name}: {e}")
            summary.errors += 1
            continue

        summary.word_counts.update(repo_counts)
        summary.repositories += 1
        summary.files += files
        display_popular_words(summary.word_counts, top)

    display_popular_words(summary.word_counts, top)
    print(
        f"Done: {summary.repositories} repositories, {summary.files} files, "
        f"{summary.errors} errors, {client.retries} retries",
        flush=True,
    )
    return summary
