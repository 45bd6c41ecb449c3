"""Page through repository search results for a language."""

import time

from ..exceptions import ParseError
from ..models import RepositoryDescriptor

SEARCH_ENDPOINT = "search/repositories"

# GitHub limit: 100 items per page
PER_PAGE = 100

# Pause between pages to stay clear of the rate limiter
PAGE_DELAY_SECONDS = 2.0


def parse_repositories(body) -> list[RepositoryDescriptor]:
    """Parse one search page. A page without ``items`` is treated as empty."""
    if not isinstance(body, dict):
        raise ParseError(f"Expected a JSON object from search, got {type(body).__name__}")

    items = body.get("items")
    if items is None:
        return []

    repos = []
    for item in items:
        try:
            repos.append(RepositoryDescriptor(full_name=item["full_name"], contents_url=item["contents_url"]))
        except (KeyError, TypeError) as e:
            raise ParseError(f"Search item is missing {e}") from e
    return repos


def discover_repositories(
    client,
    language: str,
    max_repositories: int,
    per_page: int = PER_PAGE,
    page_delay: float = PAGE_DELAY_SECONDS,
) -> list[RepositoryDescriptor]:
    """Collect up to ``max_repositories`` repositories in search ranking order.

    Stops early on the first empty page. Any page failure propagates.
    """
    repos: list[RepositoryDescriptor] = []
    page = 1

    while len(repos) < max_repositories:
        body = client.fetch_json(
            SEARCH_ENDPOINT,
            params={"q": f"language:{language}", "per_page": per_page, "page": page},
        )
        new_repos = parse_repositories(body)
        if not new_repos:
            break

        repos.extend(new_repos)
        print(f"  page {page}: {len(new_repos)} repositories ({len(repos)} total)", flush=True)
        if len(repos) >= max_repositories:
            break

        page += 1
        time.sleep(page_delay)

    return repos[:max_repositories]
