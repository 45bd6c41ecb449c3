from .discover_repositories import SEARCH_ENDPOINT, discover_repositories, parse_repositories

__all__ = ["SEARCH_ENDPOINT", "discover_repositories", "parse_repositories"]
