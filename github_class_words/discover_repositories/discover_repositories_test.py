"""Unit tests for repository discovery pagination."""

from unittest.mock import MagicMock, call, patch

import pytest

from ..exceptions import ParseError, TransportError
from ..models import RepositoryDescriptor
from .discover_repositories import discover_repositories, parse_repositories


def _items(start, stop):
    return [
        {
            "full_name": f"owner/repo{i}",
            "contents_url": f"https://api.github.com/repos/owner/repo{i}/contents/{{+path}}",
        }
        for i in range(start, stop)
    ]


def _mock_client(pages):
    """Create a mock client serving search pages as a dict of page_num -> items.

    Missing pages return no items.
    """
    client = MagicMock()

    def fetch_side_effect(endpoint, params=None, max_retries=None):
        return {"total_count": 0, "items": pages.get(params["page"], [])}

    client.fetch_json.side_effect = fetch_side_effect
    return client


@pytest.fixture(autouse=True)
def sleep():
    with patch("time.sleep") as mock:
        yield mock


def describe_discover_repositories():

    def it_stops_on_empty_page(sleep):
        client = _mock_client({1: _items(0, 100), 2: _items(100, 130)})

        repos = discover_repositories(client, "Java", 1000)

        assert len(repos) == 130
        # pages 1, 2 and the empty page 3
        assert client.fetch_json.call_count == 3
        assert sleep.call_args_list == [call(2.0), call(2.0)]

    def it_truncates_to_max_repositories(sleep):
        client = _mock_client({p: _items((p - 1) * 100, p * 100) for p in range(1, 6)})

        repos = discover_repositories(client, "Java", 250)

        assert len(repos) == 250
        assert repos[-1].full_name == "owner/repo249"
        assert client.fetch_json.call_count == 3
        # no pause after the page that reached the target
        assert sleep.call_count == 2

    def it_never_returns_more_than_requested():
        client = _mock_client({1: _items(0, 100)})

        repos = discover_repositories(client, "Java", 1)

        assert len(repos) == 1
        assert client.fetch_json.call_count == 1

    def it_preserves_search_ranking_order():
        client = _mock_client({1: _items(0, 3)})

        repos = discover_repositories(client, "Java", 10)

        assert [r.full_name for r in repos] == ["owner/repo0", "owner/repo1", "owner/repo2"]

    def it_searches_by_language_with_full_pages():
        client = _mock_client({})

        repos = discover_repositories(client, "Kotlin", 10)

        assert repos == []
        client.fetch_json.assert_called_once_with(
            "search/repositories",
            params={"q": "language:Kotlin", "per_page": 100, "page": 1},
        )

    def it_uses_configured_page_size_and_delay(sleep):
        client = _mock_client({1: _items(0, 10), 2: _items(10, 20)})

        discover_repositories(client, "Java", 100, per_page=10, page_delay=0.5)

        assert client.fetch_json.call_args_list[1].kwargs["params"]["per_page"] == 10
        assert sleep.call_args_list == [call(0.5), call(0.5)]

    def it_propagates_page_failures():
        client = _mock_client({1: _items(0, 100)})
        client.fetch_json.side_effect = [
            {"items": _items(0, 100)},
            TransportError(422, "https://api.github.com/search/repositories"),
        ]

        with pytest.raises(TransportError) as exc_info:
            discover_repositories(client, "Java", 1000)

        assert exc_info.value.status_code == 422


def describe_parse_repositories():

    def it_parses_descriptors():
        repos = parse_repositories({"items": _items(0, 1)})
        assert repos == [
            RepositoryDescriptor(
                full_name="owner/repo0",
                contents_url="https://api.github.com/repos/owner/repo0/contents/{+path}",
            )
        ]

    def it_treats_missing_items_as_empty():
        assert parse_repositories({"message": "nothing here"}) == []

    def it_rejects_non_object_bodies():
        with pytest.raises(ParseError):
            parse_repositories([])

    def it_rejects_items_without_contents_url():
        with pytest.raises(ParseError, match="contents_url"):
            parse_repositories({"items": [{"full_name": "o/r"}]})
