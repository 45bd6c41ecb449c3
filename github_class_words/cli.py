"""CLI commands for the class-name word census."""

import argparse
import json
from pathlib import Path


def _positive_int(value):
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return number


def _add_search_arguments(parser):
    parser.add_argument(
        "--language",
        default=None,
        help="Repository language to search (default: TARGET_LANGUAGE or Java)",
    )
    parser.add_argument(
        "--max-repos",
        type=_positive_int,
        default=None,
        help="Maximum number of repositories (default: MAX_REPOSITORIES or 1000)",
    )
    parser.add_argument(
        "--skip-cache",
        action="store_true",
        help="Skip reading from cache (still writes to cache)",
    )


def _settings_from_args(args):
    from .settings import Settings, get_settings

    overrides = {
        "target_language": args.language,
        "max_repositories": args.max_repos,
        "file_extension": getattr(args, "extension", None),
        "retry_ceiling": getattr(args, "max_retries", None),
    }
    # model_validate re-checks field bounds on the merged values
    return Settings.model_validate(
        {**get_settings().model_dump(), **{k: v for k, v in overrides.items() if v is not None}}
    )


def main():
    parser = argparse.ArgumentParser(
        description="Count camel-case words in class names across GitHub repositories",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # crawl subcommand
    crawl_parser = subparsers.add_parser(
        "crawl",
        help="Discover repositories, fetch source files and count class-name words",
    )
    _add_search_arguments(crawl_parser)
    crawl_parser.add_argument(
        "--extension",
        default=None,
        help="File name suffix to collect (default: FILE_EXTENSION or .java)",
    )
    crawl_parser.add_argument(
        "--max-retries",
        type=_positive_int,
        default=None,
        help="Attempts per request while rate limited (default: RETRY_CEILING or 15)",
    )
    crawl_parser.add_argument(
        "--top",
        type=_positive_int,
        default=None,
        help="Only print the N most frequent words (default: all)",
    )
    crawl_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write the final word counts to a JSON file",
    )

    # discover subcommand
    discover_parser = subparsers.add_parser(
        "discover",
        help="List repositories the crawl would visit",
    )
    _add_search_arguments(discover_parser)

    args = parser.parse_args()

    if args.command == "crawl":
        from .crawl import crawl

        settings = _settings_from_args(args)
        summary = crawl(settings, top=args.top, skip_cache=args.skip_cache)

        if args.output:
            args.output.parent.mkdir(parents=True, exist_ok=True)
            with open(args.output, "w") as f:
                json.dump(dict(summary.word_counts.most_common()), f, indent=2)
            print(f"Wrote {len(summary.word_counts)} words to {args.output}")
    elif args.command == "discover":
        from .client import get_client
        from .discover_repositories import discover_repositories

        settings = _settings_from_args(args)
        client = get_client(settings, skip_cache=args.skip_cache)
        repos = discover_repositories(
            client,
            settings.target_language,
            settings.max_repositories,
            per_page=settings.page_size,
            page_delay=settings.page_delay,
        )
        for repo in repos:
            print(repo.full_name)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
