"""Class-name extraction and camel-case word counting."""

import re
from collections import Counter
from collections.abc import Iterable

CLASS_NAME_PATTERN = re.compile(r"class\s+([A-Za-z0-9_]+)")

# Zero-width split between a lowercase and an uppercase letter
CAMEL_CASE_BOUNDARY = re.compile(r"(?<=[a-z])(?=[A-Z])")


def extract_class_names(source: str) -> list[str]:
    return CLASS_NAME_PATTERN.findall(source)


def split_camel_case(name: str) -> list[str]:
    """Split ``GitHubRepo`` into ``["Git", "Hub", "Repo"]``."""
    return CAMEL_CASE_BOUNDARY.split(name)


def count_words(class_names: Iterable[str], counts: Counter | None = None) -> Counter:
    """Tally camel-case words of each class name, adding to ``counts`` if given."""
    if counts is None:
        counts = Counter()
    for class_name in class_names:
        counts.update(split_camel_case(class_name))
    return counts


def format_popular_words(counts: Counter, top: int | None = None) -> list[str]:
    """Render ``word: count`` lines, most frequent first."""
    return [f"{word}: {count}" for word, count in counts.most_common(top)]


def display_popular_words(counts: Counter, top: int | None = None) -> None:
    print("Most popular words in class names:", flush=True)
    for line in format_popular_words(counts, top):
        print(line)
    print(flush=True)
