"""Count the words GitHub projects use to name their classes.

Searches repositories by language, walks each repository's tree through the
contents API and tallies camel-case words of every declared class name.
"""

from .cli import main
from .client import get_client
from .models import CrawlSummary

__all__ = ["main", "get_client", "CrawlSummary"]

if __name__ == "__main__":
    main()
