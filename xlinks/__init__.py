"""X Link Extractor - pull, normalize and group X/Twitter links out of free-form text."""

try:
    from importlib.metadata import version

    __version__ = version("xlinks")
except Exception:
    __version__ = "0.0.0-dev"

from .lines import format_json_array, lines_to_array
from .link_utils import extract, filter_tweet_links

__all__ = [
    "__version__",
    "extract",
    "filter_tweet_links",
    "format_json_array",
    "lines_to_array",
]
