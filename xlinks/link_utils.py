"""Utilities for extracting, normalizing and grouping X/Twitter links in free-form text."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from urllib.parse import urlsplit

from .models import AccountProfile, ExtractionResult, LinkRecord, LinkType

log = logging.getLogger(__name__)

_X_LINK_RE = re.compile(r"(?:https?://)?(?:www\.)?(?:twitter\.com|x\.com)/[^\s<>\"']*", re.IGNORECASE)
_TRAILING_PUNCT_RE = re.compile(r"[)}\],.;!?]+$")
_TWEET_STATUS_RE = re.compile(r"/status/\d+")

CANONICAL_HOST = "x.com"
LEGACY_HOST = "twitter.com"


def match_links(text: object) -> list[str]:
    """Find raw substrings that look like X/Twitter links, left to right."""
    if not isinstance(text, str) or not text:
        return []
    return [match.group(0) for match in _X_LINK_RE.finditer(text)]


def clean_link_candidate(link: str) -> str:
    """Trim whitespace and punctuation commonly attached to links in prose."""
    cleaned = link.strip()
    return _TRAILING_PUNCT_RE.sub("", cleaned)


def normalize_link(link: str) -> str:
    """Canonicalize a raw match to the ``https://x.com/...`` form."""
    cleaned = clean_link_candidate(link)
    if not cleaned.startswith("http"):
        cleaned = f"https://{cleaned}"
    return cleaned.replace(LEGACY_HOST, CANONICAL_HOST, 1)


def normalize_links(raw_links: Iterable[str]) -> list[str]:
    """Normalize raw matches and drop duplicates, keeping first-seen order."""
    links: list[str] = []
    seen: set[str] = set()
    for raw in raw_links:
        link = normalize_link(raw)
        if link in seen:
            continue
        seen.add(link)
        links.append(link)
    return links


def split_link_path(link: str) -> tuple[str, list[str]] | None:
    """Return the URL path and its non-empty segments, or None if unparseable."""
    try:
        parts = urlsplit(link)
    except ValueError:
        log.warning("Could not parse URL: %s", link)
        return None
    if not parts.scheme or not parts.netloc:
        log.warning("Could not parse URL: %s", link)
        return None
    return parts.path, [segment for segment in parts.path.split("/") if segment]


def account_from_segment(segment: str) -> str:
    """Strip a leading ``@`` from a handle segment."""
    return segment[1:] if segment.startswith("@") else segment


def classify_path(segments: list[str]) -> LinkType:
    """
    Classify a link by its path segments.

    Rules, first match wins:
    - A single segment is a profile.
    - Any ``status`` segment makes it a tweet.
    - Any ``lists`` segment makes it a list.
    - Everything else is other.
    """
    if len(segments) == 1:
        return "profile"
    if "status" in segments:
        return "tweet"
    if "lists" in segments:
        return "list"
    return "other"


def profile_url_for(account: str) -> str:
    return f"https://{CANONICAL_HOST}/{account}"


def group_links(links: Iterable[str]) -> dict[str, AccountProfile]:
    """Group canonical links under the account that owns them."""
    grouped: dict[str, list[LinkRecord]] = {}
    for link in links:
        split = split_link_path(link)
        if split is None:
            continue
        path, segments = split
        if not segments:
            continue
        account = account_from_segment(segments[0])
        record = LinkRecord(url=link, type=classify_path(segments), path=path)
        grouped.setdefault(account, []).append(record)

    return {
        account: AccountProfile(account=account, profile_url=profile_url_for(account), links=records)
        for account, records in grouped.items()
    }


def filter_tweet_links(links: Iterable[str]) -> list[str]:
    """Keep only tweet permalinks (``/status/<digits>``), preserving order."""
    return [link for link in links if _TWEET_STATUS_RE.search(link)]


def extract(text: object) -> ExtractionResult:
    """Extract, normalize, deduplicate and group the X links found in text."""
    links = normalize_links(match_links(text))
    profiles = group_links(links)
    log.debug("Extracted %d links across %d accounts", len(links), len(profiles))
    return ExtractionResult(links=links, profiles=profiles)
