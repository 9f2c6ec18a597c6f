"""Pydantic models for extracted X links."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

LinkType = Literal["profile", "tweet", "list", "other"]


class LinkRecord(BaseModel):
    """A canonical link classified by resource type."""

    model_config = ConfigDict(frozen=True)

    url: str
    type: LinkType
    path: str


class AccountProfile(BaseModel):
    """All links that belong to one account, in processing order."""

    account: str
    profile_url: str
    links: list[LinkRecord] = []


class ExtractionResult(BaseModel):
    """Flat list of canonical links plus the per-account grouping."""

    links: list[str] = []
    profiles: dict[str, AccountProfile] = {}

    @property
    def accounts(self) -> list[str]:
        return list(self.profiles)

    @property
    def records(self) -> list[LinkRecord]:
        return [record for profile in self.profiles.values() for record in profile.links]

    @property
    def tweet_links(self) -> list[str]:
        from ..link_utils import filter_tweet_links

        return filter_tweet_links(self.links)
