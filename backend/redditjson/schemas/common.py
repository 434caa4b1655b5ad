from __future__ import annotations

from enum import Enum


class PostHint(str, Enum):
    image = 'image'
    link = 'link'
    hosted_video = 'hosted:video'
    rich_video = 'rich:video'
    self_post = 'self'
    gallery = 'gallery'


class ThingKind(str, Enum):
    listing = 'Listing'
    more = 'more'
    comment = 't1'
    link = 't3'
