"""Typed views of the envelopes returned by Reddit's ``.json`` endpoints.

Every object Reddit sends is a *thing*: ``{"kind": ..., "data": {...}}`` where
``kind`` selects the shape of ``data``. Only the kinds seen in subreddit
listings and comment trees are modelled (``Listing``, ``more``, ``t1``,
``t3``); anything else fails validation instead of being dropped.

See https://github.com/reddit-archive/reddit/wiki/JSON
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    JsonValue,
    StrictBool,
    StrictInt,
    StrictStr,
    TypeAdapter,
    field_validator,
    model_validator,
)

from redditjson.schemas.common import PostHint, ThingKind

KIND_TAGS = frozenset(kind.value for kind in ThingKind)


def _require_number(value: Any) -> Any:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError('expected a JSON number')
    return value


JsonNumber = Annotated[float, BeforeValidator(_require_number)]


class _Model(BaseModel):
    model_config = ConfigDict(frozen=True, extra='ignore')


class Votable(_Model):
    """Vote state. ``ups``/``downs`` are fuzzed by Reddit and are not real tallies."""

    ups: StrictInt
    downs: StrictInt = Field(ge=0)
    # True = upvoted, False = downvoted, None = no vote or anonymous.
    likes: StrictBool | None = None


class Created(_Model):
    # Neither value ever has a non-zero fraction; created_utc is the one to use.
    created: JsonNumber
    created_utc: JsonNumber


_VOTABLE_FIELDS = tuple(Votable.model_fields)
_CREATED_FIELDS = tuple(Created.model_fields)


def _compose_fragments(data: Any) -> Any:
    if not isinstance(data, dict):
        return data
    composed = dict(data)
    composed['votable'] = {key: data[key] for key in _VOTABLE_FIELDS if key in data}
    composed['created'] = {key: data[key] for key in _CREATED_FIELDS if key in data}
    return composed


class _VotableCreated(_Model):
    votable: Votable
    created: Created

    @model_validator(mode='before')
    @classmethod
    def _merge_flat_fields(cls, data: Any) -> Any:
        return _compose_fragments(data)

    @property
    def ups(self) -> int:
        return self.votable.ups

    @property
    def downs(self) -> int:
        return self.votable.downs

    @property
    def likes(self) -> bool | None:
        return self.votable.likes

    @property
    def created_utc(self) -> float:
        return self.created.created_utc


class Listing(_Model):
    # Fullnames of the neighbouring pages; None when there is no such page.
    before: StrictStr | None = None
    after: StrictStr | None = None
    modhash: StrictStr
    children: tuple[AnyThing, ...]
    dist: StrictInt | None = None
    geo_filter: StrictStr | None = None


class More(_Model):
    """Ids of children left out of a listing page because there were too many."""

    children: tuple[StrictStr, ...]
    count: StrictInt | None = None
    depth: StrictInt | None = None
    parent_id: StrictStr | None = None


class Comment(_VotableCreated):
    id: StrictStr
    name: StrictStr
    approved_by: StrictStr | None = None
    author: StrictStr
    author_flair_css_class: StrictStr | None = None
    author_flair_text: StrictStr | None = None
    banned_by: StrictStr | None = None
    body: StrictStr
    # HTML-escaped.
    body_html: StrictStr
    special: JsonValue = None
    # False, an edit timestamp, or True for some old comments.
    edited: JsonValue = None
    gilded: StrictInt
    link_author: StrictStr | None = None
    link_id: StrictStr
    link_title: StrictStr | None = None
    link_url: StrictStr | None = None
    num_reports: StrictInt | None = None
    parent_id: StrictStr
    permalink: StrictStr | None = None
    depth: StrictInt | None = None
    replies: AnyThing | None = None
    saved: StrictBool
    score: StrictInt
    score_hidden: StrictBool
    subreddit: StrictStr
    subreddit_id: StrictStr
    distinguished: StrictStr | None = None

    @field_validator('replies', mode='before')
    @classmethod
    def _empty_replies(cls, value: Any) -> Any:
        # Reddit sends "" instead of null when a comment has no replies.
        if value == '':
            return None
        return value


class Link(_VotableCreated):
    id: StrictStr
    name: StrictStr
    author: StrictStr
    author_flair_css_class: StrictStr | None = None
    author_flair_text: StrictStr | None = None
    clicked: StrictBool
    domain: StrictStr
    hidden: StrictBool
    is_self: StrictBool
    link_flair_css_class: StrictStr | None = None
    link_flair_text: StrictStr | None = None
    locked: StrictBool
    media: JsonValue = None
    media_embed: JsonValue = None
    num_comments: StrictInt
    over_18: StrictBool
    permalink: StrictStr
    saved: StrictBool
    score: StrictInt
    selftext: StrictStr
    selftext_html: StrictStr | None = None
    subreddit: StrictStr | None = None
    subreddit_id: StrictStr
    thumbnail: StrictStr | None = None
    title: StrictStr
    url: StrictStr
    # False, or the edit timestamp.
    edited: JsonValue
    distinguished: StrictStr | None = None
    stickied: StrictBool

    # Observed on live payloads but undocumented.
    archived: StrictBool = False
    author_flair_template_id: StrictStr | None = None
    author_flair_text_color: StrictStr | None = None
    author_flair_type: StrictStr | None = None
    author_fullname: StrictStr | None = None
    author_patreon_flair: StrictBool | None = None
    can_gild: StrictBool = False
    can_mod_post: StrictBool = False
    contest_mode: StrictBool = False
    crosspost_parent_list: tuple[Link, ...] | None = None
    gilded: StrictInt = 0
    hide_score: StrictBool = False
    is_crosspostable: StrictBool = False
    is_meta: StrictBool = False
    is_original_content: StrictBool = False
    is_reddit_media_domain: StrictBool = False
    is_robot_indexable: StrictBool = True
    is_video: StrictBool = False
    link_flair_text_color: StrictStr | None = None
    link_flair_type: StrictStr | None = None
    media_only: StrictBool = False
    no_follow: StrictBool = False
    num_crossposts: StrictInt = 0
    parent_whitelist_status: StrictStr | None = None
    pinned: StrictBool = False
    post_hint: PostHint | None = None
    pwls: StrictInt | None = None
    quarantine: StrictBool = False
    send_replies: StrictBool = False
    spoiler: StrictBool = False
    subreddit_name_prefixed: StrictStr | None = None
    subreddit_subscribers: StrictInt = 0
    subreddit_type: StrictStr | None = None
    suggested_sort: StrictStr | None = None
    thumbnail_height: StrictInt | None = None
    thumbnail_width: StrictInt | None = None
    visited: StrictBool = False
    whitelist_status: StrictStr | None = None
    wls: StrictInt | None = None


ThingData = Union[Listing, More, Comment, Link]


class Thing(_Model):
    """Base envelope. ``id``/``name`` are only set on user-addressable kinds."""

    kind: StrictStr
    id: StrictStr | None = None
    name: StrictStr | None = None
    data: ThingData

    @classmethod
    def model_validate(cls, obj: Any, **kwargs: Any) -> Thing:
        # Plain Thing validation goes through the closed union so "kind" picks the model.
        if cls is Thing:
            return _ANY_THING.validate_python(obj, **kwargs)
        return super().model_validate(obj, **kwargs)

    @classmethod
    def model_validate_json(cls, json_data: str | bytes | bytearray, **kwargs: Any) -> Thing:
        if cls is Thing:
            return _ANY_THING.validate_json(json_data, **kwargs)
        return super().model_validate_json(json_data, **kwargs)

    @model_validator(mode='after')
    def _check_kind_matches_payload(self) -> Thing:
        payload_type = PAYLOAD_TYPES.get(self.kind)
        if payload_type is None:
            raise ValueError(f'unsupported kind {self.kind!r}')
        if not isinstance(self.data, payload_type):
            raise ValueError(f'{self.kind} things carry {payload_type.__name__} data')
        addressable = self.kind in (ThingKind.comment.value, ThingKind.link.value)
        if addressable and (self.id is None or self.name is None):
            raise ValueError(f'{self.kind} things need an id and a name')
        if not addressable and (self.id is not None or self.name is not None):
            raise ValueError(f'{self.kind} things have no id or name')
        return self

    def as_listing(self) -> Listing | None:
        return self.data if isinstance(self.data, Listing) else None

    def as_more(self) -> More | None:
        return self.data if isinstance(self.data, More) else None

    def as_comment(self) -> Comment | None:
        return self.data if isinstance(self.data, Comment) else None

    def as_link(self) -> Link | None:
        return self.data if isinstance(self.data, Link) else None


class ListingThing(Thing):
    kind: Literal['Listing']
    id: None = None
    name: None = None
    data: Listing


class MoreThing(Thing):
    kind: Literal['more']
    id: None = None
    name: None = None
    data: More


class _AddressableThing(Thing):
    @model_validator(mode='before')
    @classmethod
    def _lift_identifiers(cls, value: Any) -> Any:
        if not isinstance(value, dict) or not isinstance(value.get('data'), dict):
            return value
        lifted = dict(value)
        for key in ('id', 'name'):
            if lifted.get(key) is None and key in value['data']:
                lifted[key] = value['data'][key]
        return lifted


class CommentThing(_AddressableThing):
    kind: Literal['t1']
    data: Comment


class LinkThing(_AddressableThing):
    kind: Literal['t3']
    data: Link


# The closed set of envelopes; any other "kind" is a validation error.
AnyThing = Annotated[
    Union[ListingThing, MoreThing, CommentThing, LinkThing],
    Field(discriminator='kind'),
]

for _model in (Listing, More, Comment, Link, Thing, ListingThing, MoreThing, CommentThing, LinkThing):
    _model.model_rebuild()

PAYLOAD_TYPES: dict[str, type[_Model]] = {
    ThingKind.listing.value: Listing,
    ThingKind.more.value: More,
    ThingKind.comment.value: Comment,
    ThingKind.link.value: Link,
}

_ANY_THING: TypeAdapter[Thing] = TypeAdapter(AnyThing)
