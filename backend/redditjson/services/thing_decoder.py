from __future__ import annotations

import json
from json.decoder import scanstring
import logging
import re
from typing import Any

from pydantic import TypeAdapter, ValidationError

from redditjson.core.errors import DecodeError
from redditjson.schemas.things import KIND_TAGS, AnyThing, Thing

LOGGER = logging.getLogger(__name__)
DEFAULT_EXCERPT_CHARS = 4096

WHITESPACE_RE = re.compile(r'[ \t\n\r]*')
_RAW_DECODER = json.JSONDecoder()

_THING = TypeAdapter(AnyThing)
_THINGS = TypeAdapter(list[AnyThing])


def decode_thing(document: bytes | str, *, excerpt_chars: int = DEFAULT_EXCERPT_CHARS) -> Thing:
    """Decode a single envelope, e.g. the body of ``/r/{subreddit}.json``."""
    return _decode(document, _THING, excerpt_chars)


def decode_things(document: bytes | str, *, excerpt_chars: int = DEFAULT_EXCERPT_CHARS) -> list[Thing]:
    """Decode a top-level array of envelopes, e.g. a post and its comment listing."""
    return _decode(document, _THINGS, excerpt_chars)


def _decode(document: bytes | str, adapter: TypeAdapter, excerpt_chars: int) -> Any:
    text = _as_text(document, excerpt_chars)

    # Syntax first, so positions come from the JSON parser.
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        LOGGER.debug('invalid JSON at line %s column %s: %s', exc.lineno, exc.colno, exc.msg)
        raise DecodeError(
            exc.msg,
            document=text[:excerpt_chars],
            line=exc.lineno,
            column=exc.colno,
            position=exc.pos,
            truncated=len(text) > excerpt_chars,
        ) from exc

    # Then the envelope: "kind" picks the variant that "data" is validated against.
    try:
        return adapter.validate_python(payload)
    except ValidationError as exc:
        raise _structural_error(exc, text, excerpt_chars) from exc


def _as_text(document: bytes | str, excerpt_chars: int) -> str:
    if isinstance(document, str):
        return document
    try:
        return document.decode('utf-8')
    except UnicodeDecodeError as exc:
        prefix = document[: exc.start].decode('utf-8', errors='replace')
        line, column = _line_column(prefix, len(prefix))
        raise DecodeError(
            f'invalid UTF-8: {exc.reason}',
            document=document[:excerpt_chars].decode('utf-8', errors='replace'),
            line=line,
            column=column,
            position=exc.start,
            truncated=len(document) > excerpt_chars,
        ) from exc


def _structural_error(exc: ValidationError, text: str, excerpt_chars: int) -> DecodeError:
    errors = exc.errors(include_url=False)
    first = errors[0]
    message = first['msg']
    if len(errors) > 1:
        message = f'{message} (and {len(errors) - 1} more)'
    location = wire_path(first['loc'])
    LOGGER.debug('document does not match schema at %s: %s', '.'.join(map(str, location)) or '<root>', message)
    position = locate(text, location)
    line, column = _line_column(text, position)
    return DecodeError(
        message,
        document=text[:excerpt_chars],
        line=line,
        column=column,
        position=position,
        location=location,
        truncated=len(text) > excerpt_chars,
    )


def wire_path(loc: tuple[str | int, ...]) -> tuple[str | int, ...]:
    """Map a pydantic error location back onto the JSON document's keys.

    Union branches add the matched ``kind`` to the location and the composed
    ``votable``/``created`` fragments add a level that the wire format does not
    have; both are dropped.
    """
    path: list[str | int] = []
    for idx, part in enumerate(loc):
        if isinstance(part, str) and part in KIND_TAGS:
            continue
        if part == 'votable':
            continue
        if part == 'created' and idx + 1 < len(loc) and loc[idx + 1] in ('created', 'created_utc'):
            continue
        path.append(part)
    return tuple(path)


def _line_column(text: str, position: int) -> tuple[int, int]:
    line = text.count('\n', 0, position) + 1
    column = position - text.rfind('\n', 0, position)
    return line, column


def locate(text: str, path: tuple[str | int, ...]) -> int:
    """Character offset of the value at ``path`` in a valid JSON ``text``.

    Stops at the deepest value that exists, so a missing key points at the
    object that should have held it.
    """
    position = _skip_whitespace(text, 0)
    for part in path:
        child = _child_offset(text, position, part)
        if child is None:
            break
        position = child
    return position


def _child_offset(text: str, position: int, part: str | int) -> int | None:
    if text.startswith('{', position) and isinstance(part, str):
        found = None
        position = _skip_whitespace(text, position + 1)
        while text.startswith('"', position):
            key, position = scanstring(text, position + 1)
            position = _skip_whitespace(text, _skip_whitespace(text, position) + 1)
            # Duplicate keys: json.loads keeps the last one.
            if key == part:
                found = position
            position = _skip_value(text, position)
        return found
    if text.startswith('[', position) and isinstance(part, int) and not isinstance(part, bool):
        position = _skip_whitespace(text, position + 1)
        index = 0
        while position < len(text) and text[position] != ']':
            if index == part:
                return position
            position = _skip_value(text, position)
            index += 1
        return None
    return None


def _skip_value(text: str, position: int) -> int:
    _, end = _RAW_DECODER.raw_decode(text, position)
    end = _skip_whitespace(text, end)
    if text.startswith(',', end):
        end = _skip_whitespace(text, end + 1)
    return end


def _skip_whitespace(text: str, position: int) -> int:
    return WHITESPACE_RE.match(text, position).end()
