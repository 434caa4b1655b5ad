from __future__ import annotations


class RedditError(RuntimeError):
    """Base class for every failure surfaced by the fetch client."""

    @property
    def is_not_found(self) -> bool:
        return False


class TransportError(RedditError):
    """The request/response exchange itself failed (connect, TLS, timeout, ...)."""

    def __init__(self, url: str, detail: str) -> None:
        super().__init__(f'request to {url} failed: {detail}')
        self.url = url
        self.detail = detail


class HttpStatusError(RedditError):
    def __init__(self, status_code: int, url: str, location: str | None = None) -> None:
        message = f'HTTP {status_code} for {url}'
        if location:
            message = f'{message} (redirect to {location})'
        super().__init__(message)
        self.status_code = status_code
        self.url = url
        self.location = location


class SubredditNotFoundError(RedditError):
    """Reddit redirected the request to its subreddit search page."""

    def __init__(self, subreddit: str, location: str | None = None) -> None:
        super().__init__(f'failed to locate the subreddit {subreddit!r}')
        self.subreddit = subreddit
        self.location = location

    @property
    def is_not_found(self) -> bool:
        return True


class DecodeError(RedditError, ValueError):
    """A document did not match the Reddit JSON schema.

    ``document`` holds a bounded prefix of the raw payload. ``line`` and
    ``column`` are 1-based and point at the offending token when they could be
    resolved; ``location`` is the JSON path for structural mismatches.
    """

    def __init__(
        self,
        message: str,
        *,
        document: str,
        line: int | None = None,
        column: int | None = None,
        position: int | None = None,
        location: tuple[str | int, ...] = (),
        truncated: bool = False,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.document = document
        self.line = line
        self.column = column
        self.position = position
        self.location = location
        self.truncated = truncated

    @property
    def path(self) -> str:
        return '.'.join(str(part) for part in self.location)

    def __str__(self) -> str:
        parts = [self.message]
        if self.location:
            parts.append(f'at {self.path}')
        if self.line is not None and self.column is not None:
            parts.append(f'(line {self.line}, column {self.column})')
        return ' '.join(parts)

    def excerpt(self, width: int = 30) -> str | None:
        """Return the text of the offending line starting a little before the column."""
        if self.line is None:
            return None
        lines = self.document.split('\n')
        if self.line - 1 >= len(lines):
            return None
        start = max((self.column or 1) - 1 - width, 0)
        return lines[self.line - 1][start:]
