from __future__ import annotations

FULLNAME_PREFIXES = ('t1_', 't2_', 't3_', 't4_', 't5_', 't6_')
# Characters that end or re-encode a URL path segment.
PATH_SEPARATORS = frozenset('/?#%\\')


def strip_kind_prefix(fullname: str) -> str:
    """``t3_abc123`` -> ``abc123``; bare ids are returned unchanged."""
    if fullname.startswith(FULLNAME_PREFIXES):
        return fullname.split('_', 1)[1]
    return fullname


def check_path_segment(value: str, what: str) -> str:
    """Reject values that would escape their slot in a ``/r/...`` URL path."""
    if (
        not isinstance(value, str)
        or value in ('', '.', '..')
        or any(ch in PATH_SEPARATORS or ch.isspace() for ch in value)
    ):
        raise ValueError(f'invalid {what} {value!r}')
    return value
