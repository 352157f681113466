"""
Conversion between the wire form of a ranking and RankEntry tuples.

The wire form is a JSON array of ``{"name": str, "score": int}`` objects.
A payload with any invalid element is rejected as a whole; entries are
never silently dropped.
"""

from typing import Sequence, Union

from pydantic import TypeAdapter, ValidationError

from ranking_sync.exceptions import MalformedPayload
from ranking_sync.models import RankEntry, Ranking

_RANKING_ADAPTER = TypeAdapter(list[RankEntry])


def decode(payload: Union[bytes, str]) -> Ranking:
    """
    Decode a ranking payload, preserving server order.

    Args:
        payload: Raw response body

    Returns:
        Tuple of RankEntry in payload order. An empty body yields an
        empty tuple.

    Raises:
        MalformedPayload: If the body is not a JSON array of valid entries
    """
    if not payload.strip():
        return ()

    try:
        entries = _RANKING_ADAPTER.validate_json(payload)
    except ValidationError as e:
        raise MalformedPayload(str(e)) from e

    return tuple(entries)


def encode(entries: Sequence[RankEntry]) -> bytes:
    """Encode entries as a JSON array in the given order."""
    return _RANKING_ADAPTER.dump_json(list(entries))
