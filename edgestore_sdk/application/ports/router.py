"""Shape of the router object ``get_token`` reads buckets from.

The SDK never builds routers; anything with these attributes works
(dataclasses, a server framework's own bucket builder, ``SimpleNamespace``).
"""
from __future__ import annotations

from typing import Any, Callable, Mapping, Protocol, Sequence, runtime_checkable


# One mapping per path level; only its first entry is evaluated.
PathParam = Mapping[str, Callable[[], str]]


@runtime_checkable
class BucketDefinition(Protocol):
    path: Sequence[PathParam]
    access_control: Any


@runtime_checkable
class Bucket(Protocol):
    definition: BucketDefinition


@runtime_checkable
class EdgeStoreRouter(Protocol):
    buckets: Mapping[str, Bucket]
