"""Grouping and indexing primitives shared by the analytics queries.

Grouping is two-phase: records are first bucketed by a derived key into an
insertion-ordered dict (keys appear in order of first occurrence), then each
bucket is reduced. Results are wrapped in ``MappingProxyType`` so callers
cannot modify them.
"""

from __future__ import annotations

import logging
from functools import reduce
from types import MappingProxyType
from typing import Any, Callable, Hashable, Iterable, Mapping, TypeVar

from account_analytics.exceptions import DuplicateKeyError

logger = logging.getLogger(__name__)

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
R = TypeVar("R")


def group_by(
    items: Iterable[T],
    key_fn: Callable[[T], K],
    value_fn: Callable[[T], V] | None = None,
) -> dict[K, list[V]]:
    """Bucket items by key, preserving first-occurrence key order.

    Parameters
    ----------
    items : Iterable[T]
        Items to group.
    key_fn : Callable[[T], K]
        Derives the bucket key of an item.
    value_fn : Callable[[T], V] | None
        Maps an item to the value stored in its bucket (default: the item).

    Returns
    -------
    dict[K, list[V]]
        Mutable buckets; callers reduce them before handing them out.
    """
    buckets: dict[K, list[V]] = {}
    for item in items:
        value = value_fn(item) if value_fn is not None else item
        buckets.setdefault(key_fn(item), []).append(value)
    return buckets


def group_reduce(
    items: Iterable[T],
    key_fn: Callable[[T], K],
    reduce_fn: Callable[[R, V], R],
    identity: R,
    value_fn: Callable[[T], V] | None = None,
) -> Mapping[K, R]:
    """Group items by key and fold each bucket starting from ``identity``.

    Keys without items never appear in the result.
    """
    return MappingProxyType({
        key: reduce(reduce_fn, bucket, identity)
        for key, bucket in group_by(items, key_fn, value_fn).items()
    })


def group_collect(
    items: Iterable[T],
    key_fn: Callable[[T], K],
    finisher: Callable[[list[V]], R],
    value_fn: Callable[[T], V] | None = None,
) -> Mapping[K, R]:
    """Group items by key and apply ``finisher`` to each whole bucket.

    Used for reductions that need the bucket at once, such as ``tuple``,
    ``frozenset`` or ``", ".join``.
    """
    return MappingProxyType({
        key: finisher(bucket)
        for key, bucket in group_by(items, key_fn, value_fn).items()
    })


def to_unique_map(
    items: Iterable[T],
    key_fn: Callable[[T], K],
    value_fn: Callable[[T], V] | None = None,
) -> Mapping[K, Any]:
    """Build a key -> value map, failing on the first repeated key.

    Raises
    ------
    DuplicateKeyError
        If two items derive the same key.
    """
    result: dict[K, Any] = {}
    for item in items:
        key = key_fn(item)
        value = value_fn(item) if value_fn is not None else item
        if key in result:
            logger.debug("Duplicate key %r while building index", key)
            raise DuplicateKeyError(key, result[key], value)
        result[key] = value
    return MappingProxyType(result)
