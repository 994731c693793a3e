"""Request-scoped keyed batch cache."""

import asyncio
from collections.abc import Awaitable, Callable, Hashable, Iterable, Sequence
from typing import Any, Generic, TypeVar

from strawberry.dataloader import DataLoader

from breedql.exceptions import FetchFailure
from breedql.utils.keys import canonical_key

K = TypeVar("K")
V = TypeVar("V")

BatchFn = Callable[[list[K]], Awaitable[Sequence[V | BaseException]]]


class BatchCache(Generic[K, V]):
    """Memoizing, deduplicating loader for one request.

    Wraps a strawberry ``DataLoader``: the first ``load`` of a key enqueues
    it, and every key enqueued during the same event loop tick is handed to
    ``batch_fn`` in a single call. Later loads of an identity-equal key
    share the cached result, so the fetch runs at most once per key for the
    lifetime of the instance, whether it succeeded or failed.

    Each caller awaits its own shielded view of the cached entry, so a
    cancelled or timed-out caller never cancels the entry for the others.

    There is no TTL and no size bound: construct one instance per request
    and drop it when the request is done.

    Usage:
        async def fetch_users(ids: list[str]) -> list[User | None]:
            rows = await db.get_users(ids)
            by_id = {row.id: row for row in rows}
            return [by_id.get(id_) for id_ in ids]

        users = BatchCache(fetch_users)
        alice, bob = await asyncio.gather(users.load("1"), users.load("2"))
    """

    def __init__(
        self,
        batch_fn: BatchFn[K, V],
        *,
        key_fn: Callable[[K], Hashable] = canonical_key,
        max_batch_size: int | None = None,
    ) -> None:
        """Initialize the cache.

        Args:
            batch_fn: Async function receiving a list of keys and returning
                one result per key, in the same order. An exception instance
                in a position fails that key only.
            key_fn: Derives the cache identity of a key.
            max_batch_size: Split batches larger than this. None means no limit.
        """
        if max_batch_size is not None and max_batch_size < 1:
            raise ValueError("max_batch_size must be at least 1")

        self._batch_fn = batch_fn
        self._key_fn = key_fn
        self._identities: set[Hashable] = set()
        self._loader: DataLoader[K, V] = DataLoader(
            load_fn=self._load_batch,
            max_batch_size=max_batch_size,
            cache_key_fn=key_fn,
        )

    def load(self, key: K) -> "asyncio.Future[V]":
        """Load the value for a key.

        Must be called with a running event loop.

        Args:
            key: A scalar or structured key.

        Returns:
            A future resolving to the value, or raising FetchFailure.
            Cancelling it leaves the cached entry untouched.
        """
        self._identities.add(self._key_fn(key))
        return asyncio.shield(self._loader.load(key))

    async def load_many(self, keys: Iterable[K]) -> list[V]:
        """Load the values for several keys.

        Args:
            keys: The keys to load.

        Returns:
            The values, positionally matching ``keys``.

        Raises:
            FetchFailure: If any of the keys failed to load.
        """
        futures = [self.load(key) for key in keys]
        if not futures:
            return []
        return list(await asyncio.gather(*futures))

    def prime(self, key: K, value: V) -> None:
        """Seed the cache with a value, unless the key is already present."""
        if key in self:
            return

        # DataLoader.prime keys a dict by the raw key, which fails for
        # mapping keys; the cache map applies key_fn itself.
        future: asyncio.Future[V] = asyncio.get_running_loop().create_future()
        future.set_result(value)
        self._loader.cache_map.set(key, future)
        self._identities.add(self._key_fn(key))

    def __contains__(self, key: Any) -> bool:
        return self._key_fn(key) in self._identities

    def __len__(self) -> int:
        return len(self._identities)

    async def _load_batch(self, keys: list[K]) -> list[V | BaseException]:
        # Every failure becomes a per-key FetchFailure result, so DataLoader
        # settles each waiting future with it.
        try:
            results = list(await self._batch_fn(keys))
        except (asyncio.CancelledError, Exception) as e:
            # A cancelled batch must still settle its waiters.
            return [_failure(key, e) for key in keys]

        if len(results) != len(keys):
            mismatch = ValueError(
                f"batch function returned {len(results)} results "
                f"for {len(keys)} keys"
            )
            return [_failure(key, mismatch) for key in keys]

        return [
            _failure(key, result) if isinstance(result, BaseException) else result
            for key, result in zip(keys, results)
        ]


def _failure(key: Any, cause: BaseException) -> FetchFailure:
    failure = FetchFailure(key, f"Failed to fetch {key!r}: {cause}")
    failure.__cause__ = cause
    return failure
