"""A chained hash table with caller-supplied hashing and equality.

The table grows through a fixed series of prime sizes once its load factor
passes 0.65. Iterators walk the table bucket by bucket and are invalidated
by any insertion that makes the table grow.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

_PRIMES = (
    53, 97, 193, 389, 769, 1543, 3079, 6151, 12289, 24593, 49157, 98317,
    196613, 393241, 786433, 1572869, 3145739, 6291469, 12582917, 25165843,
    50331653, 100663319, 201326611, 402653189, 805306457, 1610612741,
)
_MAX_LOAD_FACTOR = 0.65
_MAX_MINSIZE = 1 << 30
_HASH_MASK = 0xFFFFFFFF

HashFn = Callable[[Any], int]
EqFn = Callable[[Any, Any], bool]


@dataclass
class _Entry:
    key: Any
    value: Any
    hashcode: int


class HashTable:
    """Map keys to values using ``hashfn`` for hashing and ``eqfn`` for equality.

    Duplicate keys are not checked on insertion; a search finds the most
    recently inserted of them while the table keeps its size.
    """

    def __init__(
        self,
        minsize: int = 16,
        hashfn: Optional[HashFn] = None,
        eqfn: Optional[EqFn] = None,
    ) -> None:
        if minsize < 0 or minsize > _MAX_MINSIZE:
            raise ValueError(f"minsize must be between 0 and {_MAX_MINSIZE}")
        self._hashfn: HashFn = hashfn if hashfn is not None else hash
        self._eqfn: EqFn = eqfn if eqfn is not None else operator.eq
        self._primeindex = next(
            (i for i, p in enumerate(_PRIMES) if p > minsize), len(_PRIMES) - 1
        )
        size = _PRIMES[self._primeindex]
        self._buckets: list[list[_Entry]] = [[] for _ in range(size)]
        self._count = 0
        self._loadlimit = int(size * _MAX_LOAD_FACTOR + 0.999999)

    def _hash(self, key: Any) -> int:
        return self._hashfn(key) & _HASH_MASK

    def _bucket_index(self, hashcode: int) -> int:
        return hashcode % len(self._buckets)

    def _expand(self) -> None:
        if self._primeindex == len(_PRIMES) - 1:
            return
        self._primeindex += 1
        size = _PRIMES[self._primeindex]
        buckets: list[list[_Entry]] = [[] for _ in range(size)]
        for bucket in self._buckets:
            for entry in bucket:
                buckets[entry.hashcode % size].insert(0, entry)
        self._buckets = buckets
        self._loadlimit = int(size * _MAX_LOAD_FACTOR + 0.999999)

    def _find(self, key: Any) -> Optional[tuple[int, int]]:
        hashcode = self._hash(key)
        index = self._bucket_index(hashcode)
        for pos, entry in enumerate(self._buckets[index]):
            if entry.hashcode == hashcode and self._eqfn(key, entry.key):
                return index, pos
        return None

    def insert(self, key: Any, value: Any) -> None:
        """Add a key-value pair, growing the table if it becomes too full."""
        self._count += 1
        if self._count > self._loadlimit:
            self._expand()
        hashcode = self._hash(key)
        self._buckets[self._bucket_index(hashcode)].insert(
            0, _Entry(key, value, hashcode)
        )

    def search(self, key: Any) -> Any:
        """Return the value bound to ``key``, or None if there is none."""
        found = self._find(key)
        if found is None:
            return None
        index, pos = found
        return self._buckets[index][pos].value

    def remove(self, key: Any) -> Any:
        """Remove ``key`` and return its value; return None if it is absent."""
        found = self._find(key)
        if found is None:
            return None
        index, pos = found
        entry = self._buckets[index].pop(pos)
        self._count -= 1
        return entry.value

    def change(self, key: Any, value: Any) -> bool:
        """Rebind an existing key to ``value``; return False if it is absent."""
        found = self._find(key)
        if found is None:
            return False
        index, pos = found
        self._buckets[index][pos].value = value
        return True

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None

    def __iter__(self) -> Iterator[Any]:
        """Yield the keys, bucket by bucket, from a snapshot of the table."""
        keys = [entry.key for bucket in self._buckets for entry in bucket]
        return iter(keys)

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs from a snapshot of the table."""
        pairs = [(e.key, e.value) for bucket in self._buckets for e in bucket]
        return iter(pairs)

    def iterator(self) -> "HashTableIterator":
        """Return a cursor positioned on the first entry."""
        return HashTableIterator(self)


class HashTableIterator:
    """A cursor over a ``HashTable`` that can also remove and seek entries."""

    def __init__(self, table: HashTable) -> None:
        self._table = table
        self._index: Optional[int] = None
        self._pos = 0
        self._seek_from(0)

    def _seek_from(self, start: int) -> bool:
        buckets = self._table._buckets
        for index in range(start, len(buckets)):
            if buckets[index]:
                self._index = index
                self._pos = 0
                return True
        self._index = None
        self._pos = 0
        return False

    def _current(self) -> _Entry:
        if self._index is None:
            raise LookupError("iterator is not positioned on an entry")
        return self._table._buckets[self._index][self._pos]

    @property
    def exhausted(self) -> bool:
        """True when the cursor is past the last entry."""
        return self._index is None

    def key(self) -> Any:
        """The key at the current position."""
        return self._current().key

    def value(self) -> Any:
        """The value at the current position."""
        return self._current().value

    def advance(self) -> bool:
        """Move to the next entry; return False once the end is reached."""
        if self._index is None:
            return False
        bucket = self._table._buckets[self._index]
        if self._pos + 1 < len(bucket):
            self._pos += 1
            return True
        return self._seek_from(self._index + 1)

    def remove(self) -> bool:
        """Remove the current entry and move on; return False at the end."""
        if self._index is None:
            raise LookupError("iterator is not positioned on an entry")
        bucket = self._table._buckets[self._index]
        del bucket[self._pos]
        self._table._count -= 1
        if self._pos < len(bucket):
            return True
        return self._seek_from(self._index + 1)

    def search(self, key: Any) -> bool:
        """Position the cursor on ``key``; return False if it is absent."""
        found = self._table._find(key)
        if found is None:
            return False
        self._index, self._pos = found
        return True