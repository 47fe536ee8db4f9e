# fifocache

A thread-safe, in-memory key/value cache that evicts entries with an
S3-FIFO policy. It uses three queues:

- a **small** queue that takes new keys; it holds one tenth of the capacity,
- a **main** queue for entries that are kept longer; it holds the rest,
- a **ghost** queue that remembers only the hashes of keys dropped from the
  small queue.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from fifocache.cache import Cache

cache = Cache(100)           # total capacity; must be at least 10

cache.set("alpha", 1)
cache.set("beta", 2)

cache.get("alpha")           # -> 1
cache.get("missing")         # -> None
cache.get("missing", 0)      # -> 0

len(cache)                   # number of stored entries
cache.where("alpha")         # Placement.SMALL, MAIN, GHOST or NONE

cache.delete("beta")         # True if the key was stored or in the ghost queue
cache.clear()                # drop everything, keep the capacity
```

`Cache(size)` raises `ValueError` when `size` is below 10.

## How eviction works

- A new key enters the small queue. If its hash is in the ghost queue, the
  key goes straight into the main queue and is removed from the ghost queue.
  Setting a key that is already stored only replaces its value.
- Each `get` of a stored key counts as a hit. The count stops at three.
- When the small queue overflows, its oldest entry moves to the main queue
  if it has at least one hit or if the main queue still has room. Its hit
  count then goes back to zero. If neither is true, the entry is dropped and
  its hash is put in the ghost queue.
- When the main queue overflows, its oldest entry is dropped if it has no
  hits. If it has hits, one hit is taken off and the entry goes back to the
  tail of the main queue. After more than 20 such moves during a single
  `set`, the next entry evicted is dropped.
- The ghost queue is a fixed-size, direct-mapped set with as many slots as
  the main queue has. A new hash overwrites any older hash in the same slot.

Keys are identified by Python's `hash()`, reduced to 64 bits. Two keys with
the same hash share one entry.

## Building blocks

The pieces the cache uses can be imported on their own:

- `fifocache.hash_set.HashSet`: a fixed-size, direct-mapped set of integer
  hashes, with `add`, `contains_and_delete`, `in` and `len()`.
- `fifocache.node.Node` and `fifocache.node.Placement`: a cache entry with
  its value, hash, hit counter (`hit`, `reset_count`) and current queue,
  and `next_placement` to decide where an evicted entry goes.
- `fifocache.node_queue.NodeQueue`: a bounded, doubly linked FIFO of nodes.
  When it is over capacity, `put` returns the node it evicted. It also has
  `pop`, `delete`, `len()` and iteration from oldest to newest.
- `fifocache.queues`: `SmallQueue`, `MainQueue` and `GhostQueue`, which wrap
  the structures above and set each node's placement.

## What it does not do

Entries live only in memory. Nothing is written to disk, and entries do not
expire on a timer. There is no command-line tool and no network server.