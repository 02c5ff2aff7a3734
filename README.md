# whisker

Building blocks for an entity-component-system runtime, in plain Python with
no third-party dependencies.

## Modules

- `whisker.index_like`: `IndexLike` is an unsigned 32-bit integer tagged with
  its own type. It has a null value (all bits set by default) and offers
  `make`, `null`, `to_int`, `is_valid`, `is_null` and `next`. Indexes of
  different types never compare equal.
- `whisker.ids`: typed indexes built on `IndexLike`. These include `EntityId`,
  `ArchetypeIndex`, `ChunkIndex` and `ComponentIndex`. Some have extra
  methods:
  - `ChunkCapacity` uses 0 as its null value and has `is_index_valid`.
  - `ComponentStorageIndex` has `chunk_index` / `chunk_item_index`, which are
    also available as `//` and `%`. It also has `from_archetype_index` and
    `to_archetype_index`.
  - `ComponentOffset` has `add`, `make_aligned` and `align_as`.
- `whisker.settings`: the `FunctionSafety` enum and `is_safe`.
- `whisker.crc32`: `crc32(data)`, the standard CRC-32 checksum. It accepts
  bytes-like objects, and text is encoded as UTF-8.
- `whisker.fastlog2`: `fast_log2` (a De Bruijn lookup) and `fast_log2_2`
  (highest set bit). Each returns the floor of log2 of an unsigned 32-bit
  value, and zero maps to zero. Values out of range raise `ValueError`.
- `whisker.logger`: `Logger` sends printf-style messages to the process-wide
  active `LogWriter` (`LogWriter.active()` / `LogWriter.set_active()`). The
  default writer prints to standard output. Each line carries the level and the
  caller's file and line unless `hide_context()` was called. `debug` messages
  are dropped because `is_debug_enabled()` is false.
- `whisker.timer`: `Timer` is a stopwatch that starts on creation. It has
  `reset`, `pause`, `resume`, `elapsed` (in seconds) and `status`
  (a `TimerStatus`). It takes an optional clock function.
- `whisker.benchmark`: `Benchmark.add(func, count)` times repeated calls in
  milliseconds. `show()` logs the call count, average, median, min, max,
  variance and sigma. `reset()` forgets the recorded times.
- `whisker.type_info`: `type_name(tp)` returns a stable name for a type.
  `make_type_name_from_func_name` extracts the type following `T = ` from a
  decorated function signature.
- `whisker.array_wrapper`: `ArrayWrapper` is a list that can only be indexed
  with one `IndexLike` type. It has `append`, `pop`, `erase`, `has`,
  `back_index`, `back`, `front`, `clear` and `resize`.
- `whisker.component_handler`: `RequiredComponent`, `OptionalComponent` and
  `SharedComponent` are cursors into a mutable sequence of components. They
  have `get`, `set`, `advance` (also available as `+=`) and `at`
  (also available as `[]`).
  - A handler without storage is null: it is falsy, and reading or writing
    through it raises `RuntimeError`.
  - Shared handlers never move.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from whisker.crc32 import crc32
from whisker.ids import ComponentOffset, ChunkIndex

crc32(b"123456789")                           # 0xCBF43926
ComponentOffset.make(5).align_as(8).to_int()  # 8
ChunkIndex.null().is_null()                   # True
```

```python
from whisker.array_wrapper import ArrayWrapper
from whisker.ids import ChunkIndex

chunks = ArrayWrapper(ChunkIndex, ["a", "b"])
chunks[ChunkIndex.make(1)]   # "b"
chunks.back_index()          # ChunkIndex(1)
```

```python
from whisker.component_handler import RequiredComponent, OptionalComponent

positions = [1.0, 2.0, 3.0]
handler = RequiredComponent(positions)
handler.get()        # 1.0
handler.advance()
handler.set(20.0)    # positions == [1.0, 20.0, 3.0]

bool(OptionalComponent())   # False
```

```python
from whisker.benchmark import Benchmark
from whisker.logger import Logger

bench = Benchmark()
bench.add(lambda: sum(range(10_000)), 10)
bench.show()

Logger().info("loaded %d items", 3)   # Info: loaded 3 items | at: <file>:<line>
```

## What it does not do

whisker provides the pieces only. It has no worker threads or job scheduler for
running work in parallel, and it does not call functions by matching arguments
to their annotations. It also has no world, entity manager or archetype storage
that would use these indexes and handlers. It has no command-line interface.