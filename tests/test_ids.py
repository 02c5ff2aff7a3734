import pytest

from whisker.ids import (
    ArchetypeEntityIndex,
    ChunkCapacity,
    ChunkIndex,
    ChunkItemIndex,
    ComponentId,
    ComponentOffset,
    ComponentStorageIndex,
    EntityId,
)


def test_chunk_capacity_null_is_zero():
    capacity = ChunkCapacity()
    assert capacity.is_null()
    assert capacity.to_int() == 0


def test_chunk_capacity_is_index_valid():
    capacity = ChunkCapacity.make(4)
    assert capacity.is_index_valid(ChunkItemIndex.make(0))
    assert capacity.is_index_valid(ChunkItemIndex.make(3))
    assert not capacity.is_index_valid(ChunkItemIndex.make(4))
    assert not capacity.is_index_valid(ChunkItemIndex.null())


def test_distinct_id_types_do_not_compare_equal():
    assert EntityId.make(1) != ComponentId.make(1)


@pytest.mark.parametrize("value", [0, 1, 5, 63, 64, 1000])
@pytest.mark.parametrize("cap", [1, 3, 16])
def test_storage_index_split_reassembles(value, cap):
    index = ComponentStorageIndex.make(value)
    capacity = ChunkCapacity.make(cap)
    chunk = index.chunk_index(capacity)
    item = index.chunk_item_index(capacity)
    assert chunk.to_int() * cap + item.to_int() == value
    assert capacity.is_index_valid(item)
    assert index // capacity == chunk
    assert index % capacity == item


def test_storage_index_with_null_capacity():
    index = ComponentStorageIndex.make(10)
    assert index.chunk_index(ChunkCapacity.null()) == ChunkIndex.null()
    assert index.chunk_item_index(ChunkCapacity.null()) == ChunkItemIndex.null()


def test_storage_and_archetype_index_round_trip():
    original = ArchetypeEntityIndex.make(77)
    storage = ComponentStorageIndex.from_archetype_index(original)
    assert storage.to_int() == 77
    assert storage.to_archetype_index() == original


def test_offset_add_bytes_and_items():
    offset = ComponentOffset.make(8)
    assert offset.add(3) == ComponentOffset.make(11)
    assert offset.add(3, 4) == ComponentOffset.make(8 + 3 * 4)


@pytest.mark.parametrize("value", [0, 1, 7, 8, 9, 31, 100])
@pytest.mark.parametrize("align", [1, 2, 4, 8, 16])
def test_make_aligned_invariants(value, align):
    aligned = ComponentOffset.make_aligned(ComponentOffset.make(value), align)
    assert aligned.to_int() % align == 0
    assert value <= aligned.to_int() < value + align
    assert ComponentOffset.make(value).align_as(align) == aligned


def test_aligned_offset_unchanged():
    assert ComponentOffset.make(16).align_as(8) == ComponentOffset.make(16)


def test_zero_offset_stays_zero():
    assert ComponentOffset.make(0).align_as(8) == ComponentOffset.make(0)


def test_invalid_alignment_rejected():
    with pytest.raises(ValueError):
        ComponentOffset.make(4).align_as(0)