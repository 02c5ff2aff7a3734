"""Identifier and index types used by the entity-component system."""

from __future__ import annotations

from whisker.index_like import UINT32_MASK, IndexLike


class EntityId(IndexLike):
    __slots__ = ()


class EntityVersion(IndexLike):
    __slots__ = ()


class WorldId(IndexLike):
    __slots__ = ()


class WorldVersion(IndexLike):
    __slots__ = ()


class ComponentId(IndexLike):
    __slots__ = ()


class SharedComponentId(IndexLike):
    __slots__ = ()


class ArchetypeIndex(IndexLike):
    """Index of an archetype in the entity manager."""

    __slots__ = ()


class TaskArchetypeIndex(IndexLike):
    """Index of an archetype within a task."""

    __slots__ = ()


class ArchetypeEntityIndex(IndexLike):
    """Index of an entity in an archetype."""

    __slots__ = ()


class ChunkItemIndex(IndexLike):
    """Index of an item in a chunk."""

    __slots__ = ()


class ChunkCapacity(IndexLike):
    """Number of items a chunk holds; zero means null."""

    __slots__ = ()
    NULL_VALUE = 0

    def is_index_valid(self, index: ChunkItemIndex) -> bool:
        return index.to_int() < self.to_int()


class DataLocation(IndexLike):
    """Location of data in component data storage."""

    __slots__ = ()


class ChunkIndex(IndexLike):
    """Index of a chunk in an archetype."""

    __slots__ = ()


class ComponentStorageIndex(IndexLike):
    """Index of an element in component data storage."""

    __slots__ = ()

    @classmethod
    def from_archetype_index(cls, index: ArchetypeEntityIndex) -> ComponentStorageIndex:
        return cls.make(index.to_int())

    def chunk_index(self, capacity: ChunkCapacity) -> ChunkIndex:
        """Chunk holding this element; null if the capacity is null."""
        if capacity.is_null():
            return ChunkIndex.null()
        return ChunkIndex.make(self.to_int() // capacity.to_int())

    def chunk_item_index(self, capacity: ChunkCapacity) -> ChunkItemIndex:
        """Position of this element inside its chunk; null if the capacity is null."""
        if capacity.is_null():
            return ChunkItemIndex.null()
        return ChunkItemIndex.make(self.to_int() % capacity.to_int())

    def __floordiv__(self, capacity: ChunkCapacity) -> ChunkIndex:
        return self.chunk_index(capacity)

    def __mod__(self, capacity: ChunkCapacity) -> ChunkItemIndex:
        return self.chunk_item_index(capacity)

    def to_archetype_index(self) -> ArchetypeEntityIndex:
        return ArchetypeEntityIndex.make(self.to_int())


class ComponentIndex(IndexLike):
    """Position of a component in an archetype."""

    __slots__ = ()


class SharedComponentIndex(IndexLike):
    __slots__ = ()


class ComponentArraySize(IndexLike):
    """Length of a component array handed to a per-array job."""

    __slots__ = ()


class ComponentOffset(IndexLike):
    """Byte offset of component data inside a chunk."""

    __slots__ = ()

    def add(self, count: int, item_size: int = 1) -> ComponentOffset:
        """Offset moved forward by ``count`` items of ``item_size`` bytes."""
        return ComponentOffset.make(self.to_int() + count * item_size)

    @classmethod
    def make_aligned(cls, offset: ComponentOffset, align: int) -> ComponentOffset:
        """Round ``offset`` up to a multiple of ``align``."""
        if align < 1:
            raise ValueError(f"alignment must be positive, got {align}")
        rounded = ((offset.to_int() - 1 + align) & UINT32_MASK) // align * align
        return cls.make(rounded)

    def align_as(self, align: int) -> ComponentOffset:
        return ComponentOffset.make_aligned(self, align)