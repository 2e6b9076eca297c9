from dataclasses import dataclass, field
from types import MappingProxyType

EMPTY_TILE_ID = 0

NO_PROPERTIES = MappingProxyType({})


def freeze_properties(properties):
    """Return a read-only copy of a property mapping."""
    return MappingProxyType(dict(properties or {}))


@dataclass(frozen=True)
class EmptyTile:
    """Air: nothing to draw, nothing to query."""
    properties: MappingProxyType = field(default_factory=lambda: NO_PROPERTIES, compare=False)

    @property
    def is_empty(self):
        return True


@dataclass(frozen=True)
class SolidTile:
    """A tile cut out of a tileset atlas.

    atlas is the shared drawable handle of the tileset, rect the (x, y, w, h)
    source rectangle inside it and properties the tileset-declared metadata.
    """
    atlas: object
    rect: tuple
    properties: MappingProxyType = field(default_factory=lambda: NO_PROPERTIES, compare=False)

    @property
    def is_empty(self):
        return False

    def with_properties(self, properties):
        return SolidTile(self.atlas, self.rect, freeze_properties(properties))


EMPTY_TILE = EmptyTile()
