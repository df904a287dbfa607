"""Data model for parsed TLP graph documents."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum
from itertools import chain


@dataclass(frozen=True, slots=True)
class IdRange:
    """Inclusive id range written `start..end`.

    A decreasing range is valid and simply empty.
    """

    start: int
    end: int

    def __len__(self) -> int:
        return max(self.end - self.start + 1, 0)

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.start, self.end + 1))

    def __contains__(self, node_id: object) -> bool:
        return isinstance(node_id, int) and self.start <= node_id <= self.end


@dataclass(frozen=True, slots=True)
class IdList:
    """Enumerated ids, kept verbatim (order and duplicates)."""

    ids: tuple[int, ...]

    def __len__(self) -> int:
        return len(self.ids)

    def __iter__(self) -> Iterator[int]:
        return iter(self.ids)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.ids


IdBloc = IdRange | IdList


@dataclass(frozen=True, slots=True)
class IdSet:
    """Ordered sequence of blocs declaring the node or edge ids of a scope."""

    blocs: tuple[IdBloc, ...]

    def __len__(self) -> int:
        return sum(len(bloc) for bloc in self.blocs)

    def __iter__(self) -> Iterator[int]:
        return chain.from_iterable(self.blocs)

    def __contains__(self, node_id: object) -> bool:
        return any(node_id in bloc for bloc in self.blocs)

    def to_list(self) -> list[int]:
        return list(self)


@dataclass(frozen=True, slots=True)
class Edge:
    id: int
    src: int
    tgt: int


@dataclass(frozen=True, slots=True)
class Cluster:
    """Named subset of node and edge ids, owning its nested clusters."""

    id: int
    nodes: IdSet
    edges: IdSet
    children: tuple[Cluster, ...] = ()

    @property
    def depth(self) -> int:
        """Number of cluster levels from this one down to its deepest leaf."""
        depth = 1
        level = self.children
        while level:
            depth += 1
            level = tuple(grandchild for child in level for grandchild in child.children)
        return depth

    def walk(self) -> Iterator[Cluster]:
        """Pre-order traversal, this cluster first."""
        stack: list[Cluster] = [self]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(current.children))


class PropertyType(StrEnum):
    BOOL = "bool"
    COLOR = "color"
    DOUBLE = "double"
    GRAPH = "graph"
    INT = "int"
    LAYOUT = "layout"
    STRING = "string"
    SIZE = "size"


@dataclass(frozen=True, slots=True)
class NodePropertyValue:
    node_id: int
    value: str


@dataclass(frozen=True, slots=True)
class Property:
    """Typed property with node/edge defaults and per-node overrides."""

    graph_id: int
    name: str
    type: PropertyType
    node_default: str
    edge_default: str
    overrides: tuple[NodePropertyValue, ...] = ()

    def value_for_node(self, node_id: int) -> str:
        """Last override for `node_id`, else the node default."""
        for override in reversed(self.overrides):
            if override.node_id == node_id:
                return override.value
        return self.node_default


@dataclass(frozen=True, slots=True)
class Attribute:
    """Flat graph-level key with a declared type and string-encoded value."""

    type: PropertyType
    name: str
    value: str


@dataclass(frozen=True, slots=True)
class GraphDocument:
    """Root of a parsed document. Optional sections are `None` when absent."""

    version: str
    nodes: IdSet
    edges: tuple[Edge, ...]
    author: str | None = None
    comments: str | None = None
    date: str | None = None
    clusters: tuple[Cluster, ...] | None = None
    properties: tuple[Property, ...] | None = None
    attributes: tuple[Attribute, ...] | None = None

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def iter_node_ids(self) -> Iterator[int]:
        """Expand the top-level node set in textual order."""
        return iter(self.nodes)

    def iter_edges(self) -> Iterator[Edge]:
        return iter(self.edges)

    def iter_clusters(self) -> Iterator[Cluster]:
        """Every cluster of the forest, pre-order."""
        for root in self.clusters or ():
            yield from root.walk()

    def property_named(self, name: str) -> Property | None:
        for prop in self.properties or ():
            if prop.name == name:
                return prop
        return None
