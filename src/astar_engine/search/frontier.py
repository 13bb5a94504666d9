"""Open list for A* search.

A binary heap of ``[f, sequence, node]`` entries. The sequence number breaks
ties between equal ``f`` values in insertion order (FIFO), which keeps search
deterministic. An auxiliary index maps each node's arena slot to its live heap
entry so a node can be re-keyed without scanning the heap: the old entry is
marked removed and a fresh one is pushed.
"""

import heapq
import itertools
import logging
from typing import Any, Dict, List, Optional

from astar_engine.core.data_models import Node
from astar_engine.core.state import Cost

logger = logging.getLogger(__name__)

_REMOVED = None  # Placeholder for an invalidated entry's node


class Frontier:
    """Priority queue of nodes ordered by f with FIFO tie-breaking."""

    def __init__(self):
        self._heap: List[List[Any]] = []
        self._entries: Dict[int, List[Any]] = {}
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, node: Node) -> bool:
        return node.index in self._entries

    def is_empty(self) -> bool:
        return not self._entries

    def insert(self, node: Node) -> None:
        """Add ``node`` keyed by its current f."""
        if node.index in self._entries:
            raise ValueError(f"{node!r} is already in the frontier")
        self._push(node, node.f)

    def pop_min(self) -> Node:
        """Remove and return the node with minimal f (earliest inserted on ties).

        Raises:
            IndexError: If the frontier is empty
        """
        while self._heap:
            _, _, node = heapq.heappop(self._heap)
            if node is not _REMOVED:
                del self._entries[node.index]
                return node
        raise IndexError("pop from an empty frontier")

    def peek(self) -> Optional[Node]:
        """Return the node ``pop_min`` would return, without removing it."""
        while self._heap and self._heap[0][2] is _REMOVED:
            heapq.heappop(self._heap)
        return self._heap[0][2] if self._heap else None

    def key_of(self, node: Node) -> Optional[Cost]:
        """Key the node is currently stored under, or None if absent."""
        entry = self._entries.get(node.index)
        return entry[0] if entry is not None else None

    def rekey(self, node: Node, old_key: Cost, new_key: Cost) -> bool:
        """Move ``node`` from ``old_key`` to ``new_key``.

        This is a no-op when the node is not present under ``old_key``, for
        example because it has already been expanded.

        Returns:
            True if the node was moved
        """
        entry = self._entries.get(node.index)
        if entry is None:
            return False
        if entry[0] != old_key:
            logger.warning(f"{node!r} is queued under f={entry[0]}, not {old_key}; not re-keyed")
            return False
        entry[2] = _REMOVED
        self._push(node, new_key)
        return True

    def snapshot(self) -> List[Node]:
        """Live nodes in the order they would be popped."""
        live = [entry for entry in self._heap if entry[2] is not _REMOVED]
        return [entry[2] for entry in sorted(live, key=lambda e: (e[0], e[1]))]

    def _push(self, node: Node, key: Cost) -> None:
        entry = [key, next(self._counter), node]
        self._entries[node.index] = entry
        heapq.heappush(self._heap, entry)
