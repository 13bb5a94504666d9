"""Incremental cost revision for already-generated nodes.

When a cheaper path to an existing node is found, its g and parent are
updated, it is re-keyed in the frontier, and the improvement is pushed down to
the nodes recorded in its ``children`` list. Only recorded children are
revisited: on graphs where the exploration tree differs from the
shortest-path tree some descendants keep a stale cost. That is a known
limitation of this scheme, not something this module tries to repair.
"""

import logging
from typing import List, Tuple

from astar_engine.core.data_models import Node, SearchStatistics
from astar_engine.core.state import check_cost_value
from .frontier import Frontier
from .graph import SearchGraph

logger = logging.getLogger(__name__)


def _candidate_cost(parent: Node, node: Node):
    step = check_cost_value(parent.state.step_cost(node.state), "step cost", parent.state)
    return parent.g + step


def _apply(graph: SearchGraph, frontier: Frontier, node: Node, parent: Node) -> bool:
    """Revise a single node if ``parent`` offers a strictly cheaper path."""
    new_g = _candidate_cost(parent, node)
    if new_g >= node.g:
        return False

    # Adopting a descendant as parent would close a loop in the parent links
    if graph.is_ancestor(node, parent):
        logger.warning(f"Refusing revision of {node!r} through its own descendant {parent!r}")
        return False

    old_f = node.f
    node.g = new_g
    node.parent = parent.index
    frontier.rekey(node, old_f, node.f)
    logger.debug(f"Revised {node!r} (was f={old_f}) via #{parent.index}")
    return True


def revise_cost(graph: SearchGraph,
                frontier: Frontier,
                node: Node,
                candidate_parent: Node,
                statistics: SearchStatistics = None) -> bool:
    """Offer ``candidate_parent`` as a cheaper route to ``node``.

    Propagation runs over an explicit LIFO work list so descendants are
    visited in the same depth-first, children-order sequence a recursive
    implementation would use, without growing the call stack.

    Args:
        graph: Graph owning the nodes
        frontier: Open list to re-key revised nodes in
        node: Existing node to revise
        candidate_parent: Node the new path arrives from
        statistics: Optional counters to update

    Returns:
        True if ``node`` itself was revised
    """
    if not _apply(graph, frontier, node, candidate_parent):
        return False

    propagated = 0
    work: List[Tuple[int, int]] = [(child, node.index) for child in reversed(node.children)]
    while work:
        child_index, parent_index = work.pop()
        child = graph.node(child_index)
        parent = graph.node(parent_index)
        if _apply(graph, frontier, child, parent):
            propagated += 1
            work.extend((grandchild, child.index) for grandchild in reversed(child.children))

    if statistics is not None:
        statistics.nodes_revised += 1
        statistics.propagated_revisions += propagated
    if propagated:
        logger.debug(f"Revision of {node!r} propagated to {propagated} descendant(s)")
    return True
