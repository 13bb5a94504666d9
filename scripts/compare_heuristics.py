#!/usr/bin/env python3
"""Compare search effort across heuristics and goal-test modes."""

from astar_engine.domains.river_crossing import start_state
from astar_engine.domains.explicit_graph import StateGraph
from astar_engine.search.astar import create_astar_searcher


def report(label, result):
    print(f"{label:<32} transitions={result.num_transitions} cost={result.cost} "
          f"expanded={result.nodes_expanded} generated={result.nodes_generated} "
          f"revised={result.nodes_revised} time={result.computation_time*1000:.2f}ms")


def main():
    """Run the river-crossing puzzle and a weighted graph under each setting."""
    print("River crossing")
    print("=" * 50)
    for zero_heuristic in (False, True):
        for goal_test in ('generate', 'expand'):
            searcher = create_astar_searcher(goal_test=goal_test)
            result = searcher.search(start_state(zero_heuristic=zero_heuristic))
            heuristic = "h=0" if zero_heuristic else "h=passengers left"
            report(f"{heuristic}, {goal_test}", result)

    # The direct edge to G is generated first but is not the cheapest path
    graph = StateGraph.from_edges(
        [("S", "G", 10), ("S", "A", 1), ("A", "B", 1), ("S", "B", 4), ("B", "G", 1)],
        goals=["G"],
        heuristics={"A": 2, "B": 1}
    )

    print("\nWeighted graph")
    print("=" * 50)
    for goal_test in ('generate', 'expand'):
        result = create_astar_searcher(goal_test=goal_test).search(graph.state("S"))
        report(goal_test, result)
        print("  path:", " -> ".join(str(state) for state in result.path))


if __name__ == "__main__":
    main()
