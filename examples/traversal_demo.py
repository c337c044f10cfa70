#!/usr/bin/env python3
"""Demo script for step-by-step and callback traversal in WalkTreeLib.

This script shows the same tree walked depth-first and breadth-first,
driven by hand with next() and through walk() callbacks.
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from walktreelib import (
    BreadthFirstWalker,
    DepthFirstWalker,
    TraversalState,
    Tree,
    walk,
)
from walktreelib.testing import sample_tree


def demo_manual_stepping():
    """Drive a walker one step at a time."""
    print("\n=== Manual Stepping (depth-first) ===")
    walker = DepthFirstWalker(sample_tree())

    while walker.next() is not TraversalState.END:
        indent = "  " * len(walker.get_parents())
        print(f"{indent}{walker.state.name:<4} {walker.current['name']}")


def demo_callbacks():
    """Collect leaves and non-leaf nodes with walk()."""
    print("\n=== Callbacks ===")
    leaves = []
    walk(sample_tree(), lambda node, ctx: leaves.append(node['name']))
    print(f"Leaves only:       {leaves}")

    entered = []
    walk(sample_tree(),
         visit=lambda node, ctx: entered.append(node['name']),
         pre_visit=lambda node, ctx: entered.append(node['name']))
    print(f"Depth-first order: {entered}")

    entered = []
    walk(sample_tree(),
         walker=BreadthFirstWalker,
         visit=lambda node, ctx: entered.append(node['name']),
         pre_visit=lambda node, ctx: entered.append(node['name']))
    print(f"Breadth-first:     {entered}")


def demo_growing_tree():
    """Add children while the depth-first walk is running."""
    print("\n=== Growing the Tree During a Walk ===")
    root = {'name': 'root', 'children': [{'name': 'seed'}]}

    def pre_visit(node, ctx):
        if ctx.depth < 2:
            node['children'].append({'name': f"grown at depth {ctx.depth}"})

    walk(root, pre_visit=pre_visit)
    print(f"Leaves after walk: {[leaf['name'] for leaf in Tree(root)]}")


def main():
    demo_manual_stepping()
    demo_callbacks()
    demo_growing_tree()
    return 0


if __name__ == "__main__":
    sys.exit(main())
