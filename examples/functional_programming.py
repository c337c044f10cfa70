#!/usr/bin/env python3
"""Demo script for Tree.map, Tree.reduce, Tree.filter and queries."""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from walktreelib import Tree


def demo_map():
    """Map each node to a new object, keeping the shape."""
    print("\n=== Tree.map ===")
    tree = Tree({'name': 'root', 'children': [{'name': 'child A'}, {'name': 'child B'}]})
    mapped = tree.map(lambda node: {'value': f"The name is {node['name']}"})
    print(mapped.root)


def demo_reduce():
    """Fold children into their parent."""
    print("\n=== Tree.reduce ===")
    tree = Tree({'value': 100, 'children': [{'value': 10}, {'value': 1}]})

    def add(children, node, ctx):
        return {'value': node['value'] + sum(child['value'] for child in children)}

    print(f"Without seed: {tree.reduce(add)}")

    names = Tree({'name': 'root', 'children': [{'name': 'child A'}, {'name': 'child B'}]})

    def describe(children, node, ctx):
        joined = ' , '.join(child['name'] for child in children)
        return {'name': f"[{node['name']} > {joined}]"}

    print(f"With seed:    {names.reduce(describe, [{'name': 'initial-name'}])}")


def demo_filter_and_query():
    """Prune subtrees and look nodes up by selector."""
    print("\n=== Tree.filter / Tree.get_node ===")
    tree = Tree({
        'id': 'menu',
        'children': [
            {'id': 'file', 'class_list': ['entry']},
            {'id': 'edit', 'class_list': ['entry', 'group'], 'children': [
                {'id': 'undo', 'class_list': ['entry']},
                {'id': 'redo', 'class_list': ['entry', 'disabled']},
            ]},
        ],
    })

    enabled = tree.filter(lambda node, ctx: 'disabled' not in node.get('class_list', ()))
    print(f"Enabled leaves: {[leaf['id'] for leaf in enabled]}")
    print(f"'.group > .disabled' -> {tree.get_node('.group > .disabled')['id']}")
    print(f"'#menu > .disabled'  -> {tree.get_node('#menu > .disabled')}")


def main():
    demo_map()
    demo_reduce()
    demo_filter_and_query()
    return 0


if __name__ == "__main__":
    sys.exit(main())
