"""Tests for the Tree container: iteration, map, reduce, filter and queries."""

import copy
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from walktreelib import ConfigurationError, Tree, TraversalState
from walktreelib.testing import WalkRecorder, build_tree, sample_tree


def names(nodes, field='name'):
    return [node[field] for node in nodes]


class TestTreeBasics:
    """Construction and iteration."""

    def test_node_property(self):
        root = {'name': 'root'}
        tree = Tree(root)
        assert tree.node is root
        assert tree.root is root

    def test_iterate_leaves(self):
        assert names(Tree(build_tree(('root', ['child A', 'child B'])))) == ['child A', 'child B']

    def test_iterate_nested(self):
        assert names(Tree(sample_tree())) == [
            'child A', 'grandson A', 'grandson B', 'grandson C', 'child C'
        ]

    def test_iterate_repeatedly(self):
        tree = Tree(sample_tree())
        passes = [list(tree) for _ in range(3)]
        assert passes[1] == passes[0]
        assert passes[2] == passes[0]
        assert all(a is b for a, b in zip(passes[0], passes[2]))

    def test_single_node_iteration(self):
        root = {'name': 'alone'}
        assert list(Tree(root)) == [root]

    def test_nodes_pre_order(self):
        tree = Tree(sample_tree())
        assert names(tree.nodes()) == [
            'root', 'child A', 'child B', 'grandson A', 'grandson B', 'grandson C', 'child C'
        ]

    def test_nodes_breadth_first(self):
        tree = Tree(sample_tree())
        assert names(tree.nodes(walker='bfs')) == [
            'root', 'child A', 'child B', 'child C', 'grandson A', 'grandson B', 'grandson C'
        ]

    def test_walk_uses_tree_accessor(self):
        root = {'name': 'root', 'kids': [{'name': 'a'}, {'name': 'b'}]}
        tree = Tree(root, get_children=lambda node: node.get('kids'))
        found = []
        tree.walk(lambda node, ctx: found.append(node['name']))
        assert found == ['a', 'b']
        assert names(tree) == ['a', 'b']

    def test_walk_none_accessor_keeps_tree_accessor(self):
        root = {'name': 'root', 'kids': [{'name': 'a'}]}
        tree = Tree(root, get_children=lambda node: node.get('kids'))
        found = []
        tree.walk(visit=lambda node, ctx: found.append(node['name']), get_children=None)
        assert found == ['a']

    def test_walk_with_options(self):
        recorder = WalkRecorder()
        Tree(sample_tree()).walk(recorder.options(walker='bfs'))
        assert recorder.names(TraversalState.PRE) == ['root', 'child B']

    def test_repr(self):
        assert repr(Tree({'name': 'r'})) == "Tree(root={'name': 'r'})"


class TestTreeMap:
    """Structure-preserving transforms."""

    @staticmethod
    def to_value(node):
        return {'value': node['name']}

    def test_map_single_node(self):
        assert Tree({'name': 'root'}).map(self.to_value).node == {'value': 'root'}

    def test_map_children(self):
        mapped = Tree(build_tree(('root', ['child A', 'child B']))).map(self.to_value)
        assert mapped.node == {
            'value': 'root',
            'children': [{'value': 'child A'}, {'value': 'child B'}],
        }

    def test_map_complex(self):
        mapped = Tree(sample_tree()).map(self.to_value)
        assert mapped.node == {
            'value': 'root',
            'children': [
                {'value': 'child A'},
                {
                    'value': 'child B',
                    'children': [
                        {'value': 'grandson A'},
                        {'value': 'grandson B'},
                        {'value': 'grandson C'},
                    ],
                },
                {'value': 'child C'},
            ],
        }

    def test_map_with_new_accessors(self):
        def set_chs(node, children):
            node['chs'] = children

        mapped = Tree(build_tree(('root', ['child A', 'child B']))).map(
            self.to_value,
            get_children=lambda node: node.get('chs'),
            set_children=set_chs,
        )
        assert mapped.node == {
            'value': 'root',
            'chs': [{'value': 'child A'}, {'value': 'child B'}],
        }
        assert names(mapped, 'value') == ['child A', 'child B']

    def test_map_requires_both_accessors(self):
        tree = Tree(sample_tree())
        with pytest.raises(ConfigurationError, match="both or neither"):
            tree.map(self.to_value, get_children=lambda node: node.get('chs'))
        with pytest.raises(ConfigurationError):
            tree.map(self.to_value, set_children=lambda node, children: None)

    def test_map_call_order(self):
        calls = []

        def record(node):
            calls.append(node['name'])
            return {'value': node['name']}

        Tree(sample_tree()).map(record)
        assert calls == ['child A', 'grandson A', 'grandson B', 'grandson C',
                         'child B', 'child C', 'root']

    def test_map_leaves_source_untouched(self):
        source = sample_tree()
        snapshot = copy.deepcopy(source)
        Tree(source).map(self.to_value)
        assert source == snapshot

    def test_map_is_chainable(self):
        result = (Tree(sample_tree())
                  .map(lambda node: {'name': node['name'].upper()})
                  .map(self.to_value))
        assert names(result, 'value') == ['CHILD A', 'GRANDSON A', 'GRANDSON B',
                                          'GRANDSON C', 'CHILD C']

    def test_map_object_nodes(self):
        class Node:
            def __init__(self, name):
                self.name = name

        source = build_tree(('root', ['a', 'b']))
        mapped = Tree(source).map(lambda node: Node(node['name']))
        assert mapped.node.name == 'root'
        assert [child.name for child in mapped.node.children] == ['a', 'b']
        assert [leaf.name for leaf in mapped] == ['a', 'b']


class TestTreeReduce:
    """Folds from leaves to root."""

    @staticmethod
    def add_values(children, node, context):
        value = node['value']
        for child in children:
            value += child['value']
        return {'value': value}

    def test_reduce_without_seed(self):
        tree = Tree({'value': 100, 'children': [{'value': 10}, {'value': 1}]})
        assert tree.reduce(self.add_values) == {'value': 111}

    def test_reduce_nested(self):
        tree = Tree({'value': 1000, 'children': [
            {'value': 100, 'children': [{'value': 10}, {'value': 1}]},
            {'value': 5},
        ]})
        assert tree.reduce(self.add_values) == {'value': 1116}

    def test_reduce_single_leaf_without_seed(self):
        root = {'value': 7}
        assert Tree(root).reduce(self.add_values) is root

    def test_reduce_with_seed(self):
        def describe(children, node, context):
            name = f"{node['name']} > " + ' , '.join(child['name'] for child in children)
            return {'name': f"[{name}]"}

        tree = Tree(build_tree(('root', ['child A', 'child B'])))
        result = tree.reduce(describe, [{'name': 'initial-name'}])
        assert result == {
            'name': '[root > [child A > initial-name] , [child B > initial-name]]'
        }

    def test_seed_applied_to_leaves(self):
        tree = Tree({'value': 100, 'children': [{'value': 10}, {'value': 1}]})
        result = tree.reduce(self.add_values, [{'value': 0}])
        assert result == {'value': 111}

    def test_none_is_a_seed(self):
        seen = []

        def reducer(children, node, context):
            seen.append((node['name'], children))
            return node['name']

        Tree(build_tree(('root', ['a']))).reduce(reducer, None)
        assert seen == [('a', None), ('root', ['a'])]

    def test_reducer_call_count(self):
        calls = []

        def count(children, node, context):
            calls.append(node['name'])
            return len(children)

        Tree(sample_tree()).reduce(count)
        assert calls == ['child B', 'root']

    def test_reducer_receives_context(self):
        depths = {}

        def reducer(children, node, context):
            depths[node['name']] = (context.depth, context.is_on_leaf)
            return node

        Tree(sample_tree()).reduce(reducer, [])
        assert depths['grandson A'] == (2, True)
        assert depths['child B'] == (1, False)
        assert depths['root'] == (0, False)

    def test_count_leaves(self):
        total = Tree(sample_tree()).reduce(
            lambda children, node, ctx: 1 if ctx.is_on_leaf else sum(children), 0)
        assert total == 5

    def test_reducer_error_propagates(self):
        def fail(children, node, context):
            raise KeyError('missing')

        with pytest.raises(KeyError):
            Tree(sample_tree()).reduce(fail)


class TestTreeFilter:
    """Subtree pruning."""

    def test_prune_subtree(self):
        source = sample_tree()
        filtered = Tree(source).filter(lambda node, ctx: node['name'] != 'child B')
        assert filtered.node == build_tree(('root', ['child A', 'child C']))
        assert filtered.node is not source
        assert filtered.node['children'][0] is source['children'][0]
        assert len(source['children']) == 3

    def test_prune_leaf(self):
        filtered = Tree(sample_tree()).filter(lambda node, ctx: node['name'] != 'grandson B')
        assert names(filtered) == ['child A', 'grandson A', 'grandson C', 'child C']

    def test_reject_root(self):
        assert Tree(sample_tree()).filter(lambda node, ctx: ctx.depth > 0) is None

    def test_keep_everything(self):
        source = sample_tree()
        filtered = Tree(source).filter(lambda node, ctx: True)
        assert filtered.node == source

    def test_filter_with_new_accessors(self):
        def set_chs(node, children):
            node['chs'] = children

        def get_chs(node):
            return node.get('chs')

        source = build_tree(('root', ['child A', ('child B', ['grandson A'])]))
        filtered = Tree(source).filter(lambda node, ctx: node['name'] != 'child A',
                                       get_children=get_chs, set_children=set_chs)
        assert [leaf['name'] for leaf in filtered] == ['grandson A']
        assert [child['name'] for child in filtered.node['chs']] == ['child B']
        assert filtered.get_children is get_chs
        assert filtered.set_children is set_chs
        assert 'chs' not in source

    def test_filter_requires_both_accessors(self):
        tree = Tree(sample_tree())
        with pytest.raises(ConfigurationError, match="both or neither"):
            tree.filter(lambda node, ctx: True, get_children=lambda node: node.get('chs'))
        with pytest.raises(ConfigurationError):
            tree.filter(lambda node, ctx: True, set_children=lambda node, children: None)


class TestTreeQuery:
    """get_node and get_node_as_tree."""

    @pytest.fixture
    def tree(self):
        return Tree({
            'id': 'root',
            'children': [
                {'id': 'a', 'class_list': ['item']},
                {'id': 'b', 'class_list': ['group'], 'children': [
                    {'id': 'c', 'class_list': ['item', 'last']},
                ]},
            ],
        })

    @pytest.mark.parametrize("query,expected", [
        ('#b', 'b'),
        ('#root', 'root'),
        ('.item', 'a'),
        ('.group .item', 'c'),
        ('#root > .item', 'a'),
        ('#root .last', 'c'),
        ('.item.last', 'c'),
        ('#b > *', 'c'),
        ('*', 'root'),
    ])
    def test_get_node(self, tree, query, expected):
        assert tree.get_node(query)['id'] == expected

    @pytest.mark.parametrize("query", ['#missing', '#root > .last', '.group > .group'])
    def test_get_node_not_found(self, tree, query):
        assert tree.get_node(query) is None

    def test_get_node_with_predicate(self, tree):
        assert tree.get_node(lambda sequence: len(sequence) == 3)['id'] == 'c'

    def test_get_node_as_tree(self, tree):
        subtree = tree.get_node_as_tree('#b')
        assert isinstance(subtree, Tree)
        assert subtree.node['id'] == 'b'
        assert [leaf['id'] for leaf in subtree] == ['c']
        assert subtree.get_children is tree.get_children

    def test_get_node_as_tree_not_found(self, tree):
        assert tree.get_node_as_tree('#missing') is None

    def test_get_node_as_tree_falsy_node(self):
        shape = {0: [1, 2], 2: [3]}
        tree = Tree(0, get_children=shape.get,
                    matcher=lambda query: lambda sequence: sequence[-1] == query)
        subtree = tree.get_node_as_tree(0)
        assert subtree is not None
        assert subtree.node == 0
        assert list(subtree) == [1, 3]

    def test_custom_matcher(self):
        def by_name(query):
            return lambda sequence: sequence[-1].get('name') == query

        tree = Tree(sample_tree(), matcher=by_name)
        assert tree.get_node('grandson B')['name'] == 'grandson B'
        assert tree.get_node_as_tree('child B').matcher is by_name
