import itertools
import unittest

from errors import EmptyInput, ParseError, TrailingTokens, TruncatedDescription
from msgtree import (
    SENTINEL,
    MsgNode,
    build_tree,
    count_leaves,
    generate_codes,
    serialize_tree,
    tree_depth,
)


def internal(left, right):
    node = MsgNode()
    node.left = left
    node.right = right
    return node


def leaf(ch):
    return MsgNode(ch)


class TestBuildTree(unittest.TestCase):
    def test_two_leaves(self):
        root = build_tree("^ab")
        self.assertFalse(root.is_leaf())
        self.assertEqual(root.left.payload, 'a')
        self.assertEqual(root.right.payload, 'b')
        self.assertTrue(root.left.is_leaf())
        self.assertIsNone(root.left.left)
        self.assertIsNone(root.left.right)

    def test_nested_left_subtree(self):
        root = build_tree("^^abc")
        self.assertEqual(root, internal(internal(leaf('a'), leaf('b')), leaf('c')))

    def test_single_leaf(self):
        root = build_tree("x")
        self.assertTrue(root.is_leaf())
        self.assertEqual(root.payload, 'x')

    def test_whitespace_payloads(self):
        root = build_tree("^ ^\na")
        self.assertEqual(root.left.payload, ' ')
        self.assertEqual(root.right.left.payload, '\n')
        self.assertEqual(root.right.right.payload, 'a')

    def test_empty_description(self):
        with self.assertRaises(EmptyInput):
            build_tree("")

    def test_sentinel_only(self):
        with self.assertRaises(TruncatedDescription):
            build_tree(SENTINEL)

    def test_missing_right_child(self):
        with self.assertRaises(TruncatedDescription) as ctx:
            build_tree("^a")
        self.assertEqual(ctx.exception.pending, 1)

    def test_missing_children_deep(self):
        with self.assertRaises(TruncatedDescription) as ctx:
            build_tree("^^^ab")
        # innermost is complete; its parent and the root still wait for a right child
        self.assertEqual(ctx.exception.pending, 2)

    def test_errors_are_value_errors(self):
        with self.assertRaises(ValueError):
            build_tree("^")
        with self.assertRaises(ParseError):
            build_tree("")

    def test_trailing_tokens_ignored_by_default(self):
        self.assertEqual(build_tree("^abzz"), build_tree("^ab"))

    def test_trailing_tokens_strict(self):
        with self.assertRaises(TrailingTokens) as ctx:
            build_tree("^abzz", strict=True)
        self.assertEqual(ctx.exception.position, 3)
        self.assertEqual(build_tree("^ab", strict=True), build_tree("^ab"))

    def test_single_leaf_with_trailing_strict(self):
        with self.assertRaises(TrailingTokens):
            build_tree("ab", strict=True)

    def test_deep_skewed_tree(self):
        depth = 100_000
        description = "^a" * depth + "b"
        root = build_tree(description)
        self.assertEqual(tree_depth(root), depth)
        self.assertEqual(count_leaves(root), depth + 1)
        self.assertEqual(serialize_tree(root), description)

    def test_deep_left_skewed_tree(self):
        depth = 100_000
        description = "^" * depth + "b" + "a" * depth
        root = build_tree(description)
        self.assertEqual(tree_depth(root), depth)
        self.assertEqual(serialize_tree(root), description)
        self.assertEqual(root, build_tree(description))


class TestSerializeTree(unittest.TestCase):
    def test_round_trip_shapes(self):
        trees = [
            leaf('z'),
            internal(leaf('a'), leaf('b')),
            internal(internal(leaf('a'), leaf('b')), leaf('c')),
            internal(leaf('a'), internal(leaf('b'), internal(leaf('c'), leaf('d')))),
            internal(internal(leaf('e'), leaf(' ')), internal(leaf('t'), internal(leaf('\n'), leaf('q')))),
        ]
        for tree in trees:
            description = serialize_tree(tree)
            leaves = count_leaves(tree)
            self.assertEqual(len(description), 2 * leaves - 1)
            self.assertEqual(build_tree(description), tree)

    def test_equality_detects_differences(self):
        self.assertNotEqual(build_tree("^ab"), build_tree("^ba"))
        self.assertNotEqual(build_tree("^^abc"), build_tree("^a^bc"))
        self.assertNotEqual(build_tree("^ab"), "^ab")


class TestGenerateCodes(unittest.TestCase):
    def test_two_leaves(self):
        self.assertEqual(list(generate_codes(build_tree("^ab"))), [('a', '0'), ('b', '1')])

    def test_nested(self):
        self.assertEqual(
            list(generate_codes(build_tree("^^abc"))),
            [('a', '00'), ('b', '01'), ('c', '1')],
        )

    def test_preorder_order(self):
        codes = list(generate_codes(build_tree("^^a^bc^de")))
        self.assertEqual([ch for ch, _ in codes], ['a', 'b', 'c', 'd', 'e'])
        self.assertEqual(dict(codes), {'a': '00', 'b': '010', 'c': '011', 'd': '10', 'e': '11'})

    def test_single_leaf_has_empty_path(self):
        self.assertEqual(list(generate_codes(build_tree("x"))), [('x', '')])

    def test_restartable(self):
        root = build_tree("^^abc")
        self.assertEqual(list(generate_codes(root)), list(generate_codes(root)))

    def test_prefix_free(self):
        root = build_tree("^^^ ^ea^^tn^os^^i^hr^d^lu")
        codes = [path for _, path in generate_codes(root)]
        self.assertEqual(len(codes), count_leaves(root))
        for a, b in itertools.permutations(codes, 2):
            self.assertFalse(b.startswith(a), f"{a} is a prefix of {b}")

    def test_lazy_on_deep_tree(self):
        root = build_tree("^a" * 100_000 + "b")
        first = list(itertools.islice(generate_codes(root), 3))
        self.assertEqual(first, [('a', '0'), ('a', '10'), ('a', '110')])


if __name__ == '__main__':
    unittest.main()
