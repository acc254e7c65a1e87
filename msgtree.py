# msgtree.py

"""
Code tree used by archived messages

The archive stores the tree as a preorder token stream: the sentinel '^'
is an internal node (its left then right subtree follow), any other
character is a leaf holding that character. The sentinel can therefore
never be a message character.

Every traversal here uses an explicit stack. Tree depth comes straight from
the archive, so native recursion could blow the interpreter stack.
"""

from typing import Iterator, List, Optional, Tuple

from errors import EmptyInput, TrailingTokens, TruncatedDescription

SENTINEL = '^'


class MsgNode: # Node of the code tree
    def __init__(self, payload: Optional[str] = None):
        self.payload = payload # character, or None for an internal node
        self.left: Optional['MsgNode'] = None
        self.right: Optional['MsgNode'] = None

    def is_leaf(self) -> bool:
        return self.payload is not None

    def is_complete(self) -> bool: # internal node with both children attached
        return self.left is not None and self.right is not None

    def __eq__(self, other):
        if not isinstance(other, MsgNode):
            return NotImplemented
        pairs = [(self, other)]
        while pairs:
            a, b = pairs.pop()
            if a is None or b is None:
                if a is not b:
                    return False
                continue
            if a.payload != b.payload:
                return False
            pairs.append((a.right, b.right))
            pairs.append((a.left, b.left))
        return True

    __hash__ = None

    def __repr__(self):
        if self.is_leaf():
            return f"MsgNode({self.payload!r})"
        return "MsgNode(internal)"


def _make_node(token: str) -> MsgNode:
    return MsgNode() if token == SENTINEL else MsgNode(token)


def build_tree(description: str, strict: bool = False) -> MsgNode:
    """
    Rebuild the code tree from its preorder description

    Internal nodes waiting for children sit on a stack; the top one is always
    filled first, so a left subtree is finished before its parent's right
    child is read. Leftover tokens after the tree is complete are ignored
    unless strict is set.
    """
    if not description:
        raise EmptyInput("Tree description")

    index = 0
    root = _make_node(description[index])
    index += 1

    pending: List[MsgNode] = [] if root.is_leaf() else [root]

    while pending and index < len(description):
        current = pending[-1]

        if current.left is None:
            node = _make_node(description[index])
            index += 1
            current.left = node
            if not node.is_leaf():
                pending.append(node)
        elif current.right is None:
            node = _make_node(description[index])
            index += 1
            current.right = node
            if not node.is_leaf():
                pending.append(node)
        else:
            pending.pop() # both children present

    # tokens ran out: whatever is still missing a child makes the tree unusable
    missing = sum(1 for node in pending if not node.is_complete())
    if missing:
        raise TruncatedDescription(missing)

    if strict and index < len(description):
        raise TrailingTokens(index)

    return root


def generate_codes(root: MsgNode) -> Iterator[Tuple[str, str]]:
    """
    Yield (character, path) for every leaf in preorder, path as '0'/'1' string
    """
    stack = [(root, "")]
    while stack:
        node, path = stack.pop()
        if node.is_leaf():
            yield node.payload, path
            continue
        # right pushed first so the left subtree comes out first
        if node.right is not None:
            stack.append((node.right, path + "1"))
        if node.left is not None:
            stack.append((node.left, path + "0"))


def serialize_tree(root: MsgNode) -> str: # inverse of build_tree
    out = []
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_leaf():
            out.append(node.payload)
            continue
        out.append(SENTINEL)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return "".join(out)


def count_leaves(root: MsgNode) -> int:
    count = 0
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_leaf():
            count += 1
            continue
        stack.extend(child for child in (node.left, node.right) if child is not None)
    return count


def tree_depth(root: MsgNode) -> int: # longest root-to-leaf path, in edges
    deepest = 0
    stack = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        deepest = max(deepest, depth)
        for child in (node.left, node.right):
            if child is not None:
                stack.append((child, depth + 1))
    return deepest
