"""A generic ordered tree whose nodes carry a piece of data."""

import copy
from collections import deque

from tlvtree.tlv import Tlv


class TreeNode:
    """A node holding *data*, a link to its parent and an ordered list of children."""

    def __init__(self, data=None, parent=None):
        self.data = data
        self._parent = parent
        self._children = []

    @property
    def parent(self):
        """The parent node, or None for a root."""
        return self._parent

    @property
    def root(self):
        """The topmost ancestor, or this node itself."""
        node = self
        for node in self._ancestors():
            pass
        return node

    @property
    def depth(self):
        """Number of ancestors above this node."""
        return sum(1 for _ in self._ancestors())

    @property
    def children(self):
        """The list of child nodes, in insertion order."""
        return self._children

    def _ancestors(self):
        node = self._parent
        while node is not None:
            yield node
            node = node._parent

    def _spawn(self, data):
        node = object.__new__(type(self))
        TreeNode.__init__(node, data)
        return node

    def add_child(self, data=None):
        """Append a new child holding *data* and return it."""
        child = self._spawn(data)
        child._parent = self
        self._children.append(child)
        return child

    def graft(self, node):
        """Append a deep copy of *node* and its subtree as a new child."""
        if node is self or node.is_parent_of(self):
            raise ValueError("cannot graft a node onto itself or its own descendant")
        grafted = self.add_child(copy.copy(node.data))
        for child in node._children:
            grafted.graft(child)
        return grafted

    def prune(self, node):
        """Detach *node* if it is a direct child; otherwise do nothing."""
        for position, child in enumerate(self._children):
            if child is node:
                del self._children[position]
                node._parent = None
                return

    def _breadth_first(self):
        queue = deque([self])
        while queue:
            node = queue.popleft()
            yield node
            queue.extend(node._children)

    @staticmethod
    def _nth_match(nodes, value, index):
        for node in nodes:
            if node.data == value:
                if index == 0:
                    return node
                index -= 1
        return None

    def find(self, value, index=0):
        """Return the *index*-th node in breadth-first order, this one included, whose data equals *value*."""
        return self._nth_match(self._breadth_first(), value, index)

    def find_immediate(self, value, index=0):
        """Return the *index*-th direct child whose data equals *value*."""
        return self._nth_match(self._children, value, index)

    def is_child_of(self, other):
        """Tell whether *other* is an ancestor of this node."""
        return any(ancestor is other for ancestor in self._ancestors())

    def is_parent_of(self, other):
        """Tell whether this node is an ancestor of *other*."""
        return other.is_child_of(self)

    def copy(self):
        """Return a detached deep copy of this node and its subtree."""
        clone = self._spawn(copy.copy(self.data))
        for child in self._children:
            clone.graft(child)
        return clone

    def __copy__(self):
        return self.copy()

    def dump(self, indentation=0):
        """Render the subtree as text, each level indented two more spaces."""
        parts = []

        def walk(node, level):
            parts.append(_format_data(node.data, level + 1))
            for child in node._children:
                walk(child, level + 2)

        walk(self, indentation)
        return "".join(parts)


def _format_data(data, width):
    if isinstance(data, Tlv):
        return data.format(width)
    return str(data).rjust(width) + "\n"