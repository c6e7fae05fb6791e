"""
Ordered Tree -- an unbalanced binary search tree holding a set of values.

Values only need to support ``<``. Two values are treated as the same element
when neither is less than the other, so ``==`` is never consulted.
"""

from typing import TypeVar, Generic, List, Iterator, NamedTuple, Optional, Tuple

T = TypeVar('T')


class NodeView(NamedTuple):
    """Read-only snapshot of a node: its value and its children's values."""
    value: object
    left: Optional[object]
    right: Optional[object]

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


class OrderedTree(Generic[T]):
    """Binary search tree with set semantics.

    The tree does no balancing, so every operation costs O(height) and sorted
    input produces a height equal to the number of elements. All descents use
    explicit loops, so such degenerate trees never exhaust the call stack.

    There is no internal locking. Callers sharing a tree between threads must
    guard every call, reads included, with a single lock of their own.
    """

    class Node:
        def __init__(self, value: T) -> None:
            self.value: T = value
            self.left: Optional['OrderedTree.Node'] = None
            self.right: Optional['OrderedTree.Node'] = None

    def __init__(self) -> None:
        self._root: Optional[OrderedTree.Node] = None
        self._size: int = 0

    def insert(self, value: T) -> bool:
        """Add ``value``. Returns False, leaving the tree as is, on a duplicate."""
        if self._root is None:
            self._root = OrderedTree.Node(value)
            self._size += 1
            return True

        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = OrderedTree.Node(value)
                    self._size += 1
                    return True
                node = node.left
            elif node.value < value:
                if node.right is None:
                    node.right = OrderedTree.Node(value)
                    self._size += 1
                    return True
                node = node.right
            else:
                return False

    def remove(self, value: T) -> bool:
        """Remove ``value``. Returns False if it was not in the tree."""
        return self._remove_below(None, self._root, False, value)

    def _remove_below(self, parent: Optional[Node], node: Optional[Node],
                      is_left_child: bool, value: T) -> bool:
        while node is not None:
            if value < node.value:
                parent, node, is_left_child = node, node.left, True
            elif node.value < value:
                parent, node, is_left_child = node, node.right, False
            else:
                break

        if node is None:
            return False

        if node.left is None and node.right is None:
            self._replace(parent, is_left_child, None)
        elif node.left is None:
            self._replace(parent, is_left_child, node.right)
            node.right = None
        elif node.right is None:
            self._replace(parent, is_left_child, node.left)
            node.left = None
        else:
            # The successor has no left child, so removing it below is a
            # leaf or right-child splice.
            successor = self._find_min(node.right)
            node.value = successor.value
            return self._remove_below(node, node.right, False, successor.value)

        self._size -= 1
        return True

    def _replace(self, parent: Optional[Node], is_left_child: bool,
                 replacement: Optional[Node]) -> None:
        if parent is None:
            self._root = replacement
        elif is_left_child:
            parent.left = replacement
        else:
            parent.right = replacement

    def contains(self, value: T) -> bool:
        return self._find_node(self._root, value) is not None

    def find_node(self, value: T) -> Optional[NodeView]:
        """Look up ``value`` and describe its node.

        The result is a detached snapshot; it does not follow later changes to
        the tree and cannot be used to modify it.
        """
        node = self._find_node(self._root, value)
        if node is None:
            return None
        return NodeView(
            node.value,
            node.left.value if node.left is not None else None,
            node.right.value if node.right is not None else None,
        )

    def min(self) -> T:
        if self._root is None:
            raise ValueError("min from empty tree")
        return self._find_min(self._root).value

    def max(self) -> T:
        if self._root is None:
            raise ValueError("max from empty tree")
        return self._find_max(self._root).value

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def height(self) -> int:
        height = 0
        level = [self._root] if self._root is not None else []
        while level:
            height += 1
            next_level: List[OrderedTree.Node] = []
            for node in level:
                if node.left is not None:
                    next_level.append(node.left)
                if node.right is not None:
                    next_level.append(node.right)
            level = next_level
        return height

    def clear(self) -> None:
        # Children are unlinked before their parents.
        for node in self._post_order_nodes():
            node.left = None
            node.right = None
        self._root = None
        self._size = 0

    def in_order(self) -> List[T]:
        result: List[T] = []
        stack: List[OrderedTree.Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def pre_order(self) -> List[T]:
        result: List[T] = []
        if self._root is None:
            return result
        stack: List[OrderedTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def post_order(self) -> List[T]:
        return [node.value for node in self._post_order_nodes()]

    def _post_order_nodes(self) -> List[Node]:
        # Reverse of a node-right-left walk.
        result: List[OrderedTree.Node] = []
        if self._root is None:
            return result
        stack: List[OrderedTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            result.append(node)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def copy(self) -> 'OrderedTree[T]':
        """Independent tree with the same shape, rebuilt from the pre-order."""
        clone: OrderedTree[T] = OrderedTree()
        for value in self.pre_order():
            clone.insert(value)
        return clone

    def is_valid(self) -> bool:
        """Check the ordering invariant and the cached size."""
        count = 0
        # Each entry carries the exclusive (low, high) bounds for its subtree.
        stack: List[Tuple[OrderedTree.Node, Optional[OrderedTree.Node],
                          Optional[OrderedTree.Node]]] = []
        if self._root is not None:
            stack.append((self._root, None, None))
        while stack:
            node, low, high = stack.pop()
            if low is not None and not low.value < node.value:
                return False
            if high is not None and not node.value < high.value:
                return False
            count += 1
            if node.left is not None:
                stack.append((node.left, low, node))
            if node.right is not None:
                stack.append((node.right, node, high))
        return count == self._size

    def _find_node(self, node: Optional[Node], value: T) -> Optional[Node]:
        while node is not None:
            if value < node.value:
                node = node.left
            elif node.value < value:
                node = node.right
            else:
                return node
        return None

    def _find_min(self, node: Node) -> Node:
        while node.left is not None:
            node = node.left
        return node

    def _find_max(self, node: Node) -> Node:
        while node.right is not None:
            node = node.right
        return node

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[T]:
        return iter(self.in_order())

    def __repr__(self) -> str:
        return f"OrderedTree({self.in_order()})"

    def __str__(self) -> str:
        return f"OrderedTree(size={self._size}, height={self.height()})"
