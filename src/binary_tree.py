import copy
from enum import Enum
from typing import TypeVar, Generic, List, Iterable, Iterator, Optional

from middle_out import middle_out

T = TypeVar('T')


class Traversal(Enum):
    IN_ORDER = "in_order"
    PRE_ORDER = "pre_order"


class Node(Generic[T]):
    """Root of a non-empty binary search tree; the empty tree is ``None``.

    Each node owns its two subtrees. Values are stored once: inserting a
    value equal to one already present does nothing.
    """

    def __init__(self, value: T) -> None:
        self.value: T = value
        self.left: Optional[Node[T]] = None
        self.right: Optional[Node[T]] = None

    @staticmethod
    def from_values(values: Iterable[T]) -> Optional['Node[T]']:
        """Build a tree by inserting ``values`` in the given order.

        The first value becomes the root. Returns None for an empty input.
        """
        root: Optional[Node[T]] = None
        for value in values:
            if root is None:
                root = Node(value)
            else:
                root.insert(value)
        return root

    def insert(self, value: T) -> None:
        node = self
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = Node(value)
                    return
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = Node(value)
                    return
                node = node.right
            else:
                return

    def get_values(self, order: Traversal = Traversal.IN_ORDER) -> List[T]:
        if order is Traversal.IN_ORDER:
            return self._in_order()
        if order is Traversal.PRE_ORDER:
            return self._pre_order()
        raise ValueError(f"unknown traversal: {order!r}")

    def delete(self, target: T) -> Optional['Node[T]']:
        """Return a new tree without ``target``, or None if nothing is left.

        The receiver is left unchanged. The whole tree is rebuilt from its
        remaining values in middle-out order, even when ``target`` is absent,
        so the result is near-balanced whatever shape the receiver had.
        """
        remaining = [v for v in self.get_values(Traversal.IN_ORDER) if v != target]
        return Node.from_values(middle_out(remaining))

    def contains(self, value: T) -> bool:
        node: Optional[Node[T]] = self
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return True
        return False

    def size(self) -> int:
        count = 0
        stack: List[Node[T]] = [self]
        while stack:
            node = stack.pop()
            count += 1
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        return count

    def height(self) -> int:
        # Counted in nodes: a lone leaf has height 1.
        levels = 0
        level: List[Node[T]] = [self]
        while level:
            levels += 1
            next_level: List[Node[T]] = []
            for node in level:
                if node.left is not None:
                    next_level.append(node.left)
                if node.right is not None:
                    next_level.append(node.right)
            level = next_level
        return levels

    def min(self) -> T:
        node = self
        while node.left is not None:
            node = node.left
        return copy.deepcopy(node.value)

    def max(self) -> T:
        node = self
        while node.right is not None:
            node = node.right
        return copy.deepcopy(node.value)

    def _in_order(self) -> List[T]:
        result: List[T] = []
        stack: List[Node[T]] = []
        node: Optional[Node[T]] = self
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(copy.deepcopy(node.value))
            node = node.right
        return result

    def _pre_order(self) -> List[T]:
        result: List[T] = []
        stack: List[Node[T]] = [self]
        while stack:
            node = stack.pop()
            result.append(copy.deepcopy(node.value))
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[T]:
        return iter(self.get_values(Traversal.IN_ORDER))

    def __repr__(self) -> str:
        return f"Node({self.get_values(Traversal.IN_ORDER)})"
