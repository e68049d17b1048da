# binary_mlm/network/tree.py
"""
Binary sponsor tree and the metrics computed over it.

A node holds up to two child slots: children[0] is the left leg,
children[1] the right leg. Either slot may be None.
"""
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class NetworkMember:
    userID: str
    name: str = ""
    children: List[Optional["NetworkMember"]] = field(default_factory=list)

    def __post_init__(self):
        if len(self.children) > 2:
            raise ValueError(f"Binary node {self.userID} has {len(self.children)} children")

    @property
    def left(self) -> Optional["NetworkMember"]:
        return self.children[0] if len(self.children) > 0 else None

    @property
    def right(self) -> Optional["NetworkMember"]:
        return self.children[1] if len(self.children) > 1 else None


def subtreeSize(node: Optional[NetworkMember]) -> int:
    """Number of members in the subtree rooted at node (0 for None)."""
    if node is None:
        return 0

    count = 0
    stack = [node]
    while stack:
        current = stack.pop()
        count += 1
        stack.extend(child for child in current.children if child is not None)

    return count


def pairCount(node: Optional[NetworkMember]) -> int:
    """
    Sum of min(left size, right size) over every node of the tree.

    Sizes are computed bottom-up in one post-order pass, so the result
    matches the recursive definition without re-walking each leg.
    """
    if node is None or not node.children:
        return 0

    sizes = {}
    totalPairs = 0
    stack = [(node, False)]

    while stack:
        current, visited = stack.pop()
        if not visited:
            stack.append((current, True))
            stack.extend((child, False) for child in current.children if child is not None)
            continue

        leftSize = sizes.get(id(current.left), 0) if current.left is not None else 0
        rightSize = sizes.get(id(current.right), 0) if current.right is not None else 0
        sizes[id(current)] = 1 + leftSize + rightSize
        totalPairs += min(leftSize, rightSize)

    return totalPairs
