from array import array

class DisjointSet:
    """
    Disjoint-set forest over the integers 0..count-1.
    Cells map to elements as row * size + col.
    """

    __slots__ = ('parent', 'rank', 'components')

    def __init__(self, count: int):
        self.parent = array('i', range(count))
        self.rank = array('B', [0] * count)
        self.components = count

    def find(self, x: int) -> int:
        parent = self.parent
        root = x
        while parent[root] != root:
            root = parent[root]
        # Path compression
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merges the sets holding a and b. False if they were already joined."""
        ra = self.find(a)
        rb = self.find(b)
        if ra == rb:
            return False

        # Union by rank
        if self.rank[ra] < self.rank[rb]:
            ra, rb = rb, ra
        self.parent[rb] = ra
        if self.rank[ra] == self.rank[rb]:
            self.rank[ra] += 1
        self.components -= 1
        return True

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)
