class UnionFind:
    def __init__(self, n_verts: int) -> None:
        self.vertices = [i for i in range(n_verts)]
        self.rank = [0] * n_verts
        self.count = n_verts

    def __len__(self) -> int:
        return len(self.vertices)

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self.vertices):
            raise IndexError(f'vertex {index} out of range [0, {len(self.vertices)})')

    def find(self, index: int) -> int:
        self._check(index)
        root = index

        while self.vertices[root] != root:
            root = self.vertices[root]

        # path compression: point everything on the path straight at the root
        while self.vertices[index] != root:
            self.vertices[index], index = root, self.vertices[index]

        return root

    def union(self, i: int, j: int) -> bool:
        i = self.find(i)
        j = self.find(j)
        if i == j:
            return False

        if self.rank[i] < self.rank[j]:
            i, j = j, i
        self.vertices[j] = i
        if self.rank[i] == self.rank[j]:
            self.rank[i] += 1

        self.count -= 1
        return True

    def connected(self, i: int, j: int) -> bool:
        return self.find(i) == self.find(j)
