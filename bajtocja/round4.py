"""Round 4: the bun quarrel, knocks, dilatation, the rook gambit and Bajtex S.A."""

from collections import Counter

MOD = 10_000_000_007


def bun_quarrel(n):
    """Half of what is left above 600, rounded toward zero."""
    difference = n - 600
    half = abs(difference) // 2
    return half if difference >= 0 else -half


def hofstadter_q(n):
    """The ``n``-th term of Hofstadter's Q sequence (0 for ``n`` <= 0)."""
    if n <= 0:
        return 0
    if n <= 2:
        return 1
    terms = [0, 1, 1]
    for i in range(3, n + 1):
        terms.append(terms[i - terms[i - 1]] + terms[i - terms[i - 2]])
    return terms[n]


def dilatation(rows):
    """Return the fewest and most panels a vertical cut can pass through.

    ``rows`` holds, for every row of the wall, the lengths of its panels.
    """
    rows = [list(row) for row in rows]
    n = len(rows)
    if n == 0:
        raise ValueError("the wall needs at least one row")

    if n == 1:
        row = rows[0]
        if len(row) == 1:
            return (0, 0) if row[0] == 1 else (1, 1)
        if any(length > 1 for length in row):
            return (0, 1)
        return (0, 0)

    first = rows[0]
    width = 0
    cuts = Counter()
    same = True
    last = 0
    all_ones = True
    single_panels = len(first) <= 1

    for index, length in enumerate(first):
        width += length
        cuts[width] += 1
        if index == 0:
            last = length
        elif not (same and last == length):
            same = False
        if length > 1:
            all_ones = False

    for row in rows[1:]:
        if len(row) > 1:
            single_panels = False
        end = 0
        for position, length in enumerate(row, start=1):
            end += length
            if position != len(row):
                cuts[end] += 1
            if length > 1:
                all_ones = False
            if not (same and last == length):
                same = False

    if all_ones:
        return (0, 0)
    if same:
        return (n, n) if single_panels else (0, n)

    crossings = [n - cuts[position] for position in range(1, width)]
    return (min([n, *crossings]), max([0, *crossings]))


def rook_gambit(tower):
    """Decide the winner of the rook game on a tower of 3-wide floors.

    Returns a (player, value) pair, or None when there is no answer.
    """
    floors = [tuple(bool(cell) for cell in floor) for floor in tower]
    if any(len(floor) != 3 for floor in floors):
        raise ValueError("every floor has exactly three cells")

    single = all(sum(floor) <= 1 for floor in floors)
    never_full = all(sum(floor) < 3 for floor in floors)

    if len(floors) == 2:
        if floors[1] == (False, True, False):
            return ("B", 1)
        return ("A", 1)
    if single:
        return ("A", 1)
    if never_full:
        sides = sum(1 for floor in floors[1:] if floor[0] or floor[2])
        return ("A" if sides % 2 else "B", (2 * sides) % MOD)
    return None


class BajtexConnections:
    """Undoable connections between employees numbered 0..n."""

    def __init__(self, n):
        self._connections = 0
        self._parents = list(range(n + 1))
        self._ranks = [0] * (n + 1)
        self._joined_at = [1] * (n + 1)
        self._history = []

    def _check(self, node):
        if not 0 <= node < len(self._parents):
            raise IndexError(f"employee {node} out of range")

    def _find(self, node):
        parents = self._parents
        root = node
        while parents[root] != root:
            root = parents[root]
        while parents[node] != root:
            parents[node], node = root, parents[node]
        return root

    def _earliest_join(self, node):
        earliest = self._connections + 1
        while node != self._parents[node]:
            earliest = min(earliest, self._joined_at[node])
            node = self._parents[node]
        return earliest

    def connect(self, x, y):
        """Record a connection between ``x`` and ``y``."""
        self._check(x)
        self._check(y)
        self._connections += 1
        root_x, root_y = self._find(x), self._find(y)
        if root_x == root_y:
            return
        if self._ranks[root_x] < self._ranks[root_y]:
            root_x, root_y = root_y, root_x
        self._history.append((root_y, self._parents[root_y]))
        self._parents[root_y] = root_x
        self._joined_at[root_y] = self._connections
        if self._ranks[root_x] == self._ranks[root_y]:
            self._ranks[root_x] += 1

    def undo(self, k):
        """Withdraw the last ``k`` connections."""
        for _ in range(min(k, len(self._history))):
            node, old_parent = self._history.pop()
            self._parents[node] = old_parent
            self._joined_at[node] = self._connections + 1
        self._connections -= k

    def undo_count(self, x, y):
        """How many connections to withdraw before ``x`` and ``y`` part."""
        self._check(x)
        self._check(y)
        earliest = min(self._earliest_join(x), self._earliest_join(y))
        return self._connections - earliest + 1