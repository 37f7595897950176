"""Round 1: anger, cleansing water, fufsopalindromes, Bajtych's work, the cartographer."""

import heapq
import itertools
import math

BLURRED = -1
_UNSET = -1

_ROTATED = {"0": "0", "1": "1", "2": "2", "5": "5", "6": "9", "8": "8", "9": "6"}


def minutes_to_seconds(n):
    """Return ``n`` minutes expressed in seconds."""
    return n * 60


def first_letters(words):
    """Join the first letter of every word."""
    return "".join(word[0] for word in words)


def is_fufsopalindrome(number):
    """Tell whether ``number`` reads the same after turning it upside down."""
    for char, mirror in zip(number, reversed(number)):
        if char not in _ROTATED or _ROTATED[char] != mirror:
            return False
    return True


def _children_lists(values, parents):
    n = len(values)
    parents = list(parents)
    if len(parents) != n - 1:
        raise ValueError(f"expected {n - 1} parents, got {len(parents)}")
    children = [[] for _ in range(n)]
    for node, parent in enumerate(parents, start=1):
        if not 1 <= parent <= n:
            raise ValueError(f"parent {parent} out of range")
        children[parent - 1].append(node)
    for kids in children:
        kids.sort(key=lambda child: values[child], reverse=True)
    return children


def _branch_bests(branch, children, values, k):
    best = [_UNSET] * (k + 1)
    best[1] = max(best[1], values[branch])
    stack = [branch]
    visited = {branch}
    while stack:
        node = stack.pop()
        total = 0
        for size, child in enumerate(children[node][:k], start=1):
            total += values[child]
            best[size] = max(best[size], total)
        for child in children[node]:
            if child != node and child not in visited:
                visited.add(child)
                stack.append(child)
    return best


def max_subtree_sum(values, parents, k):
    """Best total of ``k`` chosen values, or -1 when no choice fits."""
    values = list(values)
    if k < 1:
        raise ValueError("k must be at least 1")
    if not values:
        raise ValueError("the tree has no nodes")
    n = len(values)
    if k == 1:
        if n == 1:
            return values[0]
        if n == 2:
            return max(values)
        return -1

    children = _children_lists(values, parents)
    branches = [_branch_bests(branch, children, values, k) for branch in children[0]]

    best_total = -1
    for i, best in enumerate(branches):
        for size, value in enumerate(best):
            if value == _UNSET:
                continue
            if size == k:
                best_total = max(best_total, value)
                continue
            for p, other in enumerate(branches):
                if p != i and other[k - size] != _UNSET:
                    best_total = max(best_total, value + other[k - size])
    return best_total


def _shortest_path(n, routes):
    distance = [math.inf] * (n + 1)
    previous = [-1] * (n + 1)
    distance[1] = 0
    order = itertools.count()
    heap = [(0, next(order), 1)]
    while heap:
        dist, _, node = heapq.heappop(heap)
        if dist > distance[node]:
            continue
        for target in sorted(routes[node]):
            cost, _ = routes[node][target]
            candidate = distance[node] + (cost if cost != BLURRED else 1)
            if candidate < distance[target]:
                distance[target] = candidate
                heapq.heappush(heap, (candidate, next(order), target))
                previous[target] = node
    return distance, previous


def cartographer(n, edges, t):
    """Fill in blurred road lengths so the shortest 1→n route takes ``t``.

    Returns the list of road lengths in input order, or None when impossible.
    """
    if n < 1:
        raise ValueError("the map needs at least one town")
    routes = [{} for _ in range(n + 1)]
    lengths = []
    for index, (a, b, c) in enumerate(edges):
        routes[a][b] = (c, index)
        lengths.append(c)

    distance, previous = _shortest_path(n, routes)

    blurred_index = -1
    node = n
    while previous[node] != -1:
        parent = previous[node]
        cost, index = routes[parent][node]
        if cost == BLURRED:
            blurred_index = index
        node = parent

    shortest = distance[n]
    if shortest == t:
        return [length if length != BLURRED else 1 for length in lengths]
    remaining = t - (shortest - 1)
    if blurred_index != -1 and remaining >= 1:
        result = []
        for index, length in enumerate(lengths):
            if index == blurred_index:
                result.append(remaining)
            elif length == BLURRED:
                result.append(1)
            else:
                result.append(length)
        return result
    return None