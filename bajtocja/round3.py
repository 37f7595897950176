"""Round 3: siuuu, the lock, Bajtocja Entertainment, the cipher and the home computer."""

from collections import Counter
from itertools import accumulate

MAX_REGISTERS = 20
MAX_EDGES = 20
MAX_INSTRUCTIONS = 60
MAX_STATE_VALUE = 1_000_000


def siuu(n):
    """Return the celebration shout with ``n`` letters u."""
    return "Si" + "u" * n


def lock_combinations(pattern):
    """Count the lock settings matching a pattern where '?' marks unknown digits."""
    unknown = pattern.count("?")
    if unknown <= 1:
        return unknown
    return unknown**4


def _split_from(target, numbers, start):
    bounds = [start]
    running = 0
    for end, value in enumerate(numbers[start:], start=start + 1):
        running += value
        if running == 0:
            bounds[-1] = end
        if running == target:
            bounds.append(end)
            running = 0
    if len(bounds) >= 2 and bounds[-1] == len(numbers):
        return bounds
    return None


def split_equal_sums(numbers):
    """Split ``numbers`` into at least two parts with equal sums.

    Returns the end positions (counted from 1) of the parts, or None when
    no split is found.
    """
    numbers = list(numbers)
    n = len(numbers)
    if n < 1:
        raise ValueError("the sequence must not be empty")
    if n == 2:
        return [1, 2] if numbers[0] == numbers[1] else None

    total = sum(numbers)
    if total == 0:
        bounds = [
            end for end, prefix in enumerate(accumulate(numbers), start=1) if prefix == 0
        ]
        if len(bounds) >= 2 and bounds[-1] == n:
            return bounds
        return None

    seen = set()
    for end, prefix in enumerate(accumulate(numbers), start=1):
        if prefix in seen:
            continue
        if prefix != 0 and total % prefix == 0:
            bounds = _split_from(prefix, numbers, end)
            if bounds is not None:
                return bounds
        seen.add(prefix)
    return None


def decrypt_min_xor(encrypted, keys):
    """Greedily pair each encrypted value with the key giving the smallest xor.

    Ties go to the smaller key; every key is used once. Returns the xors.
    """
    encrypted = list(encrypted)
    available = sorted(keys)
    if len(encrypted) != len(available):
        raise ValueError("there must be as many keys as encrypted values")
    if any(value < 0 for value in encrypted) or any(key < 0 for key in available):
        raise ValueError("values and keys must not be negative")

    result = []
    for value in encrypted:
        best = min(available, key=lambda key: (value ^ key, key))
        available.remove(best)
        result.append(value ^ best)
    return result


def home_computer(n, edges):
    """Build the program printed for a computer with ``n`` registers.

    Returns the output as lines of integers: the register count, the state
    rows, the instruction count and the instructions.
    """
    edges = list(edges)
    if not 1 <= n <= MAX_REGISTERS or len(edges) > MAX_EDGES:
        raise ValueError("too many registers or edges")

    if n == 1:
        return [[1], [1], [0]]
    if n == 2:
        a, b = edges[0] if edges else (0, 0)
        return [[2], [1], [-a, b]]

    graph = {node: [] for node in range(1, n + 1)}
    for u, v in edges:
        if 1 <= u <= n and 1 <= v <= n:
            graph[u].append(v)

    states = {}
    for node in range(1, n + 1):
        row = [0] * n
        row[node - 1] = min(node, MAX_STATE_VALUE)
        states[node] = row

    instructions = [
        [after - before for after, before in zip(states[v], states[u])]
        for u in range(1, n + 1)
        for v in graph[u]
    ]
    if len(instructions) > MAX_INSTRUCTIONS:
        raise ValueError("too many instructions")

    return [[n], *(states[node] for node in range(1, n + 1)), [len(instructions)], *instructions]