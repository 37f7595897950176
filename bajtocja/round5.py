"""Round 5: the knight's attack, the patrol, measurements and the rolling cuboid."""

from collections import deque
from enum import IntEnum
from typing import NamedTuple

BOARD_SIZE = 8
UNREACHABLE = -1

_KNIGHT_JUMPS = (
    (2, 1), (2, -1), (-2, 1), (-2, -1),
    (1, 2), (1, -2), (-1, 2), (-1, -2),
)
_DIGITS = frozenset("0123456789")

_OUTSIDE = "-"
_START = "S"
_TARGET = "M"
_FLOOR = "."

_STANDING_ON = frozenset({_FLOOR, _START, _TARGET})
_LYING_ON = frozenset({
    (_FLOOR, _FLOOR),
    (_OUTSIDE, _FLOOR), (_FLOOR, _OUTSIDE),
    (_TARGET, _FLOOR), (_FLOOR, _TARGET),
    (_START, _FLOOR), (_FLOOR, _START),
    (_START, _OUTSIDE), (_OUTSIDE, _START),
})


def _on_board(column, row):
    return 0 <= column < BOARD_SIZE and 1 <= row <= BOARD_SIZE


def knight_moves(square):
    """Count the squares a knight on ``square`` (like ``"b3"``) can jump to."""
    if len(square) < 2:
        raise ValueError(f"malformed square {square!r}")
    column = ord(square[0]) - ord("a")
    row = int(square[1:])
    return sum(1 for dx, dy in _KNIGHT_JUMPS if _on_board(column + dx, row + dy))


def patrol(number):
    """Smallest number of the same length made of one repeated digit, not below ``number``."""
    if not number or not set(number) <= _DIGITS:
        raise ValueError(f"not a number: {number!r}")
    for current, following in zip(number, number[1:]):
        if current != following:
            digit = int(current) + (1 if current < following else 0)
            return str(digit) * len(number)
    return number


def wagon_weights(sums):
    """Recover wagon weights from the sums of neighbouring pairs.

    The first wagon is taken to weigh as much as the first sum. Returns the
    weights, or None as soon as one would have to be negative.
    """
    sums = list(sums)
    if not sums:
        raise ValueError("at least two wagons are needed")
    weights = [sums[0]]
    for total in sums:
        following = total - weights[-1]
        if following < 0:
            return None
        weights.append(following)
    return weights


class _Orientation(IntEnum):
    STANDING = 0
    NORTH_SOUTH = 1
    EAST_WEST = 2


class _Pose(NamedTuple):
    x1: int
    y1: int
    x2: int
    y2: int
    orientation: _Orientation


def _starting_pose(board):
    pose = _Pose(0, 0, 0, 0, _Orientation.STANDING)
    found = False
    for r, row in enumerate(board, start=1):
        in_row = False
        for c, cell in enumerate(row, start=1):
            if cell != _START:
                continue
            if not in_row and not found:
                pose = pose._replace(x1=r, y1=c, orientation=_Orientation.STANDING)
                in_row = found = True
            elif in_row:
                pose = pose._replace(x2=r, y2=c, orientation=_Orientation.EAST_WEST)
            else:
                pose = pose._replace(x2=r, y2=c, orientation=_Orientation.NORTH_SOUTH)
    return pose


def _neighbours(pose):
    x1, y1, x2, y2, orientation = pose
    if orientation == _Orientation.STANDING:
        yield _Pose(x1 - 2, y1, x1 - 1, y1, _Orientation.NORTH_SOUTH)
        yield _Pose(x1 + 1, y1, x1 + 2, y1, _Orientation.NORTH_SOUTH)
        yield _Pose(x1, y1 - 2, x1, y1 - 1, _Orientation.EAST_WEST)
        yield _Pose(x1, y1 + 1, x1, y1 + 2, _Orientation.EAST_WEST)
    elif orientation == _Orientation.NORTH_SOUTH:
        yield _Pose(x1 - 1, y1, x1 - 1, y2, _Orientation.STANDING)
        yield _Pose(x2 + 1, y1, x2 + 1, y2, _Orientation.STANDING)
        yield _Pose(x1, y1 + 1, x2, y1 + 1, _Orientation.NORTH_SOUTH)
        yield _Pose(x1, y1 - 1, x2, y1 - 1, _Orientation.NORTH_SOUTH)
    else:
        yield _Pose(x1, y1 - 1, x2, y1 - 1, _Orientation.STANDING)
        yield _Pose(x1, y2 + 1, x2, y2 + 1, _Orientation.STANDING)
        yield _Pose(x2 + 1, y1, x2 + 1, y2, _Orientation.EAST_WEST)
        yield _Pose(x1 - 1, y1, x1 - 1, y2, _Orientation.EAST_WEST)


def _fits(pose, grid):
    rows, cols = len(grid), len(grid[0])

    def inside(x, y):
        return 0 <= x < rows and 0 <= y < cols

    if pose.orientation == _Orientation.STANDING:
        return inside(pose.x1, pose.y1) and grid[pose.x1][pose.y1] in _STANDING_ON
    return (
        inside(pose.x1, pose.y1)
        and inside(pose.x2, pose.y2)
        and (grid[pose.x1][pose.y1], grid[pose.x2][pose.y2]) in _LYING_ON
    )


def cuboid_moves(board):
    """Fewest rolls taking the 1x1x2 cuboid from the S cells to stand on M.

    ``board`` is a list of equally long rows. Returns -1 when M is out of reach.
    """
    board = list(board)
    width = len(board[0]) if board else 0
    if any(len(row) != width for row in board):
        raise ValueError("all rows of the board must have the same length")

    border = _OUTSIDE * (width + 2)
    grid = [border, *(_OUTSIDE + row + _OUTSIDE for row in board), border]

    queue = deque([(_starting_pose(board), 0)])
    visited = set()
    while queue:
        pose, moves = queue.popleft()
        key = (pose.x1, pose.y1, pose.orientation)
        if key in visited:
            continue
        visited.add(key)
        if pose.orientation == _Orientation.STANDING and grid[pose.x1][pose.y1] == _TARGET:
            return moves
        queue.extend((nxt, moves + 1) for nxt in _neighbours(pose) if _fits(nxt, grid))
    return UNREACHABLE