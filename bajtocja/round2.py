"""Round 2: interview, jubilee, stone stacks, kumquat juice and the amusement park."""

from dataclasses import dataclass

CORRECT = "DOBRZE"
TOO_FAST = "TYLKO SZYBKO"


def interview_verdict(a, b, p):
    """Judge the product answer given at the interview."""
    product = a * b
    if product == p:
        return CORRECT
    return TOO_FAST


def jubilee_gap(n):
    """How far ``n`` is from the next power of two at or above it."""
    power = 1
    while power < n:
        power *= 2
    return power - n


def longest_stone_stack(stones):
    """Length of the longest run of consecutive distinct stone sizes (at least 1)."""
    best = run = 1
    ordered = sorted(set(stones))
    for lower, upper in zip(ordered, ordered[1:]):
        if upper == lower + 1:
            run += 1
        else:
            best = max(best, run)
            run = 1
    return max(best, run)


def _produced(schedule, day):
    total = 0
    previous_day = 0
    current = 0
    for start in sorted(schedule):
        if start > day:
            break
        total += current * (start - previous_day)
        previous_day = start
        current = schedule[start]
    return total + current * (day - previous_day)


def _check_worker(worker, count):
    if not 1 <= worker <= count:
        raise IndexError(f"worker {worker} out of range")


def kumquat_juice(productivity, operations):
    """Replay V/F/H/Q operations and return the answers to the Q queries.

    Workers are numbered from 1. Operations are tuples:
    ("V", worker, productivity, day), ("F", worker, day),
    ("H", worker, productivity, day) and ("Q", first, last, day).
    Firing forgets everything the worker produced so far.
    """
    schedules = [{0: value} for value in productivity]
    if not schedules:
        raise ValueError("the production line needs at least one worker")
    count = len(schedules)

    answers = []
    for kind, *args in operations:
        if kind in ("V", "H"):
            worker, value, day = args
            _check_worker(worker, count)
            schedules[worker - 1][day] = value
        elif kind == "F":
            worker, _day = args
            _check_worker(worker, count)
            schedules[worker - 1] = {}
        elif kind == "Q":
            first, last, day = args
            if first <= last:
                _check_worker(first, count)
                _check_worker(last, count)
            answers.append(
                sum(_produced(schedules[index], day) for index in range(first - 1, last))
            )
    return answers


@dataclass
class _Worker:
    productivity: int = 0
    last_update: int = 0
    produced: int = 0
    active: bool = True


class ProductionLine:
    """Workers producing juice at a steady rate; indices start at 0."""

    def __init__(self, productivities):
        self._workers = [_Worker(value) for value in productivities]

    def _worker(self, index):
        if not 0 <= index < len(self._workers):
            raise IndexError(f"worker {index} out of range")
        return self._workers[index]

    def _update(self, index, time):
        worker = self._worker(index)
        if not worker.active:
            return
        worker.produced += (time - worker.last_update) * worker.productivity
        worker.last_update = time

    def change_productivity(self, worker, productivity, time):
        """Set a new rate for ``worker`` from ``time`` on."""
        self._update(worker, time)
        self._workers[worker].productivity = productivity

    def fire(self, worker, time):
        """Stop ``worker`` at ``time``; fired workers are left out of queries."""
        self._update(worker, time)
        self._workers[worker].active = False

    def hire(self, worker, productivity, time):
        """Put a fresh worker in place ``worker``, starting at ``time``."""
        self._worker(worker)
        self._workers[worker] = _Worker(productivity, last_update=time)

    def query_range(self, start, end, time):
        """Total produced by active workers ``start``..``end`` (inclusive) up to ``time``."""
        total = 0
        for index in range(start, end + 1):
            if not self._worker(index).active:
                continue
            self._update(index, time)
            total += self._workers[index].produced
        return total


def park_survey(n, ask):
    """Ask about each of ``n`` attractions in turn and collect the answers.

    ``ask`` receives the attraction number (from 1) and returns its answer.
    """
    return [ask(attraction) for attraction in range(1, n + 1)]