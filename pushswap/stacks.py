"""The two stacks and the eleven moves that act on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable
from enum import Enum
from itertools import pairwise


class Move(str, Enum):
    """A single stack operation, valued by its printed name."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def is_sorted(values: Iterable[int]) -> bool:
    """Return True if the values are strictly ascending from the top."""
    return all(x < y for x, y in pairwise(values))


def _swap(stack: deque[int]) -> None:
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def _push(src: deque[int], dst: deque[int]) -> None:
    if src:
        dst.appendleft(src.popleft())


def _rotate(stack: deque[int]) -> None:
    if len(stack) >= 2:
        stack.rotate(-1)


def _reverse_rotate(stack: deque[int]) -> None:
    if len(stack) >= 2:
        stack.rotate(1)


_EFFECTS: dict[Move, Callable[["PushSwap"], None]] = {
    Move.SA: lambda s: _swap(s.a),
    Move.SB: lambda s: _swap(s.b),
    Move.SS: lambda s: (_swap(s.a), _swap(s.b)) and None,
    Move.PA: lambda s: _push(s.b, s.a),
    Move.PB: lambda s: _push(s.a, s.b),
    Move.RA: lambda s: _rotate(s.a),
    Move.RB: lambda s: _rotate(s.b),
    Move.RR: lambda s: (_rotate(s.a), _rotate(s.b)) and None,
    Move.RRA: lambda s: _reverse_rotate(s.a),
    Move.RRB: lambda s: _reverse_rotate(s.b),
    Move.RRR: lambda s: (_reverse_rotate(s.a), _reverse_rotate(s.b)) and None,
}


class PushSwap:
    """Stacks a and b (top at index 0) and the record of moves applied."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.moves: list[Move] = []

    def apply(self, move: Move | str) -> Move:
        """Perform one move and record it, even if it changes nothing."""
        move = Move(move)
        _EFFECTS[move](self)
        self.moves.append(move)
        return move

    def run(self, moves: Iterable[Move | str]) -> None:
        """Perform a sequence of moves in order."""
        for move in moves:
            self.apply(move)

    def __repr__(self) -> str:
        return f"PushSwap(a={list(self.a)}, b={list(self.b)})"