"""Planning the moves that sort stack a, using stack b as scratch space."""

from __future__ import annotations

from collections import deque

from pushswap.stacks import Move, PushSwap, is_sorted


def _median_split(stack: deque[int]) -> int:
    return len(stack) // 2 + 1


def _in_top_half(stack: deque[int], value: int) -> bool:
    return stack.index(value) < _median_split(stack)


def _rotation_cost(stack: deque[int], index: int) -> int:
    return index if index < _median_split(stack) else len(stack) - index


def _target_in_b(value: int, b: deque[int]) -> int:
    """The closest smaller value in b, or the largest of b if none is smaller."""
    lower = [x for x in b if x < value]
    return max(lower) if lower else max(b)


def _target_in_a(value: int, a: deque[int]) -> int:
    """The closest larger value in a, or the smallest of a if none is larger."""
    higher = [x for x in a if x > value]
    return min(higher) if higher else min(a)


def _cheapest(state: PushSwap) -> tuple[int, int]:
    """The value of a that costs least to push onto its target in b.

    Ties go to the value nearest the top of a.
    """
    a, b = state.a, state.b

    def cost(item: tuple[int, int]) -> int:
        index, value = item
        target = _target_in_b(value, b)
        return _rotation_cost(a, index) + _rotation_cost(b, b.index(target))

    _, value = min(enumerate(a), key=cost)
    return value, _target_in_b(value, b)


def _bring_to_top(state: PushSwap, top_a: int, top_b: int) -> None:
    up = _in_top_half(state.a, top_a)
    while state.a[0] != top_a:
        state.apply(Move.RA if up else Move.RRA)
    up = _in_top_half(state.b, top_b)
    while state.b[0] != top_b:
        state.apply(Move.RB if up else Move.RRB)


def _transfer_to_b(state: PushSwap) -> None:
    value, target = _cheapest(state)
    value_up = _in_top_half(state.a, value)
    target_up = _in_top_half(state.b, target)
    if value_up and target_up:
        while state.a[0] != value and state.b[0] != target:
            state.apply(Move.RR)
    elif not value_up and not target_up:
        while state.a[0] != value and state.b[0] != target:
            state.apply(Move.RRR)
    _bring_to_top(state, value, target)
    state.apply(Move.PB)


def _transfer_to_a(state: PushSwap) -> None:
    top_b = state.b[0]
    _bring_to_top(state, _target_in_a(top_b, state.a), top_b)
    state.apply(Move.PA)


def _put_min_on_top(state: PushSwap) -> None:
    if not state.a:
        return
    smallest = min(state.a)
    up = _in_top_half(state.a, smallest)
    while state.a[0] != smallest:
        state.apply(Move.RA if up else Move.RRA)


def sort_small(state: PushSwap) -> list[Move]:
    """Sort a stack a of two or three values; return the moves applied.

    Two values are always swapped. Stacks of fewer than two values are
    left alone.
    """
    start = len(state.moves)
    a = state.a
    if len(a) == 2:
        state.apply(Move.SA)
    elif len(a) > 2:
        biggest = max(a)
        if a[0] == biggest:
            state.apply(Move.RA)
        elif a[1] == biggest:
            state.apply(Move.RRA)
        if a[0] > a[1]:
            state.apply(Move.SA)
    return state.moves[start:]


def sort_large(state: PushSwap) -> list[Move]:
    """Sort stack a of any size through stack b; return the moves applied."""
    start = len(state.moves)
    len_a = len(state.a)
    len_b = len(state.b)
    while len_a > 3 and len_b < 2 and not is_sorted(state.a):
        state.apply(Move.PB)
        len_a -= 1
        len_b += 1
    while len_a > 3 and not is_sorted(state.a):
        _transfer_to_b(state)
        len_a -= 1
    sort_small(state)
    while state.b:
        _transfer_to_a(state)
    _put_min_on_top(state)
    return state.moves[start:]


def plan_moves(values) -> list[Move]:
    """Return the moves that sort the given values, top of stack first."""
    state = PushSwap(values)
    if not is_sorted(state.a):
        if len(state.a) < 4:
            sort_small(state)
        else:
            sort_large(state)
    return list(state.moves)