"""Stacks, queues, heaps and bit sets driven by command lists."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable, Iterator, Sequence

_SET_SIZE = 20


class ACError(Exception):
    """Raised when a delete command meets an empty array."""


class ImpossibleSequenceError(ValueError):
    """Raised when a sequence cannot be produced with a stack."""


class SmallSet:
    """A set of the integers 1 to 20 kept as a bit mask."""

    def __init__(self) -> None:
        self._bits = 0

    @staticmethod
    def _mask(x: int) -> int:
        if not 1 <= x <= _SET_SIZE:
            raise ValueError(f"element must be between 1 and {_SET_SIZE}: {x}")
        return 1 << (x - 1)

    def add(self, x: int) -> None:
        self._bits |= self._mask(x)

    def remove(self, x: int) -> None:
        self._bits &= ~self._mask(x)

    def check(self, x: int) -> bool:
        return bool(self._bits & self._mask(x))

    def toggle(self, x: int) -> None:
        self._bits ^= self._mask(x)

    def fill(self) -> None:
        self._bits = (1 << _SET_SIZE) - 1

    def clear(self) -> None:
        self._bits = 0

    def __contains__(self, x: object) -> bool:
        return isinstance(x, int) and 1 <= x <= _SET_SIZE and self.check(x)

    def __iter__(self) -> Iterator[int]:
        return (x for x in range(1, _SET_SIZE + 1) if self._bits & (1 << (x - 1)))

    def __len__(self) -> int:
        return bin(self._bits).count("1")


def _parse(command: str) -> tuple[str, list[int]]:
    name, *args = command.split()
    return name, [int(a) for a in args]


def _argument(name: str, args: list[int]) -> int:
    if not args:
        raise ValueError(f"command {name!r} needs an argument")
    return args[0]


def run_set_commands(commands: Iterable[str]) -> list[int]:
    """Run set commands and return the 1/0 answers to every check."""
    small_set = SmallSet()
    answers = []
    for command in commands:
        name, args = _parse(command)
        if name == "add":
            small_set.add(_argument(name, args))
        elif name == "remove":
            small_set.remove(_argument(name, args))
        elif name == "check":
            answers.append(int(small_set.check(_argument(name, args))))
        elif name == "toggle":
            small_set.toggle(_argument(name, args))
        elif name == "all":
            small_set.fill()
        elif name == "empty":
            small_set.clear()
    return answers


def run_stack_commands(commands: Iterable[str]) -> list[int]:
    """Run push/pop/size/empty/top on a stack and return every printed value."""
    stack: list[int] = []
    output = []
    for command in commands:
        name, args = _parse(command)
        if name == "push":
            stack.append(_argument(name, args))
        elif name == "pop":
            output.append(stack.pop() if stack else -1)
        elif name == "size":
            output.append(len(stack))
        elif name == "empty":
            output.append(0 if stack else 1)
        elif name == "top":
            output.append(stack[-1] if stack else -1)
    return output


def run_queue_commands(commands: Iterable[str]) -> list[int]:
    """Run push/pop/size/empty/front/back on a queue and return every printed value."""
    queue: deque[int] = deque()
    output = []
    for command in commands:
        name, args = _parse(command)
        if name == "push":
            queue.append(_argument(name, args))
        elif name == "pop":
            output.append(queue.popleft() if queue else -1)
        elif name == "size":
            output.append(len(queue))
        elif name == "empty":
            output.append(0 if queue else 1)
        elif name == "front":
            output.append(queue[0] if queue else -1)
        elif name == "back":
            output.append(queue[-1] if queue else -1)
    return output


def _heap_run(operations: Iterable[int], key) -> list[int]:
    heap: list[tuple] = []
    output = []
    for x in operations:
        if x == 0:
            output.append(heapq.heappop(heap)[-1] if heap else 0)
        else:
            heapq.heappush(heap, (*key(x), x))
    return output


def max_heap(operations: Iterable[int]) -> list[int]:
    """Push non-zero values; each 0 pops and reports the largest, or 0 if empty."""
    return _heap_run(operations, lambda x: (-x,))


def min_heap(operations: Iterable[int]) -> list[int]:
    """Push non-zero values; each 0 pops and reports the smallest, or 0 if empty."""
    return _heap_run(operations, lambda x: (x,))


def absolute_heap(operations: Iterable[int]) -> list[int]:
    """Push non-zero values; each 0 pops the smallest in absolute value, negatives first."""
    return _heap_run(operations, lambda x: (abs(x),))


def apply_ac(commands: str, values: Iterable[int]) -> list[int]:
    """Apply R (reverse) and D (drop first) commands to the values."""
    items = deque(values)
    reversed_ = False
    for command in commands:
        if command == "R":
            reversed_ = not reversed_
        elif command == "D":
            if not items:
                raise ACError("cannot delete from an empty array")
            if reversed_:
                items.pop()
            else:
                items.popleft()
    if reversed_:
        items.reverse()
    return list(items)


def josephus(n: int, k: int) -> list[int]:
    """Return the order in which people 1..n leave when every k-th is removed."""
    if k < 1:
        raise ValueError("k must be at least 1")
    circle = deque(range(1, n + 1))
    order = []
    while circle:
        circle.rotate(-(k - 1))
        order.append(circle.popleft())
    return order


def last_card(n: int) -> int:
    """Return the card left after repeatedly discarding the top and moving the next under."""
    if n < 1:
        raise ValueError("there must be at least one card")
    cards = deque(range(1, n + 1))
    while len(cards) > 1:
        cards.popleft()
        cards.append(cards.popleft())
    return cards[0]


def stack_sequence(target: Sequence[int]) -> list[str]:
    """Return the '+' (push) and '-' (pop) steps that produce target from 1, 2, ..., n."""
    stack: list[int] = []
    steps: list[str] = []
    next_value = 1
    for x in target:
        while next_value <= x:
            stack.append(next_value)
            next_value += 1
            steps.append("+")
        if not stack or stack[-1] != x:
            raise ImpossibleSequenceError(f"{x} cannot be popped at this point")
        stack.pop()
        steps.append("-")
    return steps


def is_balanced(text: str) -> bool:
    """Tell whether the parentheses in text are properly matched."""
    stack: list[str] = []
    for ch in text:
        if stack and stack[-1] == "(" and ch == ")":
            stack.pop()
        else:
            stack.append(ch)
    return not stack