"""Grid and graph searches: flood fills, shortest paths and quadrant recursion."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterable, Iterator, Sequence

_LINE_LIMIT = 100_000


def _neighbours(y: int, x: int, height: int, width: int) -> Iterator[tuple[int, int]]:
    for dy, dx in ((1, 0), (-1, 0), (0, -1), (0, 1)):
        ny, nx = y + dy, x + dx
        if 0 <= ny < height and 0 <= nx < width:
            yield ny, nx


def _rectangular(rows: Iterable[Sequence[int]]) -> list[list[int]]:
    grid = [list(row) for row in rows]
    if not grid or not grid[0]:
        raise ValueError("the grid must not be empty")
    if any(len(row) != len(grid[0]) for row in grid):
        raise ValueError("every row of the grid must have the same length")
    return grid


def z_order(n: int, r: int, c: int) -> int:
    """Return the position at which cell (r, c) is visited in a 2^n by 2^n Z-order walk."""
    if n < 0:
        raise ValueError("n must not be negative")
    size = 1 << n
    if not (0 <= r < size and 0 <= c < size):
        raise ValueError(f"cell ({r}, {c}) lies outside a {size}x{size} grid")
    position = 0
    for level in reversed(range(n)):
        half = 1 << level
        quadrant = 2 * ((r >> level) & 1) + ((c >> level) & 1)
        position += quadrant * half * half
    return position


def tomato_days(box: Iterable[Sequence[int]]) -> int:
    """Return the days until every tomato ripens, 0 if all are ripe, -1 if some never do.

    Cells hold 1 (ripe), 0 (unripe) or -1 (empty).
    """
    grid = _rectangular(box)
    height, width = len(grid), len(grid[0])
    unripe = sum(row.count(0) for row in grid)
    if not unripe:
        return 0
    queue = deque(
        (y, x) for y, row in enumerate(grid) for x, value in enumerate(row) if value == 1
    )
    days = 0
    while queue:
        y, x = queue.popleft()
        for ny, nx in _neighbours(y, x, height, width):
            if grid[ny][nx] == 0:
                grid[ny][nx] = grid[y][x] + 1
                days = max(days, grid[ny][nx] - 1)
                unripe -= 1
                queue.append((ny, nx))
    return days if unripe == 0 else -1


def count_cabbage_worms(
    width: int, height: int, cabbages: Iterable[tuple[int, int]]
) -> int:
    """Count the groups of orthogonally adjacent cabbages at (x, y) positions."""
    remaining: set[tuple[int, int]] = set()
    for x, y in cabbages:
        if not (0 <= x < width and 0 <= y < height):
            raise ValueError(f"cabbage ({x}, {y}) lies outside the field")
        remaining.add((x, y))
    groups = 0
    while remaining:
        groups += 1
        stack = [remaining.pop()]
        while stack:
            x, y = stack.pop()
            for nx, ny in _neighbours(x, y, width, height):
                if (nx, ny) in remaining:
                    remaining.remove((nx, ny))
                    stack.append((nx, ny))
    return groups


def _adjacency(n: int, edges: Iterable[tuple[int, int]]) -> dict[int, list[int]]:
    graph: dict[int, list[int]] = {node: [] for node in range(1, n + 1)}
    for a, b in edges:
        for node in (a, b):
            if node not in graph:
                raise ValueError(f"vertex {node} is not between 1 and {n}")
        graph[a].append(b)
        graph[b].append(a)
    for neighbours in graph.values():
        neighbours.sort()
    return graph


def _check_start(graph: dict[int, list[int]], start: int) -> None:
    if start not in graph:
        raise ValueError(f"start vertex {start} is not in the graph")


def dfs_order(n: int, edges: Iterable[tuple[int, int]], start: int) -> list[int]:
    """Return the depth-first visiting order from start, smaller vertices first."""
    graph = _adjacency(n, edges)
    _check_start(graph, start)
    visited = {start}
    order = [start]
    stack = [iter(graph[start])]
    while stack:
        for nxt in stack[-1]:
            if nxt not in visited:
                visited.add(nxt)
                order.append(nxt)
                stack.append(iter(graph[nxt]))
                break
        else:
            stack.pop()
    return order


def bfs_order(n: int, edges: Iterable[tuple[int, int]], start: int) -> list[int]:
    """Return the breadth-first visiting order from start, smaller vertices first."""
    graph = _adjacency(n, edges)
    _check_start(graph, start)
    visited = {start}
    order = []
    queue = deque([start])
    while queue:
        node = queue.popleft()
        order.append(node)
        for nxt in graph[node]:
            if nxt not in visited:
                visited.add(nxt)
                queue.append(nxt)
    return order


def distances_to_target(grid: Iterable[Sequence[int]]) -> list[list[int]]:
    """Return each cell's walking distance to the target cell (value 2).

    Blocked cells (value 0) stay 0 and land that cannot reach the target is -1.
    """
    cells = _rectangular(grid)
    height, width = len(cells), len(cells[0])
    targets = [
        (y, x) for y, row in enumerate(cells) for x, value in enumerate(row) if value == 2
    ]
    if not targets:
        raise ValueError("the grid has no target cell")
    target = targets[-1]
    result = [[-1 if value > 0 else 0 for value in row] for row in cells]
    ty, tx = target
    result[ty][tx] = 0
    visited = {target}
    queue = deque([target])
    while queue:
        y, x = queue.popleft()
        for ny, nx in _neighbours(y, x, height, width):
            if (ny, nx) not in visited and cells[ny][nx] != 0:
                visited.add((ny, nx))
                result[ny][nx] = result[y][x] + 1
                queue.append((ny, nx))
    return result


def hide_and_seek(n: int, k: int) -> int:
    """Return the fewest seconds to go from n to k by steps of -1, +1 or doubling."""
    for point in (n, k):
        if not 0 <= point <= _LINE_LIMIT:
            raise ValueError(f"position {point} is not between 0 and {_LINE_LIMIT}")
    seconds = {n: 0}
    queue = deque([n])
    while queue:
        current = queue.popleft()
        if current == k:
            break
        for nxt in (current - 1, current + 1, current * 2):
            if 0 <= nxt <= _LINE_LIMIT and nxt not in seconds:
                seconds[nxt] = seconds[current] + 1
                queue.append(nxt)
    return seconds[k]


def infected_count(edges: Iterable[tuple[int, int]], start: int) -> int:
    """Return how many computers besides start are reachable through the network."""
    graph: defaultdict[int, list[int]] = defaultdict(list)
    for a, b in edges:
        graph[a].append(b)
        graph[b].append(a)
    visited = {start}
    queue = deque([start])
    while queue:
        for nxt in graph[queue.popleft()]:
            if nxt not in visited:
                visited.add(nxt)
                queue.append(nxt)
    return len(visited) - 1


def count_papers(board: Iterable[Sequence[int]]) -> tuple[int, int]:
    """Return the numbers of white (0) and blue (1) squares after quartering until uniform."""
    grid = _rectangular(board)
    size = len(grid)
    if len(grid[0]) != size or size & (size - 1):
        raise ValueError("the board must be square with a side that is a power of two")
    white = blue = 0
    pending = [(0, 0, size)]
    while pending:
        top, left, side = pending.pop()
        colour = grid[top][left]
        uniform = all(
            grid[i][j] == colour
            for i in range(top, top + side)
            for j in range(left, left + side)
        )
        if uniform:
            if colour == 1:
                blue += 1
            else:
                white += 1
            continue
        half = side // 2
        pending.extend(
            (top + dy, left + dx, half) for dy in (0, half) for dx in (0, half)
        )
    return white, blue