"""Graph queries over edge lists and adjacency matrices."""

from __future__ import annotations

from collections import Counter, deque
from typing import Sequence


def _check_vertex(vertex: int, count: int) -> None:
    if not 0 <= vertex < count:
        raise ValueError(f"vertex {vertex} out of range 0..{count - 1}")


def can_finish(num_courses: int, prerequisites: Sequence[Sequence[int]]) -> bool:
    """True when the prerequisite graph has no cycle."""
    adjacency: list[list[int]] = [[] for _ in range(num_courses)]
    indegree = [0] * num_courses
    for course, required in prerequisites:
        _check_vertex(course, num_courses)
        _check_vertex(required, num_courses)
        adjacency[course].append(required)
        indegree[required] += 1
    ready = deque(v for v in range(num_courses) if indegree[v] == 0)
    processed = 0
    while ready:
        vertex = ready.popleft()
        processed += 1
        for neighbour in adjacency[vertex]:
            indegree[neighbour] -= 1
            if indegree[neighbour] == 0:
                ready.append(neighbour)
    return processed == num_courses


def find_circle_num(is_connected: Sequence[Sequence[int]]) -> int:
    """Number of connected components of an adjacency matrix."""
    count = len(is_connected)
    adjacency: list[list[int]] = [[] for _ in range(count)]
    for i, row in enumerate(is_connected):
        for j, cell in enumerate(row):
            if cell == 1:
                _check_vertex(j, count)
                adjacency[i].append(j)
                adjacency[j].append(i)
    seen = [False] * count
    components = 0
    for start in range(count):
        if seen[start]:
            continue
        components += 1
        seen[start] = True
        queue = deque([start])
        while queue:
            for neighbour in adjacency[queue.popleft()]:
                if not seen[neighbour]:
                    seen[neighbour] = True
                    queue.append(neighbour)
    return components


def find_judge(n: int, trust: Sequence[Sequence[int]]) -> int:
    """Label of the person trusted by all others who trusts nobody, else -1."""
    trusts = Counter(a for a, _ in trust)
    trusted_by = Counter(b for _, b in trust)
    judge = -1
    for person in range(1, n + 1):
        if trusted_by[person] == n - 1 and trusts[person] == 0:
            judge = person
    return judge


def find_center(edges: Sequence[Sequence[int]]) -> int:
    """Centre of a star graph: the vertex touching every other one, else -1."""
    highest = max((max(a, b) for a, b in edges), default=0)
    degree = Counter(v for edge in edges for v in edge)
    center = -1
    for vertex in range(highest + 1):
        if degree[vertex] == highest - 1:
            center = vertex
    return center


def valid_path(
    n: int, edges: Sequence[Sequence[int]], source: int, destination: int
) -> bool:
    """True when ``destination`` is reachable from ``source`` in an undirected graph."""
    _check_vertex(source, n)
    _check_vertex(destination, n)
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for a, b in edges:
        _check_vertex(a, n)
        _check_vertex(b, n)
        adjacency[a].append(b)
        adjacency[b].append(a)
    seen = {source}
    queue = deque([source])
    while queue:
        for neighbour in adjacency[queue.popleft()]:
            if neighbour not in seen:
                seen.add(neighbour)
                queue.append(neighbour)
    return destination in seen