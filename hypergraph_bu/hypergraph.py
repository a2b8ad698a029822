"""Hypergraphs in the hMetis layout, with loading, saving and shortest paths."""

from __future__ import annotations

import heapq
import os
from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence

__all__ = ["HyperGraph"]


def _to_ints(line: str) -> list[int]:
    return [int(token) for token in line.split()]


def _lines(path: str | os.PathLike[str]) -> Iterator[str]:
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            yield line.rstrip("\r\n")


def _next_ints(lines: Iterator[str], what: str) -> list[int]:
    try:
        line = next(lines)
    except StopIteration:
        raise ValueError(f"unexpected end of file while reading {what}") from None
    return _to_ints(line)


def _weight_flags(mode: int) -> tuple[bool, bool]:
    """Return (edge weighted, vertex weighted) for an hMetis format code."""
    return mode in (1, 11), mode in (10, 11)


@dataclass
class HyperGraph:
    """A hypergraph stored as compressed edge lists.

    ``eind`` holds, for each hyperedge, the offset of its first vertex in
    ``eptr``, followed by one final offset; ``eptr`` holds the zero-based
    vertex numbers of all hyperedges back to back.
    """

    vtxwt: list[int] = field(default_factory=list)
    hewt: list[int] = field(default_factory=list)
    part: list[int] = field(default_factory=list)
    eind: list[int] = field(default_factory=list)
    eptr: list[int] = field(default_factory=list)

    @classmethod
    def hm_sample(cls) -> HyperGraph:
        """The 7-vertex, 4-hyperedge example from the hMetis manual."""
        return cls(
            vtxwt=[1, 1, 1, 1, 1, 1, 1],
            hewt=[1, 1, 1, 1],
            part=[-1, -1, -1, -1, -1, -1, -1],
            eind=[0, 2, 6, 9, 12],
            eptr=[0, 2, 0, 1, 3, 4, 3, 4, 6, 2, 5, 6],
        )

    def fix(self, vertices: Iterable[int], part: int) -> None:
        """Fix the given vertices to one side of the partition."""
        for vertex in vertices:
            self.part[vertex] = part

    def bias(self, b: float) -> None:
        """Add weight to one side so that the split leans away from an even half."""
        if b == 0.5:
            return

        fix0 = None
        fix1 = None
        for index in range(len(self.vtxwt)):
            if self.part[index] == 0:
                fix0 = index
            if self.part[index] == 1:
                fix1 = index

        add_wt = 1
        if b < 0.5:
            target, side = fix1, 1
        else:
            target, side = fix0, 0

        if target is None:
            self.vtxwt.append(add_wt)
            self.part.append(side)
        else:
            self.vtxwt[target] += add_wt

    @classmethod
    def load(
        cls,
        hgr: str | os.PathLike[str],
        fix: str | os.PathLike[str] | None = None,
    ) -> HyperGraph:
        """Read an hMetis hypergraph file and, optionally, a fix file."""
        lines = _lines(hgr)
        try:
            header_line = next(lines)
        except StopIteration:
            raise ValueError("hypergraph file is empty") from None
        print(f"Load {header_line}")
        header = _to_ints(header_line)
        if len(header) < 2:
            raise ValueError(f"malformed hypergraph header: {header_line!r}")
        mode = header[2] if len(header) == 3 else 0
        eweight, vweight = _weight_flags(mode)
        num_he, num_v = header[0], header[1]

        graph = cls()
        for edge in range(num_he):
            vertices = _next_ints(lines, f"hyperedge {edge}")
            graph.eind.append(len(graph.eptr))
            # The file numbers vertices from one.
            graph.eptr.extend(v - 1 for v in vertices)
            if eweight:
                print(f"Take last element off of edge {edge}")
                if len(graph.eptr) <= graph.eind[-1]:
                    raise ValueError(f"hyperedge {edge} has no weight")
                graph.hewt.append(graph.eptr.pop() + 1)
            else:
                graph.hewt.append(1)
        graph.eind.append(len(graph.eptr))
        print(f"eind length: {len(graph.eind)} eptr length {len(graph.eptr)}")

        for vertex in range(num_v):
            if vweight:
                values = _next_ints(lines, f"weight of vertex {vertex}")
                if not values:
                    raise ValueError(f"missing weight for vertex {vertex}")
                graph.vtxwt.append(values[0])
            else:
                graph.vtxwt.append(1)
            graph.part.append(-1)

        if fix is not None:
            fixed = 0
            fix_lines = _lines(fix)
            for vertex in range(num_v):
                values = _next_ints(fix_lines, f"fix entry of vertex {vertex}")
                if not values:
                    raise ValueError(f"missing fix entry for vertex {vertex}")
                graph.part[vertex] = values[0]
                if values[0] != -1:
                    fixed += 1
            print(f"{fixed} fixed vertices")

        return graph

    def save(
        self,
        hgr: str | None = None,
        mode: int = 0,
        fix: str | None = None,
        part: str | None = None,
        stats: str | None = None,
    ) -> None:
        """Write the hypergraph in hMetis form to standard output.

        The file name arguments are accepted but no files are created.
        """
        print(f"EPTR: {self.eptr}")
        print(f"EIND: {self.eind}")

        header = f"{len(self.hewt)} {len(self.vtxwt)}"
        print(f"{header} {mode}" if mode != 0 else header)
        eweight, vweight = _weight_flags(mode)

        for he, weight in enumerate(self.hewt):
            start, end = self.eind[he], self.eind[he + 1]
            print(f"Hyper edge {he} is index {start} to {end}")
            members = "".join(f"{v + 1} " for v in self.eptr[start:end])
            print(f"{members}{weight}" if eweight else members)
        if vweight:
            for weight in self.vtxwt:
                print(weight)

    def show(self) -> str:
        """Print a one-line summary and return it."""
        summary = (
            f"Hypergraph has {len(self.eptr) - 1} edges, "
            f"{len(self.vtxwt)} vertices"
        )
        print(summary)
        return summary

    def _edge(self, edge: int) -> list[int]:
        return self.eptr[self.eind[edge] : self.eind[edge + 1]]

    def vertex_edge_container(self) -> list[list[int]]:
        """For each vertex, the hyperedges that contain it, in edge order."""
        num_edges = 0 if not self.eptr else len(self.eind) - 1
        container: list[list[int]] = [[] for _ in self.vtxwt]
        for edge in range(num_edges):
            for vertex in self._edge(edge):
                container[vertex].append(edge)
        return container

    def bfs(self, sources: Sequence[int], limit: int) -> list[int]:
        """Hop distances from the sources.

        Unreached vertices get twice the vertex count; vertices farther
        than ``limit`` are not expanded.
        """
        inf = len(self.vtxwt) * 2
        result = [inf] * len(self.vtxwt)
        queue: deque[int] = deque()
        for source in sources:
            queue.append(source)
            result[source] = 0

        container = self.vertex_edge_container()
        while queue:
            current = queue.popleft()
            distance = result[current]
            if distance > limit:
                continue
            for edge in container[current]:
                for neighbor in self._edge(edge):
                    if result[neighbor] > distance + 1:
                        result[neighbor] = distance + 1
                        queue.append(neighbor)
        return result

    def dijkstra(self, sources: Sequence[int], edgelength: Iterable[int]) -> list[int]:
        """Weighted distances from the sources, using hyperedge weights.

        Unreached vertices get the sum of ``edgelength``.
        """
        inf = sum(edgelength)
        print(f"inf is {inf}")
        distances = [inf] * len(self.vtxwt)

        heap: list[tuple[int, int]] = []
        for source in sources:
            distances[source] = 0
            heapq.heappush(heap, (0, source))

        container = self.vertex_edge_container()
        while heap:
            dist, vertex = heapq.heappop(heap)
            current = distances[vertex]
            print(f"Dijkstra pops vertex {vertex} distance {current}")
            if dist > current:
                continue
            for edge in container[vertex]:
                weight = self.hewt[edge]
                for neighbor in self._edge(edge):
                    candidate = current + weight
                    print(
                        f"Potential new distance for vertex {neighbor} is "
                        f"{candidate}, and current distance {distances[neighbor]}"
                    )
                    if candidate < distances[neighbor]:
                        print(
                            f"Neighbor {neighbor} has old distance "
                            f"{distances[neighbor]}, updating to new distance "
                            f"of {candidate}"
                        )
                        distances[neighbor] = candidate
                        heapq.heappush(heap, (candidate, neighbor))
        return distances

    def __str__(self) -> str:
        return f"HyperGraph: {len(self.vtxwt)} vertices, {len(self.hewt)} edges"