# hypergraph_bu

A small hypergraph toolkit. It reads hypergraphs in the hMetis text format,
prints them back in that format, fixes vertices to a side of a bipartition,
adds bias weight to a side, and computes hop distances (breadth-first search)
and weighted distances (Dijkstra) from a set of source vertices.

## Installation

```
pip install .
```

## Command line

```
hypergraph-bu
```

This builds the 7-vertex, 4-hyperedge sample hypergraph from the hMetis manual
and prints a one-line summary of it. It takes no options besides `--help`. The
same command is available as `python -m hypergraph_bu.cli`.

## Library use

```python
from hypergraph_bu.hypergraph import HyperGraph

g = HyperGraph.hm_sample()
print(g)                              # HyperGraph: 7 vertices, 4 edges

edges_of = g.vertex_edge_container()  # hyperedges that touch each vertex
hops = g.bfs([0], 10)                 # hop distance from vertex 0
dist = g.dijkstra([0], [1, 1, 1, 1])  # distance using hyperedge weights

g.fix([0, 1], 0)                      # pin vertices 0 and 1 to side 0
g.bias(0.3)                           # add weight to side 1
```

`HyperGraph` is a dataclass. `show()` prints a one-line summary and returns it
as a string.

### Storage layout

Hyperedges are kept in compressed form. Hyperedge `e` holds the vertices
`eptr[eind[e]:eind[e + 1]]`, numbered from 0. Vertex weights are in `vtxwt`,
hyperedge weights are in `hewt`, and `part` gives each vertex's side: `-1`
means the vertex is free.

### Fixing and bias

`fix(vertices, part)` sets `part` for each of the given vertices.

`bias(b)` does nothing when `b` is exactly `0.5`. When `b` is below `0.5` it
adds a weight of 1 to the last vertex fixed to side 1, or appends a new vertex
of weight 1 on side 1 if there is none; otherwise it does the same for side 0.

### hMetis files

`HyperGraph.load(path, fix_path=None)` reads an `.hgr` file. The header line
holds the number of hyperedges, the number of vertices and an optional weight
mode:

- `1`: hyperedge weights (the last number on each hyperedge line)
- `10`: vertex weights (one line per vertex after the hyperedges)
- `11`: both

Vertex numbers in the file start at 1. A fix file has one line per vertex:
`-1` for a free vertex, otherwise the side the vertex is fixed to. A file that
ends too early, or a line that is missing a required value, raises
`ValueError`. Loading prints progress messages to standard output.

`save(hgr=None, mode=0, fix=None, part=None, stats=None)` prints the
hypergraph in hMetis form, using the given weight mode, to standard output,
along with the raw `eptr` and `eind` lists and a line per hyperedge giving its
index range.

### Distances

`bfs(sources, limit)` returns the hop distance of every vertex from the
nearest source. Vertices farther than `limit` are not expanded, and a vertex
that is never reached gets twice the vertex count.

`dijkstra(sources, edgelength)` returns weighted distances, where moving
through a hyperedge costs its weight from `hewt`. A vertex that is never
reached gets the sum of the values in `edgelength`; `edgelength` is used only
for that. The search prints a trace of each step to standard output.

## What it does not do

- `save` writes nothing to disk: the file name arguments `hgr`, `fix`, `part`
  and `stats` are accepted and ignored, and output goes to standard output only.
- There is no partitioner: `part` is only read from fix files and set through
  `fix` and `bias`.
- The command line only shows the built-in sample; it does not load files.

## Tests

```
pip install .[test]
pytest
```