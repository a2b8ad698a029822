"""Hypergraphs in the hMetis format, with partition fixing and distance searches."""

__version__ = "0.1.0"
__all__ = ["cli", "hypergraph"]