"""Command that shows the sample hypergraph."""

from __future__ import annotations

import argparse
from typing import Sequence

from hypergraph_bu.hypergraph import HyperGraph


def main(argv: Sequence[str] | None = None) -> int:
    """Print a summary of the hMetis manual's sample hypergraph."""
    parser = argparse.ArgumentParser(
        prog="hypergraph_bu",
        description="Show the sample hMetis hypergraph.",
    )
    parser.parse_args(argv)
    HyperGraph.hm_sample().show()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())