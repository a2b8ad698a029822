import pytest

from hypergraph_bu.cli import main
from hypergraph_bu.hypergraph import HyperGraph


def test_main_prints_sample_summary(capsys):
    assert main([]) == 0
    sample = HyperGraph.hm_sample()
    out = capsys.readouterr().out
    assert out == (
        f"Hypergraph has {len(sample.eptr) - 1} edges, {len(sample.vtxwt)} vertices\n"
    )


def test_main_mentions_vertex_count(capsys):
    main([])
    assert "7 vertices" in capsys.readouterr().out


def test_main_rejects_unknown_argument():
    with pytest.raises(SystemExit) as info:
        main(["--bogus"])
    assert info.value.code == 2