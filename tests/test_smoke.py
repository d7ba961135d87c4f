def test_import() -> None:
    import relgraph
    from relgraph import __version__
    assert isinstance(__version__, str)

def test_graph_example() -> None:
    from relgraph.graph import connect, vertex
    assert repr(connect(vertex(1), vertex(2))) == "edge 1 2"
