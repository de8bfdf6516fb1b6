from alibigen.graph import neighbors, parse_mermaid

ROOMS = ["Hall", "Kitchen", "Study"]
EDGES = [("Hall", "Kitchen"), ("Kitchen", "Study")]


def test_neighbors_without_self():
    g = neighbors(ROOMS, EDGES, include_self=False)
    assert g.idx == {"Hall": 0, "Kitchen": 1, "Study": 2}
    assert g.nbr == [[1], [0, 2], [1]]


def test_neighbors_with_self():
    g = neighbors(ROOMS, EDGES, include_self=True)
    assert g.nbr == [[0, 1], [0, 1, 2], [1, 2]]


def test_neighbors_ignores_unknown_rooms():
    g = neighbors(ROOMS, EDGES + [("Hall", "Cellar"), ("Attic", "Study")], include_self=False)
    assert g.nbr == [[1], [0, 2], [1]]
    assert g.graph.number_of_nodes() == 3


def test_isolated_room_without_self_has_no_moves():
    g = neighbors(["Hall", "Vault"], [], include_self=False)
    assert g.nbr == [[], []]


def test_duplicate_edges_collapse():
    g = neighbors(ROOMS, EDGES + [("Kitchen", "Hall")], include_self=False)
    assert g.nbr[0] == [1]


def test_parse_mermaid():
    text = """
    graph LR
    Kitchen --- "Dining Room"
    "Dining Room" --- Hall
    %% a comment line
    Hall --- Kitchen
    """
    rooms, edges = parse_mermaid(text)
    assert rooms == ["Kitchen", "Dining Room", "Hall"]
    assert edges == [("Kitchen", "Dining Room"), ("Dining Room", "Hall"), ("Hall", "Kitchen")]


def test_parse_mermaid_skips_malformed_lines():
    text = "graph TD\nA --- \nB --- C --- D\nE -- F\nG---H"
    rooms, edges = parse_mermaid(text)
    assert edges == [("G", "H")]
    assert rooms == ["G", "H"]


def test_parse_mermaid_feeds_neighbors():
    rooms, edges = parse_mermaid('A --- B\nB --- "C D"')
    g = neighbors(rooms, edges, include_self=False)
    assert g.nbr[g.idx["B"]] == [g.idx["A"], g.idx["C D"]]
