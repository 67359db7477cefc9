import pytest

from engine.adjacency import AdjacencyGraph
from engine.connectivity import ConnectivityAnalyzer

from conftest import make_board


def test_groups_split_by_enemy(line_board):
    conn = line_board.connectivity
    groups = conn.connected_groups(line_board.territories, 0)
    assert groups == ((1, 2, 3, 4), (6, 7))
    assert conn.largest_group_size(line_board.territories, 0) == 4
    assert conn.group_count(line_board.territories, 0) == 2
    assert line_board.players[0].largest_group == 4
    assert line_board.players[1].largest_group == 1


def test_is_connected(line_board):
    conn = line_board.connectivity
    ts = line_board.territories
    assert conn.is_connected(ts, 1, 4)
    assert not conn.is_connected(ts, 1, 6)
    assert not conn.is_connected(ts, 4, 5)


def test_capture_joins_groups(line_board):
    gs = line_board
    gs.set_owner(5, 0)
    assert gs.connectivity.connected_groups(gs.territories, 0) == ((1, 2, 3, 4, 5, 6, 7),)
    assert gs.players[0].largest_group == 7
    assert not gs.players[1].alive


def test_groups_are_sound(seeded_game):
    gs = seeded_game
    conn = gs.connectivity
    for p in gs.active_players:
        groups = conn.connected_groups(gs.territories, p.id)
        owned = sorted(t.id for t in gs.get_player_territories(p.id))
        assert sorted(tid for g in groups for tid in g) == owned
        for group in groups:
            for tid in group:
                assert gs.territories[tid].owner == p.id
        # No same-owner border between two different groups
        for i, a in enumerate(groups):
            for b in groups[i + 1:]:
                for x in a:
                    for y in b:
                        assert not gs.adjacency.are_adjacent(x, y)
        assert p.largest_group == (len(groups[0]) if groups else 0)


def test_choke_points():
    # 1 - 2 - 3 with 2 also touching 4; all player 0 except 5
    gs = make_board({1: (0, 2), 2: (0, 2), 3: (0, 2), 4: (0, 2), 5: (1, 2)},
                    [(1, 2), (2, 3), (2, 4), (3, 4), (4, 5)])
    assert gs.connectivity.choke_points(gs.territories, 0) == (2,)


def test_attack_path_goes_through_enemies():
    gs = make_board({1: (0, 3), 2: (1, 3), 3: (1, 3), 4: (2, 3), 5: (0, 3)},
                    [(1, 2), (2, 3), (3, 4), (1, 5), (5, 4)],
                    player_count=3)
    conn = gs.connectivity
    assert conn.attack_path(gs.territories, 1, 3) == [1, 2, 3]
    assert conn.attack_path(gs.territories, 1, 5) == []
    # 5 is friendly, so 4 is only reachable through 2 and 3
    assert conn.attack_path(gs.territories, 1, 4) == [1, 2, 3, 4]


def test_adjacency_graph():
    adjacency = AdjacencyGraph()
    adjacency.connect(1, 2)
    adjacency.connect(2, 1)
    adjacency.add_territory(3)
    adjacency.connect(3, 3)
    assert adjacency.are_adjacent(2, 1)
    assert adjacency.edges() == [(1, 2)]
    assert adjacency.degree(3) == 0
    assert 3 in adjacency


def test_cache_is_invalidated_per_player():
    gs = make_board({1: (0, 2), 2: (1, 2)}, [(1, 2)])
    conn = ConnectivityAnalyzer(gs.adjacency)
    assert conn.connected_groups(gs.territories, 0) == ((1,),)
    gs.territories[2].owner = 0
    # Stale until invalidated
    assert conn.connected_groups(gs.territories, 0) == ((1,),)
    conn.invalidate(0)
    assert conn.connected_groups(gs.territories, 0) == ((1, 2),)


def test_cached_results_are_read_only(line_board):
    gs = line_board
    conn = gs.connectivity
    groups = conn.connected_groups(gs.territories, 0)
    with pytest.raises(AttributeError):
        groups.sort()
    with pytest.raises(TypeError):
        groups[0][0] = 99
    assert conn.connected_groups(gs.territories, 0) == ((1, 2, 3, 4), (6, 7))
    assert conn.choke_points(gs.territories, 0) == (2, 3)
