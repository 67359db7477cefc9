from arena import run_arena, run_match, slot_assignments, summarize


def test_slot_assignments():
    assert slot_assignments("a", "b", 4) == ["a", "b", "a", "b"]
    assert slot_assignments("a", "b", 3, swapped=True) == ["b", "a", "b"]


def test_run_match():
    result = run_match("default", "example", seed=3, player_count=2,
                       max_turns=40, map_size="small")
    assert result.seed == 3
    assert result.decided_by in ("elimination", "territories", "draw")
    assert result.turn_count <= 40
    assert result.history_length > 0
    if result.winner is not None:
        assert result.winner_strategy == ["default", "example"][result.winner]


def test_same_seed_same_result():
    a = run_match("default", "default", seed=8, player_count=3,
                  max_turns=20, map_size="small")
    b = run_match("default", "default", seed=8, player_count=3,
                  max_turns=20, map_size="small")
    assert a == b


def test_summary_counts_every_game():
    results = run_arena("default", "example", [1, 2], player_count=2,
                        max_turns=15, map_size="small")
    assert len(results) == 4
    s = summarize(results, "default", "example")
    assert s["default"] + s["example"] + s["draws"] == 4
