from engine.history import TurnHistory, TurnRecord, apply_record, replay, replay_final


def test_apply_records():
    owners = {1: 0, 2: 1}
    dice = {1: 5, 2: 2}
    apply_record(owners, dice, TurnRecord(1, 0, 0))
    assert dice[1] == 6
    apply_record(owners, dice, TurnRecord(1, 2, 0))
    assert (owners, dice) == ({1: 0, 2: 1}, {1: 1, 2: 2})
    dice[1] = 4
    apply_record(owners, dice, TurnRecord(1, 2, 1))
    assert (owners, dice) == ({1: 0, 2: 0}, {1: 1, 2: 3})


def test_history_split():
    h = TurnHistory()
    h.record_attack(3, 4, True, (6, 6), (1,))
    h.record_reinforcement(3)
    h.record_attack(4, 5, False)
    assert len(h) == 3
    assert [r.source for r in h.attacks()] == [3, 4]
    assert h.reinforcements() == [TurnRecord(3, 0, 0)]
    assert h[0].attacker_roll == (6, 6)
    h.clear()
    assert len(h) == 0


def test_replay_steps():
    snapshot = {1: (0, 3), 2: (1, 1)}
    h = TurnHistory()
    h.record_attack(1, 2, True)
    h.record_reinforcement(2)
    frames = [(r, dict(o), dict(d)) for r, o, d in replay(snapshot, h)]
    assert frames[0][1] == {1: 0, 2: 0}
    assert frames[1][2] == {1: 1, 2: 3}
    assert replay_final(snapshot, h) == {1: (0, 1), 2: (0, 3)}


def test_replay_reproduces_full_game(seeded_game):
    gs = seeded_game
    while not gs.game_over and gs.turn_number < 60:
        gs.play_ai_turn()
    assert len(gs.history) > 0
    assert gs.replay_final() == gs.snapshot()


def test_replay_does_not_touch_snapshot(seeded_game):
    gs = seeded_game
    before = dict(gs.initial_snapshot)
    for _ in range(5):
        gs.play_ai_turn()
    gs.replay_final()
    assert gs.initial_snapshot == before
