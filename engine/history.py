"""
Turn history and replay.

Every attack that reaches the dice and every reinforcement die is appended
as a TurnRecord. Together with the ownership/dice snapshot taken at game
start, the log is enough to rebuild every intermediate board:

- reinforcement (destination 0): source gains a die
- won attack: destination changes hands with source dice - 1, source keeps 1
- lost attack: source keeps 1

Dice rolls are kept for display only; replay uses the outcome flag.
"""

from collections import namedtuple

REINFORCEMENT = 0

TurnRecord = namedtuple(
    "TurnRecord",
    ["source", "destination", "outcome", "attacker_roll", "defender_roll"],
    defaults=(None, None),
)


class TurnHistory:
    def __init__(self):
        self._records = []

    def record_attack(self, source, destination, success,
                      attacker_roll=None, defender_roll=None):
        record = TurnRecord(source, destination, 1 if success else 0,
                            attacker_roll, defender_roll)
        self._records.append(record)
        return record

    def record_reinforcement(self, territory_id):
        record = TurnRecord(territory_id, REINFORCEMENT, 0)
        self._records.append(record)
        return record

    def attacks(self):
        return [r for r in self._records if r.destination != REINFORCEMENT]

    def reinforcements(self):
        return [r for r in self._records if r.destination == REINFORCEMENT]

    def clear(self):
        self._records = []

    def __len__(self):
        return len(self._records)

    def __iter__(self):
        return iter(self._records)

    def __getitem__(self, i):
        return self._records[i]

    def __repr__(self):
        return (f"TurnHistory({len(self.attacks())} attacks, "
                f"{len(self.reinforcements())} reinforcements)")


def apply_record(owners, dice, record):
    """Apply one record to owner/dice dicts in place."""
    if record.destination == REINFORCEMENT:
        dice[record.source] += 1
    elif record.outcome:
        dice[record.destination] = dice[record.source] - 1
        dice[record.source] = 1
        owners[record.destination] = owners[record.source]
    else:
        dice[record.source] = 1


def replay(snapshot, history):
    """
    Step through a game. `snapshot` maps territory id -> (owner, dice).
    Yields (record, owners, dice) after each record; the dicts are the
    same objects every step, copy them to keep a frame.
    """
    owners = {tid: owner for tid, (owner, _) in snapshot.items()}
    dice = {tid: d for tid, (_, d) in snapshot.items()}
    for record in history:
        apply_record(owners, dice, record)
        yield record, owners, dice


def replay_final(snapshot, history):
    """Board at the end of the history, as {territory id: (owner, dice)}."""
    owners = {tid: owner for tid, (owner, _) in snapshot.items()}
    dice = {tid: d for tid, (_, d) in snapshot.items()}
    for record in history:
        apply_record(owners, dice, record)
    return {tid: (owners[tid], dice[tid]) for tid in owners}
