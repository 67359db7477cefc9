"""Headless arena for AI vs AI matches.

Usage:
    python arena.py                              # default vs example, 10 seeds, 4 players
    python arena.py --matches 50                 # more seeds
    python arena.py --ai1 example --ai2 default  # pick matchup
    python arena.py --seeds 42,99,7              # specific seeds
    python arena.py --players 6 --map-size small
    python arena.py --verbose                    # per-match details

Strategies alternate over the player slots (ai1 on even slots, ai2 on odd
ones). Each seed is played twice with the slots swapped so neither side
keeps a lucky map.
"""

import argparse
import logging
import sys
import time
from collections import namedtuple

from ai import strategy_names
from engine import GameConfig, GameState

LOG = logging.getLogger("arena")

MAX_TURNS = 200

MAP_SIZES = {
    "small": (16, 18, 16),
    "medium": (22, 26, 24),
    "large": (28, 32, 32),
}

MatchResult = namedtuple("MatchResult", [
    "seed", "swapped", "winner", "winner_strategy", "turn_count",
    "territory_counts", "history_length",
    "decided_by",  # "elimination", "territories", or "draw"
])


def slot_assignments(ai1, ai2, player_count, swapped=False):
    first, second = (ai2, ai1) if swapped else (ai1, ai2)
    return [first if pid % 2 == 0 else second for pid in range(player_count)]


def run_match(ai1, ai2, seed, player_count=4, max_turns=MAX_TURNS,
              map_size="large", swapped=False):
    """Run a single spectator game and return a MatchResult.

    If nobody is eliminated within max_turns, the player holding the most
    territories wins. True draws only when the top counts are equal.
    """
    width, height, max_territories = MAP_SIZES[map_size]
    config = GameConfig(
        player_count=player_count,
        human_player=None,
        width=width,
        height=height,
        max_territories=max_territories,
        ai_assignments=slot_assignments(ai1, ai2, player_count, swapped),
        seed=seed,
    )
    gs = GameState(config)
    gs.generate_map()
    gs.start_game()

    while not gs.game_over and gs.turn_number < max_turns:
        gs.play_ai_turn()

    territory_counts = {p.id: p.area_count for p in gs.active_players}

    if gs.game_over and gs.winner is not None:
        winner = gs.winner
        decided_by = "elimination"
    else:
        ranked = sorted(territory_counts.items(), key=lambda kv: -kv[1])
        if len(ranked) > 1 and ranked[0][1] == ranked[1][1]:
            winner = None
            decided_by = "draw"
        else:
            winner = ranked[0][0]
            decided_by = "territories"

    winner_strategy = None
    if winner is not None:
        winner_strategy = config.ai_assignments[winner]
    LOG.info("Seed %d%s: winner %s (%s) after %d turns", seed,
             " swapped" if swapped else "", winner, decided_by, gs.turn_number)

    return MatchResult(
        seed=seed,
        swapped=swapped,
        winner=winner,
        winner_strategy=winner_strategy,
        turn_count=gs.turn_number,
        territory_counts=territory_counts,
        history_length=len(gs.history),
        decided_by=decided_by,
    )


def _winner_label(result):
    if result.winner is None:
        return "Draw"
    label = f"player {result.winner + 1} ({result.winner_strategy})"
    if result.decided_by == "territories":
        return f"{label} by territories"
    return label


def run_arena(ai1, ai2, seeds, player_count=4, max_turns=MAX_TURNS,
              map_size="large", verbose=False):
    """Run all matches with side-swapping. Returns list of MatchResult."""
    results = []
    total = len(seeds) * 2

    for i, seed in enumerate(seeds):
        for j, swapped in enumerate((False, True)):
            t0 = time.time()
            result = run_match(ai1, ai2, seed, player_count, max_turns,
                               map_size, swapped)
            results.append(result)
            dt = time.time() - t0

            if verbose:
                w = _winner_label(result)
                print(f"  [{2*i+j+1:3d}/{total}] seed={seed:4d}  "
                      f"{'swapped' if swapped else 'normal '}  -> {w} "
                      f"in {result.turn_count} turns ({dt:.1f}s)")
                sys.stdout.flush()
            elif total > 2:
                print(f"\r  Progress: {len(results)}/{total} games ...", end="")
                sys.stdout.flush()

    if not verbose and total > 2:
        print()  # clear the progress line

    return results


def summarize(results, ai1, ai2):
    """Win counts per strategy plus how games were decided."""
    summary = {
        ai1: sum(1 for r in results if r.winner_strategy == ai1),
        ai2: sum(1 for r in results if r.winner_strategy == ai2),
        "draws": sum(1 for r in results if r.winner is None),
        "eliminations": sum(1 for r in results if r.decided_by == "elimination"),
        "territory_wins": sum(1 for r in results if r.decided_by == "territories"),
        "avg_turns": (sum(r.turn_count for r in results) / len(results)
                      if results else 0),
    }
    return summary


def print_summary(results, ai1, ai2):
    """Print formatted summary table."""
    total = len(results)
    num_seeds = total // 2
    s = summarize(results, ai1, ai2)
    name_w = max(len(ai1), len(ai2), 5)

    print()
    print(f"=== {ai1} vs {ai2} "
          f"({num_seeds} seeds x 2 sides = {total} games) ===")
    print()
    if ai1 == ai2:
        print(f"  {ai1:<{name_w}} wins: {s[ai1]:3d} / {total}  (mirror match)")
    else:
        print(f"  {ai1:<{name_w}} wins: {s[ai1]:3d} / {total}  "
              f"({100 * s[ai1] / total:.1f}%)")
        print(f"  {ai2:<{name_w}} wins: {s[ai2]:3d} / {total}  "
              f"({100 * s[ai2] / total:.1f}%)")
    print(f"  {'Draws':<{name_w}}     : {s['draws']:3d} / {total}")
    print()
    print(f"  Decided by elimination:     {s['eliminations']}")
    print(f"  Decided by territory count: {s['territory_wins']}")
    print()
    print(f"  Avg game length:  {s['avg_turns']:.1f} turns")
    print()


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Dice Wars AI Arena - headless AI vs AI matches")
    parser.add_argument("--ai1", default="default", choices=strategy_names(),
                        help="Strategy on even player slots (default: default)")
    parser.add_argument("--ai2", default="example", choices=strategy_names(),
                        help="Strategy on odd player slots (default: example)")
    parser.add_argument("--players", type=int, default=4,
                        help="Players per game, 2-8 (default: 4)")
    parser.add_argument("--matches", type=int, default=10,
                        help="Number of seeds to play, each played twice "
                             "for side fairness (default: 10)")
    parser.add_argument("--seeds", type=str, default=None,
                        help="Comma-separated list of specific seeds "
                             "(overrides --matches)")
    parser.add_argument("--max-turns", type=int, default=MAX_TURNS,
                        help=f"Max rounds before the territory-count tiebreak "
                             f"(default: {MAX_TURNS})")
    parser.add_argument("--map-size", default="large",
                        choices=MAP_SIZES.keys(),
                        help="Map size preset (default: large = 28x32)")
    parser.add_argument("--verbose", action="store_true",
                        help="Print per-match details")
    parser.add_argument("--log-level", default="WARNING",
                        help="Logging level for engine messages (default: WARNING)")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(),
                        format="%(levelname)s:%(name)s:%(message)s")

    if args.seeds:
        seeds = [int(s.strip()) for s in args.seeds.split(",")]
    else:
        seeds = list(range(args.matches))

    total_games = len(seeds) * 2
    print(f"Running {args.ai1} vs {args.ai2}: "
          f"{len(seeds)} seeds x 2 sides = {total_games} games "
          f"({args.players} players, {args.map_size} map, "
          f"max {args.max_turns} turns)")
    if args.verbose:
        print()
    sys.stdout.flush()

    t0 = time.time()
    results = run_arena(args.ai1, args.ai2, seeds, args.players,
                        args.max_turns, args.map_size, args.verbose)
    elapsed = time.time() - t0

    print_summary(results, args.ai1, args.ai2)
    print(f"  Completed in {elapsed:.1f}s "
          f"({elapsed / len(results):.2f}s per game)")
    print()


if __name__ == "__main__":
    main()
