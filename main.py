"""
Dice Wars - pygame-ce viewer for spectator and hot-seat games.

Controls:
  Left Click  - Select one of your territories, then click a neighbour to attack
  Right Click - Cancel selection
  E           - End turn (reinforcements are placed automatically)
  R           - Generate new random map
  ESC         - Quit

AI players move one attack at a time on a timer so their turns can be watched.
"""

import argparse
import logging
import random

import pygame

from engine import GameConfig, GameState
from renderer import HexRenderer
from renderer.hex_renderer import SEA_COLOR

LOG = logging.getLogger("main")

AI_STEP_MS = 250


class Game:
    def __init__(self, config):
        pygame.init()

        self.config = config
        self.renderer = HexRenderer(hex_size=12)
        self.renderer.init_fonts()

        self.selected = None        # territory id picked as attack source
        self.target = None          # territory id under the cursor
        self.message = ""
        self.message_timer = 0
        self.ai_timer = 0

        self.new_map(config.seed)

        self.clock = pygame.time.Clock()
        self.running = True

    def new_map(self, seed=None):
        """Generate a new map and start a fresh game."""
        if seed is None:
            seed = random.randint(0, 999999)
        self.config.seed = seed
        self.game_state = GameState(self.config)
        self.game_state.generate_map()
        self.game_state.start_game()

        w, h = self.renderer.get_screen_size(self.game_state.grid)
        w = max(w, 600)
        h = max(h, 400)
        self.screen = pygame.display.set_mode((w, h))
        pygame.display.set_caption(f"Dice Wars (seed={seed})")
        self.screen_w, self.screen_h = w, h

        self.selected = None
        self.show_message(f"New map (seed={seed})")

    def show_message(self, msg, duration=120):
        self.message = msg
        self.message_timer = duration

    def territory_at(self, px, py):
        """Territory id under a pixel, or None over the sea."""
        x, y = self.renderer.pixel_to_cell(px, py)
        cell = self.game_state.grid.get(x, y)
        if cell is None or cell.is_sea:
            return None
        return cell.territory

    def human_to_move(self):
        gs = self.game_state
        return not gs.game_over and gs.is_human(gs.current_player.id)

    def handle_click(self, px, py):
        """Pick an attack source, then a target."""
        if not self.human_to_move():
            return
        gs = self.game_state
        player_id = gs.current_player.id
        tid = self.territory_at(px, py)
        if tid is None:
            self.selected = None
            return

        t = gs.territories[tid]
        if self.selected is None or t.owner == player_id:
            if t.owner != player_id:
                self.show_message("Not your territory")
            elif not t.can_attack:
                self.show_message("Need more than one die to attack")
                self.selected = None
            else:
                self.selected = tid
            return

        result = gs.attack(self.selected, tid, player_id=player_id)
        if result.reason:
            self.show_message(f"Can't attack: {result.reason}")
        elif result.success:
            self.show_message(f"Won {result.attacker_roll.total} vs "
                              f"{result.defender_roll.total}")
        else:
            self.show_message(f"Lost {result.attacker_roll.total} vs "
                              f"{result.defender_roll.total}")
        self.selected = None
        self.announce_winner()

    def end_human_turn(self):
        if not self.human_to_move():
            return
        self.game_state.end_turn()
        self.selected = None
        self.show_message(f"Player {self.game_state.current_player.id + 1}'s turn")

    def step_ai(self, dt):
        """One AI attack per AI_STEP_MS; a pass ends the AI's turn."""
        gs = self.game_state
        if gs.game_over or gs.is_human(gs.current_player.id):
            return
        self.ai_timer += dt
        if self.ai_timer < AI_STEP_MS:
            return
        self.ai_timer = 0

        pid = gs.current_player.id
        if gs.run_ai_strategy(pid):
            r = gs.last_attack
            LOG.debug("Player %d: %d -> %d %s", pid, r.from_id, r.to_id,
                      "won" if r.success else "lost")
        else:
            gs.end_turn()
        self.announce_winner()

    def announce_winner(self):
        gs = self.game_state
        if gs.game_over and gs.winner is not None:
            self.show_message(f"Game Over! Player {gs.winner + 1} wins!", 600)

    def run(self):
        """Main game loop."""
        while self.running:
            dt = self.clock.tick(60)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False

                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        self.running = False
                    elif event.key == pygame.K_e:
                        self.end_human_turn()
                    elif event.key == pygame.K_r:
                        self.new_map()

                elif event.type == pygame.MOUSEBUTTONDOWN:
                    if event.button == 1:  # Left click
                        self.handle_click(*event.pos)
                    elif event.button == 3:  # Right click = cancel
                        self.selected = None

            self.step_ai(dt)

            self.target = None
            if self.selected is not None:
                self.target = self.territory_at(*pygame.mouse.get_pos())

            self.screen.fill(SEA_COLOR)
            self.renderer.draw_map(self.screen, self.game_state,
                                   selected=self.selected, target=self.target)
            message = self.message if self.message_timer > 0 else ""
            self.renderer.draw_ui(self.screen, self.game_state,
                                  self.screen_w, self.screen_h, message)
            if self.message_timer > 0:
                self.message_timer -= 1

            pygame.display.flip()

        pygame.quit()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Dice Wars viewer")
    parser.add_argument("--players", type=int, default=7,
                        help="Number of players, 2-8 (default: 7)")
    parser.add_argument("--human", default="1",
                        help="Human player number 1-8, or 'none' to spectate "
                             "(default: 1)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Map seed (default: random)")
    parser.add_argument("--log-level", default="INFO",
                        help="Logging level (default: INFO)")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(),
                        format="%(levelname)s:%(name)s:%(message)s")

    human = None if args.human.lower() == "none" else int(args.human) - 1
    config = GameConfig(player_count=args.players, human_player=human,
                        seed=args.seed)
    Game(config).run()


if __name__ == "__main__":
    main()
