import argparse
import logging
import os
import random
import sys
from typing import List, Optional

from dotenv import load_dotenv

from domain.constants import (
    DIFFICULTY_SETTINGS,
    FRUIT_SPAWN_ATTEMPTS,
    KEY_DIRECTIONS,
    PAUSE_KEY,
    PLAY_AREA,
    QUIT_KEY,
    WINDOW,
    Direction,
    GameDifficulty,
    Key,
    SnakeState,
)
from domain.exceptions import NoFreeCellError, TerminalTooSmallError
from domain.fruit import Fruit
from domain.game_state import GameState
from domain.geometry import Coordinates
from domain.snake import Snake
from players import KeyboardPlayer, Player, RandomPlayer
from services.strings import get_string
from services.terminal import BlessedTerminal
from services.user_interface import UserInterface


logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


class SnakeGame:
    """
    A single play-through of snake. Create a new instance to play again.

    Manages:
      - the snake and the fruit (at most one at a time)
      - score
      - difficulty-derived timing and move guards
      - the turn loop and its overlays

    The difficulty decides how long the game waits for a key before moving
    the snake on its own, and which deadly moves are silently refused:

      Easy    1500ms -> 250ms, boundary collisions and turnbacks prevented
      Medium  1000ms -> 80ms,  turnbacks prevented
      Hard     500ms -> 50ms,  nothing prevented
    """

    def __init__(
        self,
        ui: UserInterface,
        difficulty: GameDifficulty = GameDifficulty.MEDIUM,
        player: Optional[Player] = None,
        rng: Optional[random.Random] = None,
    ):
        self.ui = ui
        self.rng = rng or random.Random()
        self.player = player or KeyboardPlayer(ui)
        self.difficulty = difficulty
        self.play_area = PLAY_AREA
        self.score = 0
        self.tick_count = 0

        settings = DIFFICULTY_SETTINGS[difficulty]
        self.auto_move_delay_max = settings.auto_move_delay_max
        self.auto_move_delay_min = settings.auto_move_delay_min
        self.prevent_boundary_collisions = settings.prevent_boundary_collisions
        self.prevent_turnbacks = settings.prevent_turnbacks
        self.auto_move_delay = self.auto_move_delay_max

        spawn = Coordinates(
            self.rng.randint(self.play_area.x_start, self.play_area.x_end),
            self.rng.randint(self.play_area.y_start, self.play_area.y_end),
        )
        self.snake = Snake(WINDOW.area, spawn)
        self.fruit: Optional[Fruit] = None

        logger.info(f"New game on {difficulty.label}, snake spawned at {spawn}")

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            tick=self.tick_count,
            head=self.snake.head,
            body=self.snake.body(),
            direction=self.snake.current_direction,
            score=self.score,
            play_area=self.play_area,
            fruit=self.fruit.position if self.fruit else None,
            auto_move_delay=self.auto_move_delay,
        )

    def spawn_fruit(self) -> Fruit:
        """
        Place a new fruit on a cell the snake does not occupy.

        Raises:
            NoFreeCellError: if no free cell could be found
        """
        if self.snake.length >= self.play_area.area:
            raise NoFreeCellError()
        position = Fruit.find_spawn_position(self.snake, self.play_area, self.rng)
        if position is None:
            raise NoFreeCellError(FRUIT_SPAWN_ATTEMPTS)
        self.fruit = Fruit.spawn(position, self.rng)
        logger.debug(f"Spawned fruit {self.fruit.symbol} at {position}")
        return self.fruit

    def run(self) -> bool:
        """
        Play the game until the snake dies, the player wins or quits.

        Returns:
            True if the player chose to play again.

        Raises:
            TerminalTooSmallError: if the terminal is smaller than the game window
        """
        self.ui.ensure_console_size()
        self.ui.initialize()
        self.snake.draw(self.ui)
        if self.fruit is not None:
            self.fruit.draw(self.ui)

        while True:
            play_again = self.tick()
            if play_again is not None:
                return play_again

    def tick(self) -> Optional[bool]:
        """
        Execute one turn:
          1) Check the terminal is still large enough
          2) Spawn a fruit if there is none
          3) Wait for a key (or the auto-move timeout)
          4) Move the snake if the move is allowed
          5) Evaluate collisions and fruit eating
          6) Draw the changed cells

        Returns:
            None while the game goes on, otherwise whether the player wants to play again.
        """
        self.ui.ensure_console_size()

        if self.fruit is None:
            try:
                self.spawn_fruit()
            except NoFreeCellError as e:
                logger.info(f"{e} The board is full.")
                return self.win()
            self.fruit.draw(self.ui)

        key = self.player.get_move(self.get_current_state())
        self.tick_count += 1

        # Only a move that happened vacates a tail cell
        moved = False
        if key in KEY_DIRECTIONS:
            moved = self.move_snake_if_possible(KEY_DIRECTIONS[key])
        elif key == Key.NONE:
            moved = self.move_snake_if_possible(self.snake.current_direction)
        elif key == PAUSE_KEY:
            self.pause()
            return None
        elif key == QUIT_KEY:
            logger.info(f"Player quit on tick {self.tick_count} with score {self.score}")
            return False

        state = self.evaluate_move()
        if state == SnakeState.CHOMPING:
            self.eat_fruit()
        elif state == SnakeState.DEAD:
            self.snake.draw(self.ui, state, delete_old_tail=moved)
            logger.info(
                f"Snake died on tick {self.tick_count} at {self.snake.head} "
                f"(score {self.score}, length {self.snake.length})"
            )
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Final board:\n" + self.get_current_state().print_board())
            return self.ui.show_game_over_message(self.score, self.snake.length, self.difficulty)

        self.snake.draw(self.ui, state, delete_old_tail=moved)
        if self.snake.length >= self.snake.capacity:
            return self.win()
        return None

    def evaluate_move(self) -> SnakeState:
        """
        Work out what the last move did to the snake.
        """
        head = self.snake.head
        if self.snake.length > 1 and self.snake.collides_with_point(head, include_head=False):
            return SnakeState.DEAD
        if not self.play_area.contains_point(head, exclude_border=False):
            return SnakeState.DEAD
        if self.fruit is not None and self.fruit.position == head:
            return SnakeState.CHOMPING
        return SnakeState.NORMAL

    def eat_fruit(self) -> None:
        """Score the fruit, grow the snake, speed up and clear the fruit for a respawn."""
        self.score += self.snake.length
        self.ui.update_score(self.score)
        self.snake.length += 1
        self.auto_move_delay = max(
            self.auto_move_delay - self.auto_move_delay_max // 100,
            self.auto_move_delay_min,
        )
        logger.debug(
            f"Ate fruit at {self.snake.head}: score {self.score}, "
            f"length {self.snake.length}, delay {self.auto_move_delay}ms"
        )
        self.fruit = None

    def pause(self) -> None:
        logger.info(f"Paused on tick {self.tick_count}")
        self.ui.show_paused_message(self.score, self.snake.length, self.difficulty)
        self.ui.clear_game_area()
        self.snake.draw(self.ui)
        if self.fruit is not None:
            self.fruit.draw(self.ui)

    def win(self) -> bool:
        logger.info(f"Player won with score {self.score} and length {self.snake.length}")
        return self.ui.show_win_message(self.score, self.snake.length, self.difficulty)

    def move_snake_if_possible(self, direction: Direction) -> bool:
        """
        Move the snake unless a move guard enabled by the difficulty forbids it.

        Returns:
            True if the snake moved.
        """
        if direction == Direction.NONE:
            return False
        if self.prevent_boundary_collisions and self.will_collide_with_boundary(direction):
            return False
        if self.prevent_turnbacks and self.will_make_deadly_turnback(direction):
            return False
        self.snake.move(direction)
        return True

    def will_collide_with_boundary(self, direction: Direction) -> bool:
        predicted = self.snake.simulate_move(direction)
        return predicted is not None and not self.play_area.contains_point(predicted, exclude_border=False)

    def will_chomp_itself(self, direction: Direction) -> bool:
        # A snake shorter than 3 has always vacated the cell it would turn into
        if self.snake.length < 3:
            return False
        predicted = self.snake.simulate_move(direction)
        return predicted is not None and self.snake.collides_with_point(predicted, include_head=False)

    def will_make_deadly_turnback(self, direction: Direction) -> bool:
        return direction.is_opposite(self.snake.current_direction) and self.will_chomp_itself(direction)


def launch_game(
    ui: UserInterface,
    difficulty: GameDifficulty,
    rng: Optional[random.Random] = None,
    autopilot: bool = False,
) -> int:
    """
    Run games for as long as the player chooses to play again.

    Returns:
        The number of games played.
    """
    rng = rng or random.Random()
    games_played = 0
    play_again = True
    while play_again:
        player = RandomPlayer(ui, rng) if autopilot else KeyboardPlayer(ui)
        game = SnakeGame(ui, difficulty, player=player, rng=rng)
        play_again = game.run()
        games_played += 1
    ui.reset_cursor()
    logger.info(f"Finished after {games_played} game(s)")
    return games_played


def configure_logging(log_file: Optional[str], level: str) -> None:
    """
    Send log records to `log_file`. The terminal is the game screen, so
    without a log file records are discarded.
    """
    if log_file:
        logging.basicConfig(level=level.upper(), format=LOG_FORMAT, filename=log_file)
    else:
        logging.basicConfig(level=level.upper(), handlers=[logging.NullHandler()])


def difficulty_type(value: str) -> GameDifficulty:
    try:
        return GameDifficulty.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    default_difficulty = os.getenv("SNAKE_DIFFICULTY", GameDifficulty.MEDIUM.value)
    parser = argparse.ArgumentParser(description=get_string("app.description"))
    parser.add_argument("-d", "--difficulty", type=difficulty_type, choices=list(GameDifficulty),
                        default=default_difficulty, metavar="{easy,medium,hard}",
                        help=get_string("help.difficulty", default=default_difficulty))
    parser.add_argument("--autopilot", action="store_true",
                        help=get_string("help.autopilot"))
    parser.add_argument("--seed", type=int, default=None,
                        help=get_string("help.seed"))
    parser.add_argument("--log-file", type=str, default=os.getenv("SNAKE_LOG_FILE"),
                        help="Write log records to this file (default: $SNAKE_LOG_FILE).")
    parser.add_argument("--log-level", type=str, default=os.getenv("SNAKE_LOG_LEVEL", "INFO"),
                        help="Logging level (default: $SNAKE_LOG_LEVEL or INFO).")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = parse_args(argv)
    configure_logging(args.log_file, args.log_level)

    terminal = BlessedTerminal()
    if not terminal.is_interactive:
        print(get_string("error.not_a_terminal"), file=sys.stderr)
        return 1

    try:
        with terminal.session():
            launch_game(UserInterface(terminal), args.difficulty, random.Random(args.seed), args.autopilot)
    except TerminalTooSmallError as e:
        logger.error(str(e))
        print(
            get_string(
                "error.terminal_too_small",
                width=e.width,
                height=e.height,
                min_width=e.min_width,
                min_height=e.min_height,
            ),
            file=sys.stderr,
        )
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
