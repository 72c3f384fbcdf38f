"""
Wordle - Terminal Entry Point

Loads the dictionary, starts the game service and plays rounds in the terminal
until the player declines a new game.
"""

import argparse
import os
import random
from typing import Callable, List, Optional, Tuple

from wordle_engine.config import Config, config, get_word_statistics
from wordle_engine.models import GameState, LetterState
from wordle_engine.services import GameService, initialize_game_service, load_word_source
from wordle_engine.services.word_source import EmptyWordSourceError
from wordle_engine.utils.game_logger import game_logger

COLORS = {
    LetterState.CORRECT.value: '\033[42;97m',  # green
    LetterState.PRESENT.value: '\033[43;97m',  # yellow
    LetterState.ABSENT.value: '\033[100;97m',  # gray
}
RESET = '\033[0m'
SYMBOLS = {
    LetterState.CORRECT.value: 'O',
    LetterState.PRESENT.value: '?',
    LetterState.ABSENT.value: '_',
}


def render_row(row: List[Tuple[str, str]], color: bool = True) -> str:
    """
    Render one scored guess.
    With colour each letter sits on its state's background; without it a
    symbol line (O = correct, ? = present, _ = absent) follows the letters.
    """
    if color:
        return ' '.join(f"{COLORS[state]} {letter} {RESET}" for letter, state in row)
    letters = ' '.join(letter for letter, _ in row)
    marks = ' '.join(SYMBOLS[state] for _, state in row)
    return f"{letters}\n{marks}"


def play_round(service: GameService, game_id: str,
               read: Callable[[str], str] = input,
               write: Callable[[str], None] = print,
               color: bool = True) -> GameState:
    """Run the guess loop for one game until it is won or lost."""
    state = service.get_game_state(game_id)
    write(f"Guess the {state.word_length}-letter word!")

    while not state.game_over:
        guess = read(f"Guess #{state.guesses_used + 1}: ").strip()
        if not guess:
            continue

        is_valid, error = service.is_valid_guess(game_id, guess)
        if not is_valid:
            write(error)
            continue

        state = service.make_guess(game_id, guess)
        write(render_row(state.guess_results[-1], color))

        if state.won:
            write(f"You win! The word was: {state.secret}")
        elif state.game_over:
            write(f"Out of guesses! The word was: {state.secret}")
        else:
            write(f"Guesses left: {state.max_guesses - state.guesses_used}")

    return state


def select_config(env: Optional[str] = None):
    """Pick the configuration class named by ``env`` or ``WORDLE_ENV``; unknown names use the default."""
    name = env or os.getenv('WORDLE_ENV', 'default')
    return config.get(name.lower(), config['default'])


def build_parser(config_class=Config) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Play Wordle in the terminal.")
    ap.add_argument("--words", default=config_class.WORDS_FILE, help="dictionary file, one word per line")
    ap.add_argument("--max-guesses", type=int, default=config_class.MAX_GUESSES)
    ap.add_argument("--word-length", type=int, default=config_class.WORD_LENGTH)
    ap.add_argument("--seed", type=int, default=None, help="seed for reproducible secrets")
    ap.add_argument("--no-color", action="store_true", help="print symbols instead of ANSI colours")
    return ap


def main(argv: Optional[List[str]] = None,
         read: Callable[[str], str] = input,
         write: Callable[[str], None] = print) -> int:
    """Main function to load the dictionary and play until the player quits."""
    config_class = select_config()
    game_logger.set_level('DEBUG' if config_class.DEBUG else config_class.LOG_LEVEL)

    args = build_parser(config_class).parse_args(argv)
    rng = random.Random(args.seed) if args.seed is not None else None

    word_source = load_word_source(args.words, args.word_length, rng=rng)
    if word_source.load_error:
        write(f"Dictionary unavailable ({word_source.load_error}); using built-in words.")

    service = initialize_game_service(
        config_class, word_source,
        max_guesses=args.max_guesses, word_length=args.word_length
    )
    stats = get_word_statistics(word_source)
    game_logger.logger.info(
        f"Wordle starting ({config_class.__name__}) - {len(word_source)} words, "
        f"{args.max_guesses} guesses, length {args.word_length}, "
        f"{stats.get('avg_vowel_count', 0)} vowels per word"
    )
    game_logger.logger.debug(f"Word list statistics: {stats}")

    try:
        while True:
            try:
                game_id = service.create_new_game()
            except EmptyWordSourceError as e:
                write(f"Cannot start a game: {e}")
                game_logger.log_error(e, 'new_game')
                return 1

            play_round(service, game_id, read, write, color=not args.no_color)
            service.delete_game(game_id)

            again = read("New game? [y/N] ").strip().lower()
            if again not in ("y", "yes"):
                break
            write("New game!")
    except (KeyboardInterrupt, EOFError):
        write("\nGoodbye!")
        game_logger.logger.info("Wordle shutting down (interrupted)")

    return 0


if __name__ == '__main__':
    raise SystemExit(main())
