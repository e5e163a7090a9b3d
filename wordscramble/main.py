"""
Main entry point for playing Word Scramble in a terminal.

Usage:
    python -m wordscramble.main
    python -m wordscramble.main config.yaml --verbose
    python -m wordscramble.main --words fan can face --output results/run1.json
"""

import argparse
import sys
from pathlib import Path

import yaml

from .environment import WordScramble, GameConfig, WordListError, score
from .verifiers import Decision


NEW_GAME_COMMAND = ":new"
QUIT_COMMANDS = (":quit", ":q")


def load_config(config_path: str) -> GameConfig:
    """Load game configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return GameConfig(**data)


def format_used_words(words) -> str:
    """One line per word, prefixed with its letter count."""
    return "\n".join(f"  ({len(word)}) {word}" for word in words)


def print_decision(game: WordScramble, decision: Decision, verbose: bool = False) -> None:
    if decision.is_empty:
        return

    if decision.is_accepted:
        print(f"✓ {decision.word} (+{score([decision.word])})  Score: {game.current_score()}")
        if verbose:
            print(format_used_words(game.current_used_words()))
    else:
        print(f"✗ {decision.rejection.title}: {decision.rejection.message}")


def print_root_word(game: WordScramble) -> None:
    print()
    print(f"=== {game.current_root_word()} ===")


def prompt(interactive: bool) -> None:
    if interactive:
        print("> ", end="", flush=True)


def play(game: WordScramble, lines, verbose: bool = False, interactive: bool = False) -> None:
    """Feed submissions to the game until input runs out or the player quits."""
    print_root_word(game)
    prompt(interactive)

    for line in lines:
        command = line.strip().lower()

        if command in QUIT_COMMANDS:
            break

        if command == NEW_GAME_COMMAND:
            game.on_new_game()
            print_root_word(game)
            prompt(interactive)
            continue

        print_decision(game, game.on_submit(line), verbose=verbose)
        prompt(interactive)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Play Word Scramble: make words from the letters of a root word",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands while playing:
  :new     start a new game with a fresh root word
  :quit    stop playing (or :q)

Example config.yaml:
  seed: 42
  start_words: words/start.txt
  oracle:
    type: wordfreq
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file (optional)"
    )
    parser.add_argument(
        "--words", "-w",
        nargs="+",
        help="Submit these words instead of reading from stdin"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save a JSON report of the session"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for root word selection (overrides config)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print the word list after every accepted word"
    )

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config) if args.config else GameConfig()
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    if args.seed is not None:
        config.seed = args.seed

    try:
        game = WordScramble.create(config=config)
    except WordListError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        if args.config:
            print(f"Config: {args.config}")
        print(f"Oracle: {config.oracle.type}")
        print(f"Root words available: {len(game.pool)}")

    interactive = args.words is None
    lines = args.words if not interactive else sys.stdin
    if interactive:
        print("Type a word and press Enter (:new for a new word, :quit or :q to stop).")

    try:
        play(game, lines, verbose=args.verbose, interactive=interactive)
    except KeyboardInterrupt:
        print("\nGame interrupted by user")

    if args.output:
        game.save_result(args.output)
        if args.verbose:
            print(f"Results saved to: {args.output}")

    # Print summary
    result = game.get_result()
    print()
    print("=== Game Summary ===")
    print(f"Root word: {result.root_word}")
    print(f"Words found: {len(result.used_words)}")
    if result.used_words:
        print(format_used_words(result.used_words))
    print(f"Score: {result.score}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
