import asyncio
import argparse
import json
import logging
import os
import random
import sys
from typing import Any, Callable, Dict, List, Optional, Tuple

from .api.jservice import JServiceClient
from .config import load_settings, validate_settings
from .constants import DEFAULT_PATHS
from .exceptions import ConsistencyError, GameNotReadyError, JeopardyError
from .game.session import GameSession
from .models import RevealState
from .render.console import ConsoleRenderer

HELP_TEXT = """Commands:
  start, s        start a new game
  restart, r      throw away this board and deal a new one
  <number>        reveal the clue with that id (question first, then answer)
  board, b        redraw the board
  help, h         show this help
  quit, q         leave the game"""

COMMAND_ALIASES = {
    's': 'start', 'start': 'start',
    'r': 'restart', 'restart': 'restart',
    'b': 'board', 'board': 'board',
    'h': 'help', 'help': 'help', '?': 'help',
    'q': 'quit', 'quit': 'quit', 'exit': 'quit'
}

def setup_logging(config: Dict[str, Any]) -> None:
    """Set up logging for both file and console output."""
    log_file = config['logging']['file']
    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    root_logger = logging.getLogger()

    # Clear any existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    log_level = getattr(logging, config['logging']['level'].upper(), logging.INFO)
    root_logger.setLevel(log_level)

    # File handler with rotation
    try:
        from logging.handlers import RotatingFileHandler
        max_size = config['logging'].get('max_size', 1048576)
        backup_count = config['logging'].get('backup_count', 3)

        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=max_size,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(log_level)
    except OSError as e:
        # Same path would fail again; log to the console only
        file_handler = None
        print(f"Warning: Could not open log file {log_file}: {e}", file=sys.stderr)

    # The board owns stdout, so the console only gets warnings and up
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(max(log_level, logging.WARNING))

    file_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s:%(lineno)d] - %(message)s'
    )
    console_formatter = logging.Formatter(
        '%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler.setFormatter(console_formatter)
    if file_handler is not None:
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    root_logger.info(f"Logging initialized - Level: {config['logging']['level']}")
    root_logger.debug(f"Log file: {log_file}")

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Jeopardy board in your terminal')
    parser.add_argument('--config', type=str,
                        help=f"Path to configuration file (default: {DEFAULT_PATHS['config_file']} if present)")
    parser.add_argument('--base-url', type=str, help='Base URL of the jService-compatible trivia API')
    parser.add_argument('--categories', type=int, help='Number of categories on the board (default: 6)')
    parser.add_argument('--seed', type=int, help='Seed for category and clue selection')
    parser.add_argument('--timeout', type=float, help='Per-request timeout in seconds (default: 10)')
    parser.add_argument('--log-level', type=str, choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level (default from config)')
    return parser

def apply_overrides(config: Dict[str, Any], args: argparse.Namespace) -> Dict[str, Any]:
    """Update config with command line arguments."""
    if args.base_url:
        config['api']['base_url'] = args.base_url
    if args.categories is not None:
        config['game']['num_categories'] = args.categories
    if args.timeout is not None:
        config['api']['timeout_seconds'] = args.timeout
    if args.log_level:
        config['logging']['level'] = args.log_level
    return config

def parse_command(line: str) -> Tuple[str, Optional[int]]:
    """
    Turn one line of player input into a command.

    Returns:
        ('reveal', clue_id) for a number, (command, None) for a known word,
        ('unknown', None) otherwise. Blank input is ('noop', None).
    """
    text = line.strip().lower()
    if not text:
        return 'noop', None
    if text.isdigit():
        return 'reveal', int(text)
    return COMMAND_ALIASES.get(text, 'unknown'), None

async def play(session: GameSession, renderer: ConsoleRenderer,
               read_line: Optional[Callable[[str], str]] = None) -> int:
    """
    Run the interactive loop until the player quits or input ends.

    Returns:
        Number of games successfully started
    """
    logger = logging.getLogger(__name__)
    read_line = read_line or input
    loop = asyncio.get_running_loop()
    games_loaded = 0

    renderer.clear()
    while True:
        try:
            line = await loop.run_in_executor(None, read_line, f"[{renderer.start_label}] > ")
        except EOFError:
            break

        command, clue_id = parse_command(line)
        if command == 'quit':
            break
        if command == 'noop':
            continue
        if command == 'help':
            renderer.message(HELP_TEXT)
        elif command in ('start', 'restart'):
            try:
                await session.start()
                games_loaded += 1
            except JeopardyError as e:
                # Renderer already showed the failure; the player may retry
                logger.debug(f"Setup failed, waiting for restart: {e}")
        elif command == 'board':
            if session.is_ready:
                renderer.redraw()
            else:
                renderer.clear()
        elif command == 'reveal':
            remaining_before = session.remaining
            try:
                state = session.reveal(clue_id)
            except GameNotReadyError:
                renderer.clear()
                continue
            except ConsistencyError:
                renderer.message(f"No clue {clue_id} on this board.")
                continue
            if state is RevealState.ANSWER_SHOWN and remaining_before and not session.remaining:
                renderer.message(f"Board cleared! Type '{renderer.start_label.lower()}' for a new one.")
        else:
            renderer.message(f"Unknown command: {line.strip()!r}. Type 'help' for commands.")

    logger.info(f"Player left after {games_loaded} games")
    return games_loaded

async def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point: load config, set up logging and play."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Load configuration
    config_path = args.config
    if config_path is None and os.path.exists(DEFAULT_PATHS['config_file']):
        config_path = DEFAULT_PATHS['config_file']

    try:
        config = load_settings(config_path)
    except FileNotFoundError:
        print(f"Configuration file {config_path} not found!")
        return 1
    except json.JSONDecodeError as e:
        print(f"Error parsing configuration file: {e}")
        return 1
    except ValueError as e:
        print(f"Invalid configuration: {e}")
        return 1

    config = apply_overrides(config, args)
    errors = validate_settings(config)
    if errors:
        print(f"Invalid command line options: {'; '.join(errors)}")
        return 1

    setup_logging(config)
    logger = logging.getLogger(__name__)

    rng = random.Random(args.seed) if args.seed is not None else None
    renderer = ConsoleRenderer()

    try:
        async with JServiceClient(config) as client:
            session = GameSession(client, renderer, config, rng)
            renderer.message(HELP_TEXT)
            await play(session, renderer)
    except KeyboardInterrupt:
        logger.info("Game interrupted by user")
        print("\nBye!")
    except Exception as e:
        logger.error(f"Fatal error: {e}")
        logger.error("Full error details:", exc_info=True)
        print(f"\nFatal error occurred: {e}")
        print("Check the log file for detailed error information.")
        return 1

    return 0

def run() -> None:
    """Console script entry point."""
    sys.exit(asyncio.run(main()))

if __name__ == '__main__':
    run()
