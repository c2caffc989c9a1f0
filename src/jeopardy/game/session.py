"""
Game session: one board from setup to restart.

A session owns the category list and the clue bank of the current game.
``start()`` builds a new board from scratch (it is also the restart action)
and ``reveal()`` routes a cell click to the reveal controller. If setup fails
nothing of the half-built board is kept: the renderer is told about the
failure and sent back to the pre-game view, and the session can be started
again.
"""

import asyncio
import logging
import random
from enum import Enum
from typing import Any, Dict, List, Optional

from ..api.base import BaseTriviaClient
from ..config import default_settings
from ..exceptions import ConsistencyError, GameNotReadyError, JeopardyError, NetworkError
from ..models import Category, RevealState
from ..render.base import BoardRenderer
from ..utils.validation import BoardValidator
from .clue_bank import ClueBank, build_clue_bank
from .fetcher import CategoryFetcher
from .loader import load_category
from .reveal import RevealController
from .selector import ClueSelector


class SessionStatus(Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class GameSession:
    """
    Orchestrates fetch, select, id assignment and rendering for one player.

    Categories are loaded one after another in the order their ids were
    picked, so column order always matches selection order.
    """

    def __init__(self, client: BaseTriviaClient, renderer: BoardRenderer,
                 settings: Optional[Dict[str, Any]] = None,
                 rng: Optional[random.Random] = None):
        """
        Initialize the session.

        Args:
            client: Trivia API client used for every fetch
            renderer: Presentation layer receiving board data and reveals
            settings: Settings dictionary; the ``game`` section is used here
            rng: Random source shared by category and clue selection
        """
        self.logger = logging.getLogger(__name__)
        self.client = client
        self.renderer = renderer
        self.settings = settings if settings is not None else default_settings()
        self.rng = rng or random.Random()

        game_config = self.settings['game']
        self.num_categories = game_config['num_categories']
        self.clues_per_category = game_config['clues_per_category']
        self.value_step = game_config['value_step']
        self.setup_timeout = game_config['setup_timeout_seconds']

        self.fetcher = CategoryFetcher(client, game_config['max_category_attempts'], self.rng)
        self.selector = ClueSelector(self.clues_per_category, game_config['max_clue_attempts'], self.rng)
        self.validator = BoardValidator(self.num_categories, self.clues_per_category)

        self.status = SessionStatus.IDLE
        self.games_started = 0
        self.categories: List[Category] = []
        self.clue_bank: Optional[ClueBank] = None
        self._reveal_controller: Optional[RevealController] = None

    @property
    def is_ready(self) -> bool:
        return self.status is SessionStatus.READY

    @property
    def remaining(self) -> int:
        """Clues on the board whose answer has not been shown yet."""
        if self.clue_bank is None:
            return 0
        return sum(1 for clue in self.clue_bank.values() if clue.showing is not RevealState.ANSWER_SHOWN)

    async def start(self) -> List[Category]:
        """
        Set up a new game, discarding any current one.

        Returns:
            The categories now on the board

        Raises:
            JeopardyError: If the board could not be assembled. The session
                is left in the FAILED state with no board.
        """
        self._teardown()
        self.status = SessionStatus.LOADING
        self.games_started += 1
        self.renderer.show_loading()
        self.logger.info(f"Setting up game #{self.games_started}")

        try:
            categories, bank = await asyncio.wait_for(self._assemble(), timeout=self.setup_timeout)
        except asyncio.TimeoutError as e:
            error = NetworkError(f"Game setup timed out after {self.setup_timeout}s")
            self._fail(error)
            raise error from e
        except JeopardyError as e:
            self._fail(e)
            raise
        except Exception as e:
            error = JeopardyError(f"Unexpected error during game setup: {e}")
            self._fail(error)
            raise error from e

        self.categories = categories
        self.clue_bank = bank
        self._reveal_controller = RevealController(bank, self.renderer)
        self.status = SessionStatus.READY

        self.renderer.hide_loading()
        self.renderer.render_board(categories)
        self.logger.info(f"Game ready: {', '.join(category.title for category in categories)}")
        return categories

    async def restart(self) -> List[Category]:
        return await self.start()

    def reveal(self, clue_id: int) -> RevealState:
        """
        Handle a click on the cell of ``clue_id``.

        Raises:
            GameNotReadyError: If no game is loaded
            ConsistencyError: If the id does not belong to the current board
        """
        if self._reveal_controller is None or not self.is_ready:
            raise GameNotReadyError("No game loaded; start a game first")
        return self._reveal_controller.handle_click(clue_id)

    async def _assemble(self):
        ids = await self.fetcher.fetch_ids(self.num_categories)

        categories = []
        for category_id in ids:
            categories.append(await load_category(self.client, category_id))

        self.selector.select_all(categories)
        bank = build_clue_bank(categories, self.clues_per_category, self.value_step)

        is_valid, errors, warnings = self.validator.validate_board(categories, bank)
        for warning in warnings:
            self.logger.warning(warning)
        if not is_valid:
            raise ConsistencyError(f"Assembled board is inconsistent: {'; '.join(errors)}")

        return categories, bank

    def _fail(self, error: JeopardyError) -> None:
        self.logger.error(f"Failed to load game: {error}")
        self.logger.debug("Game setup error details:", exc_info=True)
        self._teardown()
        self.status = SessionStatus.FAILED
        self.renderer.show_error(str(error))
        self.renderer.clear()

    def _teardown(self) -> None:
        self.categories = []
        self.clue_bank = None
        self._reveal_controller = None
        self.status = SessionStatus.IDLE
