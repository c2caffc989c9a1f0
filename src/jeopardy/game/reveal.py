import logging

from ..models import RevealState
from ..render.base import BoardRenderer
from .clue_bank import ClueBank

class RevealController:
    """Advances a clue from unrevealed to question to answer on each click."""

    def __init__(self, bank: ClueBank, renderer: BoardRenderer):
        self.logger = logging.getLogger(__name__)
        self.bank = bank
        self.renderer = renderer

    def handle_click(self, clue_id: int) -> RevealState:
        """
        Advance the clicked clue by one stage.

        Returns:
            The clue's state after the click

        Raises:
            ConsistencyError: If the id is not in the clue bank
        """
        clue = self.bank.lookup(clue_id)

        if clue.showing is RevealState.UNREVEALED:
            clue.showing = RevealState.QUESTION_SHOWN
            self.renderer.show_question(clue)
            self.logger.debug(f"Clue {clue_id}: question shown")
        elif clue.showing is RevealState.QUESTION_SHOWN:
            clue.showing = RevealState.ANSWER_SHOWN
            self.renderer.show_answer(clue)
            self.logger.debug(f"Clue {clue_id}: answer shown")
        else:
            self.logger.debug(f"Clue {clue_id}: already answered, click ignored")

        return clue.showing
