from abc import ABC, abstractmethod
from typing import List

from ..models import Category, Clue

class BoardRenderer(ABC):
    """
    Presentation boundary for the game.

    The core hands the renderer plain data and never inspects what it draws.
    Cells are addressed by clue id, the same id the clue bank resolves.
    """

    @abstractmethod
    def show_loading(self) -> None:
        """Wipe the board and show a loading indicator."""
        pass

    @abstractmethod
    def hide_loading(self) -> None:
        """Remove the loading indicator; the start action now reads 'Restart'."""
        pass

    @abstractmethod
    def render_board(self, categories: List[Category]) -> None:
        """Draw the grid: one column per category, one cell per clue."""
        pass

    @abstractmethod
    def show_question(self, clue: Clue) -> None:
        pass

    @abstractmethod
    def show_answer(self, clue: Clue) -> None:
        pass

    @abstractmethod
    def show_error(self, message: str) -> None:
        """Tell the player the game could not be set up."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Return to the pre-game view."""
        pass
