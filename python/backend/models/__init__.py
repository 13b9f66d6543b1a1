from backend.models.board import Cell, Direction, SquareBoard, create_square_board
from backend.models.game_board import GameBoard, create_game_board

__all__ = [
    "Cell",
    "Direction",
    "GameBoard",
    "SquareBoard",
    "create_game_board",
    "create_square_board",
]
