from backend.engine.gameplay.game import Game, GameOfFifteen, new_game_of_fifteen

__all__ = ["Game", "GameOfFifteen", "new_game_of_fifteen"]
