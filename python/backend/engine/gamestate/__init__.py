from backend.engine.gamestate.state import GameState, SearchRun

__all__ = ["GameState", "SearchRun"]
