from backend.engine.puzzlestate.configuration import Configuration

__all__ = ["Configuration"]
