from backend.engine.gamegenerator.generator import DEFAULT_SCRAMBLE_STEPS, scramble_from

__all__ = ["DEFAULT_SCRAMBLE_STEPS", "scramble_from"]
