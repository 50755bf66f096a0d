from tilepuzzle.backend.engine.gamegenerator.scrambler import Scrambler

__all__ = ["Scrambler"]
