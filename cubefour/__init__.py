"""Four-in-a-row on a 4x4x4 cube with a self-improving alpha-beta opponent."""

__version__ = "0.1.0"
__all__ = ["board", "storage", "lines", "improvers", "evaluator", "cli"]