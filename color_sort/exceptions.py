class LevelGenerationError(RuntimeError):
    """Raised when level generation breaks its own bookkeeping."""
