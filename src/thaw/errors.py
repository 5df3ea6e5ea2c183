class LayoutGenerationError(RuntimeError):
    """Raised when the generator exhausts its attempt cap without an actionable board."""
