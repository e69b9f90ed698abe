"""Printf-style formatting that writes to a stream and returns the character count."""

__version__ = "0.1.0"
__all__ = ["output", "printf"]