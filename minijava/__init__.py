"""Scanner and recursive-descent parser that check MiniJava programs."""

__version__ = "0.1.0"
__all__ = ["tokens", "scanner", "parser", "cli"]