"""sigscan - heuristic function/class signature extraction."""

try:
    from importlib.metadata import version

    __version__ = version("sigscan")
except Exception:
    __version__ = "0.0.0.dev0+local"  # Fallback for development
