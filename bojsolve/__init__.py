"""Solutions to classic programming exercises, grouped by topic, with a small command line."""

__version__ = "0.1.0"
__all__ = ["basics", "containers", "graphs", "sorting", "cli"]