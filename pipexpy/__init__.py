"""Quote-aware command-string splitting and C-style character, number, string and memory helpers."""

__version__ = "0.1.0"