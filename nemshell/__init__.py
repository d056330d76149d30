"""Building blocks of a small shell: environment, builtins, cd, redirections, here-documents and helpers."""

__version__ = "0.1.0"