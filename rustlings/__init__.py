"""rust-analyzer project files for an exercises folder, status line helpers and worked solutions."""

__version__ = "5.6.1"