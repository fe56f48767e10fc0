"""kvim - profile-aware launcher for KoalaVim."""

__version__ = "0.1.0"
