"""Send text between processes bit by bit over SIGUSR1 and SIGUSR2."""

__version__ = "1.0.0"
__all__ = ["chars", "strfuncs", "formatting", "protocol", "server", "client"]