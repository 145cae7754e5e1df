"""Bit-by-bit text messaging between processes over SIGUSR1 and SIGUSR2,
with small string, line-reading and printf-style formatting helpers."""

__version__ = "0.1.0"