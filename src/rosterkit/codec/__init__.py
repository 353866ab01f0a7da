"""Roster file codec."""

from .csv_codec import decode, encode, load

__all__ = ["decode", "encode", "load"]
