"""Styled, serialisable info fields, colours and formatting helpers for summarising a Git repository."""

__version__ = "2.23.1"