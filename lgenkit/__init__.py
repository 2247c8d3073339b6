"""Grammars, FIRST/FOLLOW sets, LR(0) items, SLR(1) parsers and a token-declaration grammar."""

__version__ = "0.1.0"