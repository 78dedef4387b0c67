"""Tokens, parameters, status and card XML parsing, STX/ETX framing and event dispatch for ChipDNA payment server clients."""

__version__ = "3.9.1081"