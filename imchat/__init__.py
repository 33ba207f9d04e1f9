"""Tokens, request checks, spreadsheet import, verification-code delivery and health checks for a chat service."""

__version__ = "0.1.0"