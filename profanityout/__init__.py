"""Detect and censor profanity in text, with configurable sanitizing and English word lists."""

__version__ = "0.1.0"