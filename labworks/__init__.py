"""Vowel counting, base-4 arithmetic and validated plane figures."""

__version__ = "0.1.0"