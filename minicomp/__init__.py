"""Compiler for a tiny symbolic language: scanner, parser, semantic checks and assembly output."""

__version__ = "0.1.0"
__all__ = ["__version__"]