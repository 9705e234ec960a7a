"""CLI package for Library Companion"""
from .main import cli

__all__ = ['cli']
