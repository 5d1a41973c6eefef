"""Utility modules for tokensig."""
