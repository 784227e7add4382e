"""Logging setup for underbar."""
