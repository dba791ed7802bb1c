"""Shared database building blocks."""
