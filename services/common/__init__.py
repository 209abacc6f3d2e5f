"""Shared service utilities."""
