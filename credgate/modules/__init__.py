"""Credgate modules."""
