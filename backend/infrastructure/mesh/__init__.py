"""Mesh persistence adapters."""
