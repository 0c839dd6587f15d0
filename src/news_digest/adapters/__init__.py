"""Adapters implementing the core interfaces."""
