"""Utility modules for commitlog."""
