"""SPLICE pattern CLI."""
