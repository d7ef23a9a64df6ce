"""Core tracking logic."""
