"""Explore a mansion laid out as a binary tree of rooms."""
