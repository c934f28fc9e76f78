"""Dependency graph model and traversal engine."""
