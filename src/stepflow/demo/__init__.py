"""Example flows built on the engine."""
