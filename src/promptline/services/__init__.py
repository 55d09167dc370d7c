"""Composition services: resolution, ordered evaluation and composition."""
