"""Renderers: the shell prompt and the timing/explanation diagnostics."""
