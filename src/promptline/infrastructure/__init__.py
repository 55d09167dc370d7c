"""Execution environment: per-render context and external commands."""

from promptline.infrastructure.context import Context, PromptProperties

__all__ = ["Context", "PromptProperties"]
