"""promptline — composable, shell-aware terminal prompt renderer."""

__version__ = "0.1.0"
