"""Pure domain model: segments, modules, shell dialects and templates."""
