"""Application layer: variant registry, practice controller and CLI."""
