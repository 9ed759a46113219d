"""Application layer: intake and read services."""
