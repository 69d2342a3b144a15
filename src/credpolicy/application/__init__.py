"""Application layer for credpolicy."""
