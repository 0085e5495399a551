"""Application layer: reporters and report merging."""
