"""Application layer: host-facing ports."""
