"""Core services: the rename orchestrator and its run bookkeeping."""
