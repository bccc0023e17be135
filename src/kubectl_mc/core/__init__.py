"""Core fan-out engine for kubectl-mc."""
