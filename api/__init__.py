"""Public snapshots of round state."""
