"""HTTP API for Idle Galaxy."""
