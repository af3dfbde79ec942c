"""Property management back office API."""
