"""Round resolution and match state."""
