"""Bank account lifecycle domain."""
