"""Account aggregate, its events and the commands that drive it."""
