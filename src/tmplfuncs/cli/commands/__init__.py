"""Top-level tmplfuncs commands (auto-discovered by the dispatcher)."""
