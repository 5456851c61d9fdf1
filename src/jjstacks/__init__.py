"""Stack decomposition and parallel-group detection for Jujutsu commit graphs."""
