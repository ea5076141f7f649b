"""Runtime plumbing: configuration, logging, command execution and the check pipeline."""
