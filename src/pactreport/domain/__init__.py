"""Domain layer: report tree, verifier inputs, reporter port, exceptions."""
