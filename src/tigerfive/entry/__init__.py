"""Round entry form state and submission path."""
