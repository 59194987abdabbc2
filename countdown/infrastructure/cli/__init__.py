"""Console rendering built on rich."""
