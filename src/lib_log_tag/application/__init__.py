"""Application layer: ports and use cases of the tagging core."""
