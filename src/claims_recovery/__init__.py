"""Hospital claims recovery: bill aging, status derivation and recovery summaries."""
