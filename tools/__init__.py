"""Developer tools: benchmarks for the UCI codec."""
