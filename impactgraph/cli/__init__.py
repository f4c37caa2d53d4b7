"""Command implementations for the impactgraph CLI."""
