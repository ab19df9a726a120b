"""Classic algorithms: sorting, graph searches, shortest paths, spanning trees, greedy methods and subarray sums."""

__version__ = "0.1.0"