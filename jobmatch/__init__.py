"""Job-to-preference matching for a job board: filter, score, rank, recommend."""

__version__ = "1.0.0"
