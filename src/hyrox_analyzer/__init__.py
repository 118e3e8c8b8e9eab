"""HYROX race analysis: benchmarking, pacing, scoring and training plans."""

__version__ = "0.1.0"
