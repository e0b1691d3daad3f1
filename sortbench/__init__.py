"""Benchmarks of merge sort and a merge/insertion hybrid on generated data, with CSV output."""

__version__ = "0.1.0"