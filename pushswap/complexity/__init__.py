"""Benchmark a two-stack sorter executable over many shuffled inputs."""

__version__ = "1.0.0"