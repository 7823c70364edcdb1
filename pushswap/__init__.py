"""Two-stack integer sorting, an instruction checker and a benchmark."""

__version__ = "1.0.0"