"""Weather forecast web API and its in-process test host."""

__version__ = "1.0.0"
