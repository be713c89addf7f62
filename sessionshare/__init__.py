"""sessionshare — share recorded assistant sessions with secrets scrubbed."""

__version__ = "0.1.0"
