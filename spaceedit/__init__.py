"""An early-stage modal terminal editor with tabs and a ':' command prompt."""

__version__ = "0.1.0"