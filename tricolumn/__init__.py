"""Building blocks for a three-column terminal file manager: file jobs, sorting, formatting and cell-grid widgets."""

__version__ = "0.1.0"