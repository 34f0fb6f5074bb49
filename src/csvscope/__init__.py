"""csvscope: streaming structure, type and statistics inspection for CSV files."""

__version__ = "0.1.0"
