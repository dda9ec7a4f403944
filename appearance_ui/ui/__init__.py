"""Element builders for tables, lists and grouping containers."""
