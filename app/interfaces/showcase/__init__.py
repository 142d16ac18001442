"""HTTP interface for categories and portfolios."""
