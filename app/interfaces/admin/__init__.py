"""HTTP interface for admin sessions and profile."""
