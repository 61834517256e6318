"""HTTP interface for tournament matches."""
