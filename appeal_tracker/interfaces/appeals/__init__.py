"""HTTP interface for the appeals bounded context."""
