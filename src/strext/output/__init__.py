"""Output formatting for ServiceResult (Rich and JSON)."""
