"""Course Progress API."""
