"""Ad form autocomplete service."""
