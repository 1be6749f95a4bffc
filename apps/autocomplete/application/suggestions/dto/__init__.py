"""Suggestion DTOs."""

from autocomplete.application.suggestions.dto.lookup_result import LookupResult

__all__ = ["LookupResult"]
