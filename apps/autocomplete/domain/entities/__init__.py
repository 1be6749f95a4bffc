"""Domain Entities."""

from autocomplete.domain.entities.ad_form import FORM_FIELDS, AdForm

__all__ = ["AdForm", "FORM_FIELDS"]
