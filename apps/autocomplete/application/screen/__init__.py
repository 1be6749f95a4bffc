"""Ad Form Screen."""

from autocomplete.application.screen.ad_form_screen import AdFormScreen, SubmitResult

__all__ = ["AdFormScreen", "SubmitResult"]
