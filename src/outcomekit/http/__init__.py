"""HTTP boundary: status mapping and response rendering for outcomes."""

from .response import OutcomeBody, render_response, to_body, to_json
from .status import status_code_for

__all__ = ["OutcomeBody", "render_response", "status_code_for", "to_body", "to_json"]
