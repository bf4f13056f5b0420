from __future__ import annotations

from typing import Dict, Mapping


class ValidationError(ValueError):
    """Raised when submitted form fields break the reply request constraints.

    ``errors`` maps each offending field (by its wire name) to a short message.
    """

    def __init__(self, errors: Mapping[str, str]):
        self.errors: Dict[str, str] = dict(errors)
        summary = "; ".join(f"{field} {message}" for field, message in self.errors.items())
        super().__init__(summary or "Invalid reply request.")


class GenerationError(RuntimeError):
    """Opaque failure of the external text-generation call."""
