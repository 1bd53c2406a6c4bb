# src/mermaid_notation/models/results.py
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

class DiagramResult(BaseModel):
    """What every serializer hands back: the notation plus the validator's verdict."""
    definition: str
    type: str
    is_valid: bool
    error: Optional[str] = None
    warnings: List[str] = Field(default_factory=list)

class ValidationResult(BaseModel):
    is_valid: bool = True
    errors: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)

class RenderResult(BaseModel):
    """
    Outcome of a render attempt.

    success=True carries the SVG artifact only; success=False carries the
    original exception and the embeddable fallback markup.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    success: bool
    artifact: Optional[str] = None
    error: Optional[BaseException] = None
    fallback: Optional[str] = None
    container_id: Optional[str] = None
    retried: bool = False

    @model_validator(mode="after")
    def _check_outcome(self) -> "RenderResult":
        if self.success:
            if self.artifact is None or self.error is not None or self.fallback is not None:
                raise ValueError("successful render must carry an artifact and nothing else")
        else:
            if self.artifact is not None or self.error is None or self.fallback is None:
                raise ValueError("failed render must carry an error and a fallback")
        return self

    @property
    def error_message(self) -> Optional[str]:
        if self.error is None:
            return None
        return str(getattr(self.error, "message", None) or self.error) or type(self.error).__name__

    def to_payload(self) -> dict:
        """JSON-friendly view used by the tool surface."""
        return {
            "success": self.success,
            "svg": self.artifact,
            "error": self.error_message,
            "fallback": self.fallback,
            "container_id": self.container_id,
            "retried": self.retried,
        }
