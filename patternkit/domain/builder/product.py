"""Product assembled by a builder."""
from typing import List

from pydantic import BaseModel, ConfigDict, Field, ValidationError as PydanticValidationError

from patternkit.domain.base.exceptions import ValidationError


class BuiltProduct(BaseModel):
    """Ordered collection of part labels, in the order they were added."""
    model_config = ConfigDict(validate_assignment=True)

    parts: List[str] = Field(default_factory=list)

    def add(self, part: str) -> None:
        """
        Append a part.

        Raises:
            ValidationError: If the part is not a string label
        """
        try:
            self.parts = [*self.parts, part]
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid part label: {part!r}", e.errors()) from e

    def list_parts(self) -> str:
        """Render the parts as a single line."""
        return "Product parts: " + ", ".join(self.parts)

    def is_empty(self) -> bool:
        return not self.parts
