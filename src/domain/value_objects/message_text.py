"""Message text value object."""

from dataclasses import dataclass
from typing import ClassVar

from src.domain.exceptions import ValidationException


@dataclass(frozen=True)
class MessageText:
    """
    Text body of a message.

    Validated at construction: never blank and at most MAX_LENGTH characters.
    The value is kept verbatim, no trimming is applied.
    """

    value: str

    MAX_LENGTH: ClassVar[int] = 280

    def __post_init__(self):
        # Blank means str.isspace() whitespace, U+00A0 included. Checked before length
        if self.value is None or not self.value.strip():
            raise ValidationException("Message text must not be blank", field="text")
        if len(self.value) > self.MAX_LENGTH:
            raise ValidationException(
                f"Message text must be less than {self.MAX_LENGTH} characters", field="text"
            )

    def __str__(self) -> str:
        return self.value
