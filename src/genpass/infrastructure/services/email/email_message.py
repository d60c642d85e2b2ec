"""Email message model.

A fully built message handed to a MessageSender.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EmailMessage(BaseModel):
    """Immutable email message.

    At least one recipient is required. Bodies are optional; senders treat
    a missing body as empty.
    """

    model_config = ConfigDict(frozen=True)

    from_address: str | None = None
    to: tuple[str, ...] = Field(..., description="Recipient addresses")
    subject: str | None = None
    text_body: str | None = None
    html_body: str | None = None

    @field_validator("to", mode="before")
    @classmethod
    def normalize_recipients(cls, v: str | list[str] | tuple[str, ...]) -> tuple[str, ...]:
        """Accept a single address or a sequence, dropping blank entries."""
        if isinstance(v, str):
            v = [v]
        recipients = tuple(addr.strip() for addr in v if addr and addr.strip())
        if not recipients:
            raise ValueError("At least one recipient (to) is required")
        return recipients

    def __str__(self) -> str:
        return f"EmailMessage(from={self.from_address!r}, to={list(self.to)}, subject={self.subject!r})"
