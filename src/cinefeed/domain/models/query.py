from dataclasses import dataclass


@dataclass(frozen=True)
class Query:
    """Search term driving the feed; an empty term selects discover mode."""

    text: str = ""

    def __post_init__(self) -> None:
        # Frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "text", (self.text or "").strip())

    @property
    def is_discover(self) -> bool:
        return not self.text

    @classmethod
    def from_text(cls, text: "str | None") -> "Query":
        return cls(text or "")

    def __str__(self) -> str:
        return self.text or "<discover>"
