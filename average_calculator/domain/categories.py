from enum import Enum


class Category(str, Enum):
    """Number kinds served by the upstream source, keyed by their URL id."""

    PRIME = "p"
    FIBONACCI = "f"
    EVEN = "e"
    RANDOM = "r"

    @property
    def label(self) -> str:
        return self.name.lower()

    @classmethod
    def parse(cls, value: str) -> "Category | None":
        try:
            return cls(value)
        except ValueError:
            return None

    @classmethod
    def describe(cls) -> str:
        """Human-readable list used in error messages and the index page."""
        parts = [f"{c.value} ({c.label})" for c in cls]
        return ", ".join(parts[:-1]) + f", or {parts[-1]}"
