from dataclasses import dataclass

from .enums import Category, Language


# ------------------------------
# Framework Model
# ------------------------------
@dataclass(frozen=True)
class Framework:
    """
    A technology framework registered in the hub.

    Instances are immutable: the store hands them out as snapshots and an update
    swaps in a new instance that keeps the same `id`.
    """

    # Store-assigned identifier, never reused once issued
    id: int

    # Display name (e.g. "Playwright"); trimmed, 2-100 chars, not all digits
    name: str

    # Latest stable version (e.g. "1.45.0")
    current_version: str

    # --- Optional descriptive fields ---
    category: Category | None = None
    primary_language: Language | None = None
    description: str | None = None
    official_site: str | None = None

    def __repr__(self) -> str:
        return f"<Framework(id={self.id!r}, name={self.name!r}, current_version={self.current_version!r})>"


@dataclass(frozen=True)
class FrameworkInput:
    """
    Validated create/update payload accepted by the framework store.

    The HTTP boundary builds it from the request schema; the store trims the text
    fields once more before keeping them.
    """

    name: str
    current_version: str
    category: Category | None = None
    primary_language: Language | None = None
    description: str | None = None
    official_site: str | None = None

    def trimmed(self) -> "FrameworkInput":
        return FrameworkInput(
            name=self.name.strip(),
            current_version=self.current_version.strip(),
            category=self.category,
            primary_language=self.primary_language,
            description=(self.description or "").strip() or None,
            official_site=(self.official_site or "").strip() or None,
        )
