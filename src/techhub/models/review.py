from dataclasses import dataclass


# ------------------------------
# Review Model
# ------------------------------
@dataclass(frozen=True)
class Review:
    """
    A user-submitted review of a framework.

    Schema only: no route or store operates on reviews yet.
    """

    id: int

    # Framework this review belongs to
    framework_id: int

    # Score, typically 1 to 5
    rating: int

    # Name of the reviewer
    author: str

    comment: str | None = None
