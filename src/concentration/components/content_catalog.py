from dataclasses import dataclass, field
from typing import List

from concentration.errors import InsufficientContentError

DEFAULT_CONTENTS: tuple[str, ...] = (
    "\U0001F34E",  # apple
    "\U0001F436",  # dog
    "\U0001F680",  # rocket
    "\U0001F31F",  # star
    "\U0001F355",  # pizza
    "\U0001F6B2",  # bicycle
    "\u2764\ufe0f",  # heart
    "\U0001F319",  # moon
    "\U0001F451",  # crown
    "\U0001F4A1",  # light bulb
    "\U0001F600",  # grinning face
    "\U0001F60E",  # sunglasses
    "\U0001F381",  # gift
    "\U0001F388",  # balloon
    "\u26bd\ufe0f",  # soccer ball
)


@dataclass(slots=True)
class ContentCatalog:
    """Ordered symbols available to boards, stored on the registry entity."""
    entries: List[str] = field(default_factory=lambda: list(DEFAULT_CONTENTS))

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for entry in self.entries:
            if entry in seen:
                raise ValueError(f"duplicate catalog entry {entry!r}")
            seen.add(entry)

    def __len__(self) -> int:
        return len(self.entries)

    def take(self, n: int) -> List[str]:
        if n < 0 or n > len(self.entries):
            raise InsufficientContentError(n, len(self.entries))
        return list(self.entries[:n])
