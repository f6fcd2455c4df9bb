from dataclasses import dataclass, field
from enum import Enum
from pathlib import PurePosixPath
from typing import List, Tuple


class CleanupOutcome(str, Enum):
    EXECUTED = "executed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class DuplicateFile:
    """A JavaScript stub superseded by a typed file of the same component."""

    path: str
    reason: str  # "stub" or "old version"
    replacement: str

    @property
    def annotation(self) -> str:
        return f"{self.reason}, using {self.replacement} instead"

    @property
    def replacement_path(self) -> str:
        return str(PurePosixPath(self.path).with_name(self.replacement))


@dataclass(frozen=True)
class DuplicateGroup:
    name: str
    files: Tuple[DuplicateFile, ...]


@dataclass
class CleanupResult:
    outcome: CleanupOutcome
    removed: List[str] = field(default_factory=list)
    missing: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)

    @property
    def executed(self) -> bool:
        return self.outcome == CleanupOutcome.EXECUTED


@dataclass
class StubStatus:
    file: DuplicateFile
    present: bool
    replacement_present: bool


DUPLICATE_GROUPS: Tuple[DuplicateGroup, ...] = (
    DuplicateGroup(
        "Cart API",
        (
            DuplicateFile("src/api/cart/controllers/cart.js", "stub", "cart.ts"),
            DuplicateFile("src/api/cart/routes/cart.js", "stub", "cart.ts"),
        ),
    ),
    DuplicateGroup(
        "Order API",
        (
            DuplicateFile(
                "src/api/order/controllers/order.js", "old version", "order.ts"
            ),
            DuplicateFile("src/api/order/routes/order.js", "stub", "order.ts"),
            DuplicateFile("src/api/order/services/order.js", "stub", "order.ts"),
        ),
    ),
    DuplicateGroup(
        "Stripe API",
        (
            DuplicateFile(
                "src/api/stripe/controllers/stripe.js", "old version", "stripe.ts"
            ),
            DuplicateFile("src/api/stripe/routes/stripe.js", "stub", "stripe.ts"),
        ),
    ),
)


def duplicate_paths(groups=DUPLICATE_GROUPS) -> List[str]:
    """Flatten the catalog into its fixed removal order."""
    return [f.path for group in groups for f in group.files]
