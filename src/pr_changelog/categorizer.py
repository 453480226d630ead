from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Tuple, FrozenSet


# Categories in the order they are rendered in a changelog section
class Category(Enum):
    BREAKING = "💥 Breaking Changes"
    FEATURES = "✨ Features"
    BUG_FIXES = "🐛 Bug Fixes"
    PERFORMANCE = "⚡ Performance"
    REFACTORING = "♻️ Refactoring"
    DOCUMENTATION = "📚 Documentation"
    TESTS = "✅ Tests"
    DEPENDENCIES = "📦 Dependencies"
    MAINTENANCE = "🔧 Maintenance"
    OTHER = "🔄 Other Changes"
    CHANGES = "🔄 Changes"   # single bucket when categorizing is off

    @property
    def label(self) -> str:
        return self.value


# Label keywords → category, checked top to bottom (first match wins)
LABEL_RULES: List[Tuple[Category, FrozenSet[str]]] = [
    (Category.BREAKING, frozenset({"breaking", "breaking-change", "major"})),
    (Category.FEATURES, frozenset({"feature", "enhancement", "feat"})),
    (Category.BUG_FIXES, frozenset({"bug", "bugfix", "fix"})),
    (Category.DOCUMENTATION, frozenset({"documentation", "docs"})),
    (Category.PERFORMANCE, frozenset({"performance", "perf"})),
    (Category.REFACTORING, frozenset({"refactor", "refactoring"})),
    (Category.TESTS, frozenset({"test", "tests"})),
    (Category.MAINTENANCE, frozenset({"chore", "maintenance"})),
    (Category.DEPENDENCIES, frozenset({"dependencies", "deps"})),
]


@dataclass(frozen=True)
class ChangeRecord:
    """One merged pull request, as it will appear in the changelog."""
    title: str
    number: int
    author: str
    url: str
    labels: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.title:
            raise ValueError(f"PR #{self.number} has no title")
        if isinstance(self.number, bool) or not isinstance(self.number, int) or self.number <= 0:
            raise ValueError(f"Invalid PR number: {self.number!r}")
        if not self.author:
            raise ValueError(f"PR #{self.number} has no author")
        if not self.url:
            raise ValueError(f"PR #{self.number} has no URL")
        object.__setattr__(self, "labels", tuple(self.labels))


def categorize(labels: Iterable[str]) -> Category:
    """Pick the category for a PR from its labels (e.g., 'bug' → Bug Fixes)."""
    low = {l.lower() for l in labels}
    for category, keywords in LABEL_RULES:
        if low & keywords:
            return category
    return Category.OTHER
