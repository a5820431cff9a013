"""
Typed containers for report input and the parsed category outline.
"""

from dataclasses import dataclass, field
from typing import List

MAX_ITEMS_PER_GROUP = 5
MAX_EXAMPLES_PER_ITEM = 2

CATEGORY_LABELS = {
    "fears": "Typische Ängste",
    "goals": "Typische Ziele",
    "objections": "Typische Vorurteile",
}


@dataclass(slots=True)
class Example:
    """A short supporting bullet under an item."""

    text: str


@dataclass(slots=True)
class Item:
    """One numbered point inside a category group.

    Attributes:
        title: Item headline, never empty.
        examples: Up to two supporting examples in input order.
    """

    title: str
    examples: List[Example] = field(default_factory=list)

    def add_example(self, text: str) -> bool:
        """Append an example unless the cap is reached or it repeats the title.

        Returns:
            True when the example was stored.

        Example:
            >>> item = Item("Kosten")
            >>> item.add_example("kosten"), item.add_example("Budget")
            (False, True)
        """

        clean = text.strip()
        if not clean or len(self.examples) >= MAX_EXAMPLES_PER_ITEM:
            return False
        if clean.casefold() == self.title.casefold():
            return False
        self.examples.append(Example(clean))
        return True

    def example_texts(self) -> List[str]:
        return [example.text for example in self.examples]


@dataclass(slots=True)
class CategoryGroup:
    """A labelled cluster of items such as typical fears or goals.

    Attributes:
        key: Canonical category key (``fears``, ``goals``, ``objections``).
        items: Items in encounter order, at most five.
    """

    key: str
    items: List[Item] = field(default_factory=list)

    @property
    def label(self) -> str:
        """Return the canonical display label, e.g. 'Typische Ziele'."""

        return CATEGORY_LABELS[self.key]


@dataclass(slots=True)
class Section:
    """A headed block of raw body text from the input payload."""

    heading: str
    text: str


@dataclass(slots=True)
class ReportInput:
    """Title plus ordered sections that make up the generated content."""

    title: str
    sections: List[Section] = field(default_factory=list)
