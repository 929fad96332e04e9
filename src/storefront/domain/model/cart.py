"""Cart aggregate — the shopper's live, mutable basket.

A Cart belongs to one session.  It is loaded through a CartRepository,
handed explicitly to whichever handler needs it and saved back; nothing
reaches it through global state.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from storefront.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class LineItem:
    """One product entry in a cart.

    Frozen so that an order can hold the exact lines it was placed with:
    quantity changes in the cart produce a new LineItem instead of
    mutating the one an order may already reference.
    """

    id: str
    name: str
    unit_price: Money
    quantity: Quantity = Quantity(1)
    image: str = ""
    original_unit_price: Money | None = None
    weight: str | None = None

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value

    @property
    def original_line_total(self) -> Money:
        price = self.original_unit_price or self.unit_price
        return price * self.quantity.value

    def with_quantity(self, quantity: int) -> LineItem:
        return replace(self, quantity=Quantity(quantity))


@dataclass
class Cart:
    """Ordered collection of line items, unique by product id.

    Invariants:
    - no two lines share an ``id``
    - every stored line has ``quantity >= 1``
    """

    lines: list[LineItem] = field(default_factory=list)

    # --- Mutations ------------------------------------------------------------

    def add(self, item: LineItem, quantity: int = 1) -> None:
        """Add *quantity* units of *item*, merging with an existing line.

        Never raises: a requested quantity below 1 is treated as 1.
        """
        requested = max(1, quantity)
        index = self._index_of(item.id)
        if index is None:
            self.lines.append(item.with_quantity(requested))
        else:
            current = self.lines[index]
            self.lines[index] = current.with_quantity(current.quantity.value + requested)

    def update_quantity(self, item_id: str, new_quantity: int) -> None:
        """Set a line's quantity; anything below 1 removes the line."""
        index = self._index_of(item_id)
        if index is None:
            return
        if new_quantity < 1:
            del self.lines[index]
            return
        self.lines[index] = self.lines[index].with_quantity(new_quantity)

    def remove(self, item_id: str) -> None:
        """Remove a line.  Removing an absent id is a no-op."""
        self.lines = [line for line in self.lines if line.id != item_id]

    def clear(self) -> None:
        self.lines = []

    # --- Queries --------------------------------------------------------------

    def get(self, item_id: str) -> LineItem | None:
        index = self._index_of(item_id)
        return None if index is None else self.lines[index]

    @property
    def items(self) -> tuple[LineItem, ...]:
        return tuple(self.lines)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def item_count(self) -> int:
        """Total units across all lines (what the header badge shows)."""
        return sum(line.quantity.value for line in self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    # --- Internal helpers -----------------------------------------------------

    def _index_of(self, item_id: str) -> int | None:
        for i, line in enumerate(self.lines):
            if line.id == item_id:
                return i
        return None
