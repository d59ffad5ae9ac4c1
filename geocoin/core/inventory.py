"""Player inventory: the coins currently carried by the player."""

from __future__ import annotations

from dataclasses import dataclass, field

from geocoin.core.errors import EmptyInventoryError
from geocoin.core.models import Coin


@dataclass(slots=True)
class PlayerInventory:
    """Mutable stack of held coins; the most recently acquired coin is last."""

    _coins: list[Coin] = field(default_factory=list, init=False)

    def take(self, coin: Coin) -> None:
        self._coins.append(coin)

    def give_last(self) -> Coin:
        if not self._coins:
            raise EmptyInventoryError()
        return self._coins.pop()

    def peek_last(self) -> Coin | None:
        return self._coins[-1] if self._coins else None

    def count(self) -> int:
        return len(self._coins)

    def coins(self) -> tuple[Coin, ...]:
        return tuple(self._coins)

    def __len__(self) -> int:
        return len(self._coins)
