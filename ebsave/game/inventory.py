from .base import GameObject
from ..constants import ESCARGO_EXPRESS_SIZE, PLAYER_INVENTORY_SIZE,\
     EQUIP_SLOT_COUNT, EMPTY_ITEM_SLOT


class Inventory(GameObject):
    _fields = ("items", )

    capacity = 0

    def __init__(self, items=()):
        items = list(items)
        if len(items) > self.capacity:
            raise ValueError(
                f"{type(self).__name__} can only hold {self.capacity} "
                f"items, not {len(items)}."
                )
        items.extend([EMPTY_ITEM_SLOT]*(self.capacity - len(items)))
        super().__init__(items=items)

    @property
    def item_count(self):
        return sum(item != EMPTY_ITEM_SLOT for item in self.items)

    def is_empty(self):
        return self.item_count == 0


class EscargoExpressInventory(Inventory):
    capacity = ESCARGO_EXPRESS_SIZE


class PlayerInventory(Inventory):
    _fields = ("items", "equips")

    capacity = PLAYER_INVENTORY_SIZE

    def __init__(self, items=(), equips=None):
        super().__init__(items)
        # indices into the items of what's equipped(0 for nothing)
        self.equips = [0]*EQUIP_SLOT_COUNT if equips is None else list(equips)
