from ..constants import EQUIP_SLOT_COUNT
from ..errors import UnexpectedSlotCountError, FieldRangeError
from ..game.inventory import PlayerInventory


def _encode_slots(slots, count, what):
    slots = tuple(slots)
    if len(slots) != count:
        raise UnexpectedSlotCountError(
            f"Expected {count} {what}, not {len(slots)}."
            )

    for i, slot in enumerate(slots):
        if isinstance(slot, bool) or slot not in range(256):
            raise FieldRangeError(
                f"{what.capitalize()} {i} value {slot} does not fit in a byte."
                )

    return bytes(slots)


def encode_inventory(inventory):
    # item ids first. only player inventories are followed by
    # the indices of what the player has equipped.
    rawdata = _encode_slots(inventory.items, inventory.capacity, "item slots")
    if isinstance(inventory, PlayerInventory):
        rawdata += _encode_slots(
            inventory.equips, EQUIP_SLOT_COUNT, "equip slots"
            )

    return rawdata


def get_inventory_data_size(inventory_cls):
    size = inventory_cls.capacity
    if issubclass(inventory_cls, PlayerInventory):
        size += EQUIP_SLOT_COUNT
    return size


def decode_inventory(rawdata, inventory_cls):
    capacity = inventory_cls.capacity
    if len(rawdata) != get_inventory_data_size(inventory_cls):
        raise UnexpectedSlotCountError(
            f"Expected {get_inventory_data_size(inventory_cls)} bytes of "
            f"{inventory_cls.__name__} data, not {len(rawdata)}."
            )

    if issubclass(inventory_cls, PlayerInventory):
        return inventory_cls(rawdata[: capacity], rawdata[capacity: ])

    return inventory_cls(rawdata)
