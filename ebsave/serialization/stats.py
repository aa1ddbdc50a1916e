from ..constants import STAT_COUNT, STAT_NAMES
from ..errors import UnexpectedStatCountError, UnexpectedStatKindError,\
     FieldRangeError
from ..game.stat import Stat

# A character's stat block is laid out as a structure of arrays:
# the current value of all six stats, then the base value of all
# six, so a stat's two values are never next to each other.


def _check_stat_count(count):
    if count != STAT_COUNT:
        raise UnexpectedStatCountError(
            f"Expected {STAT_COUNT} stats in stat block, not {count}."
            )


def _check_stat_byte(i, kind, value):
    if isinstance(value, bool) or value not in range(256):
        raise FieldRangeError(
            f"{STAT_NAMES[i]} {kind} {value!r} does not fit in a byte."
            )
    return value


def check_equipment_stat(stat, what="Stat"):
    # the block only has room for a value and a base value. a stat
    # without a base, or with a rolling value, can't be stored as is.
    if not stat.is_equipment_changeable or stat.is_rolling:
        raise UnexpectedStatKindError(
            f"{what} must have a base value and no rolling value, "
            f"but got {stat!r}."
            )
    return stat


def check_rolling_stat(stat, what="Stat"):
    if not stat.is_rolling or stat.is_equipment_changeable:
        raise UnexpectedStatKindError(
            f"{what} must have a rolling value and no base value, "
            f"but got {stat!r}."
            )
    return stat


def encode_stat_block(stats):
    stats = tuple(stats)
    _check_stat_count(len(stats))

    values = bytearray()
    base_values = bytearray()
    for i, stat in enumerate(stats):
        check_equipment_stat(stat, STAT_NAMES[i].capitalize())
        values.append(_check_stat_byte(i, "value", stat.value))
        base_values.append(_check_stat_byte(i, "base value", stat.base_value))

    return bytes(values + base_values)


def decode_stat_block(rawdata):
    if len(rawdata) % 2:
        raise UnexpectedStatCountError(
            f"Stat block must be an even number of bytes, not {len(rawdata)}."
            )

    count = len(rawdata) // 2
    _check_stat_count(count)
    return [
        Stat(value, base_value=base_value)
        for value, base_value in zip(rawdata[: count], rawdata[count: ])
        ]
