from .base import GameObject


class Stat(GameObject):
    '''
    A single character stat.

    Stats that equipment can change carry a base_value, which is
    the stat before any equipment bonus is applied. HP and PP carry
    a rolling_value instead, which is what the rolling meter shows
    while it catches up to the real value. No stat has both.
    '''
    _fields = ("value", "base_value", "rolling_value")

    value = 0
    base_value = None
    rolling_value = None

    def __init__(self, value=0, base_value=None, rolling_value=None):
        if base_value is not None and rolling_value is not None:
            raise ValueError(
                "A stat can have either a base value or a rolling value, not both."
                )
        super().__init__(
            value=value, base_value=base_value, rolling_value=rolling_value
            )

    @property
    def is_equipment_changeable(self):
        return self.base_value is not None

    @property
    def is_rolling(self):
        return self.rolling_value is not None

    @property
    def difference(self):
        # amount added by equipment. can be negative if something
        # equipped is lowering the stat
        if self.base_value is None:
            return 0
        return self.value - self.base_value

    def __int__(self):
        return self.value


def equipment_stat(value=0, base_value=None):
    return Stat(value, base_value=value if base_value is None else base_value)


def rolling_stat(value=0, rolling_value=None):
    return Stat(value, rolling_value=value if rolling_value is None else rolling_value)
