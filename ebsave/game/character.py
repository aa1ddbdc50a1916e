from .base import GameObject
from .stat import equipment_stat, rolling_stat
from .inventory import PlayerInventory
from ..constants import STAT_NAMES, PARTY_MEMBER_UNKNOWN_SIZE


class Character(GameObject):
    _fields = (
        "name", "hp", "pp",
        "offense", "defense", "speed", "guts", "luck",
        "level", "experience",
        "permanent_status_effect", "possession_status",
        )

    name = ""
    level = 0
    experience = 0
    permanent_status_effect = "normal"
    possession_status = "normal"

    def __init__(self, **kwargs):
        self.hp = rolling_stat()
        self.pp = rolling_stat()
        for stat_name in ("offense", "defense", "speed", "guts", "luck"):
            setattr(self, stat_name, equipment_stat())

        super().__init__(**kwargs)

    @property
    def conscious(self):
        return self.permanent_status_effect != "unconsciousness"


class PartyMember(Character):
    _fields = Character._fields + ("vitality", "iq", "inventory", "unknown")

    def __init__(self, **kwargs):
        self.vitality  = equipment_stat()
        self.iq        = equipment_stat()
        self.inventory = PlayerInventory()
        self.unknown   = bytes(PARTY_MEMBER_UNKNOWN_SIZE)
        super().__init__(**kwargs)

    @property
    def stat_block(self):
        # stats in the order they're laid out in the save block
        return [getattr(self, name) for name in STAT_NAMES]

    @stat_block.setter
    def stat_block(self, stats):
        stats = tuple(stats)
        if len(stats) != len(STAT_NAMES):
            raise ValueError(
                f"Expected {len(STAT_NAMES)} stats, not {len(stats)}."
                )
        for name, stat in zip(STAT_NAMES, stats):
            setattr(self, name, stat)

    def is_empty(self):
        return self == PartyMember()
