from .base import GameObject
from .character import PartyMember
from .inventory import EscargoExpressInventory
from ..constants import HEADER_SIZE, UNKNOWN0_SIZE, UNKNOWN1_SIZE,\
     PARTY_SIZE, EVENT_FLAG_COUNT


class Location(GameObject):
    _fields = ("x", "y")

    x = 0
    y = 0

    def __init__(self, x=0, y=0):
        super().__init__(x=x, y=y)


class SaveRecord(GameObject):
    _fields = (
        "header",
        "player_name", "pet_name", "favorite_food", "favorite_thing",
        "money", "bank_balance",
        "unknown0",
        "escargo_express", "location", "exit_mouse_location",
        "text_speed", "sound_setting", "timer", "window_flavor",
        "party",
        "unknown1",
        "event_flags",
        )

    player_name     = ""
    pet_name        = ""
    favorite_food   = ""
    favorite_thing  = ""
    money           = 0
    # money in the ATM. the game may crash if this goes over $9,999,999
    bank_balance    = 0
    # TODO: verify this is the timer for Ness' dad calling
    timer           = 0
    text_speed      = "fast"
    sound_setting   = "stereo"
    window_flavor   = "plain"

    def __init__(self, **kwargs):
        # regions of the save block nobody has figured out yet. these
        # get carried around untouched so writing a save back out
        # doesn't clobber whatever the game keeps in them.
        self.header     = bytes(HEADER_SIZE)
        self.unknown0   = bytes(UNKNOWN0_SIZE)
        self.unknown1   = bytes(UNKNOWN1_SIZE)

        self.escargo_express     = EscargoExpressInventory()
        self.location            = Location()
        self.exit_mouse_location = Location()
        # NOTE: the party count and party order aren't located in the
        #       save block yet, so all party slots are always present.
        self.party       = [PartyMember() for i in range(PARTY_SIZE)]
        self.event_flags = [False]*EVENT_FLAG_COUNT
        super().__init__(**kwargs)

    @property
    def active_party(self):
        return [member for member in self.party if not member.is_empty()]

    def get_event_flag(self, index):
        return self.event_flags[index]

    def set_event_flag(self, index, value=True):
        self.event_flags[index] = bool(value)
