# the whole save block is 0x500 bytes. the flag table is the last
# thing in it, so 0x433 + 205 flag bytes lands right on the end.
SAVE_LENGTH = 0x500

HEADER_SIZE         = 0x2C
PLAYER_NAME_SIZE    = 24
NAME_SIZE           = 6

# the favorite thing is stored as the name of Ness' special PSI move,
# so the "PSI " prefix and a trailing space live in the same field.
FAVORITE_THING_PREFIX   = "PSI "
FAVORITE_THING_SUFFIX   = " "
FAVORITE_THING_SIZE     = (
    len(FAVORITE_THING_PREFIX) + NAME_SIZE + len(FAVORITE_THING_SUFFIX)
    )

UNKNOWN0_SIZE = 0x13

ESCARGO_EXPRESS_OFFSET  = 0x76
ESCARGO_EXPRESS_SIZE    = 36

PARTY_OFFSET        = 0xA9
PARTY_SIZE          = 4
PARTY_MEMBER_SIZE   = 0x5F
PARTY_MEMBER_NAME_SIZE  = 5
PARTY_MEMBER_UNKNOWN_SIZE = 43

PLAYER_INVENTORY_SIZE   = 14
EQUIP_SLOT_COUNT        = 4
EMPTY_ITEM_SLOT         = 0

STAT_COUNT = 6
# the order stats are laid out in within a character's stat block
STAT_NAMES = ("offense", "defense", "speed", "guts", "luck", "vitality")

EVENT_FLAG_OFFSET       = 0x433
EVENT_FLAG_COUNT        = 1640
EVENT_FLAG_DATA_SIZE    = (EVENT_FLAG_COUNT + 7) // 8

UNKNOWN1_SIZE = EVENT_FLAG_OFFSET - (PARTY_OFFSET + PARTY_SIZE*PARTY_MEMBER_SIZE)

TEXT_PAD_BYTE = 0x00

# enumerated byte fields. these double as the options of the
# UEnum8 fields in the block definition, so keep them as pairs.
TEXT_SPEEDS = (
    ("fast", 1),
    ("medium", 2),
    ("slow", 3),
    )
SOUND_SETTINGS = (
    ("stereo", 1),
    ("mono", 2),
    )
WINDOW_FLAVORS = (
    ("plain", 1),
    ("mint", 2),
    ("strawberry", 3),
    ("banana", 4),
    ("peanut", 5),
    )
# NOTE: aside from normal, lower values take precedence over higher
#       ones in-game. that's left to the game, these are just stored.
PERMANENT_STATUS_EFFECTS = (
    ("normal", 0),
    ("unconsciousness", 1),
    ("diamondization", 2),
    ("paralysis", 3),
    ("nausea", 4),
    ("poison", 5),
    ("sunstroke", 6),
    ("cold", 7),
    )
POSSESSION_STATUSES = (
    ("normal", 0),
    ("mushroomization", 1),
    ("possession", 2),
    )

# name, offset, size of every top level field in a save block
SAVE_FIELDS = (
    ("header",              0x000, HEADER_SIZE),
    ("player_name",         0x02C, PLAYER_NAME_SIZE),
    ("pet_name",            0x044, NAME_SIZE),
    ("favorite_food",       0x04A, NAME_SIZE),
    ("favorite_thing",      0x050, FAVORITE_THING_SIZE),
    ("money",               0x05B, 4),
    ("bank_balance",        0x05F, 4),
    ("unknown0",            0x063, UNKNOWN0_SIZE),
    ("escargo_express",     ESCARGO_EXPRESS_OFFSET, ESCARGO_EXPRESS_SIZE),
    ("location",            0x09A, 4),
    ("exit_mouse_location", 0x09E, 4),
    ("text_speed",          0x0A2, 1),
    ("sound_setting",       0x0A3, 1),
    ("timer",               0x0A4, 4),
    ("window_flavor",       0x0A8, 1),
    ("party",               PARTY_OFFSET, PARTY_SIZE*PARTY_MEMBER_SIZE),
    ("unknown1",            0x225, UNKNOWN1_SIZE),
    ("event_flags",         EVENT_FLAG_OFFSET, EVENT_FLAG_DATA_SIZE),
    )

# same thing, but relative to the start of a party member record
PARTY_MEMBER_FIELDS = (
    ("name",                    0x00, PARTY_MEMBER_NAME_SIZE),
    ("level",                   0x05, 1),
    ("experience",              0x06, 4),
    ("hp",                      0x0A, 4),
    ("pp",                      0x0E, 4),
    ("permanent_status_effect", 0x12, 1),
    ("possession_status",       0x13, 1),
    ("stats",                   0x14, STAT_COUNT*2),
    ("iq",                      0x20, 2),
    ("inventory",               0x22, PLAYER_INVENTORY_SIZE + EQUIP_SLOT_COUNT),
    ("unknown",                 0x34, PARTY_MEMBER_UNKNOWN_SIZE),
    )

SAVE_FIELD_OFFSETS          = {name: off for name, off, _ in SAVE_FIELDS}
PARTY_MEMBER_FIELD_OFFSETS  = {name: off for name, off, _ in PARTY_MEMBER_FIELDS}
