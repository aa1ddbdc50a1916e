'''
Reads and writes the save block of an EarthBound save slot.

The block has a fixed layout(see constants.SAVE_FIELDS), and the
offsets of everything in it are handled by earthbound_save_def.
The regions of the block that need more than a plain integer are
passed off to the text, stat, inventory and flag codecs.

Both directions are all or nothing. decode_save either returns a
fully populated SaveRecord or raises, and encode_save either returns
the whole serialized block or raises. Errors are tagged with the
path of the field that failed and its offset within the block.
'''
from contextlib import contextmanager

from .. import supyr_struct_ext
from ..constants import *
from ..errors import SaveCodecError, LayoutError, TruncatedBufferError,\
     TrailingDataError, InvalidEnumValueError, FieldRangeError,\
     UnexpectedSlotCountError
from ..game import SaveRecord, PartyMember, Location, Stat,\
     PlayerInventory, EscargoExpressInventory
from .save_def import earthbound_save_def
from .text import encode_text, decode_text,\
     encode_favorite_thing, decode_favorite_thing
from .stats import encode_stat_block, decode_stat_block,\
     check_equipment_stat, check_rolling_stat
from .inventory import encode_inventory, decode_inventory
from .flags import pack_flags, unpack_flags

UINT8_RANGE  = range(0x100)
UINT16_RANGE = range(0x10000)
UINT32_RANGE = range(0x100000000)


@contextmanager
def _field_context(field, offset):
    try:
        yield
    except SaveCodecError as e:
        e.locate(field, offset)
        raise


def _save_field(name):
    return _field_context(name, SAVE_FIELD_OFFSETS[name])


def _party_member_field(index, name):
    return _field_context(
        f"party[{index}].{name}",
        PARTY_OFFSET + index*PARTY_MEMBER_SIZE + PARTY_MEMBER_FIELD_OFFSETS[name]
        )


def _check_range(value, valid_range, what="Value"):
    # bools are ints, but never a valid field value
    if (isinstance(value, bool) or not isinstance(value, int) or
        value not in valid_range):
        raise FieldRangeError(
            f"{what} {value!r} is outside the range "
            f"[{valid_range.start}, {valid_range.stop - 1}]."
            )
    return value


def _check_length(rawdata):
    if len(rawdata) > SAVE_LENGTH:
        raise TrailingDataError(
            f"Expected {SAVE_LENGTH} bytes of save data, "
            f"but got {len(rawdata)}."
            )

    for name, offset, size in SAVE_FIELDS:
        if offset + size > len(rawdata):
            raise TruncatedBufferError(
                f"Save data ends at 0x{len(rawdata):03X}, before the "
                f"end of this field at 0x{offset + size:03X}.",
                name, offset
                )


def _decode_enum(value, options):
    for name, option_value in options:
        if option_value == value:
            return name

    raise InvalidEnumValueError(
        f"{value} is not one of the valid values "
        f"{[v for _, v in options]}."
        )


def _encode_enum(name, options):
    for option_name, value in options:
        if option_name == name:
            return value

    raise InvalidEnumValueError(
        f"{name!r} is not one of the valid names "
        f"{[n for n, _ in options]}."
        )


def _encode_reserved(rawdata, size):
    rawdata = bytes(rawdata)
    if len(rawdata) != size:
        raise LayoutError(
            f"Expected {size} bytes of unknown data, not {len(rawdata)}."
            )
    return rawdata


def _decode_party_member(index, member_block):
    member = PartyMember()
    with _party_member_field(index, "name"):
        member.name = decode_text(member_block.name)

    member.level      = member_block.level
    member.experience = member_block.experience
    member.hp = Stat(member_block.hp.current, rolling_value=member_block.hp.rolling)
    member.pp = Stat(member_block.pp.current, rolling_value=member_block.pp.rolling)

    with _party_member_field(index, "permanent_status_effect"):
        member.permanent_status_effect = _decode_enum(
            member_block.permanent_status_effect.data, PERMANENT_STATUS_EFFECTS
            )
    with _party_member_field(index, "possession_status"):
        member.possession_status = _decode_enum(
            member_block.possession_status.data, POSSESSION_STATUSES
            )
    with _party_member_field(index, "stats"):
        member.stat_block = decode_stat_block(bytes(member_block.stats))

    member.iq = Stat(member_block.iq.current, base_value=member_block.iq.base)
    with _party_member_field(index, "inventory"):
        member.inventory = decode_inventory(
            bytes(member_block.inventory), PlayerInventory
            )

    member.unknown = bytes(member_block.unknown)
    return member


def _encode_party_member(index, member, member_block):
    with _party_member_field(index, "name"):
        member_block.name = encode_text(member.name, PARTY_MEMBER_NAME_SIZE)
    with _party_member_field(index, "level"):
        member_block.level = _check_range(member.level, UINT8_RANGE, "Level")
    with _party_member_field(index, "experience"):
        member_block.experience = _check_range(
            member.experience, UINT32_RANGE, "Experience"
            )

    for name in ("hp", "pp"):
        with _party_member_field(index, name):
            stat  = check_rolling_stat(getattr(member, name), name.upper())
            meter = getattr(member_block, name)
            meter.current = _check_range(stat.value, UINT16_RANGE, name.upper())
            meter.rolling = _check_range(
                stat.rolling_value, UINT16_RANGE, f"Rolling {name.upper()}"
                )

    with _party_member_field(index, "permanent_status_effect"):
        member_block.permanent_status_effect.data = _encode_enum(
            member.permanent_status_effect, PERMANENT_STATUS_EFFECTS
            )
    with _party_member_field(index, "possession_status"):
        member_block.possession_status.data = _encode_enum(
            member.possession_status, POSSESSION_STATUSES
            )
    with _party_member_field(index, "stats"):
        member_block.stats = encode_stat_block(member.stat_block)

    with _party_member_field(index, "iq"):
        iq = check_equipment_stat(member.iq, "IQ")
        member_block.iq.current = _check_range(iq.value, UINT8_RANGE, "IQ")
        member_block.iq.base = _check_range(iq.base_value, UINT8_RANGE, "Base IQ")

    with _party_member_field(index, "inventory"):
        member_block.inventory = encode_inventory(member.inventory)
    with _party_member_field(index, "unknown"):
        member_block.unknown = _encode_reserved(
            member.unknown, PARTY_MEMBER_UNKNOWN_SIZE
            )


def decode_save(rawdata):
    rawdata = bytes(rawdata)
    _check_length(rawdata)

    save_block = earthbound_save_def.build(rawdata=rawdata)
    record = SaveRecord()

    record.header = bytes(save_block.header)
    for name in ("player_name", "pet_name", "favorite_food"):
        with _save_field(name):
            setattr(record, name, decode_text(getattr(save_block, name)))

    with _save_field("favorite_thing"):
        record.favorite_thing = decode_favorite_thing(bytes(save_block.favorite_thing))

    record.money        = save_block.money
    record.bank_balance = save_block.bank_balance
    record.unknown0     = bytes(save_block.unknown0)

    with _save_field("escargo_express"):
        record.escargo_express = decode_inventory(
            bytes(save_block.escargo_express), EscargoExpressInventory
            )

    for name in ("location", "exit_mouse_location"):
        point = getattr(save_block, name)
        setattr(record, name, Location(point.x, point.y))

    for name, options in (("text_speed", TEXT_SPEEDS),
                          ("sound_setting", SOUND_SETTINGS),
                          ("window_flavor", WINDOW_FLAVORS)):
        with _save_field(name):
            setattr(record, name, _decode_enum(getattr(save_block, name).data, options))

    record.timer = save_block.timer
    record.party = [
        _decode_party_member(i, member_block)
        for i, member_block in enumerate(save_block.party)
        ]

    record.unknown1 = bytes(save_block.unknown1)
    with _save_field("event_flags"):
        record.event_flags = unpack_flags(
            bytes(save_block.event_flags), EVENT_FLAG_COUNT
            )

    return record


def encode_save(record):
    # parse a blank block rather than building a default one so every
    # field already exists at its full size before it's overwritten
    save_block = earthbound_save_def.build(rawdata=bytes(SAVE_LENGTH))

    with _save_field("header"):
        save_block.header = _encode_reserved(record.header, HEADER_SIZE)

    for name, size in (("player_name", PLAYER_NAME_SIZE),
                       ("pet_name", NAME_SIZE),
                       ("favorite_food", NAME_SIZE)):
        with _save_field(name):
            setattr(save_block, name, encode_text(getattr(record, name), size))

    with _save_field("favorite_thing"):
        save_block.favorite_thing = encode_favorite_thing(
            record.favorite_thing, FAVORITE_THING_SIZE
            )

    for name, what in (("money", "Money"),
                       ("bank_balance", "Bank balance"),
                       ("timer", "Timer")):
        with _save_field(name):
            setattr(save_block, name, _check_range(
                getattr(record, name), UINT32_RANGE, what
                ))

    with _save_field("unknown0"):
        save_block.unknown0 = _encode_reserved(record.unknown0, UNKNOWN0_SIZE)

    with _save_field("escargo_express"):
        save_block.escargo_express = encode_inventory(record.escargo_express)

    for name in ("location", "exit_mouse_location"):
        location = getattr(record, name)
        point    = getattr(save_block, name)
        with _save_field(name):
            point.x = _check_range(location.x, UINT16_RANGE, "X coordinate")
            point.y = _check_range(location.y, UINT16_RANGE, "Y coordinate")

    for name, options in (("text_speed", TEXT_SPEEDS),
                          ("sound_setting", SOUND_SETTINGS),
                          ("window_flavor", WINDOW_FLAVORS)):
        with _save_field(name):
            getattr(save_block, name).data = _encode_enum(getattr(record, name), options)

    with _save_field("party"):
        if len(record.party) != PARTY_SIZE:
            raise UnexpectedSlotCountError(
                f"Expected {PARTY_SIZE} party members, not {len(record.party)}."
                )

    for i, member in enumerate(record.party):
        _encode_party_member(i, member, save_block.party[i])

    with _save_field("unknown1"):
        save_block.unknown1 = _encode_reserved(record.unknown1, UNKNOWN1_SIZE)

    with _save_field("event_flags"):
        if len(record.event_flags) != EVENT_FLAG_COUNT:
            raise UnexpectedSlotCountError(
                f"Expected {EVENT_FLAG_COUNT} event flags, "
                f"not {len(record.event_flags)}."
                )
        save_block.event_flags = pack_flags(record.event_flags)

    return bytes(save_block.serialize())
