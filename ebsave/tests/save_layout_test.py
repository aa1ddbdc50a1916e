import pytest
import setup_tests

from ebsave.constants import *
from ebsave.errors import InvalidEnumValueError, TruncatedBufferError,\
     TrailingDataError, TooLongError, FieldRangeError,\
     UnexpectedSlotCountError, LayoutError, SaveCodecError,\
     UnexpectedStatKindError, TextAfterPaddingError, MissingSuffixError
from ebsave.game import SaveRecord, PartyMember, Location, PlayerInventory,\
     EscargoExpressInventory, equipment_stat, rolling_stat, Stat
from ebsave.serialization import decode_save, encode_save
from ebsave.serialization.text import encode_text, decode_text


def make_ness():
    return PartyMember(
        name="Ness", level=12, experience=3456,
        hp=rolling_stat(98, 95), pp=rolling_stat(30),
        offense=equipment_stat(34, 30), defense=equipment_stat(40, 28),
        speed=equipment_stat(15), guts=equipment_stat(20),
        luck=equipment_stat(9), vitality=equipment_stat(17),
        iq=equipment_stat(11),
        permanent_status_effect="poison",
        inventory=PlayerInventory([17, 88, 3, 154], [1, 3, 0, 0]),
        )


def make_record():
    record = SaveRecord(
        player_name="Player", pet_name="King", favorite_food="Steak",
        favorite_thing="Rockin", money=1234, bank_balance=99999,
        escargo_express=EscargoExpressInventory([40, 41]),
        location=Location(0x1234, 0x0567),
        exit_mouse_location=Location(10, 20),
        text_speed="medium", sound_setting="mono", timer=0xDEADBEEF,
        window_flavor="banana",
        )
    record.party[0] = make_ness()
    record.party[1] = PartyMember(name="Paula", level=3, possession_status="possession")
    record.set_event_flag(0)
    record.set_event_flag(9)
    record.set_event_flag(EVENT_FLAG_COUNT - 1)
    return record


def test_fields_are_contiguous():
    end = 0
    for name, offset, size in SAVE_FIELDS:
        assert offset == end, name
        end = offset + size
    assert end == SAVE_LENGTH

    end = 0
    for name, offset, size in PARTY_MEMBER_FIELDS:
        assert offset == end, name
        end = offset + size
    assert end == PARTY_MEMBER_SIZE


def test_encoded_length():
    assert len(encode_save(SaveRecord())) == SAVE_LENGTH
    assert len(encode_save(make_record())) == SAVE_LENGTH


def test_round_trip():
    record = make_record()
    decoded = decode_save(encode_save(record))
    assert decoded == record
    assert decoded.active_party == record.party[: 2]
    assert decoded.get_event_flag(9)
    assert not decoded.get_event_flag(8)


def test_field_offsets():
    rawdata = encode_save(make_record())
    player_name = SAVE_FIELD_OFFSETS["player_name"]
    assert decode_text(rawdata[player_name: player_name + PLAYER_NAME_SIZE]) == "Player"

    favorite_thing = SAVE_FIELD_OFFSETS["favorite_thing"]
    assert decode_text(
        rawdata[favorite_thing: favorite_thing + FAVORITE_THING_SIZE]
        ) == "PSI Rockin "

    money = SAVE_FIELD_OFFSETS["money"]
    assert rawdata[money: money + 4] == (1234).to_bytes(4, "little")

    timer = SAVE_FIELD_OFFSETS["timer"]
    assert rawdata[timer: timer + 4] == (0xDEADBEEF).to_bytes(4, "little")

    location = SAVE_FIELD_OFFSETS["location"]
    assert rawdata[location: location + 4] == b"\x34\x12\x67\x05"

    assert rawdata[SAVE_FIELD_OFFSETS["text_speed"]] == 2
    assert rawdata[SAVE_FIELD_OFFSETS["sound_setting"]] == 2
    assert rawdata[SAVE_FIELD_OFFSETS["window_flavor"]] == 4

    assert rawdata[EVENT_FLAG_OFFSET] == 0b1
    assert rawdata[EVENT_FLAG_OFFSET + 1] == 0b10
    assert rawdata[-1] == 0b10000000


def test_party_member_offsets():
    rawdata = encode_save(make_record())
    ness = rawdata[PARTY_OFFSET: PARTY_OFFSET + PARTY_MEMBER_SIZE]
    assert decode_text(ness[: PARTY_MEMBER_NAME_SIZE]) == "Ness"
    assert ness[PARTY_MEMBER_FIELD_OFFSETS["level"]] == 12
    assert ness[0x0A: 0x0E] == b"\x62\x00\x5f\x00"
    assert ness[PARTY_MEMBER_FIELD_OFFSETS["permanent_status_effect"]] == 5
    assert ness[0x14: 0x20] == bytes([34, 40, 15, 20, 9, 17, 30, 28, 15, 20, 9, 17])
    assert ness[0x20: 0x22] == bytes([11, 11])
    assert ness[0x22: 0x26] == bytes([17, 88, 3, 154])
    assert ness[0x30: 0x34] == bytes([1, 3, 0, 0])

    paula = rawdata[PARTY_OFFSET + PARTY_MEMBER_SIZE: PARTY_OFFSET + 2*PARTY_MEMBER_SIZE]
    assert paula[PARTY_MEMBER_FIELD_OFFSETS["possession_status"]] == 2


def test_reserved_bytes_are_preserved():
    rawdata = bytearray(encode_save(make_record()))
    for name, offset, size in SAVE_FIELDS:
        if name not in ("header", "unknown0", "unknown1"):
            continue
        rawdata[offset: offset + size] = bytes((i*7 + 3) & 0xFF for i in range(size))

    for i in range(PARTY_SIZE):
        offset = PARTY_OFFSET + i*PARTY_MEMBER_SIZE + PARTY_MEMBER_FIELD_OFFSETS["unknown"]
        rawdata[offset: offset + PARTY_MEMBER_UNKNOWN_SIZE] = bytes(
            [0xA5 ^ i]*PARTY_MEMBER_UNKNOWN_SIZE
            )

    rawdata = bytes(rawdata)
    record = decode_save(rawdata)
    assert record.party[3].unknown == bytes([0xA5 ^ 3]*PARTY_MEMBER_UNKNOWN_SIZE)
    assert encode_save(record) == rawdata

    record.money = 5
    reencoded = encode_save(record)
    money = SAVE_FIELD_OFFSETS["money"]
    assert reencoded[: money] == rawdata[: money]
    assert reencoded[money + 4: ] == rawdata[money + 4: ]


def test_invalid_status_effect():
    rawdata = bytearray(encode_save(make_record()))
    offset = PARTY_OFFSET + PARTY_MEMBER_FIELD_OFFSETS["permanent_status_effect"]
    rawdata[offset] = 8
    with pytest.raises(InvalidEnumValueError) as info:
        decode_save(rawdata)

    assert isinstance(info.value, LayoutError)
    assert info.value.field == "party[0].permanent_status_effect"
    assert info.value.offset == PARTY_OFFSET + 0x12


def test_invalid_possession_status():
    rawdata = bytearray(encode_save(make_record()))
    offset = (PARTY_OFFSET + PARTY_MEMBER_SIZE +
              PARTY_MEMBER_FIELD_OFFSETS["possession_status"])
    rawdata[offset] = 3
    with pytest.raises(InvalidEnumValueError) as info:
        decode_save(rawdata)

    assert info.value.field == "party[1].possession_status"
    assert info.value.offset == offset


def test_invalid_sound_setting():
    rawdata = bytearray(encode_save(make_record()))
    rawdata[SAVE_FIELD_OFFSETS["sound_setting"]] = 3
    with pytest.raises(InvalidEnumValueError) as info:
        decode_save(rawdata)

    assert info.value.field == "sound_setting"
    assert info.value.offset == 0xA3


def test_invalid_setting():
    rawdata = bytearray(encode_save(make_record()))
    rawdata[SAVE_FIELD_OFFSETS["text_speed"]] = 0
    with pytest.raises(InvalidEnumValueError) as info:
        decode_save(rawdata)
    assert info.value.field == "text_speed"

    record = make_record()
    record.window_flavor = "chocolate"
    with pytest.raises(InvalidEnumValueError):
        encode_save(record)


def test_truncated():
    rawdata = encode_save(make_record())
    with pytest.raises(TruncatedBufferError) as info:
        decode_save(rawdata[: 0x5D])
    assert info.value.field == "money"
    assert info.value.offset == 0x5B

    with pytest.raises(TruncatedBufferError):
        decode_save(rawdata[: -1])


def test_trailing_data():
    with pytest.raises(TrailingDataError):
        decode_save(encode_save(make_record()) + b"\x00")


def test_encode_errors_are_located():
    record = make_record()
    record.party[2].name = "Jeffrey"
    with pytest.raises(TooLongError) as info:
        encode_save(record)
    assert info.value.field == "party[2].name"
    assert info.value.offset == PARTY_OFFSET + 2*PARTY_MEMBER_SIZE
    assert "party[2].name" in str(info.value)

    record = make_record()
    record.money = 1 << 32
    with pytest.raises(FieldRangeError) as info:
        encode_save(record)
    assert info.value.field == "money"


def test_party_size_is_fixed():
    record = make_record()
    record.party = record.party[: 3]
    with pytest.raises(UnexpectedSlotCountError):
        encode_save(record)

    record = make_record()
    record.event_flags = record.event_flags[: -1]
    with pytest.raises(SaveCodecError):
        encode_save(record)


def test_missing_favorite_thing_prefix():
    rawdata = bytearray(encode_save(make_record()))
    offset = SAVE_FIELD_OFFSETS["favorite_thing"]
    rawdata[offset: offset + FAVORITE_THING_SIZE] = encode_text(
        "Rockin", FAVORITE_THING_SIZE
        )
    with pytest.raises(SaveCodecError) as info:
        decode_save(rawdata)
    assert info.value.field == "favorite_thing"


def test_stat_kinds_are_checked():
    record = make_record()
    record.party[0].offense = Stat(7, rolling_value=3)
    with pytest.raises(UnexpectedStatKindError) as info:
        encode_save(record)
    assert info.value.field == "party[0].stats"
    assert info.value.offset == PARTY_OFFSET + 0x14

    record = make_record()
    record.party[1].hp = Stat(50, base_value=40)
    with pytest.raises(UnexpectedStatKindError) as info:
        encode_save(record)
    assert info.value.field == "party[1].hp"
    assert info.value.offset == PARTY_OFFSET + PARTY_MEMBER_SIZE + 0x0A

    record = make_record()
    record.party[0].pp = Stat(30)
    with pytest.raises(UnexpectedStatKindError):
        encode_save(record)

    record = make_record()
    record.party[0].iq = Stat(11, rolling_value=11)
    with pytest.raises(UnexpectedStatKindError) as info:
        encode_save(record)
    assert info.value.field == "party[0].iq"


def test_bool_isnt_an_int():
    record = make_record()
    record.party[0].level = True
    with pytest.raises(FieldRangeError) as info:
        encode_save(record)
    assert info.value.field == "party[0].level"


def test_text_after_padding():
    rawdata = bytearray(encode_save(make_record()))
    offset = SAVE_FIELD_OFFSETS["player_name"]
    rawdata[offset: offset + 3] = encode_text("A") + b"\x00" + encode_text("r")
    with pytest.raises(TextAfterPaddingError) as info:
        decode_save(rawdata)
    assert info.value.field == "player_name"
    assert info.value.offset == offset


def test_favorite_thing_missing_suffix():
    rawdata = bytearray(encode_save(make_record()))
    offset = SAVE_FIELD_OFFSETS["favorite_thing"]
    rawdata[offset: offset + FAVORITE_THING_SIZE] = encode_text(
        "PSI Rockin", FAVORITE_THING_SIZE
        )
    with pytest.raises(MissingSuffixError) as info:
        decode_save(rawdata)
    assert info.value.field == "favorite_thing"
