from supyr_struct.defs.block_def import BlockDef
from ..common_descs import *

# NOTE: the regions the text, stat, inventory and flag codecs own
#       are left as raw bytes here and handed to those codecs. the
#       unknown regions are raw bytes too, since they must be written
#       back exactly as they were read rather than zero padded.

party_member = Struct("party_member",
    BytesRaw("name", SIZE=PARTY_MEMBER_NAME_SIZE),
    UInt8("level"),
    UInt32("experience"),
    rolling_meter("hp"),
    rolling_meter("pp"),
    permanent_status_effect,
    possession_status,
    # current offense, defense, speed, guts, luck, and vitality,
    # followed by the base value for each of those
    BytesRaw("stats", SIZE=STAT_COUNT*2),
    QStruct("iq",
        UInt8("current"),
        UInt8("base"),
        SIZE=2
        ),
    # 14 item slots followed by 4 equip slots
    BytesRaw("inventory", SIZE=PLAYER_INVENTORY_SIZE + EQUIP_SLOT_COUNT),
    BytesRaw("unknown", SIZE=PARTY_MEMBER_UNKNOWN_SIZE),
    SIZE=PARTY_MEMBER_SIZE,
    )

earthbound_save_def = BlockDef("earthbound_save",
    BytesRaw("header", SIZE=HEADER_SIZE),
    BytesRaw("player_name", SIZE=PLAYER_NAME_SIZE),
    BytesRaw("pet_name", SIZE=NAME_SIZE),
    BytesRaw("favorite_food", SIZE=NAME_SIZE),
    BytesRaw("favorite_thing", SIZE=FAVORITE_THING_SIZE),
    UInt32("money"),
    UInt32("bank_balance"),
    BytesRaw("unknown0", SIZE=UNKNOWN0_SIZE),
    BytesRaw("escargo_express", SIZE=ESCARGO_EXPRESS_SIZE),
    point("location"),
    point("exit_mouse_location"),
    text_speed,
    sound_setting,
    UInt32("timer"),
    window_flavor,
    # TODO: find where the party member count and order are stored.
    #       until then every slot is read and written, used or not.
    Array("party", SUB_STRUCT=party_member, SIZE=PARTY_SIZE),
    BytesRaw("unknown1", SIZE=UNKNOWN1_SIZE),
    BytesRaw("event_flags", SIZE=EVENT_FLAG_DATA_SIZE),
    endian="<"
    )
