from ..constants import STAT_NAMES, EVENT_FLAG_COUNT
from ..game import SaveRecord, PartyMember, Location, Stat,\
     PlayerInventory, EscargoExpressInventory, equipment_stat, rolling_stat


def _stat_to_meta(stat):
    meta = dict(value=stat.value)
    if stat.base_value is not None:
        meta.update(base_value=stat.base_value)
    if stat.rolling_value is not None:
        meta.update(rolling_value=stat.rolling_value)
    return meta


def _meta_to_stat(meta, stat_factory):
    # a bare value, or a value with neither extra, gets the base or
    # rolling value the stat is stored with filled in to match it
    if isinstance(meta, int):
        return stat_factory(meta)
    elif "base_value" not in meta and "rolling_value" not in meta:
        return stat_factory(meta.get("value", 0))
    return Stat(
        meta.get("value", 0),
        base_value=meta.get("base_value"),
        rolling_value=meta.get("rolling_value"),
        )


def _bytes_to_meta(rawdata):
    return bytes(rawdata).hex()


def _meta_to_bytes(meta):
    return bytes.fromhex(meta)


def party_member_to_meta(member):
    return dict(
        name        = member.name,
        level       = member.level,
        experience  = member.experience,
        hp          = _stat_to_meta(member.hp),
        pp          = _stat_to_meta(member.pp),
        permanent_status_effect = member.permanent_status_effect,
        possession_status       = member.possession_status,
        stats       = {
            name: _stat_to_meta(getattr(member, name))
            for name in STAT_NAMES + ("iq", )
            },
        items       = list(member.inventory.items),
        equips      = list(member.inventory.equips),
        unknown     = _bytes_to_meta(member.unknown),
        )


def meta_to_party_member(meta):
    member = PartyMember()
    for name in ("name", "level", "experience",
                 "permanent_status_effect", "possession_status"):
        if name in meta:
            setattr(member, name, meta[name])

    for name in ("hp", "pp"):
        if name in meta:
            setattr(member, name, _meta_to_stat(meta[name], rolling_stat))

    stats = meta.get("stats", {})
    for name in STAT_NAMES + ("iq", ):
        if name in stats:
            setattr(member, name, _meta_to_stat(stats[name], equipment_stat))

    member.inventory = PlayerInventory(
        meta.get("items", ()), meta.get("equips")
        )
    if "unknown" in meta:
        member.unknown = _meta_to_bytes(meta["unknown"])

    return member


def save_record_to_meta(record):
    return dict(
        player_name     = record.player_name,
        pet_name        = record.pet_name,
        favorite_food   = record.favorite_food,
        favorite_thing  = record.favorite_thing,
        money           = record.money,
        bank_balance    = record.bank_balance,
        escargo_express = list(record.escargo_express.items),
        location        = dict(x=record.location.x, y=record.location.y),
        exit_mouse_location = dict(
            x=record.exit_mouse_location.x, y=record.exit_mouse_location.y
            ),
        text_speed      = record.text_speed,
        sound_setting   = record.sound_setting,
        timer           = record.timer,
        window_flavor   = record.window_flavor,
        party           = [party_member_to_meta(m) for m in record.party],
        # only the set flags are listed, since nearly all are unset
        event_flags     = [i for i, flag in enumerate(record.event_flags) if flag],
        unknown_data    = dict(
            header   = _bytes_to_meta(record.header),
            unknown0 = _bytes_to_meta(record.unknown0),
            unknown1 = _bytes_to_meta(record.unknown1),
            ),
        )


def meta_to_save_record(meta):
    record = SaveRecord()
    for name in ("player_name", "pet_name", "favorite_food", "favorite_thing",
                 "money", "bank_balance", "text_speed", "sound_setting",
                 "timer", "window_flavor"):
        if name in meta:
            setattr(record, name, meta[name])

    record.escargo_express = EscargoExpressInventory(
        meta.get("escargo_express", ())
        )
    for name in ("location", "exit_mouse_location"):
        point = meta.get(name, {})
        setattr(record, name, Location(point.get("x", 0), point.get("y", 0)))

    if "party" in meta:
        # NOTE: party length is validated when the record is serialized
        record.party = [meta_to_party_member(m) for m in meta["party"]]

    flags = [False]*EVENT_FLAG_COUNT
    for i in meta.get("event_flags", ()):
        if i not in range(EVENT_FLAG_COUNT):
            raise ValueError(
                f"Event flag {i} is outside the range [0, {EVENT_FLAG_COUNT - 1}]."
                )
        flags[i] = True
    record.event_flags = flags

    unknown_data = meta.get("unknown_data", {})
    for name in ("header", "unknown0", "unknown1"):
        if name in unknown_data:
            setattr(record, name, _meta_to_bytes(unknown_data[name]))

    return record
