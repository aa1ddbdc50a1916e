from supyr_struct.field_types import *
from .constants import *


def point(name):
    return QStruct(name,
        UInt16("x"), UInt16("y"),
        SIZE=4
        )


def rolling_meter(name):
    return QStruct(name,
        UInt16("current"),
        # what the rolling meter is currently showing
        UInt16("rolling"),
        SIZE=4
        )


text_speed = UEnum8('text_speed', *TEXT_SPEEDS, DEFAULT=1)
sound_setting = UEnum8('sound_setting', *SOUND_SETTINGS, DEFAULT=1)
window_flavor = UEnum8('window_flavor', *WINDOW_FLAVORS, DEFAULT=1)

permanent_status_effect = UEnum8('permanent_status_effect',
    *PERMANENT_STATUS_EFFECTS
    )
possession_status = UEnum8('possession_status',
    *POSSESSION_STATUSES
    )
