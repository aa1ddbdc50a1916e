from .stat import Stat, equipment_stat, rolling_stat
from .inventory import Inventory, PlayerInventory, EscargoExpressInventory
from .character import Character, PartyMember
from .save_record import Location, SaveRecord
