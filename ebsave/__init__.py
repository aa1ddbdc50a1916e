from .game import SaveRecord, PartyMember, Stat, Location,\
     PlayerInventory, EscargoExpressInventory
from .serialization import decode_save, encode_save
from .editor import SaveEditor
from .errors import *
