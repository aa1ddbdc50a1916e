from .util import load_metadata, dump_metadata, METADATA_EXTENSIONS
from .save import save_record_to_meta, meta_to_save_record,\
     party_member_to_meta, meta_to_party_member
