#!/usr/bin/env python3
import argparse
import sys
import time

from traceback import format_exc
from ..editor import SaveEditor
from ..errors import SaveCodecError
from ..util import count_set_bits
from ..serialization.flags import pack_flags


def print_record_info(record):
    print(f"Player name:    {record.player_name}")
    print(f"Pet name:       {record.pet_name}")
    print(f"Favorite food:  {record.favorite_food}")
    print(f"Favorite thing: PSI {record.favorite_thing}")
    print(f"Money:          ${record.money}")
    print(f"Bank balance:   ${record.bank_balance}")
    print(f"Location:       ({record.location.x}, {record.location.y})")
    print(f"Text speed:     {record.text_speed}")
    print(f"Sound:          {record.sound_setting}")
    print(f"Window flavor:  {record.window_flavor}")
    print(f"Escargo Express items: {record.escargo_express.item_count}")
    print(f"Event flags set: {count_set_bits(pack_flags(record.event_flags))}")
    print()
    for i, member in enumerate(record.party):
        if member.is_empty():
            print(f"Party member {i}: (empty)")
            continue

        print(f"Party member {i}: {member.name}  Lv {member.level}  "
              f"HP {member.hp.value}  PP {member.pp.value}  "
              f"{member.permanent_status_effect}")


def build_parser():
    parser = argparse.ArgumentParser(
        description='EarthBound save block reader/writer',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Show what's in the first save slot:
    python EB_Save_Tool.py info earthbound.srm

  Export slot 1 to yaml, edit it, then write it back:
    python EB_Save_Tool.py export earthbound.srm --slot 1
    python EB_Save_Tool.py import earthbound.srm --slot 1
""")

    subparsers = parser.add_subparsers(dest='command', help='Command to run')
    subparsers.required = True

    info_parser = subparsers.add_parser('info', help='Print a summary of a save slot')
    export_parser = subparsers.add_parser('export', help='Export a save slot to yaml/json')
    import_parser = subparsers.add_parser('import', help='Write yaml/json into a save slot')

    for sub_parser in (info_parser, export_parser, import_parser):
        sub_parser.add_argument('input', help='Save file')
        sub_parser.add_argument('--slot', '-s', type=int, default=0,
                                help='Save slot to use (default: 0)')

    for sub_parser in (export_parser, import_parser):
        sub_parser.add_argument('--metadata', '-m',
                                help='Metadata file (default: next to the save file)')
        sub_parser.add_argument('--format', '-f', choices=['yaml', 'json'],
                                default='yaml', help='Metadata format')

    export_parser.add_argument('--overwrite', action='store_true',
                               help='Overwrite an existing metadata file')
    import_parser.add_argument('--no-backup', action='store_true',
                               help="Don't keep a .bak copy of the save file")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    editor = SaveEditor(
        filepath        = args.input,
        slot            = args.slot,
        metadata_format = getattr(args, "format", SaveEditor.metadata_format),
        overwrite       = getattr(args, "overwrite", False),
        backup          = not getattr(args, "no_backup", False),
        )

    start = time.time()
    try:
        if args.command == 'info':
            print_record_info(editor.load_record())
        elif args.command == 'export':
            filepath = editor.export_metadata(args.metadata)
            if filepath is None:
                print("Metadata file already exists. Use --overwrite to replace it.")
                return 1
            print(f"Wrote: {filepath}")
        elif args.command == 'import':
            editor.import_metadata(args.metadata)
            print(f"Wrote slot {args.slot} of: {args.input}")
    except SaveCodecError as e:
        print(f"Error: {e}")
        return 1
    except Exception:
        print(format_exc())
        return 1

    print('Finished. Took %s seconds.' % round(time.time() - start, 3))
    return 0


if __name__ == '__main__':
    sys.exit(main())
