"""
Command line front end for sequence presets and frame plans.

Examples:
  sequenceforge presets list
  sequenceforge presets save "walk cycle" --entry idle:2 --entry walk
  sequenceforge presets show "walk cycle"
  sequenceforge build hero.json --preset "walk cycle" --layer-group body
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .config import settings
from .document import SpriteDocument
from .exceptions import SequenceForgeError
from .export import ExportPlan, RecordingExporter
from .models import Sequence, SequenceEntry, TagFrames
from .presets import JsonFilePresetBackend, PresetStore
from .session import SequenceSession

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def parse_entry(text: str) -> SequenceEntry:
    """Parse "tag" or "tag:repetitions" into an entry."""
    name, sep, count = text.rpartition(':')
    if not sep:
        return SequenceEntry(tag_name=text, repetitions=1)
    try:
        repetitions = int(count)
    except ValueError:
        raise argparse.ArgumentTypeError(f'Invalid repetitions in {text!r}') from None
    return SequenceEntry(tag_name=name, repetitions=repetitions)


def describe_sequence(sequence: Sequence) -> list[str]:
    if sequence.is_empty:
        return ['There are currently no tags in the sequence.']
    return [f'{idx + 1}: {entry}' for idx, entry in enumerate(sequence.entries)]


def describe_plan(sequence: Sequence, tag_frames: TagFrames, plan: ExportPlan) -> list[str]:
    """One line per output frame: position, tag, repetition, frame offset, content."""
    frames = iter(plan.frames)
    lines = [f'Output: {plan.filename or "(unsaved document)"}']
    position = 0
    for entry in sequence.entries:
        for repetition in range(entry.repetitions):
            for offset in range(tag_frames.frame_count(entry.tag_name)):
                frame = next(frames)
                content = 'blank' if frame.is_empty else f'drawn at {frame.position}'
                lines.append(
                    f'{position:4d}  {entry.tag_name} '
                    f'[{repetition + 1}/{entry.repetitions}] frame {offset}  {content}'
                )
                position += 1
    lines.append(f'{len(plan)} frames, {plan.blank_frame_count} blank')
    return lines


def _open_store(args) -> PresetStore:
    return PresetStore(JsonFilePresetBackend(args.presets))


def cmd_presets_list(args) -> int:
    store = _open_store(args)
    for name in store.list_names():
        print(name)
    return 0


def cmd_presets_show(args) -> int:
    store = _open_store(args)
    for line in describe_sequence(store.get(args.name)):
        print(line)
    return 0


def cmd_presets_save(args) -> int:
    store = _open_store(args)
    sequence = Sequence(entries=tuple(args.entry or ()))
    if args.document:
        document = SpriteDocument.load(args.document)
        ok, missing = store.validate(sequence, document.tag_names())
        if not ok:
            print(f'Missing tags: {", ".join(missing)}', file=sys.stderr)
            return 1
    store.save(args.name, sequence)
    print(f'Saved preset {args.name!r}')
    return 0


def cmd_presets_delete(args) -> int:
    store = _open_store(args)
    store.delete(args.name)
    print(f'Deleted preset {args.name!r}')
    return 0


def cmd_build(args) -> int:
    store = _open_store(args)
    document = SpriteDocument.load(args.document)
    session = SequenceSession.start(document, store)
    if args.preset:
        session.select_preset(args.preset)
    elif args.entry:
        session.clear()
        for entry in args.entry:
            session.add(entry.tag_name, entry.repetitions)
    plan = session.export(RecordingExporter(), args.layer_group)
    for line in describe_plan(session.sequence, session.tag_frames, plan):
        print(line)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='sequenceforge',
        description='Re-order and repeat tagged animation frames',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s presets list
  %(prog)s presets save "walk cycle" --entry idle:2 --entry walk
  %(prog)s build hero.json --preset "walk cycle"
"""
    )
    parser.add_argument(
        '--presets',
        type=Path,
        default=settings.PRESETS_PATH,
        help=f'Preset file (default: {settings.PRESETS_PATH})'
    )
    parser.add_argument(
        '--log-level',
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings.LOG_LEVEL.upper(),
        help='Logging level (default: %(default)s)'
    )
    commands = parser.add_subparsers(dest='command', required=True)

    presets = commands.add_parser('presets', help='Manage stored presets')
    preset_commands = presets.add_subparsers(dest='preset_command', required=True)

    list_parser = preset_commands.add_parser('list', help='List preset names')
    list_parser.set_defaults(func=cmd_presets_list)

    show_parser = preset_commands.add_parser('show', help='Show the entries of a preset')
    show_parser.add_argument('name')
    show_parser.set_defaults(func=cmd_presets_show)

    save_parser = preset_commands.add_parser('save', help='Save a preset from entries')
    save_parser.add_argument('name')
    save_parser.add_argument(
        '--entry', '-e',
        action='append',
        type=parse_entry,
        help='Tag entry as TAG or TAG:REPETITIONS (repeatable, in order)'
    )
    save_parser.add_argument(
        '--document', '-d',
        type=Path,
        help='Validate the entries against this document first'
    )
    save_parser.set_defaults(func=cmd_presets_save)

    delete_parser = preset_commands.add_parser('delete', help='Delete a preset')
    delete_parser.add_argument('name')
    delete_parser.set_defaults(func=cmd_presets_delete)

    build_cmd = commands.add_parser('build', help='Print the frame plan for a document')
    build_cmd.add_argument('document', type=Path, help='SpriteDocument JSON file')
    source = build_cmd.add_mutually_exclusive_group()
    source.add_argument('--preset', '-p', help='Preset to build')
    source.add_argument(
        '--entry', '-e',
        action='append',
        type=parse_entry,
        help='Tag entry as TAG or TAG:REPETITIONS (repeatable, in order)'
    )
    build_cmd.add_argument('--layer-group', '-g', help='Name the output after this layer group')
    build_cmd.set_defaults(func=cmd_build)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level)

    try:
        return args.func(args)
    except (SequenceForgeError, IndexError, ValueError, OSError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
