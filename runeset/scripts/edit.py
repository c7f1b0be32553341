"""
Create, inspect and edit runeset files
(c) 2024 runeset contributors, licence: https://opensource.org/licenses/MIT
"""

import argparse
import logging
from pathlib import Path

import runeset
from runeset import operations
from runeset.render import chart, draw, preview
from runeset.scripting import wrap_main


def glyph_index(value):
    """Parse a glyph index, decimal or with 0x/0o/0b prefix."""
    try:
        return int(value, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f'invalid glyph index: {value!r}')


def create_parser():
    """Set up command-line parser."""
    parser = argparse.ArgumentParser(
        prog='runeset',
        description='Create, inspect and edit 8x8 bitmap runeset files.',
    )
    parser.add_argument(
        '--debug', action='store_true', default=False,
        help='enable debugging output'
    )
    parser.add_argument(
        '--version', action='version',
        version=f'%(prog)s {runeset.__version__}'
    )
    commands = parser.add_subparsers(dest='command', required=True)

    new = commands.add_parser('new', help='create a blank runeset file')
    new.add_argument('path', type=Path)

    show = commands.add_parser(
        'show', help='print an overview of the runeset, or a single glyph'
    )
    show.add_argument('path', type=Path)
    show.add_argument(
        '--index', '-i', type=glyph_index, default=None,
        help='glyph to show at full resolution (default: show overview)'
    )

    import_ = commands.add_parser(
        'import', help='rasterize a 256x64 image into a runeset file'
    )
    import_.add_argument('image', type=Path)
    import_.add_argument('path', type=Path)

    export = commands.add_parser(
        'export', help='draw a runeset file to a 256x64 image'
    )
    export.add_argument('path', type=Path)
    export.add_argument('image', type=Path)
    export.add_argument(
        '--format', type=str, default='',
        help='image format (default: from image file suffix, or png)'
    )

    for name, doc in (
            ('invert', 'reverse video of a glyph'),
            ('mirror', 'mirror a glyph horizontally'),
            ('clear', 'remove all ink from a glyph'),
        ):
        edit = commands.add_parser(name, help=doc)
        edit.add_argument('path', type=Path)
        edit.add_argument('--index', '-i', type=glyph_index, required=True)

    toggle = commands.add_parser(
        'toggle', help='flip a single pixel of a glyph'
    )
    toggle.add_argument('path', type=Path)
    toggle.add_argument('--index', '-i', type=glyph_index, required=True)
    toggle.add_argument('x', type=int, help='pixel column, 0--7')
    toggle.add_argument('y', type=int, help='pixel row, 0--7')

    copy = commands.add_parser(
        'copy', help='copy a glyph to another position'
    )
    copy.add_argument('path', type=Path)
    copy.add_argument('--index', '-i', type=glyph_index, required=True)
    copy.add_argument('--to', '-t', type=glyph_index, required=True)
    return parser


def show_glyph(font, index):
    """Print a single glyph at full resolution with its preview."""
    glyph = font.read_at(index)
    x, y = operations.cell_position(index)
    print(f'0x{index:02x} ({x:02d}, {y:02d})')
    print(draw(glyph))
    print()
    print(preview(glyph))


def edit_glyph(args):
    """Apply an edit command to a runeset file."""
    font, found = runeset.load(args.path)
    if args.command == 'invert':
        operations.invert_glyph(font, args.index)
    elif args.command == 'mirror':
        operations.reverse_glyph(font, args.index)
    elif args.command == 'clear':
        operations.clear_glyph(font, args.index)
    elif args.command == 'toggle':
        operations.toggle_pixel(font, args.index, args.x, args.y)
    elif args.command == 'copy':
        clipboard = operations.Clipboard()
        clipboard.copy(font, args.index)
        clipboard.paste(font, args.to)
    logging.info('Applied `%s` to glyph 0x%02x', args.command, args.index)
    if not found:
        logging.info('Creating new runeset `%s`', args.path)
    runeset.save(font, args.path)


def main(argv=None):
    parser = create_parser()
    args = parser.parse_args(argv)
    with wrap_main(args.debug):
        if args.command == 'new':
            if args.path.exists():
                raise FileExistsError(
                    f'Not overwriting existing file `{args.path}`'
                )
            runeset.save(runeset.Runeset.blank(), args.path)
        elif args.command == 'show':
            font, found = runeset.load(args.path)
            if not found:
                raise runeset.NotFoundError(args.path)
            if args.index is None:
                print(chart(font))
            else:
                show_glyph(font, args.index)
        elif args.command == 'import':
            font = runeset.import_image(args.image)
            runeset.save(font, args.path)
        elif args.command == 'export':
            font, found = runeset.load(args.path)
            if not found:
                raise runeset.NotFoundError(args.path)
            runeset.export_image(font, args.image, format=args.format)
        else:
            edit_glyph(args)


if __name__ == '__main__':
    main()
