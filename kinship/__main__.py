"""
Kinship: layout engine command line.

    kinship regions 800 600                          Region circles as JSON
    kinship dashboard contacts.yaml                  Floating-ball placements
    kinship dashboard contacts.yaml --output balls.parquet
    kinship sort contacts.yaml --width 900 --seed 7  Sorting-board chip positions
    kinship motion 42 100 200                        Drift loop for one ball

Every command accepts --config overrides.yaml (default: $KINSHIP_CONFIG)
and --verbose.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

COMMANDS = ('regions', 'dashboard', 'sort', 'motion')


def main(argv: Optional[List[str]] = None):
    argv = sys.argv[1:] if argv is None else argv

    # Dispatch: `kinship regions ...` vs `kinship dashboard ...` vs ...
    if argv and argv[0] == 'regions':
        return _regions_main(argv[1:])
    elif argv and argv[0] == 'dashboard':
        return _dashboard_main(argv[1:])
    elif argv and argv[0] == 'sort':
        return _sort_main(argv[1:])
    elif argv and argv[0] == 'motion':
        return _motion_main(argv[1:])

    print(__doc__.strip())
    print(f"\nUnknown or missing command. Choose one of: {', '.join(COMMANDS)}")
    return 2


def _common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('--config', default=None,
                        help='YAML file with config overrides (default: $KINSHIP_CONFIG)')
    parser.add_argument('--verbose', '-v', action='store_true', help='Log progress at INFO level')


def _setup(args):
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(name)s - %(message)s',
    )
    from kinship.config import load_config, validate_config
    cfg = load_config(args.config)
    errors = validate_config(cfg)
    if errors:
        for e in errors:
            print(f"Config error: {e}", file=sys.stderr)
        sys.exit(1)
    return cfg


def _emit(payload, output: Optional[str]) -> None:
    text = json.dumps(payload, indent=2, ensure_ascii=False)
    if output:
        Path(output).expanduser().write_text(text + '\n')
        print(f"  → {output}")
    else:
        print(text)


def _load_contacts_or_exit(path: str):
    from kinship.contacts import load_contacts
    contacts_path = Path(path).expanduser().resolve()
    if not contacts_path.exists():
        print(f"Error: {contacts_path} does not exist")
        sys.exit(1)
    return load_contacts(contacts_path)


def _regions_main(argv: List[str]):
    parser = argparse.ArgumentParser(
        prog='kinship regions',
        description='Compute the three category circles for a container.',
    )
    parser.add_argument('width', type=float, help='Container width in px (0 = unmeasured)')
    parser.add_argument('height', type=float, help='Container height in px (0 = unmeasured)')
    parser.add_argument('--radius-multiplier', type=float, default=None,
                        help='Circle radius / triangle height (default: 0.8)')
    parser.add_argument('--output', '-o', default=None, help='Write JSON here instead of stdout')
    _common_args(parser)
    args = parser.parse_args(argv)
    cfg = _setup(args)

    from regions import compute_regions
    layout = compute_regions(args.width, args.height, args.radius_multiplier, config=cfg['regions'])
    _emit(layout.to_dict(), args.output)
    return 0


def _dashboard_main(argv: List[str]):
    parser = argparse.ArgumentParser(
        prog='kinship dashboard',
        description='Place contacts as floating balls around the heading.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  kinship dashboard contacts.yaml
  kinship dashboard contacts.yaml --width 1440 --height 900
  kinship dashboard contacts.yaml --output balls.parquet
""",
    )
    parser.add_argument('contacts', help='YAML/JSON file with contact records')
    parser.add_argument('--width', type=float, default=None, help='Viewport width (default: 1200)')
    parser.add_argument('--height', type=float, default=None, help='Viewport height (default: 800)')
    parser.add_argument('--output', '-o', default=None,
                        help='.parquet/.csv table or .json (default: JSON to stdout)')
    _common_args(parser)
    args = parser.parse_args(argv)
    cfg = _setup(args)

    width = args.width or cfg['dashboard']['default_width']
    height = args.height or cfg['dashboard']['default_height']
    if width <= 0 or height <= 0:
        parser.error('viewport width and height must be positive')

    contacts = _load_contacts_or_exit(args.contacts)

    from kinship.dashboard import build_dashboard
    rows = build_dashboard(width, height, contacts, config=cfg)

    if args.output and Path(args.output).suffix.lower() in ('.parquet', '.csv'):
        from kinship.export import write_rows
        path = write_rows(rows, args.output)
        print(f"  → {path} ({len(rows)} balls)")
    else:
        _emit(rows, args.output)
    return 0


def _sort_main(argv: List[str]):
    parser = argparse.ArgumentParser(
        prog='kinship sort',
        description='Settle categorized contacts inside their circles.',
    )
    parser.add_argument('contacts', help='YAML/JSON file with contact records (categories set)')
    parser.add_argument('--width', type=float, default=None, help='Container width (default: 1200)')
    parser.add_argument('--height', type=float, default=None, help='Container height (default: 800)')
    parser.add_argument('--seed', type=int, default=None, help='Seed for the initial jitter')
    parser.add_argument('--output', '-o', default=None, help='Write JSON here instead of stdout')
    _common_args(parser)
    args = parser.parse_args(argv)
    cfg = _setup(args)

    width = args.width if args.width is not None else cfg['dashboard']['default_width']
    height = args.height if args.height is not None else cfg['dashboard']['default_height']
    contacts = _load_contacts_or_exit(args.contacts)

    from kinship.dashboard import build_sorting_scene
    scene = build_sorting_scene(width, height, contacts, seed=args.seed, config=cfg)
    _emit(scene, args.output)
    return 0


def _motion_main(argv: List[str]):
    parser = argparse.ArgumentParser(
        prog='kinship motion',
        description='Deterministic drift loop for one ball.',
    )
    parser.add_argument('id', help='Entity id (leading integer seeds the loop)')
    parser.add_argument('x', type=float, help='Rest x')
    parser.add_argument('y', type=float, help='Rest y')
    _common_args(parser)
    args = parser.parse_args(argv)
    _setup(args)

    from drift import motion_for
    _emit(motion_for(args.id, args.x, args.y).to_dict(), None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
