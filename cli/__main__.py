#!/usr/bin/env python3
"""
Panesnap CLI - Capture and restore tmux pane layouts.

Usage:
    panesnap save [name]
    panesnap restore [name] [--keep-panes] [--no-views]
    panesnap show [name] [--json]
    panesnap list [--json]
    panesnap delete <name>
    panesnap config [show|init|path|set]
    panesnap --version
    panesnap --help
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from panesnap import (
    Leaf,
    LayoutTree,
    Orientation,
    SnapshotStore,
    capture_layout,
    iter_leaves,
    layout_extent,
    restore_layout,
    __version__,
    load_config,
    save_config,
    get_config_path,
    PanesnapConfig,
)
from panesnap.providers import TmuxSurface


def get_store(config: PanesnapConfig) -> SnapshotStore:
    """Create SnapshotStore from config."""
    directory = Path(config.store.directory) if config.store.directory else None
    return SnapshotStore(directory)


def get_surface() -> TmuxSurface:
    surface = TmuxSurface()
    if not surface.is_available():
        raise RuntimeError("Not in a tmux session")
    return surface


def format_tree(tree: LayoutTree, indent: int = 0) -> list[str]:
    """Render a layout tree as indented text lines."""
    pad = "  " * indent
    if isinstance(tree, Leaf):
        r = tree.rect
        marks = ("*" if r.is_current else "") + ("-" if r.is_previous else "")
        return [f"{pad}{r.pane_id}{marks} {r.width}x{r.height} at {r.left},{r.top} {r.content_id}"]
    lines = [f"{pad}{tree.orientation.value} split ({len(tree.children)})"]
    for child in tree.children:
        lines.extend(format_tree(child, indent + 1))
    return lines


def cmd_save(args, config: PanesnapConfig):
    """Capture the current window layout."""
    try:
        surface = get_surface()
        tree = capture_layout(surface, config.capture.orientation)
        name = args.name or config.store.default_name
        path = get_store(config).save(name, tree)
        panes = sum(1 for _ in iter_leaves(tree))
        print(f"Saved {panes} panes as '{name}' ({path})")
        return 0

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_restore(args, config: PanesnapConfig):
    """Rebuild a saved layout in the current window."""
    try:
        surface = get_surface()
        name = args.name or config.store.default_name
        tree = get_store(config).load(name)
        placements = restore_layout(
            surface,
            tree,
            close_others=config.restore.close_others and not args.keep_panes,
            restore_views=config.restore.restore_views and not args.no_views,
        )
        extent = surface.workspace_extent()
        print(f"Restored '{name}': {len(placements)} panes at {extent.cols}x{extent.rows}")
        return 0

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_show(args, config: PanesnapConfig):
    """Print a saved layout, or the live one if no name is given."""
    try:
        if args.name:
            tree = get_store(config).load(args.name)
        else:
            tree = capture_layout(get_surface(), config.capture.orientation)

        if args.json:
            print(json.dumps(tree.to_dict(), indent=2))
        else:
            extent = layout_extent(tree)
            print(f"Extent: {extent.cols}x{extent.rows}")
            for line in format_tree(tree):
                print(line)
        return 0

    except Exception as e:
        if args.json:
            print(json.dumps({"status": "error", "message": str(e)}))
        else:
            print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_list(args, config: PanesnapConfig):
    """List saved snapshots."""
    store = get_store(config)
    names = store.names()
    if args.json:
        print(json.dumps({"directory": str(store.directory), "snapshots": names}, indent=2))
    elif not names:
        print(f"No snapshots in {store.directory}")
    else:
        for name in names:
            print(name)
    return 0


def cmd_delete(args, config: PanesnapConfig):
    """Delete a saved snapshot."""
    try:
        if get_store(config).delete(args.name):
            print(f"Deleted '{args.name}'")
            return 0
        print(f"No snapshot named '{args.name}'", file=sys.stderr)
        return 1

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_config(args, config: PanesnapConfig):
    """Configuration management."""
    config_path = get_config_path()

    if args.config_action == "path":
        print(config_path)

    elif args.config_action == "show":
        print(json.dumps(config.to_dict(), indent=2))

    elif args.config_action == "init":
        if config_path.exists() and not args.force:
            print(f"Config already exists: {config_path}")
            print("Use --force to overwrite")
        else:
            save_config(PanesnapConfig(), config_path)
            print(f"Created: {config_path}")

    elif args.config_action == "set":
        if not args.key or args.value is None:
            print("Usage: panesnap config set --key <key> --value <value>")
            print("Examples:")
            print("  panesnap config set --key capture.first_axis --value vertical")
            print("  panesnap config set --key restore.close_others --value false")
            return 1

        # Parse key path (e.g., "restore.close_others")
        parts = args.key.split(".")
        if len(parts) != 2:
            print("Key must be in format: section.field (e.g., restore.close_others)")
            return 1

        section, field = parts
        data = config.to_dict()

        if section not in data:
            print(f"Unknown section: {section}")
            return 1
        if field not in data[section]:
            print(f"Unknown field: {field} in section {section}")
            return 1

        value = args.value
        if value.lower() == "true":
            value = True
        elif value.lower() == "false":
            value = False
        elif value.isdigit():
            value = int(value)

        if (section, field) == ("capture", "first_axis"):
            value = args.value.lower()
            if value not in [o.value for o in Orientation]:
                print(f"Invalid value for {args.key}: {args.value} (horizontal or vertical)")
                return 1

        data[section][field] = value
        new_config = PanesnapConfig.from_dict(data)
        save_config(new_config, config_path)
        print(f"Set {args.key} = {value}")

    else:
        print("Usage: panesnap config [show|init|path|set]")

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="panesnap",
        description="Capture and restore split-pane layouts"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command")

    # save
    p_save = subparsers.add_parser("save", help="Capture the current layout")
    p_save.add_argument("name", nargs="?", help="Snapshot name (default from config)")

    # restore
    p_restore = subparsers.add_parser("restore", help="Rebuild a saved layout")
    p_restore.add_argument("name", nargs="?", help="Snapshot name (default from config)")
    p_restore.add_argument("--keep-panes", action="store_true",
                           help="Build inside the current pane instead of closing the others")
    p_restore.add_argument("--no-views", action="store_true",
                           help="Only rebuild panes and focus, not content and cursor")

    # show
    p_show = subparsers.add_parser("show", help="Print a layout")
    p_show.add_argument("name", nargs="?", help="Snapshot name (live layout if omitted)")
    p_show.add_argument("-j", "--json", action="store_true", help="JSON output")

    # list
    p_list = subparsers.add_parser("list", help="List saved snapshots")
    p_list.add_argument("-j", "--json", action="store_true", help="JSON output")

    # delete
    p_delete = subparsers.add_parser("delete", help="Delete a saved snapshot")
    p_delete.add_argument("name", help="Snapshot name")

    # config
    p_config = subparsers.add_parser("config", help="Configuration management")
    p_config.add_argument("config_action", nargs="?", default="show",
                          choices=["show", "init", "path", "set"])
    p_config.add_argument("--key", help="Config key (e.g., restore.close_others)")
    p_config.add_argument("--value", help="Config value")
    p_config.add_argument("--force", action="store_true", help="Force overwrite")

    return parser


def main(argv=None):
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Load config after logging so a broken file is reported
    config = load_config()

    commands = {
        "save": cmd_save,
        "restore": cmd_restore,
        "show": cmd_show,
        "list": cmd_list,
        "delete": cmd_delete,
        "config": cmd_config,
    }
    command = commands.get(args.command)
    if command is None:
        parser.print_help()
        return 0
    return command(args, config)


if __name__ == "__main__":
    sys.exit(main())
