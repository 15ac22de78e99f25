"""Module: cli.py

Author: Michael Economou
Date: 2026-10-16

Command-line entry point.

Usage:
    python -m autolayername rename scene.json -o renamed.json --instance
    python -m autolayername rename scene.json --dry-run
    python -m autolayername classify --type FRAME "Frame 2" "Header"

The rename command runs the same controller the editor integration uses,
with a file-backed host: the selection comes from the scene file and
notifications are printed. Options not given on the command line fall back
to the saved settings, and the merged options are saved for the next run
unless --dry-run is given.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from autolayername.config import APP_NAME, APP_VERSION, NOTIFY_RENAME_FAILED
from autolayername.controllers.plugin_controller import PluginController
from autolayername.domain.errors import AutoLayerNameError, UnknownNodeKindError
from autolayername.domain.name_classifier import is_host_or_plugin_generated_name
from autolayername.domain.node_types import NodeKind
from autolayername.infra.scene_document import SceneDocument, read_document, write_document
from autolayername.infra.settings_store import SettingsStore
from autolayername.models.scene_node import SceneNode
from autolayername.utils.logging.logger_factory import get_cached_logger
from autolayername.utils.logging.logger_setup import init_logging

logger = get_cached_logger(__name__)

# CLI flag -> options record key
_OPTION_FLAGS = {
    "locked": "locked",
    "hidden": "hidden",
    "instance": "instance",
    "rename_custom_names": "renameCustomNames",
    "show_spacing": "showSpacing",
    "pascal_case": "usePascalCase",
}


class DocumentHost:
    """HostPort backed by a scene document loaded from disk."""

    def __init__(self, document: SceneDocument, stream=None):
        self.document = document
        self.stream = stream or sys.stdout
        self.skip_invisible_instance_children = True
        self.messages: list[tuple[str, bool]] = []
        self._selection = document.selection()

    @property
    def selection(self) -> list[SceneNode]:
        return self._selection

    def notify(self, message: str, error: bool = False) -> None:
        self.messages.append((message, error))
        prefix = "error: " if error else ""
        print(f"{prefix}{message}", file=self.stream)

    def emit(self, event: str, payload: Any) -> None:
        logger.debug("[DocumentHost] emit %s %r", event, payload, extra={"dev_only": True})

    def show_ui(self, size: tuple[int, int], data: dict[str, Any]) -> None:
        logger.debug("[DocumentHost] show_ui %s", size, extra={"dev_only": True})

    def resize(self, width: int, height: int) -> None:
        logger.debug("[DocumentHost] resize %dx%d", width, height, extra={"dev_only": True})


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Generate layer names for design scene documents",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug output")
    subparsers = parser.add_subparsers(dest="command", required=True)

    rename = subparsers.add_parser("rename", help="Rename layers in a scene document")
    rename.add_argument("document", type=Path, help="Scene document (JSON)")
    rename.add_argument("-o", "--output", type=Path, help="Write the result here (default: in place)")
    rename.add_argument(
        "--dry-run",
        action="store_true",
        help="List changes without writing the document or saving options",
    )
    rename.add_argument("--config-dir", type=Path, help="Directory for saved settings")
    rename.add_argument("--locked", action=argparse.BooleanOptionalAction, default=None, help="Include locked layers")
    rename.add_argument("--hidden", action=argparse.BooleanOptionalAction, default=None, help="Include hidden layers")
    rename.add_argument("--instance", action=argparse.BooleanOptionalAction, default=None, help="Rename inside component instances")
    rename.add_argument(
        "--rename-custom-names",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Also overwrite hand-written names",
    )
    rename.add_argument("--show-spacing", action=argparse.BooleanOptionalAction, default=None, help="Append auto-layout spacing")
    rename.add_argument("--pascal-case", action=argparse.BooleanOptionalAction, default=None, help="Use PascalCase names")

    classify = subparsers.add_parser("classify", help="Check whether names count as generated")
    classify.add_argument("names", nargs="+", help="Layer names to check")
    classify.add_argument("--type", dest="kind", default="FRAME", help="Node kind (default: FRAME)")
    classify.add_argument("--auto-rename", action="store_true", help="TEXT only: auto-rename flag")

    return parser


def _snapshot(nodes: Sequence[SceneNode]) -> dict[str, str]:
    return {node.id: node.name for root in nodes for node in root.walk()}


async def run_rename(args: argparse.Namespace, stream=None) -> int:
    stream = stream or sys.stdout
    document = read_document(args.document)
    host = DocumentHost(document, stream=stream)
    store = SettingsStore(config_dir=args.config_dir) if args.config_dir else SettingsStore()
    controller = PluginController(host, store)

    saved = await controller.load_saved_options()
    for flag, key in _OPTION_FLAGS.items():
        value = getattr(args, flag)
        if value is not None:
            saved[key] = value

    before = _snapshot(host.selection)
    # A dry run leaves both the document and the saved options untouched
    has_renamed = await controller.on_rename(saved, persist=not args.dry_run)
    if (NOTIFY_RENAME_FAILED, True) in host.messages:
        return 1

    for root in host.selection:
        for node in root.walk():
            old = before.get(node.id)
            if old is not None and old != node.name:
                print(f"  {node.id}: {old!r} -> {node.name!r}", file=stream)

    if not args.dry_run and (args.output or has_renamed):
        target = args.output or args.document
        write_document(document, target)
        logger.info("[CLI] Wrote %s", target)
    # Per-node failures were reported but the rest of the run is kept
    return 1 if any(error for _, error in host.messages) else 0


def run_classify(args: argparse.Namespace, stream=None) -> int:
    stream = stream or sys.stdout
    try:
        kind = NodeKind.parse(args.kind)
    except UnknownNodeKindError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    for index, name in enumerate(args.names):
        node = SceneNode(id=f"cli:{index}", name=name, type=kind.value, auto_rename=args.auto_rename)
        verdict = "generated" if is_host_or_plugin_generated_name(node) else "custom"
        print(f"{name}\t{verdict}", file=stream)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    init_logging(APP_NAME, verbose=args.verbose)

    try:
        if args.command == "rename":
            return asyncio.run(run_rename(args))
        return run_classify(args)
    except AutoLayerNameError as e:
        logger.error("[CLI] %s", e)
        print(f"error: {e}", file=sys.stderr)
        return 2
