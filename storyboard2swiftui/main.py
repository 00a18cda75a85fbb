# storyboard2swiftui/main.py
from __future__ import annotations

import argparse
import logging
import os
import shutil
import sys
from datetime import datetime
from typing import List, Optional

from lxml import etree

from .config import ConverterConfig
from .parser.navigation_parser import (
    build_navigation_flow,
    get_navigation_elements,
    get_tab_bar_controllers,
    get_tab_navigation_elements,
    has_navigation_controller,
)
from .parser.storyboard_parser import ParseError, find_path, iter_elements, parse_storyboard
from .translator.generator import (
    OutputUnit,
    generate_flat_units,
    generate_flow_units,
    generate_tab_units,
)


logger = logging.getLogger(__name__)

MODE_TAB = "tab"
MODE_FLOW = "flow"
MODE_FLAT = "flat"


# ============================
# 1. 出力先
# ============================

def make_destination_folder(out_root: Optional[str], config: ConverterConfig) -> str:
    """<out>/StoryboardConverter_<timestamp> を作る."""
    if not out_root:
        downloads = os.path.join(os.path.expanduser("~"), "Downloads")
        out_root = downloads if os.path.isdir(downloads) else os.getcwd()
    stamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    folder = os.path.join(out_root, f"{config.output_folder_prefix}{stamp}")
    os.makedirs(folder, exist_ok=True)
    return folder


def write_unit(directory: str, unit: OutputUnit) -> bool:
    """1 ファイル書き出す。失敗してもログに残して False を返すだけ."""
    path = os.path.join(directory, unit.file_name)
    try:
        os.makedirs(directory, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(unit.text)
    except OSError as e:
        logger.error("Failed to create file %s: %s", path, e)
        return False
    logger.info("Generated SwiftUI: %s", path)
    return True


# ============================
# 2. モード判定と変換
# ============================

def detect_mode(root) -> str:
    if get_tab_bar_controllers(root):
        return MODE_TAB
    if has_navigation_controller(root):
        return MODE_FLOW
    return MODE_FLAT


def _log_extracted_elements(root) -> None:
    """viewController ごとに、配下の XML 要素をデバッグ出力する."""
    if not logger.isEnabledFor(logging.DEBUG):
        return
    vcs = find_path(root, "scenes", "scene", "objects", "viewController")
    for i, vc in enumerate(vcs, 1):
        logger.debug("ViewController %d XML Structure:", i)
        for el in iter_elements(vc):
            xml = etree.tostring(el, pretty_print=True, encoding="unicode")
            logger.debug("Component Type: %s\n%s", el.tag, xml)


def convert_root(root, config: Optional[ConverterConfig] = None) -> List[OutputUnit]:
    """パース済みの storyboard から、モードに応じて出力単位を組み立てる."""
    config = config or ConverterConfig()
    _log_extracted_elements(root)

    mode = detect_mode(root)
    if mode == MODE_TAB:
        logger.info("Tab bar controller detected. Generating SwiftUI code for tab bar...")
        return generate_tab_units(get_tab_navigation_elements(root), config)

    if mode == MODE_FLOW:
        flow = build_navigation_flow(get_navigation_elements(root), config.flow_segue_kinds)
        if flow is not None:
            return generate_flow_units(flow, config)
        logger.warning("Navigation flow could not be built; falling back to flat views")

    return generate_flat_units(root, config)


def convert_storyboard(
    file_path: str,
    out_root: Optional[str] = None,
    config: Optional[ConverterConfig] = None,
    copy_input: bool = True,
) -> int:
    """storyboard / xib を変換して書き出す。戻り値は終了コード."""
    config = config or ConverterConfig()
    try:
        root = parse_storyboard(file_path)
    except ParseError as e:
        logger.error("Failed to parse storyboard: %s", e)
        return 1

    units = convert_root(root, config)
    if not units:
        logger.warning("No SwiftUI files generated")
        return 0

    destination = make_destination_folder(out_root or config.output_root, config)
    if copy_input:
        try:
            copied = shutil.copy(file_path, destination)
            logger.info("File added successfully to %s", copied)
        except OSError as e:
            logger.error("Error adding file: %s", e)

    generated = os.path.join(destination, config.generated_dir_name)
    results = [write_unit(generated, u) for u in units]
    return 0 if all(results) else 2


# ============================
# 3. CLI
# ============================

def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Storyboard/XIB → SwiftUI converter")
    parser.add_argument(
        "--input",
        required=False,
        help="Path to the .storyboard or .xib file (prompted when omitted)",
    )
    parser.add_argument(
        "--out",
        required=False,
        help="Directory in which the StoryboardConverter_<timestamp> folder is created "
             "(default: ~/Downloads, or the current directory)",
    )
    parser.add_argument(
        "--flow-segue-kind",
        dest="flow_segue_kinds",
        action="append",
        help="Segue kind that adds a screen to the navigation flow "
             "(repeatable; replaces the default push/show/presentation/model)",
    )
    parser.add_argument(
        "--no-copy",
        action="store_true",
        help="Do not copy the input file next to the generated files",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log extracted components and XML elements",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    file_path = args.input
    if not file_path:
        file_path = input("Enter the path to your storyboard/xib file to migrate: ").strip()
    if not file_path:
        logger.error("No file selected.")
        return 1

    config = ConverterConfig()
    if args.flow_segue_kinds:
        config = ConverterConfig(flow_segue_kinds=args.flow_segue_kinds)

    return convert_storyboard(
        file_path,
        out_root=args.out,
        config=config,
        copy_input=not args.no_copy,
    )


if __name__ == "__main__":
    sys.exit(main())
