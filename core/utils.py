"""Path and formatting utilities."""

import os
import sys
from pathlib import Path


def format_file_size(size_bytes: int) -> str:
    """Format bytes to human-readable string."""
    if size_bytes < 0:
        return "0 B"
    if size_bytes < 1024:
        return f"{size_bytes} B"
    if size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.1f} KB"
    if size_bytes < 1024 * 1024 * 1024:
        return f"{size_bytes / (1024 * 1024):.1f} MB"
    return f"{size_bytes / (1024 * 1024 * 1024):.2f} GB"


def get_output_path(input_path: str, suffix: str = "_merged") -> str:
    """Generate an output path that doesn't overwrite an existing file."""
    p = Path(input_path)
    base = p.stem + suffix
    ext = p.suffix
    output = p.parent / (base + ext)

    counter = 1
    while output.exists():
        output = p.parent / (f"{base}({counter}){ext}")
        counter += 1

    return str(output)


def get_asset_path(relative_path: str) -> str:
    """Get absolute path to an asset, works for dev and PyInstaller."""
    if getattr(sys, "frozen", False):
        base_path = sys._MEIPASS
    else:
        base_path = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    return os.path.join(base_path, relative_path)
