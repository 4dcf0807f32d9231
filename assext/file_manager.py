"""Output directory layout and copying of the companion Spine files."""

from __future__ import annotations

import shutil
from pathlib import Path


def format_number(index: int, count: int) -> str:
    """Zero-pad an index: three digits when more than 99 items are made, else two."""
    return f"{index:03d}" if count > 99 else f"{index:02d}"


class FileManager:
    """Creates the numbered output directories and fills them with copies."""

    def __init__(self, output_dir: str | Path, spine_name: str, has_additional_files: bool) -> None:
        self.output_dir = Path(output_dir)
        self.spine_name = spine_name
        self.has_additional_files = has_additional_files

    def create_output_dirs(self, count: int) -> None:
        """Create the output root and, when companion files exist, one fresh directory per item."""
        self.output_dir.mkdir(parents=True, exist_ok=True)
        if not self.has_additional_files:
            return
        for index in range(1, count + 1):
            target = self.output_dir / f"{self.spine_name}_{format_number(index, count)}"
            if target.exists():
                shutil.rmtree(target)
            target.mkdir(parents=True)

    def copy_files(
        self,
        dir_name: str,
        atlas_path: str | Path,
        skel_path: str | Path,
        has_atlas: bool,
        has_skel: bool,
    ) -> None:
        """Copy the atlas and skeleton files that exist into the named output directory."""
        if not self.has_additional_files:
            return
        target_dir = self.output_dir / dir_name
        if has_atlas:
            shutil.copy(atlas_path, target_dir / f"{self.spine_name}.atlas")
        if has_skel:
            shutil.copy(skel_path, target_dir / f"{self.spine_name}.skel")

    def copy_spine_files(
        self,
        dir_name: str,
        atlas_path: str | Path,
        png_path: str | Path,
        skel_path: str | Path,
    ) -> None:
        """Copy both the atlas and the skeleton; the image is written separately."""
        self.copy_files(dir_name, atlas_path, skel_path, True, True)