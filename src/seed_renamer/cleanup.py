"""Post-rename cleanup of bootstrap files and lockfile regeneration."""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Callable, Sequence

from .manifest import MANIFEST_LOCATIONS

__all__ = [
    "Runner",
    "install_command",
    "next_steps",
    "regenerate_lockfile",
    "remove_bootstrap_files",
]


LOGGER = logging.getLogger(__name__)

Runner = Callable[..., object]

NPM_INSTALL = ("npm", "install")
DOTNET_RESTORE = ("dotnet", "restore")


def install_command(root: Path, *, dotnet: bool) -> tuple[str, ...] | None:
    """Return the command that regenerates dependencies, if there is anything to do."""

    if dotnet:
        return DOTNET_RESTORE
    if any((root / location).is_file() for location in MANIFEST_LOCATIONS):
        return NPM_INSTALL
    return None


def regenerate_lockfile(
    root: Path,
    *,
    dotnet: bool = False,
    runner: Runner = subprocess.run,
) -> bool:
    """Run the package manager so the lockfile picks up the new name.

    Failures are reported as a warning only; the rename itself is already
    complete at this point.
    """

    command = install_command(root, dotnet=dotnet)
    if command is None:
        LOGGER.debug("No manifest found in %s, skipping dependency install", root)
        return False

    LOGGER.info("Regenerating lockfile with '%s'...", " ".join(command))
    try:
        runner(list(command), cwd=root, check=True)
    except (subprocess.CalledProcessError, OSError) as exc:
        LOGGER.warning(
            "Warning: could not run '%s' (%s). Run it manually.", " ".join(command), exc
        )
        return False
    return True


def remove_bootstrap_files(root: Path) -> list[Path]:
    """Delete the one-shot bootstrap files and return what was removed.

    ``scripts/init`` always goes; ``scripts`` goes when left empty; the root
    ``package.json`` goes only when a nested ``src/package.json`` exists.
    """

    removed: list[Path] = []

    init_dir = root / "scripts" / "init"
    if init_dir.is_dir():
        LOGGER.info("Removing initialization scripts directory...")
        shutil.rmtree(init_dir)
        removed.append(init_dir)

    scripts_dir = root / "scripts"
    if scripts_dir.is_dir() and not any(scripts_dir.iterdir()):
        LOGGER.info("Removing empty scripts directory...")
        scripts_dir.rmdir()
        removed.append(scripts_dir)

    root_manifest, nested_manifest = (root / location for location in MANIFEST_LOCATIONS)
    if nested_manifest.is_file() and root_manifest.is_file():
        LOGGER.info("Removing root package.json (src/package.json exists)...")
        root_manifest.unlink()
        removed.append(root_manifest)

    return removed


def next_steps(name: str, class_name: str, *, dotnet: bool, root: Path) -> Sequence[str]:
    """Return the checklist shown once the project is ready."""

    steps: list[str] = []
    if dotnet:
        steps.append("Update project dependencies (run 'dotnet restore')")
        steps.append(f"Review your Terraform resources in {class_name}/terraform/main.tf")
    else:
        steps.append("Update package-lock.json (run 'npm install')")
        if (root / "src").is_dir():
            steps.append("Review your Terraform resources in src/terraform/main.tf")
        else:
            steps.append("Review your project structure and configuration")
    steps.append(
        "Update README.md with a description of your service's purpose, a new "
        "title and introduction, and without the 'Renaming the Seed Project' section"
    )

    lines = [f"All done! Your project '{name}' is ready to use.", "Remember to:"]
    lines.extend(f"{index}. {step}" for index, step in enumerate(steps, start=1))
    return lines
