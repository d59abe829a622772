from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Paths:
    package_root: Path
    data_dir: Path
    schema_dir: Path
    decks_dir: Path


def get_paths() -> Paths:
    # src/rawdeal/paths.py -> parent: rawdeal (data ships inside the package)
    package_root = Path(__file__).resolve().parent
    data_dir = package_root / "data"
    return Paths(
        package_root=package_root,
        data_dir=data_dir,
        schema_dir=data_dir / "schemas",
        decks_dir=data_dir / "decks",
    )
