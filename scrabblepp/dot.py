"""Writing Graphviz reports and turning them into images."""

from __future__ import annotations

import subprocess
from pathlib import Path


def render_dot(source: str, name: str, directory: str | Path | None = None) -> Path:
    """Write ``source`` to ``<name>.dot`` and ask Graphviz for ``<name>.png``.

    The image is produced only when the ``dot`` program is available; the
    path of the written ``.dot`` file is returned either way.
    """
    folder = Path(directory) if directory is not None else Path.cwd()
    dot_path = folder / f"{name}.dot"
    png_path = folder / f"{name}.png"
    dot_path.write_text(source, encoding="utf-8")
    try:
        subprocess.run(
            ["dot", "-Tpng", str(dot_path), "-o", str(png_path)],
            check=False,
            capture_output=True,
        )
    except FileNotFoundError:
        pass
    return dot_path