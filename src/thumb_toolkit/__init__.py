"""Top-level package for the thumbnail toolkit.

Provides subpackages:
- thumb_toolkit.core – immutable models (rules, plans, specs) and schemas
- thumb_toolkit.geometry – pure dimension, fit and watermark resolvers
- thumb_toolkit.compositing – canvas compositor and raster backends
- thumb_toolkit.generator – per-upload thumbnail generation
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            content = pyproject.read_text()
        except OSError:
            content = ""
        for line in content.splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.3.1"
                return line.split("=")[1].strip().strip('"').strip("'")

    # Fallback to importlib.metadata for installed package
    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("thumb_toolkit")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
