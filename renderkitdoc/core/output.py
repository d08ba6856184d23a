"""
Output Tracker
==============

The only filesystem I/O of a generation run. Lays out

    <output_directory>/renderkitdoc/                  index.html, stylesheet.css,
                                                      allrenderers-frame.html
    <output_directory>/renderkitdoc/<renderKitId>/    renderkit-summary.html,
                                                      one page per renderer

and records every path it creates, copies or writes, in that order.
"""

from typing import Any, Callable, List
from pathlib import Path

from renderkitdoc.config.logging import get_logger
from renderkitdoc.core.exceptions import OutputError
from renderkitdoc.models.schemas import FileKind, GeneratedPage, TouchedFile

logger = get_logger(__name__)

BASE_DIRECTORY_NAME = "renderkitdoc"
STATIC_ASSETS = ("index.html", "stylesheet.css")
PACKAGED_ASSET_DIR = Path(__file__).parent / "rendering" / "static"

# Maps a logical asset name to its bytes
AssetSource = Callable[[str], bytes]


def directory_asset_source(directory: Path) -> AssetSource:
    """Asset source reading assets from a directory."""

    def read_asset(name: str) -> bytes:
        return (directory / name).read_bytes()

    return read_asset


packaged_asset_source = directory_asset_source(PACKAGED_ASSET_DIR)


class OutputTracker:
    """Writes documentation files and keeps the ordered list of touched paths."""

    def __init__(
        self, output_directory: Path, render_kit_id: str, asset_source: AssetSource = packaged_asset_source
    ) -> None:
        self.base_directory = Path(output_directory) / BASE_DIRECTORY_NAME
        self.render_kit_directory = self.base_directory / render_kit_id
        self.asset_source = asset_source
        self.logger: Any = logger.bind(render_kit_id=render_kit_id)  # structlog.BoundLoggerBase
        self._touched: List[TouchedFile] = []

    @property
    def files_touched(self) -> List[TouchedFile]:
        return list(self._touched)

    @property
    def paths(self) -> List[Path]:
        return [touched.path for touched in self._touched]

    def ensure_layout(self) -> None:
        """Create the base and render-kit directories, recording the ones created."""
        for directory in (self.base_directory, self.render_kit_directory):
            if directory.exists():
                continue
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                self.logger.error("Directory creation failed", path=str(directory), error=str(e))
                raise OutputError(f"Cannot create directory {directory}: {e}") from e
            self._record(directory, FileKind.DIRECTORY)

    def copy_assets(self) -> None:
        """Copy the static assets byte-for-byte into the base directory."""
        for name in STATIC_ASSETS:
            target = self.base_directory / name
            try:
                target.write_bytes(self.asset_source(name))
            except OSError as e:
                self.logger.error("Asset copy failed", asset=name, error=str(e))
                raise OutputError(f"Cannot copy asset {name} to {target}: {e}") from e
            self._record(target, FileKind.COPIED_ASSET)

    def write_base_document(self, page: GeneratedPage) -> Path:
        """Write a document next to the static assets."""
        return self._write(self.base_directory / page.filename, page.html)

    def write_render_kit_document(self, page: GeneratedPage) -> Path:
        """Write a document into the render-kit directory."""
        return self._write(self.render_kit_directory / page.filename, page.html)

    def _write(self, target: Path, html: str) -> Path:
        try:
            target.write_text(html, encoding="utf-8")
        except OSError as e:
            self.logger.error("Document write failed", path=str(target), error=str(e))
            raise OutputError(f"Cannot write {target}: {e}") from e
        self._record(target, FileKind.GENERATED_DOCUMENT)
        return target

    def _record(self, path: Path, kind: FileKind) -> None:
        self.logger.debug("File touched", path=str(path), kind=kind.value)
        self._touched.append(TouchedFile(path=path, kind=kind))
