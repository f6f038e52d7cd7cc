"""
Module: controller

Purpose:
    Coordinate the tiling pipeline.
    Load -> Compute placements -> Draw surface -> Export

    The controller owns the only mutable state: the current
    SourceDocument, LayoutParameters and RenderSurface. Every change
    triggers a full recompute and redraw.

Key Classes:
    - TilerController: Pipeline coordinator

Dependencies:
    - svg_tiler.loading: Source loading
    - svg_tiler.layout: Placement computation
    - svg_tiler.render: Render surface
    - svg_tiler.output: Exporters
    - concurrent.futures (std): Background raster/PDF exports

Used By:
    - svg_tiler.gui.main_window: GUI integration
"""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from typing import Any, Callable, List, Optional, Tuple

from svg_tiler.config import TilerConfig
from svg_tiler.core.models import SourceDocument

from .loading import InvalidFormat, LoadFailure, load_default, load_upload
from .layout import LayoutParameters, TilePlacement, compute_placements, content_bounds
from .render import ExportPrecondition, RenderSnapshot, RenderSurface
from .output import ExportArtifact, export_document, export_raster, export_vector

logger = logging.getLogger(__name__)

REJECTION_NOTICE = "Please upload a valid SVG file."


class TilerController:
    """
    Owns the current document, parameters and render surface.

    Parameter or document changes rebuild the surface from scratch.
    Exports run against a snapshot captured when they are requested;
    raster and PDF exports can run on a background worker.

    Attributes:
        config: Application configuration

    Example:
        >>> controller = TilerController()
        >>> controller.load_default()
        True
        >>> controller.set_parameters(copies=6, rows=2)
        >>> len(controller.placements)
        12
        >>> controller.export_svg().filename
        'export.svg'
    """

    def __init__(
        self,
        config: Optional[TilerConfig] = None,
        *,
        on_notice: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.config = config or TilerConfig()
        self._document: Optional[SourceDocument] = None
        self._parameters = LayoutParameters()
        self._surface = RenderSurface(self.config.viewport_width, self.config.viewport_height)
        self._placements: Tuple[TilePlacement, ...] = ()
        self._listeners: List[Callable[[], None]] = []
        self._on_notice = on_notice
        self._executor: Optional[ThreadPoolExecutor] = None

    # ─────────────────────────────────────────────────────────────────────────
    # State
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def document(self) -> Optional[SourceDocument]:
        return self._document

    @property
    def parameters(self) -> LayoutParameters:
        return self._parameters

    @property
    def surface(self) -> RenderSurface:
        return self._surface

    @property
    def placements(self) -> Tuple[TilePlacement, ...]:
        """Placements drawn by the last recompute."""
        return self._placements

    def add_listener(self, callback: Callable[[], None]) -> None:
        """Register a callback run after every redraw."""
        self._listeners.append(callback)

    def set_notice_handler(self, callback: Optional[Callable[[str], None]]) -> None:
        """Set the callback that shows user-facing notices."""
        self._on_notice = callback

    # ─────────────────────────────────────────────────────────────────────────
    # Loading
    # ─────────────────────────────────────────────────────────────────────────

    def load_default(self) -> bool:
        """
        Load the bundled default asset.

        On failure the error is logged and any prior document is kept.

        Returns:
            True if a new document was loaded
        """
        try:
            document = load_default(self.config.default_asset_path)
        except LoadFailure as e:
            logger.error(f"Error loading default SVG: {e}")
            return False

        self._set_document(document)
        return True

    def load_upload(self, path: Path, mime_type: Optional[str] = None) -> bool:
        """
        Replace the current document with a user-supplied file.

        Rejected files leave the current document unchanged and send
        a notice to the ``on_notice`` callback.

        Returns:
            True if the file was accepted
        """
        try:
            document = load_upload(path, mime_type)
        except InvalidFormat as e:
            logger.warning(f"Rejected upload: {e}")
            self._notify(REJECTION_NOTICE)
            return False

        self._set_document(document)
        return True

    def _set_document(self, document: SourceDocument) -> None:
        self._document = document
        self.recompute()

    # ─────────────────────────────────────────────────────────────────────────
    # Parameters and redraw
    # ─────────────────────────────────────────────────────────────────────────

    def set_parameters(self, **changes: Any) -> None:
        """
        Change one or more layout parameters and redraw.

        Raises:
            TypeError: Unknown parameter name
            ValueError: Out-of-range value (state is unchanged)
        """
        self._parameters = self._parameters.with_changes(**changes)
        self.recompute()

    def update_parameters(self, parameters: LayoutParameters) -> None:
        """Replace the whole parameter set and redraw."""
        self._parameters = parameters
        self.recompute()

    def resize_viewport(self, width: int, height: int) -> None:
        """Resize the render surface and redraw."""
        self._surface.resize(width, height)
        self.recompute()

    def recompute(self) -> None:
        """Recompute all placements and rebuild the surface from scratch."""
        if self._document is None:
            self._placements = ()
            self._surface.reset()
            return

        placements = compute_placements(self._document, self._parameters)
        self._surface.apply(self._document, placements)
        self._placements = tuple(placements)

        bounds = content_bounds(self._document, placements)
        if bounds is not None:
            left, top, right, bottom = bounds
            logger.debug(
                f"Redrew {len(placements)} tiles spanning "
                f"({left:.1f}, {top:.1f})-({right:.1f}, {bottom:.1f}) "
                f"on {self._surface.width}x{self._surface.height}: {self._parameters.describe()}"
            )

        for callback in list(self._listeners):
            callback()

    # ─────────────────────────────────────────────────────────────────────────
    # Export
    # ─────────────────────────────────────────────────────────────────────────

    def export_svg(self) -> Optional[ExportArtifact]:
        """Vector export, or None if nothing is loaded."""
        snapshot = self._take_snapshot()
        if snapshot is None:
            return None
        return export_vector(snapshot)

    def export_png(self) -> Optional[ExportArtifact]:
        """Raster export, or None if nothing is loaded."""
        snapshot = self._take_snapshot()
        if snapshot is None:
            return None
        return export_raster(snapshot)

    def export_pdf(self) -> Optional[ExportArtifact]:
        """PDF export, or None if nothing is loaded."""
        snapshot = self._take_snapshot()
        if snapshot is None:
            return None
        return export_document(snapshot, self.config.pdf_page)

    def export_png_async(self) -> "Future[Optional[ExportArtifact]]":
        """Raster export on the background worker."""
        return self._submit(export_raster, self._take_snapshot())

    def export_pdf_async(self) -> "Future[Optional[ExportArtifact]]":
        """PDF export on the background worker."""
        return self._submit(export_document, self._take_snapshot(), self.config.pdf_page)

    def save_artifact(self, artifact: ExportArtifact, directory: Optional[Path] = None) -> Path:
        """Write an artifact to ``directory``, the configured output dir, or cwd."""
        target = directory or self.config.output_dir or Path.cwd()
        return artifact.save(Path(target))

    def shutdown(self, wait: bool = True) -> None:
        """Stop the export worker. In-flight exports finish if ``wait``."""
        if self._executor is not None:
            self._executor.shutdown(wait=wait)
            self._executor = None

    def _take_snapshot(self) -> Optional[RenderSnapshot]:
        try:
            return self._surface.snapshot()
        except ExportPrecondition:
            logger.debug("Export ignored: no document loaded")
            return None

    def _submit(
        self,
        exporter: Callable[..., ExportArtifact],
        snapshot: Optional[RenderSnapshot],
        *args: Any,
    ) -> "Future[Optional[ExportArtifact]]":
        if snapshot is None:
            future: Future[Optional[ExportArtifact]] = Future()
            future.set_result(None)
            return future

        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="svg-tiler-export")
        return self._executor.submit(_run_export, exporter, snapshot, *args)

    def _notify(self, message: str) -> None:
        if self._on_notice is not None:
            self._on_notice(message)


def _run_export(
    exporter: Callable[..., ExportArtifact],
    snapshot: RenderSnapshot,
    *args: Any,
) -> ExportArtifact:
    """Run an exporter on the worker thread, logging failures before re-raising."""
    try:
        return exporter(snapshot, *args)
    except Exception:
        logger.exception(f"Export failed in {exporter.__name__}")
        raise
