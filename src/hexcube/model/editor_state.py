"""Mutable session state for a hexagon-font editing session.

Holds the text being rendered, the current :class:`RenderParams`, and
the two view flags of the editor (edge guide visibility and whether
exports include the background).  All changes go through explicit
update methods; callers that cache derived data (such as a grid
layout) compare :attr:`EditorState.revision` to decide when to
recompute.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from hexcube.model.render_params import RenderParams

logger = logging.getLogger(__name__)

DEFAULT_TEXT = "HEXAGON FONT"


@dataclass
class EditorState:
    """Current text, parameters, and view flags of one editor session.

    Attributes:
        text: Raw input text; may contain line breaks.
        params: Current render parameters.
        guide_visible: Whether the edge guide is open.
        include_background: Whether exports paint the background.
        revision: Incremented on every change that affects rendering.
    """

    text: str = DEFAULT_TEXT
    params: RenderParams = field(default_factory=RenderParams)
    guide_visible: bool = False
    include_background: bool = True
    revision: int = 0

    def set_text(self, text: str) -> None:
        """Replace the input text."""
        if text != self.text:
            self.text = text
            self.revision += 1

    def update_params(self, **changes: object) -> RenderParams:
        """Replace individual parameters and return the new params.

        Raises:
            TypeError: If a keyword does not name a
                :class:`RenderParams` field.
            ValueError: If the resulting parameters are invalid.  The
                current parameters are left unchanged.
        """
        new = replace(self.params, **changes)
        if new != self.params:
            self.params = new
            self.revision += 1
            logger.debug("Render parameters updated: %s", sorted(changes))
        return new

    def toggle_guide(self) -> bool:
        """Open or close the edge guide and return the new visibility."""
        self.guide_visible = not self.guide_visible
        return self.guide_visible

    def set_include_background(self, include: bool) -> None:
        """Set whether exports paint the background."""
        self.include_background = bool(include)

    def reset(self) -> None:
        """Restore default text and parameters."""
        self.text = DEFAULT_TEXT
        self.params = RenderParams()
        self.guide_visible = False
        self.include_background = True
        self.revision += 1
        logger.info("Editor state has been reset.")
