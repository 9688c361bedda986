"""Demo script: render text as a hexagon-cube mosaic with matplotlib."""

import logging
import sys
from pathlib import Path

from hexcube import (
    EditorState,
    layout,
    render_guide_interactive,
    render_mpl,
    render_mpl_animation,
    save_params,
    setup_logging,
)

OUTPUT = Path(__file__).resolve().parent


def main():
    setup_logging(logging.INFO)

    state = EditorState()
    state.set_text("HEXAGON\nFONT 2026")
    state.update_params(flicker_speed=1.5, flicker_amount=30)

    grid = layout(state.text, state.params.hexagon_size, 1000)
    print(f"Laid out {len(grid)} cells in {grid.columns} columns, height {grid.height:.1f}")

    render_mpl(state.text, OUTPUT / "hexagon_font.svg", params=state.params, seed=1)
    render_mpl_animation(
        state.text, OUTPUT / "hexagon_font.gif", params=state.params,
        duration=2.0, fps=15, seed=1,
    )
    save_params(OUTPUT / "hexagon_font.json", state.params, text=state.text)

    if "--guide" in sys.argv:
        rotation = render_guide_interactive()
        print(f"Guide closed at rotation {rotation}")


if __name__ == "__main__":
    main()
