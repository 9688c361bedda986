"""Generate static images for the documentation."""

from pathlib import Path

from hexcube import RenderParams, render_mpl

OUT = Path(__file__).resolve().parent


def generate_docs_images() -> None:
    """Write every documentation figure into this directory."""
    render_mpl("HEXAGON\nFONT", OUT / "hexagon_font.svg", width=800, seed=0)
    print(f"  wrote {OUT / 'hexagon_font.svg'}")

    render_mpl(
        "ABCDEFGHIJKLM\nNOPQRSTUVWXYZ\n0123456789*", OUT / "alphabet.svg",
        width=1200, hexagon_size=50, hexagon_gap=3, seed=0,
    )
    print(f"  wrote {OUT / 'alphabet.svg'}")

    gold = RenderParams(
        hexagon_size=120, thick_stroke=6, thick_colour="#FFAA00",
        grid_opacity=0.4,
    )
    render_mpl(
        "HEX", OUT / "hex_gold.svg", params=gold, width=700,
        include_background=False,
    )
    print(f"  wrote {OUT / 'hex_gold.svg'}")


if __name__ == "__main__":
    generate_docs_images()
