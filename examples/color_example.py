"""
Color a small map from Python and print the assignment.

Run from the repository root:
    python examples/color_example.py
"""
from pathlib import Path

from map_colorer import color_map, load_map, render_svg

HERE = Path(__file__).parent


def main():
    for name in ("europe.txt", "five_cantons.txt"):
        region_map = load_map(HERE / name)
        result = color_map(region_map, label=name)

        print(f"{name}: {result.status.value}")
        for region in result.regions:
            print(f"  {region.name:<12} color {region.color}")

        svg_path = HERE / f"{name}.svg"
        svg_path.write_text(render_svg(result))
        print(f"  wrote {svg_path}")


if __name__ == "__main__":
    main()
