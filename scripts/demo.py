import sys
from pathlib import Path

ROOT = Path(__file__).parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from ratingstar.config import RatingStarConfig
from ratingstar.layout import RatingBar
from ratingstar.visualize import render_png


def main() -> None:
    out_dir = ROOT / "exports"
    for rating in (0.0, 1.5, 3.25, 5.0):
        bar = RatingBar(RatingStarConfig(rating=rating, enable_select_rating=True))
        bar.layout(220, 36, padding=(4.0, 2.0, 4.0, 2.0))
        errors = [err for star in bar.stars for err in star.validate()]
        if errors:
            raise SystemExit("\n".join(errors))

        path = render_png(bar.render(), out_dir / f"rating_{rating:.2f}.png", 220, 36)
        print(f"rating {rating}: {bar.star_count} stars, {len(bar.render())} ops -> {path}")

    bar = RatingBar(RatingStarConfig(enable_select_rating=True))
    bar.layout(220, 36)
    box = bar.stars[2].bounding_box()
    x, y = (box.left + box.right) / 2, (box.top + box.bottom) / 2
    print("click third star:", bar.click(x, y))
    print("click again:", bar.click(x, y))


if __name__ == "__main__":
    main()
