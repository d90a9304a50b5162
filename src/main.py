"""Entry point for the keyfx keyboard preview."""

from __future__ import annotations

import argparse
import logging

from keyfx.config import LOG_LEVEL
from keyfx.host import EFFECTS, create_effect
from keyfx.preview import KeyboardPreview


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Preview keyboard lighting effects.")
    parser.add_argument("--effect", choices=sorted(EFFECTS), default="heatmap")
    parser.add_argument(
        "--blink-logo",
        action="store_true",
        help="heatmap only: blink the logo keys instead of tracking them",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=LOG_LEVEL,
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    options = {"blink_logo": True} if args.effect == "heatmap" and args.blink_logo else {}
    preview = KeyboardPreview(create_effect(args.effect, **options))
    preview.start()


if __name__ == "__main__":
    main()
