from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import load_profile
from .discover import run_check
from .match import summarize
from .presenters.factory import build_presenter

logger = logging.getLogger("conceptcheck.cli")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="conceptcheck",
        description="Report which spec steps (*) are backed by concept tags (#)",
    )
    p.add_argument("--spec", required=True, help="Path to the .spec file to check")
    p.add_argument(
        "--root",
        default=None,
        help="Directory searched recursively for concept files (default: the spec's directory)",
    )
    p.add_argument("--config", default=None, help="YAML check profile")
    p.add_argument(
        "--format",
        choices=["list", "annotate", "json"],
        default=None,
        help="Output format (default from profile, else list)",
    )
    p.add_argument("--out", default=None, help="Write rendered output here instead of stdout")
    p.add_argument(
        "--lenient-locator",
        action="store_true",
        help="Locate steps by their extracted value instead of the exact '* step' line",
    )
    p.add_argument("--show-empty", action="store_true", help="Print a notice when nothing matched")
    p.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Logging level (default WARNING)",
    )
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        profile = load_profile(Path(args.config) if args.config else None)
        profile = profile.with_overrides(
            presenter=args.format,
            strict_locator=False if args.lenient_locator else None,
            show_empty=True if args.show_empty else None,
        )
        presenter = build_presenter(profile.presenter, show_empty=profile.show_empty)
    except ValueError as e:
        # ConfigError, or an unknown presenter named in the profile
        print(f"conceptcheck: {e}", file=sys.stderr)
        return 1

    spec_path = Path(args.spec)
    root = Path(args.root) if args.root else None
    logger.info("Checking %s with profile %r", spec_path, profile.name)

    result = run_check(spec_path, root, profile)
    rendered = presenter.render(result)

    if args.out:
        out_path = Path(args.out)
        try:
            out_path.parent.mkdir(parents=True, exist_ok=True)
            out_path.write_text(rendered + "\n" if rendered else "", encoding="utf-8")
        except OSError as e:
            print(f"conceptcheck: cannot write {out_path}: {e}", file=sys.stderr)
            return 1
    elif rendered:
        print(rendered)

    s = summarize(result)
    summary = (
        f"Steps: {s.n_steps}  Matched: {s.n_matched}  Located: {s.n_located}  "
        f"Coverage: {s.coverage:.3f}  Concept files: {len(result.concept_sources)}"
    )
    # keep stdout machine-readable for json
    if profile.presenter == "json" and not args.out:
        print(summary, file=sys.stderr)
    else:
        print(summary)
    if args.out:
        print(f"Wrote {args.out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
