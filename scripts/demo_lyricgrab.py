from __future__ import annotations

import argparse
from pathlib import Path

from lyricgrab.pipeline import RunConfig, run
from lyricgrab.utils.logging import setup_logger
from lyricgrab.utils.url import default_output_name


def main():
    p = argparse.ArgumentParser(description="Demo runner for lyricgrab")
    p.add_argument("--url", action="append", help="URL to process (repeatable)")
    p.add_argument("--min-score", type=int, default=None, help="Confidence threshold before falling back")
    p.add_argument("--outdir", default="demo_outputs", help="Output directory")
    p.add_argument("--log-level", default="INFO", help="Log level")
    args = p.parse_args()

    setup_logger(args.log_level)
    urls = args.url or ["https://example.com/"]
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    for u in urls:
        cfg = RunConfig(url=u, output=outdir / default_output_name(u), min_score=args.min_score)
        print(f"[demo] {u}")
        run(cfg)


if __name__ == "__main__":
    main()
