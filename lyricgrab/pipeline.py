from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from .utils.logging import get_logger
from .utils.url import default_output_name, normalize_url
from .fetchers import http_fetcher
from .extract.engine import ExtractionResult, extract_html


@dataclass
class RunConfig:
    url: str
    output: Optional[Path] = None
    timeout: float = 20.0
    retries: int = 1
    headers: Optional[Iterable[str]] = None
    min_score: Optional[int] = None  # None=accept any non-blank winner
    log_level: str = "INFO"


def _finalize_output_path(cfg: RunConfig, url: str) -> Path:
    if cfg.output:
        return cfg.output
    return Path(default_output_name(url))


def save_text(path: Path, text: str) -> int:
    """Write extracted text as UTF-8 without a byte-order mark; returns the byte count."""
    path.parent.mkdir(parents=True, exist_ok=True)
    data = text.encode("utf-8")
    path.write_bytes(data)
    return len(data)


def extract_page(cfg: RunConfig, url: str) -> ExtractionResult:
    logger = get_logger()
    res = http_fetcher.fetch(url, timeout=cfg.timeout, headers=cfg.headers, retries=cfg.retries)
    logger.debug(f"Fetched {res.url} status={res.status_code} ({len(res.html)} chars)")
    result = extract_html(res.html, min_score=cfg.min_score)
    if result.used_fallback:
        logger.warning("Could not confidently locate lyrics. Dumping best-effort page text.")
    return result


def run(cfg: RunConfig) -> Path:
    logger = get_logger()
    url = normalize_url(cfg.url)
    logger.info(f"Source: {url}")

    result = extract_page(cfg, url)
    if not result.text:
        logger.warning("No text found on the page; writing an empty file.")

    out_path = _finalize_output_path(cfg, url)
    size = save_text(out_path, result.text)
    logger.info(f"Saved: {out_path} ({size} bytes)")
    return out_path
