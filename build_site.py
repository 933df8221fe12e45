#!/usr/bin/env python3
"""Static site build worker.

Runs one build (or scheduled rebuilds) of:
- article pages, index/pagination, tag pages
- rss.xml + sitemap.xml

Output goes to OUTPUT_DIR (default dist/).
"""

from __future__ import annotations

import logging
import os
import sys
import time

import schedule
from dotenv import load_dotenv

from mdblog.content.collection import ContentError
from mdblog.site.builder import SiteBuilder
from mdblog.site.config import load_site_config


logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def run_once() -> int:
    config = load_site_config()
    try:
        with SiteBuilder(config) as builder:
            report = builder.build()
    except ContentError as err:
        logger.error("content error in %s:", err.path)
        for line in err.errors:
            logger.error("  %s", line)
        return 1
    print(f"[build] pages={report.pages} articles={report.articles} drafts_skipped={report.drafts_skipped}")
    return 0


def run_scheduled() -> None:
    minutes = int(os.environ.get("BUILD_INTERVAL_MINUTES", "5"))
    run_once()
    schedule.every(minutes).minutes.do(run_once)
    while True:
        schedule.run_pending()
        time.sleep(5)


if __name__ == "__main__":
    load_dotenv()
    mode = (os.environ.get("BUILD_MODE") or "once").lower().strip()
    if mode in ("scheduled", "watch"):
        run_scheduled()
    else:
        raise SystemExit(run_once())
