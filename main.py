#!/usr/bin/env python3
"""
How Fast Will AI Take Your Job? - data and chart toolkit

Usage:
    python main.py parse data/job_data.csv               # Dump raw CSV records as JSON
    python main.py parse data/x.tsv --delimiter $'\\t'
    python main.py jobs --search clerk --tier high       # Job lookup table
    python main.py jobs --augmented --sort title --asc
    python main.py stats                                 # Domain and risk tier summary
    python main.py geometry bubble --width 800           # Geometry JSON for a page chart
    python main.py report                                # Generate HTML report
"""

import sys
import asyncio
import argparse
import json
import logging
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

import config
from analyzer.analyze import generate_summary, jobs_to_dataframe
from analyzer.explorer import SORT_FIELDS, filter_jobs
from analyzer.risk import TIERS, risk_label
from charts.layout import CHART_KINDS, compute_geometry
from charts.radar import radar_rows_from_skills
from csvdata.loader import get_augmented_job_data, get_job_data, load_all
from csvdata.parser import parse_csv
from dashboard import page_data
from dashboard.html_report import generate_report

log = logging.getLogger(__name__)


def setup_logging():
    """Configure logging to both console and file."""
    config.LOG_DIR.mkdir(parents=True, exist_ok=True)

    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[
            logging.FileHandler(config.LOG_FILE, encoding="utf-8"),
            logging.StreamHandler(sys.stderr),
        ],
    )


def cmd_parse(path: str, delimiter: str = ",", include_header_row: bool = False):
    """Print the raw records of a CSV file as JSON."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        log.error(f"Cannot read {path}: {e}")
        return
    records = parse_csv(text, delimiter=delimiter, skip_header=not include_header_row)
    print(json.dumps(records, indent=2, ensure_ascii=False))


def cmd_jobs(search: str = "", domain: str | None = None, tier: str = "all",
             sort: str = "impact", ascending: bool = False, augmented: bool = False):
    """Print the job lookup table."""
    loader = get_augmented_job_data if augmented else get_job_data
    jobs = asyncio.run(loader())
    if not jobs:
        print("No job data loaded. Check the source root and the log.")
        return

    results = filter_jobs(jobs, search, domain, tier, sort, "asc" if ascending else "desc")
    if not results:
        print("No jobs match the given filters.")
        return

    print(f"\n{'Job':<36} {'Domain':<20} {'Impact':>6}  {'Risk':<12} {'Disruption'}")
    print("-" * 96)
    for job in results:
        print(
            f"{job['title'][:35]:<36} {job['domain'][:19]:<20} {job['impact']:>5}%  "
            f"{risk_label(job['impact']):<12} {job['timeToDisruption']}"
        )
    print(f"\n{len(results)} of {len(jobs)} jobs")


def cmd_stats():
    """Print quick stats."""
    jobs = asyncio.run(get_job_data())
    if not jobs:
        print("No job data loaded.")
        return

    df = jobs_to_dataframe(jobs)
    summary = generate_summary(df)

    print(f"\n{'='*50}")
    print(f"Total jobs: {summary['total_jobs']}")
    print(f"Domains: {summary['unique_domains']}")
    print(f"Mean AI impact: {summary['mean_impact']:.1f}%")
    print(f"\nRisk Tiers:")
    for t in summary["tier_dist"]:
        print(f"  {t['risk_tier']}: {t['count']}")
    print(f"\nDomains (highest impact first):")
    for d in summary["domains"]:
        print(f"  {d['domain']}: {d['jobs']} jobs, mean impact {d['mean_impact']:.1f}%")


def page_chart_input(kind: str, data: dict[str, list]) -> tuple:
    """Data and engine options for the chart of the given kind as shown on the page."""
    heights = page_data.PAGE_HEIGHTS
    if kind == "bar":
        return data["sectors"], {"height": heights["bar"]}
    if kind == "bubble":
        return page_data.BUBBLE_DATA, {"height": heights["bubble"]}
    if kind == "heatmap":
        return page_data.DOMAIN_SKILLS_HEATMAP, {
            "height": heights["heatmap"],
            "color_scheme": page_data.HEATMAP_COLOR_SCHEME,
        }
    if kind == "trend":
        return page_data.FUTURE_PROJECTIONS, {"height": heights["trend"]}
    if kind == "radar":
        keys = [c["category"] for c in data["skills"]]
        return radar_rows_from_skills(data["skills"]), {"keys": keys, "index_by": "skill"}
    if kind == "gauge":
        return page_data.GENERATIVE_AI_IMPACT, {"width": page_data.GAUGE_SIZE}
    if kind == "isotype":
        return page_data.RESKILLING_NEED, {"icon": page_data.RESKILLING_ICON}
    return data["timeline"], {}


def cmd_geometry(kind: str, width: float, height: float | None = None):
    """Print the geometry of one page chart as JSON."""
    data = asyncio.run(load_all())
    chart_data, options = page_chart_input(kind, data)
    if height is not None:
        options["height"] = height
    geometry = compute_geometry(kind, chart_data, width, **options)
    print(json.dumps(geometry, indent=2, ensure_ascii=False))


def cmd_report(output: str | None = None):
    """Generate HTML report from the CSV resources."""
    data = asyncio.run(load_all())
    if not data["jobs"]:
        print("No job data loaded. Check the source root and the log.")
        return

    print(f"Generating report from {len(data['jobs'])} jobs...")
    filepath = generate_report(data, output=Path(output) if output else None)
    if filepath:
        print(f"✓ Report saved: {filepath}")
        print(f"  Open in browser: file://{filepath.resolve()}")


def main(argv: list[str] | None = None):
    setup_logging()
    parser = argparse.ArgumentParser(description="How Fast Will AI Take Your Job? - data and chart toolkit")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # parse
    parse_p = subparsers.add_parser("parse", help="Parse a CSV file and dump raw records as JSON")
    parse_p.add_argument("path", type=str, help="Path to the CSV file")
    parse_p.add_argument("--delimiter", type=str, default=",", help="Field delimiter (default: ,)")
    parse_p.add_argument("--include-header-row", action="store_true",
                         help="Also emit the header line as a record")

    # jobs
    jobs_p = subparsers.add_parser("jobs", help="Search, filter and sort jobs")
    jobs_p.add_argument("--search", type=str, default="", help="Case-insensitive title search")
    jobs_p.add_argument("--domain", type=str, default=None, help="Only jobs in this domain")
    jobs_p.add_argument("--tier", choices=("all",) + TIERS, default="all", help="Risk tier filter")
    jobs_p.add_argument("--sort", choices=SORT_FIELDS, default="impact", help="Sort field (default: impact)")
    jobs_p.add_argument("--asc", action="store_true", help="Sort ascending")
    jobs_p.add_argument("--augmented", action="store_true", help="Use the extended job dataset")

    # stats
    subparsers.add_parser("stats", help="Print quick stats")

    # geometry
    geo_p = subparsers.add_parser("geometry", help="Print chart geometry as JSON")
    geo_p.add_argument("kind", choices=CHART_KINDS, help="Chart kind")
    geo_p.add_argument("--width", type=float, default=600, help="Container width in pixels (default: 600)")
    geo_p.add_argument("--height", type=float, default=None, help="Nominal chart height in pixels")

    # report
    report_p = subparsers.add_parser("report", help="Generate HTML report")
    report_p.add_argument("--output", type=str, default=None, help="Output file (default: reports/report_<ts>.html)")

    args = parser.parse_args(argv)

    if args.command == "parse":
        cmd_parse(args.path, args.delimiter, args.include_header_row)
    elif args.command == "jobs":
        cmd_jobs(args.search, args.domain, args.tier, args.sort, args.asc, args.augmented)
    elif args.command == "stats":
        cmd_stats()
    elif args.command == "geometry":
        cmd_geometry(args.kind, args.width, args.height)
    elif args.command == "report":
        cmd_report(args.output)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
