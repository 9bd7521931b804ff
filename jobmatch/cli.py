"""
jobmatch - rank job postings against your saved preferences.

Commands:
    search        Filter and rank postings
    recommend     Show the best matches and write a Markdown report
    preferences   Show or update your matching preferences

Examples:
    jobmatch preferences set --title "Software Engineer" --city Singapore --remote --min-pay 4000 --pay-period month
    jobmatch search -q developer --remote --job-type Full-time --sort relevance
    jobmatch recommend --limit 5
"""
from __future__ import annotations

import argparse
import json
import sys

from jobmatch.config import recommend_limit
from jobmatch.filters import (
    DATE_POSTED_WINDOWS,
    SALARY_RANGES,
    SORT_ORDERS,
    JobFilters,
    SalaryRange,
    salary_range_from_label,
)
from jobmatch.log import get_logger
from jobmatch.matching import get_match_label, get_match_percentage, should_show_badge
from jobmatch.models import PAY_PERIODS, JobMatchScore
from jobmatch.preferences import complete_onboarding, load_preferences, upsert_preferences
from jobmatch.recommend import run

log = get_logger(__name__)


def _add_remote_flags(parser: argparse.ArgumentParser, help_remote: str, help_office: str) -> None:
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--remote", dest="remote", action="store_const", const=True, help=help_remote)
    group.add_argument("--office", dest="remote", action="store_const", const=False, help=help_office)


def _add_filter_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--query", "-q", default="", help="Text in title, company or description")
    parser.add_argument("--location", "-l", default="", help="Location filter")
    _add_remote_flags(parser, "Remote jobs only", "On-site jobs only")
    parser.add_argument(
        "--salary",
        metavar="LABEL",
        help="Monthly pay bracket, one of: " + "; ".join(r.label for r in SALARY_RANGES),
    )
    parser.add_argument("--min-salary", type=float, help="Monthly salary lower bound")
    parser.add_argument("--max-salary", type=float, help="Monthly salary upper bound")
    parser.add_argument("--job-type", action="append", default=[], help="Repeatable, e.g. Full-time")
    parser.add_argument("--company", default="", help="Company name filter")
    parser.add_argument("--date-posted", choices=list(DATE_POSTED_WINDOWS), help="Posting age")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jobmatch",
        description="Rank job postings against your saved preferences",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    search_parser = subparsers.add_parser("search", help="Filter and rank postings")
    _add_filter_args(search_parser)
    search_parser.add_argument("--sort", choices=list(SORT_ORDERS), default="relevance")
    search_parser.add_argument("--top", "-n", type=int, default=20, help="Rows to print")
    search_parser.add_argument("--json", action="store_true", help="Print JSON instead of a table")

    rec_parser = subparsers.add_parser("recommend", help="Best matches plus Markdown report")
    _add_filter_args(rec_parser)
    rec_parser.add_argument("--limit", type=int, default=None, help="Max recommendations")
    rec_parser.add_argument("--no-report", action="store_true", help="Do not write the report file")

    pref_parser = subparsers.add_parser("preferences", help="Show or update preferences")
    pref_sub = pref_parser.add_subparsers(dest="action")
    pref_sub.add_parser("show", help="Print saved preferences")
    set_parser = pref_sub.add_parser("set", help="Create or update preferences")
    set_parser.add_argument("--title", action="append", dest="titles", help="Preferred job title (repeatable)")
    set_parser.add_argument("--city")
    set_parser.add_argument("--country")
    set_parser.add_argument("--postcode")
    _add_remote_flags(set_parser, "Prefer remote work", "Prefer office-based work")
    set_parser.add_argument("--min-pay", type=float, dest="minimum_pay")
    set_parser.add_argument("--pay-period", choices=list(PAY_PERIODS))
    pref_sub.add_parser("complete", help="Mark onboarding as completed")

    return parser


def filters_from_args(args: argparse.Namespace) -> JobFilters:
    salary = None
    if args.salary:
        salary = salary_range_from_label(args.salary)
        if salary is None:
            raise ValueError(f"unknown salary bracket {args.salary!r}")
    elif args.min_salary is not None or args.max_salary is not None:
        salary = SalaryRange(min=args.min_salary or 0.0, max=args.max_salary)

    return JobFilters(
        query=args.query,
        location=args.location,
        remote=args.remote,
        salary=salary,
        job_type=list(args.job_type),
        company=args.company,
        date_posted=args.date_posted,
    )


def _format_row(i: int, m: JobMatchScore) -> str:
    badge = f"{get_match_percentage(m.score):>3}%" if should_show_badge(m) else "   -"
    job = m.job
    remote = " [remote]" if job.remote else ""
    return f"{i:>3}. {badge}  {job.title} @ {job.company} — {job.location}{remote}"


def _cmd_search(args: argparse.Namespace) -> int:
    result = run(filters=filters_from_args(args), sort_by=args.sort, write=False)
    ranked: list[JobMatchScore] = result["ranked"][: max(args.top, 0)]
    if args.json:
        print(json.dumps([m.to_dict() for m in ranked], indent=2))
        return 0
    if not ranked:
        print("No jobs match these filters.")
        return 0
    for i, m in enumerate(ranked, 1):
        print(_format_row(i, m))
    return 0


def _cmd_recommend(args: argparse.Namespace) -> int:
    limit = args.limit if args.limit is not None else recommend_limit()
    result = run(filters=filters_from_args(args), limit=limit, write=not args.no_report)
    recs: list[JobMatchScore] = result["recommendations"]
    if not result["personalized"]:
        print("No preferences saved yet: run `jobmatch preferences set` first.")
    if not recs:
        print("No recommendations above the match threshold.")
    for i, m in enumerate(recs, 1):
        print(_format_row(i, m))
        if should_show_badge(m):
            print(f"       {get_match_label(m.score)}: {', '.join(m.match_reasons)}")
    if result["report_path"]:
        print(f"\nReport: {result['report_path']}")
    return 0


def _cmd_preferences(args: argparse.Namespace) -> int:
    if args.action == "set":
        updates = {
            "job_titles": args.titles,
            "city": args.city,
            "country": args.country,
            "postcode": args.postcode,
            "remote_work": args.remote,
            "minimum_pay": args.minimum_pay,
            "pay_period": args.pay_period,
        }
        prefs = upsert_preferences(updates)
    elif args.action == "complete":
        prefs = complete_onboarding()
    else:
        prefs = load_preferences()
        if prefs is None:
            print("No preferences saved yet.")
            return 0
    print(json.dumps(prefs.to_dict(), indent=2))
    return 0


_COMMANDS = {
    "search": _cmd_search,
    "recommend": _cmd_recommend,
    "preferences": _cmd_preferences,
}


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    handler = _COMMANDS.get(args.command)
    if handler is None:
        parser.print_help()
        return 1
    try:
        return handler(args)
    except ValueError as exc:
        log.error("%s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
