from __future__ import annotations
import argparse
import math
import sys
from datetime import datetime, timezone
from typing import Callable, NamedTuple, Optional, Sequence
from pydantic import ValidationError

from .age import AgeMeasurement, compute_age
from .business_days import HolidayLookup, holiday_lookup
from .config import RunConfig, settings
from .deliver import CommandDelivery, Deliverer, MailDelivery, mail_subject
from .errors import FreshnessError, UsageError
from .metadata import DatasetMetadata, dataset_url, fetch_metadata, metadata_url
from .report import Report
from .status import DatasetStatus, evaluate

PROG = "freshness-check"
USAGE = f"Usage: {PROG} [OPTION ...]"

Fetcher = Callable[[str, str, float], DatasetMetadata]


class CheckResult(NamedTuple):
    metadata: DatasetMetadata
    age: AgeMeasurement
    status: DatasetStatus
    report: Report
    notified: bool
    piped: bool


def _format_time(dt: datetime) -> str:
    return dt.astimezone().strftime("%Y-%m-%d %H:%M:%S %z")


def check_dataset(
    config: RunConfig,
    *,
    fetch: Fetcher = fetch_metadata,
    is_holiday: Optional[HolidayLookup] = None,
    now: Optional[datetime] = None,
    mailer: Optional[Deliverer] = None,
    command: Optional[Deliverer] = None,
    echo: Callable[[str], object] = print,
) -> CheckResult:
    """Fetch, measure, classify and report on one dataset.

    ``fetch``, ``is_holiday``, ``now`` and the two deliverers are the only
    points where the run touches the outside world; each can be replaced.
    """
    if is_holiday is None:
        is_holiday = holiday_lookup(config.country)

    report = Report(verbose=config.verbose, echo=echo)
    report.add_field("Dataset Id", config.dataset_id)
    report.add_field("Dataset URL", dataset_url(config.site, config.dataset_id))
    report.add_field("Metadata URL", metadata_url(config.site, config.dataset_id))

    meta = fetch(config.site, config.dataset_id, config.timeout)
    report.add_field("Name", meta.name)
    report.add_field("Last updated", _format_time(meta.last_updated))

    now = now or datetime.now(timezone.utc)
    age = compute_age(meta.last_updated, now, is_holiday)
    status = evaluate(age, config.max_days)

    report.add_field("Dataset age", "%.1f business days / %.1f calendar days" % (age.business_days, age.calendar_days))
    report.add_field("Max age", "%.1f business days" % config.max_days)
    report.add_field("Dataset status", status)
    if not config.verbose:
        echo(f"Dataset is {status}")

    notified = piped = False
    if status is DatasetStatus.STALE and config.notify:
        echo(f"Notifying {', '.join(config.notify)} ...")
        if mailer is None:
            mailer = MailDelivery(config.mailer, mail_subject(meta.name), config.notify, config.timeout, echo)
        mailer.deliver(report.render())
        notified = True

    if status is DatasetStatus.STALE and config.command is not None:
        echo(f"Executing {config.command} ...")
        if command is None:
            command = CommandDelivery(config.command, config.timeout, echo)
        command.deliver(report.render())
        piped = True

    return CheckResult(meta, age, status, report, notified, piped)


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


def _days(s: str) -> float:
    try:
        v = float(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number of days: {s!r}")
    if v < 0 or math.isnan(v):
        raise argparse.ArgumentTypeError(f"must be zero or more days: {s!r}")
    return v


def build_parser() -> argparse.ArgumentParser:
    p = _Parser(
        prog=PROG,
        usage="%(prog)s [OPTION ...]",
        description="Report whether an open data portal dataset has gone stale (age in business days)",
    )
    p.add_argument("-i", "--id", dest="dataset_id", metavar="ID", help="Data set id -- this must be specified")
    p.add_argument("-s", "--site", default=settings.site, metavar="SITE",
                   help=f"Data portal hostname [default: {settings.site}]")
    p.add_argument("-m", "--maxdays", dest="max_days", type=_days, default=settings.max_days, metavar="DAYS",
                   help=f"Dataset older than this number of business days considered stale [default: {settings.max_days:g}]")
    p.add_argument("-n", "--notify", action="append", default=[], metavar="EMAIL",
                   help="If dataset stale, send report to this email address, repeat option for each recipient")
    p.add_argument("-M", "--mailer", default=settings.mailer, metavar="CMD",
                   help=f"Use this program to send mail [default: {settings.mailer}]")
    p.add_argument("-C", "--command", metavar="CMD", help="Pipe report into this command if dataset is stale")
    p.add_argument("-c", "--country", default=settings.country, metavar="CODE",
                   help=f"Holiday calendar, country code with optional subdivision e.g. US-TX [default: {settings.country}]")
    p.add_argument("-t", "--timeout", type=float, default=settings.timeout, metavar="SECS",
                   help=f"Timeout for the metadata request and each delivery [default: {settings.timeout:g}]")
    p.add_argument("-v", "--verbose", action="store_true", help="Display report created during processing")
    return p


def parse_config(argv: Optional[Sequence[str]] = None) -> RunConfig:
    args = build_parser().parse_args(argv)
    if not args.dataset_id:
        raise UsageError("dataset id (--id) not specified")
    try:
        return RunConfig(
            dataset_id=args.dataset_id,
            site=args.site,
            max_days=args.max_days,
            notify=tuple(args.notify),
            mailer=args.mailer,
            command=args.command or None,
            country=args.country,
            timeout=args.timeout,
            verbose=args.verbose,
        )
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(p) for p in err["loc"])
        raise UsageError(f"{field}: {err['msg']}") from e


def main(argv: Optional[Sequence[str]] = None, **overrides) -> int:
    try:
        config = parse_config(argv)
        check_dataset(config, **overrides)
    except UsageError as e:
        print(f"{PROG}: {e}", file=sys.stderr)
        print(f'{USAGE} (try "--help" for help)', file=sys.stderr)
        return 1
    except FreshnessError as e:
        print(f"{PROG}: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
