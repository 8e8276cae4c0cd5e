import argparse
import logging
import sys
from datetime import date, datetime, time

from roster.adapters.clock import FrozenClock, SystemClock
from roster.adapters.people import InMemoryPeopleSource
from roster.components.people_query import QueryInput, run_first, run_query
from roster.components.render import FORMATTERS, RenderInput, run_render
from roster.domain.entities import Person, SocialMedia, compute_age, parse_social_media
from roster.domain.sample_data import build_sample_people
from roster.ports.clock import ClockPort
from roster.rules.loader import default_rules, load_rules, resolve_rules_path
from roster.rules.models import RosterRules

logger = logging.getLogger("cli")


def get_rules(path_arg: str | None) -> RosterRules:
    path = resolve_rules_path(path_arg)
    if not path.exists():
        if path_arg:
            logger.error(f"Rules file {path} not found.")
            sys.exit(1)
        return default_rules()

    try:
        return load_rules(path)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)


def parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.error(f"Invalid date '{value}', expected YYYY-MM-DD.")
        sys.exit(1)


def parse_flag(value: str) -> SocialMedia:
    try:
        return parse_social_media(value)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)


def get_clock(on: date | None) -> ClockPort:
    if on is None:
        return SystemClock()
    return FrozenClock(datetime.combine(on, time()))


def reference_date(args: argparse.Namespace, rules: RosterRules) -> date | None:
    if args.on:
        return parse_date(args.on)
    return rules.query.reference_date


def print_people(
    people: tuple[Person, ...], fmt: str, clock: ClockPort, on: date | None
) -> None:
    output = run_render(RenderInput(people=people, format=fmt, reference_date=on), clock)
    if not output.success:
        for error in output.errors:
            logger.error(error.message)
        sys.exit(1)
    if output.blocks:
        print(output.text)


def handle_list(args: argparse.Namespace, rules: RosterRules) -> None:
    on = reference_date(args, rules)
    clock = get_clock(on)
    source = InMemoryPeopleSource(build_sample_people(clock))
    print_people(tuple(source.get_all()), args.format or rules.output.format, clock, on)


def handle_query(args: argparse.Namespace, rules: RosterRules) -> None:
    on = reference_date(args, rules)
    clock = get_clock(on)
    source = InMemoryPeopleSource(build_sample_people(clock))

    min_age = args.min_age if args.min_age is not None else rules.query.min_age
    flag = parse_flag(args.flag) if args.flag else rules.query.required_flag
    query = QueryInput(
        people=source.get_all(),
        min_age=min_age,
        required_flag=flag,
        reference_date=on,
    )

    if args.limit is not None:
        result = run_first(query, clock, args.limit)
    else:
        result = run_query(query, clock)

    if not result.success:
        for error in result.errors:
            logger.error(f"{error.code}: {error.message}")
        sys.exit(1)

    logger.info(f"{result.total} people older than {min_age} with {flag.name}")
    print_people(result.people, args.format or rules.output.format, clock, on)


def handle_age(args: argparse.Namespace, rules: RosterRules) -> None:
    birth_date = parse_date(args.birth_date)
    on = reference_date(args, rules) or SystemClock().now().date()
    print(compute_age(birth_date, on))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Person Roster CLI")
    parser.add_argument("--rules", help="Path to rules.yaml (default: $ROSTER_RULES_PATH)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    formats = sorted(FORMATTERS)

    # list
    list_parser = subparsers.add_parser("list", help="Print the sample roster")
    list_parser.add_argument("--format", choices=formats, help="Output format")
    list_parser.add_argument("--on", help="Compute ages as of this date (YYYY-MM-DD)")

    # query
    query_parser = subparsers.add_parser(
        "query", help="People older than an age who use a social network"
    )
    query_parser.add_argument("--min-age", type=int, help="Strict lower age bound")
    query_parser.add_argument("--flag", help="Social media flags, e.g. twitter|facebook")
    query_parser.add_argument("--on", help="Compute ages as of this date (YYYY-MM-DD)")
    query_parser.add_argument("--format", choices=formats, help="Output format")
    query_parser.add_argument("--limit", type=int, help="Stop after this many matches")

    # age
    age_parser = subparsers.add_parser("age", help="Compute an age from a birth date")
    age_parser.add_argument("birth_date", help="Birth date (YYYY-MM-DD)")
    age_parser.add_argument("--on", help="Reference date (YYYY-MM-DD)")

    args = parser.parse_args(argv)

    rules = get_rules(args.rules)
    logging.basicConfig(level=getattr(logging, rules.logging.level))

    if args.command == "list":
        handle_list(args, rules)
    elif args.command == "query":
        handle_query(args, rules)
    elif args.command == "age":
        handle_age(args, rules)


if __name__ == "__main__":
    main()
