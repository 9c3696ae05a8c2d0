"""Command line interface for trying out initial rating estimates."""

import argparse
import json
import logging
import sys
from typing import List, Optional

from deucerating.config.loader import configure_from_cli
from deucerating.config.resolvers import read_answers, resolve_log_dir
from deucerating.config.settings import ConfidenceBasis, get_settings, set_settings
from deucerating.domain.exceptions import DeuceRatingError
from deucerating.estimation.dispatcher import EstimationDispatcher
from deucerating.profiles.registry import PROFILES, available_sports
from deucerating.utils.logging import setup_logging
from deucerating.utils.timing import section_timer


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the deucerating CLI."""
    parser = argparse.ArgumentParser(
        prog="deucerating",
        description=(
            "Estimate a new player's initial DMR rating from onboarding "
            "questionnaire answers or a DUPR benchmark."
        ),
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    est_p = sub.add_parser("estimate", help="Estimate an initial rating from an answer set")
    est_p.add_argument(
        "-s",
        "--sport",
        required=True,
        choices=available_sports(),
        help="Sport whose scoring profile to use.",
    )
    est_p.add_argument(
        "-a",
        "--answers",
        default="-",
        metavar="FILE",
        help="JSON answer set to score; '-' (default) reads stdin.",
    )
    est_p.add_argument(
        "--pretty",
        action="store_true",
        help="Indent the JSON output.",
    )
    est_p.add_argument(
        "--confidence-basis",
        choices=[b.value for b in ConfidenceBasis],
        help="Override how the questionnaire confidence ratio is normalised.",
    )

    config_group = est_p.add_argument_group("Configuration Options")
    config_group.add_argument(
        "-c",
        "--config",
        metavar="FILE",
        help="JSON file with settings overrides per section.",
    )
    config_group.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode with verbose logging.",
    )
    config_group.add_argument(
        "--log-file",
        type=str,
        metavar="PATH",
        help="Write logs next to this path instead of the user log directory.",
    )

    sub.add_parser("profiles", help="List sports and their questionnaire categories")

    return parser


def _print_profiles() -> None:
    for sport, profile in PROFILES.items():
        info = profile.describe()
        print(f"{sport.value} (doubles rule: {info['doublesRule']})")
        for name, spec in info["categories"].items():
            print(f"  {name:<22} range {spec['rangeScale']:>6.1f}  confidence {spec['confidenceWeight']:.1f}")
        print(f"  skills: {', '.join(info['skills']['subSkills'])}")


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the deucerating CLI."""
    args = build_parser().parse_args(argv)

    if args.cmd == "profiles":
        _print_profiles()
        sys.exit(0)

    try:
        settings = configure_from_cli(args)
        set_settings(settings)

        logger, summary = setup_logging(
            log_dir=str(resolve_log_dir(settings.logging.file_path)),
            console=settings.logging.console_output,
            level="DEBUG" if settings.debug_mode else settings.logging.level.value,
            console_level="DEBUG" if settings.debug_mode else "WARNING",
            format_string=settings.logging.format_string,
        )

        if settings.debug_mode:
            logger.debug("Configuration details:")
            for section, values in settings.to_dict().items():
                logger.debug("  %s: %s", section, values)

        answers = read_answers(args.answers)
        with section_timer("estimate", logger):
            result = EstimationDispatcher(settings).estimate(args.sport, answers)

        summary.info(
            "%s estimate via %s: singles=%d doubles=%d rd=%d confidence=%s",
            args.sport, result.source.value, result.singles, result.doubles,
            result.rating_deviation, result.confidence.value,
        )
        print(json.dumps(result.to_dict(), indent=2 if args.pretty else None))
        sys.exit(0)

    except DeuceRatingError as e:
        print(f"error: {e.message}", file=sys.stderr)
        for suggestion in e.suggestions:
            print(f"  - {suggestion}", file=sys.stderr)
        sys.exit(2)

    except KeyboardInterrupt:
        sys.exit(130)

    except Exception as e:
        logging.getLogger("deucerating").error("Estimation failed: %s", e)
        if get_settings().debug_mode:
            logging.getLogger("deucerating").exception("Full traceback:")
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
