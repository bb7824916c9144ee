"""
UniAssist command line

Ranks a JSON catalog for a JSON student profile and prints JSON.

Usage:
    uniassist universities --profile me.json              # bundled sample catalog
    uniassist mentors --profile me.json --catalog cat.json --limit 5
    uniassist roommates --min-score 40
    uniassist analyze --answers answers.json --university "Stanford University"
"""

import argparse
import json
import logging
import os
import sys
from typing import Any, List, Optional

from pydantic import ValidationError as PydanticValidationError

from uniassist.config.settings import get_settings
from uniassist.domain.models import ApplicationAnswers, StudentProfile
from uniassist.domain.scoring import analysis_record
from uniassist.infrastructure.catalog import DEFAULT_CATALOG_PATH, StaticCatalog
from uniassist.infrastructure.exceptions import (
    ConfigurationError,
    NotFoundError,
    UniAssistError,
    ValidationError,
)
from uniassist.infrastructure.repositories import InMemoryProfileRepository
from uniassist.services import MatchingService


logger = logging.getLogger(__name__)


SAMPLE_PROFILE_PATH = os.path.join(os.path.dirname(__file__), "data", "sample_profile.json")
CLI_USER_ID = "cli"


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _read_json(path: str) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Unable to read {path}", original_error=e)


def load_profile(path: str) -> StudentProfile:
    try:
        return StudentProfile.model_validate(_read_json(path))
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid profile in {path}", field="profile", original_error=e)


def load_answers(path: str) -> ApplicationAnswers:
    try:
        return ApplicationAnswers.model_validate(_read_json(path))
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid answers in {path}", field="answers", original_error=e)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="uniassist",
        description="Rank universities, mentors and roommates for a student profile",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: settings.log_level)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    
    for name, help_text in (
        ("universities", "Rank universities"),
        ("mentors", "Rank available mentors"),
        ("roommates", "Rank roommate candidates"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument(
            "--profile",
            default=SAMPLE_PROFILE_PATH,
            help="Student profile JSON (default: bundled sample profile)",
        )
        sub.add_argument(
            "--catalog",
            default=DEFAULT_CATALOG_PATH,
            help="Catalog JSON (default: bundled sample catalog)",
        )
        sub.add_argument("--limit", type=int, default=None, help="Maximum results")
        sub.add_argument("--min-score", type=int, default=None, help="Minimum overall score")
    
    analyze = subparsers.add_parser("analyze", help="Score application answers")
    analyze.add_argument("--answers", required=True, help="Application answers JSON")
    analyze.add_argument(
        "--catalog",
        default=DEFAULT_CATALOG_PATH,
        help="Catalog JSON used to look up --university",
    )
    analyze.add_argument("--university", default=None, help="Target university name")
    
    return parser


def run(args: argparse.Namespace) -> Any:
    """Execute a parsed command and return its JSON-ready output."""
    catalog = StaticCatalog.from_json(args.catalog)
    
    if args.command == "analyze":
        university = None
        if args.university:
            matches = [u for u in catalog.universities() if u.name.lower() == args.university.lower()]
            if not matches:
                raise NotFoundError(
                    f"University '{args.university}' is not in the catalog",
                    resource="university",
                    identifier=args.university,
                )
            university = matches[0]
        service = MatchingService(InMemoryProfileRepository(), catalog)
        return analysis_record(service.analyze_application(load_answers(args.answers), university))
    
    repository = InMemoryProfileRepository({CLI_USER_ID: load_profile(args.profile)})
    service = MatchingService(repository, catalog)
    
    if args.command == "universities":
        ranked = service.recommend_universities(CLI_USER_ID, limit=args.limit, min_score=args.min_score)
    elif args.command == "mentors":
        ranked = service.recommend_mentors(CLI_USER_ID, limit=args.limit, min_score=args.min_score or 0)
    else:
        ranked = service.recommend_roommates(CLI_USER_ID, limit=args.limit, min_score=args.min_score or 0)
    
    return [entry.to_dict() for entry in ranked]


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    
    settings = get_settings()
    configure_logging(args.log_level or settings.log_level)
    
    try:
        output = run(args)
    except UniAssistError as e:
        logger.error(f"[CLI] {e.message}")
        print(json.dumps(e.to_dict(), indent=2), file=sys.stderr)
        return 1
    
    print(json.dumps(output, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
