import sys
import json
import logging
import argparse
from dataclasses import asdict

from core.config_loader import load_config
from core.matching import MatchingService, MatchingFilters
from core.matching.exceptions import ServiceException, EntityNotFoundException
from database.database import configure_database, db_session_scope, init_db
from database.repositories import TeamRepository, OpportunityRepository

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def _match_to_dict(match):
    return {
        'teamId': match.team.id,
        'teamName': match.team.name,
        'opportunityId': match.opportunity.id,
        'opportunityTitle': match.opportunity.title,
        'total': match.score.total,
        'breakdown': asdict(match.score.breakdown),
        'reasoning': match.score.reasoning,
        'recommendation': match.recommendation,
        'keyStrengths': match.key_strengths,
        'potentialConcerns': match.potential_concerns,
    }


def run_match(args, config) -> int:
    filters = MatchingFilters(
        min_score=args.min_score,
        max_results=args.limit,
        industry_preference=getattr(args, 'industry', None) or None,
    )

    try:
        with db_session_scope() as session:
            service = MatchingService(
                team_store=TeamRepository(session),
                opportunity_store=OpportunityRepository(session),
                config=config.matching
            )
            if args.command == 'match-teams':
                matches = service.find_teams_for_opportunity(args.opportunity_id, filters)
            else:
                matches = service.find_opportunities_for_team(args.team_id, filters)
    except EntityNotFoundException as e:
        logger.error(str(e))
        return 1
    except ServiceException as e:
        logger.error(f"Matching failed: {e}")
        return 1

    print(json.dumps([_match_to_dict(m) for m in matches], indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Liftout team/opportunity matching")
    parser.add_argument("--config", default="config.yaml", help="Path to config file")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("serve", help="Run the matching API server")
    subparsers.add_parser("init-db", help="Create database tables")

    teams = subparsers.add_parser("match-teams", help="Rank teams for an opportunity")
    teams.add_argument("opportunity_id")
    teams.add_argument("--min-score", type=float, default=None)
    teams.add_argument("--limit", type=int, default=None)

    opportunities = subparsers.add_parser("match-opportunities", help="Rank opportunities for a team")
    opportunities.add_argument("team_id")
    opportunities.add_argument("--min-score", type=float, default=None)
    opportunities.add_argument("--limit", type=int, default=None)
    opportunities.add_argument("--industry", action="append", default=None,
                               help="Preferred industry (repeatable)")

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config(args.config)
    configure_database(config.database)

    if args.command == 'serve':
        from web.backend.app import main as serve
        serve(config.web)
        return 0

    if args.command == 'init-db':
        init_db()
        return 0

    return run_match(args, config)


if __name__ == "__main__":
    sys.exit(main())
