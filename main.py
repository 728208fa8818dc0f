#!/usr/bin/env python3
"""captainteemo API Client - Main Entry Point.

Command line access to the captainteemo League of Legends statistics API:
- Player profiles and per-player sections (runes, mastery, honor, ...)
- Ranked stats by season
- Team lookups by tag or GUID
- Free week rotation

Usage:
    python main.py player <platform> <summoner> [section]
    python main.py ranked <platform> <summoner> <season>
    python main.py team <platform> <tag>
    python main.py team-leagues <platform> <guid>
    python main.py free-week <platform>
    python main.py platforms
"""

import sys
import logging
from pathlib import Path

# Add src directory to path for imports
sys.path.insert(0, str(Path(__file__).parent / "src"))

from resteemo.api.config import Config, PLATFORMS, setup_logging
from resteemo.api.errors import TeemoAPIError
from resteemo.api.teemo_api import TeemoAPIClient
from resteemo.utils.formatters import OutputFormatter

PLAYER_SECTIONS = (
    'ingame',
    'recent_games',
    'influence_points',
    'runes',
    'mastery',
    'leagues',
    'honor',
    'teams',
)

formatter = OutputFormatter()


def show_help():
    """Display help information."""
    print("""
captainteemo API Client v1.0.0

USAGE:
    python main.py <command> [arguments]

COMMANDS:
    player <platform> <summoner> [section]
        Look up a player's profile, or one section of it
        Sections: ingame, recent_games, influence_points, runes,
                  mastery, leagues, honor, teams
        Example: python main.py player euw Faker runes

    ranked <platform> <summoner> <season>
        Ranked stats for a season
        Example: python main.py ranked North_America Faker 3

    team <platform> <tag>
        Team information and matches by tag

    team-leagues <platform> <guid>
        Leagues of a team by GUID

    free-week <platform>
        Current free champion rotation

    platforms
        List supported platforms

    help
        Show this help message

SETUP:
    1. Create a .env file in the project root
    2. Add a contact string: TEEMO_USER_AGENT=my-app (me@example.com)
    3. Run any command to get started!
""")


def print_result(title):
    """Build a callback that prints the outcome of a lookup."""
    def callback(error, response):
        if error is not None:
            print(formatter.format_error_message(str(error)))
            return False
        print(formatter.format_response(title, response))
        return True
    return callback


def create_api_client():
    return TeemoAPIClient.from_config(Config())


def cmd_player(args):
    """Handle player command."""
    if len(args) < 2:
        print("❌ Error: player requires platform and summoner")
        print("Usage: python main.py player <platform> <summoner> [section]")
        return False

    platform, summoner = args[0], args[1]
    section = args[2].lower() if len(args) > 2 else None

    if section is not None and section not in PLAYER_SECTIONS:
        print(f"❌ Unknown section: {section}")
        print(f"Available sections: {', '.join(PLAYER_SECTIONS)}")
        return False

    client = create_api_client()
    if section is None:
        return client.player(platform, summoner, print_result(f"player {summoner}"))

    lookup = getattr(client.player, section)
    return lookup(platform, summoner, print_result(f"{section} for {summoner}"))


def cmd_ranked(args):
    """Handle ranked command."""
    if len(args) < 3:
        print("❌ Error: ranked requires platform, summoner and season")
        print("Usage: python main.py ranked <platform> <summoner> <season>")
        return False

    platform, summoner, season = args[0], args[1], args[2]
    client = create_api_client()
    return client.player.ranked_stats(
        platform, summoner, season, print_result(f"season {season} ranked stats for {summoner}")
    )


def cmd_team(args):
    """Handle team command."""
    if len(args) < 2:
        print("❌ Error: team requires platform and tag")
        print("Usage: python main.py team <platform> <tag>")
        return False

    client = create_api_client()
    return client.team(args[0], args[1], print_result(f"team {args[1]}"))


def cmd_team_leagues(args):
    """Handle team-leagues command."""
    if len(args) < 2:
        print("❌ Error: team-leagues requires platform and guid")
        print("Usage: python main.py team-leagues <platform> <guid>")
        return False

    client = create_api_client()
    return client.team.leagues(args[0], args[1], print_result(f"leagues for team {args[1]}"))


def cmd_free_week(args):
    """Handle free-week command."""
    if len(args) < 1:
        print("❌ Error: free-week requires platform")
        print("Usage: python main.py free-week <platform>")
        return False

    client = create_api_client()
    return client.free_week(args[0], print_result(f"free week on {args[0]}"))


def cmd_platforms(args):
    """Handle platforms command."""
    print(formatter.format_platforms(list(PLATFORMS)))
    return True


COMMANDS = {
    'player': cmd_player,
    'ranked': cmd_ranked,
    'team': cmd_team,
    'team-leagues': cmd_team_leagues,
    'free-week': cmd_free_week,
    'platforms': cmd_platforms,
}


def run(argv):
    """Route `argv` to a command and return the process exit code."""
    if len(argv) < 1:
        show_help()
        return 0

    command = argv[0].lower()
    args = argv[1:]

    if command in ['help', '-h', '--help']:
        show_help()
        return 0

    handler = COMMANDS.get(command)
    if handler is None:
        print(f"❌ Unknown command: {command}")
        print("Use 'python main.py help' for usage information")
        return 1

    try:
        success = handler(args)
    except TeemoAPIError as e:
        logging.getLogger(__name__).error(f"{command} failed: {e}")
        print(formatter.format_error_message(
            str(e),
            "Set TEEMO_USER_AGENT in your .env file to a contact string"
        ))
        success = False

    return 0 if success else 1


def main():
    """Main entry point."""
    # Setup logging
    setup_logging(level='WARNING')  # Reduce noise for CLI usage

    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
