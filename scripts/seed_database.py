#!/usr/bin/env python3
"""
Script to seed the database with a demo series, roster, pattern and availability
"""

import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import random
from datetime import date, timedelta
from gameplan.database import init_db, drop_db, get_db
from gameplan.models import User, Team, TeamMember, GameSeries, GameTeam, PlayerAvailability
from gameplan.models.availability import AvailabilityStatus
from gameplan.models.game_series import SeriesType
from gameplan.models.team import TeamRole
from gameplan.services.pattern_service import RecurringPatternService
from gameplan.utils.logger import get_logger

logger = get_logger('seed_database')

PLAYER_NAMES = [
    'alex', 'blair', 'casey', 'devon', 'emery', 'finley',
    'gray', 'harper', 'indy', 'jordan', 'kai', 'logan'
]


def create_users(db):
    """Create an organiser and a pool of players"""
    organiser = User(username='organiser', email='organiser@example.com')
    db.add(organiser)

    players = []
    for name in PLAYER_NAMES:
        player = User(username=name, email=f'{name}@example.com')
        db.add(player)
        players.append(player)

    db.flush()
    return organiser, players


def create_teams(db, organiser, players):
    """Split players into two teams with a captain each"""
    teams = []
    half = len(players) // 2
    for index, (name, roster) in enumerate([('Dawn Patrol', players[:half]), ('Night Owls', players[half:])]):
        team = Team(name=name, description=f'Demo team {index + 1}', created_by=organiser.id)
        db.add(team)
        db.flush()
        for position, player in enumerate(roster):
            role = TeamRole.CAPTAIN if position == 0 else TeamRole.PLAYER
            db.add(TeamMember(team_id=team.id, user_id=player.id, role=role))
        teams.append(team)

    db.flush()
    return teams


def create_availability(db, players, start):
    """Random availability for two weeks of evening slots"""
    slots = ['16:00-18:00', '18:00-20:00', '19:00-21:00']
    for player in players:
        for offset in range(14):
            for time_slot in slots:
                if random.random() < 0.5:
                    continue
                db.add(PlayerAvailability(
                    user_id=player.id,
                    date=start + timedelta(days=offset),
                    time_slot=time_slot,
                    status=random.choice(list(AvailabilityStatus)),
                    notes=''
                ))


def main():
    """Seed the database"""
    logger.info("Seeding database...")

    drop_db()
    init_db()

    start = date.today()

    with get_db() as db:
        organiser, players = create_users(db)
        teams = create_teams(db, organiser, players)

        series = GameSeries(
            name='Thursday Night Hoops',
            description='Weekly pickup league',
            type=SeriesType.LEAGUE,
            start_date=start,
            end_date=start + timedelta(days=90),
            created_by=organiser.id
        )
        db.add(series)
        db.flush()

        create_availability(db, players, start)
        organiser_id, series_id = organiser.id, series.id
        team_ids = [team.id for team in teams]

    pattern_service = RecurringPatternService()
    result = pattern_service.create_recurring_pattern(series_id, {
        'name': 'Thursday Night Hoops',
        'description': 'Full court, bring both jerseys',
        'frequency': 'weekly',
        'day_of_week': 4,
        'start_time': '19:00',
        'end_time': '21:00',
        'location': 'Eastside Rec Center',
        'min_players': 6,
        'max_players': 12,
        'start_date': start,
        'end_date': start + timedelta(days=90)
    }, organiser_id)

    if result.get('error'):
        logger.error(f"Failed to create pattern: {result['error']}")
        return

    game_ids = pattern_service.expand_pattern(result['pattern_id'], start, start + timedelta(days=28))

    with get_db() as db:
        for game_id in game_ids:
            for team_id in team_ids:
                db.add(GameTeam(game_id=game_id, team_id=team_id))

    logger.info(f"Seeded {len(players)} players, {len(team_ids)} teams and {len(game_ids)} games")


if __name__ == "__main__":
    main()
