import pytest
from datetime import date
from gameplan.database import drop_db, init_db, DatabaseManager
from gameplan.models import User, Team, TeamMember, PlayerAvailability
from gameplan.models.availability import AvailabilityStatus
from gameplan.services.availability_service import (
    AvailabilityService, AbsentMeansAvailable, AbsentMeansUnavailable
)

PRACTICE_DAY = date(2024, 5, 4)


@pytest.fixture
def availability_service():
    """Create availability service with a small team"""
    init_db()

    user_db = DatabaseManager(User)
    players = [
        user_db.create(username=f'player{i}', email=f'player{i}@test.com')
        for i in range(3)
    ]
    team = DatabaseManager(Team).create(name='Squad', created_by=players[0].id)
    for player in players:
        DatabaseManager(TeamMember).create(team_id=team.id, user_id=player.id)

    yield AvailabilityService(), players, team

    drop_db()


class TestAvailabilityService:
    """Test player availability management"""

    def test_set_availability(self, availability_service):
        """Test recording a new entry"""
        service, players, _ = availability_service

        result = service.set_player_availability(players[0].id, {
            'date': PRACTICE_DAY,
            'time_slot': '09:00-11:00',
            'status': 'available',
            'notes': 'Can bring a ball'
        })

        assert result['success'] is True
        assert result['availability']['status'] == 'available'
        assert result['availability']['notes'] == 'Can bring a ball'

    def test_set_availability_replaces_existing(self, availability_service):
        """Test one record per user, date and slot"""
        service, players, _ = availability_service
        entry = {'date': PRACTICE_DAY, 'time_slot': '09:00-11:00', 'status': 'available'}

        first = service.set_player_availability(players[0].id, entry)
        second = service.set_player_availability(players[0].id, dict(entry, status='unavailable', notes='Injured'))

        assert second['availability']['id'] == first['availability']['id']
        assert second['availability']['status'] == 'unavailable'
        assert second['availability']['notes'] == 'Injured'
        assert DatabaseManager(PlayerAvailability).count(user_id=players[0].id) == 1

    def test_invalid_time_slot(self, availability_service):
        """Test malformed slot strings"""
        service, players, _ = availability_service

        result = service.set_player_availability(players[0].id, {
            'date': PRACTICE_DAY,
            'time_slot': '9am-11am',
            'status': 'available'
        })

        assert result['error'] == 'Time slot must be in HH:MM-HH:MM format'

    def test_invalid_status(self, availability_service):
        """Test unknown status values"""
        service, players, _ = availability_service

        result = service.set_player_availability(players[0].id, {
            'date': PRACTICE_DAY,
            'time_slot': '09:00-11:00',
            'status': 'busy'
        })

        assert 'Status' in result['error']

    def test_get_availability_in_range(self, availability_service):
        """Test range listing is ordered by date then slot"""
        service, players, _ = availability_service
        for day, time_slot in [(6, '14:00-16:00'), (4, '18:00-20:00'), (4, '09:00-11:00'), (20, '09:00-11:00')]:
            service.set_player_availability(players[1].id, {
                'date': date(2024, 5, day),
                'time_slot': time_slot,
                'status': 'maybe'
            })

        entries = service.get_player_availability(players[1].id, date(2024, 5, 1), date(2024, 5, 10))

        assert [(e['date'], e['time_slot']) for e in entries] == [
            ('2024-05-04', '09:00-11:00'),
            ('2024-05-04', '18:00-20:00'),
            ('2024-05-06', '14:00-16:00')
        ]

    def test_team_summary(self, availability_service):
        """Test per-slot status counts for a team"""
        service, players, team = availability_service
        service.set_player_availability(players[0].id, {
            'date': PRACTICE_DAY, 'time_slot': '09:00-11:00', 'status': 'available'
        })
        service.set_player_availability(players[1].id, {
            'date': PRACTICE_DAY, 'time_slot': '09:00-11:00', 'status': 'unavailable'
        })
        service.set_player_availability(players[2].id, {
            'date': PRACTICE_DAY, 'time_slot': '18:00-20:00', 'status': 'maybe'
        })

        summary = service.get_team_availability_summary(team.id, PRACTICE_DAY)

        assert [row['time_slot'] for row in summary] == [
            '09:00-11:00', '11:00-13:00', '14:00-16:00', '16:00-18:00', '18:00-20:00'
        ]
        assert summary[0] == {
            'time_slot': '09:00-11:00', 'available': 1, 'unavailable': 1, 'maybe': 0, 'not_set': 1
        }
        assert summary[1]['not_set'] == 3
        assert summary[4]['maybe'] == 1
        assert summary[4]['not_set'] == 2


class TestAvailabilityPolicies:
    """Test how missing records are interpreted"""

    def test_absent_means_available(self):
        policy = AbsentMeansAvailable()

        assert policy.is_available(None) is True
        assert policy.is_available(AvailabilityStatus.MAYBE) is True
        assert policy.is_available(AvailabilityStatus.UNAVAILABLE) is False

    def test_absent_means_unavailable(self):
        policy = AbsentMeansUnavailable()

        assert policy.is_available(None) is False
        assert policy.is_available(AvailabilityStatus.AVAILABLE) is True
        assert policy.is_available(AvailabilityStatus.UNAVAILABLE) is False
