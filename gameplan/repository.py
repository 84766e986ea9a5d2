import threading
from contextlib import contextmanager
from datetime import date, datetime
from typing import Dict, List, Optional
from sqlalchemy import and_, func
from sqlalchemy.dialects.mysql import insert as mysql_insert
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from gameplan.database import get_db
from gameplan.models import (
    Game, GameTeam, TeamMember, RecurringPattern, PlayerAvailability, WeatherForecast
)
from gameplan.models.availability import AvailabilityStatus


_UPSERT_INSERTS = {
    'sqlite': sqlite_insert,
    'postgresql': postgresql_insert,
}


class SchedulingRepository:
    """Data access used by the scheduling core.

    Every call opens its own transactional scope unless it runs inside
    ``transaction()``, in which case all calls from the same thread share one
    session and commit or roll back together. Other threads using the same
    repository keep their own scopes.
    """

    def __init__(self):
        self._local = threading.local()

    @property
    def _session(self):
        return getattr(self._local, 'session', None)

    @contextmanager
    def transaction(self):
        if self._session is not None:
            # Nested use joins the outer transaction
            yield self._session
            return
        with get_db() as db:
            self._local.session = db
            try:
                yield db
            finally:
                self._local.session = None

    @contextmanager
    def _db(self):
        if self._session is not None:
            yield self._session
        else:
            with get_db() as db:
                yield db

    # Patterns

    def get_pattern(self, pattern_id: int) -> Optional[RecurringPattern]:
        with self._db() as db:
            return db.query(RecurringPattern).filter(RecurringPattern.id == pattern_id).first()

    def create_pattern(self, fields: Dict) -> RecurringPattern:
        with self._db() as db:
            pattern = RecurringPattern(**fields)
            db.add(pattern)
            db.flush()
            db.refresh(pattern)
            return pattern

    def list_patterns(self, series_id: int) -> List[RecurringPattern]:
        with self._db() as db:
            return db.query(RecurringPattern).filter(
                RecurringPattern.series_id == series_id
            ).order_by(RecurringPattern.created_at.desc(), RecurringPattern.id.desc()).all()

    # Games

    def create_game(self, fields: Dict) -> int:
        with self._db() as db:
            game = Game(**fields)
            db.add(game)
            db.flush()
            return game.id

    def get_game(self, game_id: int) -> Optional[Game]:
        with self._db() as db:
            return db.query(Game).filter(Game.id == game_id).first()

    def find_games_by_date_and_time(self, game_date: date, time: str) -> List[Game]:
        with self._db() as db:
            return db.query(Game).filter(
                Game.date == game_date,
                Game.time == time
            ).order_by(Game.id).all()

    def find_games_by_location_and_date(self, location: str, game_date: date) -> List[Game]:
        """Games at the venue on the date; games without a location never match"""
        if location is None:
            return []
        with self._db() as db:
            return db.query(Game).filter(
                Game.location == location,
                Game.date == game_date
            ).order_by(Game.id).all()

    def count_games_at_date_time(self, game_date: date, time: str) -> int:
        with self._db() as db:
            return db.query(func.count(Game.id)).filter(
                Game.date == game_date,
                Game.time == time
            ).scalar() or 0

    # Rosters

    def get_roster_user_ids(self, game_id: int) -> List[int]:
        """Distinct members across every team linked to the game"""
        with self._db() as db:
            rows = db.query(TeamMember.user_id).join(
                GameTeam, GameTeam.team_id == TeamMember.team_id
            ).filter(
                GameTeam.game_id == game_id
            ).distinct().order_by(TeamMember.user_id).all()
            return [row.user_id for row in rows]

    def get_series_roster_user_ids(self, series_id: int) -> List[int]:
        """Distinct members across every team linked to any game of the series"""
        with self._db() as db:
            rows = db.query(TeamMember.user_id).join(
                GameTeam, GameTeam.team_id == TeamMember.team_id
            ).join(
                Game, Game.id == GameTeam.game_id
            ).filter(
                Game.series_id == series_id
            ).distinct().order_by(TeamMember.user_id).all()
            return [row.user_id for row in rows]

    # Availability

    def get_availability(self, user_id: int, slot_date: date,
                         time_slot_prefix: str) -> Optional[AvailabilityStatus]:
        """Status of the first slot (by slot string) starting with the prefix"""
        with self._db() as db:
            record = db.query(PlayerAvailability).filter(
                PlayerAvailability.user_id == user_id,
                PlayerAvailability.date == slot_date,
                PlayerAvailability.time_slot.startswith(time_slot_prefix, autoescape=True)
            ).order_by(PlayerAvailability.time_slot).first()
            return record.status if record else None

    def upsert_availability(self, user_id: int, slot_date: date, time_slot: str,
                            status: AvailabilityStatus, notes: str = '') -> PlayerAvailability:
        """Insert or update the (user, date, slot) record.

        SQLite, PostgreSQL and MySQL use a single conflict-aware INSERT. Other
        backends update the existing row inside the session, relying on the
        unique constraint to reject a concurrent duplicate insert.
        """
        now = datetime.utcnow()
        values = {
            'user_id': user_id,
            'date': slot_date,
            'time_slot': time_slot,
            'status': status,
            'notes': notes,
            'created_at': now,
            'updated_at': now
        }

        with self._db() as db:
            stmt = self._upsert_statement(db.get_bind().dialect.name, values)
            if stmt is None:
                return self._update_or_add_availability(db, values)

            db.execute(stmt)
            return self._find_availability(db, user_id, slot_date, time_slot, refresh=True)

    def _upsert_statement(self, dialect: str, values: Dict):
        table = PlayerAvailability.__table__
        if dialect == 'mysql':
            stmt = mysql_insert(table).values(**values)
            return stmt.on_duplicate_key_update(
                status=stmt.inserted.status,
                notes=stmt.inserted.notes,
                updated_at=stmt.inserted.updated_at
            )
        if dialect in _UPSERT_INSERTS:
            stmt = _UPSERT_INSERTS[dialect](table).values(**values)
            return stmt.on_conflict_do_update(
                index_elements=['user_id', 'date', 'time_slot'],
                set_={
                    'status': stmt.excluded.status,
                    'notes': stmt.excluded.notes,
                    'updated_at': stmt.excluded.updated_at
                }
            )
        return None

    def _update_or_add_availability(self, db, values: Dict) -> PlayerAvailability:
        record = self._find_availability(db, values['user_id'], values['date'], values['time_slot'])
        if record:
            record.status = values['status']
            record.notes = values['notes']
            record.updated_at = values['updated_at']
        else:
            record = PlayerAvailability(**values)
            db.add(record)
        db.flush()
        return record

    def _find_availability(self, db, user_id: int, slot_date: date, time_slot: str,
                           refresh: bool = False) -> Optional[PlayerAvailability]:
        query = db.query(PlayerAvailability)
        if refresh:
            query = query.populate_existing()
        return query.filter(
            PlayerAvailability.user_id == user_id,
            PlayerAvailability.date == slot_date,
            PlayerAvailability.time_slot == time_slot
        ).first()

    def list_availability(self, user_id: int, start_date: date,
                          end_date: date) -> List[PlayerAvailability]:
        with self._db() as db:
            return db.query(PlayerAvailability).filter(
                PlayerAvailability.user_id == user_id,
                PlayerAvailability.date.between(start_date, end_date)
            ).order_by(PlayerAvailability.date, PlayerAvailability.time_slot).all()

    def count_team_statuses(self, team_id: int, slot_date: date, time_slot: str) -> Dict:
        """Member counts per status for one exact slot; None counts members with no record"""
        with self._db() as db:
            rows = db.query(
                PlayerAvailability.status, func.count(TeamMember.id)
            ).select_from(TeamMember).outerjoin(
                PlayerAvailability,
                and_(
                    PlayerAvailability.user_id == TeamMember.user_id,
                    PlayerAvailability.date == slot_date,
                    PlayerAvailability.time_slot == time_slot
                )
            ).filter(
                TeamMember.team_id == team_id
            ).group_by(PlayerAvailability.status).all()
            return {status: count for status, count in rows}

    # Weather

    def create_forecast(self, fields: Dict) -> WeatherForecast:
        with self._db() as db:
            forecast = WeatherForecast(**fields)
            db.add(forecast)
            db.flush()
            db.refresh(forecast)
            return forecast

    def get_forecast(self, location: str, forecast_date: date) -> Optional[WeatherForecast]:
        with self._db() as db:
            return db.query(WeatherForecast).filter(
                WeatherForecast.location == location,
                WeatherForecast.date == forecast_date
            ).order_by(WeatherForecast.created_at.desc(), WeatherForecast.id.desc()).first()
