"""Errors raised by the scheduling core.

Storage failures are not wrapped here: SQLAlchemy errors propagate to the
caller unchanged after ``get_db`` rolls the session back.
"""


class SchedulingError(Exception):
    """Base class for scheduling errors"""


class NotFound(SchedulingError):
    """A referenced record does not exist"""


class PatternNotFound(NotFound):
    def __init__(self, pattern_id):
        super().__init__(f"Recurring pattern {pattern_id} not found")
        self.pattern_id = pattern_id


class InvalidRange(SchedulingError):
    def __init__(self, start_date, end_date):
        super().__init__(f"End date {end_date} must not be before start date {start_date}")
        self.start_date = start_date
        self.end_date = end_date
