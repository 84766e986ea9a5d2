import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name, default='false'):
    return os.environ.get(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    DATABASE_URL = os.environ.get('DATABASE_URL') or 'sqlite:///gameplan.db'

    # Game defaults
    DEFAULT_SPORT_TYPE = os.environ.get('DEFAULT_SPORT_TYPE', 'Basketball')
    DEFAULT_MIN_PLAYERS = int(os.environ.get('DEFAULT_MIN_PLAYERS', '1'))
    DEFAULT_MAX_PLAYERS = int(os.environ.get('DEFAULT_MAX_PLAYERS', '20'))
    DEFAULT_DURATION_MINUTES = int(os.environ.get('DEFAULT_DURATION_MINUTES', '120'))

    # Candidate window bounds for slot search (hours of day)
    DAY_START_HOUR = int(os.environ.get('DAY_START_HOUR', '8'))
    DAY_END_HOUR = int(os.environ.get('DAY_END_HOUR', '22'))

    # Expansion with start_date > end_date raises InvalidRange instead of returning []
    REJECT_INVERTED_RANGE = _env_flag('REJECT_INVERTED_RANGE')

    # Treat max_players as an upper bound on a candidate's available count
    ENFORCE_MAX_PLAYERS = _env_flag('ENFORCE_MAX_PLAYERS')

    # Fixed slots reported by the team availability summary
    SUMMARY_TIME_SLOTS = [
        '09:00-11:00', '11:00-13:00', '14:00-16:00', '16:00-18:00', '18:00-20:00'
    ]

    # Logging
    LOG_FILE = os.environ.get('LOG_FILE', 'logs/gameplan.log')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


class DevelopmentConfig(Config):
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class TestingConfig(Config):
    DATABASE_URL = 'sqlite:///test_gameplan.db'
    LOG_FILE = 'logs/test_gameplan.log'


class ProductionConfig(Config):
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'WARNING')


config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig
}


def get_config():
    """Return the config class selected by GAMEPLAN_ENV"""
    return config.get(os.environ.get('GAMEPLAN_ENV', 'default'), DevelopmentConfig)
