import os

# Must be set before gameplan.database builds its engine
os.environ['GAMEPLAN_ENV'] = 'testing'
