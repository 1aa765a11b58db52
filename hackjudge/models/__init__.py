"""
HackJudge – SQLAlchemy ORM models package.

Imports all model classes so the app can discover them
through a single ``from hackjudge.models import *`` import.
"""

from hackjudge.models.team import Team                 # noqa: F401
from hackjudge.models.score import Score               # noqa: F401
from hackjudge.models.feedback import Feedback         # noqa: F401
