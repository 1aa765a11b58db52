"""Bundled demo teams loaded by ``POST /api/seed`` and ``seed_db.py``."""

from typing import Dict, List

from hackjudge.schemas.team import TeamSeed


def _score(round_name: str, judge: str, feasibility: int, originality: int,
           completeness: int, functionality: int, presentation: int) -> Dict:
    return {
        "round": round_name,
        "judge": judge,
        "categories": [
            {"name": "Feasibility", "score": feasibility},
            {"name": "Originality", "score": originality},
            {"name": "Completeness", "score": completeness},
            {"name": "Functionality", "score": functionality},
            {"name": "Presentation", "score": presentation},
        ],
    }


TEAMS: List[Dict] = [
    {
        "id": "team-1",
        "name": "Code Crusaders",
        "project_name": "EcoTrack",
        "scores": [
            _score("Round 1", "Judge A", 17, 16, 15, 18, 16),
            _score("Round 1", "Judge B", 16, 17, 14, 17, 17),
            _score("Round 2", "Judge A", 18, 17, 17, 18, 18),
        ],
    },
    {
        "id": "team-2",
        "name": "Byte Builders",
        "project_name": "MediMatch",
        "scores": [
            _score("Round 1", "Judge A", 15, 18, 13, 15, 16),
            _score("Round 1", "Judge B", 16, 19, 14, 14, 15),
            _score("Round 2", "Judge B", 17, 18, 16, 16, 17),
        ],
    },
    {
        "id": "team-3",
        "name": "Pixel Pioneers",
        "project_name": "StudySync",
        "scores": [
            _score("Round 1", "Judge A", 14, 15, 16, 16, 13),
            _score("Round 1", "Judge C", 15, 14, 16, 17, 14),
        ],
    },
    {
        "id": "team-4",
        "name": "Neural Knights",
        "project_name": "VoiceAid",
        "scores": [
            _score("Round 1", "Judge B", 18, 19, 15, 16, 18),
            _score("Round 2", "Judge A", 19, 19, 17, 17, 19),
            _score("Round 2", "Judge C", 18, 18, 18, 16, 18),
        ],
    },
    {
        "id": "team-5",
        "name": "Cloud Nine",
        "project_name": "FarmFlow",
        "scores": [],
    },
]


def default_seed() -> List[TeamSeed]:
    return [TeamSeed.model_validate(team) for team in TEAMS]
