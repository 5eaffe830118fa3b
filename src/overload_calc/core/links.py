"""
Workout-link selection.

Maps an exercise name and the weight still to be added onto a suggested
video search.  Matching is a case-insensitive substring test against an
ordered keyword list; the first keyword found wins, so a name containing
several keywords always resolves the same way.
"""

from typing import Final

from .config import MEDIUM_DIFFERENCE_LIMIT, SMALL_DIFFERENCE_LIMIT
from .models import LinkCategory, WorkoutLink

DEFAULT_FAMILY: Final[str] = "default"

# Checked top to bottom.
KEYWORD_FAMILIES: Final[tuple[tuple[str, str], ...]] = (
    ("bench", "bench"),
    ("squat", "squat"),
    ("deadlift", "deadlift"),
    ("press", "press"),
    ("row", "row"),
    ("pullup", "pullup"),
    ("curl", "curl"),
)

_SEARCH = "https://www.youtube.com/results?search_query="

# (family, category) → (url, label)
LINK_TABLE: Final[dict[str, dict[str, tuple[str, str]]]] = {
    "bench": {
        "small": (_SEARCH + "progressive+overload+bench+press+tips", "Bench Press Progressive Overload Tips"),
        "medium": (_SEARCH + "increase+bench+press+strength+program", "Bench Press Strength Program"),
        "large": (_SEARCH + "bench+press+strength+building+routine", "Advanced Bench Press Training"),
    },
    "squat": {
        "small": (_SEARCH + "squat+progressive+overload+technique", "Squat Progressive Overload Tips"),
        "medium": (_SEARCH + "increase+squat+strength+program", "Squat Strength Program"),
        "large": (_SEARCH + "advanced+squat+training+program", "Advanced Squat Training"),
    },
    "deadlift": {
        "small": (_SEARCH + "deadlift+progressive+overload+tips", "Deadlift Progressive Overload Tips"),
        "medium": (_SEARCH + "increase+deadlift+strength", "Deadlift Strength Program"),
        "large": (_SEARCH + "advanced+deadlift+training", "Advanced Deadlift Training"),
    },
    "press": {
        "small": (_SEARCH + "overhead+press+progressive+overload", "Shoulder Press Progressive Tips"),
        "medium": (_SEARCH + "increase+shoulder+press+strength", "Shoulder Press Strength Program"),
        "large": (_SEARCH + "advanced+shoulder+training", "Advanced Shoulder Training"),
    },
    "row": {
        "small": (_SEARCH + "row+progressive+overload+tips", "Row Progressive Overload Tips"),
        "medium": (_SEARCH + "increase+rowing+strength", "Row Strength Program"),
        "large": (_SEARCH + "advanced+back+training", "Advanced Back Training"),
    },
    "pullup": {
        "small": (_SEARCH + "pullup+progression+tips", "Pull-up Progression Tips"),
        "medium": (_SEARCH + "increase+pullup+strength", "Pull-up Strength Program"),
        "large": (_SEARCH + "advanced+pullup+training", "Advanced Pull-up Training"),
    },
    "curl": {
        "small": (_SEARCH + "bicep+curl+progressive+overload", "Curl Progressive Overload Tips"),
        "medium": (_SEARCH + "build+bigger+biceps+program", "Bicep Strength Program"),
        "large": (_SEARCH + "advanced+arm+training", "Advanced Arm Training"),
    },
    DEFAULT_FAMILY: {
        "small": (_SEARCH + "progressive+overload+training+tips", "Progressive Overload Training Tips"),
        "medium": (_SEARCH + "strength+training+program", "Strength Training Program"),
        "large": (_SEARCH + "advanced+strength+training", "Advanced Strength Training"),
    },
}


def classify_weight_difference(weight_difference: float) -> LinkCategory:
    """
    Bucket the weight still to be added.

    < 5 → "small", < 15 → "medium", otherwise "large".  Upper bounds are
    exclusive: exactly 5 is "medium" and exactly 15 is "large".
    """
    if weight_difference < SMALL_DIFFERENCE_LIMIT:
        return "small"
    if weight_difference < MEDIUM_DIFFERENCE_LIMIT:
        return "medium"
    return "large"


def match_exercise_family(exercise: str) -> str:
    """Return the first keyword family contained in the name, or "default"."""
    name = exercise.lower()
    for keyword, family in KEYWORD_FAMILIES:
        if keyword in name:
            return family
    return DEFAULT_FAMILY


def workout_link_for(exercise: str, weight_difference: float) -> WorkoutLink:
    """
    Pick the workout link for an exercise and weight difference.

    Args:
        exercise: Exercise name as entered
        weight_difference: target weight − current weight

    Returns:
        WorkoutLink from the static table
    """
    family = match_exercise_family(exercise)
    category = classify_weight_difference(weight_difference)
    url, label = LINK_TABLE[family][category]
    return WorkoutLink(url=url, label=label, family=family, category=category)
