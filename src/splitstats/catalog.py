"""Built-in exercise catalog.

Exercises users can pick when building a workout, categorised by type,
muscle group and equipment.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ExerciseCategory(str, Enum):
    STRENGTH = "strength"
    CARDIO = "cardio"


class MuscleGroup(str, Enum):
    CHEST = "chest"
    BACK = "back"
    SHOULDERS = "shoulders"
    ARMS = "arms"
    LEGS = "legs"
    CORE = "core"
    FULL_BODY = "fullBody"


class Equipment(str, Enum):
    BARBELL = "barbell"
    DUMBBELL = "dumbbell"
    MACHINE = "machine"
    CABLE = "cable"
    BODY_WEIGHT = "bodyWeight"
    KETTLEBELL = "kettlebell"
    CARDIO = "cardio"
    OTHER = "other"


@dataclass(frozen=True)
class CatalogExercise:
    id: str
    name: str
    category: ExerciseCategory
    muscle_group: MuscleGroup
    equipment: Equipment


_S = ExerciseCategory.STRENGTH
_C = ExerciseCategory.CARDIO
_M = MuscleGroup
_E = Equipment

# (id, name, category, muscle group, equipment)
_CATALOG_ROWS = [
    # Chest
    ("bench-press", "Bench Press", _S, _M.CHEST, _E.BARBELL),
    ("push-up", "Push-Up", _S, _M.CHEST, _E.BODY_WEIGHT),
    ("dumbbell-fly", "Dumbbell Fly", _S, _M.CHEST, _E.DUMBBELL),
    ("incline-bench-press", "Incline Bench Press", _S, _M.CHEST, _E.BARBELL),
    ("cable-crossover", "Cable Crossover", _S, _M.CHEST, _E.CABLE),
    ("chest-dip", "Chest Dip", _S, _M.CHEST, _E.BODY_WEIGHT),
    ("decline-bench-press", "Decline Bench Press", _S, _M.CHEST, _E.BARBELL),
    ("dumbbell-bench-press", "Dumbbell Bench Press", _S, _M.CHEST, _E.DUMBBELL),
    ("incline-dumbbell-press", "Incline Dumbbell Press", _S, _M.CHEST, _E.DUMBBELL),
    ("pec-deck-fly", "Pec Deck Fly", _S, _M.CHEST, _E.MACHINE),
    ("svend-press", "Svend Press", _S, _M.CHEST, _E.OTHER),
    ("landmine-press", "Landmine Press", _S, _M.CHEST, _E.BARBELL),
    ("chest-press-machine", "Chest Press Machine", _S, _M.CHEST, _E.MACHINE),
    # Back
    ("pull-up", "Pull-Up", _S, _M.BACK, _E.BODY_WEIGHT),
    ("deadlift", "Deadlift", _S, _M.BACK, _E.BARBELL),
    ("barbell-row", "Barbell Row", _S, _M.BACK, _E.BARBELL),
    ("lat-pulldown", "Lat Pulldown", _S, _M.BACK, _E.CABLE),
    ("seated-row", "Seated Row", _S, _M.BACK, _E.CABLE),
    ("dumbbell-row", "Single-Arm Dumbbell Row", _S, _M.BACK, _E.DUMBBELL),
    ("chin-up", "Chin-Up", _S, _M.BACK, _E.BODY_WEIGHT),
    ("t-bar-row", "T-Bar Row", _S, _M.BACK, _E.MACHINE),
    ("inverted-row", "Inverted Row", _S, _M.BACK, _E.BODY_WEIGHT),
    ("rack-pull", "Rack Pull", _S, _M.BACK, _E.BARBELL),
    ("straight-arm-pulldown", "Straight Arm Pulldown", _S, _M.BACK, _E.CABLE),
    ("good-morning", "Good Morning", _S, _M.BACK, _E.BARBELL),
    ("meadows-row", "Meadows Row", _S, _M.BACK, _E.BARBELL),
    ("pendlay-row", "Pendlay Row", _S, _M.BACK, _E.BARBELL),
    # Shoulders
    ("overhead-press", "Overhead Press", _S, _M.SHOULDERS, _E.BARBELL),
    ("lateral-raise", "Lateral Raise", _S, _M.SHOULDERS, _E.DUMBBELL),
    ("front-raise", "Front Raise", _S, _M.SHOULDERS, _E.DUMBBELL),
    ("reverse-fly", "Reverse Fly", _S, _M.SHOULDERS, _E.DUMBBELL),
    ("face-pull", "Face Pull", _S, _M.SHOULDERS, _E.CABLE),
    ("arnold-press", "Arnold Press", _S, _M.SHOULDERS, _E.DUMBBELL),
    ("upright-row", "Upright Row", _S, _M.SHOULDERS, _E.BARBELL),
    ("shrug", "Shrug", _S, _M.SHOULDERS, _E.DUMBBELL),
    ("push-press", "Push Press", _S, _M.SHOULDERS, _E.BARBELL),
    ("seated-overhead-press", "Seated Overhead Press", _S, _M.SHOULDERS, _E.DUMBBELL),
    ("landmine-press-shoulder", "Landmine Shoulder Press", _S, _M.SHOULDERS, _E.BARBELL),
    ("cable-lateral-raise", "Cable Lateral Raise", _S, _M.SHOULDERS, _E.CABLE),
    ("behind-neck-press", "Behind the Neck Press", _S, _M.SHOULDERS, _E.BARBELL),
    # Arms
    ("bicep-curl", "Bicep Curl", _S, _M.ARMS, _E.DUMBBELL),
    ("tricep-extension", "Tricep Extension", _S, _M.ARMS, _E.CABLE),
    ("skull-crusher", "Skull Crusher", _S, _M.ARMS, _E.BARBELL),
    ("hammer-curl", "Hammer Curl", _S, _M.ARMS, _E.DUMBBELL),
    ("tricep-dip", "Tricep Dip", _S, _M.ARMS, _E.BODY_WEIGHT),
    ("preacher-curl", "Preacher Curl", _S, _M.ARMS, _E.BARBELL),
    ("barbell-curl", "Barbell Curl", _S, _M.ARMS, _E.BARBELL),
    ("cable-curl", "Cable Curl", _S, _M.ARMS, _E.CABLE),
    ("concentration-curl", "Concentration Curl", _S, _M.ARMS, _E.DUMBBELL),
    ("close-grip-bench-press", "Close Grip Bench Press", _S, _M.ARMS, _E.BARBELL),
    ("tricep-pushdown", "Tricep Pushdown", _S, _M.ARMS, _E.CABLE),
    ("diamond-push-up", "Diamond Push-Up", _S, _M.ARMS, _E.BODY_WEIGHT),
    ("ez-bar-curl", "EZ Bar Curl", _S, _M.ARMS, _E.BARBELL),
    ("overhead-tricep-extension", "Overhead Tricep Extension", _S, _M.ARMS, _E.DUMBBELL),
    ("wrist-curl", "Wrist Curl", _S, _M.ARMS, _E.DUMBBELL),
    ("reverse-wrist-curl", "Reverse Wrist Curl", _S, _M.ARMS, _E.DUMBBELL),
    # Legs
    ("squat", "Squat", _S, _M.LEGS, _E.BARBELL),
    ("leg-press", "Leg Press", _S, _M.LEGS, _E.MACHINE),
    ("hip-thrust", "Hip Thrust", _S, _M.LEGS, _E.MACHINE),
    ("lunge", "Lunge", _S, _M.LEGS, _E.BODY_WEIGHT),
    ("leg-extension", "Leg Extension", _S, _M.LEGS, _E.MACHINE),
    ("leg-curl", "Leg Curl", _S, _M.LEGS, _E.MACHINE),
    ("calf-raise", "Calf Raise", _S, _M.LEGS, _E.MACHINE),
    ("romanian-deadlift", "Romanian Deadlift", _S, _M.LEGS, _E.BARBELL),
    ("front-squat", "Front Squat", _S, _M.LEGS, _E.BARBELL),
    ("hack-squat", "Hack Squat", _S, _M.LEGS, _E.MACHINE),
    ("bulgarian-split-squat", "Bulgarian Split Squat", _S, _M.LEGS, _E.DUMBBELL),
    ("sumo-deadlift", "Sumo Deadlift", _S, _M.LEGS, _E.BARBELL),
    ("goblet-squat", "Goblet Squat", _S, _M.LEGS, _E.DUMBBELL),
    ("dumbbell-lunge", "Dumbbell Lunge", _S, _M.LEGS, _E.DUMBBELL),
    ("seated-calf-raise", "Seated Calf Raise", _S, _M.LEGS, _E.MACHINE),
    ("adductor-machine", "Adductor Machine", _S, _M.LEGS, _E.MACHINE),
    ("abductor-machine", "Abductor Machine", _S, _M.LEGS, _E.MACHINE),
    ("step-up", "Step Up", _S, _M.LEGS, _E.DUMBBELL),
    ("box-jump", "Box Jump", _S, _M.LEGS, _E.BODY_WEIGHT),
    ("donkey-calf-raise", "Donkey Calf Raise", _S, _M.LEGS, _E.MACHINE),
    # Core
    ("crunch", "Crunch", _S, _M.CORE, _E.BODY_WEIGHT),
    ("plank", "Plank", _S, _M.CORE, _E.BODY_WEIGHT),
    ("russian-twist", "Russian Twist", _S, _M.CORE, _E.BODY_WEIGHT),
    ("leg-raise", "Leg Raise", _S, _M.CORE, _E.BODY_WEIGHT),
    ("mountain-climber", "Mountain Climber", _S, _M.CORE, _E.BODY_WEIGHT),
    ("ab-rollout", "Ab Rollout", _S, _M.CORE, _E.OTHER),
    ("hanging-leg-raise", "Hanging Leg Raise", _S, _M.CORE, _E.BODY_WEIGHT),
    ("cable-crunch", "Cable Crunch", _S, _M.CORE, _E.CABLE),
    ("situp", "Sit-Up", _S, _M.CORE, _E.BODY_WEIGHT),
    ("side-plank", "Side Plank", _S, _M.CORE, _E.BODY_WEIGHT),
    ("woodchop", "Woodchop", _S, _M.CORE, _E.CABLE),
    ("pallof-press", "Pallof Press", _S, _M.CORE, _E.CABLE),
    ("bicycle-crunch", "Bicycle Crunch", _S, _M.CORE, _E.BODY_WEIGHT),
    ("dead-bug", "Dead Bug", _S, _M.CORE, _E.BODY_WEIGHT),
    ("bird-dog", "Bird Dog", _S, _M.CORE, _E.BODY_WEIGHT),
    ("dragon-flag", "Dragon Flag", _S, _M.CORE, _E.BODY_WEIGHT),
    ("medicine-ball-slam", "Medicine Ball Slam", _S, _M.CORE, _E.OTHER),
    # Cardio
    ("running", "Running", _C, _M.FULL_BODY, _E.CARDIO),
    ("cycling", "Cycling", _C, _M.FULL_BODY, _E.CARDIO),
    ("rowing", "Rowing", _C, _M.FULL_BODY, _E.CARDIO),
    ("jumping-rope", "Jumping Rope", _C, _M.FULL_BODY, _E.CARDIO),
    ("elliptical", "Elliptical", _C, _M.FULL_BODY, _E.CARDIO),
    ("stair-climber", "Stair Climber", _C, _M.LEGS, _E.CARDIO),
    ("burpee", "Burpee", _C, _M.FULL_BODY, _E.BODY_WEIGHT),
    ("high-knees", "High Knees", _C, _M.FULL_BODY, _E.BODY_WEIGHT),
    ("jumping-jack", "Jumping Jack", _C, _M.FULL_BODY, _E.BODY_WEIGHT),
    ("battle-ropes", "Battle Ropes", _C, _M.FULL_BODY, _E.OTHER),
    ("sprinting", "Sprinting", _C, _M.FULL_BODY, _E.BODY_WEIGHT),
    ("swimming", "Swimming", _C, _M.FULL_BODY, _E.OTHER),
    ("assault-bike", "Assault Bike", _C, _M.FULL_BODY, _E.CARDIO),
    ("sled-push", "Sled Push", _C, _M.FULL_BODY, _E.OTHER),
    ("mountain-climbers", "Mountain Climbers", _C, _M.FULL_BODY, _E.BODY_WEIGHT),
    ("box-jumps", "Box Jumps", _C, _M.LEGS, _E.BODY_WEIGHT),
    ("kettlebell-swing", "Kettlebell Swing", _C, _M.FULL_BODY, _E.KETTLEBELL),
    ("jumping-lunge", "Jumping Lunge", _C, _M.LEGS, _E.BODY_WEIGHT),
    ("ski-erg", "Ski Erg", _C, _M.FULL_BODY, _E.CARDIO),
    ("bear-crawl", "Bear Crawl", _C, _M.FULL_BODY, _E.BODY_WEIGHT),
]

EXERCISE_CATALOG: tuple[CatalogExercise, ...] = tuple(
    CatalogExercise(*row) for row in _CATALOG_ROWS
)


def exercises_by_category(category: ExerciseCategory) -> list[CatalogExercise]:
    return [e for e in EXERCISE_CATALOG if e.category == category]


def exercises_by_muscle_group(muscle_group: MuscleGroup) -> list[CatalogExercise]:
    return [e for e in EXERCISE_CATALOG if e.muscle_group == muscle_group]


def exercises_by_equipment(equipment: Equipment) -> list[CatalogExercise]:
    return [e for e in EXERCISE_CATALOG if e.equipment == equipment]


def exercises_by_category_and_muscle(
    category: ExerciseCategory,
    muscle_group: MuscleGroup,
) -> list[CatalogExercise]:
    return [
        e
        for e in EXERCISE_CATALOG
        if e.category == category and e.muscle_group == muscle_group
    ]


def find_exercise(name: str) -> CatalogExercise | None:
    """Look an exercise up by display name, ignoring case."""
    wanted = name.strip().casefold()
    for exercise in EXERCISE_CATALOG:
        if exercise.name.casefold() == wanted:
            return exercise
    return None
