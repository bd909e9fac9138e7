"""
Built-in exercise catalog.

Used when a request does not ship its own catalog. Order matters: the
generator and substitution pick candidates in this order, so within each
muscle group the preferred exercise for each equipment tag comes first.
"""
from gymai.models.exercise import Difficulty, Exercise, ExerciseType

COMPOUND = ExerciseType.COMPOUND
ISOLATION = ExerciseType.ISOLATION


def _ex(id, name, muscle_group, equipment, exercise_type, difficulty=Difficulty.BEGINNER, secondary=()):
    return Exercise(
        id=id,
        name=name,
        muscle_group=muscle_group,
        secondary_muscles=secondary,
        equipment_required=equipment,
        exercise_type=exercise_type,
        difficulty=difficulty,
    )


DEFAULT_CATALOG: tuple[Exercise, ...] = (
    # Chest
    _ex("chest-bb-bench", "Barbell Bench Press", "chest", "barbell", COMPOUND, Difficulty.INTERMEDIATE, ("triceps", "shoulders")),
    _ex("chest-db-press", "Dumbbell Bench Press", "chest", "dumbbells", COMPOUND, secondary=("triceps", "shoulders")),
    _ex("chest-db-fly", "Dumbbell Fly", "chest", "dumbbells", ISOLATION),
    _ex("chest-cable-crossover", "Cable Crossover", "chest", "cables", ISOLATION, Difficulty.INTERMEDIATE),
    _ex("chest-machine-press", "Machine Chest Press", "chest", "machines", COMPOUND, secondary=("triceps",)),
    _ex("chest-push-up", "Push-Up", "chest", "bodyweight", COMPOUND, secondary=("triceps", "core")),
    # Back
    _ex("back-deadlift", "Deadlift", "back", "barbell", COMPOUND, Difficulty.ADVANCED, ("legs", "core")),
    _ex("back-bb-row", "Barbell Bent-Over Row", "back", "barbell", COMPOUND, Difficulty.INTERMEDIATE, ("biceps",)),
    _ex("back-db-row", "One-Arm Dumbbell Row", "back", "dumbbells", COMPOUND, secondary=("biceps",)),
    _ex("back-lat-pulldown", "Lat Pulldown", "back", "cables", COMPOUND, secondary=("biceps",)),
    _ex("back-straight-arm-pulldown", "Straight-Arm Pulldown", "back", "cables", ISOLATION),
    _ex("back-pull-up", "Pull-Up", "back", "bodyweight", COMPOUND, Difficulty.INTERMEDIATE, ("biceps",)),
    _ex("back-superman", "Superman Hold", "back", "bodyweight", ISOLATION),
    # Shoulders
    _ex("shoulders-ohp", "Overhead Press", "shoulders", "barbell", COMPOUND, Difficulty.INTERMEDIATE, ("triceps",)),
    _ex("shoulders-db-press", "Seated Dumbbell Shoulder Press", "shoulders", "dumbbells", COMPOUND, secondary=("triceps",)),
    _ex("shoulders-lateral-raise", "Dumbbell Lateral Raise", "shoulders", "dumbbells", ISOLATION),
    _ex("shoulders-face-pull", "Band Face Pull", "shoulders", "bands", ISOLATION),
    _ex("shoulders-pike-push-up", "Pike Push-Up", "shoulders", "bodyweight", COMPOUND, Difficulty.INTERMEDIATE, ("triceps",)),
    # Biceps
    _ex("biceps-bb-curl", "Barbell Curl", "biceps", "barbell", ISOLATION),
    _ex("biceps-db-curl", "Dumbbell Curl", "biceps", "dumbbells", ISOLATION),
    _ex("biceps-hammer-curl", "Hammer Curl", "biceps", "dumbbells", ISOLATION),
    _ex("biceps-band-curl", "Band Curl", "biceps", "bands", ISOLATION),
    _ex("biceps-chin-up", "Chin-Up", "biceps", "bodyweight", COMPOUND, Difficulty.INTERMEDIATE, ("back",)),
    # Triceps
    _ex("triceps-close-grip-bench", "Close-Grip Bench Press", "triceps", "barbell", COMPOUND, Difficulty.INTERMEDIATE, ("chest",)),
    _ex("triceps-pushdown", "Cable Triceps Pushdown", "triceps", "cables", ISOLATION),
    _ex("triceps-db-extension", "Overhead Dumbbell Extension", "triceps", "dumbbells", ISOLATION),
    _ex("triceps-bench-dip", "Bench Dip", "triceps", "bodyweight", COMPOUND, secondary=("chest", "shoulders")),
    # Legs
    _ex("legs-back-squat", "Barbell Back Squat", "legs", "barbell", COMPOUND, Difficulty.INTERMEDIATE, ("core",)),
    _ex("legs-rdl", "Romanian Deadlift", "legs", "barbell", COMPOUND, Difficulty.INTERMEDIATE, ("back",)),
    _ex("legs-goblet-squat", "Goblet Squat", "legs", "dumbbells", COMPOUND, secondary=("core",)),
    _ex("legs-kb-swing", "Kettlebell Swing", "legs", "kettlebell", COMPOUND, Difficulty.INTERMEDIATE, ("back", "core")),
    _ex("legs-leg-press", "Leg Press", "legs", "machines", COMPOUND),
    _ex("legs-leg-extension", "Leg Extension", "legs", "machines", ISOLATION),
    _ex("legs-bw-squat", "Bodyweight Squat", "legs", "bodyweight", COMPOUND),
    _ex("legs-lunge", "Walking Lunge", "legs", "bodyweight", COMPOUND, secondary=("core",)),
    _ex("legs-calf-raise", "Standing Calf Raise", "legs", "bodyweight", ISOLATION),
    # Core
    _ex("core-plank", "Plank", "core", "bodyweight", ISOLATION),
    _ex("core-hanging-leg-raise", "Hanging Leg Raise", "core", "bodyweight", ISOLATION, Difficulty.INTERMEDIATE),
    _ex("core-cable-crunch", "Cable Crunch", "core", "cables", ISOLATION),
    _ex("core-kb-windmill", "Kettlebell Windmill", "core", "kettlebell", COMPOUND, Difficulty.ADVANCED, ("shoulders",)),
)
