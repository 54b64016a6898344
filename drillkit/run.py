"""Running a single exercise without the completion prompt."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.status import Status

from . import ui
from .exercise import Exercise, ExerciseFailed, Mode
from .verify import ExerciseError, test


@contextmanager
def _spinner(message: str) -> Iterator[Status]:
    with Console(stderr=True).status(message) as status:
        yield status


def run(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run, or test, one exercise; raise ExerciseError on failure."""
    if exercise.mode is Mode.TEST:
        test(exercise, verbose)
    else:
        _compile_and_run(exercise)


def _compile_and_run(exercise: Exercise) -> None:
    with _spinner(f"Compiling {exercise}...") as status:
        try:
            compiled = exercise.compile()
        except ExerciseFailed as failed:
            status.stop()
            ui.warn(f"Compilation of {exercise} failed!, Compiler error message:\n")
            print(failed.output.stderr)
            raise ExerciseError(exercise) from failed

        with compiled:
            status.update(f"Running {exercise}...")
            try:
                output = compiled.run()
            except ExerciseFailed as failed:
                status.stop()
                print(failed.output.stdout)
                print(failed.output.stderr)
                ui.warn(f"Ran {exercise} with errors")
                raise ExerciseError(exercise) from failed

    print(output.stdout)
    ui.success(f"Successfully ran {exercise}")