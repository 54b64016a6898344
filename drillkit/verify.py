"""Checking exercises in order and prompting on those still marked pending."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from enum import Enum, auto

from rich.console import Console
from rich.status import Status
from rich.text import Text

from . import ui
from .exercise import CompiledExercise, Exercise, ExerciseFailed, Mode


class RunMode(Enum):
    """Whether a passing exercise is followed by the completion prompt."""

    INTERACTIVE = auto()
    NON_INTERACTIVE = auto()


class ExerciseError(Exception):
    """An exercise failed to compile, to run, or is not yet marked done."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(f"{exercise} is not finished")
        self.exercise = exercise


@contextmanager
def _spinner(message: str) -> Iterator[Status]:
    with Console(stderr=True).status(message) as status:
        yield status


def _out() -> Console:
    return Console(highlight=False, soft_wrap=True)


def verify(exercises: Iterable[Exercise], verbose: bool = False) -> None:
    """Check each exercise in turn; raise ExerciseError at the first unfinished one."""
    for exercise in exercises:
        match exercise.mode:
            case Mode.TEST:
                finished = _compile_and_test(exercise, RunMode.INTERACTIVE, verbose)
            case Mode.COMPILE:
                finished = _compile_and_run_interactively(exercise)
            case Mode.CLIPPY:
                finished = _compile_only(exercise)
        if not finished:
            raise ExerciseError(exercise)


def test(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run an exercise's tests; raise ExerciseError on failure."""
    _compile_and_test(exercise, RunMode.NON_INTERACTIVE, verbose)


def _compile(exercise: Exercise, status: Status) -> CompiledExercise:
    try:
        return exercise.compile()
    except ExerciseFailed as failed:
        status.stop()
        ui.warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
        print(failed.output.stderr)
        raise ExerciseError(exercise) from failed


def _compile_only(exercise: Exercise) -> bool:
    with _spinner(f"Compiling {exercise}...") as status:
        _compile(exercise, status).close()
    ui.success(f"Successfully compiled {exercise}!")
    return _prompt_for_completion(exercise)


def _compile_and_run_interactively(exercise: Exercise) -> bool:
    with _spinner(f"Compiling {exercise}...") as status:
        with _compile(exercise, status) as compiled:
            status.update(f"Running {exercise}...")
            try:
                output = compiled.run()
            except ExerciseFailed as failed:
                status.stop()
                ui.warn(f"Ran {exercise} with errors")
                print(failed.output.stdout)
                print(failed.output.stderr)
                raise ExerciseError(exercise) from failed
    ui.success(f"Successfully ran {exercise}!")
    return _prompt_for_completion(exercise, output.stdout)


def _compile_and_test(exercise: Exercise, run_mode: RunMode, verbose: bool) -> bool:
    with _spinner(f"Testing {exercise}...") as status:
        with _compile(exercise, status) as compiled:
            try:
                output = compiled.run()
            except ExerciseFailed as failed:
                status.stop()
                ui.warn(f"Testing of {exercise} failed! Please try again. Here's the output:")
                print(failed.output.stdout)
                raise ExerciseError(exercise) from failed
    if verbose:
        print(output.stdout)
    ui.success(f"Successfully tested {exercise}")
    if run_mode is RunMode.INTERACTIVE:
        return _prompt_for_completion(exercise)
    return True


def _separator() -> Text:
    return Text("====================", style="bold")


def _prompt_for_completion(exercise: Exercise, prompt_output: str | None = None) -> bool:
    state = exercise.state()
    if state.done():
        return True

    no_emoji = ui.no_emoji()
    clippy_success = (
        "The code is compiling, and Clippy is happy!"
        if no_emoji
        else "The code is compiling, and 📎 Clippy 📎 is happy!"
    )
    success_msg = {
        Mode.COMPILE: "The code is compiling!",
        Mode.TEST: "The code is compiling, and the tests pass!",
        Mode.CLIPPY: clippy_success,
    }[exercise.mode]

    console = _out()
    print()
    if no_emoji:
        print(f"~*~ {success_msg} ~*~")
    else:
        print(f"🎉 🎉  {success_msg} 🎉 🎉")
    print()

    if prompt_output is not None:
        print("Output:")
        console.print(_separator())
        print(prompt_output)
        console.print(_separator())
        print()

    print("You can keep working on this exercise,")
    console.print(
        Text.assemble(
            "or jump into the next one by removing the ",
            ("`I AM NOT DONE`", "bold"),
            " comment:",
        )
    )
    print()
    for context_line in state.context:
        console.print(
            Text.assemble(
                (f"{context_line.number:>2}", "bold blue"),
                " ",
                ("|", "blue"),
                "  ",
                (context_line.line, "bold" if context_line.important else ""),
            )
        )
    return False