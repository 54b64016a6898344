# drillkit

A library for working through a course of small programming exercises. Each
exercise is a source file described in a TOML exercise list. drillkit compiles
the exercise with `rustc`, runs it or its tests, and reports where you left
off.

An exercise counts as pending while its file still holds a line of the form

    // I AM NOT DONE

Remove that line once you are happy with your solution.

## Installing

    pip install drillkit

Exercises are compiled with `rustc`, which must be on your `PATH`; exercises
in `clippy` mode also need `cargo`.

## The exercise list

    [[exercises]]
    name = "variables1"
    path = "exercises/variables/variables1.rs"
    mode = "compile"
    hint = "Declare the variable with let."

`mode` is one of `compile`, `test` or `clippy`.

## Usage

    from drillkit.exercise import load_exercises
    from drillkit.verify import verify, ExerciseError
    from drillkit.run import run

    exercises = load_exercises("info.toml")

    try:
        verify(exercises, verbose=False)
    except ExerciseError as err:
        print("Next up:", err.exercise.name)
        print(err.exercise.hint)

- `drillkit.exercise`
  - `load_exercises(path)` and `parse_exercises(text)` read the list into
    `Exercise` objects (`name`, `path`, `mode`, `hint`).
  - `Exercise.compile()` returns a `CompiledExercise`. It is a context manager
    whose `close()` removes the temporary binary. Its `run()` returns an
    `ExerciseOutput` with `stdout` and `stderr`. Both raise `ExerciseFailed`,
    carrying the output, when the command fails.
  - `Exercise.state()` returns a `State`. `State.done()` is true when the
    marker is gone. Otherwise `State.context` holds the `ContextLine`s
    (`line`, `number`, `important`) up to two lines either side of the marker.
  - `Exercise.looks_done()` is a shorthand for `state().done()`.
- `drillkit.verify`
  - `verify(exercises, verbose)` checks exercises in order. A compile or run
    failure raises `ExerciseError`. So does an exercise that still carries the
    marker: its context is printed first.
  - `test(exercise, verbose)` compiles and runs one exercise's tests.
- `drillkit.run.run(exercise, verbose)` compiles and runs one exercise, or
  tests it in `test` mode, without the completion prompt. It raises
  `ExerciseError` on failure.
- `drillkit.ui.warn(message)` and `drillkit.ui.success(message)` print
  coloured status lines. Set the `NO_EMOJI` environment variable for
  plain-text markers.

Compiled binaries are written to `./temp_<pid>_<thread>` in the current
directory. In `clippy` mode, `./exercises/clippy/Cargo.toml` is written before
the lints run.

## Lessons

The `drillkit.lessons` package holds worked solutions to course topics as
ordinary Python modules:

- `quizzes`: apple pricing, doubling, greeting
- `errors`: name tags, token costs, positive non-zero integers
- `climate`: parsing `city,year,temperature` records
- `iterators`: capitalising words, checked division, factorials, progress counts
- `baskets`: fruit baskets and list transformations
- `shared`: cons lists, threaded offset sums, polled job progress
- `structs`: orders, packages and a message-driven state machine
- `basics`: small functions, generic wrappers, `append_bar`

## What it does not do

drillkit has no command-line program. There is no `drillkit` command, and
nothing to list exercises, print hints or watch files for changes. Use the
functions above from your own script.