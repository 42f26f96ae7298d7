"""Display text and colours for results, plus fixed limits and folder names."""

from __future__ import annotations

import os
from dataclasses import dataclass

from limejudge.types import ResultState

WHITE = "rgb(255, 255, 255)"
BLACK = "rgb(0, 0, 0)"


@dataclass(frozen=True)
class ResultStyle:
    """How a result is shown: its label and CSS foreground/background colours."""

    text: str = ""
    foreground: str = BLACK
    background: str = WHITE


_STYLES: dict[ResultState, ResultStyle] = {
    ResultState.CORRECT_ANSWER: ResultStyle("Correct Answer", BLACK, "rgb(192, 255, 192)"),
    ResultState.WRONG_ANSWER: ResultStyle("Wrong Answer", BLACK, "rgb(255, 192, 192)"),
    ResultState.PARTLY_CORRECT: ResultStyle("Partly Correct", BLACK, "rgb(192, 255, 255)"),
    ResultState.PRESENTATION_ERROR: ResultStyle("Presentation Error", BLACK, "rgb(255, 216, 192)"),
    ResultState.TIME_LIMIT_EXCEEDED: ResultStyle("Time Limit Exceeded", BLACK, "rgb(255, 255, 192)"),
    ResultState.MEMORY_LIMIT_EXCEEDED: ResultStyle("Memory Limit Exceeded", BLACK,
                                                   "rgb(192, 192, 255)"),
    ResultState.OUTPUT_LIMIT_EXCEEDED: ResultStyle("Output Limit Exceeded", BLACK,
                                                   "rgb(216, 192, 255)"),
    ResultState.CANNOT_START_PROGRAM: ResultStyle("Cannot Start Program", "rgb(255, 64, 64)",
                                                  "rgb(192, 192, 192)"),
    ResultState.FILE_ERROR: ResultStyle("File Error", "rgb(255, 255, 64)", "rgb(192, 192, 192)"),
    ResultState.RUN_TIME_ERROR: ResultStyle("Run Time Error", BLACK, "rgb(255, 192, 255)"),
    ResultState.INVALID_SPECIAL_JUDGE: ResultStyle("Invalid Special Judge", WHITE, "rgb(128, 0, 0)"),
    ResultState.SPECIAL_JUDGE_TIME_LIMIT_EXCEEDED: ResultStyle(
        "Special Judge Time Limit Exceeded", WHITE, "rgb(128, 128, 0)"),
    ResultState.SPECIAL_JUDGE_RUN_TIME_ERROR: ResultStyle(
        "Special Judge Run Time Error", WHITE, "rgb(128, 0, 128)"),
    ResultState.SKIPPED: ResultStyle("Skipped", "rgb(192, 192, 192)", WHITE),
    ResultState.INTERACTOR_ERROR: ResultStyle("Interactor Error", WHITE, "rgb(0, 0, 128)"),
}


def result_text_and_color(result: ResultState | int) -> ResultStyle:
    """Label and colours for ``result``; unknown states get an empty label."""
    try:
        state = ResultState(result)
    except ValueError:
        return ResultStyle()
    return _STYLES.get(state, ResultStyle())


def data_path() -> str:
    """Folder, relative to the contest, holding test data."""
    return "data" + os.sep


def source_path() -> str:
    """Folder, relative to the contest, holding contestants' sources."""
    return "source" + os.sep


def self_test_path() -> str:
    """Folder, relative to the contest, used for self tests."""
    return "selftest" + os.sep


def upper_bound_for_full_score() -> int:
    return 10000000


def upper_bound_for_time_limit() -> int:
    """One day, in milliseconds."""
    return 1000 * 60 * 60 * 24


def upper_bound_for_extra_time_ratio() -> float:
    return 100.0


def upper_bound_for_memory_limit() -> int:
    """In megabytes."""
    return 16777216


def upper_bound_for_file_size_limit() -> int:
    """In kilobytes."""
    return 256 * 1024


def upper_bound_for_rejudge_times() -> int:
    return 12