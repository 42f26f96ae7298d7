"""Outcome enumerations shared by the judging code."""

from enum import IntEnum


class CompileState(IntEnum):
    """Outcome of compiling one contestant's source."""

    COMPILE_SUCCESSFULLY = 0
    NO_VALID_SOURCE_FILE = 1
    COMPILE_ERROR = 2
    COMPILE_TIME_LIMIT_EXCEEDED = 3
    INVALID_COMPILER = 4
    NO_VALID_GRADER_FILE = 5


class ResultState(IntEnum):
    """Outcome of running one test case."""

    CORRECT_ANSWER = 0
    WRONG_ANSWER = 1
    PARTLY_CORRECT = 2
    TIME_LIMIT_EXCEEDED = 3
    MEMORY_LIMIT_EXCEEDED = 4
    CANNOT_START_PROGRAM = 5
    FILE_ERROR = 6
    RUN_TIME_ERROR = 7
    INVALID_SPECIAL_JUDGE = 8
    SPECIAL_JUDGE_TIME_LIMIT_EXCEEDED = 9
    SPECIAL_JUDGE_RUN_TIME_ERROR = 10
    SKIPPED = 11
    INTERACTOR_ERROR = 12
    PRESENTATION_ERROR = 13
    OUTPUT_LIMIT_EXCEEDED = 14
    LAST_RESULT_STATE = 15