"""Judge configuration stored as JSON."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from limejudge.compiler import Compiler
from limejudge.jsonutil import JsonFieldError, read_field, to_json_value

_FIELDS = (
    ("defaultFullScore", "default_full_score", int),
    ("defaultTimeLimit", "default_time_limit", int),
    ("defaultMemoryLimit", "default_memory_limit", int),
    ("compileTimeLimit", "compile_time_limit", int),
    ("specialJudgeTimeLimit", "special_judge_time_limit", int),
    ("fileSizeLimit", "file_size_limit", int),
    ("rejudgeTimes", "rejudge_times", int),
    ("maxJudgingThreads", "max_judging_threads", int),
    ("defaultInputFileExtension", "default_input_file_extension", str),
    ("defaultOutputFileExtension", "default_output_file_extension", str),
    ("diffPath", "diff_path", str),
    ("inputFileExtensions", "input_file_extensions", list[str]),
    ("outputFileExtensions", "output_file_extensions", list[str]),
    ("recentContest", "recent_contest", list[str]),
)

COMPILER_LIST_KEY = "compilerList"


@dataclass
class JudgeConfig:
    """Judging defaults and the list of compilers."""

    compiler_list: list[Compiler] = field(default_factory=list)
    default_full_score: int = 0
    default_time_limit: int = 0
    default_memory_limit: int = 0
    compile_time_limit: int = 0
    special_judge_time_limit: int = 0
    file_size_limit: int = 0
    rejudge_times: int = 0
    max_judging_threads: int = 0
    default_input_file_extension: str = ""
    default_output_file_extension: str = ""
    input_file_extensions: list[str] = field(default_factory=list)
    output_file_extensions: list[str] = field(default_factory=list)
    recent_contest: list[str] = field(default_factory=list)
    diff_path: str = ""

    def read(self, json: dict[str, Any]) -> None:
        """Update from a JSON object.

        Missing or mistyped scalar fields are left as they are; a missing or
        non-array compiler list raises JsonFieldError.
        """
        for key, attribute, kind in _FIELDS:
            try:
                setattr(self, attribute, read_field(json, key, kind))
            except JsonFieldError:
                pass
        entries = read_field(json, COMPILER_LIST_KEY, list)
        compilers = []
        for entry in entries:
            compiler = Compiler()
            compiler.read(entry if isinstance(entry, dict) else {})
            compilers.append(compiler)
        self.compiler_list = compilers

    def write(self) -> dict[str, Any]:
        """Return this configuration as a JSON object."""
        data = {key: to_json_value(getattr(self, attribute)) for key, attribute, _ in _FIELDS}
        data[COMPILER_LIST_KEY] = [compiler.write() for compiler in self.compiler_list]
        return data