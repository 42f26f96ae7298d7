"""Compiler descriptions: locations, extensions and named configurations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Iterable

from limejudge.jsonutil import JsonFieldError, read_field, to_json_value

# Key name kept for compatibility with files already written.
ENVIRONMENT_WRITE_KEY = "environment.toStringList()"
ENVIRONMENT_READ_KEY = "environment"


class CompilerType(IntEnum):
    TYPICAL = 0
    INTERPRETIVE_WITH_BYTE_CODE = 1
    INTERPRETIVE_WITHOUT_BYTE_CODE = 2


def _split_extensions(extensions: str) -> list[str]:
    return [part for part in extensions.split(";") if part]


def parse_environment(entries: Iterable[str]) -> dict[str, str]:
    """Parse ``NAME=VALUE`` strings; an entry without ``=`` maps to itself."""
    environment: dict[str, str] = {}
    for entry in entries:
        name, sep, value = entry.partition("=")
        environment[name] = value if sep else entry
    return environment


def environment_to_list(environment: dict[str, str]) -> list[str]:
    """Render an environment as sorted ``NAME=VALUE`` strings."""
    return [f"{name}={value}" for name, value in sorted(environment.items())]


_TEXT_FIELDS = (
    ("compilerName", "compiler_name", str),
    ("compilerLocation", "compiler_location", str),
    ("interpreterLocation", "interpreter_location", str),
    ("sourceExtensions", "source_extensions", list[str]),
    ("bytecodeExtensions", "bytecode_extensions", list[str]),
    ("configurationNames", "configuration_names", list[str]),
    ("compilerArguments", "compiler_arguments", list[str]),
    ("interpreterArguments", "interpreter_arguments", list[str]),
)

_OPTION_FIELDS = (
    ("timeLimitRatio", "time_limit_ratio", float),
    ("memoryLimitRatio", "memory_limit_ratio", float),
    ("disableMemoryLimitCheck", "disable_memory_limit_check", bool),
    ("executeAsWatcher", "execute_as_watcher", bool),
)


@dataclass
class Compiler:
    """A compiler or interpreter and its argument configurations."""

    compiler_type: CompilerType = CompilerType.TYPICAL
    compiler_name: str = ""
    source_extensions: list[str] = field(default_factory=list)
    compiler_location: str = ""
    interpreter_location: str = ""
    bytecode_extensions: list[str] = field(default_factory=list)
    configuration_names: list[str] = field(default_factory=list)
    compiler_arguments: list[str] = field(default_factory=list)
    interpreter_arguments: list[str] = field(default_factory=list)
    environment: dict[str, str] = field(default_factory=dict)
    time_limit_ratio: float = 1.0
    memory_limit_ratio: float = 1.0
    disable_memory_limit_check: bool = False
    execute_as_watcher: bool = False

    def set_source_extensions(self, extensions: str) -> None:
        """Set source extensions from a ``;``-separated string."""
        self.source_extensions = _split_extensions(extensions)

    def set_bytecode_extensions(self, extensions: str) -> None:
        """Set byte-code extensions from a ``;``-separated string."""
        self.bytecode_extensions = _split_extensions(extensions)

    def add_configuration(self, name: str, compiler_arguments: str, interpreter_arguments: str) -> None:
        self.configuration_names.append(name)
        self.compiler_arguments.append(compiler_arguments)
        self.interpreter_arguments.append(interpreter_arguments)

    def _in_range(self, index: int, items: list) -> bool:
        return 0 <= index < len(items)

    def set_config_name(self, index: int, name: str) -> None:
        """Rename a configuration; out-of-range indices are ignored."""
        if self._in_range(index, self.configuration_names):
            self.configuration_names[index] = name

    def set_compiler_arguments(self, index: int, arguments: str) -> None:
        if self._in_range(index, self.compiler_arguments):
            self.compiler_arguments[index] = arguments

    def set_interpreter_arguments(self, index: int, arguments: str) -> None:
        if self._in_range(index, self.interpreter_arguments):
            self.interpreter_arguments[index] = arguments

    def delete_configuration(self, index: int) -> None:
        if self._in_range(index, self.configuration_names):
            del self.configuration_names[index]
            del self.compiler_arguments[index]
            del self.interpreter_arguments[index]

    def copy_from(self, other: Compiler) -> None:
        """Make this compiler an independent copy of ``other``."""
        self.compiler_type = other.compiler_type
        self.compiler_name = other.compiler_name
        self.source_extensions = list(other.source_extensions)
        self.compiler_location = other.compiler_location
        self.interpreter_location = other.interpreter_location
        self.bytecode_extensions = list(other.bytecode_extensions)
        self.configuration_names = list(other.configuration_names)
        self.compiler_arguments = list(other.compiler_arguments)
        self.interpreter_arguments = list(other.interpreter_arguments)
        self.environment = dict(other.environment)
        self.time_limit_ratio = other.time_limit_ratio
        self.memory_limit_ratio = other.memory_limit_ratio
        self.disable_memory_limit_check = other.disable_memory_limit_check
        self.execute_as_watcher = other.execute_as_watcher

    def read(self, json: dict[str, Any]) -> None:
        """Update from a JSON object; missing or mistyped fields are left as they are."""
        for key, attribute, kind in (("compilerType", "compiler_type", CompilerType),
                                     *_TEXT_FIELDS):
            self._read_into(json, key, attribute, kind)
        try:
            entries = read_field(json, ENVIRONMENT_READ_KEY, list[str])
        except JsonFieldError:
            entries = []
        self.environment.update(parse_environment(entries))
        for key, attribute, kind in _OPTION_FIELDS:
            self._read_into(json, key, attribute, kind)

    def _read_into(self, json: dict[str, Any], key: str, attribute: str, kind: Any) -> None:
        try:
            setattr(self, attribute, read_field(json, key, kind))
        except JsonFieldError:
            pass

    def write(self) -> dict[str, Any]:
        """Return this compiler as a JSON object."""
        data: dict[str, Any] = {"compilerType": to_json_value(self.compiler_type)}
        for key, attribute, _ in _TEXT_FIELDS:
            data[key] = to_json_value(getattr(self, attribute))
        data[ENVIRONMENT_WRITE_KEY] = environment_to_list(self.environment)
        for key, attribute, _ in _OPTION_FIELDS:
            data[key] = getattr(self, attribute)
        return data