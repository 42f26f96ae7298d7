"""Adding a compiler through the setup wizard: page flow, tool detection, custom form."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath

from limejudge.compiler import Compiler, CompilerType
from limejudge.compilereditor import (
    BYTECODE_EXTENSIONS,
    COMPILER_ARGUMENTS,
    COMPILER_LOCATION,
    INTERPRETER_ARGUMENTS,
    INTERPRETER_LOCATION,
)
from limejudge.jsonutil import file_list

CHOOSE_PAGE = 0
CUSTOM_PAGE = 1
BUILTIN_PAGE = 2
SUMMARY_PAGE = 3

DETECTED_TOOLS = ("gcc", "g++", "fpc", "javac", "java", "python")

COMPILER_TYPE_LABELS = {
    CompilerType.TYPICAL: "Typical",
    CompilerType.INTERPRETIVE_WITH_BYTE_CODE: "Interpretive (with byte-code)",
    CompilerType.INTERPRETIVE_WITHOUT_BYTE_CODE: "Interpretive (without byte-code)",
}


def next_page(current_page: int, custom: bool) -> int:
    """Page that follows ``current_page``; -1 once the wizard is finished."""
    if current_page == CHOOSE_PAGE:
        return CUSTOM_PAGE if custom else BUILTIN_PAGE
    if current_page == SUMMARY_PAGE:
        return -1
    return SUMMARY_PAGE


def detect_tools(path_value: str, windows: bool) -> dict[str, str]:
    """Find the first gcc, g++, fpc, javac, java and python on a PATH string."""
    separator = ";" if windows else ":"
    dir_separator = "\\" if windows else "/"
    suffix = ".exe" if windows else ""
    wanted = {tool + suffix: tool for tool in DETECTED_TOOLS}
    found: dict[str, str] = {}
    for directory in path_value.split(separator):
        if not directory:
            continue
        for name in file_list(directory):
            tool = wanted.get(name)
            if tool is not None and tool not in found:
                found[tool] = directory + dir_separator + name
    return found


@dataclass
class CustomCompilerForm:
    """The wizard page describing a compiler that is not one of the built-in ones."""

    compiler_name: str = ""
    compiler_type: CompilerType = CompilerType.TYPICAL
    compiler_location: str = ""
    interpreter_location: str = ""
    source_extensions: str = ""
    bytecode_extensions: str = ""
    default_compiler_arguments: str = ""
    default_interpreter_arguments: str = ""

    def __post_init__(self) -> None:
        self.compiler_type = CompilerType(self.compiler_type)

    def enabled_fields(self) -> frozenset[str]:
        """Names of the fields that apply to the selected compiler type."""
        kind = self.compiler_type
        fields: set[str] = set()
        if kind != CompilerType.TYPICAL:
            fields |= {INTERPRETER_LOCATION, INTERPRETER_ARGUMENTS}
        if kind == CompilerType.INTERPRETIVE_WITH_BYTE_CODE:
            fields.add(BYTECODE_EXTENSIONS)
        if kind != CompilerType.INTERPRETIVE_WITHOUT_BYTE_CODE:
            fields |= {COMPILER_LOCATION, COMPILER_ARGUMENTS}
        return frozenset(fields)

    def validate(self) -> None:
        """Raise ValueError naming the first required field left empty."""
        fields = self.enabled_fields()
        if not self.compiler_name:
            raise ValueError("Empty compiler name!")
        if COMPILER_LOCATION in fields and not self.compiler_location:
            raise ValueError("Empty compiler location!")
        if INTERPRETER_LOCATION in fields and not self.interpreter_location:
            raise ValueError("Empty interpreter location!")
        if not self.source_extensions:
            raise ValueError("Empty source file extensions!")
        if BYTECODE_EXTENSIONS in fields and not self.bytecode_extensions:
            raise ValueError("Empty byte-code file extensions!")

    def summary(self) -> str:
        """Text shown on the final page describing the compiler to be added."""
        fields = self.enabled_fields()
        lines = [
            "[Custom Compiler]",
            f"Compiler Name: {self.compiler_name}",
            f"Compiler Type: {COMPILER_TYPE_LABELS[self.compiler_type]}",
        ]
        if COMPILER_LOCATION in fields:
            lines.append(f"Compiler's Location: {self.compiler_location}")
        if INTERPRETER_LOCATION in fields:
            lines.append(f"Interpreter's Location: {self.interpreter_location}")
        lines.append(f"Source File Extensions: {self.source_extensions}")
        if BYTECODE_EXTENSIONS in fields:
            lines.append(f"Byte-code File Extensions: {self.bytecode_extensions}")
        if COMPILER_ARGUMENTS in fields:
            lines.append(f"Default Compiler's Arguments: {self.default_compiler_arguments}")
        if INTERPRETER_ARGUMENTS in fields:
            lines.append(f"Default Interpreter's Arguments: {self.default_interpreter_arguments}")
        return "".join(line + "\n" for line in lines)

    def build(self) -> Compiler:
        """Create the compiler with a single "default" configuration."""
        compiler = Compiler(
            compiler_type=self.compiler_type,
            compiler_name=self.compiler_name,
            compiler_location=self.compiler_location,
            interpreter_location=self.interpreter_location,
        )
        compiler.set_source_extensions(self.source_extensions)
        compiler.set_bytecode_extensions(self.bytecode_extensions)
        compiler.add_configuration("default", self.default_compiler_arguments,
                                   self.default_interpreter_arguments)
        return compiler


def _display_path(path: str) -> str:
    return str(PurePath(path))