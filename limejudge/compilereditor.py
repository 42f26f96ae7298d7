"""Editing session for one compiler's advanced settings."""

from __future__ import annotations

from limejudge.compiler import Compiler, CompilerType

ADD_NEW_LABEL = "Add new ..."
DEFAULT_CONFIGURATION = "default"
RESERVED_CONFIGURATION = "disable"

COMPILER_LOCATION = "compiler_location"
COMPILER_ARGUMENTS = "compiler_arguments"
INTERPRETER_LOCATION = "interpreter_location"
INTERPRETER_ARGUMENTS = "interpreter_arguments"
BYTECODE_EXTENSIONS = "bytecode_extensions"


class CompilerEditor:
    """Works on a private copy of a compiler until the edits are accepted.

    The configuration list always ends with an "Add new ..." entry; selecting
    it creates a fresh configuration.
    """

    def __init__(self, compiler: Compiler | None = None):
        self.compiler = Compiler()
        self.current_index = -1
        self.compiler_arguments_text = ""
        self.interpreter_arguments_text = ""
        self._config_count = 0
        if compiler is not None:
            self.reset(compiler)

    @property
    def items(self) -> list[str]:
        """Entries of the configuration list, the trailing "Add new ..." included."""
        return [*self.compiler.configuration_names, ADD_NEW_LABEL]

    @property
    def memory_limit_ratio_enabled(self) -> bool:
        return not self.compiler.disable_memory_limit_check

    @property
    def can_delete(self) -> bool:
        """Whether the current configuration may be deleted."""
        return self.current_index > 0

    def reset(self, compiler: Compiler) -> None:
        """Start editing a copy of ``compiler`` with its first configuration selected."""
        self._config_count = 0
        self.compiler.copy_from(compiler)
        self.current_index = -1
        self.compiler_arguments_text = ""
        self.interpreter_arguments_text = ""
        self.select_configuration(0)

    def set_compiler_type(self, compiler_type) -> None:
        self.compiler.compiler_type = CompilerType(compiler_type)

    def enabled_fields(self) -> frozenset[str]:
        """Names of the fields that apply to the current compiler type."""
        kind = self.compiler.compiler_type
        fields: set[str] = set()
        if kind != CompilerType.TYPICAL:
            fields |= {INTERPRETER_LOCATION, INTERPRETER_ARGUMENTS}
        if kind == CompilerType.INTERPRETIVE_WITH_BYTE_CODE:
            fields.add(BYTECODE_EXTENSIONS)
        if kind != CompilerType.INTERPRETIVE_WITHOUT_BYTE_CODE:
            fields |= {COMPILER_LOCATION, COMPILER_ARGUMENTS}
        return frozenset(fields)

    def set_disable_memory_limit_check(self, check: bool) -> None:
        self.compiler.disable_memory_limit_check = bool(check)

    def select_configuration(self, index: int) -> None:
        """Select a configuration; selecting the last entry adds a new one."""
        if index == -1:
            return
        names = self.compiler.configuration_names
        if not 0 <= index <= len(names):
            raise IndexError(f"no configuration at index {index}")
        if index == len(names):
            self._config_count += 1
            self.compiler.add_configuration(f"New configuration {self._config_count}", "", "")
            self.compiler_arguments_text = ""
            self.interpreter_arguments_text = ""
        else:
            self.compiler_arguments_text = self.compiler.compiler_arguments[index]
            self.interpreter_arguments_text = self.compiler.interpreter_arguments[index]
        self.current_index = index

    def rename_configuration(self, name: str) -> str:
        """Rename the current configuration and return the name it now has.

        The first configuration is always called "default".
        """
        if self.current_index == 0:
            return DEFAULT_CONFIGURATION
        self.compiler.set_config_name(self.current_index, name)
        return name

    def delete_configuration(self) -> None:
        """Delete the current configuration and select a neighbour."""
        index = self.current_index
        if index <= 0:
            raise ValueError("the default configuration cannot be deleted")
        count = len(self.items)
        if index + 1 < count - 1:
            self.select_configuration(index + 1)
            self.compiler.delete_configuration(index)
            self.current_index = index
        else:
            self.select_configuration(index - 1)
            self.compiler.delete_configuration(index)

    def set_compiler_arguments(self, text: str) -> None:
        self.compiler_arguments_text = text
        self.compiler.set_compiler_arguments(self.current_index, text)

    def set_interpreter_arguments(self, text: str) -> None:
        self.interpreter_arguments_text = text
        self.compiler.set_interpreter_arguments(self.current_index, text)

    def validate(self) -> None:
        """Raise ValueError describing the first problem with the edited compiler."""
        fields = self.enabled_fields()
        compiler = self.compiler
        if COMPILER_LOCATION in fields and not compiler.compiler_location:
            raise ValueError("Empty compiler's Location!")
        if INTERPRETER_LOCATION in fields and not compiler.interpreter_location:
            raise ValueError("Empty interpreter's Location!")
        if BYTECODE_EXTENSIONS in fields and not compiler.bytecode_extensions:
            raise ValueError("Empty Byte-code Extensions!")
        names = compiler.configuration_names
        for index, name in enumerate(names):
            problem = None
            if not name:
                problem = "Empty configuration name!"
            elif names.count(name) > 1:
                problem = f"Configuration {name} appears more than once!"
            elif name == RESERVED_CONFIGURATION:
                problem = f'Invalid configuration name "{RESERVED_CONFIGURATION}"!'
            if problem is not None:
                self.select_configuration(index)
                raise ValueError(problem)