"""The wizard page that sets up the well-known compilers and interpreters."""

from __future__ import annotations

import ntpath
import os
import sys
from dataclasses import dataclass, field

from limejudge.compiler import Compiler, CompilerType
from limejudge.customcompiler import detect_tools

JAVA_MEMORY_MIN = 64
JAVA_MEMORY_MAX = 2048
WINDOWS_STACK_ARGUMENT = " -Wl,--stack=2147483647"
BASE_ARGUMENTS = "-o %s %s.* -lm"

_GCC_STANDARDS = (
    ("C89", ("", "O2")),
    ("C99", ("", "O2")),
    ("C11", ("", "O2")),
    ("C17", ("", "O2", "O3")),
)
_GPP_STANDARDS = (
    ("C++98", ("", "O2")),
    ("C++03", ("", "O2")),
    ("C++11", ("", "O2")),
    ("C++14", ("", "O2")),
    ("C++17", ("", "O2", "O3")),
    ("C++20", ("", "O2", "O3")),
)


def _recommended(standards, stack: str, linux: bool) -> list[tuple[str, str]]:
    configs = []
    for name, levels in standards:
        flag = "-std=" + name.lower()
        for level in levels:
            label = f"{name} {level}" if level else name
            extra = f" -{level}" if level else ""
            configs.append((label, f"{BASE_ARGUMENTS} {flag}{extra}{stack}"))
    if linux:
        for name, _ in standards:
            flag = "-std=" + name.lower()
            configs.append((f"{name} UB Catching",
                            f"{BASE_ARGUMENTS} {flag} -fsanitize=undefined{stack}"))
    return configs


@dataclass
class BuiltinCompilerForm:
    """Which built-in toolchains to add, where they live and their options."""

    gcc_enabled: bool = False
    gcc_path: str = ""
    gcc_recommended: bool = True
    gpp_enabled: bool = False
    gpp_path: str = ""
    gpp_recommended: bool = True
    fpc_enabled: bool = False
    fpc_path: str = ""
    fpc_recommended: bool = True
    fbc_enabled: bool = False
    fbc_path: str = ""
    java_enabled: bool = False
    javac_path: str = ""
    java_path: str = ""
    java_memory_limit: int = 512
    python_enabled: bool = False
    python_path: str = ""
    platform: str = field(default_factory=lambda: sys.platform)

    @property
    def windows(self) -> bool:
        return self.platform.startswith("win")

    @property
    def linux(self) -> bool:
        return self.platform.startswith("linux")

    @classmethod
    def detected(cls, path_value: str | None = None, platform: str | None = None) -> BuiltinCompilerForm:
        """A form with paths filled in from the tools found on ``PATH``."""
        form = cls() if platform is None else cls(platform=platform)
        if path_value is None:
            path_value = os.environ.get("PATH", "")
        tools = detect_tools(path_value, form.windows)
        form.gcc_path = tools.get("gcc", "")
        form.gpp_path = tools.get("g++", "")
        form.fpc_path = tools.get("fpc", "")
        form.javac_path = tools.get("javac", "")
        form.java_path = tools.get("java", "")
        form.python_path = tools.get("python", "")
        return form

    def validate(self) -> None:
        """Raise ValueError naming the first enabled tool without a path."""
        checks = (
            (self.gcc_enabled, self.gcc_path, "Empty gcc path!"),
            (self.gpp_enabled, self.gpp_path, "Empty g++ path!"),
            (self.fpc_enabled, self.fpc_path, "Empty fpc path!"),
            (self.fbc_enabled, self.fbc_path, "Empty fbc path!"),
            (self.java_enabled, self.javac_path, "Empty javac path!"),
            (self.java_enabled, self.java_path, "Empty java path!"),
            (self.python_enabled, self.python_path, "Empty python path!"),
        )
        for enabled, path, message in checks:
            if enabled and not path:
                raise ValueError(message)
        if self.java_enabled and not JAVA_MEMORY_MIN <= int(self.java_memory_limit) <= JAVA_MEMORY_MAX:
            raise ValueError(
                f"Java memory limit must be between {JAVA_MEMORY_MIN} and {JAVA_MEMORY_MAX} MB!")

    def summary(self) -> str:
        """Text shown on the final page listing the compilers to be added."""
        text = ""
        for enabled, label, path, recommended in (
            (self.gcc_enabled, "gcc", self.gcc_path, self.gcc_recommended),
            (self.gpp_enabled, "g++", self.gpp_path, self.gpp_recommended),
            (self.fpc_enabled, "fpc", self.fpc_path, self.fpc_recommended),
        ):
            if enabled:
                text += f"[{label} Compiler]\n{label} Path: {path}\n"
                if recommended:
                    text += "Add recommended configurations\n"
                text += "\n"
        if self.fbc_enabled:
            text += f"[fbc Compiler]\nfbc Path: {self.fbc_path}\n\n"
        if self.java_enabled:
            text += "[Java Compiler]\n"
            text += f"javac Path: {self.javac_path}\n"
            text += f"java Path: {self.java_path}\n"
            text += f"Memory Limit: {self.java_memory_limit} MB\n\n"
        if self.python_enabled:
            text += f"[Python Compiler]\npython Path: {self.python_path}\n\n"
        return text

    def _path_environment(self, tool_path: str) -> dict[str, str]:
        directory = ntpath.dirname(ntpath.abspath(tool_path.replace("/", "\\")))
        return {"PATH": directory}

    def _c_family(self, name: str, path: str, extensions: str, recommended: bool,
                  standards) -> Compiler:
        stack = WINDOWS_STACK_ARGUMENT if self.windows else ""
        compiler = Compiler(compiler_name=name, compiler_location=path)
        compiler.set_source_extensions(extensions)
        compiler.add_configuration("default", BASE_ARGUMENTS + stack, "")
        if recommended:
            for label, arguments in _recommended(standards, stack, self.linux):
                compiler.add_configuration(label, arguments, "")
        if self.windows:
            compiler.environment = self._path_environment(path)
        return compiler

    def build(self) -> list[Compiler]:
        """Create a compiler for every enabled toolchain, in page order."""
        compilers = []
        if self.gcc_enabled:
            compilers.append(self._c_family("gcc", self.gcc_path, "c", self.gcc_recommended,
                                            _GCC_STANDARDS))
        if self.gpp_enabled:
            compilers.append(self._c_family("g++", self.gpp_path, "cpp;cc;cxx",
                                            self.gpp_recommended, _GPP_STANDARDS))
        if self.fpc_enabled:
            compiler = Compiler(compiler_name="fpc", compiler_location=self.fpc_path)
            compiler.set_source_extensions("pas;pp;inc")
            compiler.add_configuration("default", "%s.*", "")
            if self.fpc_recommended:
                compiler.add_configuration("O2", "%s.* -O2", "")
            compilers.append(compiler)
        if self.fbc_enabled:
            compiler = Compiler(compiler_name="fbc", compiler_location=self.fbc_path)
            compiler.set_source_extensions("bas")
            compiler.add_configuration("default", "%s.*", "")
            compilers.append(compiler)
        if self.java_enabled:
            compiler = Compiler(
                compiler_name="jdk",
                compiler_type=CompilerType.INTERPRETIVE_WITH_BYTE_CODE,
                compiler_location=self.javac_path,
                interpreter_location=self.java_path,
                time_limit_ratio=5,
                disable_memory_limit_check=True,
            )
            compiler.set_source_extensions("java")
            compiler.set_bytecode_extensions("class")
            compiler.add_configuration("default", "%s.*", f"-Xmx{self.java_memory_limit}m %s")
            compilers.append(compiler)
        if self.python_enabled:
            compiler = Compiler(
                compiler_name="python",
                compiler_type=CompilerType.INTERPRETIVE_WITHOUT_BYTE_CODE,
                interpreter_location=self.python_path,
                time_limit_ratio=10,
                memory_limit_ratio=5,
            )
            compiler.set_source_extensions("py")
            compiler.add_configuration("default", "", "%s.*")
            compilers.append(compiler)
        return compilers