from limejudge.compiler import (
    ENVIRONMENT_WRITE_KEY,
    Compiler,
    CompilerType,
    environment_to_list,
    parse_environment,
)


def _sample():
    compiler = Compiler(compiler_name="jdk", compiler_type=CompilerType.INTERPRETIVE_WITH_BYTE_CODE)
    compiler.compiler_location = "/usr/bin/javac"
    compiler.interpreter_location = "/usr/bin/java"
    compiler.set_source_extensions("java")
    compiler.set_bytecode_extensions("class")
    compiler.time_limit_ratio = 5.0
    compiler.disable_memory_limit_check = True
    compiler.add_configuration("default", "%s.*", "-Xmx512m %s")
    return compiler


def test_defaults():
    compiler = Compiler()
    assert compiler.compiler_type is CompilerType.TYPICAL
    assert compiler.time_limit_ratio == 1.0
    assert compiler.memory_limit_ratio == 1.0
    assert not compiler.disable_memory_limit_check
    assert not compiler.execute_as_watcher


def test_extensions_skip_empty_parts():
    compiler = Compiler()
    compiler.set_source_extensions("cpp;;cc;cxx;")
    assert compiler.source_extensions == ["cpp", "cc", "cxx"]
    compiler.set_bytecode_extensions("")
    assert compiler.bytecode_extensions == []


def test_configuration_editing():
    compiler = Compiler()
    compiler.add_configuration("default", "a", "b")
    compiler.add_configuration("O2", "c", "d")
    compiler.set_config_name(1, "fast")
    compiler.set_compiler_arguments(0, "x")
    compiler.set_interpreter_arguments(1, "y")
    assert compiler.configuration_names == ["default", "fast"]
    assert compiler.compiler_arguments == ["x", "c"]
    assert compiler.interpreter_arguments == ["b", "y"]
    compiler.delete_configuration(0)
    assert compiler.configuration_names == ["fast"]
    assert compiler.compiler_arguments == ["c"]
    assert compiler.interpreter_arguments == ["y"]


def test_out_of_range_is_ignored():
    compiler = Compiler()
    compiler.add_configuration("default", "a", "b")
    compiler.set_config_name(-1, "x")
    compiler.set_compiler_arguments(5, "x")
    compiler.delete_configuration(1)
    assert compiler.configuration_names == ["default"]
    assert compiler.compiler_arguments == ["a"]


def test_copy_from_is_independent():
    original = _sample()
    original.environment = {"PATH": "/bin"}
    copy = Compiler()
    copy.copy_from(original)
    assert copy == original
    copy.configuration_names.append("other")
    copy.environment["X"] = "1"
    assert original.configuration_names == ["default"]
    assert original.environment == {"PATH": "/bin"}


def test_write_read_round_trip():
    original = _sample()
    data = original.write()
    restored = Compiler()
    restored.read(data)
    assert restored == original


def test_write_keys():
    data = _sample().write()
    assert data["compilerType"] == CompilerType.INTERPRETIVE_WITH_BYTE_CODE.value
    assert data["configurationNames"] == ["default"]
    assert data[ENVIRONMENT_WRITE_KEY] == []


def test_read_environment_and_ignores_bad_fields():
    compiler = Compiler(compiler_name="keep")
    compiler.read({"compilerName": 5, "environment": ["A=1", "B=x=y"], "compilerType": 2})
    assert compiler.compiler_name == "keep"
    assert compiler.environment == {"A": "1", "B": "x=y"}
    assert compiler.compiler_type is CompilerType.INTERPRETIVE_WITHOUT_BYTE_CODE


def test_parse_environment():
    assert parse_environment(["A=b=c", "FOO", "E="]) == {"A": "b=c", "FOO": "FOO", "E": ""}


def test_environment_round_trip():
    environment = {"PATH": "/usr/bin", "LANG": "C"}
    assert parse_environment(environment_to_list(environment)) == environment
    assert environment_to_list(environment) == sorted(environment_to_list(environment))