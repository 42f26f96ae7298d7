import pytest

from limejudge.compiler import Compiler, CompilerType
from limejudge.compilereditor import (
    ADD_NEW_LABEL,
    BYTECODE_EXTENSIONS,
    COMPILER_ARGUMENTS,
    COMPILER_LOCATION,
    INTERPRETER_ARGUMENTS,
    INTERPRETER_LOCATION,
    CompilerEditor,
)


def make_compiler():
    compiler = Compiler(compiler_name="gcc", compiler_location="/usr/bin/gcc")
    compiler.add_configuration("default", "-o %s %s.*", "")
    compiler.add_configuration("O2", "-o %s %s.* -O2", "")
    compiler.add_configuration("O3", "-o %s %s.* -O3", "")
    return compiler


def test_reset_copies_and_selects_first():
    original = make_compiler()
    editor = CompilerEditor(original)
    assert editor.current_index == 0
    assert editor.compiler_arguments_text == "-o %s %s.*"
    editor.set_compiler_arguments("changed")
    assert original.compiler_arguments[0] == "-o %s %s.*"
    assert editor.compiler.compiler_arguments[0] == "changed"


def test_items_end_with_add_new():
    editor = CompilerEditor(make_compiler())
    assert editor.items == ["default", "O2", "O3", ADD_NEW_LABEL]


def test_select_loads_arguments():
    editor = CompilerEditor(make_compiler())
    editor.select_configuration(2)
    assert editor.compiler_arguments_text == "-o %s %s.* -O3"
    assert editor.can_delete


def test_select_add_new_creates_configurations():
    editor = CompilerEditor(make_compiler())
    editor.select_configuration(3)
    assert editor.compiler.configuration_names[3] == "New configuration 1"
    assert editor.compiler_arguments_text == ""
    editor.select_configuration(4)
    assert editor.compiler.configuration_names[4] == "New configuration 2"
    assert editor.items[-1] == ADD_NEW_LABEL


def test_reset_restarts_new_configuration_counter():
    editor = CompilerEditor(make_compiler())
    editor.select_configuration(3)
    editor.reset(make_compiler())
    editor.select_configuration(3)
    assert editor.compiler.configuration_names[3] == "New configuration 1"


def test_reset_empty_compiler_creates_configuration():
    editor = CompilerEditor(Compiler())
    assert editor.compiler.configuration_names == ["New configuration 1"]
    assert editor.current_index == 0


def test_select_out_of_range():
    editor = CompilerEditor(make_compiler())
    with pytest.raises(IndexError):
        editor.select_configuration(9)


def test_rename_default_is_forced():
    editor = CompilerEditor(make_compiler())
    assert editor.rename_configuration("other") == "default"
    assert editor.compiler.configuration_names[0] == "default"


def test_rename_other_configuration():
    editor = CompilerEditor(make_compiler())
    editor.select_configuration(1)
    assert editor.rename_configuration("fast") == "fast"
    assert editor.compiler.configuration_names == ["default", "fast", "O3"]


def test_delete_middle_selects_next():
    editor = CompilerEditor(make_compiler())
    editor.select_configuration(1)
    editor.delete_configuration()
    assert editor.compiler.configuration_names == ["default", "O3"]
    assert editor.current_index == 1
    assert editor.compiler_arguments_text == "-o %s %s.* -O3"


def test_delete_last_selects_previous():
    editor = CompilerEditor(make_compiler())
    editor.select_configuration(2)
    editor.delete_configuration()
    assert editor.compiler.configuration_names == ["default", "O2"]
    assert editor.current_index == 1
    assert editor.compiler_arguments_text == "-o %s %s.* -O2"


def test_delete_default_refused():
    editor = CompilerEditor(make_compiler())
    with pytest.raises(ValueError):
        editor.delete_configuration()


def test_interpreter_arguments_stored():
    editor = CompilerEditor(make_compiler())
    editor.select_configuration(1)
    editor.set_interpreter_arguments("%s")
    assert editor.compiler.interpreter_arguments == ["", "%s", ""]


@pytest.mark.parametrize(
    "kind, expected",
    [
        (CompilerType.TYPICAL, {COMPILER_LOCATION, COMPILER_ARGUMENTS}),
        (
            CompilerType.INTERPRETIVE_WITH_BYTE_CODE,
            {COMPILER_LOCATION, COMPILER_ARGUMENTS, INTERPRETER_LOCATION,
             INTERPRETER_ARGUMENTS, BYTECODE_EXTENSIONS},
        ),
        (CompilerType.INTERPRETIVE_WITHOUT_BYTE_CODE, {INTERPRETER_LOCATION, INTERPRETER_ARGUMENTS}),
    ],
)
def test_enabled_fields(kind, expected):
    editor = CompilerEditor(make_compiler())
    editor.set_compiler_type(int(kind))
    assert editor.compiler.compiler_type is kind
    assert editor.enabled_fields() == expected


def test_disable_memory_limit_check():
    editor = CompilerEditor(make_compiler())
    assert editor.memory_limit_ratio_enabled
    editor.set_disable_memory_limit_check(True)
    assert editor.compiler.disable_memory_limit_check is True
    assert not editor.memory_limit_ratio_enabled


def test_validate_accepts_good_compiler():
    editor = CompilerEditor(make_compiler())
    editor.validate()
    assert editor.current_index == 0


def test_validate_empty_compiler_location():
    editor = CompilerEditor(make_compiler())
    editor.compiler.compiler_location = ""
    with pytest.raises(ValueError, match="compiler's Location"):
        editor.validate()


def test_validate_interpreter_location_only_when_interpretive():
    editor = CompilerEditor(make_compiler())
    editor.set_compiler_type(CompilerType.INTERPRETIVE_WITHOUT_BYTE_CODE)
    editor.compiler.compiler_location = ""
    with pytest.raises(ValueError, match="interpreter's Location"):
        editor.validate()


def test_validate_bytecode_extensions():
    editor = CompilerEditor(make_compiler())
    editor.set_compiler_type(CompilerType.INTERPRETIVE_WITH_BYTE_CODE)
    editor.compiler.interpreter_location = "/usr/bin/java"
    with pytest.raises(ValueError, match="Byte-code"):
        editor.validate()


def test_validate_duplicate_names_selects_offender():
    editor = CompilerEditor(make_compiler())
    editor.select_configuration(2)
    editor.rename_configuration("O2")
    editor.select_configuration(0)
    with pytest.raises(ValueError, match="more than once"):
        editor.validate()
    assert editor.current_index == 1


def test_validate_reserved_and_empty_names():
    editor = CompilerEditor(make_compiler())
    editor.select_configuration(1)
    editor.rename_configuration("disable")
    with pytest.raises(ValueError, match="disable"):
        editor.validate()
    editor.rename_configuration("")
    with pytest.raises(ValueError, match="Empty configuration name"):
        editor.validate()