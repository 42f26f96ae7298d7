# limejudge

Building blocks for a judge of programming contests: compiler definitions,
the judge configuration as JSON, display styles for results, and the logic
behind the forms that set up compilers and task limits. It has no
dependencies outside the standard library.

## Installation

```
pip install limejudge
```

## Modules

- `limejudge.types`: `CompileState` and `ResultState`, the outcomes of
  compiling a submission and of running one test case.
- `limejudge.compiler`: `Compiler`, a dataclass holding a compiler's type
  (`CompilerType`), locations, source and byte-code extensions, named
  configurations (compiler and interpreter arguments), environment variables
  and time/memory ratios. `read(json)` updates it from a JSON object, leaving
  missing or mistyped fields alone; `write()` returns a JSON object.
  `parse_environment` and `environment_to_list` convert between
  `NAME=VALUE` strings and a dict.
- `limejudge.config`: `JudgeConfig`, the default score and limits, file
  extensions, recent contests, diff path and compiler list. `read(json)`
  raises `JsonFieldError` when `compilerList` is missing or not an array.
- `limejudge.jsonutil`: `read_field(obj, name, kind)` for typed access to a
  JSON object (raising `JsonFieldError`), `to_json_value`, and `file_list` /
  `file_exists_in` for listing the files in a directory.
- `limejudge.results`: `result_text_and_color(result)` returns a
  `ResultStyle` with the label and CSS colours for a `ResultState`; also the
  upper bounds for full score, time, memory, file size, extra time ratio and
  rejudge times, and the `data_path()`, `source_path()` and
  `self_test_path()` folder names.
- `limejudge.customcompiler`: `next_page` for the add-compiler page flow,
  `detect_tools(path_value, windows)` to find gcc, g++, fpc, javac, java and
  python on a `PATH` string, and `CustomCompilerForm` (`validate`,
  `summary`, `build`) for a compiler of the user's own.
- `limejudge.builtincompilers`: `BuiltinCompilerForm`, which builds preset
  gcc, g++, fpc, fbc, Java and Python compilers with their recommended
  configurations; `BuiltinCompilerForm.detected()` fills in paths from `PATH`.
- `limejudge.compilereditor`: `CompilerEditor`, an editing session on a copy
  of one compiler: selecting, adding, renaming and deleting configurations,
  and `validate()`.
- `limejudge.taskdialog`: `TaskLimitsEditor`, per-task full score, time and
  memory limits, checked against the upper bounds.
- `limejudge.log`: `log_concat(level, module, *args)` joins values into one
  message on the `limejudge` logger; `configure(debug)` turns `DEBUG`
  messages on or off.

Validation methods raise `ValueError` with a message naming the problem.

## Example

```python
import json

from limejudge.builtincompilers import BuiltinCompilerForm
from limejudge.config import JudgeConfig
from limejudge.results import result_text_and_color
from limejudge.types import ResultState

form = BuiltinCompilerForm(gpp_enabled=True, gpp_path="/usr/bin/g++", platform="linux")
form.validate()
compilers = form.build()
print(compilers[0].configuration_names[:3])  # ['default', 'C++98', 'C++98 O2']

config = JudgeConfig(default_full_score=10, default_time_limit=1000,
                     compiler_list=compilers)
text = json.dumps(config.write())

restored = JudgeConfig()
restored.read(json.loads(text))

style = result_text_and_color(ResultState.WRONG_ANSWER)
print(style.text, style.background)  # Wrong Answer rgb(255, 192, 192)
```

`Compiler.write()` stores the environment under the key
`environment.toStringList()`, while `read()` takes it from `environment`,
so environment variables are not restored by a write/read round trip.

## What it does not do

The package holds data and form logic only. It has no command-line program
and no user interface; it does not compile or run submissions, does not
judge or score them, does not find and group test-case files in a data
directory, has no colour themes for result tables, and does not save
settings to disk itself: `JudgeConfig.write()` returns a dict, and writing
it to a file is left to the caller.

## Running the tests

```
pip install limejudge[test]
pytest
```