from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from core.config import settings
from core.escaping import escape_path
from core.runner import run_command
from schemas.validation import ValidationOutcome

Runner = Callable[..., str]

SUCCESS_BANNER = "Compilation successful.\nExecution output:\n"


def _any_output(output: str) -> bool:
    return bool(output)


def _python_syntax_error(output: str) -> bool:
    # py_compile warnings are not fatal, only a SyntaxError stops the run
    return bool(output) and "SyntaxError" in output


def _php_lint_failed(output: str) -> bool:
    return "No syntax errors" not in output


@dataclass(frozen=True)
class LanguageVariant:
    """
    One language's check-then-run protocol.

    Command templates are argument lists whose elements may contain the
    placeholders {path}, {directory} and {class_name}.
    """

    name: str
    extension: str
    check_command: tuple[str, ...]
    run_command: tuple[str, ...]
    check_failed: Callable[[str], bool]
    failure_banner: str = "Syntax errors:\n"
    run_in_file_directory: bool = False

    def is_compatible(self, file_path: str) -> bool:
        return Path(file_path).suffix == self.extension

    def validate(
        self,
        file_path: str,
        runner: Runner = run_command,
        timeout: float | None = None,
    ) -> ValidationOutcome:
        argv, display = _render(self.check_command, file_path)
        check_output = runner(argv, timeout=timeout, display=display)

        if self.check_failed(check_output):
            return ValidationOutcome(
                status="compile_error", message=self.failure_banner + check_output
            )

        argv, display = _render(self.run_command, file_path)
        cwd = None
        if self.run_in_file_directory:
            cwd = _directory_of(file_path)
            display = f"cd {escape_path(cwd)} && {display}"
        run_output = runner(argv, cwd=cwd, timeout=timeout, display=display)

        return ValidationOutcome(status="runtime_output", message=SUCCESS_BANNER + run_output)


def _directory_of(file_path: str) -> str:
    return str(Path(file_path).parent)


def _render(template: tuple[str, ...], file_path: str) -> tuple[list[str], str]:
    """Fill a command template, returning the argv and its display line."""
    path = Path(file_path)
    values = {
        "path": file_path,
        "directory": _directory_of(file_path),
        "class_name": path.stem,
    }
    shown = {
        "path": escape_path(values["path"]),
        "directory": escape_path(values["directory"]),
        "class_name": values["class_name"],
    }
    argv = [part.format(**values) for part in template]
    display = " ".join(part.format(**shown) for part in template)
    return argv, display


def _commands(language: str, phase: str, *args: str) -> tuple[str, ...]:
    return tuple(settings.TOOL_COMMANDS[language][phase]) + args


JAVA = LanguageVariant(
    name="Java",
    extension=settings.LANGUAGE_EXTENSIONS["Java"],
    check_command=_commands("Java", "check", "{path}"),
    run_command=_commands("Java", "run", "{class_name}"),
    check_failed=_any_output,
    failure_banner="Compilation errors:\n",
    run_in_file_directory=True,
)

PYTHON = LanguageVariant(
    name="Python",
    extension=settings.LANGUAGE_EXTENSIONS["Python"],
    check_command=_commands("Python", "check", "{path}"),
    run_command=_commands("Python", "run", "{path}"),
    check_failed=_python_syntax_error,
)

PHP = LanguageVariant(
    name="PHP",
    extension=settings.LANGUAGE_EXTENSIONS["PHP"],
    check_command=_commands("PHP", "check", "{path}"),
    run_command=_commands("PHP", "run", "{path}"),
    check_failed=_php_lint_failed,
)

JAVASCRIPT = LanguageVariant(
    name="JavaScript",
    extension=settings.LANGUAGE_EXTENSIONS["JavaScript"],
    check_command=_commands("JavaScript", "check", "{path}"),
    run_command=_commands("JavaScript", "run", "{path}"),
    check_failed=_any_output,
)

VARIANTS: dict[str, LanguageVariant] = {
    variant.name: variant for variant in (JAVA, PYTHON, PHP, JAVASCRIPT)
}
