import os
from dotenv import load_dotenv

load_dotenv()


def _optional_float(name: str) -> float | None:
    value = os.getenv(name)
    if not value:
        return None
    return float(value)


class Settings:
    PROJECT_NAME: str = "Code Validator"
    PROJECT_VERSION: str = "1.0.0"

    # logging settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE: str | None = os.getenv("LOG_FILE") or None

    # no limit on tool run time unless set
    COMMAND_TIMEOUT_SECONDS: float | None = _optional_float("COMMAND_TIMEOUT_SECONDS")

    # language to source file extension mapping, in selection order
    LANGUAGE_EXTENSIONS = {
        "Java": ".java",
        "Python": ".py",
        "PHP": ".php",
        "JavaScript": ".js",
    }

    # program names for the check and run phases of each language
    TOOL_COMMANDS = {
        "Java": {"check": ["javac"], "run": ["java"]},
        "Python": {"check": ["python", "-m", "py_compile"], "run": ["python"]},
        "PHP": {"check": ["php", "-l"], "run": ["php"]},
        "JavaScript": {"check": ["node", "--check"], "run": ["node"]},
    }


settings = Settings()
