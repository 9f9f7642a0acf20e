from dataclasses import replace
from pathlib import Path

from schemas.validation import AUTO_DETECT
from validators.languages import VARIANTS, LanguageVariant

EXTENSION_TABLE: dict[str, str] = {
    variant.extension: name for name, variant in VARIANTS.items()
}


def suggest_language(file_path: str) -> str | None:
    """Language name matching the file's extension, if any."""
    return EXTENSION_TABLE.get(Path(file_path).suffix)


def select_validator(language: str, file_path: str) -> LanguageVariant | None:
    """
    Pick the validator for a request.

    With "auto" the file extension decides; any other tag names the language
    directly and the extension is ignored, so callers still need to check
    `is_compatible` on the result.
    """
    if language == AUTO_DETECT:
        language = suggest_language(file_path)
        if language is None:
            return None

    variant = VARIANTS.get(language)
    if variant is None:
        return None
    return replace(variant)


def supported_languages() -> list[tuple[str, str]]:
    return [(name, variant.extension) for name, variant in VARIANTS.items()]
