"""Tutor prompt texts.

The persona and image instructions ship as text files next to this module.
A ``prompts/`` directory in the working directory takes precedence, so a
deployment can reword the tutor without touching the package.
"""

from functools import lru_cache
from pathlib import Path

SYSTEM_PROMPT = "tutor_system"
IMAGE_PROMPT = "image_analysis"

_PACKAGE_DIR = Path(__file__).parent


def search_path() -> list[Path]:
    """Directories searched for ``{name}.txt``, highest precedence first."""
    return [Path.cwd() / "prompts", _PACKAGE_DIR]


@lru_cache(maxsize=16)
def load_prompt(name: str) -> str:
    """Read a prompt by name, without trailing whitespace.

    Raises:
        FileNotFoundError: If no directory on the search path has the file
    """
    candidates = [directory / f"{name}.txt" for directory in search_path()]
    for path in candidates:
        if path.is_file():
            return path.read_text(encoding="utf-8").rstrip()

    searched = "\n".join(f"  - {path}" for path in candidates)
    raise FileNotFoundError(f"Prompt '{name}' not found. Searched:\n{searched}")


def get_system_prompt() -> str:
    return load_prompt(SYSTEM_PROMPT)


def get_image_prompt() -> str:
    return load_prompt(IMAGE_PROMPT)


def clear_cache() -> None:
    """Forget loaded prompts (after editing an override file)."""
    load_prompt.cache_clear()


__all__ = [
    "IMAGE_PROMPT",
    "SYSTEM_PROMPT",
    "clear_cache",
    "get_image_prompt",
    "get_system_prompt",
    "load_prompt",
    "search_path",
]
