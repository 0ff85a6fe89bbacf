from pathlib import Path

from docverify.sections.exceptions import SectionAnalysisError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(path: Path | None = None) -> str:
    """Load the section analysis prompt template from a file.

    Args:
        path: Path to the prompt template file.
              Defaults to the bundled section_prompt.txt.

    Returns:
        The raw template string with placeholders.

    Raises:
        SectionAnalysisError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "section_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SectionAnalysisError(f"Failed to load prompt template: {exc}") from exc
