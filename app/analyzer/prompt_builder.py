from pathlib import Path

from app.analyzer.exceptions import PromptTemplateError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"

SYSTEM_PROMPT = (
    "You are a medical document analyzer. "
    "Format lab reports and prescriptions into structured JSON data."
)


def load_prompt_template(path: Path | None = None) -> str:
    """Load the analysis prompt template from a file.

    Args:
        path: Path to the prompt template file.
              Defaults to the bundled analysis_prompt.txt.

    Returns:
        The raw template string with ``{document_text}`` and ``{file_count}``
        placeholders.

    Raises:
        PromptTemplateError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "analysis_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PromptTemplateError(f"Failed to load prompt template: {exc}") from exc


class PromptBuilder:
    """Renders the analysis prompt for a combined document text."""

    def __init__(self, template_path: Path | None = None) -> None:
        self._template = load_prompt_template(template_path)

    def build(self, combined_text: str, file_count: int) -> str:
        try:
            return self._template.format(
                document_text=combined_text,
                file_count=file_count,
            )
        except (KeyError, IndexError, ValueError) as exc:
            raise PromptTemplateError(f"Failed to render prompt template: {exc}") from exc
