from pathlib import Path

from app.analysis.exceptions import PromptTemplateError
from app.analysis.models import AnalysisType
from app.logging.logger import Log

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"

_TEMPLATE_FILES = {
    AnalysisType.REVIEW: "review.txt",
    AnalysisType.PERCENTAGE: "percentage.txt",
}
GENERIC_TEMPLATE_FILE = "generic.txt"


def load_prompt_template(name: str, prompt_dir: Path | None = None) -> str:
    """Load an instruction template by file name.

    Args:
        name: Template file name, e.g. ``review.txt``.
        prompt_dir: Directory holding the templates.
                    Defaults to the bundled ``prompts`` directory.

    Returns:
        The template text without surrounding whitespace.

    Raises:
        PromptTemplateError: if the file cannot be read.
    """
    path = (prompt_dir or _DEFAULT_PROMPT_DIR) / name
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise PromptTemplateError(f"Failed to load prompt template: {exc}") from exc


def select_prompt(analysis_type: str, prompt_dir: Path | None = None) -> str:
    """Return the instruction template for an analysis category.

    Matching is case-insensitive. Unknown categories get the generic template.
    """
    try:
        category = AnalysisType(analysis_type.strip().lower())
    except ValueError:
        Log.info(f"Unrecognized analysis type '{analysis_type}', using generic prompt")
        return load_prompt_template(GENERIC_TEMPLATE_FILE, prompt_dir)
    return load_prompt_template(_TEMPLATE_FILES[category], prompt_dir)
