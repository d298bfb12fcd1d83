import copy
import logging
import yaml
from pathlib import Path
from typing import Any, Dict, Union

from services.counselor_assessment.definitions import DEFAULT_CATALOG_DATA
from services.counselor_assessment.models import (
    CatalogValidationError,
    DIMENSIONS,
    QUESTION_SECTIONS,
    QuestionCatalog,
    Section,
)
from services.counselor_assessment.scorer import RATING_SCALE

logger = logging.getLogger(__name__)


def load_catalog_data(data: Dict[str, Any]) -> QuestionCatalog:
    """
    Validates the raw dictionary data against the QuestionCatalog model
    and performs the cross-question checks the schema cannot express.

    Pydantic's ValidationError propagates unchanged for schema issues.
    """
    catalog = QuestionCatalog.model_validate(data)

    question_ids = set()
    for section in QUESTION_SECTIONS:
        questions = catalog.questions_for(section)
        if not questions:
            raise CatalogValidationError(f"Section '{section.value}' has no questions")

        for question in questions:
            if question.id in question_ids:
                raise CatalogValidationError(f"Duplicate question ID found: {question.id}")
            question_ids.add(question.id)

            if question.section != section:
                raise CatalogValidationError(
                    f"Question '{question.id}' is tagged '{question.section.value}' but listed under '{section.value}'"
                )

            if section != Section.TECHNICAL and (
                question.response_type != "scaled-rating" or question.scale != RATING_SCALE
            ):
                raise CatalogValidationError(
                    f"Question '{question.id}' in '{section.value}' must be a {RATING_SCALE}-point scaled rating"
                )

    for question in catalog.wiscar:
        if question.dimension not in DIMENSIONS:
            raise CatalogValidationError(
                f"WISCAR question '{question.id}' has unknown dimension '{question.dimension}'. Valid dimensions: {list(DIMENSIONS)}"
            )

    technical_by_id = {q.id: q for q in catalog.technical}
    for question_id, option_index in catalog.answer_key.items():
        question = technical_by_id.get(question_id)
        if question is None:
            raise CatalogValidationError(f"Answer key entry '{question_id}' does not name a technical question")
        if question.response_type != "single-choice":
            raise CatalogValidationError(f"Answer key entry '{question_id}' names a question that is not single-choice")
        if not 0 <= option_index < len(question.options):
            raise CatalogValidationError(
                f"Answer key index {option_index} for '{question_id}' is outside its {len(question.options)} options"
            )

    missing_keys = sorted(set(technical_by_id) - set(catalog.answer_key))
    if missing_keys:
        raise CatalogValidationError(f"Missing answer key entries for technical questions: {missing_keys}")

    logger.debug(f"Loaded question catalog with {catalog.total_questions} questions")
    return catalog


def load_catalog_from_file(file_path: Union[str, Path]) -> QuestionCatalog:
    """
    Reads a catalog from YAML. A file that cannot be turned into a
    mapping of sections raises CatalogValidationError like any other
    catalog defect.
    """
    path = Path(file_path)
    if not path.is_file():
        raise CatalogValidationError(f"Catalog file not found: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise CatalogValidationError(f"Catalog file {path} is not valid YAML: {e}") from e

    if not isinstance(data, dict):
        found = "nothing" if data is None else type(data).__name__
        raise CatalogValidationError(f"Catalog file {path} must hold a mapping of sections, found {found}")

    logger.info(f"Loading question catalog from {path}")
    return load_catalog_data(data)


def load_default_catalog() -> QuestionCatalog:
    """Returns the built-in career counselor question bank."""
    return load_catalog_data(copy.deepcopy(DEFAULT_CATALOG_DATA))
