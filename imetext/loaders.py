"""Resource file loaders with Pydantic validation."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from .io import ResourceLoadError, load_json
from .models import PunctuationResources, PunctuationResourcesFile

logger = logging.getLogger(__name__)


def load_punctuation_resources(path: Path) -> dict[str, PunctuationResources]:
    """Load and validate a punctuation resource file.

    The file holds ``{"resources": {"<locale tag>": {...}}}``, where the
    empty tag is the default entry.

    Raises:
        ResourceLoadError: If the file cannot be read or does not validate.
    """
    try:
        data = PunctuationResourcesFile.model_validate(load_json(path))
    except ValidationError as e:
        raise ResourceLoadError(
            f"Invalid punctuation resources in '{path}': {e}"
        ) from e
    logger.debug(
        "Loaded %d punctuation resource entries from %s", len(data.resources), path
    )
    return data.resources
