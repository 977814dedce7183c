"""Seed contexts, categories and questions from a YAML fixture.

Fixture layout::

    contexts:
      - level: 50
        name: Algebra 101
        lang: fr            # optional
        categories:
          - name: Default for Algebra 101
            questions: 3
            hidden_questions: 1
            children:
              - name: Equations
                sortorder: 1

Every context also gets a "top" category that all listed categories hang
from, the same way a freshly created context is set up.
"""

from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field

from logger import get_logger

logger = get_logger()


class SeedCategory(BaseModel):
    """One category with its questions and sub-categories."""

    name: str
    info: str = ""
    sortorder: int = 999
    questions: int = Field(default=0, ge=0)
    hidden_questions: int = Field(default=0, ge=0)
    children: List["SeedCategory"] = Field(default_factory=list)


class SeedContext(BaseModel):
    level: int
    name: str
    lang: Optional[str] = None
    categories: List[SeedCategory] = Field(default_factory=list)


class SeedFile(BaseModel):
    contexts: List[SeedContext]


SeedCategory.model_rebuild()


def load_seed_file(path: Path) -> SeedFile:
    """Parse and validate a seed fixture.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        yaml.YAMLError: If the YAML is invalid.
        pydantic.ValidationError: If the fixture doesn't match the layout.
    """
    with open(path, "r") as f:
        data = yaml.safe_load(f)
    return SeedFile.model_validate(data)


def _seed_category(services, context_id: int, parent: int, seed: SeedCategory) -> int:
    category = services.categories.create(
        seed.name, context_id, parent=parent, sortorder=seed.sortorder, info=seed.info
    )
    created = 1
    for i in range(seed.questions):
        services.categories.add_question(category.id, f"{seed.name} question {i + 1}")
    for i in range(seed.hidden_questions):
        services.categories.add_question(
            category.id, f"{seed.name} hidden question {i + 1}", hidden=True
        )
    for child in seed.children:
        created += _seed_category(services, context_id, category.id, child)
    return created


def seed_from_file(services, path: Path) -> dict:
    """Create everything a seed fixture describes.

    Returns:
        Counts of created contexts and categories.
    """
    seed = load_seed_file(path)
    logger.info(f"Seeding {len(seed.contexts)} context(s) from {path}")

    contexts_created = 0
    categories_created = 0
    for seed_context in seed.contexts:
        context = services.contexts.create(
            seed_context.level, seed_context.name, lang=seed_context.lang
        )
        contexts_created += 1
        top = services.categories.create("top", context.id, parent=0, sortorder=0)
        for seed_category in seed_context.categories:
            categories_created += _seed_category(services, context.id, top.id, seed_category)
        logger.debug(f"Seeded context {context.id} ({seed_context.name})")

    return {"contexts": contexts_created, "categories": categories_created}
