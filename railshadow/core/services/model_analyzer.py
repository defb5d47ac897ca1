"""
Model analyzer — infer ActiveRecord models from exported TS interfaces.

Associations and validations come from naming heuristics only:

    author_id: string   → belongs_to :author
    tags: string[]      → has_many :tags, class_name: 'Tag'
    email: string       → presence + email format
    homepageUrl?: string → url format only
"""

from __future__ import annotations

import logging
import re

from railshadow.core.models.description import (
    Association,
    ModelDescription,
    PropField,
    Validation,
)
from railshadow.core.services.component_analyzer import parse_field_lines

logger = logging.getLogger(__name__)

_INTERFACE_RE = re.compile(r"export\s+(interface|type)\s+(\w+)\s*=?\s*\{([^}]+)\}")
_FOREIGN_KEY_SUFFIX_RE = re.compile(r"(_id|Id)$", re.IGNORECASE)
_ARRAY_SUFFIX_RE = re.compile(r"\[\]$")
_ARRAY_GENERIC_RE = re.compile(r"^array<.+>$", re.IGNORECASE)

_FOREIGN_KEY_TYPES = ("string", "number", "uuid")


def parse_fields(body: str) -> list[PropField]:
    """Fields of one interface body."""
    return parse_field_lines(body)


def is_foreign_key(field: PropField) -> bool:
    """``*_id``/``*Id`` named, with a string, number or uuid type.

    A bare ``id`` matches too and yields a nameless ``belongs_to``.
    """
    if not _FOREIGN_KEY_SUFFIX_RE.search(field.name):
        return False
    lowered = field.type.lower()
    return any(t in lowered for t in _FOREIGN_KEY_TYPES)


def is_collection(type_text: str) -> bool:
    """``Foo[]`` or ``Array<Foo>``."""
    stripped = type_text.strip()
    return bool(_ARRAY_SUFFIX_RE.search(stripped) or _ARRAY_GENERIC_RE.match(stripped))


def infer_associations(fields: list[PropField]) -> list[Association]:
    associations: list[Association] = []
    for field in fields:
        if is_foreign_key(field):
            base = _FOREIGN_KEY_SUFFIX_RE.sub("", field.name)
            associations.append(Association(kind="belongs_to", name=base, target=base))
        elif is_collection(field.type):
            singular = re.sub(r"s$", "", field.name) or field.name
            associations.append(
                Association(kind="has_many", name=field.name, target=singular)
            )
    return associations


def infer_validations(fields: list[PropField]) -> list[Validation]:
    validations: list[Validation] = []
    for field in fields:
        if not field.optional:
            validations.append(Validation(kind="presence", field=field.name))
        lowered = field.name.lower()
        if "email" in lowered:
            validations.append(Validation(kind="email", field=field.name))
        if "url" in lowered:
            validations.append(Validation(kind="url", field=field.name))
    return validations


def parse_models(content: str) -> list[ModelDescription]:
    """One ModelDescription per exported interface/type, in source order."""
    models: list[ModelDescription] = []
    for match in _INTERFACE_RE.finditer(content):
        fields = parse_fields(match.group(3))
        models.append(ModelDescription(
            name=match.group(2),
            fields=fields,
            associations=infer_associations(fields),
            validations=infer_validations(fields),
        ))
    logger.debug("Parsed %d model(s) from type declarations", len(models))
    return models
