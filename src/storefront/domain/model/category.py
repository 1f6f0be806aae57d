"""Category entity.

The link between categories and products is a separate attachment
relation kept by the catalog store; neither side holds the other.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError

_SLUG_RE = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


@dataclass(frozen=True)
class Category:

    id: str
    name: str
    slug: str

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Category name is required")
        if not _SLUG_RE.match(self.slug):
            raise ValidationError(
                f"Invalid category slug '{self.slug}' "
                "(use lowercase letters, digits and hyphens)"
            )


@dataclass(frozen=True)
class CategoryAttachment:
    """One row of the category <-> product relation."""

    category_id: str
    product_id: str
