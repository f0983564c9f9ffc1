"""The fixed catalog of life domains that partition the wheel.

INVARIANT: Exactly 12 domains, in a fixed order. Slugs are unique and
never change once defined. The catalog is never mutated.
"""

from __future__ import annotations

from pydantic import BaseModel

DOMAIN_COUNT = 12
HUE_STEP = 360 / DOMAIN_COUNT


class DomainNotFoundError(KeyError):
    """Raised by :func:`by_slug` when no domain has the given slug."""

    def __init__(self, slug: str) -> None:
        super().__init__(slug)
        self.slug = slug

    def __str__(self) -> str:
        return f"Unknown domain: {self.slug!r}"


class Domain(BaseModel):
    """One life area on the wheel."""

    model_config = {"frozen": True}

    slug: str
    label: str
    order: int
    hue: float


_DEFINITIONS: tuple[tuple[str, str], ...] = (
    ("career", "Career"),
    ("finances", "Finances"),
    ("health", "Health"),
    ("family", "Family"),
    ("relationships", "Relationships"),
    ("friends", "Friends"),
    ("personal-growth", "Personal Growth"),
    ("fun", "Fun & Recreation"),
    ("environment", "Environment"),
    ("spirituality", "Spirituality"),
    ("community", "Community"),
    ("self-care", "Self-Care"),
)

DOMAINS: tuple[Domain, ...] = tuple(
    Domain(slug=slug, label=label, order=i, hue=i * HUE_STEP)
    for i, (slug, label) in enumerate(_DEFINITIONS)
)

_BY_SLUG: dict[str, Domain] = {d.slug: d for d in DOMAINS}


def all_domains() -> tuple[Domain, ...]:
    """Return every domain in wheel order (clockwise from the top)."""
    return DOMAINS


def by_slug(slug: str) -> Domain:
    """Look up a domain by slug, raising :class:`DomainNotFoundError`."""
    try:
        return _BY_SLUG[slug]
    except KeyError:
        raise DomainNotFoundError(slug) from None


def is_known_slug(slug: str) -> bool:
    return slug in _BY_SLUG
