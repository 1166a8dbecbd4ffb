from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Optional

from orderdesk.core.constants import NOT_APPLICABLE
from orderdesk.core.errors import ValidationFailure


@dataclass(frozen=True)
class ResolvedVariants:
    colors: tuple[str, ...]
    sizes: tuple[str, ...]


def _value(row, name):
    if isinstance(row, Mapping):
        return row.get(name)
    return getattr(row, name, None)


def _clean(value) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def normalize_dimension(values: Iterable | None) -> list[str]:
    """Strip blanks and duplicates, keeping first-seen order."""
    seen = []
    for value in values or []:
        cleaned = _clean(value)
        if cleaned is not None and cleaned not in seen:
            seen.append(cleaned)
    return seen


def _escape_key_part(value: Optional[str]) -> str:
    return (value or "").replace("\\", "\\\\").replace("|", "\\|")


def variant_key(color: Optional[str], size: Optional[str]) -> str:
    return "{}|{}".format(_escape_key_part(color), _escape_key_part(size))


def variant_label(color: Optional[str], size: Optional[str]) -> str:
    return " / ".join(part for part in (color, size) if part)


def build_variant_matrix(
    colors: Iterable | None,
    sizes: Iterable | None,
) -> list[tuple[Optional[str], Optional[str]]]:
    colors = normalize_dimension(colors)
    sizes = normalize_dimension(sizes)

    if colors and sizes:
        return [(color, size) for color in colors for size in sizes]
    if colors:
        return [(color, None) for color in colors]
    if sizes:
        return [(None, size) for size in sizes]
    return [(None, None)]


def resolve_variants(
    available_colors: Iterable | None,
    available_sizes: Iterable | None,
    inventory_rows: Iterable | None,
) -> ResolvedVariants:
    """Colors and sizes an order line may pick for a product.

    Dimensions present on inventory rows are what can actually be
    stocked, so they win; the declared lists only apply to a dimension
    no inventory row carries.
    """
    rows = list(inventory_rows or [])
    inventory_colors = normalize_dimension(_value(row, "color") for row in rows)
    inventory_sizes = normalize_dimension(_value(row, "size") for row in rows)

    colors = inventory_colors or normalize_dimension(available_colors)
    sizes = inventory_sizes or normalize_dimension(available_sizes)
    return ResolvedVariants(colors=tuple(colors), sizes=tuple(sizes))


def _validate_dimension(name: str, options: tuple[str, ...], selected) -> str:
    if not options:
        return NOT_APPLICABLE
    cleaned = _clean(selected)
    if cleaned is None:
        raise ValidationFailure(
            "A {} must be selected for this product.".format(name),
            details={"field": name, "allowed": list(options)},
        )
    if cleaned not in options:
        raise ValidationFailure(
            "{} '{}' is not available for this product.".format(name.capitalize(), cleaned),
            details={"field": name, "allowed": list(options)},
        )
    return cleaned


def validate_line_variant(
    resolved: ResolvedVariants,
    color: Optional[str],
    size: Optional[str],
) -> tuple[str, str]:
    return (
        _validate_dimension("color", resolved.colors, color),
        _validate_dimension("size", resolved.sizes, size),
    )


__all__ = [
    "ResolvedVariants",
    "build_variant_matrix",
    "normalize_dimension",
    "resolve_variants",
    "validate_line_variant",
    "variant_key",
    "variant_label",
]
