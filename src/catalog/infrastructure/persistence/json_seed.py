"""JSON seed files: load drafts at start-up, dump point-in-time snapshots.

Seed format is a JSON array of objects::

    [{"name": "Laptop", "price": "999.99", "description": null, "quantity": 10}]

``price`` may be a string or a number. Snapshots are written in the same
format with an ``id`` added and ``price`` always a string.
"""

from __future__ import annotations

import json
from pathlib import Path

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product import Product, ProductDraft


def load_seed(file_path: Path) -> list[ProductDraft]:
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ValidationError(f"Cannot read seed file {file_path}: {exc.strerror}") from exc
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValidationError(f"Invalid JSON in {file_path}: {exc}") from exc

    if not isinstance(raw, list):
        raise ValidationError(f"{file_path}: expected a JSON array of products")

    drafts: list[ProductDraft] = []
    for index, item in enumerate(raw):
        if not isinstance(item, dict) or "name" not in item or "price" not in item:
            raise ValidationError(
                f"{file_path}: entry {index} must be an object with 'name' and 'price'"
            )
        try:
            drafts.append(
                ProductDraft.of(
                    name=item["name"],
                    price=item["price"],
                    description=item.get("description"),
                    quantity=item.get("quantity"),
                )
            )
        except ValidationError as exc:
            raise ValidationError(f"{file_path}: entry {index}: {exc}") from exc
    return drafts


def dump_snapshot(file_path: Path, products: list[Product]) -> None:
    raw = [
        {
            "id": p.id,
            "name": p.name,
            "price": str(p.price.amount),
            "description": p.description,
            "quantity": p.quantity,
        }
        for p in sorted(products, key=lambda p: p.id)
    ]
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(json.dumps(raw, indent=2) + "\n", encoding="utf-8")
