"""Product CRUD: list, get, create, update (partial), delete."""

from typing import Any

from fastapi import APIRouter, Response

from app.api.deps import ProductRepoDep
from app.models import product_to_dict
from app.schemas import (
    ProductIn,
    ProductPublic,
    ProductUpdateIn,
    product_create_from_body,
    product_patch_from_body,
)

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=list[ProductPublic])
def list_products(repo: ProductRepoDep) -> Any:
    return [product_to_dict(p) for p in repo.list_all()]


@router.get("/{id}", response_model=ProductPublic)
def get_product(repo: ProductRepoDep, id: int) -> Any:
    return product_to_dict(repo.get_by_id(id))


@router.post("", response_model=ProductPublic, status_code=201)
def create_product(repo: ProductRepoDep, body: ProductIn) -> Any:
    return product_to_dict(repo.create(product_create_from_body(body)))


@router.put("/{id}", response_model=ProductPublic)
def update_product(repo: ProductRepoDep, id: int, body: ProductUpdateIn) -> Any:
    """Update a product. Omitted fields keep their current value."""
    return product_to_dict(repo.update(id, product_patch_from_body(body)))


@router.delete("/{id}", status_code=204)
def delete_product(repo: ProductRepoDep, id: int) -> Response:
    repo.delete(id)
    return Response(status_code=204)
