"""
Products API Endpoints
Handles product catalog CRUD

Author: TM3
Date: 2026-10-17
"""
from fastapi import APIRouter, Depends, Path, status

from app.core.database import Database, get_database
from app.core.errors import NotFoundError
from app.domain.product import INTEGER_MAX, ProductWrite
from app.repositories.product_repository import ProductRepository

router = APIRouter()


def get_product_repository(db: Database = Depends(get_database)) -> ProductRepository:
    return ProductRepository(db)


@router.get("")
def get_products(repo: ProductRepository = Depends(get_product_repository)):
    """
    Get all products, newest first
    """
    products = repo.find_all()
    return [product.to_dict() for product in products]


@router.get("/{product_id}")
def get_product(
    product_id: int = Path(..., le=INTEGER_MAX, description="Product ID"),
    repo: ProductRepository = Depends(get_product_repository)
):
    """
    Get a single product by ID
    """
    product = repo.find_by_id(product_id)
    if not product:
        raise NotFoundError("Product not found")

    return product.to_dict()


@router.post("", status_code=status.HTTP_201_CREATED)
def create_product(
    payload: ProductWrite,
    repo: ProductRepository = Depends(get_product_repository)
):
    """
    Create a product

    Body: {sku, name, description?, price?, stock?}
    Duplicate SKUs are rejected with 409.
    """
    product = repo.create(payload)
    return product.to_dict()


@router.put("/{product_id}")
def update_product(
    payload: ProductWrite,
    product_id: int = Path(..., le=INTEGER_MAX, description="Product ID"),
    repo: ProductRepository = Depends(get_product_repository)
):
    """
    Replace a product's fields

    Omitted description becomes null, omitted price/stock become 0.
    """
    product = repo.update(product_id, payload)
    if not product:
        raise NotFoundError("Product not found")

    return product.to_dict()


@router.delete("/{product_id}")
def delete_product(
    product_id: int = Path(..., le=INTEGER_MAX, description="Product ID"),
    repo: ProductRepository = Depends(get_product_repository)
):
    """Delete a product (deleting an unknown id still succeeds)"""
    repo.delete(product_id)
    return {"success": True}
