# File: app/api/v1/routes_products.py

from fastapi import APIRouter, Depends, Response, status

from app.api.deps import get_product_service
from app.core.errors import NotFound
from app.schemas.product import ProductCreate, ProductRead, ProductUpdate
from app.services.product_service import ProductService

router = APIRouter()

PRODUCT_NOT_FOUND = "Product not found"


@router.get("/", response_model=list[ProductRead], summary="List products")
def list_products(products: ProductService = Depends(get_product_service)):
    return products.get_all_products()


@router.get("/{product_id}", response_model=ProductRead, summary="Get a product")
def get_product(product_id: int, products: ProductService = Depends(get_product_service)):
    product = products.get_product_by_id(product_id)
    if product is None:
        raise NotFound(PRODUCT_NOT_FOUND)
    return product


@router.post(
    "/",
    response_model=ProductRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a product",
)
def create_product(payload: ProductCreate, products: ProductService = Depends(get_product_service)):
    return products.create_product(payload)


@router.put("/{product_id}", response_model=ProductRead, summary="Update a product")
def update_product(
    product_id: int,
    payload: ProductUpdate,
    products: ProductService = Depends(get_product_service),
):
    product = products.update_product(payload, product_id)
    if product is None:
        raise NotFound(PRODUCT_NOT_FOUND)
    return product


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a product")
def delete_product(product_id: int, products: ProductService = Depends(get_product_service)):
    if not products.delete_product(product_id):
        raise NotFound(PRODUCT_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
