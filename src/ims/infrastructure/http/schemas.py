"""Request/response models for the HTTP API and the projections that build them.

The domain types never leave the process as-is; each ``to_*_response``
function is a pure mapping from a core type to its wire shape.
"""

from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from ims.domain.model.product import Product, ProductPage
from ims.domain.model.summary import OutOfStockProduct, ProductSummary


class ProductCreateRequest(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    quantity: int | None = None
    price: Decimal

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class ProductResponse(BaseModel):
    id: int
    name: str
    quantity: int
    price: Decimal


class SimpleProductResponse(BaseModel):
    id: int
    name: str


class ProductPageResponse(BaseModel):
    items: list[ProductResponse]
    page: int
    size: int
    total: int
    total_pages: int


class ProductSummaryResponse(BaseModel):
    total_products: int
    total_quantity: int
    average_price: Decimal
    out_of_stock: list[SimpleProductResponse]


def to_product_response(product: Product) -> ProductResponse:
    return ProductResponse(
        id=product.id,
        name=product.name,
        quantity=product.quantity,
        price=product.price.amount,
    )


def to_simple_product_response(item: OutOfStockProduct) -> SimpleProductResponse:
    return SimpleProductResponse(id=item.id, name=item.name)


def to_page_response(page: ProductPage) -> ProductPageResponse:
    return ProductPageResponse(
        items=[to_product_response(p) for p in page.items],
        page=page.page,
        size=page.size,
        total=page.total,
        total_pages=page.total_pages,
    )


def to_summary_response(summary: ProductSummary) -> ProductSummaryResponse:
    return ProductSummaryResponse(
        total_products=summary.total_products,
        total_quantity=summary.total_quantity,
        average_price=summary.average_price,
        out_of_stock=[to_simple_product_response(i) for i in summary.out_of_stock],
    )
