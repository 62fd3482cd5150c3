from app.models.product import Product
from app.models.user import User
from app.schemas.auth import UserOut
from app.schemas.product import ProductOut
from app.schemas.quote_request import QuoteRequestOut


def build_user_response(user: User) -> UserOut:
    return UserOut(
        id=user.id,
        email=user.email,
        name=user.name,
        role=user.role,
        created_at=user.created_at,
    )


def build_product_response(product: Product) -> ProductOut:
    return ProductOut(
        id=product.id,
        name=product.name,
        description=product.description,
        price=product.price,
        category=product.category,
        created_at=product.created_at,
        updated_at=product.updated_at,
    )


def build_quote_request_response(row) -> QuoteRequestOut:
    quote, client_name, client_email, product_name, product_price = row
    return QuoteRequestOut(
        id=quote.id,
        client_id=quote.client_id,
        product_id=quote.product_id,
        quantity=quote.quantity,
        message=quote.message,
        status=quote.status,
        created_at=quote.created_at,
        client_name=client_name,
        client_email=client_email,
        product_name=product_name,
        product_price=product_price,
    )


def build_product_response_list(products: list) -> list:
    return [build_product_response(product) for product in products]


def build_quote_request_response_list(rows: list) -> list:
    return [build_quote_request_response(row) for row in rows]
