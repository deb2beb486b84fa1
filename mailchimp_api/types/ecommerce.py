"""
E-commerce stores, and what hangs off them: customers, carts, orders,
products with their variants and images, and promo rules with their codes.

Every collection in a store is addressed by ids chosen by the caller. The
`Create*` bodies require the fields Mailchimp requires; the `Update*` bodies
leave everything optional, so that a PATCH only sends what was set.
"""

from datetime import datetime
from typing import List, Optional

from mailchimp_api.models import model, ApiEnum, Factory
from mailchimp_api.types.common import Address, Link, Links


class FinancialStatus(ApiEnum):
    pending = 'pending'
    paid = 'paid'
    refunded = 'refunded'
    cancelled = 'cancelled'
    noop = ''
    fallthrough_string = '*'


@model
class Store:
    """GET /ecommerce/stores/{store_id}"""
    id: str = ''
    list_id: str = ''
    name: str = ''
    platform: str = ''
    domain: str = ''
    is_syncing: bool = False
    email_address: str = ''
    currency_code: str = ''
    money_format: str = ''
    primary_locale: str = ''
    timezone: str = ''
    phone: str = ''
    address: Optional[Address] = None
    list_is_active: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    links: List[Link] = Links()


@model
class Stores:
    """GET /ecommerce/stores"""
    stores: List[Store] = Factory(list)
    total_items: int = 0
    links: List[Link] = Links()


@model
class CreateStore:
    """The body for POST /ecommerce/stores."""
    id: str
    list_id: str
    name: str
    currency_code: str
    platform: str = ''
    domain: str = ''
    is_syncing: bool = False
    email_address: str = ''
    money_format: str = ''
    primary_locale: str = ''
    timezone: str = ''
    phone: str = ''
    address: Optional[Address] = None


@model
class UpdateStore:
    """The body for PATCH /ecommerce/stores/{store_id}."""
    name: str = ''
    platform: str = ''
    domain: str = ''
    is_syncing: Optional[bool] = None
    email_address: str = ''
    currency_code: str = ''
    money_format: str = ''
    primary_locale: str = ''
    timezone: str = ''
    phone: str = ''
    address: Optional[Address] = None


@model
class Customer:
    """GET /ecommerce/stores/{store_id}/customers/{customer_id}"""
    id: str = ''
    email_address: str = ''
    opt_in_status: bool = False
    company: str = ''
    first_name: str = ''
    last_name: str = ''
    orders_count: int = 0
    total_spent: float = 0.0
    address: Optional[Address] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    links: List[Link] = Links()


@model
class Customers:
    """GET /ecommerce/stores/{store_id}/customers"""
    store_id: str = ''
    customers: List[Customer] = Factory(list)
    total_items: int = 0
    links: List[Link] = Links()


@model
class CreateCustomer:
    """The body for POST /ecommerce/stores/{store_id}/customers, and for PUT,
    which adds the customer or updates an existing one.
    """
    id: str
    email_address: str
    opt_in_status: bool
    company: str = ''
    first_name: str = ''
    last_name: str = ''
    address: Optional[Address] = None


@model
class UpdateCustomer:
    """The body for PATCH /ecommerce/stores/{store_id}/customers/{customer_id}."""
    opt_in_status: Optional[bool] = None
    company: str = ''
    first_name: str = ''
    last_name: str = ''
    address: Optional[Address] = None


@model
class OrderCustomer:
    """The customer of a new cart or order.

    Only the id is required; an unknown id creates the customer, for which
    Mailchimp then needs the email address too.
    """
    id: str
    email_address: str = ''
    opt_in_status: Optional[bool] = None
    company: str = ''
    first_name: str = ''
    last_name: str = ''
    address: Optional[Address] = None


#### Carts


@model
class CartLine:
    id: str = ''
    product_id: str = ''
    product_title: str = ''
    product_variant_id: str = ''
    product_variant_title: str = ''
    quantity: int = 0
    price: float = 0.0
    links: List[Link] = Links()


@model
class CartLines:
    """GET /ecommerce/stores/{store_id}/carts/{cart_id}/lines"""
    store_id: str = ''
    cart_id: str = ''
    lines: List[CartLine] = Factory(list)
    total_items: int = 0
    links: List[Link] = Links()


@model
class CreateCartLine:
    id: str
    product_id: str
    product_variant_id: str
    quantity: int
    price: float


@model
class UpdateCartLine:
    product_id: str = ''
    product_variant_id: str = ''
    quantity: Optional[int] = None
    price: Optional[float] = None


@model
class Cart:
    """GET /ecommerce/stores/{store_id}/carts/{cart_id}"""
    id: str = ''
    customer: Optional[Customer] = None
    campaign_id: str = ''
    checkout_url: str = ''
    currency_code: str = ''
    order_total: float = 0.0
    tax_total: float = 0.0
    lines: List[CartLine] = Factory(list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    links: List[Link] = Links()


@model
class Carts:
    """GET /ecommerce/stores/{store_id}/carts"""
    store_id: str = ''
    carts: List[Cart] = Factory(list)
    total_items: int = 0
    links: List[Link] = Links()


@model
class CreateCart:
    """The body for POST /ecommerce/stores/{store_id}/carts."""
    id: str
    customer: OrderCustomer
    currency_code: str
    order_total: float
    lines: List[CreateCartLine]
    campaign_id: str = ''
    checkout_url: str = ''
    tax_total: Optional[float] = None


@model
class UpdateCart:
    """The body for PATCH /ecommerce/stores/{store_id}/carts/{cart_id}."""
    customer: Optional[OrderCustomer] = None
    campaign_id: str = ''
    checkout_url: str = ''
    currency_code: str = ''
    order_total: Optional[float] = None
    tax_total: Optional[float] = None
    lines: List[CreateCartLine] = Factory(list)


#### Orders


@model
class OrderLine:
    id: str = ''
    product_id: str = ''
    product_title: str = ''
    product_variant_id: str = ''
    product_variant_title: str = ''
    image_url: str = ''
    quantity: int = 0
    price: float = 0.0
    discount: float = 0.0
    links: List[Link] = Links()


@model
class Order:
    """GET /ecommerce/stores/{store_id}/orders/{order_id}"""
    id: str = ''
    store_id: str = ''
    customer: Optional[Customer] = None
    campaign_id: str = ''
    landing_site: str = ''
    financial_status: FinancialStatus = FinancialStatus.noop
    fulfillment_status: str = ''
    currency_code: str = ''
    order_total: float = 0.0
    order_url: str = ''
    discount_total: float = 0.0
    tax_total: float = 0.0
    shipping_total: float = 0.0
    tracking_code: str = ''
    processed_at_foreign: Optional[datetime] = None
    cancelled_at_foreign: Optional[datetime] = None
    updated_at_foreign: Optional[datetime] = None
    shipping_address: Optional[Address] = None
    billing_address: Optional[Address] = None
    lines: List[OrderLine] = Factory(list)
    links: List[Link] = Links()


@model
class Orders:
    """GET /ecommerce/orders, and GET /ecommerce/stores/{store_id}/orders"""
    store_id: str = ''
    orders: List[Order] = Factory(list)
    total_items: int = 0
    links: List[Link] = Links()


@model
class OrderLines:
    """GET /ecommerce/stores/{store_id}/orders/{order_id}/lines"""
    store_id: str = ''
    order_id: str = ''
    lines: List[OrderLine] = Factory(list)
    total_items: int = 0
    links: List[Link] = Links()


@model
class CreateOrderLine:
    id: str
    product_id: str
    product_variant_id: str
    quantity: int
    price: float
    discount: Optional[float] = None


@model
class UpdateOrderLine:
    product_id: str = ''
    product_variant_id: str = ''
    quantity: Optional[int] = None
    price: Optional[float] = None
    discount: Optional[float] = None


@model
class OrderPromo:
    code: str
    amount_discounted: float
    type_: str


@model
class CreateOrder:
    """The body for POST /ecommerce/stores/{store_id}/orders."""
    id: str
    customer: OrderCustomer
    currency_code: str
    order_total: float
    lines: List[CreateOrderLine]
    campaign_id: str = ''
    landing_site: str = ''
    financial_status: FinancialStatus = FinancialStatus.noop
    fulfillment_status: str = ''
    order_url: str = ''
    discount_total: Optional[float] = None
    tax_total: Optional[float] = None
    shipping_total: Optional[float] = None
    tracking_code: str = ''
    processed_at_foreign: Optional[datetime] = None
    cancelled_at_foreign: Optional[datetime] = None
    updated_at_foreign: Optional[datetime] = None
    shipping_address: Optional[Address] = None
    billing_address: Optional[Address] = None
    promos: List[OrderPromo] = Factory(list)


@model
class UpdateOrder:
    """The body for PATCH /ecommerce/stores/{store_id}/orders/{order_id}."""
    customer: Optional[OrderCustomer] = None
    campaign_id: str = ''
    landing_site: str = ''
    financial_status: FinancialStatus = FinancialStatus.noop
    fulfillment_status: str = ''
    currency_code: str = ''
    order_total: Optional[float] = None
    order_url: str = ''
    discount_total: Optional[float] = None
    tax_total: Optional[float] = None
    shipping_total: Optional[float] = None
    tracking_code: str = ''
    processed_at_foreign: Optional[datetime] = None
    cancelled_at_foreign: Optional[datetime] = None
    updated_at_foreign: Optional[datetime] = None
    shipping_address: Optional[Address] = None
    billing_address: Optional[Address] = None
    lines: List[CreateOrderLine] = Factory(list)
    promos: List[OrderPromo] = Factory(list)


#### Products


@model
class ProductVariant:
    id: str = ''
    title: str = ''
    url: str = ''
    sku: str = ''
    price: float = 0.0
    inventory_quantity: int = 0
    image_url: str = ''
    backorders: str = ''
    visibility: str = ''
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    links: List[Link] = Links()


@model
class ProductImage:
    id: str = ''
    url: str = ''
    variant_ids: List[str] = Factory(list)
    links: List[Link] = Links()


@model
class Product:
    """GET /ecommerce/stores/{store_id}/products/{product_id}"""
    id: str = ''
    currency_code: str = ''
    title: str = ''
    handle: str = ''
    url: str = ''
    description: str = ''
    type_: str = ''
    vendor: str = ''
    image_url: str = ''
    variants: List[ProductVariant] = Factory(list)
    images: List[ProductImage] = Factory(list)
    published_at_foreign: Optional[datetime] = None
    links: List[Link] = Links()


@model
class Products:
    """GET /ecommerce/stores/{store_id}/products"""
    store_id: str = ''
    products: List[Product] = Factory(list)
    total_items: int = 0
    links: List[Link] = Links()


@model
class ProductVariants:
    """GET /ecommerce/stores/{store_id}/products/{product_id}/variants"""
    store_id: str = ''
    product_id: str = ''
    variants: List[ProductVariant] = Factory(list)
    total_items: int = 0
    links: List[Link] = Links()


@model
class ProductImages:
    """GET /ecommerce/stores/{store_id}/products/{product_id}/images"""
    store_id: str = ''
    product_id: str = ''
    images: List[ProductImage] = Factory(list)
    total_items: int = 0
    links: List[Link] = Links()


@model
class CreateProductVariant:
    """Also the body for PUT, which adds the variant or replaces it."""
    id: str
    title: str
    url: str = ''
    sku: str = ''
    price: Optional[float] = None
    inventory_quantity: Optional[int] = None
    image_url: str = ''
    backorders: str = ''
    visibility: str = ''


@model
class UpdateProductVariant:
    title: str = ''
    url: str = ''
    sku: str = ''
    price: Optional[float] = None
    inventory_quantity: Optional[int] = None
    image_url: str = ''
    backorders: str = ''
    visibility: str = ''


@model
class CreateProductImage:
    id: str
    url: str
    variant_ids: List[str] = Factory(list)


@model
class UpdateProductImage:
    url: str = ''
    variant_ids: List[str] = Factory(list)


@model
class CreateProduct:
    """The body for POST /ecommerce/stores/{store_id}/products.

    A product needs at least one variant; for a product without any, repeat
    the product's id and title.
    """
    id: str
    title: str
    variants: List[CreateProductVariant]
    handle: str = ''
    url: str = ''
    description: str = ''
    type_: str = ''
    vendor: str = ''
    image_url: str = ''
    images: List[CreateProductImage] = Factory(list)
    published_at_foreign: Optional[datetime] = None


@model
class UpdateProduct:
    """The body for PATCH /ecommerce/stores/{store_id}/products/{product_id}."""
    title: str = ''
    handle: str = ''
    url: str = ''
    description: str = ''
    type_: str = ''
    vendor: str = ''
    image_url: str = ''
    variants: List[CreateProductVariant] = Factory(list)
    images: List[CreateProductImage] = Factory(list)
    published_at_foreign: Optional[datetime] = None


#### Promo rules and codes


class PromoRuleType(ApiEnum):
    fixed = 'fixed'
    percentage = 'percentage'
    noop = ''
    fallthrough_string = '*'


class PromoRuleTarget(ApiEnum):
    per_item = 'per_item'
    total = 'total'
    shipping = 'shipping'
    noop = ''
    fallthrough_string = '*'


@model
class PromoRule:
    """GET /ecommerce/stores/{store_id}/promo-rules/{promo_rule_id}"""
    id: str = ''
    title: str = ''
    description: str = ''
    starts_at: Optional[datetime] = None
    ends_at: Optional[datetime] = None
    # A fraction for percentages: 0.1 is 10%.
    amount: float = 0.0
    type_: PromoRuleType = PromoRuleType.noop
    target: PromoRuleTarget = PromoRuleTarget.noop
    enabled: bool = False
    created_at_foreign: Optional[datetime] = None
    updated_at_foreign: Optional[datetime] = None
    links: List[Link] = Links()


@model
class PromoRules:
    """GET /ecommerce/stores/{store_id}/promo-rules"""
    store_id: str = ''
    promo_rules: List[PromoRule] = Factory(list)
    total_items: int = 0
    links: List[Link] = Links()


@model
class CreatePromoRule:
    id: str
    description: str
    amount: float
    type_: PromoRuleType
    target: PromoRuleTarget
    title: str = ''
    starts_at: Optional[datetime] = None
    ends_at: Optional[datetime] = None
    enabled: Optional[bool] = None
    created_at_foreign: Optional[datetime] = None
    updated_at_foreign: Optional[datetime] = None


@model
class UpdatePromoRule:
    title: str = ''
    description: str = ''
    starts_at: Optional[datetime] = None
    ends_at: Optional[datetime] = None
    amount: Optional[float] = None
    type_: PromoRuleType = PromoRuleType.noop
    target: PromoRuleTarget = PromoRuleTarget.noop
    enabled: Optional[bool] = None
    created_at_foreign: Optional[datetime] = None
    updated_at_foreign: Optional[datetime] = None


@model
class PromoCode:
    """GET /ecommerce/stores/{store_id}/promo-rules/{promo_rule_id}/promo-codes/{promo_code_id}"""
    id: str = ''
    code: str = ''
    redemption_url: str = ''
    usage_count: int = 0
    enabled: bool = False
    created_at_foreign: Optional[datetime] = None
    updated_at_foreign: Optional[datetime] = None
    links: List[Link] = Links()


@model
class PromoCodes:
    """GET /ecommerce/stores/{store_id}/promo-rules/{promo_rule_id}/promo-codes"""
    store_id: str = ''
    promo_codes: List[PromoCode] = Factory(list)
    total_items: int = 0
    links: List[Link] = Links()


@model
class CreatePromoCode:
    id: str
    code: str
    redemption_url: str
    usage_count: Optional[int] = None
    enabled: Optional[bool] = None
    created_at_foreign: Optional[datetime] = None
    updated_at_foreign: Optional[datetime] = None


@model
class UpdatePromoCode:
    code: str = ''
    redemption_url: str = ''
    usage_count: Optional[int] = None
    enabled: Optional[bool] = None
    created_at_foreign: Optional[datetime] = None
    updated_at_foreign: Optional[datetime] = None
