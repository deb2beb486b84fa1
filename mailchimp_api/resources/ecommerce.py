from mailchimp_api.resources.base import Resource, encode_path
from mailchimp_api import types


def store_path(store_id, *rest):
    return encode_path('ecommerce', 'stores', store_id, *rest)


class Ecommerce(Resource):
    """/ecommerce: stores, and their customers, carts, orders, products and
    promo rules.
    """

    #### Stores

    def list_stores(self, *, fields=(), exclude_fields=(), count=0, offset=0) -> types.Stores:
        return self._get('/ecommerce/stores', types.Stores, fields=fields,
                         exclude_fields=exclude_fields, count=count, offset=offset)

    def create_store(self, store: types.CreateStore) -> types.Store:
        return self.client.post('/ecommerce/stores', body=store, response_type=types.Store)

    def get_store(self, store_id: str, *, fields=(), exclude_fields=()) -> types.Store:
        return self._get(store_path(store_id), types.Store,
                         fields=fields, exclude_fields=exclude_fields)

    def update_store(self, store_id: str, store: types.UpdateStore) -> types.Store:
        return self.client.patch(store_path(store_id), body=store, response_type=types.Store)

    def delete_store(self, store_id: str):
        """Deletes the store, with all of its customers, orders and products."""
        self.client.delete(store_path(store_id))

    #### Customers

    def list_customers(self, store_id: str, *, fields=(), exclude_fields=(), count=0, offset=0,
                       email_address: str = '') -> types.Customers:
        return self._get(store_path(store_id, 'customers'), types.Customers,
                         fields=fields, exclude_fields=exclude_fields, count=count,
                         offset=offset, email_address=email_address)

    def create_customer(self, store_id: str, customer: types.CreateCustomer) -> types.Customer:
        return self.client.post(store_path(store_id, 'customers'),
                                body=customer, response_type=types.Customer)

    def get_customer(self, store_id: str, customer_id: str, *, fields=(),
                     exclude_fields=()) -> types.Customer:
        return self._get(store_path(store_id, 'customers', customer_id),
                         types.Customer, fields=fields, exclude_fields=exclude_fields)

    def set_customer(self, store_id: str, customer_id: str,
                     customer: types.CreateCustomer) -> types.Customer:
        """Add the customer, or update it if it exists."""
        return self.client.put(store_path(store_id, 'customers', customer_id),
                               body=customer, response_type=types.Customer)

    def update_customer(self, store_id: str, customer_id: str,
                        customer: types.UpdateCustomer) -> types.Customer:
        return self.client.patch(store_path(store_id, 'customers', customer_id),
                                 body=customer, response_type=types.Customer)

    def delete_customer(self, store_id: str, customer_id: str):
        self.client.delete(store_path(store_id, 'customers', customer_id))

    #### Carts

    def list_carts(self, store_id: str, *, fields=(), exclude_fields=(), count=0,
                   offset=0) -> types.Carts:
        return self._get(store_path(store_id, 'carts'), types.Carts,
                         fields=fields, exclude_fields=exclude_fields, count=count, offset=offset)

    def create_cart(self, store_id: str, cart: types.CreateCart) -> types.Cart:
        return self.client.post(store_path(store_id, 'carts'), body=cart, response_type=types.Cart)

    def get_cart(self, store_id: str, cart_id: str, *, fields=(), exclude_fields=()) -> types.Cart:
        return self._get(store_path(store_id, 'carts', cart_id), types.Cart,
                         fields=fields, exclude_fields=exclude_fields)

    def update_cart(self, store_id: str, cart_id: str, cart: types.UpdateCart) -> types.Cart:
        return self.client.patch(store_path(store_id, 'carts', cart_id),
                                 body=cart, response_type=types.Cart)

    def delete_cart(self, store_id: str, cart_id: str):
        self.client.delete(store_path(store_id, 'carts', cart_id))

    def list_cart_lines(self, store_id: str, cart_id: str, *, fields=(), exclude_fields=(),
                        count=0, offset=0) -> types.CartLines:
        return self._get(store_path(store_id, 'carts', cart_id, 'lines'), types.CartLines,
                         fields=fields, exclude_fields=exclude_fields, count=count, offset=offset)

    def add_cart_line(self, store_id: str, cart_id: str,
                      line: types.CreateCartLine) -> types.CartLine:
        return self.client.post(store_path(store_id, 'carts', cart_id, 'lines'),
                                body=line, response_type=types.CartLine)

    def get_cart_line(self, store_id: str, cart_id: str, line_id: str, *, fields=(),
                      exclude_fields=()) -> types.CartLine:
        return self._get(store_path(store_id, 'carts', cart_id, 'lines', line_id),
                         types.CartLine, fields=fields, exclude_fields=exclude_fields)

    def update_cart_line(self, store_id: str, cart_id: str, line_id: str,
                         line: types.UpdateCartLine) -> types.CartLine:
        return self.client.patch(store_path(store_id, 'carts', cart_id, 'lines', line_id),
                                 body=line, response_type=types.CartLine)

    def delete_cart_line(self, store_id: str, cart_id: str, line_id: str):
        self.client.delete(store_path(store_id, 'carts', cart_id, 'lines', line_id))

    #### Orders

    def list_orders(self, *, fields=(), exclude_fields=(), count=0, offset=0, campaign_id='',
                    outreach_id='', customer_id='', has_outreach: bool = False) -> types.Orders:
        """Orders across all stores of the account."""
        return self._get('/ecommerce/orders', types.Orders,
                         fields=fields, exclude_fields=exclude_fields, count=count, offset=offset,
                         campaign_id=campaign_id, outreach_id=outreach_id,
                         customer_id=customer_id, has_outreach=has_outreach)

    def list_store_orders(self, store_id: str, *, fields=(), exclude_fields=(), count=0, offset=0,
                          customer_id='', has_outreach: bool = False, campaign_id='',
                          outreach_id='') -> types.Orders:
        return self._get(store_path(store_id, 'orders'), types.Orders,
                         fields=fields, exclude_fields=exclude_fields, count=count, offset=offset,
                         customer_id=customer_id, has_outreach=has_outreach,
                         campaign_id=campaign_id, outreach_id=outreach_id)

    def create_order(self, store_id: str, order: types.CreateOrder) -> types.Order:
        return self.client.post(store_path(store_id, 'orders'), body=order,
                                response_type=types.Order)

    def get_order(self, store_id: str, order_id: str, *, fields=(), exclude_fields=()) -> types.Order:
        return self._get(store_path(store_id, 'orders', order_id), types.Order,
                         fields=fields, exclude_fields=exclude_fields)

    def update_order(self, store_id: str, order_id: str, order: types.UpdateOrder) -> types.Order:
        return self.client.patch(store_path(store_id, 'orders', order_id),
                                 body=order, response_type=types.Order)

    def delete_order(self, store_id: str, order_id: str):
        self.client.delete(store_path(store_id, 'orders', order_id))

    def list_order_lines(self, store_id: str, order_id: str, *, fields=(), exclude_fields=(),
                         count=0, offset=0) -> types.OrderLines:
        return self._get(store_path(store_id, 'orders', order_id, 'lines'), types.OrderLines,
                         fields=fields, exclude_fields=exclude_fields, count=count, offset=offset)

    def add_order_line(self, store_id: str, order_id: str,
                       line: types.CreateOrderLine) -> types.OrderLine:
        return self.client.post(store_path(store_id, 'orders', order_id, 'lines'),
                                body=line, response_type=types.OrderLine)

    def get_order_line(self, store_id: str, order_id: str, line_id: str, *, fields=(),
                       exclude_fields=()) -> types.OrderLine:
        return self._get(store_path(store_id, 'orders', order_id, 'lines', line_id),
                         types.OrderLine, fields=fields, exclude_fields=exclude_fields)

    def update_order_line(self, store_id: str, order_id: str, line_id: str,
                          line: types.UpdateOrderLine) -> types.OrderLine:
        return self.client.patch(store_path(store_id, 'orders', order_id, 'lines', line_id),
                                 body=line, response_type=types.OrderLine)

    def delete_order_line(self, store_id: str, order_id: str, line_id: str):
        self.client.delete(store_path(store_id, 'orders', order_id, 'lines', line_id))

    #### Products

    def list_products(self, store_id: str, *, fields=(), exclude_fields=(), count=0,
                      offset=0) -> types.Products:
        return self._get(store_path(store_id, 'products'), types.Products,
                         fields=fields, exclude_fields=exclude_fields, count=count, offset=offset)

    def create_product(self, store_id: str, product: types.CreateProduct) -> types.Product:
        return self.client.post(store_path(store_id, 'products'), body=product,
                                response_type=types.Product)

    def get_product(self, store_id: str, product_id: str, *, fields=(),
                    exclude_fields=()) -> types.Product:
        return self._get(store_path(store_id, 'products', product_id),
                         types.Product, fields=fields, exclude_fields=exclude_fields)

    def update_product(self, store_id: str, product_id: str,
                       product: types.UpdateProduct) -> types.Product:
        return self.client.patch(store_path(store_id, 'products', product_id),
                                 body=product, response_type=types.Product)

    def delete_product(self, store_id: str, product_id: str):
        self.client.delete(store_path(store_id, 'products', product_id))

    def list_product_variants(self, store_id: str, product_id: str, *, fields=(),
                              exclude_fields=(), count=0, offset=0) -> types.ProductVariants:
        return self._get(store_path(store_id, 'products', product_id, 'variants'),
                         types.ProductVariants, fields=fields, exclude_fields=exclude_fields,
                         count=count, offset=offset)

    def add_product_variant(self, store_id: str, product_id: str,
                            variant: types.CreateProductVariant) -> types.ProductVariant:
        return self.client.post(store_path(store_id, 'products', product_id, 'variants'),
                                body=variant, response_type=types.ProductVariant)

    def get_product_variant(self, store_id: str, product_id: str, variant_id: str, *,
                            fields=(), exclude_fields=()) -> types.ProductVariant:
        return self._get(store_path(store_id, 'products', product_id, 'variants', variant_id),
                         types.ProductVariant, fields=fields, exclude_fields=exclude_fields)

    def set_product_variant(self, store_id: str, product_id: str, variant_id: str,
                            variant: types.CreateProductVariant) -> types.ProductVariant:
        """Add the variant, or replace it if it exists."""
        return self.client.put(store_path(store_id, 'products', product_id, 'variants', variant_id),
                               body=variant, response_type=types.ProductVariant)

    def update_product_variant(self, store_id: str, product_id: str, variant_id: str,
                               variant: types.UpdateProductVariant) -> types.ProductVariant:
        return self.client.patch(
            store_path(store_id, 'products', product_id, 'variants', variant_id),
            body=variant, response_type=types.ProductVariant)

    def delete_product_variant(self, store_id: str, product_id: str, variant_id: str):
        self.client.delete(store_path(store_id, 'products', product_id, 'variants', variant_id))

    def list_product_images(self, store_id: str, product_id: str, *, fields=(),
                            exclude_fields=(), count=0, offset=0) -> types.ProductImages:
        return self._get(store_path(store_id, 'products', product_id, 'images'),
                         types.ProductImages, fields=fields, exclude_fields=exclude_fields,
                         count=count, offset=offset)

    def add_product_image(self, store_id: str, product_id: str,
                          image: types.CreateProductImage) -> types.ProductImage:
        return self.client.post(store_path(store_id, 'products', product_id, 'images'),
                                body=image, response_type=types.ProductImage)

    def get_product_image(self, store_id: str, product_id: str, image_id: str, *,
                          fields=(), exclude_fields=()) -> types.ProductImage:
        return self._get(store_path(store_id, 'products', product_id, 'images', image_id),
                         types.ProductImage, fields=fields, exclude_fields=exclude_fields)

    def update_product_image(self, store_id: str, product_id: str, image_id: str,
                             image: types.UpdateProductImage) -> types.ProductImage:
        return self.client.patch(store_path(store_id, 'products', product_id, 'images', image_id),
                                 body=image, response_type=types.ProductImage)

    def delete_product_image(self, store_id: str, product_id: str, image_id: str):
        self.client.delete(store_path(store_id, 'products', product_id, 'images', image_id))

    #### Promo rules

    def list_promo_rules(self, store_id: str, *, fields=(), exclude_fields=(), count=0,
                         offset=0) -> types.PromoRules:
        return self._get(store_path(store_id, 'promo-rules'), types.PromoRules,
                         fields=fields, exclude_fields=exclude_fields, count=count, offset=offset)

    def create_promo_rule(self, store_id: str, rule: types.CreatePromoRule) -> types.PromoRule:
        return self.client.post(store_path(store_id, 'promo-rules'), body=rule,
                                response_type=types.PromoRule)

    def get_promo_rule(self, store_id: str, promo_rule_id: str, *, fields=(),
                       exclude_fields=()) -> types.PromoRule:
        return self._get(store_path(store_id, 'promo-rules', promo_rule_id), types.PromoRule,
                         fields=fields, exclude_fields=exclude_fields)

    def update_promo_rule(self, store_id: str, promo_rule_id: str,
                          rule: types.UpdatePromoRule) -> types.PromoRule:
        return self.client.patch(store_path(store_id, 'promo-rules', promo_rule_id),
                                 body=rule, response_type=types.PromoRule)

    def delete_promo_rule(self, store_id: str, promo_rule_id: str):
        """Deletes the rule with all of its promo codes."""
        self.client.delete(store_path(store_id, 'promo-rules', promo_rule_id))

    def list_promo_codes(self, store_id: str, promo_rule_id: str, *, fields=(),
                         exclude_fields=(), count=0, offset=0) -> types.PromoCodes:
        return self._get(store_path(store_id, 'promo-rules', promo_rule_id, 'promo-codes'),
                         types.PromoCodes, fields=fields, exclude_fields=exclude_fields,
                         count=count, offset=offset)

    def create_promo_code(self, store_id: str, promo_rule_id: str,
                          code: types.CreatePromoCode) -> types.PromoCode:
        return self.client.post(store_path(store_id, 'promo-rules', promo_rule_id, 'promo-codes'),
                                body=code, response_type=types.PromoCode)

    def get_promo_code(self, store_id: str, promo_rule_id: str, promo_code_id: str, *,
                       fields=(), exclude_fields=()) -> types.PromoCode:
        return self._get(
            store_path(store_id, 'promo-rules', promo_rule_id, 'promo-codes', promo_code_id),
            types.PromoCode, fields=fields, exclude_fields=exclude_fields)

    def update_promo_code(self, store_id: str, promo_rule_id: str, promo_code_id: str,
                          code: types.UpdatePromoCode) -> types.PromoCode:
        return self.client.patch(
            store_path(store_id, 'promo-rules', promo_rule_id, 'promo-codes', promo_code_id),
            body=code, response_type=types.PromoCode)

    def delete_promo_code(self, store_id: str, promo_rule_id: str, promo_code_id: str):
        self.client.delete(
            store_path(store_id, 'promo-rules', promo_rule_id, 'promo-codes', promo_code_id))
