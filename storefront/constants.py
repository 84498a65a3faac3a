PRODUCTS_PATH = "/api/products"
ORDERS_PATH = "/api/orders"
SEED_PATH = "/api/seed-products"

# no customer login yet: every order goes out as the guest
GUEST_CUSTOMER = {
    "customer_name": "Guest",
    "customer_email": "guest@example.com",
    "customer_address": "India",
}

ORDER_STATUS_PENDING = "pending"

MSG_LOAD_FAILED = "Failed to load products"
MSG_ORDER_FAILED = "Order failed"
MSG_CART_EMPTY = "Cart is empty"
MSG_NO_PRODUCTS = "No products yet. Use Seed Products to add sample items."
