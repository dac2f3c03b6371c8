from __future__ import annotations

# Canonical order attributes shared by every reference layout.
ORDER_FIELDS = [
    "order_id",
    "customer_name",
    "order_total",
    "quantity",
    "order_date",
    "status",
    "is_gift",
    "region",
]

# Each layout renames the canonical fields the way a different source system would.
ORDER_LAYOUTS: dict[str, dict[str, str]] = {
    "crm_orders": {
        "order_id": "order_id",
        "customer_name": "customer_name",
        "order_total": "order_total",
        "quantity": "qty",
        "order_date": "order_date",
        "status": "status",
        "is_gift": "is_gift",
        "region": "region",
    },
    "web_orders": {
        "order_id": "orderId",
        "customer_name": "CustomerName",
        "order_total": "OrderTotal",
        "quantity": "quantity",
        "order_date": "OrderDate",
        "status": "order_status",
        "is_gift": "gift",
        "region": "sales_region",
    },
    "erp_export": {
        "order_id": "ORDER_ID",
        "customer_name": "CUSTOMER",
        "order_total": "ORDER_TOTAL_AMT",
        "quantity": "QUANTITY",
        "order_date": "ORDER_DT",
        "status": "STATUS_CODE",
        "is_gift": "GIFT_FLAG",
        "region": "REGION_NAME",
    },
}

# Columns only one system carries; these should stay unmatched.
ORDER_EXTRA_COLUMNS: dict[str, list[str]] = {
    "crm_orders": ["loyalty_points"],
    "web_orders": ["browser"],
    "erp_export": ["WAREHOUSE_BIN"],
}
