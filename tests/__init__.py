# Tests package
"""
Test suite for the payment customization app.
- test_move_payment_function: checkout function decisions
- test_configuration: metafield configuration parsing
- test_payment_customization_api: admin backend create flow
- test_shopify_client: Admin API client error mapping
- test_products_api: sample product endpoints
- test_request_logging: request log masking
- test_app_setup: backend module import side effects
"""
