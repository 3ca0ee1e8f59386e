"""
Usage Examples for SadadPay SDK
Demonstrates configuration, invoicing, refunds and currency conversion
"""

from sadad_pay import (
    ConfigLoader,
    ConfigValidator,
    CurrencyNotFoundError,
    GatewayError,
    SadadClient,
    SadadConfig,
    SadadError,
    SadadErrorCategory,
    get_kwd_amount,
    validate_phone,
)


# =============================================================================
# Example 1: Programmatic Configuration
# =============================================================================

def programmatic_config_example() -> SadadConfig:
    """Configure the SDK programmatically"""
    loader = ConfigLoader()

    return loader.load(
        env=False,
        config={
            # Required credentials from the SadadPay merchant panel
            "client_id": "your-client-id",
            "client_secret": "your-client-secret",

            # Required: there is no default mode
            "sandbox_mode": True,

            # Optional audit log of every invoice and refund exchange
            "log_path": "./logs/sadad.log",
        },
    )


# =============================================================================
# Example 2: Environment Variables Configuration
# =============================================================================

def env_config_example() -> SadadConfig:
    """
    Load configuration from environment variables

    export SADAD_CLIENT_ID="your-client-id"
    export SADAD_CLIENT_SECRET="your-client-secret"
    export SADAD_SANDBOX_MODE="true"
    export SADAD_LOG_PATH="./logs/sadad.log"
    """
    return ConfigLoader().load(env=True)


# =============================================================================
# Example 3: Configuration Validation
# =============================================================================

def validation_example() -> None:
    """Validate configuration before use"""
    result = ConfigValidator().validate({"client_id": "your-client-id"})

    if not result.valid:
        print("Configuration validation failed:")
        for error in result.errors:
            print(f"  - {error.field}: {error.message}")


# =============================================================================
# Example 4: Checkout
# =============================================================================

def checkout_example(config: SadadConfig) -> None:
    """Convert an order total to KWD, create an invoice and print its URL"""
    with SadadClient(config) as client:
        try:
            amount = client.convert_amount("USD", 49.99)
        except CurrencyNotFoundError as e:
            print(f"Cannot charge in {e.currency}")
            return

        refresh_token = client.acquire_refresh_token()
        invoice = client.create_invoice(
            {
                "Invoices": [{
                    "ref_Number": "ORD-1001",
                    "amount": amount,
                    "customer_Name": "Ali",
                    "customer_Mobile": validate_phone("00965 ٥٥٥١٢٣٤٥"),
                }],
            },
            refresh_token,
        )
        print(f"Invoice {invoice.invoice_id}: {invoice.invoice_url}")


# =============================================================================
# Example 5: Refund with error handling
# =============================================================================

def refund_example(config: SadadConfig, invoice_id: int) -> None:
    with SadadClient(config) as client:
        try:
            refund = client.refund_invoice(
                {"invoiceId": invoice_id, "refundAmount": 5},
                client.acquire_refresh_token(),
            )
        except GatewayError as e:
            print(f"Gateway refused the refund: {e.error_key}")
        except SadadError as e:
            if e.is_category(SadadErrorCategory.NETWORK):
                print("Network problem, try again later")
            else:
                print(e.get_description())
        else:
            print(f"Refund {refund.refund_id} queued")


# =============================================================================
# Run Examples
# =============================================================================

if __name__ == "__main__":
    print("=== SadadPay Examples ===\n")

    print("1. Configuration Validation:")
    validation_example()
    print()

    print("2. Phone normalization:")
    print(f"  {validate_phone('00 965 ١٢٣٤٥٦٧')}")
    print()

    print("3. Sandbox KWD conversion (needs network):")
    try:
        print(f"  10 USD = {get_kwd_amount('USD', 10, sandbox_mode=True)} KWD")
    except SadadError as e:
        print(f"  {e.get_description()}")
