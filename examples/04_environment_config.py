"""
Environment Configuration Examples.

Loads the client from SWAPPED_* variables and .env files.
"""

import os

from swapped_commerce import SwappedClient, SwappedSettings, load_from_env


def example_1_load_from_dotenv():
    """Example 1: Load from .env."""
    print("\n" + "="*60)
    print("EXAMPLE 1: Load from .env")
    print("="*60 + "\n")

    with open('.env', 'w') as f:
        f.write("SWAPPED_API_KEY=sk_test_1234567890\n")
        f.write("SWAPPED_ENVIRONMENT=sandbox\n")
        f.write("SWAPPED_LOG_ENABLED=true\n")
        f.write("SWAPPED_LOG_FORMAT=json\n")

    try:
        config = load_from_env()
        print(f"Loaded: {config!r}")
        print(f"Logging: {config.logging}")
    finally:
        os.remove('.env')


def example_2_overrides():
    """Example 2: Explicit overrides beat the environment."""
    print("\n" + "="*60)
    print("EXAMPLE 2: Overrides")
    print("="*60 + "\n")

    os.environ["SWAPPED_API_KEY"] = "sk_test_1234567890"
    config = load_from_env(max_retries=0, timeout_ms=5000)
    print(f"max_retries={config.max_retries}, timeout_ms={config.timeout_ms}")


def example_3_client_from_env():
    """Example 3: Client straight from the environment."""
    print("\n" + "="*60)
    print("EXAMPLE 3: SwappedClient.from_env()")
    print("="*60 + "\n")

    with SwappedClient.from_env() as client:
        print(client)

    secret = SwappedSettings().get_webhook_secret()
    print(f"Webhook secret configured: {secret is not None}")


if __name__ == "__main__":
    example_1_load_from_dotenv()
    example_2_overrides()
    example_3_client_from_env()
