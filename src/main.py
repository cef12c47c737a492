"""
Console walk-through of the pattern examples.

- Shared connection registry: three acquisitions share one connection,
  and a release is observed by every holder.
- Payment method factory: a UPI and a credit-card payment are created and
  processed for the same order.

Usage:
    python -m src.main
"""

import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, List

# Add project root to Python path for direct execution
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

from src.connection import (
    ConnectionRegistry,
    get_connection_config,
    get_connection_registry,
)
from src.payments import PaymentMethodFactory, PaymentMethodType, ProcessingResult

logger = logging.getLogger(__name__)

DEMO_ORDER: Dict[str, Any] = {
    "name": "Earphones ZC01",
    "category": "electronics",
    "subCategory": "Wearable Audio Device",
}
DEMO_AMOUNT = 100


def configure_logging() -> str:
    """Configure root logging from LOG_LEVEL and return the level name."""
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    return log_level


def run_connection_demo(registry: ConnectionRegistry) -> Dict[str, Any]:
    """Acquire the shared connection three times, then release it."""
    url = get_connection_config().database_url
    logger.info("Acquiring the shared connection 3 times")

    first = registry.acquire(url)
    second = registry.acquire(url)
    third = registry.acquire(url)

    same_instance = first is second is third
    logger.info(f"Live connection: {registry.current()}")
    logger.info(f"All acquisitions share one instance: {same_instance}")

    registry.release()
    logger.info(f"Live connection after release: {registry.current()}")

    return {
        "url": first.url,
        "same_instance": same_instance,
        "released": registry.current() is None,
    }


def run_payment_demo() -> List[ProcessingResult]:
    """Create and process one UPI and one credit-card payment."""
    upi = PaymentMethodFactory.create(PaymentMethodType.UPI, DEMO_AMOUNT, DEMO_ORDER)
    card = PaymentMethodFactory.create(
        PaymentMethodType.CREDIT_CARD, DEMO_AMOUNT, DEMO_ORDER
    )
    return [
        upi.process("upiId@kotak"),
        card.process("22333113023"),
    ]


def main() -> int:
    load_dotenv()
    configure_logging()

    registry = get_connection_registry()
    run_connection_demo(registry)

    for result in run_payment_demo():
        logger.info(f"{result.method_type.value}: success={result.success}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
