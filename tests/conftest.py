"""Configuração do pytest para o serviço de normalização de chargebacks."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from chargebacks.expressions import ExpressionEvaluator  # noqa: E402
from chargebacks.pipeline import ChargebackPipeline  # noqa: E402
from chargebacks.registry import load_registry  # noqa: E402
from chargebacks.validation import SchemaValidator  # noqa: E402


@pytest.fixture
def stripe_dispute_payload() -> dict:
    """Evento charge.dispute.created da Stripe (cenário de referência)."""
    return {
        "id": "evt_123",
        "type": "charge.dispute.created",
        "data": {
            "object": {
                "id": "dp_12345",
                "amount": 2599,
                "currency": "usd",
                "reason": "fraudulent",
                "charge": "ch_98765",
            }
        },
    }


@pytest.fixture
def expected_stripe_record() -> dict:
    return {
        "transaction_id": "ch_98765",
        "reason": "fraudulent",
        "currency": "USD",
        "amount": 25.99,
        "provider": "stripe",
    }


@pytest.fixture
def pipeline() -> ChargebackPipeline:
    """Pipeline com os mapeamentos distribuídos no pacote."""
    return ChargebackPipeline(
        registry=load_registry(),
        evaluator=ExpressionEvaluator(timeout_seconds=1.0),
        validator=SchemaValidator(),
    )
