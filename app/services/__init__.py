"""Services for quote generation system.

QuotePipeline is imported from app.services.orchestrator directly,
since it pulls in the processing layers.
"""

from .gateway_client import AIGatewayClient, get_gateway_client
from .draft_store import DraftStore, get_draft_store

__all__ = [
    "AIGatewayClient",
    "get_gateway_client",
    "DraftStore",
    "get_draft_store",
]
