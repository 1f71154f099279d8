from splitshare.handlers.basic import basic_router
from splitshare.handlers.ledger import ledger_router

__all__ = ["basic_router", "ledger_router"]
