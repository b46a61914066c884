from beanie import Document

BALANCE_ID = "balance"
# Field name shared with existing deployments: {_id: "balance", balance: <n>}
BALANCE_FIELD = "balance"


class BalanceRecord(Document):
    """Singleton counter of captured payments; only ever incremented."""
    id: str = BALANCE_ID
    balance: int = 0

    class Settings:
        name = "balances"
