from balance_hook.models.balance import BALANCE_FIELD, BALANCE_ID, BalanceRecord

__all__ = [
    "BALANCE_FIELD",
    "BALANCE_ID",
    "BalanceRecord",
]
