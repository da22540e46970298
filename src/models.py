from dataclasses import dataclass, field, asdict
from typing import Any, Dict

@dataclass(frozen=True)
class Money:
    bs: float = 0.0
    usd: float = 0.0

    @classmethod
    def zero(cls) -> "Money":
        return cls(0.0, 0.0)

@dataclass(frozen=True)
class ReconciliationInput:
    """
    Snapshot of one accounting period (a day or a week) for one agency.
    All totals are pre-aggregated, non-negative sums; mobile_payments_paid is
    a positive magnitude.
    """
    exchange_rate: float
    total_sales: Money = field(default_factory=Money.zero)
    total_prizes: Money = field(default_factory=Money.zero)
    total_expenses: Money = field(default_factory=Money.zero)
    total_debts: Money = field(default_factory=Money.zero)
    mobile_payments_received: float = 0.0
    mobile_payments_paid: float = 0.0
    total_point_of_sale: float = 0.0
    cash_available: Money = field(default_factory=Money.zero)
    pending_prizes: Money = field(default_factory=Money.zero)
    additional_amount: Money = field(default_factory=Money.zero)
    apply_excess_usd: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

@dataclass(frozen=True)
class ReconciliationResult:
    net_sales_prizes: Money
    bank_total: float
    usd_counted_total: float
    usd_discrepancy: float
    usd_surplus: float
    usd_surplus_in_bs: float
    bs_counted_total: float
    pre_adjustment_discrepancy: float
    final_discrepancy: float
    is_balanced: bool
    tolerance: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
