from dataclasses import fields

from errors import InvalidExchangeRate, InvalidTolerance, MalformedAmount
from models import Money, ReconciliationInput, ReconciliationResult
from precision import (
    is_finite,
    precise_abs,
    precise_add,
    precise_multiply,
    precise_round,
    precise_subtract,
)

DEFAULT_TOLERANCE = 100.0  # Bs

def _validate(data: ReconciliationInput, tolerance: float) -> None:
    for f in fields(data):
        value = getattr(data, f.name)
        if isinstance(value, Money):
            for currency in ("bs", "usd"):
                amount = getattr(value, currency)
                if not is_finite(amount):
                    raise MalformedAmount(f"{f.name}.{currency}", amount)
        elif f.name == "exchange_rate":
            if not is_finite(value) or value <= 0:
                raise InvalidExchangeRate(value)
        elif f.name != "apply_excess_usd" and not is_finite(value):
            raise MalformedAmount(f.name, value)

    if not is_finite(tolerance) or tolerance < 0:
        raise InvalidTolerance(tolerance)

def compute(data: ReconciliationInput, tolerance: float = DEFAULT_TOLERANCE) -> ReconciliationResult:
    """
    Reconciles the expected cash position of a period against the counted cash.

    Raises InvalidExchangeRate for a non-positive rate and MalformedAmount for
    NaN/Infinity; otherwise total and side-effect free.
    """
    _validate(data, tolerance)

    sales, prizes = data.total_sales, data.total_prizes
    expenses, debts = data.total_expenses, data.total_debts
    cash, pending, additional = data.cash_available, data.pending_prizes, data.additional_amount

    # 1. expected position per the ledger
    net = Money(
        bs=precise_subtract(sales.bs, prizes.bs),
        usd=precise_subtract(sales.usd, prizes.usd),
    )

    # 2. non-cash inflows
    bank_total = precise_subtract(
        precise_add(data.mobile_payments_received, data.total_point_of_sale),
        data.mobile_payments_paid,
    )

    # 3. USD side; only a surplus may cross over to Bs
    usd_counted_total = precise_add(cash.usd, debts.usd, expenses.usd)
    usd_discrepancy = precise_subtract(usd_counted_total, net.usd, additional.usd, pending.usd)
    usd_surplus = max(usd_discrepancy, 0.0)
    usd_surplus_in_bs = precise_multiply(usd_surplus, data.exchange_rate) if data.apply_excess_usd else 0.0

    # 4. Bs side
    bs_counted_total = precise_subtract(
        precise_add(cash.bs, bank_total, debts.bs, expenses.bs, usd_surplus_in_bs),
        additional.bs,
    )
    pre_adjustment = precise_subtract(bs_counted_total, net.bs)

    # 5. pending prizes
    final = precise_subtract(pre_adjustment, pending.bs)

    return ReconciliationResult(
        net_sales_prizes=net,
        bank_total=bank_total,
        usd_counted_total=usd_counted_total,
        usd_discrepancy=usd_discrepancy,
        usd_surplus=usd_surplus,
        usd_surplus_in_bs=usd_surplus_in_bs,
        bs_counted_total=bs_counted_total,
        pre_adjustment_discrepancy=pre_adjustment,
        final_discrepancy=final,
        is_balanced=precise_abs(final) <= precise_round(tolerance),
        tolerance=float(tolerance),
    )
