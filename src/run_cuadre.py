from closure import load_closure
from config import CuadreConfig
from cuadre import compute
from ingest import load_csv
from mapping import apply_mapping, load_column_map
from aggregate import (
    aggregate_period,
    build_input,
    filter_exceptions,
    filter_period,
    summarize_by_day,
    summarize_by_system,
)
from report import verdict, write_outputs
from rules import load_rules
from standardize import standardize
from utils import format_bs, format_usd
import os

def main() -> None:
    cfg = CuadreConfig()
    rules = load_rules(cfg.rules_path)
    closure = load_closure(cfg.closure_path)
    column_map = load_column_map(cfg.column_map_path)

    raw = load_csv(cfg.transactions_path)
    mapped = apply_mapping(raw, cfg.transactions_source, column_map)
    transactions, rejected = standardize(mapped, rules)

    period = filter_period(transactions, closure.date_from, closure.date_to, closure.agency)
    exceptions = filter_exceptions(rejected, closure.date_from, closure.date_to, closure.agency)
    totals = aggregate_period(period, weekly=closure.is_weekly)
    data = build_input(totals, closure)

    result = compute(data, tolerance=rules.tolerance)
    daily = summarize_by_day(period)
    systems = summarize_by_system(period)

    write_outputs(cfg.outputs_dir, closure, data, result, daily, systems, exceptions)

    print(f"Wrote outputs to {cfg.outputs_dir}/ ({os.path.join(cfg.outputs_dir, 'cuadre_result.json')})")
    print(f"Agency: {closure.agency or 'all'} | Period: {closure.date_from} -> {closure.date_to} | "
          f"Rows: {totals.rows} | Exceptions: {len(exceptions)} (export: {len(rejected)})")
    print(f"Cuadre {'semanal' if closure.is_weekly else 'diario'} | Sistemas: {len(systems)}")
    print(f"Ventas - Premios: {format_bs(result.net_sales_prizes.bs)} | {format_usd(result.net_sales_prizes.usd)}")
    print(f"Total banco: {format_bs(result.bank_total)}")
    print(f"Diferencia USD: {format_usd(result.usd_discrepancy)} | "
          f"Excedente en Bs: {format_bs(result.usd_surplus_in_bs)}")
    print(f"Sumatoria Bs: {format_bs(result.bs_counted_total)} | "
          f"Diferencia cierre: {format_bs(result.pre_adjustment_discrepancy)}")
    print(f"Diferencia final: {format_bs(result.final_discrepancy)} -> {verdict(result)} "
          f"(tolerancia {format_bs(result.tolerance)})")

if __name__ == "__main__":
    main()
