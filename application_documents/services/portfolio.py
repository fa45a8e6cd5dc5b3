from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from application_documents.schemas.application import Fund, Product


@dataclass(frozen=True)
class PortfolioSummary:
    funds: tuple[Fund, ...]
    total_amount: Decimal


def _as_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def flatten_funds(products: Iterable[Product]) -> tuple[Fund, ...]:
    return tuple(fund for product in products for fund in product.funds)


def net_fund_amount(fund: Fund, tax_rate: Decimal) -> Decimal:
    return (_as_decimal(fund.amount) - _as_decimal(fund.fees)) * _as_decimal(tax_rate)


def summarize_portfolio(products: Iterable[Product], tax_rate: Decimal) -> PortfolioSummary:
    funds = flatten_funds(products)
    # Taxed per fund, then summed.
    total = sum((net_fund_amount(fund, tax_rate) for fund in funds), Decimal("0"))
    return PortfolioSummary(funds=funds, total_amount=total)
