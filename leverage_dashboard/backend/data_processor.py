"""
Data processing and calculation functions for the Futures Leverage Dashboard
Fetches account, balance, positions and quotes, and derives notional value and leverage.
"""

from typing import Callable, Dict, Iterable, List, Optional

from ..logging_setup import get_logger
from . import models
from .api_client import TastytradeClient
from .errors import (
    AccountsFetchFailed,
    ApiRequestError,
    BalanceFetchFailed,
    MetricsFetchFailed,
    NoPrimaryAccount,
    PositionsFetchFailed,
)

logger = get_logger(__name__)


def select_primary_account(account_items: Iterable[Dict]) -> models.Account:
    """First owner account; other entries are never parsed."""
    for item in account_items:
        if models.Account.is_owner_item(item):
            return models.Account.from_api(item)
    raise NoPrimaryAccount()


def filter_futures(position_items: Iterable[Dict]) -> List[models.Position]:
    """Parse the futures rows only; equities, options and crypto are skipped unread."""
    return [models.Position.from_api(item) for item in position_items if models.Position.is_future_item(item)]


def futures_symbols(positions: Iterable[models.Position]) -> List[str]:
    symbols: List[str] = []
    for p in positions:
        if p.symbol not in symbols:
            symbols.append(p.symbol)
    return symbols


def compute_exposures(
    positions: Iterable[models.Position], quotes: Iterable[models.Quote]
) -> List[models.PositionExposure]:
    """Notional exposure per position; positions without a priced quote are left out."""
    by_symbol: Dict[str, models.Quote] = {}
    for quote in quotes:
        by_symbol.setdefault(quote.symbol, quote)

    exposures = []
    for position in positions:
        quote = by_symbol.get(position.symbol)
        if quote is None or quote.last_trade_price is None:
            logger.debug(f"No quote for {position.symbol}, excluded from notional")
            continue
        price = quote.last_trade_price
        exposures.append(models.PositionExposure(
            symbol=position.symbol,
            quantity=position.quantity,
            multiplier=position.multiplier,
            price=price,
            notional=price * position.multiplier * position.abs_quantity,
        ))
    return exposures


def compute_notional(exposures: Iterable[models.PositionExposure]) -> float:
    return float(sum(e.notional for e in exposures))


def compute_leverage(notional_value: float, nlv: float) -> float:
    return notional_value / nlv if nlv > 0 else 0.0


def fetch_dashboard(
    client: TastytradeClient,
    session_token: str,
    on_nlv: Optional[Callable[[float], None]] = None,
) -> models.DashboardData:
    """
    Run the four dependent API steps and derive the dashboard figures.

    Steps run strictly in order and the first failure aborts the rest.
    ``on_nlv`` is called as soon as the balance is known.
    """
    # 1. accounts
    logger.info("Fetching accounts")
    try:
        account_items = client.get_accounts(session_token)
    except ApiRequestError as exc:
        raise AccountsFetchFailed() from exc
    account = select_primary_account(account_items)
    account_number = account.account_number

    # 2. balance
    logger.info("Fetching balance")
    try:
        balance_data = client.get_balances(session_token, account_number)
    except ApiRequestError as exc:
        raise BalanceFetchFailed() from exc
    nlv = models.Balance.from_api(balance_data).net_liquidating_value
    if on_nlv is not None:
        on_nlv(nlv)

    # 3. positions
    logger.info("Fetching positions")
    try:
        position_items = client.get_positions(session_token, account_number)
    except ApiRequestError as exc:
        raise PositionsFetchFailed() from exc
    futures = filter_futures(position_items)
    symbols = futures_symbols(futures)

    # 4. quotes, only when there is something to price
    exposures: List[models.PositionExposure] = []
    if symbols:
        logger.info(f"Fetching market metrics for {len(symbols)} futures symbols")
        try:
            quote_items = client.get_market_metrics(session_token, symbols)
        except ApiRequestError as exc:
            raise MetricsFetchFailed() from exc
        quotes = [models.Quote.from_api(item) for item in quote_items]
        exposures = compute_exposures(futures, quotes)
    else:
        logger.info("No futures positions, skipping market metrics")

    notional_value = compute_notional(exposures)
    leverage = compute_leverage(notional_value, nlv)
    logger.info(f"Computed leverage {leverage:.2f}x over {len(exposures)} priced futures positions")
    return models.DashboardData(
        account_number=account_number,
        nlv=nlv,
        notional_value=notional_value,
        leverage=leverage,
        exposures=exposures,
    )
