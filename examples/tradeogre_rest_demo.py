"""
TradeOgre REST API Demo

Exercises the public market data endpoints and, when credentials are
configured, the read-only private endpoints (orders and balances).

Usage:
    python examples/tradeogre_rest_demo.py XMR-BTC
    TRADEOGRE_API_KEY=... TRADEOGRE_API_SECRET=... python examples/tradeogre_rest_demo.py XMR-BTC
"""

import asyncio
import logging
import sys

from tradeogre import TradeOgreError, client_from_config, load_config


async def check_public(client, market: str):
    print("=== MARKETS ===")
    markets = await client.list_markets()
    print(f"Total markets: {len(markets)}")
    for entry in markets[:3]:
        for symbol, summary in entry.items():
            print(f"  {symbol}: price={summary.price} bid={summary.bid} ask={summary.ask}")

    print(f"\n=== {market} TICKER ===")
    ticker = await client.get_ticker(market)
    print(f"  price={ticker.price} high={ticker.high} low={ticker.low} volume={ticker.volume}")

    print(f"\n=== {market} ORDER BOOK ===")
    book = await client.get_order_book(market)
    print(f"  {len(book.buy)} bids, {len(book.sell)} asks")

    print(f"\n=== {market} TRADE HISTORY ===")
    trades = await client.get_trade_history(market)
    for trade in trades[:5]:
        print(f"  {trade.timestamp} {trade.direction.value:<4} {trade.quantity} @ {trade.price}")


async def check_private(private, market: str):
    print("\n=== BALANCES ===")
    table = await private.get_balances()
    if not table.success:
        print(f"  Error: {table.error}")
        return
    for asset, amount in table.balances.items():
        if amount.strip("0.") != "":
            print(f"  {asset}: {amount}")

    print(f"\n=== {market} OPEN ORDERS ===")
    for order in await private.get_orders(market):
        print(f"  {order.uuid} {order.direction.value} {order.quantity} @ {order.price}")


async def main():
    market = sys.argv[1] if len(sys.argv) > 1 else "XMR-BTC"
    config = load_config()

    async with client_from_config(config) as client:
        try:
            await check_public(client, market)

            if config.credentials.has_private_api:
                private = client.as_authenticated(config.credentials.api_key, config.credentials.secret_key)
                await check_private(private, market)
            else:
                print("\nNo credentials configured, skipping private endpoints")
        except TradeOgreError as e:
            print(f"Error: {e}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
