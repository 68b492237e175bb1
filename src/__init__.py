"""Adjusted Markowitz objective: VaR + penalty terms behind a market-data consistency gate."""
