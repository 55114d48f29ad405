"""
Faculty Directory Scraper.

Extracts faculty records (name, title, email, phone, profile link) from
university department directory pages whose layouts vary by institution.
"""
