# services package: HTTP client for a running poker hand server
